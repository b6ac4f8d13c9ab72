"""Tests for batch sentiment scoring and the run_sentiment script."""

from __future__ import annotations

import json
import math
from pathlib import Path

import pandas as pd
import pytest
import yaml

from scripts.run_sentiment import build_store, ensure_demo_data, main
from sentilex.lexicon.store import LexiconStore
from sentilex.sentiment.aggregate import add_sentiment, load_texts_csv, summarize


@pytest.fixture(autouse=True)
def _fresh_singleton():
    LexiconStore.reset_instance()
    LexiconStore.configure(None)
    yield
    LexiconStore.reset_instance()
    LexiconStore.configure(None)


def _cfg(tmp_path: Path) -> dict:
    return {
        "lexicon": {"path": None, "extra_words": {}},
        "sentiment": {
            "raw_path": str(tmp_path / "texts.csv"),
            "id_column": "id",
            "text_column": "text",
            "thresholds": {"negative": -1, "positive": 1},
            "output_dir": str(tmp_path / "reports"),
            "top_n": 5,
        },
    }


def _store() -> LexiconStore:
    return LexiconStore([("good", 3), ("bad", -3), ("great", 3), ("okay", 0)])


def test_load_texts_csv_drops_empty_rows(tmp_path: Path) -> None:
    path = tmp_path / "texts.csv"
    pd.DataFrame({"id": [1, 2, 3], "text": ["Good stuff", "   ", None]}).to_csv(path, index=False)

    df = load_texts_csv(path, text_col="text", id_col="id")

    assert list(df["id"]) == [1]
    with pytest.raises(ValueError):
        load_texts_csv(path, text_col="body")


def test_add_sentiment_columns(tmp_path: Path) -> None:
    cfg = _cfg(tmp_path)
    df = pd.DataFrame({"id": [1, 2, 3], "text": ["Good and great!", "bad, bad day", "!!!"]})

    scored = add_sentiment(df, cfg, store=_store())

    assert list(scored["sentiment"]) == [6, -6, 0]
    assert list(scored["sentiment_label"]) == ["positive", "negative", "neutral"]
    assert list(scored["matched_count"]) == [2, 2, 0]
    assert scored.loc[0, "positive_words"] == "good great"
    assert scored.loc[1, "negative_words"] == "bad bad"
    assert scored.loc[0, "avg_per_token"] == pytest.approx(2.0)
    assert math.isnan(scored.loc[2, "avg_per_matched_word"])
    assert "sentiment" not in df.columns


def test_summarize_counts_words(tmp_path: Path) -> None:
    cfg = _cfg(tmp_path)
    df = pd.DataFrame({"text": ["good good", "bad", "great good"]})

    summary = summarize(add_sentiment(df, cfg, store=_store()), top_n=2)

    assert summary["rows"] == 3
    assert summary["label_counts"] == {"positive": 2, "negative": 1}
    assert summary["top_positive"][0] == ("good", 3)
    assert summary["top_negative"] == [("bad", 1)]
    assert summarize(pd.DataFrame())["rows"] == 0


def test_build_store_injects_extra_words(tmp_path: Path) -> None:
    lexicon = tmp_path / "lex.txt"
    lexicon.write_text("good\t3\nbad\t-3\n", encoding="utf-8")
    cfg = {"lexicon": {"path": str(lexicon), "extra_words": {"stellar": 4, "good": -1}}}

    store = build_store(cfg)

    assert store.size() == 3
    assert store.lookup("stellar") == 4
    assert store.lookup("good") == 3


def test_demo_mode_outputs(tmp_path: Path) -> None:
    cfg = _cfg(tmp_path)
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(yaml.safe_dump(cfg), encoding="utf-8")

    main(["--config", str(cfg_path), "--demo"])

    raw_path = Path(cfg["sentiment"]["raw_path"])
    assert raw_path.exists()
    scored = pd.read_csv(tmp_path / "reports" / "sentiment_scored.csv")
    summary = json.loads((tmp_path / "reports" / "sentiment_summary.json").read_text(encoding="utf-8"))

    assert len(scored) == 5
    assert {"sentiment", "sentiment_label", "avg_per_token"}.issubset(scored.columns)
    assert summary["rows"] == 5
    assert summary["lexicon_size"] > 0
    assert summary["label_counts"]["negative"] >= 1


def test_single_text_mode(tmp_path: Path, capsys) -> None:
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(yaml.safe_dump(_cfg(tmp_path)), encoding="utf-8")

    main(["--config", str(cfg_path), "--text", "Great! great."])

    result = json.loads(capsys.readouterr().out)
    assert result["tokens"] == ["great", "great"]
    assert result["sentiment"] == 6
    assert result["sentiment_label"] == "positive"


def test_missing_raw_data_exits(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.yaml"
    cfg_path.write_text(yaml.safe_dump(_cfg(tmp_path)), encoding="utf-8")

    with pytest.raises(SystemExit):
        main(["--config", str(cfg_path)])


def test_ensure_demo_data_uses_configured_columns(tmp_path: Path) -> None:
    cfg = {"sentiment": {"id_column": "review_id", "text_column": "body"}}
    path = tmp_path / "nested" / "demo.csv"

    ensure_demo_data(path, cfg)

    df = pd.read_csv(path)
    assert list(df.columns) == ["review_id", "body"]
