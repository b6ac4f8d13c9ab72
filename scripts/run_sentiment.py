"""Run lexicon-based sentiment scoring on one text or a CSV of texts."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List

import pandas as pd
import yaml

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from sentilex.errors import InitializationError
from sentilex.lexicon.source import read_lexicon
from sentilex.lexicon.store import LexiconStore
from sentilex.sentiment.aggregate import add_sentiment, load_texts_csv, summarize
from sentilex.sentiment.scoring import score_text, sentiment_label


DEFAULT_CONFIG_PATH = Path("configs") / "config.yaml"


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run lexicon-based sentiment scoring.")
    parser.add_argument("--config", type=Path, default=DEFAULT_CONFIG_PATH, help="Path to config YAML.")
    parser.add_argument("--text", help="Score a single text and print the result as JSON.")
    parser.add_argument("--demo", action="store_true", help="Generate a tiny demo dataset if raw_path is missing.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ERROR).")
    return parser.parse_args(argv)


def load_config(cfg_path: Path) -> Dict[str, Any]:
    with cfg_path.open("r", encoding="utf-8") as handle:
        cfg = yaml.safe_load(handle) or {}
    if not isinstance(cfg, dict):
        raise ValueError("Configuration file must be a mapping.")
    return cfg


def _resolve(path_value: Any) -> Path:
    path = Path(path_value)
    return path if path.is_absolute() else PROJECT_ROOT / path


def build_store(cfg: Dict[str, Any]) -> LexiconStore:
    """Load the shared lexicon from config and inject any extra words."""
    lexicon_cfg = cfg.get("lexicon") or {}
    path_value = lexicon_cfg.get("path")
    if path_value:
        encoding = lexicon_cfg.get("encoding") or "utf-8-sig"
        LexiconStore.configure(read_lexicon(_resolve(path_value), encoding=encoding))
    store = LexiconStore.get_instance()

    extra_words = lexicon_cfg.get("extra_words") or {}
    if not isinstance(extra_words, dict):
        raise ValueError("lexicon.extra_words must be a mapping.")
    if extra_words:
        store.inject(extra_words)
    return store


def ensure_demo_data(path: Path, cfg: Dict[str, Any]) -> None:
    """Create a small demo dataset if requested."""
    sentiment_cfg = cfg.get("sentiment") or {}
    id_col = sentiment_cfg.get("id_column", "id")
    text_col = sentiment_cfg.get("text_column", "text")

    data = [
        {id_col: 1, text_col: "I love this, what a wonderful and helpful team!"},
        {id_col: 2, text_col: "Terrible support. The app is broken and slow."},
        {id_col: 3, text_col: "Delivery arrived on Tuesday."},
        {id_col: 4, text_col: "Good product, but the manual is boring."},
        {id_col: 5, text_col: "WORST. EXPERIENCE. EVER. I hate it."},
    ]

    path.parent.mkdir(parents=True, exist_ok=True)
    pd.DataFrame(data).to_csv(path, index=False)
    print(f"Demo sentiment data written to {path}")


def score_single(text: str, cfg: Dict[str, Any], store: LexiconStore) -> Dict[str, Any]:
    score = score_text(text, store)
    result = score.to_dict()
    result["sentiment_label"] = sentiment_label(score, cfg)
    return result


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))

    cfg_path = args.config if args.config.is_absolute() else PROJECT_ROOT / args.config
    if not cfg_path.exists():
        print(f"Config not found: {cfg_path}", file=sys.stderr)
        sys.exit(1)

    cfg = load_config(cfg_path)
    sentiment_cfg = cfg.get("sentiment") or {}

    try:
        store = build_store(cfg)
    except InitializationError as exc:
        print(f"Unable to load lexicon: {exc}", file=sys.stderr)
        sys.exit(1)

    if args.text is not None:
        print(json.dumps(score_single(args.text, cfg, store), indent=2))
        return

    raw_path = _resolve(sentiment_cfg.get("raw_path", ""))
    if not raw_path.exists():
        if args.demo:
            ensure_demo_data(raw_path, cfg)
        else:
            print(f"Sentiment raw data not found at {raw_path}. Use --demo to generate sample data.", file=sys.stderr)
            sys.exit(1)

    text_col = sentiment_cfg.get("text_column", "text")
    id_col = sentiment_cfg.get("id_column")

    df = load_texts_csv(raw_path, text_col=text_col, id_col=id_col)
    df = add_sentiment(df, cfg, store=store)
    summary = summarize(df, top_n=int(sentiment_cfg.get("top_n", 10)))
    summary["lexicon_size"] = store.size()

    output_dir = _resolve(sentiment_cfg.get("output_dir", "reports"))
    output_dir.mkdir(parents=True, exist_ok=True)

    scored_path = output_dir / "sentiment_scored.csv"
    summary_path = output_dir / "sentiment_summary.json"

    df.to_csv(scored_path, index=False)
    with summary_path.open("w", encoding="utf-8") as handle:
        json.dump(summary, handle, indent=2)

    print("Sentiment scoring complete.")
    print(f"Label counts: {summary['label_counts']}")
    print(f"Mean sentiment: {summary['mean_sentiment']}")
    print(f"Outputs written to {output_dir}")


if __name__ == "__main__":
    main()
