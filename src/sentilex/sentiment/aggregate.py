"""Score tables of texts with pandas."""

from __future__ import annotations

from collections import Counter
from pathlib import Path
from typing import Any, Dict

import pandas as pd

from sentilex.errors import DivisionUndefinedError
from sentilex.lexicon.store import LexiconStore
from sentilex.sentiment.scoring import Score, ScoringEngine, sentiment_label

SCORE_COLUMNS = [
    "sentiment",
    "token_count",
    "matched_count",
    "positive_words",
    "negative_words",
    "avg_per_token",
    "avg_per_matched_word",
    "sentiment_label",
]


def load_texts_csv(path: Path | str, text_col: str, id_col: str | None = None) -> pd.DataFrame:
    """Load a CSV of texts and drop rows with empty text."""
    df = pd.read_csv(path)
    df.columns = [str(c).strip() for c in df.columns]

    if text_col not in df.columns:
        raise ValueError(f"text column '{text_col}' not found")
    if id_col is not None and id_col not in df.columns:
        raise ValueError(f"id column '{id_col}' not found")

    df[text_col] = df[text_col].fillna("").astype(str).str.strip()
    df = df[df[text_col] != ""]
    return df.reset_index(drop=True)


def _average(score: Score, name: str) -> float:
    try:
        return getattr(score, name)
    except DivisionUndefinedError:
        return float("nan")


def _score_row(score: Score, cfg: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "sentiment": score.sentiment,
        "token_count": len(score.tokens),
        "matched_count": len(score.matched_words),
        "positive_words": " ".join(score.positive_words),
        "negative_words": " ".join(score.negative_words),
        "avg_per_token": _average(score, "average_sentiment_per_token"),
        "avg_per_matched_word": _average(score, "average_sentiment_per_matched_word"),
        "sentiment_label": sentiment_label(score, cfg),
    }


def add_sentiment(df: pd.DataFrame, cfg: Dict[str, Any], store: LexiconStore | None = None) -> pd.DataFrame:
    """Add score, average and label columns for the configured text column."""
    text_col = (cfg.get("sentiment") or {}).get("text_column", "text")
    if text_col not in df.columns:
        raise ValueError(f"text column '{text_col}' not found")

    if store is None:
        store = LexiconStore.get_instance()
    engine = ScoringEngine()

    df = df.copy()
    rows = [_score_row(engine.score(str(text), store), cfg) for text in df[text_col]]
    scored = pd.DataFrame(rows, columns=SCORE_COLUMNS, index=df.index)
    for col in SCORE_COLUMNS:
        df[col] = scored[col]
    return df


def summarize(df: pd.DataFrame, top_n: int = 10) -> Dict[str, Any]:
    """Label counts, mean sentiment and the most frequent matched words."""
    if df.empty:
        return {"rows": 0, "label_counts": {}, "mean_sentiment": None, "top_positive": [], "top_negative": []}

    positive: Counter = Counter()
    negative: Counter = Counter()
    for words in df["positive_words"].fillna(""):
        positive.update(words.split())
    for words in df["negative_words"].fillna(""):
        negative.update(words.split())

    return {
        "rows": int(len(df)),
        "label_counts": {str(k): int(v) for k, v in df["sentiment_label"].value_counts().items()},
        "mean_sentiment": float(df["sentiment"].mean()),
        "top_positive": positive.most_common(top_n),
        "top_negative": negative.most_common(top_n),
    }
