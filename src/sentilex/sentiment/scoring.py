"""Lexicon-based sentiment scoring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from sentilex.errors import DivisionUndefinedError
from sentilex.lexicon.store import LexiconStore
from sentilex.sentiment.tokenize import tokenize


@dataclass(frozen=True)
class Score:
    """Result of scoring one piece of text."""

    tokens: Tuple[str, ...]
    matched_words: Tuple[str, ...] = ()
    positive_words: Tuple[str, ...] = ()
    negative_words: Tuple[str, ...] = ()
    sentiment: int = 0

    @property
    def average_sentiment_per_token(self) -> float:
        """Sentiment divided by the number of tokens."""
        if not self.tokens:
            raise DivisionUndefinedError("no tokens to average over")
        return self.sentiment / len(self.tokens)

    @property
    def average_sentiment_per_matched_word(self) -> float:
        """Sentiment divided by the number of lexicon matches."""
        if not self.matched_words:
            raise DivisionUndefinedError("no lexicon words matched")
        return self.sentiment / len(self.matched_words)

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form; an undefined average becomes None."""
        data: Dict[str, Any] = {
            "tokens": list(self.tokens),
            "matched_words": list(self.matched_words),
            "positive_words": list(self.positive_words),
            "negative_words": list(self.negative_words),
            "sentiment": self.sentiment,
        }
        for name in ("average_sentiment_per_token", "average_sentiment_per_matched_word"):
            try:
                data[name] = getattr(self, name)
            except DivisionUndefinedError:
                data[name] = None
        return data


class ScoringEngine:
    """Tokenize text and fold the tokens against a lexicon."""

    def score(self, text: str, store: LexiconStore | None = None) -> Score:
        if store is None:
            store = LexiconStore.get_instance()

        tokens = tokenize(text)
        matched: List[str] = []
        positive: List[str] = []
        negative: List[str] = []
        sentiment = 0

        for token in tokens:
            polarity = store.lookup(token)
            if polarity is None:
                continue
            matched.append(token)
            if polarity > 0:
                positive.append(token)
            elif polarity < 0:
                negative.append(token)
            sentiment += polarity

        return Score(
            tokens=tuple(tokens),
            matched_words=tuple(matched),
            positive_words=tuple(positive),
            negative_words=tuple(negative),
            sentiment=sentiment,
        )


_ENGINE = ScoringEngine()


def score_text(text: str, store: LexiconStore | None = None) -> Score:
    return _ENGINE.score(text, store)


def sentiment_label(score: Score | int, cfg: dict | None = None) -> str:
    """Return label based on configured thresholds."""
    thresholds = (cfg or {}).get("sentiment", {}).get("thresholds", {})
    neg_thresh = thresholds.get("negative", -1)
    pos_thresh = thresholds.get("positive", 1)

    value = score.sentiment if isinstance(score, Score) else score
    if value >= pos_thresh:
        return "positive"
    if value <= neg_thresh:
        return "negative"
    return "neutral"
