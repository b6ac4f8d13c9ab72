"""Text tokenization for lexicon lookups."""

from __future__ import annotations

import re
from typing import List

NON_ALPHA_RE = re.compile(r"[^a-zA-Z ]+")
WHITESPACE_RE = re.compile(r"\s+")


def tokenize(text: str) -> List[str]:
    """Split text into lowercase ASCII-alphabetic tokens.

    Everything except ASCII letters and spaces is dropped before splitting,
    so digits, punctuation and accented letters disappear and newlines join
    the words around them. Text without letters gives ``[""]``.
    """
    text = NON_ALPHA_RE.sub("", text or "")
    text = WHITESPACE_RE.sub(" ", text)
    return text.lower().split(" ")
