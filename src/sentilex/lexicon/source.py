"""Read AFINN-style lexicon files (``word<TAB>score`` per line)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Iterator, List, Tuple

from sentilex.errors import InitializationError

DEFAULT_LEXICON_PATH = Path(__file__).resolve().parent / "data" / "AFINN-sample.txt"


def iter_lexicon_lines(lines: Iterable[str]) -> Iterator[Tuple[str, int]]:
    """Yield ``(word, score)`` pairs, failing on the first malformed line."""
    for lineno, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        if not line.strip():
            continue
        bits = line.split("\t")
        if len(bits) != 2:
            raise InitializationError(f"line {lineno}: expected 'word<TAB>score', got {line!r}")
        word, raw_score = bits
        try:
            score = int(raw_score.strip())
        except ValueError as exc:
            raise InitializationError(f"line {lineno}: score {raw_score!r} is not an integer") from exc
        yield word, score


def read_lexicon(path: Path | str, encoding: str = "utf-8-sig") -> List[Tuple[str, int]]:
    """Load every pair from a lexicon file."""
    path = Path(path)
    try:
        with path.open("r", encoding=encoding) as handle:
            return list(iter_lexicon_lines(handle))
    except (OSError, UnicodeDecodeError) as exc:
        raise InitializationError(f"Unable to read lexicon at {path}") from exc
