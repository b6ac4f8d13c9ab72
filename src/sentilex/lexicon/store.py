"""Word-to-polarity lexicon with a lazily built, process-wide instance."""

from __future__ import annotations

import logging
import re
import threading
from pathlib import Path
from types import MappingProxyType
from typing import ClassVar, Dict, Iterable, Mapping, Optional, Tuple, Union

from sentilex.errors import InitializationError
from sentilex.lexicon.source import DEFAULT_LEXICON_PATH, read_lexicon

logger = logging.getLogger(__name__)

LexiconSource = Union[Path, str, Iterable[Tuple[str, int]]]

WORD_RE = re.compile(r"[A-Za-z]+")


def normalize_word(word: str) -> str | None:
    """Lowercase a word; return None if it is not a single ASCII-alphabetic word."""
    key = str(word).strip()
    # checked before lowercasing: "K".lower() is the ASCII "k"
    if not WORD_RE.fullmatch(key):
        return None
    return key.lower()


def is_phrase(word: str) -> bool:
    return " " in str(word).strip()


def _is_polarity(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class LexiconStore:
    """Mapping from lowercase word to integer polarity.

    Build one directly from ``(word, score)`` pairs, or share the process-wide
    instance through :meth:`get_instance`. The mapping only grows, through
    :meth:`inject`, which never overwrites an existing word.
    """

    _instance: ClassVar[Optional["LexiconStore"]] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()
    _default_source: ClassVar[Optional[LexiconSource]] = None

    def __init__(self, pairs: Iterable[Tuple[str, int]]) -> None:
        words: Dict[str, int] = {}
        skipped = 0
        for lineno, pair in enumerate(pairs, start=1):
            try:
                word, polarity = pair
            except (TypeError, ValueError) as exc:
                raise InitializationError(f"entry {lineno}: expected (word, score), got {pair!r}") from exc
            if not _is_polarity(polarity):
                raise InitializationError(f"entry {lineno}: score {polarity!r} for {word!r} is not an integer")
            if is_phrase(word):
                # phrase entries ("does not work") can never equal a token
                skipped += 1
                continue
            key = normalize_word(word)
            if key is None:
                raise InitializationError(f"entry {lineno}: {word!r} is not a single alphabetic word")
            if key in words:
                raise InitializationError(f"entry {lineno}: duplicate word {key!r}")
            words[key] = polarity

        self._words = words
        self._inject_lock = threading.Lock()
        logger.info("Lexicon loaded: %d words (%d phrase entries skipped)", len(words), skipped)

    @classmethod
    def from_source(cls, source: Optional[LexiconSource] = None, encoding: str = "utf-8-sig") -> "LexiconStore":
        """Build a store from a lexicon file path or an iterable of pairs."""
        if source is None:
            source = DEFAULT_LEXICON_PATH
        if isinstance(source, (str, Path)):
            return cls(read_lexicon(source, encoding=encoding))
        return cls(source)

    @classmethod
    def configure(cls, source: Optional[LexiconSource]) -> None:
        """Set the source used when the shared instance is next built."""
        cls._default_source = source

    @classmethod
    def get_instance(cls, source: Optional[LexiconSource] = None) -> "LexiconStore":
        """Return the shared store, loading it on first use.

        ``source`` only matters for the call that actually builds the store.
        A failed load leaves nothing cached, so a later call tries again.
        """
        instance = cls._instance
        if instance is None:
            with cls._instance_lock:
                instance = cls._instance
                if instance is None:
                    instance = cls.from_source(source if source is not None else cls._default_source)
                    cls._instance = instance
        return instance

    @classmethod
    def reset_instance(cls) -> None:
        with cls._instance_lock:
            cls._instance = None

    @property
    def words(self) -> Mapping[str, int]:
        """Read-only snapshot of the lexicon; later injects do not show up in it."""
        with self._inject_lock:
            snapshot = dict(self._words)
        return MappingProxyType(snapshot)

    def lookup(self, word: str) -> int | None:
        return self._words.get(word.lower())

    def size(self) -> int:
        return len(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._words

    def inject(self, words: Mapping[str, int]) -> int:
        """Add words that are not already present; return how many were added."""
        pending = []
        for word, polarity in words.items():
            key = normalize_word(word)
            if key is None:
                raise ValueError(f"cannot inject {word!r}: only single alphabetic words are supported")
            if not _is_polarity(polarity):
                raise ValueError(f"cannot inject {word!r}: score {polarity!r} is not an integer")
            pending.append((key, polarity))

        added = 0
        with self._inject_lock:
            for key, polarity in pending:
                if key in self._words:
                    continue
                self._words[key] = polarity
                added += 1
        logger.debug("Injected %d of %d words", added, len(pending))
        return added
