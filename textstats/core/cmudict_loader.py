"""Reference syllable counts from the CMU pronouncing dictionary."""

from __future__ import annotations

import json
import re
import threading
from pathlib import Path
from typing import Dict, Iterable, Iterator, Mapping, Optional, Protocol, Tuple

import pronouncing

from textstats.utils.observability import get_logger

VOWEL_INITIALS = frozenset("AEIOU")

_VARIANT_PATTERN = re.compile(r"\(\d+\)$")

logger = get_logger(__name__).bind(component="cmudict")


class SyllableDictionary(Protocol):
    """Anything able to answer authoritative syllable counts."""

    def lookup(self, word: str) -> Optional[int]:
        ...


def count_vowel_phonemes(phones: Iterable[str]) -> int:
    """Count the phonemes that carry a syllable nucleus."""

    return sum(1 for phone in phones if phone and phone[0] in VOWEL_INITIALS)


def iter_cmudict_entries(lines: Iterable[str]) -> Iterator[Tuple[str, int]]:
    """Yield ``(word, syllables)`` for every primary entry in ``lines``.

    Comment lines, symbol entries such as ``"CLOSE-QUOTE`` and alternative
    pronunciations (``WORD(2)``) are skipped, so each word is reported once
    with the count of its first pronunciation.
    """

    for line in lines:
        parts = line.split()
        if len(parts) < 2:
            continue
        raw_word, *phones = parts
        if not raw_word[0].isalpha() or _VARIANT_PATTERN.search(raw_word):
            continue
        yield raw_word.lower(), count_vowel_phonemes(phones)


class CMUDictLoader:
    """Lazy, thread-safe syllable lookup over the CMU pronouncing dictionary.

    With ``dict_path`` the given ``cmudict-0.7b`` file is parsed on first
    lookup; a missing file leaves the loader unloaded so a later lookup
    retries, and is reported once. Without a path the copy bundled with
    :mod:`pronouncing` is used, initialised under the same lock.
    """

    def __init__(self, dict_path: Optional[Path | str] = None) -> None:
        self.dict_path: Optional[Path] = Path(dict_path) if dict_path is not None else None
        self._counts: Dict[str, int] = {}
        self._loaded: bool = False
        self._missing_reported: bool = False
        self._pronouncing_ready: bool = False
        self._lock = threading.Lock()

    @classmethod
    def from_table(cls, table: Mapping[str, int]) -> "CMUDictLoader":
        """Build a loader from a pre-computed ``word -> count`` mapping."""

        loader = cls()
        loader._counts = {
            str(word).lower(): int(count) for word, count in table.items() if word
        }
        loader._loaded = True
        return loader

    @classmethod
    def from_json(cls, path: Path | str) -> "CMUDictLoader":
        with Path(path).open("r", encoding="utf-8") as handle:
            table = json.load(handle)
        if not isinstance(table, Mapping):
            raise ValueError(f"{path} does not contain a JSON object")
        return cls.from_table(table)

    def _ensure_loaded(self) -> None:
        if self._loaded or self.dict_path is None:
            return

        with self._lock:
            if self._loaded:
                return
            if not self.dict_path.exists():
                if not self._missing_reported:
                    logger.warning(
                        "CMU dictionary file missing",
                        context={"path": str(self.dict_path)},
                    )
                    self._missing_reported = True
                return

            # cmudict-0.7b carries a handful of Latin-1 bytes.
            with self.dict_path.open("r", encoding="latin-1") as handle:
                counts = dict(iter_cmudict_entries(handle))

            self._counts = counts
            self._loaded = True
            logger.info(
                "Loaded CMU dictionary",
                context={"path": str(self.dict_path), "words": len(counts)},
            )

    def _ensure_pronouncing(self) -> None:
        if self._pronouncing_ready:
            return

        with self._lock:
            if not self._pronouncing_ready:
                pronouncing.init_cmu()
                self._pronouncing_ready = True

    def lookup(self, word: str) -> Optional[int]:
        normalized = word.strip().lower()
        if not normalized:
            return None

        if self.dict_path is None and not self._loaded:
            self._ensure_pronouncing()
            phones = pronouncing.phones_for_word(normalized)
            if not phones:
                return None
            return pronouncing.syllable_count(phones[0])

        self._ensure_loaded()
        return self._counts.get(normalized)

    def syllable_table(self) -> Dict[str, int]:
        """Return a copy of every loaded ``word -> count`` entry."""

        if self.dict_path is None and not self._loaded:
            self._ensure_pronouncing()
            return _first_pronunciation_table(pronouncing.pronunciations)

        self._ensure_loaded()
        return dict(self._counts)


def _first_pronunciation_table(entries: Iterable[Tuple[str, str]]) -> Dict[str, int]:
    # pronouncing lists variants as repeated words, first one wins.
    table: Dict[str, int] = {}
    for word, phones in entries:
        if word in table or not word[:1].isalpha():
            continue
        table[word] = count_vowel_phonemes(phones.split())
    return table


DEFAULT_CMU_LOADER = CMUDictLoader()

__all__ = [
    "CMUDictLoader",
    "DEFAULT_CMU_LOADER",
    "SyllableDictionary",
    "VOWEL_INITIALS",
    "count_vowel_phonemes",
    "iter_cmudict_entries",
]
