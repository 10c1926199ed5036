"""Dale-Chall familiar-word list and the difficult-word test."""

from __future__ import annotations

import re
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import FrozenSet, Iterable, Optional

# Shortest ASCII letter run, optionally followed by a plural ``s``. ASCII mode
# keeps ``\b`` from treating accented letters as word characters.
PLURAL_PATTERN = re.compile(r"([a-zA-Z]+?)(s\b|\b)", re.ASCII)


def _parse_words(lines: Iterable[str]) -> FrozenSet[str]:
    words = set()
    for line in lines:
        content = line.split("#", 1)[0]
        words.update(token for token in content.split() if token)
    return frozenset(words)


class DaleChallList:
    """Read-only set of familiar words.

    Membership is tested on the exact spelling as tokenized; capitalised
    sentence-initial words therefore only match if the list carries that
    spelling.
    """

    def __init__(self, words: Iterable[str]) -> None:
        self._words: FrozenSet[str] = frozenset(words)

    @classmethod
    def from_path(cls, path: Path | str) -> "DaleChallList":
        with Path(path).open("r", encoding="utf-8") as handle:
            return cls(_parse_words(handle))

    @classmethod
    def bundled(cls) -> "DaleChallList":
        data = resources.files("textstats").joinpath("data", "dale_chall.txt")
        with data.open("r", encoding="utf-8") as handle:
            return cls(_parse_words(handle))

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def plural_stem(self, word: str) -> Optional[str]:
        match = PLURAL_PATTERN.search(word)
        if match is None:
            return None
        return match.group(1)

    def is_difficult(self, word: str) -> bool:
        """Return ``True`` when neither ``word`` nor its plural stem is familiar."""

        if word in self._words:
            return False
        stem = self.plural_stem(word)
        return stem is None or stem not in self._words


@lru_cache(maxsize=1)
def default_dale_chall_list() -> DaleChallList:
    """Return the bundled list, loaded once per process."""

    return DaleChallList.bundled()


__all__ = ["DaleChallList", "PLURAL_PATTERN", "default_dale_chall_list"]
