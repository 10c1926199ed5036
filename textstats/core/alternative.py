"""Hyphenation-based syllable estimator used as the second opinion."""

from __future__ import annotations

from typing import Callable, Union

import pyphen


class HyphenationEstimator:
    """Count syllables as the fragments produced by Liang hyphenation.

    Hyphenation dictionaries only place breaks where a typesetter may split
    the word, so the count runs independently of the rule tables. Words
    without any letters count as ``0``.
    """

    def __init__(self, lang: str = "en_US") -> None:
        if lang not in pyphen.LANGUAGES:
            raise ValueError(f"Unsupported hyphenation language: {lang!r}")
        self.lang = lang
        self._dictionary = pyphen.Pyphen(lang=lang)

    def estimate(self, word: str) -> int:
        normalized = word.strip().lower()
        if not any(char.isalpha() for char in normalized):
            return 0
        return len(self._dictionary.positions(normalized)) + 1

    __call__ = estimate


AlternativeSource = Union[HyphenationEstimator, Callable[[str], int]]

DEFAULT_ALTERNATIVE = HyphenationEstimator()


def syllable_count_alternative(word: str) -> int:
    """Return the hyphenation-based syllable count for ``word``."""

    return DEFAULT_ALTERNATIVE.estimate(word)


__all__ = [
    "HyphenationEstimator",
    "AlternativeSource",
    "DEFAULT_ALTERNATIVE",
    "syllable_count_alternative",
]
