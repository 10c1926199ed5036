"""Readability indices computed from a finished :class:`Result`.

Two zero-sentence conventions coexist and both are intentional:
:func:`average_words_per_sentence` returns the word count when no sentence
terminator was seen, while every other formula with a sentence denominator
substitutes a single sentence. Ratios over zero words evaluate to ``0.0``.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .models import Result


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return 0.0
    return float(numerator) / float(denominator)


def _sentences_or_one(result: "Result") -> float:
    return float(result.sentences) if result.sentences else 1.0


def average_letters_per_word(result: "Result") -> float:
    return _ratio(result.letters, result.total_words)


def average_syllables_per_word(result: "Result") -> float:
    return _ratio(result.syllables, result.total_words)


def average_words_per_sentence(result: "Result") -> float:
    if result.sentences == 0:
        return float(result.total_words)
    return float(result.total_words) / float(result.sentences)


def words_with_at_least_n_syllables(
    result: "Result", n: int, include_proper_nouns: bool = True
) -> int:
    """Count word occurrences with ``n`` or more syllables.

    With ``include_proper_nouns=False`` capitalised words recorded in the
    proper-noun histogram are left out; the histogram is empty unless
    proper-noun tracking was enabled for the pass.
    """

    total = sum(
        count
        for syllables, count in result.word_count_per_syllable_count.items()
        if syllables >= n
    )
    if not include_proper_nouns:
        total -= sum(
            count
            for syllables, count in result.proper_noun_word_count_per_syllable_count.items()
            if syllables >= n
        )
    return max(0, total)


def percentage_words_with_at_least_n_syllables(
    result: "Result", n: int, include_proper_nouns: bool = True
) -> float:
    return (
        _ratio(
            words_with_at_least_n_syllables(result, n, include_proper_nouns),
            result.total_words,
        )
        * 100.0
    )


def flesch_kincaid_reading_ease(result: "Result") -> float:
    return (
        206.835
        - (1.015 * average_words_per_sentence(result))
        - (84.6 * average_syllables_per_word(result))
    )


def flesch_kincaid_grade_level(result: "Result") -> float:
    return (
        (0.39 * average_words_per_sentence(result))
        + (11.8 * average_syllables_per_word(result))
        - 15.59
    )


def gunning_fog_score(result: "Result") -> float:
    return (
        average_words_per_sentence(result)
        + percentage_words_with_at_least_n_syllables(result, 3, include_proper_nouns=False)
    ) * 0.4


def coleman_liau_index(result: "Result") -> float:
    sentences = _sentences_or_one(result)
    return (
        (5.89 * _ratio(result.letters, result.total_words))
        - (0.3 * _ratio(sentences, result.total_words))
        - 15.8
    )


def smog_index(result: "Result") -> float:
    sentences = _sentences_or_one(result)
    polysyllables = words_with_at_least_n_syllables(result, 3, include_proper_nouns=True)
    return 1.0430 * math.sqrt((polysyllables * (30 / sentences)) + 3.1291)


def automated_readability_index(result: "Result") -> float:
    sentences = _sentences_or_one(result)
    return (
        (4.71 * _ratio(result.letters, result.total_words))
        + (0.5 * (result.total_words / sentences))
        - 21.43
    )


def dale_chall_readability_score(result: "Result") -> float:
    difficult_percentage = _ratio(result.difficult_words, result.total_words) * 100
    sentences = _sentences_or_one(result)

    score = (0.1579 * difficult_percentage) + (0.0496 * (result.total_words / sentences))
    if difficult_percentage > 5:
        score += 3.6365
    return score


READABILITY_FORMULAS = {
    "FleschKincaidReadingEase": flesch_kincaid_reading_ease,
    "FleschKincaidGradeLevel": flesch_kincaid_grade_level,
    "GunningFogScore": gunning_fog_score,
    "ColemanLiauIndex": coleman_liau_index,
    "SMOGIndex": smog_index,
    "AutomatedReadabilityIndex": automated_readability_index,
    "DaleChallReadabilityScore": dale_chall_readability_score,
}

__all__ = [
    "average_letters_per_word",
    "average_syllables_per_word",
    "average_words_per_sentence",
    "words_with_at_least_n_syllables",
    "percentage_words_with_at_least_n_syllables",
    "flesch_kincaid_reading_ease",
    "flesch_kincaid_grade_level",
    "gunning_fog_score",
    "coleman_liau_index",
    "smog_index",
    "automated_readability_index",
    "dale_chall_readability_score",
    "READABILITY_FORMULAS",
]
