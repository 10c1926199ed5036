"""Dataclasses describing words, syllable analyses and analysis results."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from . import formulas


@dataclass(frozen=True)
class SyllableAnalysis:
    """Every candidate count for one spelling and the reconciled result."""

    dictionary_count: Optional[int]
    heuristic_count: int
    alternative_count: int
    most_likely_count: int

    def as_dict(self) -> Dict[str, Any]:
        return {
            "DictionaryCount": self.dictionary_count,
            "HeuristicCount": self.heuristic_count,
            "AlternativeCount": self.alternative_count,
            "MostLikelyCount": self.most_likely_count,
        }


@dataclass
class Word:
    """A distinct spelling seen during a pass."""

    word: str
    syllables: SyllableAnalysis
    occurrences: int = 1

    def as_dict(self) -> Dict[str, Any]:
        return {
            "Word": self.word,
            "Occurrences": self.occurrences,
            "Syllables": self.syllables.as_dict(),
        }


def _histogram_dict(histogram: Dict[int, int]) -> Dict[str, int]:
    return {str(key): histogram[key] for key in sorted(histogram)}


@dataclass
class Result:
    """Counters and histograms accumulated over one analysis pass."""

    total_words: int = 0
    unique_words: int = 0
    sentences: int = 0
    letters: int = 0
    punctuation: int = 0
    spaces: int = 0
    syllables: int = 0
    difficult_words: int = 0
    word_count_per_syllable_count: Dict[int, int] = field(default_factory=dict)
    unique_word_count_per_syllable_count: Dict[int, int] = field(default_factory=dict)
    proper_noun_word_count_per_syllable_count: Dict[int, int] = field(default_factory=dict)
    word_list: Dict[str, Word] = field(default_factory=dict)

    # Derived values ----------------------------------------------------------

    def average_letters_per_word(self) -> float:
        return formulas.average_letters_per_word(self)

    def average_syllables_per_word(self) -> float:
        return formulas.average_syllables_per_word(self)

    def average_words_per_sentence(self) -> float:
        return formulas.average_words_per_sentence(self)

    def words_with_at_least_n_syllables(
        self, n: int, include_proper_nouns: bool = True
    ) -> int:
        return formulas.words_with_at_least_n_syllables(self, n, include_proper_nouns)

    def percentage_words_with_at_least_n_syllables(
        self, n: int, include_proper_nouns: bool = True
    ) -> float:
        return formulas.percentage_words_with_at_least_n_syllables(
            self, n, include_proper_nouns
        )

    def flesch_kincaid_reading_ease(self) -> float:
        return formulas.flesch_kincaid_reading_ease(self)

    def flesch_kincaid_grade_level(self) -> float:
        return formulas.flesch_kincaid_grade_level(self)

    def gunning_fog_score(self) -> float:
        return formulas.gunning_fog_score(self)

    def coleman_liau_index(self) -> float:
        return formulas.coleman_liau_index(self)

    def smog_index(self) -> float:
        return formulas.smog_index(self)

    def automated_readability_index(self) -> float:
        return formulas.automated_readability_index(self)

    def dale_chall_readability_score(self) -> float:
        return formulas.dale_chall_readability_score(self)

    def readability(self) -> Dict[str, float]:
        scores: Dict[str, float] = {
            "AverageLettersPerWord": self.average_letters_per_word(),
            "AverageSyllablesPerWord": self.average_syllables_per_word(),
            "AverageWordsPerSentence": self.average_words_per_sentence(),
        }
        for name, formula in formulas.READABILITY_FORMULAS.items():
            scores[name] = formula(self)
        return scores

    # Serialisation -----------------------------------------------------------

    def to_dict(self, *, include_words: bool = True) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "TotalWords": self.total_words,
            "UniqueWords": self.unique_words,
            "Sentences": self.sentences,
            "Letters": self.letters,
            "Punctuation": self.punctuation,
            "Spaces": self.spaces,
            "Syllables": self.syllables,
            "DifficultWords": self.difficult_words,
            "WordCountPerSyllableCount": _histogram_dict(self.word_count_per_syllable_count),
            "UniqueWordCountPerSyllableCount": _histogram_dict(
                self.unique_word_count_per_syllable_count
            ),
            "Readability": self.readability(),
        }
        if self.proper_noun_word_count_per_syllable_count:
            payload["ProperNounWordCountPerSyllableCount"] = _histogram_dict(
                self.proper_noun_word_count_per_syllable_count
            )
        if include_words:
            payload["WordList"] = {
                spelling: entry.as_dict() for spelling, entry in self.word_list.items()
            }
        return payload

    def to_json(self, *, indent: Optional[int] = None, include_words: bool = True) -> str:
        return json.dumps(
            self.to_dict(include_words=include_words),
            indent=indent,
            ensure_ascii=False,
        )


__all__ = ["SyllableAnalysis", "Word", "Result"]
