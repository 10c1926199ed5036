"""Ordered pattern tables driving the heuristic syllable estimator."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import FrozenSet, Iterable, Mapping, Optional, Pattern, Tuple

# Words that don't follow the usual counting rules.
PROBLEM_WORDS: Mapping[str, int] = MappingProxyType(
    {
        "simile": 3,
        "forever": 3,
        "shoreline": 2,
        "forest": 2,
    }
)

# Single-syllable prefixes and suffixes, stripped cumulatively in this order.
PREFIX_SUFFIX_PATTERNS: Tuple[str, ...] = (
    r"^un",
    r"^fore",
    r"ly$",
    r"less$",
    r"ful$",
    r"ers?$",
    r"ings?$",
)

# Letter groups counted as two vowel groups that are really one syllable.
SUBTRACT_PATTERNS: Tuple[str, ...] = (
    r"cial",
    r"tia",
    r"cius",
    r"cious",
    r"giu",
    r"ion",
    r"ise",
    r"iou",
    r"sia$",
    r"[^aeiouyt]{2,}ed$",
    r".ely$",
    r"[cg]h?e[rsd]?$",
    r"rved?$",
    r"[aeiouy][dt]es?$",
    r"[aeiouy][^aeiouydt]e[rsd]?$",
    r"^[dr]e[aeiou][^aeiou]+$",
    r"[aeiouy]rse$",
)

# Letter groups counted as one vowel group that are really two syllables.
ADD_PATTERNS: Tuple[str, ...] = (
    r"ia",
    r"riet",
    r"dien",
    r"iu",
    r"io",
    r"ii",
    r"[aeiouym]bl$",
    r"[aeiou]{3}",
    r"^mc",
    r"ism$",
    r"[^aeiouy]{2}l$",
    r"[^l]lien",
    r"^coa[dglx].",
    r"[^gq]ua[^auieo]",
    r"dnt$",
    r"uity$",
    r"ie(r|st)$",
    r"yee$",
)

NON_VOWEL_PATTERN = r"[^aeiouy]+"

# (heuristic, alternative) pairs where benchmarking against the CMU table
# showed the heuristic estimator to be right more often.
TIE_BREAK_PAIRS: FrozenSet[Tuple[int, int]] = frozenset(
    {
        (2, 3),
        (3, 4),
        (4, 5),
        (5, 4),
        (6, 5),
        (6, 7),
        (7, 6),
    }
)


def _compile_all(patterns: Iterable[str]) -> Tuple[Pattern[str], ...]:
    return tuple(re.compile(pattern) for pattern in patterns)


@dataclass(frozen=True)
class RuleTables:
    """Immutable bundle of every table the estimator and reconciler consult.

    Pattern tuples are evaluated strictly in order; the order is part of the
    algorithm because prefix/suffix stripping mutates the word seen by later
    patterns.
    """

    prefix_suffixes: Tuple[Pattern[str], ...]
    subtract_patterns: Tuple[Pattern[str], ...]
    add_patterns: Tuple[Pattern[str], ...]
    non_vowel_splitter: Pattern[str]
    problem_words: Mapping[str, int] = field(default_factory=lambda: PROBLEM_WORDS)
    tie_breaks: FrozenSet[Tuple[int, int]] = TIE_BREAK_PAIRS

    @classmethod
    def build(
        cls,
        *,
        prefix_suffixes: Iterable[str] = PREFIX_SUFFIX_PATTERNS,
        subtract_patterns: Iterable[str] = SUBTRACT_PATTERNS,
        add_patterns: Iterable[str] = ADD_PATTERNS,
        problem_words: Optional[Mapping[str, int]] = None,
        tie_breaks: Optional[Iterable[Tuple[int, int]]] = None,
    ) -> "RuleTables":
        words = PROBLEM_WORDS if problem_words is None else problem_words
        return cls(
            prefix_suffixes=_compile_all(prefix_suffixes),
            subtract_patterns=_compile_all(subtract_patterns),
            add_patterns=_compile_all(add_patterns),
            non_vowel_splitter=re.compile(NON_VOWEL_PATTERN),
            problem_words=MappingProxyType(
                {str(word).lower(): int(count) for word, count in words.items()}
            ),
            tie_breaks=TIE_BREAK_PAIRS
            if tie_breaks is None
            else frozenset((int(h), int(a)) for h, a in tie_breaks),
        )

    def prefers_heuristic(self, heuristic_count: int, alternative_count: int) -> bool:
        return (heuristic_count, alternative_count) in self.tie_breaks


DEFAULT_RULES = RuleTables.build()

__all__ = [
    "RuleTables",
    "DEFAULT_RULES",
    "PROBLEM_WORDS",
    "PREFIX_SUFFIX_PATTERNS",
    "SUBTRACT_PATTERNS",
    "ADD_PATTERNS",
    "NON_VOWEL_PATTERN",
    "TIE_BREAK_PAIRS",
]
