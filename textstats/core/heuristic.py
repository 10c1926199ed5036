"""Rule-table syllable estimator, the primary counting algorithm."""

from __future__ import annotations

from typing import Optional

from .rules import DEFAULT_RULES, RuleTables


class HeuristicEstimator:
    """Estimate syllables from spelling alone using ordered rule tables.

    The count is vowel groups plus stripped prefixes/suffixes, corrected by
    the subtract and add tables. It is deliberately not clamped: very short
    words can come out as ``0`` or below once their only vowel group has been
    stripped or subtracted.
    """

    def __init__(self, rules: Optional[RuleTables] = None) -> None:
        self.rules = rules or DEFAULT_RULES

    def estimate(self, word: str) -> int:
        rules = self.rules
        normalized = word.lower()

        fixed = rules.problem_words.get(normalized)
        if fixed is not None:
            return fixed

        prefix_suffix_count = 0
        for pattern in rules.prefix_suffixes:
            if pattern.search(normalized):
                normalized = pattern.sub("", normalized)
                prefix_suffix_count += 1

        vowel_groups = sum(
            1 for part in rules.non_vowel_splitter.split(normalized) if part
        )
        count = vowel_groups + prefix_suffix_count

        for pattern in rules.subtract_patterns:
            if pattern.search(normalized):
                count -= 1

        for pattern in rules.add_patterns:
            if pattern.search(normalized):
                count += 1

        return count

    __call__ = estimate


DEFAULT_HEURISTIC = HeuristicEstimator()


def syllable_count(word: str) -> int:
    """Return the heuristic syllable count for ``word`` using the default rules."""

    return DEFAULT_HEURISTIC.estimate(word)


__all__ = ["HeuristicEstimator", "DEFAULT_HEURISTIC", "syllable_count"]
