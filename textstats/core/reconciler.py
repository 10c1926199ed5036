"""Merge the candidate syllable counts for a word into one trusted value."""

from __future__ import annotations

from typing import Callable, Optional, Union

from .alternative import DEFAULT_ALTERNATIVE, AlternativeSource
from .cmudict_loader import DEFAULT_CMU_LOADER, SyllableDictionary
from .heuristic import HeuristicEstimator
from .models import SyllableAnalysis
from .rules import DEFAULT_RULES, RuleTables

# Value chosen when the estimators disagree and no tie-break applies.
UNRESOLVED_COUNT = 0

_MISSING = object()


def _as_callable(source: Union[AlternativeSource, Callable[[str], int]]) -> Callable[[str], int]:
    estimate = getattr(source, "estimate", None)
    if callable(estimate):
        return estimate
    if callable(source):
        return source
    raise TypeError(f"{source!r} is neither an estimator nor a callable")


class SyllableReconciler:
    """Pick the most likely syllable count for a word.

    The order of precedence is: a dictionary entry; agreement between the
    heuristic and alternative estimators; the heuristic count when the
    ``(heuristic, alternative)`` pair is in the tie-break table. Any other
    disagreement resolves to :data:`UNRESOLVED_COUNT`, or to the alternative
    count when ``fallback_to_alternative`` is set.
    """

    def __init__(
        self,
        rules: Optional[RuleTables] = None,
        *,
        heuristic: Optional[Callable[[str], int]] = None,
        alternative: Optional[AlternativeSource] = None,
        dictionary: Optional[SyllableDictionary] | object = _MISSING,
        fallback_to_alternative: bool = False,
    ) -> None:
        self.rules = rules or DEFAULT_RULES
        self._heuristic = _as_callable(heuristic or HeuristicEstimator(self.rules))
        self._alternative = _as_callable(alternative or DEFAULT_ALTERNATIVE)
        self.dictionary: Optional[SyllableDictionary] = (
            DEFAULT_CMU_LOADER if dictionary is _MISSING else dictionary  # type: ignore[assignment]
        )
        self.fallback_to_alternative = fallback_to_alternative

    def dictionary_count(self, word: str) -> Optional[int]:
        if self.dictionary is None:
            return None
        return self.dictionary.lookup(word)

    def reconcile(
        self,
        word: str,
        heuristic_count: int,
        alternative_count: int,
        dictionary_count: Optional[int] | object = _MISSING,
    ) -> int:
        if dictionary_count is _MISSING:
            dictionary_count = self.dictionary_count(word)
        if dictionary_count is not None:
            return int(dictionary_count)  # type: ignore[arg-type]

        if heuristic_count == alternative_count:
            return heuristic_count

        if self.rules.prefers_heuristic(heuristic_count, alternative_count):
            return heuristic_count

        if self.fallback_to_alternative:
            return alternative_count
        return UNRESOLVED_COUNT

    def analyse_word(self, word: str) -> SyllableAnalysis:
        """Run all three sources for ``word`` and reconcile them."""

        heuristic_count = self._heuristic(word)
        alternative_count = self._alternative(word)
        dictionary_count = self.dictionary_count(word)
        return SyllableAnalysis(
            dictionary_count=dictionary_count,
            heuristic_count=heuristic_count,
            alternative_count=alternative_count,
            most_likely_count=self.reconcile(
                word, heuristic_count, alternative_count, dictionary_count
            ),
        )


__all__ = ["SyllableReconciler", "UNRESOLVED_COUNT"]
