"""Compare the two syllable estimators against dictionary counts.

The tie-break table in :mod:`textstats.core.rules` comes from this report:
for every ``(heuristic, alternative)`` disagreement it records which side
matched the dictionary, and the pairs where the heuristic wins more often
become tie-breaks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, FrozenSet, Mapping, Tuple

from textstats.utils.observability import get_logger

logger = get_logger(__name__).bind(component="benchmark")


def pair_key(heuristic_count: int, alternative_count: int) -> str:
    return f"{heuristic_count}-{alternative_count}"


@dataclass
class BenchmarkReport:
    total_words: int = 0
    both_correct: int = 0
    both_incorrect: int = 0
    heuristic_correct: Dict[str, int] = field(default_factory=dict)
    alternative_correct: Dict[str, int] = field(default_factory=dict)

    def suggested_tie_breaks(self) -> FrozenSet[Tuple[int, int]]:
        """Pairs where the heuristic matched the dictionary more often."""

        pairs = set()
        for key, wins in self.heuristic_correct.items():
            if wins > self.alternative_correct.get(key, 0):
                heuristic, alternative = (int(part) for part in key.split("-", 1))
                pairs.add((heuristic, alternative))
        return frozenset(pairs)

    def as_dict(self) -> Dict[str, object]:
        return {
            "TotalWords": self.total_words,
            "BothCorrect": self.both_correct,
            "BothIncorrect": self.both_incorrect,
            "HeuristicCorrect": dict(sorted(self.heuristic_correct.items())),
            "AlternativeCorrect": dict(sorted(self.alternative_correct.items())),
            "SuggestedTieBreaks": sorted(list(pair) for pair in self.suggested_tie_breaks()),
        }


def run_benchmark(
    table: Mapping[str, int],
    heuristic: Callable[[str], int],
    alternative: Callable[[str], int],
) -> BenchmarkReport:
    """Score both estimators against ``table``; zero-count entries are skipped."""

    report = BenchmarkReport()
    for word, expected in table.items():
        if not expected:
            continue

        report.total_words += 1
        heuristic_count = heuristic(word)
        alternative_count = alternative(word)
        heuristic_ok = heuristic_count == expected
        alternative_ok = alternative_count == expected

        if heuristic_ok and alternative_ok:
            report.both_correct += 1
        elif heuristic_ok:
            key = pair_key(heuristic_count, alternative_count)
            report.heuristic_correct[key] = report.heuristic_correct.get(key, 0) + 1
        elif alternative_ok:
            key = pair_key(heuristic_count, alternative_count)
            report.alternative_correct[key] = report.alternative_correct.get(key, 0) + 1
        else:
            report.both_incorrect += 1

    logger.info(
        "Benchmark finished",
        context={
            "words": report.total_words,
            "both_correct": report.both_correct,
            "both_incorrect": report.both_incorrect,
        },
    )
    return report


__all__ = ["BenchmarkReport", "run_benchmark", "pair_key"]
