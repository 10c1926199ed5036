"""Entry point running a complete analysis pass over a text source."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from textstats.config import Settings
from textstats.utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)

from .aggregator import Aggregator
from .alternative import DEFAULT_ALTERNATIVE, HyphenationEstimator
from .cmudict_loader import DEFAULT_CMU_LOADER, CMUDictLoader
from .dale_chall import DaleChallList, default_dale_chall_list
from .models import Result
from .reconciler import SyllableReconciler
from .tokenizer import TextSource, tokenize

logger = get_logger(__name__).bind(component="analyzer")

ANALYSES = create_counter(
    "textstats_analyses_total",
    "Completed analysis passes by outcome.",
    label_names=("outcome",),
)
WORDS = create_counter("textstats_words_total", "Word occurrences analysed.")
ANALYSIS_SECONDS = create_histogram(
    "textstats_analysis_seconds",
    "Wall-clock duration of analysis passes.",
)


class AnalysisError(Exception):
    """Raised when the text source fails mid-pass.

    ``result`` holds everything aggregated before the failure; the original
    error is available as ``__cause__``.
    """

    def __init__(self, message: str, result: Result) -> None:
        super().__init__(message)
        self.result = result


@lru_cache(maxsize=None)
def _cmu_loader(path: Optional[Path]) -> CMUDictLoader:
    if path is None:
        return DEFAULT_CMU_LOADER
    if path.suffix == ".json":
        return CMUDictLoader.from_json(path)
    return CMUDictLoader(path)


@lru_cache(maxsize=None)
def _hyphenation(lang: str) -> HyphenationEstimator:
    if lang == DEFAULT_ALTERNATIVE.lang:
        return DEFAULT_ALTERNATIVE
    return HyphenationEstimator(lang)


@lru_cache(maxsize=None)
def _dale_chall(path: Optional[Path]) -> DaleChallList:
    if path is None:
        return default_dale_chall_list()
    return DaleChallList.from_path(path)


def build_reconciler(settings: Optional[Settings] = None) -> SyllableReconciler:
    """Return a reconciler wired to the shared reference data for ``settings``."""

    settings = settings or Settings()
    return SyllableReconciler(
        alternative=_hyphenation(settings.hyphenation_lang),
        dictionary=_cmu_loader(settings.cmudict_path),
        fallback_to_alternative=settings.fallback_to_alternative,
    )


def build_aggregator(
    settings: Optional[Settings] = None,
    *,
    reconciler: Optional[SyllableReconciler] = None,
    dale_chall: Optional[DaleChallList] = None,
) -> Aggregator:
    settings = settings or Settings()
    return Aggregator(
        reconciler or build_reconciler(settings),
        dale_chall=dale_chall if dale_chall is not None else _dale_chall(settings.dale_chall_path),
        track_proper_nouns=settings.track_proper_nouns,
    )


def analyse(
    source: TextSource,
    *,
    settings: Optional[Settings] = None,
    reconciler: Optional[SyllableReconciler] = None,
    dale_chall: Optional[DaleChallList] = None,
) -> Result:
    """Tokenize ``source`` and aggregate it into a fresh :class:`Result`.

    Raises :class:`AnalysisError` carrying the partial result when reading
    ``source`` fails.
    """

    aggregator = build_aggregator(settings, reconciler=reconciler, dale_chall=dale_chall)
    result = aggregator.result

    with start_span("textstats.analyse") as span, ANALYSIS_SECONDS.time():
        try:
            aggregator.consume(tokenize(source))
        except (OSError, UnicodeDecodeError) as error:
            ANALYSES.labels(outcome="error").inc()
            WORDS.inc(result.total_words)
            record_exception(span, error)
            logger.error(
                "Text source failed mid-analysis",
                context={"error": str(error), "words": result.total_words},
            )
            raise AnalysisError(f"Reading text failed: {error}", result) from error

        ANALYSES.labels(outcome="ok").inc()
        WORDS.inc(result.total_words)
        add_span_attributes(
            span,
            {
                "textstats.words": result.total_words,
                "textstats.unique_words": result.unique_words,
                "textstats.sentences": result.sentences,
            },
        )

    logger.debug(
        "Analysis complete",
        context={
            "words": result.total_words,
            "unique_words": result.unique_words,
            "sentences": result.sentences,
            "syllables": result.syllables,
        },
    )
    return result


__all__ = ["AnalysisError", "analyse", "build_aggregator", "build_reconciler"]
