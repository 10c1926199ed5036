"""Syllable estimation, tokenization and readability scoring."""

from .aggregator import Aggregator
from .alternative import DEFAULT_ALTERNATIVE, HyphenationEstimator, syllable_count_alternative
from .analyzer import AnalysisError, analyse, build_aggregator, build_reconciler
from .benchmark import BenchmarkReport, run_benchmark
from .cmudict_loader import DEFAULT_CMU_LOADER, CMUDictLoader
from .dale_chall import DaleChallList, default_dale_chall_list
from .heuristic import DEFAULT_HEURISTIC, HeuristicEstimator, syllable_count
from .models import Result, SyllableAnalysis, Word
from .reconciler import UNRESOLVED_COUNT, SyllableReconciler
from .rules import DEFAULT_RULES, RuleTables
from .tokenizer import TokenEvent, TokenKind, Tokenizer, iter_words, tokenize

__all__ = [
    "Aggregator",
    "AnalysisError",
    "BenchmarkReport",
    "CMUDictLoader",
    "DEFAULT_ALTERNATIVE",
    "DEFAULT_CMU_LOADER",
    "DEFAULT_HEURISTIC",
    "DEFAULT_RULES",
    "DaleChallList",
    "HeuristicEstimator",
    "HyphenationEstimator",
    "Result",
    "RuleTables",
    "SyllableAnalysis",
    "SyllableReconciler",
    "TokenEvent",
    "TokenKind",
    "Tokenizer",
    "UNRESOLVED_COUNT",
    "Word",
    "analyse",
    "build_aggregator",
    "build_reconciler",
    "default_dale_chall_list",
    "iter_words",
    "run_benchmark",
    "syllable_count",
    "syllable_count_alternative",
    "tokenize",
]
