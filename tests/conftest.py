import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from textstats.core import Aggregator, DaleChallList, SyllableReconciler


class StubDictionary:
    """Dictionary stub answering from a fixed table and recording lookups."""

    def __init__(self, table=None) -> None:
        self.table = {key.lower(): value for key, value in (table or {}).items()}
        self.requests = []

    def lookup(self, word: str):
        self.requests.append(word)
        return self.table.get(word.lower())


class StubEstimator:
    """Alternative estimator stub: fixed answers, otherwise a constant."""

    def __init__(self, answers=None, default: int = 1) -> None:
        self.answers = dict(answers or {})
        self.default = default
        self.calls = []

    def estimate(self, word: str) -> int:
        self.calls.append(word)
        return self.answers.get(word.lower(), self.default)


@pytest.fixture
def stub_dictionary():
    return StubDictionary({"cat": 1, "sat": 1, "ham": 1, "banana": 3})


@pytest.fixture
def familiar_words():
    return DaleChallList(["cat", "sat", "ham", "the", "a", "dog", "ran"])


@pytest.fixture
def stub_reconciler(stub_dictionary):
    return SyllableReconciler(alternative=StubEstimator(), dictionary=stub_dictionary)


@pytest.fixture
def aggregator(stub_reconciler, familiar_words):
    return Aggregator(stub_reconciler, dale_chall=familiar_words)


@pytest.fixture
def make_dictionary():
    return StubDictionary


@pytest.fixture
def make_estimator():
    return StubEstimator
