import pytest

from textstats.core.alternative import (
    DEFAULT_ALTERNATIVE,
    HyphenationEstimator,
    syllable_count_alternative,
)


@pytest.mark.parametrize("word", ["cat", "table", "banana", "readability", "Extraordinary"])
def test_plain_words_count_at_least_one(word):
    assert syllable_count_alternative(word) >= 1


@pytest.mark.parametrize("word", ["", "   ", "123", "--", "\N{REPLACEMENT CHARACTER}"])
def test_words_without_letters_count_zero(word):
    assert syllable_count_alternative(word) == 0


def test_repeated_calls_agree():
    words = ["banana", "hopeless", "unhappy", "café"]

    first = [DEFAULT_ALTERNATIVE.estimate(word) for word in words]
    second = [HyphenationEstimator().estimate(word) for word in words]

    assert first == second
    assert first == [DEFAULT_ALTERNATIVE(word) for word in words]


def test_count_ignores_case():
    assert syllable_count_alternative("BANANA") == syllable_count_alternative("banana")


def test_unknown_language_is_rejected():
    with pytest.raises(ValueError):
        HyphenationEstimator("xx_NOPE")
