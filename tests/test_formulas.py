import math

import pytest

from textstats.core import formulas
from textstats.core.models import Result


@pytest.fixture
def sample_result():
    return Result(
        total_words=10,
        unique_words=8,
        sentences=2,
        letters=40,
        syllables=15,
        difficult_words=1,
        word_count_per_syllable_count={1: 6, 2: 2, 3: 2},
    )


def test_averages(sample_result):
    assert sample_result.average_letters_per_word() == pytest.approx(4.0)
    assert sample_result.average_syllables_per_word() == pytest.approx(1.5)
    assert sample_result.average_words_per_sentence() == pytest.approx(5.0)


def test_words_with_at_least_n_syllables(sample_result):
    assert sample_result.words_with_at_least_n_syllables(1) == 10
    assert sample_result.words_with_at_least_n_syllables(3) == 2
    assert sample_result.words_with_at_least_n_syllables(4) == 0
    assert sample_result.percentage_words_with_at_least_n_syllables(3) == pytest.approx(20.0)


def test_readability_indices(sample_result):
    assert sample_result.flesch_kincaid_reading_ease() == pytest.approx(74.86)
    assert sample_result.flesch_kincaid_grade_level() == pytest.approx(4.06)
    assert sample_result.gunning_fog_score() == pytest.approx(10.0)
    assert sample_result.coleman_liau_index() == pytest.approx(7.7)
    assert sample_result.smog_index() == pytest.approx(1.0430 * math.sqrt(33.1291))
    assert sample_result.automated_readability_index() == pytest.approx(-0.09)
    assert sample_result.dale_chall_readability_score() == pytest.approx(5.4635)


def test_dale_chall_adjustment_only_above_five_percent():
    result = Result(total_words=100, sentences=10, difficult_words=5)

    assert result.dale_chall_readability_score() == pytest.approx(0.1579 * 5 + 0.0496 * 10)


def test_average_words_per_sentence_without_sentences_returns_word_count():
    result = Result(total_words=7, sentences=0, letters=28, syllables=7)

    assert result.average_words_per_sentence() == 7.0


def test_other_formulas_treat_missing_sentences_as_one():
    result = Result(
        total_words=7,
        sentences=0,
        letters=28,
        syllables=7,
        word_count_per_syllable_count={1: 5, 3: 2},
    )

    assert result.automated_readability_index() == pytest.approx(4.71 * 4 + 0.5 * 7 - 21.43)
    assert result.coleman_liau_index() == pytest.approx(5.89 * 4 - 0.3 * (1 / 7) - 15.8)
    assert result.smog_index() == pytest.approx(1.0430 * math.sqrt(2 * 30 + 3.1291))
    assert result.dale_chall_readability_score() == pytest.approx(0.0496 * 7)


def test_empty_result_does_not_raise():
    result = Result()

    assert result.average_words_per_sentence() == 0.0
    assert result.average_syllables_per_word() == 0.0
    assert result.average_letters_per_word() == 0.0
    assert result.percentage_words_with_at_least_n_syllables(3) == 0.0
    scores = result.readability()
    assert all(not math.isnan(value) for value in scores.values())
    assert scores["FleschKincaidReadingEase"] == pytest.approx(206.835)


def test_proper_nouns_only_excluded_from_gunning_fog():
    result = Result(
        total_words=4,
        sentences=1,
        syllables=8,
        word_count_per_syllable_count={1: 2, 3: 2},
        proper_noun_word_count_per_syllable_count={3: 1},
    )

    assert result.words_with_at_least_n_syllables(3) == 2
    assert result.words_with_at_least_n_syllables(3, include_proper_nouns=False) == 1
    assert result.gunning_fog_score() == pytest.approx((4 + 25.0) * 0.4)
    assert result.smog_index() == pytest.approx(1.0430 * math.sqrt(2 * 30 + 3.1291))


def test_exclusive_count_never_negative():
    result = Result(
        total_words=1,
        word_count_per_syllable_count={1: 1},
        proper_noun_word_count_per_syllable_count={3: 2},
    )

    assert formulas.words_with_at_least_n_syllables(result, 3, include_proper_nouns=False) == 0


def test_readability_mapping_lists_every_index(sample_result):
    scores = sample_result.readability()

    assert set(formulas.READABILITY_FORMULAS) <= set(scores)
    assert scores["AverageWordsPerSentence"] == pytest.approx(5.0)
