import io

import pytest

from textstats.core.tokenizer import (
    CharClass,
    TokenKind,
    Tokenizer,
    classify,
    iter_characters,
    iter_words,
    tokenize,
)


def _kinds(events, kind):
    return [event.text for event in events if event.kind is kind]


@pytest.mark.parametrize(
    "char, expected",
    [
        ("a", CharClass.LETTER),
        ("Z", CharClass.LETTER),
        ("é", CharClass.LETTER),
        (" ", CharClass.SPACE),
        ("\n", CharClass.SPACE),
        ("\t", CharClass.SPACE),
        ("\u00a0", CharClass.SPACE),
        ("\u2028", CharClass.SPACE),
        ("\u2029", CharClass.SPACE),
        (".", CharClass.PUNCTUATION),
        (",", CharClass.PUNCTUATION),
        ("\u2014", CharClass.PUNCTUATION),
        ("'", CharClass.PUNCTUATION),
        ("7", CharClass.OTHER),
        ("$", CharClass.OTHER),
        ("+", CharClass.OTHER),
        ("\ufffd", CharClass.OTHER),
    ],
)
def test_classify(char, expected):
    assert classify(char) is expected


def test_simple_sentence_events():
    events = list(tokenize("Cat sat."))

    assert _kinds(events, TokenKind.WORD) == ["Cat", "sat"]
    assert len(_kinds(events, TokenKind.LETTER)) == 6
    assert _kinds(events, TokenKind.SPACE) == [" "]
    assert _kinds(events, TokenKind.PUNCTUATION) == ["."]
    assert _kinds(events, TokenKind.SENTENCE_END) == ["."]


def test_word_is_emitted_after_the_terminating_character():
    tokenizer = Tokenizer()

    assert [event.kind for event in tokenizer.feed("h")] == [TokenKind.LETTER]
    assert [event.kind for event in tokenizer.feed("i")] == [TokenKind.LETTER]
    assert tokenizer.feed("!") == [
        (TokenKind.PUNCTUATION, "!"),
        (TokenKind.SENTENCE_END, "!"),
        (TokenKind.WORD, "hi"),
    ]


def test_trailing_word_is_flushed_at_end_of_stream():
    assert list(iter_words("no terminator here")) == ["no", "terminator", "here"]


def test_only_period_bang_and_question_end_sentences():
    events = list(tokenize("One. Two! Three? Four; five, six: seven"))

    assert len(_kinds(events, TokenKind.SENTENCE_END)) == 3
    assert len(_kinds(events, TokenKind.PUNCTUATION)) == 6


def test_ellipsis_counts_every_terminator():
    events = list(tokenize("Wait..."))

    assert _kinds(events, TokenKind.WORD) == ["Wait"]
    assert len(_kinds(events, TokenKind.SENTENCE_END)) == 3


def test_digits_are_ignored_without_splitting_words():
    events = list(tokenize("a1b"))

    assert _kinds(events, TokenKind.WORD) == ["ab"]
    assert len(_kinds(events, TokenKind.LETTER)) == 2
    assert _kinds(events, TokenKind.SPACE) == []
    assert _kinds(events, TokenKind.PUNCTUATION) == []


def test_symbols_only_produce_no_events():
    assert list(tokenize("123 + 456")) == [
        (TokenKind.SPACE, " "),
        (TokenKind.SPACE, " "),
    ]


def test_apostrophe_splits_contractions():
    assert list(iter_words("don't")) == ["don", "t"]


def test_repeated_separators_do_not_emit_empty_words():
    assert list(iter_words("  hello,,  world  ")) == ["hello", "world"]


def test_unicode_letters_stay_in_words():
    assert list(iter_words("naïve café")) == ["naïve", "café"]


def test_empty_input():
    assert list(tokenize("")) == []


def test_text_file_object_input():
    assert list(iter_words(io.StringIO("ham ham."))) == ["ham", "ham"]


def test_binary_chunks_split_inside_a_character():
    encoded = "café au lait".encode("utf-8")
    split_at = encoded.index("é".encode("utf-8")) + 1
    chunks = [encoded[:split_at], encoded[split_at:]]

    assert list(iter_words(chunks)) == ["café", "au", "lait"]


def test_invalid_utf8_is_replaced_and_ignored():
    assert list(iter_characters(b"ab\xffc")) == ["a", "b", "\ufffd", "c"]
    assert list(iter_words(io.BytesIO(b"ab\xffc"))) == ["abc"]


def test_read_errors_propagate():
    class FailingReader:
        def read(self, size):
            raise OSError("disk gone")

    with pytest.raises(OSError):
        list(tokenize(FailingReader()))


def test_line_and_paragraph_separators_end_words():
    text = "cat\N{LINE SEPARATOR}sat\N{PARAGRAPH SEPARATOR}mat"

    assert list(iter_words(text)) == ["cat", "sat", "mat"]
