import pytest

from textstats.core.dale_chall import DaleChallList, default_dale_chall_list


def test_bundled_list_is_loaded_once():
    words = default_dale_chall_list()

    assert words is default_dale_chall_list()
    assert len(words) > 2500
    for familiar in ("a", "cat", "dog", "house", "sat"):
        assert familiar in words


@pytest.mark.parametrize(
    "word, stem",
    [
        ("cats", "cat"),
        ("dog", "dog"),
        ("glass", "glas"),
        ("café", "caf"),
        ("Dogs", "Dog"),
    ],
)
def test_plural_stem(word, stem):
    assert DaleChallList([]).plural_stem(word) == stem


def test_plural_stem_without_ascii_letters():
    assert DaleChallList([]).plural_stem("éé") is None


def test_is_difficult(familiar_words):
    assert familiar_words.is_difficult("cat") is False
    assert familiar_words.is_difficult("cats") is False
    assert familiar_words.is_difficult("Cat") is True
    assert familiar_words.is_difficult("zebra") is True
    assert familiar_words.is_difficult("éé") is True


def test_from_path_ignores_comments(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("# familiar\nzebra yak  # trailing\n\nowl\n", encoding="utf-8")

    words = DaleChallList.from_path(path)

    assert len(words) == 3
    assert "yak" in words
    assert "#" not in words
