"""Single-pass character classifier that segments text into words."""

from __future__ import annotations

import codecs
import unicodedata
from enum import Enum
from typing import IO, Iterable, Iterator, List, NamedTuple, Union

SENTENCE_TERMINATORS = frozenset(".!?")

# Latin-1 whitespace outside the Z* categories.
_SPACE_CONTROLS = frozenset("\t\n\v\f\r\x85")
_SPACE_CATEGORIES = frozenset(("Zs", "Zl", "Zp"))

_CHUNK_SIZE = 8192

TextSource = Union[str, bytes, IO[str], IO[bytes], Iterable[Union[str, bytes]]]


class CharClass(Enum):
    LETTER = "letter"
    SPACE = "space"
    PUNCTUATION = "punctuation"
    OTHER = "other"


class TokenKind(Enum):
    LETTER = "letter"
    SPACE = "space"
    PUNCTUATION = "punctuation"
    SENTENCE_END = "sentence_end"
    WORD = "word"


class TokenEvent(NamedTuple):
    kind: TokenKind
    text: str


def classify(char: str) -> CharClass:
    """Return the class of a single character."""

    category = unicodedata.category(char)
    if category.startswith("L"):
        return CharClass.LETTER
    if category in _SPACE_CATEGORIES or char in _SPACE_CONTROLS:
        return CharClass.SPACE
    if category.startswith("P"):
        return CharClass.PUNCTUATION
    return CharClass.OTHER


class Tokenizer:
    """Word/sentence segmentation state machine.

    Letters accumulate in a buffer; spaces and punctuation mark the end of a
    word, which is emitted after the character that ended it. Digits, symbols
    and control characters are ignored entirely: they are not buffered, do not
    end the current word and are not counted, so ``"a1b"`` yields ``"ab"``.
    """

    def __init__(self) -> None:
        self._buffer: List[str] = []
        self._end_of_word = False

    def feed(self, char: str) -> List[TokenEvent]:
        events: List[TokenEvent] = []
        char_class = classify(char)

        if char_class is CharClass.LETTER:
            self._buffer.append(char)
            self._end_of_word = False
            events.append(TokenEvent(TokenKind.LETTER, char))
        elif char_class is CharClass.SPACE:
            self._end_of_word = True
            events.append(TokenEvent(TokenKind.SPACE, char))
        elif char_class is CharClass.PUNCTUATION:
            self._end_of_word = True
            events.append(TokenEvent(TokenKind.PUNCTUATION, char))
            if char in SENTENCE_TERMINATORS:
                events.append(TokenEvent(TokenKind.SENTENCE_END, char))

        if self._end_of_word and self._buffer:
            events.append(TokenEvent(TokenKind.WORD, "".join(self._buffer)))
            self._buffer.clear()
            self._end_of_word = False

        return events

    def finish(self) -> List[TokenEvent]:
        """Flush a word left in the buffer when the text ends mid-word."""

        if not self._buffer:
            return []
        word = "".join(self._buffer)
        self._buffer.clear()
        self._end_of_word = False
        return [TokenEvent(TokenKind.WORD, word)]


def _decode_chunks(chunks: Iterable[Union[str, bytes]]) -> Iterator[str]:
    # Invalid UTF-8 decodes to U+FFFD, which classifies as OTHER.
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    for chunk in chunks:
        if isinstance(chunk, bytes):
            text = decoder.decode(chunk)
        else:
            text = chunk
        if text:
            yield text
    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail


def _read_chunks(handle: IO) -> Iterator[Union[str, bytes]]:
    while True:
        chunk = handle.read(_CHUNK_SIZE)
        if not chunk:
            return
        yield chunk


def iter_characters(source: TextSource) -> Iterator[str]:
    """Yield the characters of ``source`` one at a time.

    ``source`` may be a string, raw bytes, a text or binary file object, or
    any iterable of string/bytes chunks. Read errors propagate to the caller.
    """

    if isinstance(source, str):
        yield from source
        return
    if isinstance(source, (bytes, bytearray)):
        chunks: Iterable[Union[str, bytes]] = [bytes(source)]
    elif hasattr(source, "read"):
        chunks = _read_chunks(source)  # type: ignore[arg-type]
    else:
        chunks = source  # type: ignore[assignment]

    for text in _decode_chunks(chunks):
        yield from text


def tokenize(source: TextSource) -> Iterator[TokenEvent]:
    """Run a fresh :class:`Tokenizer` over ``source``."""

    tokenizer = Tokenizer()
    for char in iter_characters(source):
        yield from tokenizer.feed(char)
    yield from tokenizer.finish()


def iter_words(source: TextSource) -> Iterator[str]:
    for event in tokenize(source):
        if event.kind is TokenKind.WORD:
            yield event.text


__all__ = [
    "CharClass",
    "TokenKind",
    "TokenEvent",
    "Tokenizer",
    "classify",
    "iter_characters",
    "iter_words",
    "tokenize",
    "SENTENCE_TERMINATORS",
]
