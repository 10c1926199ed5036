"""Fold tokenizer events into a running :class:`Result`."""

from __future__ import annotations

from typing import Iterable, Optional

from .dale_chall import DaleChallList, default_dale_chall_list
from .models import Result, Word
from .reconciler import SyllableReconciler
from .tokenizer import TokenEvent, TokenKind


def _increment(histogram: dict, key: int) -> None:
    histogram[key] = histogram.get(key, 0) + 1


class Aggregator:
    """Sole writer of one pass's :class:`Result`.

    Syllable counts are reconciled afresh for every occurrence; the stored
    :class:`Word` keeps the analysis of its first occurrence. Use one
    aggregator per text, they share nothing mutable with each other.
    """

    def __init__(
        self,
        reconciler: Optional[SyllableReconciler] = None,
        *,
        dale_chall: Optional[DaleChallList] = None,
        track_proper_nouns: bool = False,
        result: Optional[Result] = None,
    ) -> None:
        self.reconciler = reconciler or SyllableReconciler()
        self.dale_chall = dale_chall if dale_chall is not None else default_dale_chall_list()
        self.track_proper_nouns = track_proper_nouns
        self.result = result if result is not None else Result()

    def ingest(self, word: str) -> None:
        res = self.result
        res.total_words += 1

        analysis = self.reconciler.analyse_word(word)
        most_likely = analysis.most_likely_count

        entry = res.word_list.get(word)
        if entry is not None:
            entry.occurrences += 1
        else:
            res.word_list[word] = Word(word=word, syllables=analysis)
            res.unique_words += 1
            _increment(res.unique_word_count_per_syllable_count, most_likely)

        res.syllables += most_likely
        _increment(res.word_count_per_syllable_count, most_likely)

        if self.track_proper_nouns and word[:1].isupper():
            _increment(res.proper_noun_word_count_per_syllable_count, most_likely)

        if self.dale_chall.is_difficult(word):
            res.difficult_words += 1

    def handle(self, event: TokenEvent) -> None:
        kind = event.kind
        res = self.result
        if kind is TokenKind.LETTER:
            res.letters += 1
        elif kind is TokenKind.SPACE:
            res.spaces += 1
        elif kind is TokenKind.PUNCTUATION:
            res.punctuation += 1
        elif kind is TokenKind.SENTENCE_END:
            res.sentences += 1
        elif kind is TokenKind.WORD:
            self.ingest(event.text)

    def consume(self, events: Iterable[TokenEvent]) -> Result:
        for event in events:
            self.handle(event)
        return self.result


__all__ = ["Aggregator"]
