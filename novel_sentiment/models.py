# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 09:41:17 2026

@author: mokuneva

Typed records flowing through the tokenize -> join -> aggregate -> normalize
pipeline.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional


@dataclass(frozen=True, order=True)
class Token:
    """A word, sentence or chapter span with its position in the document.

    Field order makes the natural sort ``(document_id, position)``.
    """

    document_id: str
    position: int  # 0-based ordinal inside the document
    line_number: int  # 1-based line on which the token starts
    chapter_id: int = 0  # 0 = preamble before the first chapter heading
    text: str = ""


@dataclass(frozen=True)
class LexiconEntry:
    """One row of a sentiment lexicon.

    Binary/emotion lexicons set ``sentiment_label``; scored lexicons
    (AFINN-style) set ``score`` in -5..5.
    """

    lexicon_name: str
    word: str
    sentiment_label: Optional[str] = None
    score: Optional[int] = None


class SegmentKey(NamedTuple):
    """Group-by key: a line bucket or a chapter inside one document."""

    document_id: str
    segment: int


@dataclass(frozen=True)
class SentimentTally:
    segment_key: SegmentKey
    positive_count: int = 0
    negative_count: int = 0
    total_word_count: int = 0

    @property
    def sentiment_score(self) -> int:
        return self.positive_count - self.negative_count

    @property
    def negative_ratio(self) -> Optional[float]:
        # undefined for empty segments, which are left out of any ranking
        if self.total_word_count == 0:
            return None
        return self.negative_count / self.total_word_count


@dataclass(frozen=True)
class WordContribution:
    """How often a word was counted under one sentiment label."""

    word: str
    sentiment_label: str
    count: int
