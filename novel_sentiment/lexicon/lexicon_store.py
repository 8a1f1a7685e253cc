# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 14:05:12 2026

@author: mokuneva
"""

import collections
import logging
import numbers
import re

from ..errors import LexiconFormatError, UnknownLexiconError
from ..models import LexiconEntry
from ..tokens import WORD_RE, lexicon_key

log = logging.getLogger(__name__)

SCORE_RANGE = (-5, 5)

# ASCII digits only, one optional sign
_SCORE_RE = re.compile(r"[+-]?[0-9]+")


class LexiconStore():

    """
    Immutable table of sentiment lexicons keyed by (lexicon_name, word).

    Binary lexicons (positive/negative), emotion lexicons (one row per label)
    and scored lexicons (an integer per word) live side by side; the
    lexicon_name column tells them apart so callers never deal with the
    source schemas.
    """

    def __init__(self, entries=()):

        self._entries = {}
        self._index = {}

        for entry in entries:
            rows = self._entries.setdefault(entry.lexicon_name, [])
            words = self._index.setdefault(entry.lexicon_name, {})
            matches = words.setdefault(entry.word, set())
            # the same row loaded twice is kept once
            if entry in matches:
                continue
            matches.add(entry)
            rows.append(entry)

        self._entries = {name: tuple(rows) for name, rows in self._entries.items()}
        self._index = {name: {word: frozenset(matches) for word, matches in words.items()}
                       for name, words in self._index.items()}

        log.debug("LexiconStore built: %s",
                  ", ".join("%s=%d" % (name, len(rows)) for name, rows in self._entries.items()))

        for name, words in self._index.items():
            unmatchable = [w for w in words if not WORD_RE.fullmatch(w)]
            if unmatchable:
                log.debug("%s: %d word(s) can never match a word token, e.g. %r",
                          name, len(unmatchable), unmatchable[0])

    @classmethod
    def from_rows(cls, rows):

        """Build a store from raw (lexicon_name, word, label_or_score) rows."""

        return cls(_entry_from_row(*row) for row in rows)

    @property
    def lexicon_names(self):
        return tuple(self._entries)

    def __contains__(self, lexicon_name):
        return lexicon_name in self._entries

    def __len__(self):
        return sum(len(rows) for rows in self._entries.values())

    def __repr__(self):
        return "LexiconStore(%s)" % ", ".join(
            "%s=%d" % (name, len(rows)) for name, rows in self._entries.items())

    def _words(self, lexicon_name):
        try:
            return self._index[lexicon_name]
        except KeyError:
            raise UnknownLexiconError(lexicon_name, self.lexicon_names) from None

    def lookup(self, word, lexicon_name):

        """
        Entries for a word in one lexicon. An absent word gives an empty set:
        it is unscored, which is not the same as a present score of 0.
        """

        return self._words(lexicon_name).get(lexicon_key(word), frozenset())

    def index(self, lexicon_name):
        """word -> entries mapping of one lexicon, the build side of a hash join."""
        return self._words(lexicon_name)

    def filter(self, lexicon_name, predicate):

        """Entries of a lexicon whose label satisfies predicate, in load order."""

        self._words(lexicon_name)
        return tuple(e for e in self._entries[lexicon_name] if predicate(e.sentiment_label))

    def labels(self, lexicon_name):
        """Distinct labels of a lexicon in first-seen order."""
        self._words(lexicon_name)
        seen = {}
        for entry in self._entries[lexicon_name]:
            if entry.sentiment_label is not None:
                seen.setdefault(entry.sentiment_label, None)
        return tuple(seen)

    def label_counts(self, lexicon_name):
        """Number of words carrying each label, e.g. the positive/negative balance."""
        self._words(lexicon_name)
        return collections.Counter(e.sentiment_label for e in self._entries[lexicon_name]
                                   if e.sentiment_label is not None)

    def is_scored(self, lexicon_name):
        """True when the lexicon carries numeric scores rather than labels."""
        self._words(lexicon_name)
        return any(e.score is not None for e in self._entries[lexicon_name])


def _entry_from_row(lexicon_name, word, value):

    '''Normalize one raw lexicon row: integer-like values become scores,
    any other text becomes a lower-cased label.'''

    lexicon_name = str(lexicon_name).strip()
    key = lexicon_key(str(word))
    if not lexicon_name or not key:
        raise LexiconFormatError("blank lexicon name or word in row %r"
                                 % ((lexicon_name, word, value),))

    score = _as_score(value)
    if score is not None:
        if not SCORE_RANGE[0] <= score <= SCORE_RANGE[1]:
            raise LexiconFormatError("score %d for %r in %s is outside %d..%d"
                                     % ((score, key, lexicon_name) + SCORE_RANGE))
        return LexiconEntry(lexicon_name, key, score=score)

    label = str(value).strip().lower() if value is not None else ''
    if not label or label == 'nan':
        raise LexiconFormatError("missing label for %r in %s" % (key, lexicon_name))
    return LexiconEntry(lexicon_name, key, sentiment_label=label)


def _as_score(value):
    if isinstance(value, bool):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, numbers.Real):
        # pandas reads integer columns with gaps as floats
        value = float(value)
        if value != value:
            return None
        if not value.is_integer():
            raise LexiconFormatError("non-integer score %r" % value)
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if _SCORE_RE.fullmatch(text):
            return int(text)
        if text.lstrip('+-').isdigit():
            # '--3', '+-3', superscript digits
            raise LexiconFormatError("malformed score %r" % value)
    return None
