# -*- coding: utf-8 -*-
"""
Created on Wed Oct 14 10:47:03 2026

@author: mokuneva

Hash joins between a token sequence and one lexicon of a LexiconStore. The
lexicon's word index (keyed by lexicon_key) is the build side and tokens are
probed in order with normalize_word, so neither case nor punctuation around a
token decides whether a word matches.
"""

import logging

from ..tokens import normalize_word

log = logging.getLogger(__name__)


def inner_join_sentiment(tokens, store, lexicon_name):
    """
    Pair every token with each lexicon entry for its word.

    Tokens without an entry are dropped. A word carrying several labels
    (e.g. 'anger' and 'negative') yields one pair per label, so label tallies
    fan out while the token itself is still a single word.

    Returns a list of (Token, LexiconEntry) in token order.
    """
    index = store.index(lexicon_name)
    pairs = []
    n_tokens = 0
    for token in tokens:
        n_tokens += 1
        # sort so the fan-out order does not depend on set iteration
        for entry in sorted(index.get(normalize_word(token.text), ()), key=_entry_order):
            pairs.append((token, entry))
    log.debug("inner join on %s: %d tokens -> %d pairs", lexicon_name, n_tokens, len(pairs))
    return pairs


def semi_join_sentiment(tokens, store, lexicon_name, label=None):
    """
    Keep the tokens that have an entry in the lexicon (with the given label,
    if any). Lexicon columns are not brought in and every token appears at
    most once, e.g. "which tokens are joy words".
    """
    index = store.index(lexicon_name)
    matched = []
    for token in tokens:
        entries = index.get(normalize_word(token.text))
        if not entries:
            continue
        if label is None or any(e.sentiment_label == label for e in entries):
            matched.append(token)
    return matched


def anti_join_words(tokens, words):
    """Drop tokens whose normalized text is in words (stop-word removal)."""
    words = set(normalize_word(w) for w in words)
    return [token for token in tokens if normalize_word(token.text) not in words]


def _entry_order(entry):
    return (entry.sentiment_label or '', entry.score if entry.score is not None else 0)
