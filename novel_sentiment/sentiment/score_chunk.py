# -*- coding: utf-8 -*-
"""
Created on Wed Oct 14 15:02:11 2026

@author: mokuneva
"""

import logging

import numpy as np
from sklearn.feature_extraction.text import CountVectorizer

from ..tokens import normalize_word

log = logging.getLogger(__name__)


def score_chunk(token_chunks, vocabulary, score_array):
    """
    For a chunk of already tokenized texts, count occurrences of each vocabulary
    term and return a NumPy array of sentiment score sums.

    token_chunks is a list of word lists; the words are used as they are, so
    they have to be normalized the same way as the vocabulary.
    """
    if len(token_chunks) == 0 or len(vocabulary) == 0:
        return np.zeros(len(token_chunks), dtype=np.int64)
    # analyzer=list takes each chunk as its own list of terms
    vectorizer = CountVectorizer(vocabulary=vocabulary, analyzer=list)
    X = vectorizer.fit_transform(token_chunks)
    # X is (n_chunks, n_vocab), score_array is (n_vocab,)
    score_sum = X.dot(np.asarray(score_array))
    return np.asarray(score_sum).flatten()


def score_segments(tokens, store, lexicon_name, segment_key):
    """
    Net score of a scored lexicon (AFINN-style) per segment.

    Every segment that has at least one token is returned, with 0 when none of
    its words is in the lexicon. Returns dict SegmentKey -> int in first-seen order.
    """
    # 1. Group the normalized words by segment
    chunks = {}
    for token in tokens:
        chunks.setdefault(segment_key(token), []).append(normalize_word(token.text))

    # 2. Scored words of the lexicon and their scores, aligned by position
    # CountVectorizer rejects duplicate terms, the first score of a word wins
    scores = {}
    for entry in store.filter(lexicon_name, lambda label: label is None):
        if entry.score is not None:
            scores.setdefault(entry.word, entry.score)
    vocabulary = list(scores)
    score_array = np.array(list(scores.values()), dtype=np.int64)

    # 3. Document-term counts dotted with the scores
    keys = list(chunks)
    sums = score_chunk([chunks[k] for k in keys], vocabulary, score_array)

    log.info("Scored %d segments against %s (%d scored words)",
             len(keys), lexicon_name, len(vocabulary))
    return {k: int(s) for k, s in zip(keys, sums)}
