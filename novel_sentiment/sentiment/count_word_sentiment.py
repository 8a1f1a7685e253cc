# -*- coding: utf-8 -*-
"""
Created on Thu Oct 15 09:34:48 2026

@author: mokuneva
"""

from ..config.settings import SENTIMENT
from ..models import WordContribution
from .join_sentiment import inner_join_sentiment


def count_word_sentiment(tokens, store, lexicon_name):
    """
    How much each word contributes to each sentiment label.

    Returns a list of WordContribution sorted by count, most frequent first.
    Words with equal counts keep the order in which they were first met in the
    text, not alphabetical order.
    """
    # dicts keep insertion order, i.e. the order of first occurrence
    counts = {}
    for token, entry in inner_join_sentiment(tokens, store, lexicon_name):
        if entry.sentiment_label is None:
            continue
        key = (entry.word, entry.sentiment_label)
        counts[key] = counts.get(key, 0) + 1

    contributions = [WordContribution(word, label, n) for (word, label), n in counts.items()]
    # sorted() is stable, so ties stay in first-seen order
    return sorted(contributions, key=lambda c: c.count, reverse=True)


def top_words_per_sentiment(contributions, n=None):
    """
    Function to select the 'n' most frequent words for each sentiment label.
    Labels appear in first-seen order and ties keep their input order.
    Returns a dict label -> list of WordContribution.
    """
    if n is None:
        n = SENTIMENT['top_n']
    if n <= 0:
        raise ValueError("n must be positive, got %r" % n)

    by_label = {}
    for contribution in contributions:
        by_label.setdefault(contribution.sentiment_label, []).append(contribution)

    return {label: sorted(words, key=lambda c: c.count, reverse=True)[:n]
            for label, words in by_label.items()}
