# -*- coding: utf-8 -*-
"""
Created on Thu Oct 15 11:48:09 2026

@author: mokuneva
"""

import collections
import logging

from ..config.settings import SENTIMENT
from ..models import SegmentKey, SentimentTally

log = logging.getLogger(__name__)


def count_segment_words(tokens, segment_key):

    '''Total number of tokens per segment, the denominator of negative_ratio.'''

    return dict(collections.Counter(segment_key(token) for token in tokens))


def segment_ratios(label_counts, word_counts, positive_label=None, negative_label=None):
    """
    Combine per-segment label counts with per-segment word totals.

    Parameters:
      label_counts: dict SegmentKey -> {label: count}, as returned by count_sentiment
      word_counts: dict SegmentKey -> total words, as returned by count_segment_words
      positive_label, negative_label: labels read from label_counts (defaults from settings)

    Returns:
      list of SentimentTally. Documents keep the order in which they first
      appear (word_counts first, then label_counts), segments inside a
      document are sorted by number. A segment present on only
      one side is kept and the other side counts as zero. A segment with
      sentiment counts but no word total has total_word_count 0, so its
      negative_ratio is undefined.
    """
    if positive_label is None:
        positive_label = SENTIMENT['positive_label']
    if negative_label is None:
        negative_label = SENTIMENT['negative_label']

    missing = [k for k in label_counts if k not in word_counts]
    if missing:
        log.warning("%d segment(s) have sentiment counts but no word count, e.g. %s",
                    len(missing), missing[0])

    # first-seen position of each document
    documents = {}
    for key in list(word_counts) + list(label_counts):
        documents.setdefault(key[0], len(documents))

    tallies = []
    for key in sorted(set(word_counts) | set(label_counts),
                      key=lambda k: (documents[k[0]], k[1])):
        labels = label_counts.get(key, {})
        tallies.append(SentimentTally(
            segment_key=SegmentKey(*key),
            positive_count=labels.get(positive_label, 0),
            negative_count=labels.get(negative_label, 0),
            total_word_count=word_counts.get(key, 0),
        ))
    return tallies
