# -*- coding: utf-8 -*-
"""
Created on Wed Oct 14 13:20:55 2026

@author: mokuneva
"""

import collections
import logging

from .join_sentiment import inner_join_sentiment

log = logging.getLogger(__name__)


def count_sentiment(tokens, store, lexicon_name, segment_key):
    """
    Count matched tokens per segment, broken out by sentiment label.

    Parameters:
      tokens: iterable of Token
      store: LexiconStore
      lexicon_name: lexicon to join against
      segment_key: function Token -> SegmentKey (line_bucket_key(...) or chapter_key)

    Returns:
      dict SegmentKey -> Counter(label -> count), segments in first-seen order.
      Segments without any matched token are absent and labels the lexicon
      never uses simply read as zero from the Counter. Scored entries carry no
      label and do not contribute here (see score_segments).
    """
    counts = {}
    for token, entry in inner_join_sentiment(tokens, store, lexicon_name):
        if entry.sentiment_label is None:
            continue
        counts.setdefault(segment_key(token), collections.Counter())[entry.sentiment_label] += 1

    log.info("Counted %s sentiment in %d segments", lexicon_name, len(counts))
    return counts
