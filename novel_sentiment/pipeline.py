# -*- coding: utf-8 -*-
"""
Created on Fri Oct 16 13:37:15 2026

@author: mokuneva

End-to-end runs: tokenize -> join -> aggregate -> normalize. Each stage takes
the complete output of the previous one and every function returns a tidy
DataFrame ready for plotting.
"""

import logging
import time

import pandas as pd

from .config.settings import SENTIMENT
from .errors import InvalidModeError
from .ratio import (contribution_frame, count_segment_words, most_negative_segments,
                    segment_ratios, tally_frame)
from .sentiment import (anti_join_words, chapter_key, count_sentiment, count_word_sentiment,
                        line_bucket_key, score_segments)
from .tokens import MODES, unnest_tokens

log = logging.getLogger(__name__)

COMPARISON_COLUMNS = ['method', 'document_id', 'segment', 'sentiment']


def tokenize_corpus(documents, mode="word", to_lower=None, chapter_regex=None):
    """Tokenize (document_id, text) pairs into one list of tokens, document by document."""
    if mode not in MODES:
        raise InvalidModeError(mode, MODES)
    t0 = time.monotonic_ns()
    tokens = []
    n_documents = 0
    for document_id, text in documents:
        tokens.extend(unnest_tokens(document_id, text, mode, to_lower, chapter_regex))
        n_documents += 1
    dt = (time.monotonic_ns() - t0) // 1_000_000
    log.info("Tokenized %d documents into %d %s tokens in %d ms",
             n_documents, len(tokens), mode, dt)
    return tokens


def sentiment_trajectory(documents, store, lexicon_name=None, bucket_size=None):
    """
    Net sentiment through each document in buckets of bucket_size lines.
    Returns the tally_frame columns, one row per bucket.
    """
    if lexicon_name is None:
        lexicon_name = SENTIMENT['default_lexicon']
    key = line_bucket_key(bucket_size)

    tokens = tokenize_corpus(documents)
    counts = count_sentiment(tokens, store, lexicon_name, key)
    tallies = segment_ratios(counts, count_segment_words(tokens, key))

    log.info("Sentiment trajectory with %s: %d buckets", lexicon_name, len(tallies))
    return tally_frame(tallies)


def chapter_negativity(documents, store, lexicon_name=None, negative_label=None,
                       stop_words=None, include_preamble=False):
    """
    Most negative chapter(s) of each document by share of negative words.

    Parameters:
      documents: iterable of (document_id, text)
      store: LexiconStore
      lexicon_name: lexicon to use (default from settings)
      negative_label: label counted as negative (default from settings)
      stop_words: optional words removed before counting, from both the
          sentiment counts and the chapter word totals
      include_preamble: rank chapter 0, the text before the first heading
          (title page, contents); left out by default

    Returns:
      tally_frame rows of the chapters tied at the highest negative_ratio per
      document. Chapters without words are not ranked.
    """
    if lexicon_name is None:
        lexicon_name = SENTIMENT['default_lexicon']

    tokens = tokenize_corpus(documents)
    if stop_words:
        tokens = anti_join_words(tokens, stop_words)
    counts = count_sentiment(tokens, store, lexicon_name, chapter_key)
    tallies = segment_ratios(counts, count_segment_words(tokens, chapter_key),
                             negative_label=negative_label)
    if not include_preamble:
        tallies = [t for t in tallies if t.segment_key.segment != 0]
    worst = most_negative_segments(tallies)

    log.info("Most negative chapters with %s: %d over %d chapters",
             lexicon_name, len(worst), len(tallies))
    return tally_frame(worst)


def word_contributions(documents, store, lexicon_name=None, stop_words=None):
    """word, sentiment, n table of the words behind each label."""
    if lexicon_name is None:
        lexicon_name = SENTIMENT['default_lexicon']

    tokens = tokenize_corpus(documents)
    if stop_words:
        tokens = anti_join_words(tokens, stop_words)
    return contribution_frame(count_word_sentiment(tokens, store, lexicon_name))


def compare_lexicons(documents, store, lexicon_names, bucket_size=None):
    """
    Net sentiment per line bucket under several lexicons, stacked long.

    Scored lexicons contribute the sum of their scores; labelled lexicons
    contribute positive minus negative counts. Every bucket with words appears
    once per lexicon, with 0 where nothing matched.
    Returns a DataFrame with columns method, document_id, segment, sentiment.
    """
    key = line_bucket_key(bucket_size)
    tokens = tokenize_corpus(documents)
    word_counts = count_segment_words(tokens, key)
    # documents in input order, buckets by number
    segment_keys = [t.segment_key for t in segment_ratios({}, word_counts)]

    rows = []
    for lexicon_name in lexicon_names:
        if store.is_scored(lexicon_name):
            scores = score_segments(tokens, store, lexicon_name, key)
            for segment_key in segment_keys:
                rows.append((lexicon_name, segment_key.document_id, segment_key.segment,
                             scores.get(segment_key, 0)))
        else:
            counts = count_sentiment(tokens, store, lexicon_name, key)
            for tally in segment_ratios(counts, word_counts):
                rows.append((lexicon_name, tally.segment_key.document_id,
                             tally.segment_key.segment, tally.sentiment_score))

    log.info("Compared %d lexicons over %d buckets", len(lexicon_names), len(word_counts))
    df = pd.DataFrame(rows, columns=COMPARISON_COLUMNS)
    return df.astype({'segment': 'int64', 'sentiment': 'int64'})
