# -*- coding: utf-8 -*-
"""
Created on Fri Oct 16 10:03:27 2026

@author: mokuneva

Tidy DataFrames handed to plotting code. The column names are the contract.
"""

import numpy as np
import pandas as pd

TALLY_COLUMNS = ['document_id', 'segment', 'positive', 'negative', 'words',
                 'sentiment', 'negative_ratio']
CONTRIBUTION_COLUMNS = ['word', 'sentiment', 'n']


def tally_frame(tallies):
    """One row per segment; negative_ratio is NaN where it is undefined."""
    rows = [
        {
            'document_id': t.segment_key.document_id,
            'segment': t.segment_key.segment,
            'positive': t.positive_count,
            'negative': t.negative_count,
            'words': t.total_word_count,
            'sentiment': t.sentiment_score,
            'negative_ratio': np.nan if t.negative_ratio is None else t.negative_ratio,
        }
        for t in tallies
    ]
    df = pd.DataFrame(rows, columns=TALLY_COLUMNS)
    return df.astype({'segment': 'int64', 'positive': 'int64', 'negative': 'int64',
                      'words': 'int64', 'sentiment': 'int64', 'negative_ratio': 'float64'})


def contribution_frame(contributions):
    """word, sentiment, n rows for word clouds and contribution bar charts."""
    df = pd.DataFrame([(c.word, c.sentiment_label, c.count) for c in contributions],
                      columns=CONTRIBUTION_COLUMNS)
    return df.astype({'n': 'int64'})
