# -*- coding: utf-8 -*-
"""
Created on Tue Oct 13 15:31:40 2026

@author: mokuneva
"""

import codecs
import logging
import os

import pandas as pd

from ..errors import LexiconFormatError
from ..tokens import normalize_word

log = logging.getLogger(__name__)

VALUE_COLUMNS = ('sentiment', 'value', 'score')


def read_word_list(file):
    """This function reads in a word list (e.g. stop words) from a .txt file, one word per line."""
    with codecs.open(file, 'r', 'utf-8-sig') as f:
        # splitlines() splits a string into a list, where each line is a list item.
        words = f.read().splitlines()
        return set(w for w in (normalize_word(d) for d in words) if w)


def read_lexicon(file, lexicon_name=None):
    """
    Read a lexicon from a .csv file into raw rows for LexiconStore.from_rows.

    The file needs a 'word' column and one of 'sentiment', 'value' or 'score'.
    The lexicon name comes from a 'lexicon' column, else from lexicon_name,
    else from the file name (e.g. 'afinn.csv' -> 'afinn').
    Returns a list of (lexicon_name, word, label_or_score) tuples.
    """
    # Read every cell as text, blanks stay blank instead of NaN
    df = pd.read_csv(file, encoding='utf-8-sig', dtype=str, keep_default_na=False)
    df.columns = [c.strip().lower() for c in df.columns]

    value_column = next((c for c in VALUE_COLUMNS if c in df.columns), None)
    if 'word' not in df.columns or value_column is None:
        raise LexiconFormatError(
            "%s: expected a 'word' column and one of %s, found %s"
            % (file, ", ".join(VALUE_COLUMNS), ", ".join(df.columns)))

    if 'lexicon' in df.columns:
        names = df['lexicon']
    else:
        if lexicon_name is None:
            lexicon_name = os.path.splitext(os.path.basename(str(file)))[0]
        names = [lexicon_name] * len(df)

    rows = list(zip(names, df['word'], df[value_column]))
    log.info("Read %d lexicon rows from %s", len(rows), file)
    return rows
