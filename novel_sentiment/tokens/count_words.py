# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 11:10:05 2026

@author: mokuneva
"""

from .normalize_word import WORD_RE


def count_words(text):

    '''This function calculates the number of words in a text, using the same
    rules as word tokenization (letters with inner apostrophes, everything
    else is a separator).'''

    return sum(1 for _ in WORD_RE.finditer(text or ''))
