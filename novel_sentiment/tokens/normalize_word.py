# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 11:02:51 2026

@author: mokuneva
"""

import re

# a word is a run of letters, optionally joined by inner apostrophes (don't, o'er)
# [^\W\d_] matches any Unicode letter, including Latin letters with diacritics
WORD_RE = re.compile(r"[^\W\d_]+(?:['’][^\W\d_]+)*")

_EDGE_RE = re.compile(r"^[\W\d_]+|[\W\d_]+$")


def normalize_word(word):

    '''
    Join key of a token: typographic apostrophes are replaced by plain ones,
    leading and trailing punctuation, digits and whitespace are removed and
    the word is lower-cased. For a word token this equals lexicon_key.
    '''

    word = (word or "").replace('’', "'")
    return _EDGE_RE.sub('', word).lower()


def lexicon_key(word):

    '''
    Key of a lexicon word: apostrophes as in normalize_word, surrounding
    whitespace trimmed and lower-cased. Nothing else is stripped, so entries
    like 'a+' or '2-faces' stay distinct from 'a' and 'faces'; such words
    never come out of word tokenization and never match a token.
    '''

    return (word or "").replace('’', "'").strip().lower()
