# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 11:26:38 2026

@author: mokuneva

Split one document into word, sentence or chapter tokens, each tagged with the
line it starts on and the chapter that line belongs to.
"""

import re
import logging
from bisect import bisect_right

from nltk.tokenize.punkt import PunktSentenceTokenizer

from ..config.settings import TOKENS
from ..errors import InvalidModeError
from ..models import Token
from .normalize_word import WORD_RE, normalize_word

log = logging.getLogger(__name__)

MODES = ("word", "sentence", "chapter")

# untrained Punkt parameters work without downloading the punkt models
_punkt = PunktSentenceTokenizer()


def chapter_pattern(chapter_regex=None):
    """Compile a case-insensitive chapter heading pattern (default from settings)."""
    if chapter_regex is None:
        chapter_regex = TOKENS["chapter_regex"]
    if isinstance(chapter_regex, re.Pattern):
        return chapter_regex
    return re.compile(chapter_regex, re.IGNORECASE)


def unnest_tokens(document_id, text, mode="word", to_lower=None, chapter_regex=None):
    """
    Tokenize a document lazily.

    Parameters:
      document_id: identifier copied onto every token (e.g. the book title)
      text: the already decoded document text
      mode: "word", "sentence" or "chapter"
      to_lower: lower-case word tokens and strip their punctuation (default from settings);
          when False word tokens keep their original spelling
      chapter_regex: pattern for chapter heading lines, matched case-insensitively

    Returns:
      An iterator of Token ordered by position. The mode is checked here, so an
      unknown mode raises InvalidModeError before any iteration happens.
    """
    if mode not in _TOKENIZERS:
        raise InvalidModeError(mode, MODES)
    if to_lower is None:
        to_lower = TOKENS["to_lower"]
    heading = chapter_pattern(chapter_regex)
    return _TOKENIZERS[mode](document_id, text or "", to_lower, heading)


def line_chapters(lines, heading):
    """Running chapter number per line; lines before the first heading are chapter 0."""
    chapters = []
    chapter = 0
    for line in lines:
        if heading.search(line):
            chapter += 1
        chapters.append(chapter)
    return chapters


def _word_tokens(document_id, text, to_lower, heading):
    lines = text.splitlines()
    chapters = line_chapters(lines, heading)
    position = 0
    for line_number, line in enumerate(lines, start=1):
        for match in WORD_RE.finditer(line):
            word = match.group(0)
            yield Token(document_id, position, line_number, chapters[line_number - 1],
                        normalize_word(word) if to_lower else word)
            position += 1


def _sentence_tokens(document_id, text, to_lower, heading):
    if not text.strip():
        return
    lines = text.splitlines(keepends=True)
    chapters = line_chapters(lines, heading)
    # character offset at which each line starts
    line_starts = []
    offset = 0
    for line in lines:
        line_starts.append(offset)
        offset += len(line)

    position = 0
    for start, end in _punkt.span_tokenize(text):
        sentence = " ".join(text[start:end].split())
        if not sentence:
            continue
        line_number = bisect_right(line_starts, start)
        yield Token(document_id, position, line_number, chapters[line_number - 1], sentence)
        position += 1
    log.debug("%s: %d sentences", document_id, position)


def _chapter_tokens(document_id, text, to_lower, heading):
    if not text.strip():
        return
    position = 0
    chapter_id = 0
    first_line = 1
    current = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        if heading.search(line):
            # close the running span; the preamble is emitted even when empty
            yield Token(document_id, position, first_line, chapter_id, "\n".join(current).strip())
            position += 1
            chapter_id += 1
            first_line = line_number
            current = []
        current.append(line)
    yield Token(document_id, position, first_line, chapter_id, "\n".join(current).strip())
    log.debug("%s: %d chapters after the preamble", document_id, chapter_id)


_TOKENIZERS = {
    "word": _word_tokens,
    "sentence": _sentence_tokens,
    "chapter": _chapter_tokens,
}
