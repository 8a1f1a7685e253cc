# -*- coding: utf-8 -*-
"""
Created on Mon Oct 12 09:58:30 2026

@author: mokuneva
"""


class NovelSentimentError(Exception):
    """Base class for configuration errors raised by novel_sentiment."""


class InvalidModeError(NovelSentimentError, ValueError):
    """Unrecognized tokenization mode."""

    def __init__(self, mode, allowed):
        self.mode = mode
        self.allowed = tuple(allowed)
        super().__init__(
            "unknown tokenization mode {!r}, expected one of {}".format(
                mode, ", ".join(self.allowed)))


class UnknownLexiconError(NovelSentimentError, KeyError):
    """Query against a lexicon name the store was not built with."""

    def __init__(self, lexicon_name, available):
        self.lexicon_name = lexicon_name
        self.available = tuple(available)
        super().__init__(lexicon_name)

    def __str__(self):
        return "unknown lexicon {!r}, available: {}".format(
            self.lexicon_name, ", ".join(self.available) or "none")


class LexiconFormatError(NovelSentimentError, ValueError):
    """A raw lexicon row that cannot be normalized."""
