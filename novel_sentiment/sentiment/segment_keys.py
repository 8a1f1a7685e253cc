# -*- coding: utf-8 -*-
"""
Created on Wed Oct 14 10:12:26 2026

@author: mokuneva
"""

from ..config.settings import SENTIMENT
from ..models import SegmentKey


def line_bucket_key(bucket_size=None):
    """
    Key function grouping tokens into buckets of bucket_size lines:
    (document_id, line_number // bucket_size).
    """
    if bucket_size is None:
        bucket_size = SENTIMENT['bucket_size']
    if bucket_size <= 0:
        raise ValueError("bucket_size must be positive, got %r" % bucket_size)

    def key(token):
        return SegmentKey(token.document_id, token.line_number // bucket_size)

    return key


def chapter_key(token):
    """Key function grouping tokens by (document_id, chapter_id)."""
    return SegmentKey(token.document_id, token.chapter_id)
