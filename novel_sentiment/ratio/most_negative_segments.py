# -*- coding: utf-8 -*-
"""
Created on Thu Oct 15 14:16:52 2026

@author: mokuneva
"""


def most_negative_segments(tallies):
    """
    Function to select, for each document, the segment(s) with the highest
    negative ratio. All segments tied at the maximum are returned, not an
    arbitrary one. Segments without words (undefined ratio) are not ranked.
    Documents appear in first-seen order, segments in input order.
    """
    # Group the rankable tallies by document
    by_document = {}
    for tally in tallies:
        if tally.negative_ratio is None:
            continue
        by_document.setdefault(tally.segment_key.document_id, []).append(tally)

    selected = []
    # Iterate through each document and keep every tally at the maximum
    for document_tallies in by_document.values():
        top = max(t.negative_ratio for t in document_tallies)
        selected.extend(t for t in document_tallies if t.negative_ratio == top)
    return selected
