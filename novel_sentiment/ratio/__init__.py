from .segment_ratios import count_segment_words, segment_ratios
from .most_negative_segments import most_negative_segments
from .frames import CONTRIBUTION_COLUMNS, TALLY_COLUMNS, contribution_frame, tally_frame
