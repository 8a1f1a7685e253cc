"""Lexicon-based sentiment scoring of novels with tidy, table-shaped outputs."""

from .errors import (InvalidModeError, LexiconFormatError, NovelSentimentError,
                     UnknownLexiconError)
from .models import LexiconEntry, SegmentKey, SentimentTally, Token, WordContribution
from .lexicon import LexiconStore, read_lexicon, read_word_list
from .tokens import count_words, normalize_word, unnest_tokens
from .sentiment import (anti_join_words, chapter_key, count_sentiment, count_word_sentiment,
                        inner_join_sentiment, line_bucket_key, score_chunk, score_segments,
                        semi_join_sentiment, top_words_per_sentiment)
from .ratio import (contribution_frame, count_segment_words, most_negative_segments,
                    segment_ratios, tally_frame)
from .pipeline import (chapter_negativity, compare_lexicons, sentiment_trajectory,
                       tokenize_corpus, word_contributions)

__version__ = "0.1.0"
