from .segment_keys import chapter_key, line_bucket_key
from .join_sentiment import anti_join_words, inner_join_sentiment, semi_join_sentiment
from .count_sentiment import count_sentiment
from .score_chunk import score_chunk, score_segments
from .count_word_sentiment import count_word_sentiment, top_words_per_sentiment
