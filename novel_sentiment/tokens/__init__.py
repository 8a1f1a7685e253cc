from .normalize_word import WORD_RE, lexicon_key, normalize_word
from .count_words import count_words
from .unnest_tokens import MODES, chapter_pattern, line_chapters, unnest_tokens
