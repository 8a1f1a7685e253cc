from .lexicon_store import SCORE_RANGE, LexiconStore
from .read_lexicon import read_lexicon, read_word_list
