import collections
import unittest

import numpy as np

from novel_sentiment.errors import UnknownLexiconError
from novel_sentiment.lexicon import LexiconStore
from novel_sentiment.models import SegmentKey, Token, WordContribution
from novel_sentiment.sentiment import (anti_join_words, chapter_key, count_sentiment,
                                       count_word_sentiment, inner_join_sentiment,
                                       line_bucket_key, score_chunk, score_segments,
                                       semi_join_sentiment, top_words_per_sentiment)
from novel_sentiment.tokens import unnest_tokens

STORE = LexiconStore.from_rows([
    ("bing", "good", "positive"),
    ("bing", "happy", "positive"),
    ("bing", "love", "positive"),
    ("bing", "bad", "negative"),
    ("bing", "sad", "negative"),
    ("nrc", "angry", "anger"),
    ("nrc", "angry", "negative"),
    ("nrc", "happy", "joy"),
    ("nrc", "happy", "positive"),
    ("afinn", "good", 3),
    ("afinn", "bad", -3),
    ("afinn", "sad", -2),
])


def words(text, **kwargs):
    return list(unnest_tokens("doc", text, **kwargs))


class JoinTest(unittest.TestCase):
    def test_join_is_case_invariant(self):
        counts = count_sentiment(words("Good GOOD good"), STORE, "bing", line_bucket_key(80))
        self.assertEqual(counts, {SegmentKey("doc", 0): collections.Counter(positive=3)})

    def test_join_normalizes_tokens_kept_in_original_case(self):
        tokens = words("Good GOOD good!", to_lower=False)
        self.assertEqual(len(inner_join_sentiment(tokens, STORE, "bing")), 3)

    def test_end_to_end_scenario(self):
        tokens = words("The day was good but also bad bad.")
        counts = count_sentiment(tokens, STORE, "bing", chapter_key)
        tally = counts[SegmentKey("doc", 0)]
        self.assertEqual(tally["positive"], 1)
        self.assertEqual(tally["negative"], 2)

    def test_inner_join_drops_unmatched_and_fans_out(self):
        pairs = inner_join_sentiment(words("an angry dog"), STORE, "nrc")
        self.assertEqual([(t.text, e.sentiment_label) for t, e in pairs],
                         [("angry", "anger"), ("angry", "negative")])

    def test_fan_out_counts_labels_not_words(self):
        counts = count_sentiment(words("angry happy"), STORE, "nrc", chapter_key)
        self.assertEqual(counts[SegmentKey("doc", 0)],
                         collections.Counter(anger=1, negative=1, joy=1, positive=1))

    def test_semi_join(self):
        tokens = words("happy angry happy calm")
        self.assertEqual([t.text for t in semi_join_sentiment(tokens, STORE, "nrc")],
                         ["happy", "angry", "happy"])
        joy = semi_join_sentiment(tokens, STORE, "nrc", label="joy")
        self.assertEqual([t.position for t in joy], [0, 2])
        self.assertEqual(semi_join_sentiment(tokens, STORE, "nrc", label="fear"), [])

    def test_anti_join(self):
        tokens = anti_join_words(words("The good and the bad"), ["the", "AND"])
        self.assertEqual([t.text for t in tokens], ["good", "bad"])

    def test_empty_tokens_give_empty_tally(self):
        self.assertEqual(count_sentiment([], STORE, "bing", chapter_key), {})

    def test_missing_label_is_zero(self):
        counts = count_sentiment(words("good"), STORE, "bing", chapter_key)
        self.assertEqual(counts[SegmentKey("doc", 0)]["joy"], 0)

    def test_unknown_lexicon(self):
        with self.assertRaises(UnknownLexiconError):
            count_sentiment([], STORE, "loughran", chapter_key)
        with self.assertRaises(UnknownLexiconError):
            semi_join_sentiment(words("good"), STORE, "loughran")

    def test_scored_entries_have_no_label_counts(self):
        self.assertEqual(count_sentiment(words("good bad"), STORE, "afinn", chapter_key), {})


class SegmentKeyTest(unittest.TestCase):
    def test_line_buckets(self):
        key = line_bucket_key(80)
        self.assertEqual(key(Token("doc", 0, 79)), SegmentKey("doc", 0))
        self.assertEqual(key(Token("doc", 1, 80)), SegmentKey("doc", 1))
        self.assertEqual(key(Token("doc", 2, 161)), SegmentKey("doc", 2))

    def test_bucket_size_must_be_positive(self):
        with self.assertRaises(ValueError):
            line_bucket_key(0)

    def test_chapter_key(self):
        self.assertEqual(chapter_key(Token("doc", 0, 1, chapter_id=3)), SegmentKey("doc", 3))

    def test_counts_split_by_segment(self):
        tokens = words("good\nbad\nChapter 1\nbad")
        counts = count_sentiment(tokens, STORE, "bing", chapter_key)
        self.assertEqual(list(counts), [SegmentKey("doc", 0), SegmentKey("doc", 1)])
        self.assertEqual(counts[SegmentKey("doc", 1)]["negative"], 1)
        by_line = count_sentiment(tokens, STORE, "bing", line_bucket_key(2))
        self.assertEqual(list(by_line), [SegmentKey("doc", 0), SegmentKey("doc", 1), SegmentKey("doc", 2)])


class ScoreTest(unittest.TestCase):
    def test_score_chunk(self):
        sums = score_chunk([["good", "good", "x"], ["x"], []], ["good", "bad"], np.array([3, -3]))
        self.assertEqual(sums.tolist(), [6, 0, 0])

    def test_score_chunk_without_vocabulary(self):
        self.assertEqual(score_chunk([["good"]], [], np.array([])).tolist(), [0])

    def test_score_segments(self):
        tokens = words("Good bad sad\nnothing here")
        scores = score_segments(tokens, STORE, "afinn", line_bucket_key(2))
        self.assertEqual(scores, {SegmentKey("doc", 0): -2, SegmentKey("doc", 1): 0})


class WordContributionTest(unittest.TestCase):
    def test_ties_keep_first_seen_order(self):
        contributions = count_word_sentiment(words("sad happy bad good bad good"), STORE, "bing")
        self.assertEqual(contributions, [
            WordContribution("bad", "negative", 2),
            WordContribution("good", "positive", 2),
            WordContribution("sad", "negative", 1),
            WordContribution("happy", "positive", 1),
        ])

    def test_top_words_per_sentiment(self):
        contributions = count_word_sentiment(words("love good good love bad sad"), STORE, "bing")
        top = top_words_per_sentiment(contributions, n=1)
        self.assertEqual(list(top), ["positive", "negative"])
        self.assertEqual(top["positive"], [WordContribution("love", "positive", 2)])
        self.assertEqual(top["negative"], [WordContribution("bad", "negative", 1)])

    def test_top_words_n_must_be_positive(self):
        with self.assertRaises(ValueError):
            top_words_per_sentiment([], n=0)


if __name__ == '__main__':
    unittest.main()
