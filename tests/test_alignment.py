"""Tests for hover word alignment."""

import pytest

from models.verse import VerseSegment, Word
from utils.alignment import align_verse_words, align_word, hamming_distance, tokenize


class TestHammingDistance:
    def test_counts_differing_positions(self) -> None:
        assert hamming_distance("karolin", "kathrin") == 3
        assert hamming_distance("lord", "lord") == 0

    def test_rejects_different_lengths(self) -> None:
        with pytest.raises(ValueError):
            hamming_distance("lord", "lords")


class TestAlignWord:
    """Tests for align_word()."""

    def test_exact_match_ignores_case_and_punctuation(self) -> None:
        assert align_word("Allah", "Praise be to Allah, Lord of the Worlds,") == 3

    def test_only_same_length_tokens_are_candidates(self) -> None:
        # "worlds" is longer than "words", so only "lords" is a candidate
        assert align_word("words", "worlds of lords") == 2

    def test_nearest_token_by_distance(self) -> None:
        assert align_word("path", "the bath of those") == 1

    def test_ties_go_to_the_first_token(self) -> None:
        assert align_word("cat", "bat hat") == 0

    def test_no_same_length_token(self) -> None:
        assert align_word("Beneficent", "the way") is None

    def test_multi_word_gloss_never_matches(self) -> None:
        assert align_word("In name", "In the name of Allah") is None

    def test_empty_inputs(self) -> None:
        assert align_word("", "anything") is None
        assert align_word("word", "") is None

    def test_tokenize_splits_on_whitespace(self) -> None:
        assert tokenize("Show  us the\tpath,") == ["Show", "us", "the", "path,"]
        assert tokenize(None) == []


class TestAlignVerseWords:
    def test_skips_end_marker_and_aligns_words(self) -> None:
        segment = VerseSegment(
            sequence_index=1,
            verse_number=2,
            translated_text="Praise be to Allah, Lord of the Worlds,",
            words=(
                Word(position=1, text="ٱلْحَمْدُ", translation="Praise"),
                Word(position=2, text="لِلَّهِ", translation="Allah"),
                Word(position=3, text="رَبِّ", translation="Lord"),
                Word(position=4, text="ٱلْعَٰلَمِينَ", translation="worlds"),
                Word(position=5, text="٢", translation="(2)", char_type="end"),
            ),
        )
        alignments = align_verse_words(segment)

        assert [a["position"] for a in alignments] == [1, 2, 3, 4]
        assert [a["token_index"] for a in alignments] == [0, 3, 4, 7]
