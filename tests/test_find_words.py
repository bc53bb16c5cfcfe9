"""Tests for fuzzy word search inside a haystack."""

import types

import pytest

import trigram as tg
import trigram.matching as matching


def spans(needle, haystack, **kwargs):
    return [m.span for m in tg.find_words_iter(needle, haystack, **kwargs)]


class TestFindWordsIter:
    """Tests for find_words_iter()."""

    def test_exact_word(self):
        matches = list(tg.find_words_iter("cat", "the cat sat"))
        assert len(matches) == 1
        m = matches[0]
        assert m.text == "cat"
        assert (m.start, m.end) == (4, 7)
        assert m.score == 1.0

    def test_case_insensitive_keeps_original_text(self):
        matches = tg.find_words("CAT", "The cAt sat")
        assert [(m.text, m.span) for m in matches] == [("cAt", (4, 7))]

    def test_no_match(self):
        assert list(tg.find_words_iter("cat", "dog bird fish")) == []

    def test_overlapping_fragments_merge(self):
        """Many overlapping windows clear the threshold; one match is reported."""
        # "ccat", "ca", "cat" and "catt" all score >= 0.3 here.
        matches = tg.find_words("cat", "ccatt")
        assert [(m.text, m.score) for m in matches] == [("cat", 1.0)]

    def test_separate_occurrences(self):
        assert spans("a", "a b a b a") == [(0, 1), (4, 5), (8, 9)]
        assert spans("cat", "cat cat", threshold=1.0) == [(0, 3), (4, 7)]

    def test_adjacent_occurrences_stay_separate(self):
        assert spans("cat", "cat cat") == [(0, 3), (4, 7)]

    def test_misspelling(self):
        matches = tg.find_words("riddums", "funky riddims")
        assert len(matches) == 1
        assert matches[0].text == "riddims"
        assert matches[0].span == (6, 13)
        assert matches[0].score == pytest.approx(5 / 11)

    def test_ascending_start_order(self):
        haystack = "bufalo buffalow Bungalo biffalo buffaloo huffalo snuffalo fluffalo"
        matches = list(tg.find_words_iter("buffalo", haystack))
        assert [m.span for m in matches] == [
            (0, 6),
            (7, 14),
            (16, 23),
            (24, 31),
            (32, 39),
            (42, 48),
            (51, 57),
            (60, 66),
        ]
        assert [m.text for m in matches] == [
            "bufalo",
            "buffalo",
            "Bungalo",
            "biffalo",
            "buffalo",
            "uffalo",
            "uffalo",
            "uffalo",
        ]

    def test_neighbouring_word_is_not_absorbed(self):
        # "biffalo bu" would outscore "biffalo" by borrowing " bu" from the next word.
        matches = tg.find_words("buffalo", "biffalo buffaloo")
        assert [m.span for m in matches] == [(0, 7), (8, 15)]
        assert matches[0].text == "biffalo"
        assert matches[0].score == pytest.approx(5 / 11)
        assert matches[1].score == 1.0

    def test_needle_with_space_spans_words(self):
        m = tg.best_word_match("ing bear", "the ing boar ran")
        assert m.text == "ing boar"
        assert m.score == 0.5

    def test_match_is_consistent_with_haystack(self):
        needle, haystack = "buffalo", "Did you know that bufalo buffalow Bungalo?"
        for m in tg.find_words_iter(needle, haystack):
            assert 0 <= m.start <= m.end <= len(haystack)
            assert m.text == haystack[m.start : m.end]
            assert m.score == tg.similarity(needle, m.text)
            assert m.score >= tg.DEFAULT_THRESHOLD

    def test_threshold_filters(self):
        assert spans("riddums", "funky riddims", threshold=0.5) == []
        assert spans("riddums", "funky riddims", threshold=0.45) == [(6, 13)]


class TestFindWordsDegenerate:
    """Degenerate inputs give well-defined results."""

    def test_empty_needle(self):
        assert tg.find_words("", "some text") == []

    def test_empty_haystack(self):
        assert tg.find_words("a", "") == []

    def test_both_empty(self):
        assert tg.find_words("", "") == []

    def test_needle_longer_than_haystack(self):
        # The whole haystack is still a candidate: 2 of 4 and 3 trigrams shared.
        matches = tg.find_words("abc", "ab")
        assert [(m.span, m.score) for m in matches] == [((0, 2), pytest.approx(0.4))]

    def test_needle_much_longer_than_haystack(self):
        assert tg.find_words("buffalo", "b") == []

    def test_whitespace_haystack(self):
        assert tg.find_words("cat", "     ") == []


class TestFindWordsValidation:
    def test_threshold_out_of_range(self):
        with pytest.raises(tg.ValidationError, match="threshold"):
            tg.find_words_iter("a", "a", threshold=1.5)
        with pytest.raises(tg.ValidationError, match="threshold"):
            tg.find_words_iter("a", "a", threshold=-0.1)

    def test_validation_is_eager(self):
        """Bad arguments fail at call time, not on first next()."""
        with pytest.raises(TypeError):
            tg.find_words_iter(None, "haystack")

    def test_threshold_boundaries_allowed(self):
        assert spans("cat", "cat", threshold=1.0) == [(0, 3)]
        assert spans("cat", "cat", threshold=0.0) == [(0, 3)]


class TestLaziness:
    """find_words_iter scans only as far as it is consumed."""

    def test_returns_generator(self):
        assert isinstance(tg.find_words_iter("cat", "the cat sat"), types.GeneratorType)

    def test_first_match_does_not_scan_whole_haystack(self, monkeypatch):
        calls = []
        real_trigrams = matching.trigrams

        def counting_trigrams(text):
            calls.append(text)
            return real_trigrams(text)

        monkeypatch.setattr(matching, "trigrams", counting_trigrams)

        haystack = "the cat sat " + "z" * 1_000_000
        first = next(tg.find_words_iter("cat", haystack))

        assert first.span == (4, 7)
        assert len(calls) < 100

    def test_no_work_before_first_next(self, monkeypatch):
        calls = []
        monkeypatch.setattr(matching, "trigrams", lambda text: calls.append(text))
        tg.find_words_iter("cat", "the cat sat")
        assert calls == []

    def test_independent_iterators(self):
        haystack = "a b a b a"
        first = tg.find_words_iter("a", haystack)
        second = tg.find_words_iter("a", haystack)
        next(first)
        assert [m.span for m in second] == [(0, 1), (4, 5), (8, 9)]
        assert [m.span for m in first] == [(4, 5), (8, 9)]

    def test_restartable(self):
        assert tg.find_words("a", "a b a") == tg.find_words("a", "a b a")


class TestMatch:
    def test_immutable(self):
        m = tg.find_words("cat", "cat")[0]
        with pytest.raises(AttributeError):
            m.start = 1

    def test_len_and_span(self):
        m = tg.Match(text="cat", start=4, end=7, score=1.0)
        assert len(m) == 3
        assert m.span == (4, 7)


class TestBestWordMatch:
    def test_best(self):
        m = tg.best_word_match("buffalo", "bufalo and buffalo")
        assert m.text == "buffalo"
        assert m.score == 1.0

    def test_ties_go_to_earliest(self):
        m = tg.best_word_match("cat", "cat cat")
        assert m.span == (0, 3)

    def test_none(self):
        assert tg.best_word_match("cat", "dog") is None


class TestWindowLengths:
    @pytest.mark.parametrize(
        "needle_len, haystack_len, expected",
        [
            (1, 100, range(1, 3)),
            (3, 100, range(2, 5)),
            (7, 100, range(4, 11)),
            (7, 5, range(4, 6)),
            (3, 2, range(2, 3)),
            (7, 1, range(1, 2)),
        ],
    )
    def test_lengths(self, needle_len, haystack_len, expected):
        assert tg.window_lengths(needle_len, haystack_len) == expected

    def test_never_zero(self):
        for needle_len in range(1, 20):
            assert 0 not in tg.window_lengths(needle_len, 100)
