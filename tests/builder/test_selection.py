# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for vocabulary selection and the unknown bucket.

The bucket conservation law shows up in several tests: whatever mass isn't
kept under a word's own name must land in the bucket exactly once.
"""

from collections import Counter

import pytest

from wordclass.builder.selection.core import count_eligible, rank_key, select_vocabulary
from wordclass.config.exceptions import ConfigurationError


def _counts(text: str) -> Counter[str]:
    return Counter(text.split())


class TestCountEligible:
    def test_cutoff_excludes_equal_counts(self) -> None:
        assert count_eligible({"a": 3, "b": 2, "c": 1}, cutoff=2) == 1

    def test_non_positive_cutoff_keeps_everything(self) -> None:
        assert count_eligible({"a": 3, "b": 1}, cutoff=0) == 2
        assert count_eligible({"a": 3, "b": 1}, cutoff=-1) == 2


class TestRankKey:
    def test_higher_count_first_then_word(self) -> None:
        items = [("b", 2), ("a", 2), ("c", 5)]
        assert sorted(items, key=rank_key) == [("c", 5), ("a", 2), ("b", 2)]


class TestSelectVocabulary:
    def test_basic_example(self) -> None:
        selection = select_vocabulary(_counts("a a a b b c"), vocab_size=3, cutoff=0, unk="<unk>")
        assert selection.entries == {"a": 3, "b": 2, "<unk>": 1}
        assert selection.unk_count == 1
        assert not selection.clamped

    def test_vocab_size_one_puts_everything_in_bucket(self) -> None:
        selection = select_vocabulary(_counts("a a b"), vocab_size=1, cutoff=0, unk="<unk>")
        assert selection.entries == {"<unk>": 3}

    def test_cutoff_words_go_to_bucket(self) -> None:
        counts = _counts("a a a b b c d")
        selection = select_vocabulary(counts, vocab_size=2, cutoff=1, unk="<unk>")
        assert selection.eligible_count == 2
        assert selection.entries == {"a": 3, "<unk>": 4}

    def test_clamp_is_a_diagnostic_not_a_failure(self) -> None:
        counts = _counts("a a a b b c")
        selection = select_vocabulary(counts, vocab_size=50, cutoff=1, unk="<unk>")
        assert selection.clamped
        assert selection.requested_size == 50
        assert selection.vocab_size == 2
        assert selection.entries == {"a": 3, "<unk>": 3}

    def test_clamp_is_logged_as_warning(self, capsys: pytest.CaptureFixture[str]) -> None:
        select_vocabulary(_counts("a a b"), vocab_size=10, cutoff=0, unk="<unk>")
        out = capsys.readouterr().out
        assert '"level": "WARNING"' in out
        assert '"required_vocab_size": 10' in out

    def test_nothing_after_cutoff_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            select_vocabulary(_counts("a b c"), vocab_size=5, cutoff=1, unk="<unk>")

    def test_ties_are_broken_by_word(self) -> None:
        counts = Counter({"zeta": 2, "alpha": 2, "mid": 2})
        selection = select_vocabulary(counts, vocab_size=3, cutoff=0, unk="<unk>")
        assert list(selection.entries) == ["alpha", "mid", "<unk>"]
        assert selection.entries["<unk>"] == 2

    def test_selected_unk_folds_into_bucket_and_frees_a_slot(self) -> None:
        counts = Counter({"<unk>": 10, "a": 5, "b": 4, "c": 1})
        selection = select_vocabulary(counts, vocab_size=3, cutoff=0, unk="<unk>")
        assert selection.entries == {"a": 5, "b": 4, "<unk>": 11}
        assert len(selection.entries) == 3

    def test_unselected_unk_is_counted_once(self) -> None:
        counts = Counter({"a": 10, "b": 5, "<unk>": 2, "c": 1})
        selection = select_vocabulary(counts, vocab_size=2, cutoff=0, unk="<unk>")
        assert selection.entries == {"a": 10, "<unk>": 8}

    def test_unk_below_cutoff_is_counted_once(self) -> None:
        counts = Counter({"a": 10, "b": 5, "<unk>": 1})
        selection = select_vocabulary(counts, vocab_size=3, cutoff=1, unk="<unk>")
        assert selection.entries == {"a": 10, "<unk>": 6}

    def test_custom_unk_name(self) -> None:
        selection = select_vocabulary(_counts("a a b"), vocab_size=2, cutoff=0, unk="OOV")
        assert selection.entries == {"a": 2, "OOV": 1}

    @pytest.mark.parametrize("vocab_size", [1, 2, 3, 4, 6, 10])
    @pytest.mark.parametrize("cutoff", [-1, 0, 1, 2])
    def test_size_and_mass_are_conserved(self, vocab_size: int, cutoff: int) -> None:
        counts = Counter({"the": 9, "<unk>": 4, "cat": 4, "sat": 3, "on": 2, "mat": 1, "a": 1})
        try:
            selection = select_vocabulary(counts, vocab_size=vocab_size, cutoff=cutoff, unk="<unk>")
        except ConfigurationError:
            pytest.fail("every cutoff here leaves eligible words")

        eligible = count_eligible(counts, cutoff)
        assert len(selection.entries) == min(vocab_size, eligible)
        assert sum(selection.entries.values()) == sum(counts.values())

        kept = {word: count for word, count in selection.entries.items() if word != "<unk>"}
        assert all(counts[word] == count for word, count in kept.items())
        assert all(count > cutoff for count in kept.values()) or cutoff <= 0

    def test_invalid_vocab_size_raises(self) -> None:
        with pytest.raises(ValueError):
            select_vocabulary(_counts("a"), vocab_size=0, cutoff=0, unk="<unk>")
