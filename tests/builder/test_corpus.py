# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for corpus normalization and word counting.

The interesting parts are the sentence markers: when they get added, when
they don't, and which of them end up counted.
"""

from pathlib import Path
from typing import Callable

import pytest

from wordclass.builder.corpus.core import (
    build_frequency_table,
    count_tokens,
    normalize_line,
    split_tokens,
)
from wordclass.builder.exceptions import CorpusReadError


class TestNormalizeLine:
    def test_adds_both_markers(self) -> None:
        assert normalize_line("the cat", "<s>", "</s>") == "<s> the cat </s>"

    def test_trims_outer_spaces_first(self) -> None:
        assert normalize_line("   the cat  ", "<s>", "</s>") == "<s> the cat </s>"

    def test_keeps_existing_markers(self) -> None:
        assert normalize_line("<s> the cat </s>", "<s>", "</s>") == "<s> the cat </s>"

    def test_marker_glued_to_a_word_is_not_a_marker(self) -> None:
        assert normalize_line("<s>the cat", "<s>", "</s>") == "<s> <s>the cat </s>"

    def test_empty_markers_disable_insertion(self) -> None:
        assert normalize_line(" the cat ", "", "") == "the cat"

    def test_only_end_marker(self) -> None:
        assert normalize_line("the cat", "", "</s>") == "the cat </s>"


class TestSplitTokens:
    def test_splits_on_tabs_and_spaces(self) -> None:
        assert split_tokens("a\tb  c \t d") == ["a", "b", "c", "d"]

    def test_empty_string_has_no_tokens(self) -> None:
        assert split_tokens("") == []


class TestCountTokens:
    def test_counts_every_field_without_markers(self) -> None:
        counts = count_tokens(["a a a b b c"], "", "")
        assert counts == {"a": 3, "b": 2, "c": 1}

    def test_begin_marker_is_not_counted(self) -> None:
        counts = count_tokens(["the cat", "the dog"], "<s>", "</s>")
        assert counts == {"the": 2, "cat": 1, "dog": 1, "</s>": 2}
        assert "<s>" not in counts

    def test_same_marker_for_both_ends_counts_once_per_line(self) -> None:
        counts = count_tokens(["hello world", "hello"], "</s>", "</s>")
        assert counts["</s>"] == 2
        assert counts["hello"] == 2

    def test_blank_lines_are_skipped(self) -> None:
        counts = count_tokens(["a", "", "   ", "a"], "<s>", "</s>")
        assert counts == {"a": 2, "</s>": 2}

    def test_tab_only_line_still_gets_markers(self) -> None:
        # Only spaces are trimmed, so a lone tab is a non-empty line.
        counts = count_tokens(["a b\n", "\t\n"], "</s>", "</s>")
        assert counts == {"a": 1, "b": 1, "</s>": 2}

    def test_line_endings_are_stripped(self) -> None:
        counts = count_tokens(["a b\n", "a\r\n"], "", "")
        assert counts == {"a": 2, "b": 1}


class TestBuildFrequencyTable:
    def test_reads_file(self, write_corpus: Callable[..., Path]) -> None:
        corpus_path = write_corpus(["a a a b b c", "c d"])
        counts = build_frequency_table(corpus_path, "", "")
        assert counts == {"a": 3, "b": 2, "c": 2, "d": 1}

    def test_missing_file_raises_corpus_read_error(self, tmp_path: Path) -> None:
        with pytest.raises(CorpusReadError):
            build_frequency_table(tmp_path / "nope.txt", "", "")

    def test_corpus_read_error_is_an_ioerror(self, tmp_path: Path) -> None:
        with pytest.raises(IOError):
            build_frequency_table(tmp_path / "nope.txt", "<s>", "</s>")

    def test_undecodable_bytes_raise_corpus_read_error(self, tmp_path: Path) -> None:
        corpus_path = tmp_path / "binary.txt"
        corpus_path.write_bytes(b"a \xff\xfe b\n")

        with pytest.raises(CorpusReadError, match="Failed to read input file"):
            build_frequency_table(corpus_path, "", "")
