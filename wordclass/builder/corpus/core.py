# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Corpus reading and word counting.

The corpus is plain text, one sentence per line. Each line is trimmed,
wrapped in the configured sentence markers if they aren't there already,
split on tabs and spaces, and every field except the leading begin marker
is counted. The whole file is consumed before anything else happens,
because vocabulary selection needs global totals.
"""

import re
from collections import Counter
from pathlib import Path
from typing import Iterable, Iterator

from wordclass.builder.exceptions import CorpusReadError
from wordclass.logging.logger import get_logger

_FIELD_SEPARATOR = re.compile(r"[\t ]+")


def normalize_line(line: str, begin_sequence: str, end_sequence: str) -> str:
    """
    Trim outer spaces and add the sentence markers that are missing.

    An empty marker turns insertion off for its side. The check is literal:
    `"<s> hello"` already starts with the begin marker, `"<s>hello"` does not.
    """
    text = line.strip(" ")

    if begin_sequence and not text.startswith(begin_sequence + " "):
        text = f"{begin_sequence} {text}"

    if end_sequence and not text.endswith(" " + end_sequence):
        text = f"{text} {end_sequence}"

    return text


def split_tokens(line: str) -> list[str]:
    """Split on runs of tabs and spaces, dropping empty fields."""
    return [field for field in _FIELD_SEPARATOR.split(line) if field]


def count_tokens(
    lines: Iterable[str],
    begin_sequence: str,
    end_sequence: str,
) -> Counter[str]:
    """
    Build the frequency table for an iterable of corpus lines.

    Lines that are empty after trimming contribute nothing. When a begin
    marker is configured, the first field of every line is that marker and
    it is not counted: only the end marker ends up in the vocabulary. With
    no begin marker every field counts.
    """
    counts: Counter[str] = Counter()
    first_counted = 1 if begin_sequence else 0

    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        if not line.strip(" "):
            continue

        fields = split_tokens(normalize_line(line, begin_sequence, end_sequence))
        counts.update(fields[first_counted:])

    return counts


def read_corpus(corpus_path: Path) -> Iterator[str]:
    """
    Lazily yield the lines of the corpus file.

    Raises:
        CorpusReadError: If the file can't be opened or a read fails midway.
    """
    try:
        corpus_file = open(corpus_path, "r", encoding="utf-8")
    except OSError as err:
        raise CorpusReadError(f"Failed to open input file: {corpus_path}: {err}") from err

    with corpus_file:
        try:
            yield from corpus_file
        except (OSError, UnicodeDecodeError) as err:
            raise CorpusReadError(f"Failed to read input file: {corpus_path}: {err}") from err


def build_frequency_table(
    corpus_path: Path,
    begin_sequence: str,
    end_sequence: str,
) -> Counter[str]:
    """Count every word of the corpus file in one pass."""
    logger = get_logger("wordclass.builder.corpus")
    logger.info("Reading input file", extra={"input_file": str(corpus_path)})

    counts = count_tokens(read_corpus(corpus_path), begin_sequence, end_sequence)

    logger.info(
        "Corpus counted",
        extra={"distinct_words": len(counts), "total_words": sum(counts.values())},
    )
    return counts
