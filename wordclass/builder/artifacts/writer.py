# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Artifact writer: the three line-oriented tables a build produces.

  vocabulary:  "index<TAB>count<TAB>word<TAB>class" per word, in index order.
               The count and word columns are informational; training only
               needs the index and class.
  word2cls:    one class id per line, in word index order.
  cls2index:   one word index per line, in class id order: where each
               class starts.

Every table goes through atomic_write, so a failed run never leaves a
half-written file behind. Tables written earlier in the same run stay as
they are; there is no rollback across files.
"""

from pathlib import Path
from typing import Optional, Sequence

from wordclass.builder.exceptions import ArtifactWriteError
from wordclass.builder.partition.core import RankedWord
from wordclass.utils.filesystem import atomic_write, is_up_to_date


def _write_table(lines: list[str], output_path: Path) -> None:
    content = "".join(f"{line}\n" for line in lines)
    try:
        atomic_write(output_path, content)
    except OSError as err:
        raise ArtifactWriteError(f"Failed to write to {output_path}: {err}") from err


def format_vocab_line(entry: RankedWord, class_id: int) -> str:
    return f"{entry.index}\t{entry.count}\t{entry.word}\t{class_id}"


def write_vocab_file(
    ranked: Sequence[RankedWord],
    word_classes: Optional[Sequence[int]],
    output_path: Path,
) -> int:
    """
    Write the vocabulary table and return the number of rows.

    With classes disabled (`word_classes` is None) every row gets class 0.
    """
    if word_classes is not None and len(word_classes) != len(ranked):
        raise ValueError(
            f"Got {len(word_classes)} class ids for {len(ranked)} vocabulary entries"
        )

    lines = [
        format_vocab_line(entry, word_classes[entry.index] if word_classes is not None else 0)
        for entry in ranked
    ]
    _write_table(lines, output_path)
    return len(lines)


def write_word2cls_file(word_classes: Sequence[int], output_path: Path) -> int:
    """Write one class id per word index."""
    _write_table([str(class_id) for class_id in word_classes], output_path)
    return len(word_classes)


def write_cls2index_file(class_starts: Sequence[int], output_path: Path) -> int:
    """Write the first word index of every class."""
    _write_table([str(start) for start in class_starts], output_path)
    return len(class_starts)


def outputs_up_to_date(outputs: Sequence[Path], input_path: Path) -> bool:
    """
    True only if every output exists and none is older than the input.

    An empty output list is never up to date.
    """
    if not outputs:
        return False
    return all(is_up_to_date(output, input_path) for output in outputs)
