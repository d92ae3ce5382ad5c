# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Reading the tables back, and checking them.

Training code consumes the vocabulary and class tables as static lookups and
assumes two things about them:
  A1: words of the same class are contiguous, i.e.
      word2cls[0] <= word2cls[1] <= ... <= word2cls[V - 1]
  A2: classes start in order, i.e.
      cls2idx[0] <= cls2idx[1] <= ... <= cls2idx[C - 1]

`verify_artifacts` checks those plus the basic shape of the files, so a
table edited by hand or produced by another tool can be vetted before a
long training run trips over it.
"""

from pathlib import Path
from typing import NamedTuple, Optional

from wordclass.builder.exceptions import ArtifactReadError


class VocabEntry(NamedTuple):
    """One parsed row of the vocabulary table."""

    index: int
    count: int
    word: str
    class_id: int


def _read_lines(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as err:
        raise ArtifactReadError(f"Failed to read {path}: {err}") from err
    return [line for line in text.splitlines() if line.strip()]


def read_vocab_file(path: Path) -> list[VocabEntry]:
    """
    Parse a vocabulary table.

    Raises:
        ArtifactReadError: If the file can't be read.
        ValueError: If a row doesn't have four whitespace-separated fields
                    with integer index, count and class.
    """
    entries: list[VocabEntry] = []
    for line_number, line in enumerate(_read_lines(path), start=1):
        fields = line.split()
        if len(fields) != 4:
            raise ValueError(f"{path}:{line_number}: expected 4 fields, got {len(fields)}")
        index, count, word, class_id = fields
        try:
            entries.append(VocabEntry(int(index), int(count), word, int(class_id)))
        except ValueError as err:
            raise ValueError(f"{path}:{line_number}: {err}") from err
    return entries


def read_index_file(path: Path) -> list[int]:
    """Parse a word2cls or cls2index table: one integer per line."""
    values: list[int] = []
    for line_number, line in enumerate(_read_lines(path), start=1):
        try:
            values.append(int(line.strip()))
        except ValueError as err:
            raise ValueError(f"{path}:{line_number}: {err}") from err
    return values


def verify_artifacts(
    vocab_path: Path,
    word2cls_path: Optional[Path] = None,
    cls2index_path: Optional[Path] = None,
    nbr_classes: int = 0,
) -> list[str]:
    """
    Check a set of build outputs and return every problem found.

    An empty list means the tables are consistent. Parse errors are reported
    as problems rather than raised, so one call gives the full picture.
    """
    problems: list[str] = []

    try:
        entries = read_vocab_file(vocab_path)
    except (OSError, ValueError) as err:
        return [str(err)]

    if not entries:
        problems.append(f"{vocab_path}: vocabulary table is empty")

    for position, entry in enumerate(entries):
        if entry.index != position:
            problems.append(f"{vocab_path}: row {position} has index {entry.index}")
            break

    words = [entry.word for entry in entries]
    if len(set(words)) != len(words):
        problems.append(f"{vocab_path}: duplicate words in vocabulary")

    for previous, current in zip(entries, entries[1:]):
        if current.count > previous.count:
            problems.append(f"{vocab_path}: counts increase at index {current.index}")
            break

    if nbr_classes <= 0:
        return problems

    class_ids = [entry.class_id for entry in entries]
    if any(class_id < 0 or class_id >= nbr_classes for class_id in class_ids):
        problems.append(f"{vocab_path}: class id outside [0, {nbr_classes})")
    if any(current < previous for previous, current in zip(class_ids, class_ids[1:])):
        problems.append(f"{vocab_path}: class ids decrease along the word index")

    if word2cls_path is not None:
        try:
            word2cls = read_index_file(word2cls_path)
        except (OSError, ValueError) as err:
            problems.append(str(err))
        else:
            if word2cls != class_ids:
                problems.append(f"{word2cls_path}: does not match the vocabulary class column")

    if cls2index_path is not None:
        try:
            class_starts = read_index_file(cls2index_path)
        except (OSError, ValueError) as err:
            problems.append(str(err))
        else:
            problems.extend(_check_class_starts(cls2index_path, class_starts, class_ids, nbr_classes))

    return problems


def _check_class_starts(
    path: Path,
    class_starts: list[int],
    class_ids: list[int],
    nbr_classes: int,
) -> list[str]:
    problems: list[str] = []
    if len(class_starts) != nbr_classes:
        problems.append(f"{path}: expected {nbr_classes} classes, got {len(class_starts)}")
        return problems

    if any(current < previous for previous, current in zip(class_starts, class_starts[1:])):
        problems.append(f"{path}: class start indices decrease")

    for class_id in sorted(set(class_ids)):
        if not 0 <= class_id < nbr_classes:
            continue
        first = class_ids.index(class_id)
        if class_starts[class_id] != first:
            problems.append(
                f"{path}: class {class_id} starts at {class_starts[class_id]}, "
                f"first word of that class is {first}"
            )
    return problems
