# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Word ranking and frequency-class partitioning.

Ranking gives every retained word its final index: highest count first, ties
by word string. Partitioning then walks that ranked list and cuts it into
`nbr_classes` contiguous classes of roughly equal square-root-frequency mass:

    df += sqrt(count / total) / sum_w sqrt(count_w / total)

and the class id moves up by one whenever df passes the next (k + 1) / n
threshold. The square root flattens the head of the Zipf curve, so the top
class isn't a handful of function words and the tail class isn't most of
the vocabulary. This is the usual layout for class-factored softmax outputs.

Two properties fall out of walking the list in rank order, and downstream
consumers rely on both:
  - class ids are non-decreasing along the word index
  - each class starts at or after the index where the previous class starts
"""

import math
from typing import Mapping, NamedTuple

from wordclass.builder.selection.core import rank_key
from wordclass.logging.logger import get_logger


class RankedWord(NamedTuple):
    """One vocabulary slot: its final index, the word, and its count."""

    index: int
    word: str
    count: int


class ClassPartition(NamedTuple):
    """
    Result of partitioning a ranked vocabulary.

    word_classes[i] is the class of word index i; class_starts[c] is the first
    word index of class c. Class 0 always starts at 0; it is empty when the
    first word alone carries more than 1/n of the mass. A class the scan never
    reached starts at len(word_classes), i.e. it is empty too.
    """

    word_classes: list[int]
    class_starts: list[int]
    mass_norm: float
    reached_classes: int


def rank_vocabulary(entries: Mapping[str, int]) -> list[RankedWord]:
    """Assign indices 0..n-1 in descending count order."""
    ordered = sorted(entries.items(), key=rank_key)
    return [RankedWord(index, word, count) for index, (word, count) in enumerate(ordered)]


def sqrt_mass(ranked: list[RankedWord]) -> tuple[float, float]:
    """Return (total count, sum of sqrt(count / total)) over the ranked words."""
    total = float(sum(entry.count for entry in ranked))
    if total <= 0:
        return total, 0.0
    return total, sum(math.sqrt(entry.count / total) for entry in ranked)


def partition_classes(ranked: list[RankedWord], nbr_classes: int) -> ClassPartition:
    """
    Split a ranked vocabulary into `nbr_classes` classes of balanced sqrt mass.

    Raises:
        ValueError: If nbr_classes < 1 or the vocabulary is empty or has no mass.
    """
    logger = get_logger("wordclass.builder.partition")

    if nbr_classes < 1:
        raise ValueError(f"nbr_classes must be >= 1, got {nbr_classes}")
    if not ranked:
        raise ValueError("Cannot partition an empty vocabulary")

    total, mass_norm = sqrt_mass(ranked)
    if mass_norm <= 0:
        raise ValueError("Cannot partition a vocabulary whose counts are all zero")

    word_classes: list[int] = []
    class_starts = [len(ranked)] * nbr_classes
    class_starts[0] = 0

    df = 0.0
    class_id = 0
    for entry in ranked:
        df = min(df + math.sqrt(entry.count / total) / mass_norm, 1.0)

        if df > (class_id + 1) / nbr_classes and class_id < nbr_classes - 1:
            class_id += 1
            class_starts[class_id] = entry.index

        word_classes.append(class_id)

    reached_classes = class_id + 1
    if reached_classes < nbr_classes:
        logger.warning(
            "Fewer classes reached than requested, the remaining classes are empty",
            extra={
                "nbr_classes": nbr_classes,
                "reached_classes": reached_classes,
                "vocab_size": len(ranked),
            },
        )

    logger.debug(
        "Vocabulary partitioned",
        extra={"nbr_classes": nbr_classes, "mass_norm": mass_norm, "total_count": total},
    )

    return ClassPartition(
        word_classes=word_classes,
        class_starts=class_starts,
        mass_norm=mass_norm,
        reached_classes=reached_classes,
    )
