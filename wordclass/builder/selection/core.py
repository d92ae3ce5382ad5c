# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Vocabulary selection: which words keep their own slot, and how much mass
lands in the unknown bucket.

The rules, in order:
  1. Words seen `cutoff` times or fewer are not eligible (cutoff <= 0 keeps all).
  2. A target size larger than the eligible word count is clamped, with a warning.
  3. Eligible words are ranked by count, highest first, ties broken by the
     word string so the result never depends on hash order.
  4. The top `vocab_size - 1` words are kept. The last slot belongs to the
     unknown bucket.
  5. If the unknown word itself shows up among the kept words, its count
     moves into the bucket and the next word in rank takes the freed slot.
  6. Everything not kept (rank overflow and cut-off words) is summed into
     the bucket.

Each word's count reaches the bucket through at most one of those paths, so
the bucket is never double counted.
"""

from typing import Mapping, NamedTuple

from wordclass.config.exceptions import ConfigurationError
from wordclass.logging.logger import get_logger


class VocabularySelection(NamedTuple):
    """The retained words plus the unknown bucket, and how we got there."""

    entries: dict[str, int]
    unk_count: int
    requested_size: int
    vocab_size: int
    eligible_count: int
    distinct_count: int
    clamped: bool


def rank_key(item: tuple[str, int]) -> tuple[int, str]:
    """Sort key: descending count, then ascending word."""
    word, count = item
    return -count, word


def count_eligible(counts: Mapping[str, int], cutoff: int) -> int:
    """Number of distinct words seen more than `cutoff` times."""
    if cutoff <= 0:
        return len(counts)
    return sum(1 for count in counts.values() if count > cutoff)


def select_vocabulary(
    counts: Mapping[str, int],
    vocab_size: int,
    cutoff: int,
    unk: str,
) -> VocabularySelection:
    """
    Pick the retained vocabulary and compute the unknown bucket.

    Args:
        counts: Frequency table from the corpus counter.
        vocab_size: Target size including the unknown bucket, >= 1.
        cutoff: Words with count <= cutoff are never retained; <= 0 disables.
        unk: Name of the unknown bucket.

    Returns:
        A VocabularySelection whose `entries` holds exactly
        min(vocab_size, eligible_count) words.

    Raises:
        ConfigurationError: If no word survives the cutoff.
        ValueError: If vocab_size is below 1.
    """
    logger = get_logger("wordclass.builder.selection")

    if vocab_size < 1:
        raise ValueError(f"vocab_size must be >= 1, got {vocab_size}")

    eligible_count = count_eligible(counts, cutoff)
    if eligible_count == 0:
        raise ConfigurationError(f"No word remained after cutoff with threshold {cutoff}.")

    requested_size = vocab_size
    clamped = vocab_size > eligible_count
    if clamped:
        logger.warning(
            "Actual vocabulary size is less than required, using the actual size",
            extra={
                "required_vocab_size": requested_size,
                "distinct_words": len(counts),
                "eligible_words": eligible_count,
                "vocab_size": eligible_count,
            },
        )
        vocab_size = eligible_count

    eligible = [
        (word, count) for word, count in counts.items() if cutoff <= 0 or count > cutoff
    ]
    eligible.sort(key=rank_key)

    retained: dict[str, int] = {}
    unk_count = sum(count for count in counts.values() if cutoff > 0 and count <= cutoff)
    budget = vocab_size - 1
    taken = 0

    for word, count in eligible:
        if taken < budget:
            taken += 1
            if word == unk:
                unk_count += count
                budget += 1
            else:
                retained[word] = count
        else:
            unk_count += count

    entries = dict(retained)
    entries[unk] = unk_count

    logger.debug(
        "Vocabulary selected",
        extra={
            "vocab_size": len(entries),
            "unk_count": unk_count,
            "eligible_words": eligible_count,
        },
    )

    return VocabularySelection(
        entries=entries,
        unk_count=unk_count,
        requested_size=requested_size,
        vocab_size=vocab_size,
        eligible_count=eligible_count,
        distinct_count=len(counts),
        clamped=clamped,
    )
