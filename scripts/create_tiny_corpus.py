#!/usr/bin/env python3
# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Create a tiny synthetic corpus for trying out the vocabulary builder.

Word frequencies follow a Zipf-like curve, so the class partition has a
realistic head and tail to work with. The output is deterministic for a
given seed.

Usage:
    python scripts/create_tiny_corpus.py [--output data/corpus/train.txt] [--lines 2000]
"""

import argparse
import random
import sys
from pathlib import Path


def build_lexicon(size: int) -> list[str]:
    """Make `size` distinct pronounceable-ish words."""
    syllables = ["ka", "lo", "mi", "ne", "ru", "ta", "vo", "si", "de", "pa"]
    words: list[str] = []
    length = 1
    while len(words) < size:
        for index in range(len(syllables) ** length):
            parts = []
            value = index
            for _ in range(length):
                parts.append(syllables[value % len(syllables)])
                value //= len(syllables)
            words.append("".join(parts))
            if len(words) == size:
                break
        length += 1
    return words


def generate_lines(
    lexicon: list[str],
    line_count: int,
    seed: int,
    min_words: int = 3,
    max_words: int = 15,
) -> list[str]:
    """Sample sentences with word probability proportional to 1 / rank."""
    rng = random.Random(seed)
    weights = [1.0 / rank for rank in range(1, len(lexicon) + 1)]
    lines: list[str] = []
    for _ in range(line_count):
        length = rng.randint(min_words, max_words)
        lines.append(" ".join(rng.choices(lexicon, weights=weights, k=length)))
    return lines


def main() -> None:
    parser = argparse.ArgumentParser(description="Create a tiny synthetic training corpus.")
    parser.add_argument(
        "--output",
        type=str,
        default="data/corpus/train.txt",
        help="Where to write the corpus file.",
    )
    parser.add_argument("--lines", type=int, default=2000, help="Number of sentences.")
    parser.add_argument("--lexicon-size", type=int, default=500, dest="lexicon_size")
    parser.add_argument("--seed", type=int, default=42)
    args = parser.parse_args()

    if args.lines < 1 or args.lexicon_size < 1:
        parser.error("--lines and --lexicon-size must be positive")

    output_path = Path(args.output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    lines = generate_lines(build_lexicon(args.lexicon_size), args.lines, args.seed)
    output_path.write_text("\n".join(lines) + "\n", encoding="utf-8")

    print(f"  Corpus written: {output_path} ({len(lines)} lines)")
    sys.exit(0)


if __name__ == "__main__":
    main()
