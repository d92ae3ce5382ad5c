# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
End-to-end vocabulary and class build.

The pipeline is strictly sequential:

  corpus  →  frequency table  →  vocabulary selection  →  ranking
          →  class partition (only when nbr_classes > 0)  →  tables on disk

Every setting is checked before the corpus is opened, so a bad config never
leaves output behind. In make mode the whole build is skipped when every
output is already newer than the corpus, which makes re-running a training
recipe cheap.
"""

from pathlib import Path
from typing import NamedTuple, Optional

from wordclass.builder.artifacts.writer import (
    outputs_up_to_date,
    write_cls2index_file,
    write_vocab_file,
    write_word2cls_file,
)
from wordclass.builder.corpus.core import build_frequency_table
from wordclass.builder.partition.core import partition_classes, rank_vocabulary
from wordclass.builder.selection.core import select_vocabulary
from wordclass.config.exceptions import ConfigurationError
from wordclass.config.schema import VocabularyConfig
from wordclass.logging.logger import get_logger


class BuildResult(NamedTuple):
    """What you get back after a build (or a skipped one)."""

    up_to_date: bool
    vocab_size: int
    nbr_classes: int
    unk_count: int
    clamped: bool
    written: tuple[str, ...]


def validate_build_settings(config: VocabularyConfig) -> None:
    """
    Refuse settings that can't produce a usable build.

    Older setups relied on a hard-coded "</s>" for both markers; that default
    is gone, and a config that leaves either one out is rejected instead of
    silently producing a different vocabulary.

    Raises:
        ConfigurationError: On unset sentinels or missing class output paths.
    """
    if config.begin_sequence is None or config.end_sequence is None:
        raise ConfigurationError("Please specify parameters 'beginSequence' and 'endSequence'.")

    if config.nbr_classes > 0:
        missing = [
            name
            for name, value in (
                ("outputWord2Cls", config.output_word2cls),
                ("outputCls2Index", config.output_cls2index),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"nbrClasses is {config.nbr_classes} but {', '.join(missing)} is not set."
            )


def expected_outputs(config: VocabularyConfig) -> list[Path]:
    """The files a build with this config writes, vocabulary table first."""
    outputs = [Path(config.output_vocab_file)]
    if config.nbr_classes > 0:
        outputs.append(Path(str(config.output_word2cls)))
        outputs.append(Path(str(config.output_cls2index)))
    return outputs


def build_word_classes(config: VocabularyConfig, force: bool = False) -> BuildResult:
    """
    Run the full build for one vocabulary config.

    Args:
        config: Validated vocabulary settings.
        force: Rebuild even if make mode says the outputs are current.

    Returns:
        A BuildResult. When the outputs were already current, `up_to_date`
        is True and nothing was read or written.

    Raises:
        ConfigurationError: Unusable settings, or no word left after cutoff.
        CorpusReadError: The corpus can't be read.
        ArtifactWriteError: An output can't be written.
    """
    logger = get_logger("wordclass.builder.pipeline")

    validate_build_settings(config)
    outputs = expected_outputs(config)
    input_path = Path(config.input_file)

    logger.info(
        "Output files",
        extra={
            "vocabulary_file": str(outputs[0]),
            "word2cls_file": config.output_word2cls if config.nbr_classes > 0 else None,
            "cls2index_file": config.output_cls2index if config.nbr_classes > 0 else None,
        },
    )

    if config.make_mode and not force and outputs_up_to_date(outputs, input_path):
        logger.info("All output files up to date.")
        return BuildResult(
            up_to_date=True,
            vocab_size=0,
            nbr_classes=config.nbr_classes,
            unk_count=0,
            clamped=False,
            written=(),
        )

    begin_sequence = str(config.begin_sequence)
    end_sequence = str(config.end_sequence)
    counts = build_frequency_table(input_path, begin_sequence, end_sequence)

    selection = select_vocabulary(
        counts,
        vocab_size=config.vocab_size,
        cutoff=config.cutoff,
        unk=config.unk,
    )
    ranked = rank_vocabulary(selection.entries)

    word_classes: Optional[list[int]] = None
    class_starts: list[int] = []
    if config.nbr_classes > 0:
        partition = partition_classes(ranked, config.nbr_classes)
        word_classes = partition.word_classes
        class_starts = partition.class_starts

    written: list[str] = []

    rows = write_vocab_file(ranked, word_classes, outputs[0])
    written.append(str(outputs[0]))
    logger.info(
        "Created vocabulary file",
        extra={"path": str(outputs[0]), "entries": rows, "distinct_words": selection.distinct_count},
    )

    if word_classes is not None:
        rows = write_word2cls_file(word_classes, outputs[1])
        written.append(str(outputs[1]))
        logger.info("Created word-to-class map", extra={"path": str(outputs[1]), "entries": rows})

        rows = write_cls2index_file(class_starts, outputs[2])
        written.append(str(outputs[2]))
        logger.info("Created class-to-index map", extra={"path": str(outputs[2]), "entries": rows})

    return BuildResult(
        up_to_date=False,
        vocab_size=len(ranked),
        nbr_classes=config.nbr_classes,
        unk_count=selection.unk_count,
        clamped=selection.clamped,
        written=tuple(written),
    )
