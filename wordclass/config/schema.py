# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Type-safe configuration schemas for wordclass.

Each config section gets its own frozen pydantic model. Frozen means once you
create it, you cannot mutate it. A build reads its settings once and never
changes them halfway through.

The models use pydantic v2's ConfigDict with:
  - frozen=True: immutability after construction
  - extra="forbid": unknown fields cause immediate failure
  - validate_default=True: even defaults get type-checked

The vocabulary section accepts the historical camelCase keys (vocabSize,
nbrClasses, outputWord2Cls, ...) as aliases, so existing configs keep
working. Python callers can use the snake_case field names directly.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GlobalConfig(BaseModel):
    """
    Cross-cutting settings for the whole tool: schema version and logging.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    config_version: str = Field(
        description="Schema version for compatibility tracking, e.g. '1.0.0'"
    )
    log_level: str = Field(
        default="INFO",
        description="One of DEBUG, INFO, WARNING, ERROR, CRITICAL",
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Optional path for an additional JSON log file",
    )


class VocabularyConfig(BaseModel):
    """
    Everything the vocabulary-and-class builder needs.

    Sentinel markers are Optional on purpose: leaving one unset is not a
    schema error but a build error (ConfigurationError), raised by the
    builder's pre-flight check. An empty string is a valid value and turns
    the insertion off for that side.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
        populate_by_name=True,
    )

    vocab_size: int = Field(
        alias="vocabSize",
        ge=1,
        description="Target vocabulary size, unknown bucket included",
    )
    nbr_classes: int = Field(
        default=0,
        alias="nbrClasses",
        ge=0,
        description="Number of frequency classes; 0 writes the vocabulary table only",
    )
    cutoff: int = Field(
        default=1,
        description="Words seen this many times or fewer go to the unknown bucket; <= 0 disables",
    )
    input_file: str = Field(
        alias="inputFile",
        description="Training text, one sentence per line",
    )
    output_vocab_file: str = Field(
        alias="outputVocabFile",
        description="Where the vocabulary table is written",
    )
    output_word2cls: Optional[str] = Field(
        default=None,
        alias="outputWord2Cls",
        description="Word-to-class table, required when nbrClasses > 0",
    )
    output_cls2index: Optional[str] = Field(
        default=None,
        alias="outputCls2Index",
        description="Class-to-first-index table, required when nbrClasses > 0",
    )
    unk: str = Field(
        default="<unk>",
        min_length=1,
        description="Name of the unknown-word bucket",
    )
    begin_sequence: Optional[str] = Field(
        default=None,
        alias="beginSequence",
        description="Sentence start marker inserted when absent; empty disables",
    )
    end_sequence: Optional[str] = Field(
        default=None,
        alias="endSequence",
        description="Sentence end marker appended when absent; empty disables",
    )
    make_mode: bool = Field(
        default=True,
        alias="makeMode",
        description="Skip the build when every output is newer than the input",
    )


class WordClassConfig(BaseModel):
    """
    Top-level config container.

    `global:` is mandatory. `vocabulary:` may be left out of a file that only
    sets up logging, but the build and verify commands refuse to run without it.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", validate_default=True)

    global_config: GlobalConfig = Field(alias="global")
    vocabulary: Optional[VocabularyConfig] = Field(default=None)
