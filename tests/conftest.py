# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for wordclass tests.

Fixtures here are available to every test file automatically.
We keep them minimal — just the stuff that multiple test modules need.
"""

import logging
import textwrap
from pathlib import Path
from typing import Callable

import pytest

from wordclass.config.schema import VocabularyConfig
from wordclass.logging.logger import configure_logging


@pytest.fixture(autouse=True)
def _reset_wordclass_loggers() -> None:
    """
    Drop handlers after each test. StreamHandler binds sys.stdout when it is
    created, and capsys swaps sys.stdout per test.
    """
    yield  # type: ignore[misc]
    configure_logging("INFO", None)
    for name in list(logging.Logger.manager.loggerDict):
        if name.startswith("wordclass"):
            logging.getLogger(name).handlers.clear()


@pytest.fixture()
def write_corpus(tmp_path: Path) -> Callable[..., Path]:
    """Write corpus lines to a file and return its path."""

    def _write(lines: list[str], name: str = "corpus.txt") -> Path:
        corpus_path = tmp_path / name
        corpus_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return corpus_path

    return _write


@pytest.fixture()
def make_vocab_config(tmp_path: Path) -> Callable[..., VocabularyConfig]:
    """
    Build a VocabularyConfig with outputs under tmp_path/out.

    Sentinels default to empty so counts are easy to reason about; tests that
    care about sentinel handling pass their own.
    """

    def _make(input_file: Path, **overrides: object) -> VocabularyConfig:
        settings: dict[str, object] = {
            "vocab_size": 3,
            "nbr_classes": 0,
            "cutoff": 0,
            "input_file": str(input_file),
            "output_vocab_file": str(tmp_path / "out" / "vocab.txt"),
            "output_word2cls": str(tmp_path / "out" / "word2cls.txt"),
            "output_cls2index": str(tmp_path / "out" / "cls2idx.txt"),
            "begin_sequence": "",
            "end_sequence": "",
        }
        settings.update(overrides)
        return VocabularyConfig(**settings)

    return _make


@pytest.fixture()
def tmp_config_file(tmp_path: Path) -> Path:
    """
    A minimal valid config YAML file in a temp directory.

    The corpus it points at holds the three-word example used across the tests.
    """
    corpus_path = tmp_path / "corpus.txt"
    corpus_path.write_text("a a a b b c\n", encoding="utf-8")
    out_dir = tmp_path / "out"

    config_content = textwrap.dedent(f"""\
        global:
          config_version: "1.0.0"
          log_level: "DEBUG"
        vocabulary:
          vocabSize: 3
          nbrClasses: 2
          cutoff: 0
          inputFile: "{corpus_path.as_posix()}"
          outputVocabFile: "{(out_dir / 'vocab.txt').as_posix()}"
          outputWord2Cls: "{(out_dir / 'word2cls.txt').as_posix()}"
          outputCls2Index: "{(out_dir / 'cls2idx.txt').as_posix()}"
          beginSequence: ""
          endSequence: ""
    """)
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def invalid_config_file(tmp_path: Path) -> Path:
    """A config file that's valid YAML but fails schema validation (missing required field)."""
    config_content = textwrap.dedent("""\
        global:
          log_level: "INFO"
    """)
    config_file = tmp_path / "invalid_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def broken_yaml_file(tmp_path: Path) -> Path:
    """A file that isn't valid YAML at all."""
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("{{not: yaml: at: all:::", encoding="utf-8")
    return config_file
