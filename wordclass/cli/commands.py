# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Subcommand handlers for the wordclass CLI.

Each function here corresponds to one CLI subcommand and returns an exit
code. Library code raises; this is the only layer that turns exceptions into
log records and exit codes.

No print() calls. Everything goes through the structured logger.
"""

import argparse
import logging
from pathlib import Path

from wordclass.cli.exit_codes import CONFIG_ERROR, RUNTIME_ERROR, SUCCESS, VALIDATION_ERROR
from wordclass.config.exceptions import ConfigError
from wordclass.config.loader import load_config
from wordclass.config.schema import WordClassConfig
from wordclass.logging.logger import configure_logging, get_logger


def _load_and_configure(
    args: argparse.Namespace,
    command_name: str,
) -> tuple[int, WordClassConfig | None, logging.Logger]:
    """
    The shared setup every command needs: load config, set up logging.

    Returns a tuple of (exit_code, config, logger). If exit_code is not SUCCESS,
    the caller should return it immediately.

    The --log-level flag wins over the config's log_level when given.
    """
    logger = get_logger(f"wordclass.cli.{command_name}", log_level=args.log_level or "INFO")

    if args.config is None:
        logger.error("A config file is required", extra={"command": command_name})
        return CONFIG_ERROR, None, logger

    try:
        config = load_config(Path(args.config))
    except ConfigError as err:
        logger.error(
            "Configuration error",
            extra={"command": command_name, "error": str(err)},
        )
        return CONFIG_ERROR, None, logger

    global_config = config.global_config
    log_level = args.log_level or global_config.log_level
    log_file = Path(global_config.log_file) if global_config.log_file else None
    try:
        configure_logging(log_level, log_file)
    except ValueError as err:
        logger.error("Configuration error", extra={"command": command_name, "error": str(err)})
        return CONFIG_ERROR, None, logger
    logger = get_logger(f"wordclass.cli.{command_name}")

    return SUCCESS, config, logger


def _missing_vocabulary(args: argparse.Namespace, command_name: str, logger: logging.Logger) -> int:
    logger.error(
        "The config has no 'vocabulary' section",
        extra={"command": command_name, "config": args.config},
    )
    return CONFIG_ERROR


def handle_build(args: argparse.Namespace) -> int:
    """
    Build the vocabulary table and, with classes enabled, the two class maps.

    --force ignores make mode. --dry-run validates everything and reports
    what would be written without reading the corpus.
    """
    exit_code, config, logger = _load_and_configure(args, "build")
    if exit_code != SUCCESS:
        return exit_code
    if config is None or config.vocabulary is None:
        return _missing_vocabulary(args, "build", logger)

    from wordclass.builder.pipeline import (
        build_word_classes,
        expected_outputs,
        validate_build_settings,
    )

    vocabulary = config.vocabulary

    try:
        logger.info(
            "Starting build",
            extra={
                "command": "build",
                "dry_run": args.dry_run,
                "force": args.force,
                "vocab_size": vocabulary.vocab_size,
                "nbr_classes": vocabulary.nbr_classes,
            },
        )

        if args.dry_run:
            validate_build_settings(vocabulary)
            logger.info(
                "Dry run: would build vocabulary",
                extra={
                    "input_file": vocabulary.input_file,
                    "outputs": [str(path) for path in expected_outputs(vocabulary)],
                },
            )
            return SUCCESS

        result = build_word_classes(vocabulary, force=args.force)

        logger.info(
            "Build finished",
            extra={
                "up_to_date": result.up_to_date,
                "vocab_size": result.vocab_size,
                "unk_count": result.unk_count,
                "clamped": result.clamped,
                "written": list(result.written),
            },
        )
        return SUCCESS

    except ConfigError as err:
        logger.error("Configuration error", extra={"command": "build", "error": str(err)})
        return CONFIG_ERROR

    except OSError as err:
        logger.error("I/O error", extra={"command": "build", "error": str(err)})
        return RUNTIME_ERROR

    except Exception as err:
        logger.error("Build failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR


def handle_verify(args: argparse.Namespace) -> int:
    """Check the tables named in the config against the ordering rules training relies on."""
    exit_code, config, logger = _load_and_configure(args, "verify")
    if exit_code != SUCCESS:
        return exit_code
    if config is None or config.vocabulary is None:
        return _missing_vocabulary(args, "verify", logger)

    from wordclass.builder.artifacts.reader import verify_artifacts

    vocabulary = config.vocabulary

    try:
        problems = verify_artifacts(
            Path(vocabulary.output_vocab_file),
            Path(vocabulary.output_word2cls) if vocabulary.output_word2cls else None,
            Path(vocabulary.output_cls2index) if vocabulary.output_cls2index else None,
            nbr_classes=vocabulary.nbr_classes,
        )
    except Exception as err:
        logger.error("Verification failed", extra={"error": str(err)}, exc_info=True)
        return RUNTIME_ERROR

    if problems:
        for problem in problems:
            logger.error("Artifact problem", extra={"problem": problem})
        return VALIDATION_ERROR

    logger.info(
        "Artifacts verified",
        extra={"vocabulary_file": vocabulary.output_vocab_file, "nbr_classes": vocabulary.nbr_classes},
    )
    return SUCCESS
