# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Custom exceptions for the configuration system.

We keep these separate so that the CLI and the builder can catch config-specific
failures without importing the entire config machinery.
"""


class ConfigError(Exception):
    """Base for all configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when a config file cannot be read from disk or parsed as YAML."""


class ConfigValidationError(ConfigError):
    """
    Raised when a config file parses fine but fails schema validation.
    This covers missing required fields, type mismatches, out-of-range values,
    and unknown keys.
    """


class ConfigurationError(ConfigError):
    """
    Raised when the settings are individually valid but cannot produce a build:
    unset sentinel markers, class output paths missing while classes are
    enabled, or a cutoff that leaves no word in the vocabulary.

    Always raised before any artifact is written.
    """
