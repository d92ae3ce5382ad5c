# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
I/O failures raised by the builder.

Both derive from OSError so callers that only care about "the filesystem said
no" can catch the builtin, while the CLI can still tell a bad corpus path
from an unwritable output directory.
"""


class BuildIOError(OSError):
    """Base for file access failures during a build."""


class CorpusReadError(BuildIOError):
    """Raised when the input corpus cannot be opened or read."""


class ArtifactWriteError(BuildIOError):
    """Raised when an output artifact cannot be written."""


class ArtifactReadError(BuildIOError):
    """Raised when a previously written artifact cannot be read back."""
