# -*- coding: utf-8 -*-
"""
Error Taxonomy
==============

All failures raised by stratum derive from :class:`StratumError`.

- MeshIOError  : a mesh source, G-code file or output directory cannot be opened/created
- ParseError   : a numeric field or G-code argument is malformed
- ConfigError  : a print profile violates its preconditions
- EncodeError  : the mask image codec rejected a layer mask

Numeric edge cases inside the slicing math (coplanar edges, odd crossing
counts, zero-extent models) never raise; they resolve to fixed fallbacks.
"""


class StratumError(Exception):
    """Base class for every stratum error."""


class MeshIOError(StratumError, OSError):
    """A file or directory could not be opened or created."""


class ParseError(StratumError, ValueError):
    """Malformed input text.

    Attributes:
        line_number: 1-based line of the offending text, when known.
    """

    def __init__(self, message: str, line_number: int = None):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


class ConfigError(StratumError, ValueError):
    """A profile field violates a precondition."""


class EncodeError(StratumError):
    """The image codec failed to encode a mask."""
