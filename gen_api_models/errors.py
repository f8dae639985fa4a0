"""Error hierarchy for the generator.

Only fatal conditions are raised. Problems local to a single operation or
parameter are logged and the offending element is skipped.
"""

from __future__ import annotations


class GeneratorError(Exception):
    """Base class for all fatal generator errors."""


class SpecLoadError(GeneratorError):
    """Raised when a spec cannot be read, fetched or parsed."""


class UnsupportedSpecVersionError(GeneratorError):
    """Raised when the document is not a Swagger 2.0 specification."""


class InvalidSpecError(GeneratorError):
    """Raised when the document does not have the shape of a Swagger 2.0 spec."""
