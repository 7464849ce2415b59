"""Exception hierarchy for apidocgen.

All exceptions inherit from :class:`ApidocgenError`, which carries an
``exit_code`` attribute mapped to a constant from :mod:`apidocgen.exit_codes`.
The top-level error handler in :func:`apidocgen.app.main` catches
``ApidocgenError`` and exits with the appropriate code, while unexpected
exceptions produce a crash log and exit with :data:`EXIT_GENERIC_FAILURE`.

The validator itself never raises: structural problems are reported as
diagnostics. :class:`GenerationBlockedError` is raised only at the
integration boundary (:func:`apidocgen.pipeline.generate`) when a caller
asks for code from a document that did not validate.

Subclass hierarchy::

    ApidocgenError (exit 1)
    +-- InvalidUsageError       (exit 2)
    +-- DocumentParseError      (exit 7)
    +-- GenerationBlockedError  (exit 8)
    +-- ConfigError             (exit 1)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apidocgen.exit_codes import (
    EXIT_DOCUMENT_PARSE_ERROR,
    EXIT_GENERIC_FAILURE,
    EXIT_INVALID_USAGE,
    EXIT_VALIDATION_FAILED,
)

if TYPE_CHECKING:
    from apidocgen.models import ValidationResult


class ApidocgenError(Exception):
    """Base exception for all apidocgen errors.

    Args:
        message: Human-readable error description printed to stderr.
        exit_code: Optional override for the class-level exit code.
    """

    exit_code: int = EXIT_GENERIC_FAILURE

    def __init__(self, message: str, exit_code: int | None = None):
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code


class InvalidUsageError(ApidocgenError):
    """Raised for invalid CLI arguments (unknown artifact, unknown example)."""

    exit_code = EXIT_INVALID_USAGE


class DocumentParseError(ApidocgenError):
    """Raised when an API documentation file cannot be read or parsed."""

    exit_code = EXIT_DOCUMENT_PARSE_ERROR


class GenerationBlockedError(ApidocgenError):
    """Raised when code generation is requested for an invalid document.

    The full :class:`~apidocgen.models.ValidationResult` is kept on
    ``result`` so callers can report every diagnostic, not just the first.

    Args:
        result: The failed validation result.
    """

    exit_code = EXIT_VALIDATION_FAILED

    def __init__(self, result: ValidationResult):
        count = len(result.errors)
        noun = "error" if count == 1 else "errors"
        super().__init__(
            f"Generation blocked: documentation has {count} validation {noun}"
        )
        self.result = result


class ConfigError(ApidocgenError):
    """Raised for configuration problems (invalid JSON, bad values)."""

    exit_code = EXIT_GENERIC_FAILURE
