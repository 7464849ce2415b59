"""Numeric process exit codes for the ``apidocgen`` CLI.

Each constant maps to a specific failure category and is referenced by the
corresponding :class:`~apidocgen.exceptions.ApidocgenError` subclass.
CI scripts can inspect the exit code to tell an invalid document apart from
an unreadable one without parsing stderr.

Example::

    $ apidocgen validate api.json
    $ echo $?
    8   # EXIT_VALIDATION_FAILED -- the document has structural errors
"""

EXIT_SUCCESS = 0
"""The command completed successfully."""

EXIT_GENERIC_FAILURE = 1
"""An unclassified error occurred."""

EXIT_INVALID_USAGE = 2
"""The command was invoked with invalid arguments."""

EXIT_DOCUMENT_PARSE_ERROR = 7
"""The API documentation file could not be read or parsed."""

EXIT_VALIDATION_FAILED = 8
"""The API documentation failed validation; nothing was generated."""
