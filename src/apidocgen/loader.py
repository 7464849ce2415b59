"""Load API documentation from a local file or stdin.

Documents may be JSON or YAML. The file extension is used as a format hint;
otherwise JSON is tried first and YAML second (every JSON document is also
YAML, but JSON parsing is stricter and gives better error messages).

The loader only parses. Checking the document's structure is the job of
:func:`apidocgen.validator.validate`, which reports problems as diagnostics
instead of raising.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any

import yaml

from apidocgen.exceptions import DocumentParseError


def load_document(source: str) -> dict[str, Any]:
    """Load documentation from a file path, or from stdin when *source* is ``-``.

    Args:
        source: A file path, or ``'-'`` for stdin.

    Returns:
        The parsed document as a dictionary.

    Raises:
        DocumentParseError: If the source cannot be read, is empty, cannot
            be parsed, or is not a mapping at the top level.
    """
    if source == "-":
        return _load_from_stdin()
    return _load_from_file(source)


def _load_from_stdin() -> dict[str, Any]:
    try:
        content = sys.stdin.read()
    except OSError as exc:
        raise DocumentParseError(f"Failed to read from stdin: {exc}") from exc

    if not content.strip():
        raise DocumentParseError("No input received from stdin")

    return parse_content(content)


def _load_from_file(path: str) -> dict[str, Any]:
    file_path = Path(path)
    if not file_path.is_file():
        raise DocumentParseError(f"Documentation file not found: {path}")

    try:
        content = file_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentParseError(f"Failed to read documentation file {path}: {exc}") from exc

    if not content.strip():
        raise DocumentParseError(f"Documentation file is empty: {path}")

    suffix = file_path.suffix.lower()
    hint = ""
    if suffix == ".json":
        hint = "json"
    elif suffix in (".yaml", ".yml"):
        hint = "yaml"

    return parse_content(content, hint=hint)


def parse_content(content: str, hint: str = "") -> dict[str, Any]:
    """Parse *content* as JSON or YAML.

    Args:
        content: The raw text.
        hint: Optional format hint, ``'json'`` or ``'yaml'``. With ``'json'``
            a JSON syntax error is final; with ``'yaml'`` JSON is not tried.

    Returns:
        The parsed dictionary.

    Raises:
        DocumentParseError: If the content parses as neither format, or the
            top-level value is not a mapping.
    """
    json_error: Exception | None = None
    yaml_error: Exception | None = None

    if hint != "yaml":
        try:
            result = json.loads(content)
        except json.JSONDecodeError as exc:
            json_error = exc
            if hint == "json":
                raise DocumentParseError(f"Invalid JSON: {exc}") from exc
        else:
            return _require_mapping(result)

    try:
        result = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        yaml_error = exc
    else:
        return _require_mapping(result)

    msg = "Failed to parse documentation as JSON or YAML"
    if json_error:
        msg += f"\n  JSON error: {json_error}"
    if yaml_error:
        msg += f"\n  YAML error: {yaml_error}"
    raise DocumentParseError(msg)


def _require_mapping(value: Any) -> dict[str, Any]:
    if not isinstance(value, dict):
        kind = type(value).__name__ if value is not None else "empty document"
        raise DocumentParseError(
            f"Documentation must be a JSON/YAML object (got {kind})"
        )
    return value
