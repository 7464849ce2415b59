"""Validate command -- check an API documentation file.

Implements ``apidocgen validate FILE``. Every diagnostic is printed as one
table row (or, with the global ``--json`` flag, the whole
:class:`~apidocgen.models.ValidationResult` in its JSON shape). The exit
code is :data:`~apidocgen.exit_codes.EXIT_VALIDATION_FAILED` when the
document has errors; warnings alone exit successfully. With ``--check-names``
the services are generated and the findings of
:func:`~apidocgen.codegen.check_services` are added to the warnings.
"""

from __future__ import annotations

import typer

from apidocgen.exceptions import DocumentParseError
from apidocgen.exit_codes import EXIT_VALIDATION_FAILED
from apidocgen.models import ValidationResult
from apidocgen.output import OutputFormat, error, get_output, info, success, suggest


def validate_command(
    file: str = typer.Argument(
        help="Documentation file (JSON or YAML), or '-' for stdin."
    ),
    check_names: bool = typer.Option(
        False,
        "--check-names",
        help="Also check the generated services (duplicate names and routes, deprecated endpoints).",
    ),
) -> None:
    """Validate an API documentation file.

    Example::

        apidocgen validate api.json
        apidocgen --json validate api.yaml
        cat api.json | apidocgen validate -
    """
    from apidocgen.loader import load_document
    from apidocgen.codegen import check_services, generate_services
    from apidocgen.validator import validate

    try:
        raw = load_document(file)
    except DocumentParseError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    result = validate(raw)
    if check_names and result.is_valid:
        extra = check_services(generate_services(raw))
        result = ValidationResult(
            errors=result.errors, warnings=[*result.warnings, *extra]
        )

    output = get_output()
    if output.format == OutputFormat.JSON:
        output.print_json(result.model_dump(mode="json", by_alias=True, exclude_none=True))
    elif result.errors or result.warnings:
        _print_diagnostics(result)

    if not result.is_valid:
        error(
            f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)"
        )
        suggest("Fix the errors above, then run the command again")
        raise typer.Exit(code=EXIT_VALIDATION_FAILED)

    if result.warnings:
        info(f"Valid with {len(result.warnings)} warning(s)")
    else:
        success("Documentation is valid")


def _print_diagnostics(result: ValidationResult) -> None:
    headers = ["Severity", "Field", "Code", "Message", "Suggestion"]
    rows: list[list[str]] = []
    for err in result.errors:
        rows.append([
            "error",
            err.field or "-",
            err.code.value,
            err.message,
            err.suggestion or "",
        ])
    for warn in result.warnings:
        rows.append([
            "warning",
            warn.field or "-",
            "",
            warn.message,
            warn.suggestion or "",
        ])
    get_output().print_table(headers, rows, title=f"Diagnostics ({len(rows)})")
