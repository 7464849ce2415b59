"""Generate command -- emit TypeScript from an API documentation file.

Implements ``apidocgen generate FILE``. The document is validated first and
generation is refused (exit :data:`~apidocgen.exit_codes.EXIT_VALIDATION_FAILED`)
if it has errors. Findings of :func:`~apidocgen.codegen.check_services`
about the generated code are printed to stderr as warnings. Output goes to stdout by default: one artifact with
``--artifact``, or every enabled artifact separated by file banners. With
``--output-dir`` the files are written to disk instead.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from apidocgen.exceptions import (
    ApidocgenError,
    GenerationBlockedError,
    InvalidUsageError,
)
from apidocgen.models import ServiceGenerationResult
from apidocgen.output import (
    OutputFormat,
    debug,
    error,
    get_output,
    success,
    suggest,
    warning,
)


ARTIFACTS: dict[str, str] = {
    "types": "types.ts",
    "services": "services.ts",
    "hooks": "hooks.ts",
    "index": "index.ts",
}
"""Artifact name to the file name it is written as."""


def artifact_texts(result: ServiceGenerationResult) -> dict[str, str]:
    """Map each artifact name to its generated text (empty when disabled)."""
    return {
        "types": result.types,
        "services": result.services_code,
        "hooks": result.hooks,
        "index": result.index,
    }


def generate_command(
    file: str = typer.Argument(
        help="Documentation file (JSON or YAML), or '-' for stdin."
    ),
    artifact: str = typer.Option(
        "all",
        "--artifact",
        "-a",
        help="Artifact to print: types, services, hooks, index, or all.",
    ),
    output_dir: Optional[Path] = typer.Option(
        None,
        "--output-dir",
        "-o",
        help="Write the generated files to this directory instead of stdout.",
    ),
    client_name: Optional[str] = typer.Option(
        None, "--client-name", help="Identifier of the HTTP client object."
    ),
    no_hooks: bool = typer.Option(
        False, "--no-hooks", help="Do not generate react-query hooks."
    ),
    no_types: bool = typer.Option(
        False, "--no-types", help="Do not generate types.ts."
    ),
) -> None:
    """Generate TypeScript types, services, and hooks from documentation.

    Example::

        apidocgen generate api.json
        apidocgen generate api.json --artifact services > services.ts
        apidocgen generate api.yaml -o src/api --no-hooks
    """
    from apidocgen.codegen import check_services
    from apidocgen.config import resolve_generator_config
    from apidocgen.loader import load_document
    from apidocgen.pipeline import generate

    try:
        if artifact != "all" and artifact not in ARTIFACTS:
            raise InvalidUsageError(
                f"Unknown artifact '{artifact}'. Choose from: all, {', '.join(ARTIFACTS)}"
            )
        config = resolve_generator_config(
            cli_client_name=client_name,
            cli_no_hooks=no_hooks,
            cli_no_types=no_types,
        )
        raw = load_document(file)
        result = generate(raw, config)
    except GenerationBlockedError as exc:
        for err in exc.result.errors:
            error(f"{err.field or '<document>'}: {err.message}")
        error(str(exc))
        suggest(f"Run: apidocgen validate {file}")
        raise typer.Exit(code=exc.exit_code) from None
    except ApidocgenError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None

    for finding in check_services(result):
        warning(f"{finding.field}: {finding.message}")

    texts = artifact_texts(result)
    selected = list(ARTIFACTS) if artifact == "all" else [artifact]
    selected = [name for name in selected if texts[name]]
    if not selected:
        error(f"Artifact '{artifact}' is disabled by the generator configuration")
        raise typer.Exit(code=InvalidUsageError.exit_code)

    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        for name in selected:
            path = output_dir / ARTIFACTS[name]
            path.write_text(texts[name], encoding="utf-8")
            debug(f"Wrote {path}")
        success(
            f"Generated {result.total_functions} service function(s) into {output_dir}"
        )
        return

    output = get_output()
    if output.format == OutputFormat.JSON:
        payload = {ARTIFACTS[name]: texts[name] for name in selected}
        payload["totalFunctions"] = result.total_functions
        output.print_json(payload)
        return

    for position, name in enumerate(selected):
        if len(selected) > 1:
            if position:
                output.print_data("")
            output.print_data(f"// ===== {ARTIFACTS[name]} =====")
        output.print_code(texts[name])
