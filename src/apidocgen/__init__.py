"""apidocgen -- Validate API documentation and generate typed TypeScript clients.

This package checks a JSON description of a REST API for structural problems
and, when it is valid, generates four TypeScript files from it: interfaces
for every request and response, one async client function per endpoint,
react-query hooks over those functions, and an index that re-exports them.

Typical workflow::

    apidocgen validate api.json
    apidocgen generate api.json -o src/api

Modules:
    app: Typer application factory and CLI entry point.
    models: Pydantic models for documentation, diagnostics and results.
    validator: Structural validation with accumulated diagnostics.
    codegen: TypeScript type, service, hook and index generators.
    pipeline: Validate-then-generate entry point.
    naming: Identifier synthesis shared by every generator.
    loader: JSON/YAML document loading.
    config: XDG-aware generator configuration.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes following clig.dev conventions.
    output: stdout/stderr formatting system with Rich support.
"""

__version__ = "0.1.0"
