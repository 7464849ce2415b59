"""Quality checks over generated services.

:func:`check_services` inspects a
:class:`~apidocgen.models.ServiceGenerationResult` after generation and
reports common problems in the generated TypeScript:

* per service -- a function name that is not a TypeScript identifier, a
  missing ``export``, a missing ``Promise`` return type, ``any`` in the
  signature, no ``try``/``catch``, no JSDoc block, a deprecated endpoint;
* across services -- function names or ``METHOD:path`` routes produced by
  more than one endpoint;
* ``types.ts`` -- the problems found by
  :func:`~apidocgen.codegen.types.check_type_declarations`.

Nothing here is an error: generation already refused invalid documents, so
every finding is a :class:`~apidocgen.models.ValidationWarning`.
"""

from __future__ import annotations

import re
from typing import Optional

from apidocgen.codegen.types import check_type_declarations
from apidocgen.models import (
    APIDocumentation,
    GeneratedService,
    ServiceGenerationResult,
    ValidationWarning,
)
from apidocgen.validator import check_function_names

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_ANY_RE = re.compile(r"\bany\b")


def check_services(result: ServiceGenerationResult) -> list[ValidationWarning]:
    """Return warnings about the generated services, in service order.

    Services are in endpoint order, so each warning's ``field`` names the
    endpoint the service was generated from.
    """
    warnings: list[ValidationWarning] = []
    for index, service in enumerate(result.services):
        warnings.extend(_check_service(service, f"endpoints[{index}]"))

    endpoints = [service.endpoint for service in result.services]
    warnings.extend(check_function_names(APIDocumentation(endpoints=endpoints)))
    warnings.extend(_duplicate_routes(result.services))

    if result.types:
        for problem in check_type_declarations(result.types):
            warnings.append(
                ValidationWarning(
                    field="types",
                    message=problem,
                    suggestion="Check the schemas behind the generated types",
                )
            )
    return warnings


def _signature(code: str) -> Optional[str]:
    for line in code.splitlines():
        if line.startswith("export "):
            return line
    return None


def _check_service(service: GeneratedService, context: str) -> list[ValidationWarning]:
    name = service.function_name
    code = service.code
    signature = _signature(code)
    found: list[ValidationWarning] = []

    def warn(message: str, suggestion: str) -> None:
        found.append(ValidationWarning(field=context, message=message, suggestion=suggestion))

    if not _IDENTIFIER_RE.match(name):
        warn(
            f'"{name}" is not a valid function name',
            "Give the endpoint a name that contains letters",
        )
    if signature is None:
        warn(f"{name} is not exported", "Export the service function")
    else:
        if "Promise<" not in signature:
            warn(f"{name} does not declare a Promise return type", "Return a typed Promise")
        if _ANY_RE.search(signature):
            warn(
                f'{name} uses "any" in its signature',
                "Give every path parameter a known type",
            )
    if "try {" not in code or "catch" not in code:
        warn(f"{name} has no error handling", "Wrap the client call in try/catch")
    if "/**" not in code:
        warn(f"{name} has no JSDoc comment", "Add a summary to the endpoint")
    if service.endpoint.deprecated:
        warn(
            f'Endpoint "{service.endpoint.name}" is deprecated',
            "Plan a migration away from this endpoint",
        )
    return found


def _duplicate_routes(services: list[GeneratedService]) -> list[ValidationWarning]:
    seen: dict[str, list[int]] = {}
    for index, service in enumerate(services):
        route = f"{(service.endpoint.method or '').upper()}:{service.endpoint.path}"
        seen.setdefault(route, []).append(index)

    warnings: list[ValidationWarning] = []
    for route, indexes in seen.items():
        if len(indexes) < 2:
            continue
        fields = ", ".join(f"endpoints[{i}]" for i in indexes)
        warnings.append(
            ValidationWarning(
                field=f"endpoints[{indexes[1]}]",
                message=f'Route "{route}" is generated for {fields}',
                suggestion="Give each endpoint a unique method and path",
            )
        )
    return warnings
