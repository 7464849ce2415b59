"""Generate react-query hooks layered over the service functions.

* ``GET`` endpoints get a query hook, ``use<Name>``, cached under the key
  ``['<query-key>', params]``. When the service takes path parameters or a
  request body, the hook takes the service's whole argument tuple as
  ``params`` and spreads it into the call.
* ``POST``/``PUT``/``PATCH``/``DELETE`` endpoints get a mutation hook,
  ``use<Name>Mutation``. On success it invalidates every cached query,
  not only the ones for the affected resource.
* ``HEAD`` and ``OPTIONS`` endpoints get no hook.
"""

from __future__ import annotations

from typing import Optional

from apidocgen.codegen.rendering import render
from apidocgen.models import (
    MUTATING_METHODS,
    Endpoint,
    GeneratedService,
    GeneratorConfig,
    HTTPMethod,
    ParameterLocation,
)
from apidocgen.naming import mutation_hook_name, query_hook_name, query_key


def is_query(endpoint: Endpoint) -> bool:
    return (endpoint.method or "").upper() == HTTPMethod.GET.value


def is_mutation(endpoint: Endpoint) -> bool:
    return (endpoint.method or "").upper() in MUTATING_METHODS


def hook_name(endpoint: Endpoint) -> Optional[str]:
    """Name of the hook generated for *endpoint*, or ``None`` if it gets none."""
    if is_query(endpoint):
        return query_hook_name(endpoint)
    if is_mutation(endpoint):
        return mutation_hook_name(endpoint)
    return None


def _describe(endpoint: Endpoint) -> str:
    text = endpoint.summary or endpoint.description or endpoint.name or ""
    return " ".join(text.split()).replace("*/", "*\\/")


def _takes_positional_arguments(endpoint: Endpoint) -> bool:
    """Whether the service needs more than an optional ``params`` argument."""
    return bool(endpoint.parameters_in(ParameterLocation.PATH)) or endpoint.request_body is not None


def generate_hooks(services: list[GeneratedService], config: GeneratorConfig) -> str:
    """Render ``hooks.ts`` for the given services.

    Only services that receive a hook are imported from ``./services``.
    """
    hooks: list[dict[str, object]] = []
    for service in services:
        endpoint = service.endpoint
        name = hook_name(endpoint)
        if name is None:
            continue
        hooks.append({
            "kind": "query" if is_query(endpoint) else "mutation",
            "name": name,
            "function_name": service.function_name,
            "description": _describe(endpoint),
            "key": query_key(endpoint),
            "spread": _takes_positional_arguments(endpoint),
        })

    has_query = any(h["kind"] == "query" for h in hooks)
    has_mutation = any(h["kind"] == "mutation" for h in hooks)
    runtime_imports: list[str] = []
    type_imports: list[str] = []
    if has_query:
        runtime_imports.append("useQuery")
        type_imports.append("UseQueryOptions")
    if has_mutation:
        runtime_imports.extend(["useMutation", "useQueryClient"])
        type_imports.append("UseMutationOptions")

    return render(
        "hooks.ts.j2",
        query_library=config.query_library,
        runtime_imports=runtime_imports,
        type_imports=type_imports,
        hooks=hooks,
    )
