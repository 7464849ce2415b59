"""Generate typed client service functions, one per endpoint.

This is the driver of code generation: :func:`generate_services` builds a
:class:`~apidocgen.models.GeneratedService` for every endpoint and then asks
the type, hook and index generators for the remaining artifacts.

**Function shape:**

* Name -- method prefix plus PascalCase(name), see
  :func:`apidocgen.naming.function_name`.
* Parameters, in this order -- each path parameter (typed individually),
  ``params?: <Name>Params`` when query parameters exist (``params:
  <Name>Params | undefined`` when a body follows), ``data: <Name>Request``
  when a request body exists, and ``config?: RequestConfig``.
* Body -- one client call chosen by method. ``params`` is forwarded only by
  ``GET``/``HEAD`` reads and ``data`` only when a body exists. Every
  ``{name}`` path token becomes ``${name}`` in a template literal.
* Errors -- the call sits in ``try``/``catch`` and the error is re-thrown
  unchanged. Retries and fallbacks belong to the caller.

Header and ``body`` parameters are documented but not part of the signature.
With ``include_types`` off, ``services.ts`` carries the declarations it
needs and takes ``APIResponse`` from the client module.
Output is byte-identical for identical input.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Optional, Union

from apidocgen.codegen.hooks import generate_hooks
from apidocgen.codegen.index import generate_index
from apidocgen.codegen.rendering import render
from apidocgen.codegen.type_mapper import map_parameter_type
from apidocgen.codegen.types import endpoint_types, generate_types
from apidocgen.models import (
    APIDocumentation,
    Endpoint,
    GeneratedService,
    GeneratorConfig,
    HTTPMethod,
    ParameterLocation,
    ServiceGenerationResult,
)
from apidocgen.naming import (
    function_name,
    params_type_name,
    request_type_name,
    response_type_name,
    to_identifier,
)

logger = logging.getLogger(__name__)

_PATH_TOKEN_RE = re.compile(r"\{([^}]+)\}")
_BODY_METHODS = (HTTPMethod.POST.value, HTTPMethod.PUT.value, HTTPMethod.PATCH.value)
_READ_METHODS = (HTTPMethod.GET.value, HTTPMethod.HEAD.value)


def generate_services(
    doc: Union[APIDocumentation, Mapping[str, Any]],
    config: Optional[GeneratorConfig] = None,
) -> ServiceGenerationResult:
    """Generate every artifact for a validated documentation object.

    The document is assumed to have passed
    :func:`~apidocgen.validator.validate`; use
    :func:`apidocgen.pipeline.generate` to get that check enforced.

    Args:
        doc: The documentation, as a model or in its JSON shape.
        config: Generator settings. Defaults to :class:`GeneratorConfig()`.

    Returns:
        A :class:`~apidocgen.models.ServiceGenerationResult` with one
        service per endpoint, in endpoint order, and the text of
        ``types.ts``, ``services.ts``, ``hooks.ts`` and ``index.ts``.
        Disabled artifacts are empty strings.
    """
    config = config or GeneratorConfig()
    document = (
        doc if isinstance(doc, APIDocumentation) else APIDocumentation.model_validate(doc)
    )

    services = [generate_service(endpoint, config) for endpoint in document.endpoints]

    result = ServiceGenerationResult(
        services=services,
        types=generate_types(document) if config.include_types else "",
        services_code=_generate_services_file(document, services, config),
        hooks=generate_hooks(services, config) if config.include_hooks else "",
        index=generate_index(services, config),
        total_functions=len(services),
    )
    logger.info(
        "Generated %d service function(s) for %s", result.total_functions, document.title
    )
    return result


def generate_service(endpoint: Endpoint, config: GeneratorConfig) -> GeneratedService:
    """Build the :class:`GeneratedService` for one endpoint."""
    name = function_name(endpoint)
    code = render(
        "service_function.ts.j2",
        doc_lines=_doc_lines(endpoint),
        function_name=name,
        parameters=_signature(endpoint),
        response_type=response_type_name(endpoint),
        call=_client_call(endpoint, config),
    ).rstrip("\n")
    logger.debug("Generated %s for %s %s", name, endpoint.method, endpoint.path)
    return GeneratedService(
        name=endpoint.name or "",
        function_name=name,
        code=code,
        types=endpoint_types(endpoint),
        imports=_imports(_referenced_types(endpoint), config),
        endpoint=endpoint,
    )


# ---------------------------------------------------------------------------
# Signature
# ---------------------------------------------------------------------------


def _has_query(endpoint: Endpoint) -> bool:
    return bool(endpoint.parameters_in(ParameterLocation.QUERY))


def _signature(endpoint: Endpoint) -> list[str]:
    parameters = [
        f"{to_identifier(p.name or '')}: {map_parameter_type(p)}"
        for p in endpoint.parameters_in(ParameterLocation.PATH)
    ]
    if _has_query(endpoint):
        # A required ``data`` may not follow an optional parameter.
        if endpoint.request_body is not None:
            parameters.append(f"params: {params_type_name(endpoint)} | undefined")
        else:
            parameters.append(f"params?: {params_type_name(endpoint)}")
    if endpoint.request_body is not None:
        parameters.append(f"data: {request_type_name(endpoint)}")
    parameters.append("config?: RequestConfig")
    return parameters


def _referenced_types(endpoint: Endpoint) -> list[str]:
    """Type names from ``types.ts`` that the service function mentions."""
    names = ["APIResponse"]
    if _has_query(endpoint):
        names.append(params_type_name(endpoint))
    if endpoint.request_body is not None:
        names.append(request_type_name(endpoint))
    names.append(response_type_name(endpoint))
    return names


def _doc_lines(endpoint: Endpoint) -> list[str]:
    lines = [endpoint.summary or endpoint.description or endpoint.name or ""]
    if endpoint.description and endpoint.description != lines[0]:
        lines.append(endpoint.description)
    for param in endpoint.parameters_in(ParameterLocation.PATH):
        ident = to_identifier(param.name or "")
        lines.append(f"@param {ident} {param.description or param.name}")
    if _has_query(endpoint):
        lines.append("@param params Query parameters")
    if endpoint.request_body is not None:
        lines.append("@param data Request body")
    lines.append("@param config Request configuration")
    lines.append(f"@returns Promise<APIResponse<{response_type_name(endpoint)}>>")
    if endpoint.deprecated:
        lines.append("@deprecated This endpoint is deprecated")
    return [" ".join(line.split()).replace("*/", "*\\/") for line in lines]


# ---------------------------------------------------------------------------
# Call
# ---------------------------------------------------------------------------


def _url_literal(endpoint: Endpoint) -> str:
    """Template literal for the endpoint path with path tokens substituted."""
    declared = {p.name for p in endpoint.parameters_in(ParameterLocation.PATH)}
    path = (endpoint.path or "").replace("\\", "\\\\").replace("`", "\\`")

    def _substitute(match: re.Match[str]) -> str:
        token = match.group(1)
        if token not in declared:
            return match.group(0)
        return "${" + to_identifier(token) + "}"

    return "`" + _PATH_TOKEN_RE.sub(_substitute, path) + "`"


def _client_call(endpoint: Endpoint, config: GeneratorConfig) -> str:
    method = (endpoint.method or "").upper()
    client = config.client_name
    response_type = response_type_name(endpoint)
    url = _url_literal(endpoint)
    params = "params" if method in _READ_METHODS and _has_query(endpoint) else "undefined"
    data = "data" if endpoint.request_body is not None else "undefined"

    if method == HTTPMethod.GET.value:
        return f"{client}.get<{response_type}>({url}, {params}, config)"
    if method in _BODY_METHODS:
        return f"{client}.{method.lower()}<{response_type}>({url}, {data}, config)"
    if method == HTTPMethod.DELETE.value:
        return f"{client}.delete<{response_type}>({url}, config)"

    options = [f"method: '{method}'", f"url: {url}"]
    if params != "undefined":
        options.append("params")
    if endpoint.request_body is not None:
        options.append("data")
    options.append("...config")
    return f"{client}.request<{response_type}>({{ {', '.join(options)} }})"


# ---------------------------------------------------------------------------
# File
# ---------------------------------------------------------------------------


def _imports(type_names: list[str], config: GeneratorConfig) -> list[str]:
    client = f"import {{ {config.client_name} }} from '{config.client_factory_import}';"
    if not config.include_types:
        # Without types.ts, APIResponse comes from the client module.
        return [
            f"import type {{ APIResponse, RequestConfig }} from '{config.client_import}';",
            client,
        ]
    return [
        f"import type {{ RequestConfig }} from '{config.client_import}';",
        client,
        f"import type {{ {', '.join(type_names)} }} from './types';",
    ]


def _generate_services_file(
    doc: APIDocumentation, services: list[GeneratedService], config: GeneratorConfig
) -> str:
    """Render ``services.ts``.

    When ``types.ts`` is disabled the endpoint declarations the functions
    refer to are emitted in this file, so it never imports a file that was
    not generated.
    """
    type_names: list[str] = []
    declarations: list[str] = []
    for service in services:
        for name in _referenced_types(service.endpoint):
            if name not in type_names:
                type_names.append(name)
        if not config.include_types:
            declarations.extend(service.types)
    return render(
        "services.ts.j2",
        title=doc.title or "API",
        version=doc.version or "",
        imports=_imports(type_names or ["APIResponse"], config),
        declarations=declarations,
        services=services,
    )
