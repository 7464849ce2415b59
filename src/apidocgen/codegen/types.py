"""Generate TypeScript interfaces for endpoints and models.

For every endpoint, and only where the matching input exists:

* ``<Name>Params`` -- one field per query or path parameter, optional unless
  the parameter is ``required``.
* ``<Name>Request`` -- the request body schema's properties.
* ``<Name>Response`` -- shaped by the first 2xx response that carries a
  schema. Object schemas become an interface; arrays of objects become an
  ``<Name>Item`` interface plus ``type <Name>Response = <Name>Item[]``; any
  other schema becomes a type alias. Without a 2xx schema the alias is
  ``unknown`` so that the service signature still type-checks.

Field optionality mirrors each schema's ``required`` list exactly, and a
field with a ``description`` gets a one-line JSDoc comment. The types file
also carries the shared ``APIResponse<T>`` and ``PaginatedResponse<T>``
wrappers and one interface per entry of ``models``.
"""

from __future__ import annotations

import re
from typing import Optional

from apidocgen.codegen.rendering import render
from apidocgen.codegen.type_mapper import map_parameter_type, map_type, property_key
from apidocgen.models import (
    APIDocumentation,
    Endpoint,
    ModelSchema,
    ParameterLocation,
    PropertySchema,
    SchemaType,
)
from apidocgen.naming import (
    item_type_name,
    params_type_name,
    request_type_name,
    response_type_name,
    to_pascal_case,
)


API_RESPONSE_TYPE = """\
export interface APIResponse<T = any> {
  /** Response payload */
  data: T;
  /** HTTP status code */
  status: number;
  /** Optional server message */
  message?: string;
  /** Response headers */
  headers?: Record<string, string>;
}"""

PAGINATED_RESPONSE_TYPE = """\
export interface PaginatedResponse<T> {
  /** Items on this page */
  data: T[];
  /** Total number of items */
  total: number;
  /** Current page, starting at 1 */
  page: number;
  /** Items per page */
  pageSize: number;
  /** Total number of pages */
  totalPages: number;
}"""

COMMON_TYPES: tuple[str, ...] = (API_RESPONSE_TYPE, PAGINATED_RESPONSE_TYPE)
"""Declarations every generated types file starts with."""

_INTERFACE_RE = re.compile(r"^export interface (\w+)", re.MULTILINE)


# ---------------------------------------------------------------------------
# Fragments
# ---------------------------------------------------------------------------


def _doc_comment(text: Optional[str]) -> str:
    return "/** " + " ".join(text.split()).replace("*/", "*\\/") + " */"


def _field(name: str, ts_type: str, optional: bool, description: Optional[str]) -> str:
    line = f"  {property_key(name)}{'?' if optional else ''}: {ts_type};"
    if description:
        return f"  {_doc_comment(description)}\n{line}"
    return line


def _interface(name: str, fields: list[str]) -> str:
    body = "\n".join(fields)
    return f"export interface {name} {{\n{body}\n}}"


def _schema_interface(name: str, properties: dict[str, PropertySchema], required: Optional[list[str]]) -> str:
    names = set(required or [])
    fields = [
        _field(key, map_type(prop), key not in names, prop.description)
        for key, prop in properties.items()
    ]
    return _interface(name, fields)


def success_schema(endpoint: Endpoint) -> Optional[PropertySchema]:
    """Return the schema of the first 2xx response that has one."""
    for response in endpoint.responses:
        code = response.status_code or 0
        if 200 <= code < 300 and response.schema_ is not None:
            return response.schema_
    return None


# ---------------------------------------------------------------------------
# Per-endpoint declarations
# ---------------------------------------------------------------------------


def params_declaration(endpoint: Endpoint) -> Optional[str]:
    """``<Name>Params`` interface, or ``None`` without query/path parameters."""
    params = [
        p
        for p in endpoint.parameters or []
        if p.location in (ParameterLocation.QUERY.value, ParameterLocation.PATH.value)
    ]
    if not params:
        return None
    fields = [
        _field(p.name or "", map_parameter_type(p), not p.required, p.description)
        for p in params
    ]
    return _interface(params_type_name(endpoint), fields)


def request_declaration(endpoint: Endpoint) -> Optional[str]:
    """``<Name>Request`` declaration, or ``None`` without a request body."""
    if endpoint.request_body is None:
        return None
    name = request_type_name(endpoint)
    schema = endpoint.request_body.schema_
    if schema is None or not schema.properties:
        return f"export type {name} = {map_type(schema)};"
    return _schema_interface(name, schema.properties, schema.required)


def response_declarations(endpoint: Endpoint) -> list[str]:
    """Declarations ending with ``<Name>Response``."""
    name = response_type_name(endpoint)
    schema = success_schema(endpoint)

    if schema is None:
        return [f"export type {name} = unknown;"]

    if schema.type == SchemaType.OBJECT.value and schema.properties:
        return [_schema_interface(name, schema.properties, schema.required)]

    items = schema.items
    if (
        schema.type == SchemaType.ARRAY.value
        and items is not None
        and items.type == SchemaType.OBJECT.value
        and items.properties
    ):
        item_name = item_type_name(endpoint)
        return [
            _schema_interface(item_name, items.properties, items.required),
            f"export type {name} = {item_name}[];",
        ]

    return [f"export type {name} = {map_type(schema)};"]


def endpoint_types(endpoint: Endpoint) -> list[str]:
    """All type declarations generated for one endpoint, in emission order."""
    declarations: list[str] = []
    params = params_declaration(endpoint)
    if params is not None:
        declarations.append(params)
    request = request_declaration(endpoint)
    if request is not None:
        declarations.append(request)
    declarations.extend(response_declarations(endpoint))
    return declarations


def model_declaration(name: str, model: ModelSchema) -> str:
    """Interface for a named entry of ``models``."""
    declaration = _schema_interface(to_pascal_case(name), model.properties or {}, model.required)
    if model.description:
        return f"{_doc_comment(model.description)}\n{declaration}"
    return declaration


# ---------------------------------------------------------------------------
# File
# ---------------------------------------------------------------------------


def generate_types(doc: APIDocumentation) -> str:
    """Render the complete ``types.ts`` text for *doc*.

    The output depends only on *doc*: no timestamps, and declarations follow
    the order of ``models`` and ``endpoints``.
    """
    models = [model_declaration(name, model) for name, model in (doc.models or {}).items()]
    endpoints = [
        (endpoint, endpoint_types(endpoint)) for endpoint in doc.endpoints
    ]
    return render(
        "types.ts.j2",
        title=doc.title or "API",
        version=doc.version or "",
        common_types=COMMON_TYPES,
        models=models,
        endpoints=endpoints,
    )


def check_type_declarations(text: str) -> list[str]:
    """Sanity-check generated type text and return a list of problems.

    Reports a missing export, duplicated interface names, and the two
    malformed shapes a broken mapping would leave behind (an unnamed
    interface, or a member without a type).
    """
    problems: list[str] = []
    if "export interface" not in text and "export type" not in text:
        problems.append("No exported type declarations found")

    seen: set[str] = set()
    duplicates: list[str] = []
    for name in _INTERFACE_RE.findall(text):
        if name in seen and name not in duplicates:
            duplicates.append(name)
        seen.add(name)
    if duplicates:
        problems.append(f"Duplicate interface names: {', '.join(duplicates)}")

    if "interface {" in text:
        problems.append("Interface declaration without a name")
    if ": ;" in text:
        problems.append("Member declaration without a type")
    return problems
