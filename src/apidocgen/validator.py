"""Structural validation of an :class:`~apidocgen.models.APIDocumentation`.

:func:`validate` walks the whole document once, top to bottom, and collects
every problem it finds instead of stopping at the first one:

1. Basic info -- ``title``, semver ``version``, absolute ``baseURL``,
   non-empty ``endpoints`` (a missing ``description`` is only a warning).
2. Authentication -- known ``type``; ``apiKey`` needs ``headerName``. An API
   without authentication is legal and only produces a warning.
3. Endpoints -- ``id``/``name``/``method``/``path``, unique ids, unique
   ``(method, path)`` pairs, and a declared path parameter for every
   ``{token}`` in the path.
4. Parameters -- name, location, type and min/max ranges.
5. Request bodies -- content type and a recursively valid schema.
6. Responses -- at least one, unique status codes within ``[100, 599]``,
   ideally one 2xx response.
7. Models -- object schemas with properties.

Diagnostics for values of the wrong type come first. The rest follow in
traversal order (document, then each endpoint in array order, then its
parameters and responses in array order). Callers and tests may rely on
that order.

Accumulation happens in a :class:`_ValidationContext` created per call, so
the module keeps no state and concurrent calls cannot see each other's
diagnostics. :func:`validate` never raises and never mutates its input.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional, Union
from urllib.parse import urlparse

import pydantic

from apidocgen.models import (
    APIDocumentation,
    AuthConfig,
    AuthType,
    Endpoint,
    ErrorCode,
    HTTPMethod,
    ModelSchema,
    Parameter,
    ParameterLocation,
    PropertySchema,
    RequestBodySchema,
    RequestContentType,
    ResponseSchema,
    SchemaType,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)
from apidocgen.naming import function_name

logger = logging.getLogger(__name__)


SUGGESTIONS: dict[ErrorCode, str] = {
    ErrorCode.REQUIRED_FIELD: "Fill in every required field",
    ErrorCode.INVALID_URL: "Check the URL format and include the scheme (http:// or https://)",
    ErrorCode.INVALID_FORMAT: "Check that the value uses the expected format",
    ErrorCode.DUPLICATE_ID: "Make sure every endpoint id is unique",
    ErrorCode.DUPLICATE_ENDPOINT: "Make sure every method and path combination is unique",
    ErrorCode.MISSING_PATH_PARAM: "Declare every path parameter in the parameter list",
    ErrorCode.INVALID_VALUE: "Use one of the allowed values",
    ErrorCode.INVALID_RANGE: "Make sure the lower bound does not exceed the upper bound",
    ErrorCode.DUPLICATE_STATUS: "Give each response of an endpoint a distinct status code",
    ErrorCode.INVALID_STATUS_CODE: "Use a valid HTTP status code (100-599)",
}
"""Fixed remediation hint attached to every error of a given code."""

_VERSION_RE = re.compile(r"^\d+\.\d+\.\d+(-[A-Za-z0-9-]+)?$")
_PATH_TOKEN_RE = re.compile(r"\{([^}]+)\}")
_MAX_COERCION_PASSES = 50

_AUTH_TYPES = [t.value for t in AuthType]
_METHODS = [m.value for m in HTTPMethod]
_LOCATIONS = [loc.value for loc in ParameterLocation]
_SCHEMA_TYPES = [t.value for t in SchemaType]
_CONTENT_TYPES = [c.value for c in RequestContentType]


@dataclass
class _ValidationContext:
    """Diagnostics collected during a single :func:`validate` call.

    ``rejected`` holds the field paths whose values could not be coerced.
    Those values are dropped before the traversal, so diagnostics at or
    below a rejected path are not reported a second time.
    """

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)
    rejected: set[str] = field(default_factory=set)

    def is_rejected(self, field_path: str) -> bool:
        for path in self.rejected:
            if field_path == path or field_path.startswith((f"{path}.", f"{path}[")):
                return True
        return False

    def error(self, field_path: str, message: str, code: ErrorCode) -> None:
        if self.is_rejected(field_path):
            return
        self.errors.append(
            ValidationError(
                field=field_path,
                message=message,
                code=code,
                suggestion=SUGGESTIONS.get(code),
            )
        )

    def warn(self, field_path: str, message: str, suggestion: Optional[str] = None) -> None:
        if self.is_rejected(field_path):
            return
        self.warnings.append(
            ValidationWarning(field=field_path, message=message, suggestion=suggestion)
        )


def validate(doc: Union[APIDocumentation, Mapping[str, Any]]) -> ValidationResult:
    """Validate an API documentation object and report every diagnostic.

    Args:
        doc: An :class:`~apidocgen.models.APIDocumentation` or a plain
            mapping in its JSON shape. Values of the wrong type are reported
            as ``INVALID_VALUE`` (``REQUIRED_FIELD`` for a missing required
            key) and left out of the checks that follow.

    Returns:
        A :class:`~apidocgen.models.ValidationResult`; ``is_valid`` is
        ``True`` exactly when ``errors`` is empty.

    Example::

        result = validate(doc)
        if not result.is_valid:
            for err in result.errors:
                print(err.field, err.code.value, err.message)
    """
    ctx = _ValidationContext()
    document = _coerce(doc, ctx)
    if document is not None:
        _check_basic_info(document, ctx)
        _check_authentication(document.authentication, ctx)
        _check_endpoints(document.endpoints, ctx)
        _check_models(document.models, ctx)

    result = ValidationResult(errors=ctx.errors, warnings=ctx.warnings)
    logger.debug(
        "Validation finished: %d error(s), %d warning(s)",
        len(result.errors),
        len(result.warnings),
    )
    return result


def check_function_names(doc: APIDocumentation) -> list[ValidationWarning]:
    """Report service function names synthesised by more than one endpoint.

    Name synthesis does not de-duplicate, so two endpoints such as
    ``GET "users"`` and ``GET "Users!"`` both produce ``getUsers``. This is
    not a validation error; the check is offered separately so callers can
    decide what to do about it.

    Returns:
        One warning per colliding name, in first-occurrence order.
    """
    seen: dict[str, list[int]] = {}
    for index, endpoint in enumerate(doc.endpoints):
        seen.setdefault(function_name(endpoint), []).append(index)

    warnings: list[ValidationWarning] = []
    for name, indexes in seen.items():
        if len(indexes) < 2:
            continue
        fields = ", ".join(f"endpoints[{i}]" for i in indexes)
        warnings.append(
            ValidationWarning(
                field=f"endpoints[{indexes[1]}].name",
                message=f'Function name "{name}" is generated for {fields}',
                suggestion="Rename one of the endpoints",
            )
        )
    return warnings


# ---------------------------------------------------------------------------
# Input coercion
# ---------------------------------------------------------------------------


def _coerce(
    doc: Union[APIDocumentation, Mapping[str, Any]], ctx: _ValidationContext
) -> Optional[APIDocumentation]:
    """Build the model for *doc*, reporting and dropping uncoercible values.

    Every value pydantic rejects becomes a diagnostic and is removed (a list
    item is emptied first, then the whole list goes) until the rest of the
    document coerces. The traversal then runs on what is left, so one badly
    typed field never hides the diagnostics of the others.
    """
    if isinstance(doc, APIDocumentation):
        return doc
    if not isinstance(doc, Mapping):
        ctx.error("", "Documentation must be an object", ErrorCode.INVALID_VALUE)
        return None

    data = _plain(doc)
    for _ in range(_MAX_COERCION_PASSES):
        try:
            return APIDocumentation.model_validate(data)
        except pydantic.ValidationError as exc:
            details = exc.errors()

        for detail in details:
            code = (
                ErrorCode.REQUIRED_FIELD
                if detail["type"] == "missing"
                else ErrorCode.INVALID_VALUE
            )
            ctx.error(_format_loc(detail["loc"]), detail["msg"], code)

        for detail in details:
            loc = tuple(detail["loc"])
            ctx.rejected.add(_format_loc(loc))
            while loc and not _discard(data, loc):
                loc = loc[:-1]
                if loc:
                    ctx.rejected.add(_format_loc(loc))

    logger.warning("Giving up on coercing documentation after %d passes", _MAX_COERCION_PASSES)
    return None


def _plain(value: Any) -> Any:
    """Deep copy of *value* with every mapping a dict and every sequence a list."""
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    return value


def _discard(data: Any, loc: tuple[Union[int, str], ...]) -> bool:
    """Remove the value at *loc*; return ``False`` if nothing changed."""
    parent = data
    for part in loc[:-1]:
        try:
            parent = parent[part]
        except (KeyError, IndexError, TypeError):
            return False

    key = loc[-1]
    if isinstance(parent, dict) and key in parent:
        del parent[key]
        return True
    if (
        isinstance(parent, list)
        and isinstance(key, int)
        and 0 <= key < len(parent)
        and parent[key] != {}
    ):
        parent[key] = {}
        return True
    return False


def _format_loc(loc: tuple[Union[int, str], ...]) -> str:
    """Render a pydantic error location as a dotted field path."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path = f"{path}.{part}" if path else str(part)
    return path


# ---------------------------------------------------------------------------
# Document-level checks
# ---------------------------------------------------------------------------


def _blank(value: Optional[str]) -> bool:
    return not value or not value.strip()


def _is_valid_url(url: str) -> bool:
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return bool(parsed.scheme and parsed.netloc)


def _check_basic_info(doc: APIDocumentation, ctx: _ValidationContext) -> None:
    if _blank(doc.title):
        ctx.error("title", "Title is required", ErrorCode.REQUIRED_FIELD)

    if _blank(doc.version):
        ctx.error("version", "Version is required", ErrorCode.REQUIRED_FIELD)
    elif not _VERSION_RE.match(doc.version):
        ctx.error(
            "version",
            'Version must look like "1.0.0"',
            ErrorCode.INVALID_FORMAT,
        )

    if _blank(doc.base_url):
        ctx.error("baseURL", "Base URL is required", ErrorCode.REQUIRED_FIELD)
    elif not _is_valid_url(doc.base_url):
        ctx.error("baseURL", "Base URL is not a valid absolute URL", ErrorCode.INVALID_URL)

    if _blank(doc.description):
        ctx.warn("description", "Consider adding a description of the API")

    if not doc.endpoints:
        ctx.error(
            "endpoints",
            "Documentation must contain at least one endpoint",
            ErrorCode.REQUIRED_FIELD,
        )


def _check_authentication(auth: Optional[AuthConfig], ctx: _ValidationContext) -> None:
    if auth is None:
        ctx.warn(
            "authentication",
            "Consider configuring authentication so clients know how the API is secured",
        )
        return

    if auth.type not in _AUTH_TYPES:
        ctx.error(
            "authentication.type",
            f"Authentication type must be one of: {', '.join(_AUTH_TYPES)}",
            ErrorCode.INVALID_VALUE,
        )

    if auth.type == AuthType.API_KEY.value and _blank(auth.header_name):
        ctx.error(
            "authentication.headerName",
            "API key authentication must name its header",
            ErrorCode.REQUIRED_FIELD,
        )

    if (
        auth.type == AuthType.BEARER.value
        and auth.token_prefix
        and auth.token_prefix != "Bearer"
    ):
        ctx.warn(
            "authentication.tokenPrefix",
            'Bearer tokens are normally prefixed with "Bearer"',
        )


# ---------------------------------------------------------------------------
# Endpoint checks
# ---------------------------------------------------------------------------


def _check_endpoints(endpoints: list[Endpoint], ctx: _ValidationContext) -> None:
    ids: set[str] = set()
    routes: set[tuple[str, str]] = set()

    for index, endpoint in enumerate(endpoints):
        context = f"endpoints[{index}]"
        _check_endpoint_fields(endpoint, context, ctx)

        if endpoint.id:
            if endpoint.id in ids:
                ctx.error(
                    f"{context}.id",
                    f'Endpoint id "{endpoint.id}" is duplicated',
                    ErrorCode.DUPLICATE_ID,
                )
            else:
                ids.add(endpoint.id)

        if endpoint.method and endpoint.path:
            route = (endpoint.method, endpoint.path)
            if route in routes:
                ctx.error(
                    context,
                    f'Method and path "{endpoint.method}:{endpoint.path}" are duplicated',
                    ErrorCode.DUPLICATE_ENDPOINT,
                )
            else:
                routes.add(route)

        _check_parameters(endpoint.parameters, f"{context}.parameters", ctx)
        _check_request_body(endpoint.request_body, f"{context}.requestBody", ctx)
        _check_responses(endpoint.responses, f"{context}.responses", ctx)


def _check_endpoint_fields(endpoint: Endpoint, context: str, ctx: _ValidationContext) -> None:
    if _blank(endpoint.id):
        ctx.error(f"{context}.id", "Endpoint id is required", ErrorCode.REQUIRED_FIELD)

    if _blank(endpoint.name):
        ctx.error(f"{context}.name", "Endpoint name is required", ErrorCode.REQUIRED_FIELD)

    if endpoint.method not in _METHODS:
        ctx.error(
            f"{context}.method",
            f"HTTP method must be one of: {', '.join(_METHODS)}",
            ErrorCode.INVALID_VALUE,
        )

    if _blank(endpoint.path):
        ctx.error(f"{context}.path", "Endpoint path is required", ErrorCode.REQUIRED_FIELD)
    elif not endpoint.path.startswith("/"):
        ctx.error(
            f"{context}.path",
            'Endpoint path must start with "/"',
            ErrorCode.INVALID_FORMAT,
        )

    if _blank(endpoint.summary):
        ctx.warn(f"{context}.summary", "Consider adding a short summary")

    if _blank(endpoint.description):
        ctx.warn(f"{context}.description", "Consider adding a description")

    declared = {p.name for p in endpoint.parameters_in(ParameterLocation.PATH)}
    for token in _PATH_TOKEN_RE.findall(endpoint.path or ""):
        if token not in declared:
            ctx.error(
                f"{context}.parameters",
                f'Path parameter "{{{token}}}" is not declared in the parameter list',
                ErrorCode.MISSING_PATH_PARAM,
            )


def _check_parameters(
    parameters: Optional[list[Parameter]], context: str, ctx: _ValidationContext
) -> None:
    for index, param in enumerate(parameters or []):
        param_context = f"{context}[{index}]"

        if _blank(param.name):
            ctx.error(
                f"{param_context}.name", "Parameter name is required", ErrorCode.REQUIRED_FIELD
            )

        if param.location not in _LOCATIONS:
            ctx.error(
                f"{param_context}.in",
                f"Parameter location must be one of: {', '.join(_LOCATIONS)}",
                ErrorCode.INVALID_VALUE,
            )

        if param.type not in _SCHEMA_TYPES:
            ctx.error(
                f"{param_context}.type",
                f"Parameter type must be one of: {', '.join(_SCHEMA_TYPES)}",
                ErrorCode.INVALID_VALUE,
            )

        if _blank(param.description):
            ctx.warn(f"{param_context}.description", "Consider describing this parameter")

        if (
            param.type == SchemaType.NUMBER.value
            and param.minimum is not None
            and param.maximum is not None
            and param.minimum > param.maximum
        ):
            ctx.error(param_context, "minimum must not exceed maximum", ErrorCode.INVALID_RANGE)

        if (
            param.type == SchemaType.STRING.value
            and param.min_length is not None
            and param.max_length is not None
            and param.min_length > param.max_length
        ):
            ctx.error(
                param_context, "minLength must not exceed maxLength", ErrorCode.INVALID_RANGE
            )


def _check_request_body(
    body: Optional[RequestBodySchema], context: str, ctx: _ValidationContext
) -> None:
    if body is None:
        return

    if body.content_type not in _CONTENT_TYPES:
        ctx.error(
            f"{context}.contentType",
            f"Content type must be one of: {', '.join(_CONTENT_TYPES)}",
            ErrorCode.INVALID_VALUE,
        )

    if body.schema_ is None:
        ctx.error(f"{context}.schema", "Request body must define a schema", ErrorCode.REQUIRED_FIELD)
    else:
        _check_property_schema(body.schema_, f"{context}.schema", ctx)


def _check_responses(
    responses: list[ResponseSchema], context: str, ctx: _ValidationContext
) -> None:
    if not responses:
        ctx.error(context, "Endpoint must define at least one response", ErrorCode.REQUIRED_FIELD)
        return

    status_codes: set[int] = set()
    has_success = False

    for index, response in enumerate(responses):
        response_context = f"{context}[{index}]"
        code = response.status_code

        if not code:
            ctx.error(
                f"{response_context}.statusCode",
                "Response status code is required",
                ErrorCode.REQUIRED_FIELD,
            )
        else:
            if code in status_codes:
                ctx.error(
                    f"{response_context}.statusCode",
                    f"Status code {code} is duplicated",
                    ErrorCode.DUPLICATE_STATUS,
                )
            else:
                status_codes.add(code)

            if 200 <= code < 300:
                has_success = True

            if not 100 <= code <= 599:
                ctx.error(
                    f"{response_context}.statusCode",
                    f"{code} is not a valid HTTP status code",
                    ErrorCode.INVALID_STATUS_CODE,
                )

        if _blank(response.description):
            ctx.warn(f"{response_context}.description", "Consider describing this response")

        if response.schema_ is not None:
            _check_property_schema(response.schema_, f"{response_context}.schema", ctx)

    if not has_success:
        ctx.warn(context, "Consider defining at least one successful (2xx) response")


def _check_property_schema(schema: PropertySchema, context: str, ctx: _ValidationContext) -> None:
    if _blank(schema.type):
        ctx.error(f"{context}.type", "Schema type is required", ErrorCode.REQUIRED_FIELD)
        return

    if schema.type not in _SCHEMA_TYPES:
        ctx.error(
            f"{context}.type",
            f"Schema type must be one of: {', '.join(_SCHEMA_TYPES)}",
            ErrorCode.INVALID_VALUE,
        )

    if schema.type == SchemaType.OBJECT.value and schema.properties:
        for name, prop in schema.properties.items():
            _check_property_schema(prop, f"{context}.properties.{name}", ctx)

    if schema.type == SchemaType.ARRAY.value and schema.items is not None:
        _check_property_schema(schema.items, f"{context}.items", ctx)


def _check_models(models: Optional[dict[str, ModelSchema]], ctx: _ValidationContext) -> None:
    for name, model in (models or {}).items():
        context = f"models.{name}"

        if model.type != SchemaType.OBJECT.value:
            ctx.error(f"{context}.type", 'Model type must be "object"', ErrorCode.INVALID_VALUE)

        if model.properties is None:
            ctx.error(
                f"{context}.properties", "Model must define properties", ErrorCode.REQUIRED_FIELD
            )
        else:
            for prop_name, prop in model.properties.items():
                _check_property_schema(prop, f"{context}.properties.{prop_name}", ctx)
