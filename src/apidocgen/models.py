"""Canonical Pydantic models shared across all apidocgen modules.

This is the single source of truth for data shapes in the project. Every other
module imports from here rather than defining its own models. The models fall
into three groups:

**Documentation models** -- the input schema describing a REST API:
    :class:`AuthConfig`, :class:`Parameter`, :class:`PropertySchema`,
    :class:`RequestBodySchema`, :class:`ResponseSchema`, :class:`Endpoint`,
    :class:`ModelSchema`, and :class:`APIDocumentation`.

**Result models** -- produced by the validator and the code generators:
    :class:`ValidationError`, :class:`ValidationWarning`,
    :class:`ValidationResult`, :class:`GeneratedService`, and
    :class:`ServiceGenerationResult`.

**Configuration models** -- serialised as JSON in the user's config directory:
    :class:`GeneratorConfig` and :class:`GlobalConfig`.

Documentation models are deliberately lenient: enumerated fields are plain
strings and almost everything is optional, so a malformed document can still
be built and handed to :func:`apidocgen.validator.validate`, which reports
what is wrong instead of failing on the first bad field. All documentation
and result models are frozen; nothing in the pipeline mutates them.

JSON keys are camelCase (``baseURL``, ``requestBody``, ``statusCode``) and map
onto snake_case attributes through aliases. Serialise results with
``model_dump(by_alias=True, exclude_none=True)`` to get the wire shape back.
"""

from __future__ import annotations

import enum
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


_DOCUMENT_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="allow")
_RESULT_CONFIG = ConfigDict(frozen=True, populate_by_name=True)


# --- Enumerations ---


class HTTPMethod(str, enum.Enum):
    """HTTP methods an :class:`Endpoint` may declare."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    PATCH = "PATCH"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"


class ParameterLocation(str, enum.Enum):
    """Locations where a :class:`Parameter` can appear (its ``in`` field)."""

    QUERY = "query"
    PATH = "path"
    HEADER = "header"
    BODY = "body"


class SchemaType(str, enum.Enum):
    """Value types shared by parameters and property schemas."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


class AuthType(str, enum.Enum):
    """Authentication strategies an API may declare."""

    BEARER = "bearer"
    API_KEY = "apiKey"
    BASIC = "basic"
    OAUTH2 = "oauth2"


class RequestContentType(str, enum.Enum):
    """MIME types accepted for a request body."""

    JSON = "application/json"
    FORM_URLENCODED = "application/x-www-form-urlencoded"
    MULTIPART = "multipart/form-data"


class ErrorCode(str, enum.Enum):
    """Closed set of codes carried by :class:`ValidationError`."""

    REQUIRED_FIELD = "REQUIRED_FIELD"
    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_URL = "INVALID_URL"
    DUPLICATE_ID = "DUPLICATE_ID"
    DUPLICATE_ENDPOINT = "DUPLICATE_ENDPOINT"
    MISSING_PATH_PARAM = "MISSING_PATH_PARAM"
    INVALID_VALUE = "INVALID_VALUE"
    INVALID_RANGE = "INVALID_RANGE"
    DUPLICATE_STATUS = "DUPLICATE_STATUS"
    INVALID_STATUS_CODE = "INVALID_STATUS_CODE"


MUTATING_METHODS: tuple[str, ...] = (
    HTTPMethod.POST.value,
    HTTPMethod.PUT.value,
    HTTPMethod.PATCH.value,
    HTTPMethod.DELETE.value,
)
"""Methods whose generated hooks are mutations rather than queries."""


# --- Documentation models ---


class AuthConfig(BaseModel):
    """Authentication settings declared by the documented API.

    ``apiKey`` authentication needs a ``headerName``; ``bearer`` tokens are
    normally prefixed with ``"Bearer"``.
    """

    model_config = _DOCUMENT_CONFIG

    type: Optional[str] = None
    header_name: Optional[str] = Field(default=None, alias="headerName")
    token_prefix: Optional[str] = Field(default=None, alias="tokenPrefix")
    description: Optional[str] = None


class Parameter(BaseModel):
    """A single endpoint parameter.

    Path parameters fill ``{name}`` tokens in :attr:`Endpoint.path`; query
    parameters are collected into the generated ``params`` object.
    """

    model_config = _DOCUMENT_CONFIG

    name: Optional[str] = None
    location: Optional[str] = Field(default=None, alias="in")
    required: bool = False
    type: Optional[str] = None
    description: Optional[str] = None
    example: Any = None
    enum: Optional[list[str]] = None
    format: Optional[str] = None
    pattern: Optional[str] = None
    minimum: Optional[float] = None
    maximum: Optional[float] = None
    min_length: Optional[int] = Field(default=None, alias="minLength")
    max_length: Optional[int] = Field(default=None, alias="maxLength")


class PropertySchema(BaseModel):
    """A recursive value schema.

    ``items`` describes array elements and ``properties`` the members of an
    object. Names listed in ``required`` are mandatory members; every other
    member is optional. Schemas are trees: nothing guards against cycles.
    """

    model_config = _DOCUMENT_CONFIG

    type: Optional[str] = None
    description: Optional[str] = None
    example: Any = None
    enum: Optional[list[str]] = None
    format: Optional[str] = None
    items: Optional[PropertySchema] = None
    properties: Optional[dict[str, PropertySchema]] = None
    required: Optional[list[str]] = None


class RequestBodySchema(BaseModel):
    """Request body of an endpoint: a content type plus an object schema."""

    model_config = _DOCUMENT_CONFIG

    content_type: Optional[str] = Field(default=None, alias="contentType")
    schema_: Optional[PropertySchema] = Field(default=None, alias="schema")
    example: Any = None


class ResponseSchema(BaseModel):
    """One documented response of an endpoint, keyed by status code."""

    model_config = _DOCUMENT_CONFIG

    status_code: Optional[int] = Field(default=None, alias="statusCode")
    description: Optional[str] = None
    content_type: Optional[str] = Field(default=None, alias="contentType")
    schema_: Optional[PropertySchema] = Field(default=None, alias="schema")
    example: Any = None


class Endpoint(BaseModel):
    """A single documented operation: one HTTP method on one path.

    Each endpoint becomes exactly one generated service function, plus a
    query hook (``GET``) or a mutation hook (``POST``/``PUT``/``PATCH``/
    ``DELETE``).
    """

    model_config = _DOCUMENT_CONFIG

    id: Optional[str] = None
    name: Optional[str] = None
    method: Optional[str] = None
    path: Optional[str] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    parameters: Optional[list[Parameter]] = None
    request_body: Optional[RequestBodySchema] = Field(default=None, alias="requestBody")
    responses: list[ResponseSchema] = Field(default_factory=list)
    deprecated: bool = False

    def parameters_in(self, location: ParameterLocation) -> list[Parameter]:
        """Return the declared parameters found at *location*, in order."""
        return [p for p in self.parameters or [] if p.location == location.value]


class ModelSchema(BaseModel):
    """A named, reusable object model listed under ``models``."""

    model_config = _DOCUMENT_CONFIG

    name: Optional[str] = None
    description: Optional[str] = None
    type: Optional[str] = None
    properties: Optional[dict[str, PropertySchema]] = None
    required: Optional[list[str]] = None
    example: Any = None


class Environment(BaseModel):
    """A named deployment target of the documented API."""

    model_config = _DOCUMENT_CONFIG

    name: str
    base_url: str = Field(alias="baseURL")
    description: Optional[str] = None


class APIDocumentation(BaseModel):
    """Complete description of a REST API.

    Supplied by the caller, checked by :func:`apidocgen.validator.validate`
    and, once valid, turned into TypeScript by the code generators.

    Example::

        APIDocumentation.model_validate({
            "title": "Users API",
            "version": "1.0.0",
            "baseURL": "https://api.example.com",
            "endpoints": [...],
        })
    """

    model_config = _DOCUMENT_CONFIG

    title: Optional[str] = None
    version: Optional[str] = None
    description: Optional[str] = None
    base_url: Optional[str] = Field(default=None, alias="baseURL")
    authentication: Optional[AuthConfig] = None
    global_headers: Optional[dict[str, str]] = Field(default=None, alias="globalHeaders")
    timeout: Optional[int] = None
    endpoints: list[Endpoint] = Field(default_factory=list)
    models: Optional[dict[str, ModelSchema]] = None
    environments: Optional[list[Environment]] = None
    metadata: Optional[dict[str, Any]] = None


# --- Result models ---


class ValidationError(BaseModel):
    """A structural error. Any error blocks code generation."""

    model_config = _RESULT_CONFIG

    field: str
    message: str
    code: ErrorCode
    severity: Literal["error"] = "error"
    suggestion: Optional[str] = None


class ValidationWarning(BaseModel):
    """A non-blocking remark about an incomplete or unusual document."""

    model_config = _RESULT_CONFIG

    field: str
    message: str
    suggestion: Optional[str] = None


class ValidationResult(BaseModel):
    """Outcome of one validation run, diagnostics in traversal order."""

    model_config = _RESULT_CONFIG

    errors: list[ValidationError] = Field(default_factory=list)
    warnings: list[ValidationWarning] = Field(default_factory=list)

    @computed_field(alias="isValid")  # type: ignore[prop-decorator]
    @property
    def is_valid(self) -> bool:
        """``True`` exactly when no errors were reported."""
        return len(self.errors) == 0


class GeneratedService(BaseModel):
    """Generated output for one endpoint."""

    model_config = _RESULT_CONFIG

    name: str
    function_name: str = Field(alias="functionName")
    code: str
    types: list[str] = Field(default_factory=list)
    imports: list[str] = Field(default_factory=list)
    endpoint: Endpoint


class ServiceGenerationResult(BaseModel):
    """All generated artifacts for one documentation object.

    ``types``, ``services_code``, ``hooks`` and ``index`` are the text of the
    ``types.ts``, ``services.ts``, ``hooks.ts`` and ``index.ts`` files.
    Writing them anywhere is the caller's business.
    """

    model_config = _RESULT_CONFIG

    services: list[GeneratedService] = Field(default_factory=list)
    types: str = ""
    services_code: str = Field(default="", alias="servicesCode")
    hooks: str = ""
    index: str = ""
    total_functions: int = Field(default=0, alias="totalFunctions")


# --- Configuration models ---


class GeneratorConfig(BaseModel):
    """Settings that shape the generated TypeScript.

    See Also:
        :func:`apidocgen.config.resolve_generator_config` for the precedence
        chain (CLI flags, environment, project file, user file, defaults).
    """

    client_name: str = Field(
        default="apiClient", description="Identifier of the HTTP client object"
    )
    client_import: str = Field(
        default="@/lib/api-client",
        description="Module exporting the RequestConfig type",
    )
    client_factory_import: str = Field(
        default="@/lib/api-client-factory",
        description="Module exporting the client object",
    )
    query_library: str = Field(
        default="@tanstack/react-query",
        description="Module providing useQuery/useMutation",
    )
    include_types: bool = Field(default=True, description="Emit types.ts")
    include_hooks: bool = Field(default=True, description="Emit hooks.ts")


class GlobalConfig(BaseModel):
    """User-wide configuration persisted at ``~/.config/apidocgen/config.json``."""

    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
