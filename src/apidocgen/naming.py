"""Identifier synthesis shared by every code generator.

Every generated symbol (interface names, service function names, hook names,
query keys) is derived here from an endpoint's free-text ``name`` and
``method``. Because the type, service, hook and index generators all call the
same helpers, an endpoint named ``"get user list"`` yields
``GetUserListResponse``, ``getGetUserList`` and ``useGetUserList`` in every
artifact that mentions it.

**Case rules:**

* Each run of characters outside ``[A-Za-z0-9]`` becomes a single space and
  the result is split on whitespace.
* PascalCase title-cases every token (first letter upper, rest lower) and
  concatenates them.
* camelCase does the same but lower-cases the whole first token.

The method prefix is prepended without checking whether the name already
starts with it, so ``"Get Users"`` under ``GET`` becomes ``getGetUsers``.
"""

from __future__ import annotations

import re
from typing import Optional

from apidocgen.models import Endpoint


_NON_ALNUM_RE = re.compile(r"[^A-Za-z0-9]+")
_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_QUERY_KEY_RE = re.compile(r"[^a-z0-9]")

_METHOD_PREFIXES: dict[str, str] = {
    "GET": "get",
    "POST": "create",
    "PUT": "update",
    "PATCH": "patch",
    "DELETE": "delete",
}

# Reserved words that cannot name a function parameter in TypeScript.
_TS_RESERVED = frozenset({
    "break", "case", "catch", "class", "const", "continue", "debugger",
    "default", "delete", "do", "else", "enum", "export", "extends", "false",
    "finally", "for", "function", "if", "import", "in", "instanceof", "new",
    "null", "return", "super", "switch", "this", "throw", "true", "try",
    "typeof", "var", "void", "while", "with",
})


def _tokens(raw: Optional[str]) -> list[str]:
    return _NON_ALNUM_RE.sub(" ", raw or "").split()


def _title(token: str) -> str:
    return token[:1].upper() + token[1:].lower()


def to_pascal_case(raw: Optional[str]) -> str:
    """Convert free text to PascalCase.

    Example::

        >>> to_pascal_case("get user-list")
        'GetUserList'
        >>> to_pascal_case("")
        ''
    """
    return "".join(_title(token) for token in _tokens(raw))


def to_camel_case(raw: Optional[str]) -> str:
    """Convert free text to camelCase.

    Example::

        >>> to_camel_case("Get User List")
        'getUserList'
    """
    tokens = _tokens(raw)
    if not tokens:
        return ""
    return tokens[0].lower() + "".join(_title(token) for token in tokens[1:])


def method_prefix(method: Optional[str]) -> str:
    """Return the verb that prefixes a service function for *method*.

    ``GET`` maps to ``get``, ``POST`` to ``create``, ``PUT`` to ``update``,
    ``PATCH`` to ``patch`` and ``DELETE`` to ``delete``. Any other method is
    simply lower-cased (``HEAD`` becomes ``head``).
    """
    upper = (method or "").upper()
    return _METHOD_PREFIXES.get(upper, upper.lower())


def to_identifier(name: str) -> str:
    """Return a TypeScript-safe identifier for a parameter *name*.

    Names that are already valid identifiers are kept verbatim so that
    ``userId`` stays ``userId``; anything else is camelCased (``user-id``
    becomes ``userId``). Reserved words get a trailing underscore.
    """
    ident = name if _IDENTIFIER_RE.match(name) else to_camel_case(name)
    if not ident:
        ident = "param"
    elif ident[0].isdigit():
        ident = f"_{ident}"
    if ident in _TS_RESERVED:
        ident = f"{ident}_"
    return ident


# ---------------------------------------------------------------------------
# Endpoint-derived names
# ---------------------------------------------------------------------------


def function_name(endpoint: Endpoint) -> str:
    """Service function name: method prefix followed by PascalCase(name)."""
    return f"{method_prefix(endpoint.method)}{to_pascal_case(endpoint.name)}"


def params_type_name(endpoint: Endpoint) -> str:
    return f"{to_pascal_case(endpoint.name)}Params"


def request_type_name(endpoint: Endpoint) -> str:
    return f"{to_pascal_case(endpoint.name)}Request"


def response_type_name(endpoint: Endpoint) -> str:
    return f"{to_pascal_case(endpoint.name)}Response"


def item_type_name(endpoint: Endpoint) -> str:
    return f"{to_pascal_case(endpoint.name)}Item"


def query_hook_name(endpoint: Endpoint) -> str:
    return f"use{to_pascal_case(endpoint.name)}"


def mutation_hook_name(endpoint: Endpoint) -> str:
    return f"use{to_pascal_case(endpoint.name)}Mutation"


def query_key(endpoint: Endpoint) -> str:
    """Slug used as the first element of a query hook's cache key.

    Every character outside ``[a-z0-9]`` of the lower-cased name becomes a
    hyphen, one for one (``"Get Users"`` becomes ``"get-users"``).
    """
    return _QUERY_KEY_RE.sub("-", (endpoint.name or "").lower())
