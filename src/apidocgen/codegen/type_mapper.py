"""Map documentation schemas to TypeScript type expressions.

**Mapping rules** (applied recursively, with no depth limit):

* ``string`` with ``enum`` becomes a union of single-quoted literals
  (``'a' | 'b'``, with quotes and backslashes escaped); any other
  ``string`` becomes ``string``.
* ``number`` and ``boolean`` map to themselves.
* ``array`` becomes ``<items>[]``, or ``any[]`` when ``items`` is absent.
* ``object`` with ``properties`` becomes an inline ``{ k?: T; ... }`` type in
  which a key is optional unless the schema's ``required`` list names it;
  without ``properties`` it becomes ``Record<string, any>``.
* Anything else becomes ``any``. Unknown types never raise.

Schemas must be trees. A self-referencing schema recurses until Python's
recursion limit is reached.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from apidocgen.models import Parameter, PropertySchema, SchemaType

logger = logging.getLogger(__name__)

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def string_literal(value: str) -> str:
    """Return *value* as a single-quoted TypeScript string literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace("'", "\\'")
        .replace("\n", "\\n")
        .replace("\r", "\\r")
    )
    return f"'{escaped}'"


def property_key(name: str) -> str:
    """Return *name* as an object key, quoted unless it is an identifier."""
    if _IDENTIFIER_RE.match(name):
        return name
    return string_literal(name)


def map_type(schema: Optional[PropertySchema]) -> str:
    """Return the TypeScript type expression for *schema*.

    Example::

        >>> map_type(PropertySchema(type="array", items=PropertySchema(type="number")))
        'number[]'
        >>> map_type(PropertySchema(type="string", enum=["a", "b"]))
        "'a' | 'b'"
    """
    if schema is None:
        return "any"

    if schema.type == SchemaType.STRING.value:
        if schema.enum:
            return " | ".join(string_literal(value) for value in schema.enum)
        return "string"

    if schema.type in (SchemaType.NUMBER.value, SchemaType.BOOLEAN.value):
        return schema.type

    if schema.type == SchemaType.ARRAY.value:
        if schema.items is None:
            return "any[]"
        item_type = map_type(schema.items)
        # A union must be parenthesised before the array suffix.
        if " | " in item_type:
            item_type = f"({item_type})"
        return f"{item_type}[]"

    if schema.type == SchemaType.OBJECT.value:
        if schema.properties is None:
            return "Record<string, any>"
        required = set(schema.required or [])
        members = [
            f"{property_key(name)}{'' if name in required else '?'}: {map_type(prop)}"
            for name, prop in schema.properties.items()
        ]
        return "{ " + "; ".join(members) + " }"

    logger.debug("No TypeScript mapping for schema type %r, using any", schema.type)
    return "any"


def parameter_schema(param: Parameter) -> PropertySchema:
    """Describe a :class:`~apidocgen.models.Parameter` as a property schema."""
    return PropertySchema(
        type=param.type,
        description=param.description,
        example=param.example,
        enum=param.enum,
        format=param.format,
    )


def map_parameter_type(param: Parameter) -> str:
    """Return the TypeScript type of a parameter, honouring string enums."""
    return map_type(parameter_schema(param))
