"""TypeScript code generation -- types, service functions, hooks, and index.

This sub-package is the second half of the apidocgen pipeline: it turns a
validated :class:`~apidocgen.models.APIDocumentation` into the text of four
TypeScript files.

Typical usage::

    from apidocgen.codegen import generate_services

    result = generate_services(doc)
    print(result.services_code)

Sub-modules:

* :mod:`~apidocgen.codegen.type_mapper` -- schema to TypeScript type
  expression mapping.
* :mod:`~apidocgen.codegen.types` -- ``types.ts``: request, response, params
  and model interfaces.
* :mod:`~apidocgen.codegen.services` -- one async client function per
  endpoint, and the driver that assembles every artifact.
* :mod:`~apidocgen.codegen.hooks` -- react-query query and mutation hooks.
* :mod:`~apidocgen.codegen.index` -- the ``index.ts`` export surface.
* :mod:`~apidocgen.codegen.checks` -- warnings about the generated services.
* :mod:`~apidocgen.codegen.rendering` -- the shared Jinja2 environment.
"""

from apidocgen.codegen.checks import check_services
from apidocgen.codegen.hooks import generate_hooks
from apidocgen.codegen.index import generate_index
from apidocgen.codegen.services import generate_services
from apidocgen.codegen.type_mapper import map_type
from apidocgen.codegen.types import generate_types

__all__ = [
    "generate_services",
    "generate_types",
    "generate_hooks",
    "generate_index",
    "map_type",
    "check_services",
]
