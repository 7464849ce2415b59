"""Assemble ``index.ts``, the single export surface of the generated code.

Symbol lists come only from the :class:`~apidocgen.models.GeneratedService`
objects and the naming helpers the other generators use, so the index never
re-exports something that was not emitted. Artifacts switched off in the
:class:`~apidocgen.models.GeneratorConfig` are left out entirely.
"""

from __future__ import annotations

from apidocgen.codegen.hooks import hook_name
from apidocgen.codegen.rendering import render
from apidocgen.models import GeneratedService, GeneratorConfig


def generate_index(services: list[GeneratedService], config: GeneratorConfig) -> str:
    """Render ``index.ts`` with service, hook and type export blocks."""
    hook_names = [
        name for name in (hook_name(s.endpoint) for s in services) if name is not None
    ]
    return render(
        "index.ts.j2",
        service_names=[s.function_name for s in services],
        hook_names=hook_names,
        include_hooks=config.include_hooks,
        include_types=config.include_types,
    )
