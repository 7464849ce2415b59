"""Jinja2 rendering of the generated TypeScript files.

Per-field and per-type fragments are assembled in Python; the templates under
``codegen/templates/`` lay those fragments out into whole functions and
files. The environment is built once and is read-only afterwards, so
concurrent renders do not interfere.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


TEMPLATE_DIR = Path(__file__).parent / "templates"
"""Path to the Jinja2 template directory (``codegen/templates/``)."""


@lru_cache(maxsize=1)
def get_environment() -> Environment:
    """Return the shared Jinja2 environment for TypeScript templates.

    Autoescaping is disabled for ``.ts.j2`` templates (they produce source
    code, not HTML). Undefined variables raise instead of rendering empty.
    """
    return Environment(
        loader=FileSystemLoader(str(TEMPLATE_DIR)),
        autoescape=select_autoescape(disabled_extensions=("ts.j2",)),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )


def render(template_name: str, **context: Any) -> str:
    """Render *template_name* with *context* and return the text."""
    return get_environment().get_template(template_name).render(**context)
