"""Example command -- print a bundled example document."""

from __future__ import annotations

from typing import Optional

import typer

from apidocgen.exceptions import InvalidUsageError
from apidocgen.output import error, get_output


def example_command(
    name: Optional[str] = typer.Argument(
        None, help="Example name. Omit to list the available examples."
    ),
) -> None:
    """Print a bundled example documentation file as JSON.

    Example::

        apidocgen example
        apidocgen example users > api.json
    """
    from apidocgen.examples import get_example, list_examples

    output = get_output()
    if name is None:
        rows = []
        for example_name in list_examples():
            doc = get_example(example_name)
            rows.append([
                example_name,
                doc.get("title", ""),
                str(len(doc.get("endpoints", []))),
            ])
        output.print_table(["Name", "Title", "Endpoints"], rows, title="Examples")
        return

    try:
        doc = get_example(name)
    except InvalidUsageError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    output.print_json(doc)
