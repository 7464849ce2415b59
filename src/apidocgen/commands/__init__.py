"""Built-in CLI sub-commands for apidocgen.

* :mod:`~apidocgen.commands.validate` -- check a documentation file and
  report every diagnostic.
* :mod:`~apidocgen.commands.generate` -- generate TypeScript from a
  documentation file.
* :mod:`~apidocgen.commands.example` -- print a bundled example document.
* :mod:`~apidocgen.commands.config` -- view and modify generator defaults.

Single commands export a plain callback registered on the root app; the
``config`` group exports a :class:`typer.Typer` sub-application.
"""
