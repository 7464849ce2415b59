"""Config commands -- view and modify generator defaults.

Provides the ``apidocgen config`` sub-command group for reading, updating,
and resetting the user's global configuration file
(:class:`~apidocgen.models.GlobalConfig`). Project files and environment
variables still take precedence over these values at generation time.
"""

from __future__ import annotations

import typer

from apidocgen.exit_codes import EXIT_INVALID_USAGE
from apidocgen.output import error, get_output, info, success


config_app = typer.Typer(no_args_is_help=True)


@config_app.command("show")
def config_show() -> None:
    """Show the effective generator configuration.

    Example::

        apidocgen config show
        apidocgen --json config show
    """
    from apidocgen.config import global_config_path, resolve_generator_config
    from apidocgen.exceptions import ConfigError

    try:
        config = resolve_generator_config()
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    info(f"Global config file: {global_config_path()}")
    get_output().print_json({"generator": config.model_dump(mode="json")})


@config_app.command("set")
def config_set(
    key: str = typer.Argument(
        help="Config key (dot notation, e.g., 'generator.client_name')."
    ),
    value: str = typer.Argument(help="Value to set."),
) -> None:
    """Set a value in the global configuration.

    Boolean fields accept ``true``/``false`` (also ``1``/``0``, ``yes``/``no``).
    The updated config is validated before it is saved.

    Example::

        apidocgen config set generator.client_name httpClient
        apidocgen config set generator.include_hooks false
    """
    from apidocgen.config import load_global_config, save_global_config
    from apidocgen.exceptions import ConfigError
    from apidocgen.models import GlobalConfig

    try:
        config = load_global_config()
    except ConfigError as exc:
        error(str(exc))
        raise typer.Exit(code=exc.exit_code) from None
    data = config.model_dump(mode="json")

    keys = key.split(".")
    target = data
    for k in keys[:-1]:
        if k not in target or not isinstance(target[k], dict):
            error(f"Invalid config key: {key}")
            raise typer.Exit(code=EXIT_INVALID_USAGE)
        target = target[k]

    final_key = keys[-1]
    if final_key not in target or isinstance(target[final_key], dict):
        error(f"Unknown config key: {key}")
        raise typer.Exit(code=EXIT_INVALID_USAGE)

    coerced: object = value
    if isinstance(target[final_key], bool):
        lowered = value.lower()
        if lowered not in ("true", "false", "1", "0", "yes", "no"):
            error(f"Expected true or false for {key}, got: {value}")
            raise typer.Exit(code=EXIT_INVALID_USAGE)
        coerced = lowered in ("true", "1", "yes")
    target[final_key] = coerced

    try:
        new_config = GlobalConfig.model_validate(data)
    except ValueError as exc:
        error(f"Validation error: {exc}")
        raise typer.Exit(code=EXIT_INVALID_USAGE) from None

    save_global_config(new_config)
    success(f"Set {key} = {coerced}")


@config_app.command("reset")
def config_reset(
    force: bool = typer.Option(
        False, "--force", "-f", help="Reset without asking for confirmation."
    ),
) -> None:
    """Reset the global configuration to defaults.

    Example::

        apidocgen config reset
        apidocgen config reset --force
    """
    from apidocgen.config import save_global_config
    from apidocgen.models import GlobalConfig

    if not force:
        confirmed = typer.confirm("Reset all config to defaults?")
        if not confirmed:
            info("Cancelled.")
            raise typer.Exit()

    save_global_config(GlobalConfig())
    success("Configuration reset to defaults.")
