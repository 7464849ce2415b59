"""Configuration management with XDG paths, atomic writes, and precedence resolution.

This module handles all persistent configuration for apidocgen:

* **Directory layout** -- XDG Base Directory compliant on Linux/BSD,
  ``~/.apidocgen/`` on macOS and Windows. See :func:`get_config_dir` and
  :func:`get_data_dir`.
* **Global config** -- A single :class:`~apidocgen.models.GlobalConfig`
  JSON file holding generator defaults.
* **Project config** -- An optional ``./apidocgen.json`` with a
  ``generator`` section that overrides the global file per repository.
* **Precedence resolution** -- :func:`resolve_generator_config` merges CLI
  flags, environment variables, project config and global config into the
  effective :class:`~apidocgen.models.GeneratorConfig`.

All file writes use an atomic temp-file-then-rename strategy
(:func:`_atomic_write`) to prevent data loss on crash or power failure.
"""

from __future__ import annotations

import json
import os
import platform
import tempfile
from pathlib import Path
from typing import Any, Optional

from apidocgen.exceptions import ConfigError
from apidocgen.models import GeneratorConfig, GlobalConfig

_APP_NAME = "apidocgen"
_CONFIG_FILENAME = "config.json"
_PROJECT_CONFIG_FILENAME = "apidocgen.json"

ENV_CLIENT_NAME = "APIDOCGEN_CLIENT_NAME"
ENV_NO_HOOKS = "APIDOCGEN_NO_HOOKS"


# --- XDG path resolution ---


def _is_xdg_platform() -> bool:
    """Return True if the platform supports XDG Base Directory spec (Linux/FreeBSD)."""
    return platform.system() == "Linux" or platform.system().endswith("BSD")


def _fallback_base_dir() -> Path:
    """Fallback base directory for non-XDG platforms (macOS, Windows)."""
    return Path.home() / f".{_APP_NAME}"


def _xdg_base(env_var: str, default_segments: tuple[str, ...]) -> Path:
    """Resolve an XDG base directory from an env var with fallback segments under $HOME."""
    env_value = os.environ.get(env_var, "")
    if env_value:
        return Path(env_value)
    base = Path.home()
    for seg in default_segments:
        base = base / seg
    return base


def get_config_dir() -> Path:
    """Return the configuration directory, creating it if necessary.

    On Linux/BSD: ``$XDG_CONFIG_HOME/apidocgen/`` (default
    ``~/.config/apidocgen/``). On macOS/Windows: ``~/.apidocgen/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_CONFIG_HOME", (".config",)) / _APP_NAME
    else:
        path = _fallback_base_dir()
    path.mkdir(parents=True, exist_ok=True)
    return path


def get_data_dir() -> Path:
    """Return the data directory (crash logs), creating it if necessary.

    On Linux/BSD: ``$XDG_DATA_HOME/apidocgen/`` (default
    ``~/.local/share/apidocgen/``). On macOS/Windows: ``~/.apidocgen/logs/``.
    """
    if _is_xdg_platform():
        path = _xdg_base("XDG_DATA_HOME", (".local", "share")) / _APP_NAME
    else:
        path = _fallback_base_dir() / "logs"
    path.mkdir(parents=True, exist_ok=True)
    return path


# --- Atomic file writes ---


def _atomic_write(path: Path, data: str) -> None:
    """Write data to file atomically using temp file + rename.

    The temporary file is created in the same directory as *path* so that
    ``os.replace`` is an atomic rename on POSIX systems. On failure the temp
    file is removed and the exception propagates.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    fd = None
    tmp_path: Optional[str] = None
    try:
        fd = tempfile.NamedTemporaryFile(
            mode="w",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
            encoding="utf-8",
        )
        tmp_path = fd.name
        fd.write(data)
        fd.flush()
        os.fsync(fd.fileno())
        fd.close()
        fd = None
        os.replace(tmp_path, path)
    except BaseException:
        if fd is not None:
            fd.close()
        if tmp_path is not None:
            try:
                os.unlink(tmp_path)
            except OSError:
                pass
        raise


# --- Global config ---


def global_config_path() -> Path:
    """Path to the global config file."""
    return get_config_dir() / _CONFIG_FILENAME


def load_global_config() -> GlobalConfig:
    """Load the global configuration from the config directory.

    Returns:
        The deserialised :class:`~apidocgen.models.GlobalConfig`, or a
        default instance when the file does not exist.

    Raises:
        ConfigError: If the file contains invalid JSON or fails validation.
    """
    path = global_config_path()
    if not path.is_file():
        return GlobalConfig()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        return GlobalConfig.model_validate(data)
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid global config at {path}: {exc}") from exc


def save_global_config(config: GlobalConfig) -> None:
    """Persist the global configuration atomically to disk."""
    data = config.model_dump(mode="json")
    _atomic_write(global_config_path(), json.dumps(data, indent=2) + "\n")


# --- Project-local config ---


def load_project_config() -> Optional[dict[str, Any]]:
    """Load project-local configuration from ``./apidocgen.json``.

    Returns:
        The parsed JSON as a dict, or ``None`` if the file does not exist.

    Raises:
        ConfigError: If the file exists but is not a JSON object.
    """
    path = Path.cwd() / _PROJECT_CONFIG_FILENAME
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, ValueError) as exc:
        raise ConfigError(f"Invalid project config at {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid project config at {path}: expected a JSON object")
    return data


# --- Precedence resolution ---


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes")


def resolve_generator_config(
    cli_client_name: Optional[str] = None,
    cli_no_hooks: bool = False,
    cli_no_types: bool = False,
) -> GeneratorConfig:
    """Resolve the effective generator settings.

    Precedence (high to low):
        1. CLI flags (``cli_client_name``, ``cli_no_hooks``, ``cli_no_types``)
        2. Environment variables (``APIDOCGEN_CLIENT_NAME``,
           ``APIDOCGEN_NO_HOOKS``)
        3. Project config (``./apidocgen.json``, ``generator`` section)
        4. User config (``~/.config/apidocgen/config.json``)
        5. Defaults

    Raises:
        ConfigError: If a config file is invalid or the merged settings fail
            validation.
    """
    # 5 + 4. Global config fills in defaults automatically
    settings = load_global_config().generator.model_dump()

    # 3. Project-local generator section
    project = load_project_config()
    if project is not None:
        section = project.get("generator") or {}
        if not isinstance(section, dict):
            raise ConfigError("Project config 'generator' must be a JSON object")
        settings.update(section)

    # 2. Environment
    env_client = os.environ.get(ENV_CLIENT_NAME)
    if env_client:
        settings["client_name"] = env_client
    if _env_flag(ENV_NO_HOOKS):
        settings["include_hooks"] = False

    # 1. CLI flags
    if cli_client_name is not None:
        settings["client_name"] = cli_client_name
    if cli_no_hooks:
        settings["include_hooks"] = False
    if cli_no_types:
        settings["include_types"] = False

    try:
        return GeneratorConfig.model_validate(settings)
    except ValueError as exc:
        raise ConfigError(f"Invalid generator config: {exc}") from exc
