"""Shared test fixtures for apidocgen.

Provides reusable fixtures for loading documentation fixtures, building
small documents, creating isolated config environments, managing output
state, and running CLI commands. These fixtures are automatically
discovered by pytest and available to all test modules without explicit
imports.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from apidocgen.models import APIDocumentation
from apidocgen.output import OutputFormat, OutputManager, reset_output, set_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When Typer's CliRunner redirects those streams during
    a test, the cached references go stale once the test finishes.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Documentation fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def users_api_path() -> Path:
    return FIXTURES_DIR / "users_api.json"


@pytest.fixture
def users_api_raw(users_api_path: Path) -> dict[str, Any]:
    """Load the users API fixture as a plain dict."""
    with open(users_api_path) as f:
        return json.load(f)


@pytest.fixture
def users_api(users_api_raw: dict[str, Any]) -> APIDocumentation:
    return APIDocumentation.model_validate(users_api_raw)


def _make_endpoint(**overrides: Any) -> dict[str, Any]:
    """Return a minimal valid endpoint dict, with *overrides* applied."""
    endpoint: dict[str, Any] = {
        "id": "get-users",
        "name": "users",
        "method": "GET",
        "path": "/users",
        "summary": "List users",
        "description": "Returns users",
        "responses": [{"statusCode": 200, "description": "OK"}],
    }
    endpoint.update(overrides)
    return endpoint


def _make_doc(*endpoints: dict[str, Any], **overrides: Any) -> dict[str, Any]:
    """Return a minimal valid documentation dict holding *endpoints*."""
    doc: dict[str, Any] = {
        "title": "Test API",
        "version": "1.0.0",
        "description": "API used in tests",
        "baseURL": "https://api.example.com",
        "authentication": {"type": "bearer", "tokenPrefix": "Bearer"},
        "endpoints": list(endpoints) if endpoints else [_make_endpoint()],
    }
    doc.update(overrides)
    return doc


@pytest.fixture
def scenario_a_raw() -> dict[str, Any]:
    """A GET endpoint with one optional query parameter and an array response."""
    return _make_doc(
        _make_endpoint(
            name="Get Users",
            parameters=[
                {
                    "name": "page",
                    "in": "query",
                    "type": "number",
                    "required": False,
                    "description": "Page number",
                }
            ],
            responses=[
                {
                    "statusCode": 200,
                    "description": "OK",
                    "schema": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "properties": {
                                "id": {"type": "number"},
                                "name": {"type": "string"},
                            },
                        },
                    },
                }
            ],
        )
    )


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Sets XDG_CONFIG_HOME and XDG_DATA_HOME to subdirectories of tmp_path so
    that tests never touch real user config, forces the XDG layout, clears
    all APIDOCGEN_* environment variables, and changes the working
    directory to tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setattr("apidocgen.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    for var in ["APIDOCGEN_CLIENT_NAME", "APIDOCGEN_NO_HOOKS"]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# Output fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def quiet_output() -> OutputManager:
    """Install a PLAIN-format, quiet OutputManager as the global output."""
    output = OutputManager(format=OutputFormat.PLAIN, quiet=True)
    set_output(output)
    yield output
    reset_output()


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()


# ---------------------------------------------------------------------------
# Document builders
# ---------------------------------------------------------------------------


@pytest.fixture
def make_endpoint():
    """Factory for minimal valid endpoint dicts (keyword overrides apply)."""
    return _make_endpoint


@pytest.fixture
def make_doc():
    """Factory for minimal valid documentation dicts holding the given endpoints."""
    return _make_doc
