"""Configuration loading.

Settings come from the ``[tool.tenet]`` table of the nearest
``pyproject.toml`` and may be overridden from the environment:

- ``TENET_DEBUG``: enable debug notes (``1``/``true``/``yes``/``on``).
- ``TENET_REPORTER``: reporter registry name or import string.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from tenet.errors import ConfigError


PYPROJECT = "pyproject.toml"
ENV_DEBUG = "TENET_DEBUG"
ENV_REPORTER = "TENET_REPORTER"


class TenetConfig(BaseModel):
    """Engine settings.

    Attributes
    ----------
    debug
        Emit notes naming each invocation and surfacing untested return values.
    swallow_output
        Keep captured output off the real streams. When False, output is
        captured and also passed through.
    reporter
        Reporter used when none is passed explicitly.
    reporter_options
        Keyword arguments for the reporter constructor.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    debug: bool = False
    swallow_output: bool = True
    reporter: str = "ConsoleReporter"
    reporter_options: dict[str, Any] = Field(default_factory=dict)


def find_project_root(start: Path | None = None) -> Path | None:
    """Return the closest directory at or above ``start`` holding a pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        if (directory / PYPROJECT).is_file():
            return directory
    return None


def _coerce_bool(value: str) -> bool | None:
    normalised = value.strip().lower()
    if normalised in {"1", "true", "yes", "on"}:
        return True
    if normalised in {"0", "false", "no", "off", ""}:
        return False
    return None


def _read_tool_table(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc
    table = data.get("tool", {}).get("tenet", {})
    if not isinstance(table, dict):
        raise ConfigError(f"[tool.tenet] in {path} must be a table")
    return table


def load_config(start: Path | None = None, env: Mapping[str, str] | None = None) -> TenetConfig:
    """Build a :class:`TenetConfig` from pyproject.toml and the environment.

    Raises:
        ConfigError: If the file or an override holds an invalid value.
    """
    env = os.environ if env is None else env
    values: dict[str, Any] = {}

    root = find_project_root(start)
    if root is not None:
        values.update(_read_tool_table(root / PYPROJECT))

    if ENV_DEBUG in env:
        debug = _coerce_bool(env[ENV_DEBUG])
        if debug is None:
            raise ConfigError(f"{ENV_DEBUG} must be a boolean, got {env[ENV_DEBUG]!r}")
        values["debug"] = debug
    if env.get(ENV_REPORTER):
        values["reporter"] = env[ENV_REPORTER]

    try:
        return TenetConfig.model_validate(values)
    except ValidationError as exc:
        raise ConfigError(f"Invalid tenet configuration: {exc}") from exc


__all__ = ["TenetConfig", "find_project_root", "load_config"]
