"""Run configuration for register generation.

Values are resolved from, in order: explicit arguments (CLI flags), environment
variables, then defaults. GitHub Actions exposes action inputs as ``INPUT_<NAME>``
environment variables and passes unset inputs as empty strings, so empty values
are treated as unset.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigError
from .github import GITHUB_API_URL
from .registry import NPM_REGISTRY_URL
from .transport import DEFAULT_TIMEOUT

DEFAULT_SOUP_FILENAME = "SOUP.md"
DEFAULT_MAX_WORKERS = 8

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
_LOG_FORMATS = {"console", "json"}

# Setting name -> environment variables consulted, first non-empty wins.
ENV_VARS: dict[str, tuple[str, ...]] = {
    "path": ("INPUT_PATH", "SOUP_REGISTER_PATH"),
    "token": ("INPUT_TOKEN", "GITHUB_TOKEN"),
    "output_filename": ("SOUP_REGISTER_OUTPUT",),
    "registry_url": ("SOUP_REGISTER_REGISTRY_URL",),
    "github_api_url": ("GITHUB_API_URL",),
    "max_workers": ("SOUP_REGISTER_MAX_WORKERS",),
    "timeout": ("SOUP_REGISTER_TIMEOUT",),
    "log_level": ("SOUP_REGISTER_LOG_LEVEL",),
    "log_format": ("SOUP_REGISTER_LOG_FORMAT",),
}


@dataclass(slots=True, frozen=True)
class Settings:
    """Top-level settings container."""

    root: Path
    token: str | None = None
    output_filename: str = DEFAULT_SOUP_FILENAME
    registry_url: str = NPM_REGISTRY_URL
    github_api_url: str = GITHUB_API_URL
    max_workers: int = DEFAULT_MAX_WORKERS
    timeout: float = DEFAULT_TIMEOUT
    log_level: str = "INFO"
    log_format: str = "console"

    @property
    def output_path(self) -> Path:
        return self.root / self.output_filename


def _lookup(name: str, explicit: object | None, environ: Mapping[str, str]) -> str | None:
    if explicit is not None and explicit != "":
        return str(explicit)
    for var in ENV_VARS[name]:
        value = environ.get(var, "").strip()
        if value:
            return value
    return None


def _positive_int(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise ConfigError(f"'{name}' must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ConfigError(f"'{name}' must be at least 1, got {value}")
    return value


def _positive_float(name: str, raw: str) -> float:
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"'{name}' must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ConfigError(f"'{name}' must be positive, got {value}")
    return value


def load_settings(
    *,
    path: str | Path | None = None,
    token: str | None = None,
    output_filename: str | None = None,
    registry_url: str | None = None,
    github_api_url: str | None = None,
    max_workers: int | None = None,
    timeout: float | None = None,
    log_level: str | None = None,
    log_format: str | None = None,
    environ: Mapping[str, str] | None = None,
    cwd: Path | None = None,
) -> Settings:
    """Resolve settings from arguments and the environment.

    ``path`` is resolved against ``cwd`` (default: the process working directory).

    Raises:
        ConfigError: If any value is invalid.
    """
    env = os.environ if environ is None else environ
    base = cwd if cwd is not None else Path.cwd()

    raw_path = _lookup("path", path, env) or "."
    root = (base / raw_path).resolve()

    filename = _lookup("output_filename", output_filename, env) or DEFAULT_SOUP_FILENAME
    if Path(filename).name != filename:
        raise ConfigError(f"'output_filename' must be a bare file name, got {filename!r}")

    raw_workers = _lookup("max_workers", max_workers, env)
    workers = (
        _positive_int("max_workers", raw_workers) if raw_workers else DEFAULT_MAX_WORKERS
    )

    raw_timeout = _lookup("timeout", timeout, env)
    request_timeout = _positive_float("timeout", raw_timeout) if raw_timeout else DEFAULT_TIMEOUT

    level = (_lookup("log_level", log_level, env) or "INFO").upper()
    if level not in _LOG_LEVELS:
        raise ConfigError(
            f"'log_level' must be one of {', '.join(sorted(_LOG_LEVELS))}, got {level!r}"
        )

    fmt = (_lookup("log_format", log_format, env) or "console").lower()
    if fmt not in _LOG_FORMATS:
        raise ConfigError(f"'log_format' must be 'console' or 'json', got {fmt!r}")

    return Settings(
        root=root,
        token=_lookup("token", token, env),
        output_filename=filename,
        registry_url=_lookup("registry_url", registry_url, env) or NPM_REGISTRY_URL,
        github_api_url=_lookup("github_api_url", github_api_url, env) or GITHUB_API_URL,
        max_workers=workers,
        timeout=request_timeout,
        log_level=level,
        log_format=fmt,
    )
