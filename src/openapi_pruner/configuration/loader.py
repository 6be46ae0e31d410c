"""Configuration loader service."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_TIMEOUT_SECONDS,
    Configuration,
    OutputSettings,
    SourceSettings,
)

ENV_OPENAPI_URL = "SUPABASE_OPENAPI_URL"
ENV_PROJECT_URL = "SUPABASE_URL"
ENV_API_KEYS = ("SERVICE_ROLE_KEY", "SUPABASE_SERVICE_ROLE_KEY")
ENV_INPUT_PATH = "OPENAPI_INPUT"
ENV_OUTPUT_PATH = "OPENAPI_OUTPUT"
REST_ENDPOINT_SUFFIX = "/rest/v1/"


class ConfigurationError(Exception):
    """Raised when the configuration file or environment is invalid."""


def load_configuration(
    config_path: Path | str | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Configuration:
    """Load the optional configuration file and apply environment overrides."""
    env = os.environ if environ is None else environ
    path = Path(config_path) if config_path is not None else None
    parsed = _read_configuration_file(path) if path is not None else {}
    base_path = path.parent if path is not None else Path.cwd()

    source = _parse_source_section(parsed.get("source"), base_path, env)
    output = _parse_output_section(parsed.get("output"), base_path, env)
    return Configuration(path=path, source=source, output=output)


def resolve_remote_endpoint(env: Mapping[str, str]) -> str | None:
    """Return the document endpoint named by the environment, if any."""
    explicit = _env_value(env, ENV_OPENAPI_URL)
    if explicit:
        return explicit
    project_url = _env_value(env, ENV_PROJECT_URL)
    if project_url:
        return f"{project_url.rstrip('/')}{REST_ENDPOINT_SUFFIX}"
    return None


def _read_configuration_file(path: Path) -> Mapping[str, Any]:
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        return {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")
    return parsed


def _parse_source_section(
    value: Any, base_path: Path, env: Mapping[str, str]
) -> SourceSettings:
    section = _optional_mapping(value, "source")
    input_path = _env_value(env, ENV_INPUT_PATH) or _optional_string(
        section.get("input_path"), "source.input_path"
    )
    url = resolve_remote_endpoint(env) or _optional_string(section.get("url"), "source.url")
    api_key = _first_env_value(env, ENV_API_KEYS) or _optional_string(
        section.get("api_key"), "source.api_key"
    )
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", DEFAULT_TIMEOUT_SECONDS), "source.timeout_seconds"
    )
    return SourceSettings(
        input_path=_resolve_path(base_path, input_path or DEFAULT_INPUT_PATH),
        url=url,
        api_key=api_key,
        timeout_seconds=timeout_seconds,
    )


def _parse_output_section(
    value: Any, base_path: Path, env: Mapping[str, str]
) -> OutputSettings:
    section = _optional_mapping(value, "output")
    output_path = _env_value(env, ENV_OUTPUT_PATH) or _optional_string(
        section.get("path"), "output.path"
    )
    return OutputSettings(path=_resolve_path(base_path, output_path or DEFAULT_OUTPUT_PATH))


def _env_value(env: Mapping[str, str], name: str) -> str | None:
    value = env.get(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def _first_env_value(env: Mapping[str, str], names: tuple[str, ...]) -> str | None:
    for name in names:
        value = _env_value(env, name)
        if value:
            return value
    return None


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
