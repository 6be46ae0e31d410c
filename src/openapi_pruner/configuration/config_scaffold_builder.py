"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "openapi-pruner.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for openapi-pruner.
# Every setting is optional; environment variables take precedence when set.

source:
  # Local API description read when no url is configured (OPENAPI_INPUT).
  input_path: "postgrest.openapi.json"
  # Remote endpoint serving the API description (SUPABASE_OPENAPI_URL,
  # or SUPABASE_URL with /rest/v1/ appended).
  # url: "<OPTIONAL>"
  # Service role key sent with remote requests (SERVICE_ROLE_KEY or
  # SUPABASE_SERVICE_ROLE_KEY). Prefer the environment over this file.
  # api_key: "<OPTIONAL>"
  timeout_seconds: 30

output:
  # Destination of the pruned document (OPENAPI_OUTPUT).
  path: "postgrest.openapi.pruned.json"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
