"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "swagger-test-generator.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration for swagger-test-generator.
# Relative paths are resolved against the directory of this file.
# Command line options override the values below.

generator:
  # Swagger 2 / OpenAPI document (YAML or JSON).
  api_docs: "<REQUIRED>"
  # Tags to generate spec files for; all tags when omitted.
  # tag_names:
  #   - "<OPTIONAL>"
  # HTTP methods to include; all methods when omitted.
  # methods:
  #   - "GET"
  # Case-insensitive regular expression matched against basePath + path.
  # match_path: "<OPTIONAL>"
  # Only include required properties in examples and assertions.
  required_properties_only: false
  # Custom templates; the built-in Mocha templates are used when omitted.
  # file_template: "<OPTIONAL>"
  # test_template: "<OPTIONAL>"
  file_name: "{{basePath}}-{{tag.name}}.spec.js"
  directory: "."
  overwrite: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder generator configuration to the requested output path.

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
