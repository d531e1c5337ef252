"""Configuration loader service."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from swagger_test_generator.test_generation.constants import DEFAULT_FILE_NAME_TEMPLATE

from .runtime_settings import Configuration, GeneratorSettings

_KNOWN_KEYS = frozenset(
    {
        "api_docs",
        "tag_names",
        "methods",
        "match_path",
        "required_properties_only",
        "file_template",
        "test_template",
        "file_name",
        "directory",
        "overwrite",
    }
)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the generator configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    generator = _parse_generator_section(parsed.get("generator"), path.resolve().parent)
    return Configuration(path=path, generator=generator)


def _parse_generator_section(value: Any, base_path: Path) -> GeneratorSettings:
    section = _require_mapping(value, "generator")
    unknown = sorted(str(key) for key in section if key not in _KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown generator option(s): {', '.join(unknown)}")

    return GeneratorSettings(
        api_docs=_optional_path(section.get("api_docs"), "generator.api_docs", base_path),
        tag_names=_optional_string_sequence(section.get("tag_names"), "generator.tag_names"),
        methods=_normalize_methods(section.get("methods")),
        match_path=_optional_pattern(section.get("match_path"), "generator.match_path"),
        required_properties_only=_optional_bool(
            section.get("required_properties_only"), "generator.required_properties_only"
        ),
        file_template=_optional_path(
            section.get("file_template"), "generator.file_template", base_path
        ),
        test_template=_optional_path(
            section.get("test_template"), "generator.test_template", base_path
        ),
        file_name=_optional_string(section.get("file_name"), "generator.file_name")
        or DEFAULT_FILE_NAME_TEMPLATE,
        directory=_optional_path(section.get("directory"), "generator.directory", base_path)
        or base_path,
        overwrite=_optional_bool(section.get("overwrite"), "generator.overwrite"),
    )


def parse_string_list(value: Any, field_name: str) -> tuple[str, ...] | None:
    """Split comma separated text (or a list of strings) into a tuple of entries."""
    return _optional_string_sequence(value, field_name)


def compile_path_pattern(value: str, field_name: str) -> re.Pattern[str]:
    """Compile a case-insensitive path filter."""
    try:
        return re.compile(value, re.IGNORECASE)
    except re.error as exc:
        raise ConfigurationError(f"{field_name} is not a valid regular expression: {exc}") from exc


def _normalize_methods(value: Any) -> tuple[str, ...] | None:
    methods = _optional_string_sequence(value, "generator.methods")
    if methods is None:
        return None
    return tuple(method.upper() for method in methods)


def _optional_string_sequence(value: Any, field_name: str) -> tuple[str, ...] | None:
    if value is None:
        return None
    if isinstance(value, str):
        entries = [item.strip() for item in value.split(",") if item.strip()]
    elif isinstance(value, Sequence):
        entries = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                entries.append(stripped)
    else:
        raise ConfigurationError(f"{field_name} must be a string or list of strings.")
    return tuple(entries) or None


def _optional_pattern(value: Any, field_name: str) -> re.Pattern[str] | None:
    text = _optional_string(value, field_name)
    if text is None:
        return None
    return compile_path_pattern(text, field_name)


def _optional_path(value: Any, field_name: str, base_path: Path) -> Path | None:
    text = _optional_string(value, field_name)
    if text is None:
        return None
    return _resolve_path(base_path, text)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: Any, field_name: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value
