"""Configuration domain entities."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from swagger_test_generator.test_generation.constants import DEFAULT_FILE_NAME_TEMPLATE


@dataclass(frozen=True)
class GeneratorSettings:  # pylint: disable=too-many-instance-attributes
    """Normalized generator settings, from a configuration file and CLI flags."""

    api_docs: Path | None = None
    tag_names: tuple[str, ...] | None = None
    methods: tuple[str, ...] | None = None
    match_path: re.Pattern[str] | None = None
    required_properties_only: bool = False
    file_template: Path | None = None
    test_template: Path | None = None
    file_name: str = DEFAULT_FILE_NAME_TEMPLATE
    directory: Path = Path(".")
    overwrite: bool = False


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    generator: GeneratorSettings
