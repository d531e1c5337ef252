"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import (
    ConfigurationError,
    compile_path_pattern,
    load_configuration,
    parse_string_list,
)
from .runtime_settings import Configuration, GeneratorSettings

__all__ = [
    "Configuration",
    "GeneratorSettings",
    "ConfigurationError",
    "compile_path_pattern",
    "load_configuration",
    "parse_string_list",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
