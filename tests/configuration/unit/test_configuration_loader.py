"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from swagger_test_generator.configuration.loader import ConfigurationError, load_configuration
from swagger_test_generator.test_generation import DEFAULT_FILE_NAME_TEMPLATE


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "generator.yaml",
        """
generator:
  api_docs: docs/api.yaml
""",
    )

    configuration = load_configuration(config_path)
    settings = configuration.generator

    assert settings.api_docs == (tmp_path / "docs" / "api.yaml").resolve()
    assert settings.tag_names is None
    assert settings.methods is None
    assert settings.match_path is None
    assert settings.required_properties_only is False
    assert settings.file_name == DEFAULT_FILE_NAME_TEMPLATE
    assert settings.directory == tmp_path.resolve()
    assert settings.overwrite is False


def test_loads_json_configuration_with_all_options(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "generator.json",
        json.dumps(
            {
                "generator": {
                    "api_docs": "/abs/api.json",
                    "tag_names": ["widgets", " users "],
                    "methods": "get, post",
                    "match_path": "^/rest/v1/widgets",
                    "required_properties_only": True,
                    "file_template": "templates/file.hbs",
                    "test_template": "templates/test.hbs",
                    "file_name": "{{tag.name}}.spec.js",
                    "directory": "out",
                    "overwrite": True,
                }
            }
        ),
    )

    settings = load_configuration(config_path).generator

    assert settings.api_docs == Path("/abs/api.json")
    assert settings.tag_names == ("widgets", "users")
    assert settings.methods == ("GET", "POST")
    assert settings.match_path is not None
    assert settings.match_path.search("/REST/V1/widgets/abc")
    assert settings.required_properties_only is True
    assert settings.file_template == (tmp_path / "templates" / "file.hbs").resolve()
    assert settings.test_template == (tmp_path / "templates" / "test.hbs").resolve()
    assert settings.file_name == "{{tag.name}}.spec.js"
    assert settings.directory == (tmp_path / "out").resolve()
    assert settings.overwrite is True


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        load_configuration(tmp_path / "missing.yaml")


def test_generator_section_is_required(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "generator.yaml", "other: {}\n")

    with pytest.raises(ConfigurationError, match="'generator' is required"):
        load_configuration(config_path)


def test_unknown_options_are_rejected(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "generator.yaml", "generator:\n  colour: blue\n")

    with pytest.raises(ConfigurationError, match="Unknown generator option"):
        load_configuration(config_path)


def test_invalid_regular_expression_is_rejected(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "generator.yaml", "generator:\n  match_path: '(['\n")

    with pytest.raises(ConfigurationError, match="not a valid regular expression"):
        load_configuration(config_path)


def test_flags_must_be_booleans(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "generator.yaml", "generator:\n  overwrite: 'yes'\n")

    with pytest.raises(ConfigurationError, match="generator.overwrite must be true or false"):
        load_configuration(config_path)


def test_tag_names_must_be_strings(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "generator.yaml", "generator:\n  tag_names: [1, 2]\n")

    with pytest.raises(ConfigurationError, match="entries must be strings"):
        load_configuration(config_path)
