"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence and error handling
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from flowspec.config.loader import (
    GLOBAL_CONFIG_PATH,
    REPO_CONFIG_NAME,
    _deep_merge,
    _load_yaml,
    load_config,
)
from flowspec.config.models import LoggingConfig
from flowspec.core.errors import ConfigError, ErrorCode
from flowspec.models.mode import Mode


def _write_repo_config(root: Path, content: str) -> None:
    path = root / REPO_CONFIG_NAME
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        """Returns empty dict when file doesn't exist."""
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """Loads valid YAML content."""
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("editor:\n  language: ruby\n")

        assert _load_yaml(yaml_file) == {"editor": {"language": "ruby"}}

    def test_returns_empty_for_yaml_null(self, tmp_path: Path) -> None:
        """Returns empty dict for YAML containing null."""
        yaml_file = tmp_path / "null.yaml"
        yaml_file.write_text("null\n")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Raises ConfigError for invalid YAML syntax."""
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        """A top-level list is rejected."""
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_nested_merge(self) -> None:
        """Nested dicts are merged recursively."""
        base = {"editor": {"language": "java", "mode": "framework"}}
        override = {"editor": {"language": "ruby"}}

        assert _deep_merge(base, override) == {"editor": {"language": "ruby", "mode": "framework"}}

    def test_override_replaces_non_dict(self) -> None:
        """Non-dict override replaces dict base."""
        base: dict[str, Any] = {"a": {"nested": 1}}
        override: dict[str, Any] = {"a": "simple"}

        assert _deep_merge(base, override) == {"a": "simple"}

    def test_does_not_mutate_base(self) -> None:
        """Base dict is not mutated."""
        base = {"a": 1}
        _deep_merge(base, {"b": 2})

        assert base == {"a": 1}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_returns_default_config_when_no_files(self, isolated_config: Path) -> None:
        """Returns default config when no config files exist."""
        config = load_config(isolated_config)

        assert config.logging.level == "INFO"
        assert config.editor.language is None
        assert config.editor.mode == Mode.FRAMEWORK
        assert config.editor.hide_modeled_methods is False

    def test_loads_repo_config(self, isolated_config: Path) -> None:
        """Loads config from the repo .flowspec directory."""
        _write_repo_config(isolated_config, "editor:\n  language: Ruby\n  mode: application\n")

        config = load_config(isolated_config)

        assert config.editor.language == "ruby"
        assert config.editor.mode == Mode.APPLICATION

    def test_repo_config_overrides_global(self, isolated_config: Path) -> None:
        """Repo YAML wins over global YAML, key by key."""
        global_path = isolated_config / "global" / "config.yaml"
        global_path.parent.mkdir(parents=True)
        global_path.write_text("editor:\n  language: java\n  hide_modeled_methods: true\n")
        _write_repo_config(isolated_config, "editor:\n  language: python\n")

        config = load_config(isolated_config)

        assert config.editor.language == "python"
        assert config.editor.hide_modeled_methods is True

    def test_env_vars_override_yaml(self, isolated_config: Path) -> None:
        """Environment variables override YAML config."""
        _write_repo_config(isolated_config, "logging:\n  level: INFO\n")

        with patch.dict(os.environ, {"FLOWSPEC__LOGGING__LEVEL": "WARNING"}):
            config = load_config(isolated_config)

        assert config.logging.level == "WARNING"

    def test_kwargs_override_all(self, isolated_config: Path) -> None:
        """Keyword arguments override everything."""
        with patch.dict(os.environ, {"FLOWSPEC__LOGGING__LEVEL": "WARNING"}):
            config = load_config(isolated_config, logging=LoggingConfig(level="ERROR"))

        assert config.logging.level == "ERROR"

    def test_defaults_to_cwd(self, isolated_config: Path) -> None:
        """Without a root, the repo config is looked up in the working directory."""
        _write_repo_config(isolated_config, "editor:\n  language: csharp\n")

        assert load_config().editor.language == "csharp"

    def test_raises_config_error_for_invalid_value(self, isolated_config: Path) -> None:
        """Raises ConfigError for invalid config values."""
        _write_repo_config(isolated_config, "editor:\n  mode: sideways\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(isolated_config)
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE


class TestGlobalConfigPath:
    """Tests for GLOBAL_CONFIG_PATH constant."""

    def test_is_in_user_config(self) -> None:
        """Path is in the user config directory."""
        assert isinstance(GLOBAL_CONFIG_PATH, Path)
        assert "flowspec" in str(GLOBAL_CONFIG_PATH)
