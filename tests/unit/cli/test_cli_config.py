"""Unit tests for splitdiff CLI configuration management.

This module tests the configuration system including file discovery,
loading, merging and priority handling.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from splitdiff.cli.config import (
    _load_pyproject_section,
    discover_config_file,
    find_config_in_parents,
    load_config_file,
    load_config_with_priority,
    merge_configs,
)
from splitdiff.exceptions import ConfigError


@pytest.mark.unit
@pytest.mark.cli
class TestConfigDiscovery:
    """Test configuration file discovery functionality."""

    def test_discover_config_in_cwd(self, tmp_path):
        """Test discovering config file in current working directory."""
        config_file = tmp_path / ".splitdiff.toml"
        config_file.write_text("resource_limit = 100\n")

        with patch("pathlib.Path.cwd", return_value=tmp_path):
            discovered = discover_config_file()

        assert discovered is not None
        assert discovered.resolve() == config_file.resolve()

    def test_discover_config_in_home(self, tmp_path):
        """Test discovering config file in home directory."""
        cwd = tmp_path / "work"
        home = tmp_path / "home"
        cwd.mkdir()
        home.mkdir()
        config_file = home / ".splitdiff.json"
        config_file.write_text('{"pair_substitutions": false}')

        with patch("pathlib.Path.cwd", return_value=cwd):
            with patch("pathlib.Path.home", return_value=home):
                discovered = discover_config_file()

        assert discovered == config_file

    def test_discover_config_prefers_toml_over_json(self, tmp_path):
        """Test that TOML files are preferred over JSON when both exist."""
        toml_file = tmp_path / ".splitdiff.toml"
        toml_file.write_text("resource_limit = 1\n")
        (tmp_path / ".splitdiff.json").write_text('{"resource_limit": 2}')

        with patch("pathlib.Path.cwd", return_value=tmp_path):
            discovered = discover_config_file()

        assert discovered.resolve() == toml_file.resolve()

    def test_discover_config_prefers_cwd_over_home(self, tmp_path):
        """Test that current directory config takes precedence over home."""
        cwd = tmp_path / "work"
        home = tmp_path / "home"
        cwd.mkdir()
        home.mkdir()
        cwd_config = cwd / ".splitdiff.yaml"
        cwd_config.write_text("resource_limit: 1\n")
        (home / ".splitdiff.yaml").write_text("resource_limit: 2\n")

        with patch("pathlib.Path.cwd", return_value=cwd):
            with patch("pathlib.Path.home", return_value=home):
                discovered = discover_config_file()

        assert discovered.resolve() == cwd_config.resolve()

    def test_discover_config_returns_none_when_not_found(self, tmp_path):
        """Test that None is returned when no config file exists."""
        cwd = tmp_path / "work"
        home = tmp_path / "home"
        cwd.mkdir()
        home.mkdir()

        with patch("pathlib.Path.cwd", return_value=cwd):
            with patch("pathlib.Path.home", return_value=home):
                assert discover_config_file() is None


@pytest.mark.unit
@pytest.mark.cli
class TestPyprojectTomlSupport:
    """Test [tool.splitdiff] sections in pyproject.toml."""

    def test_load_pyproject_with_tool_section(self, tmp_path):
        """Test loading the tool section."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n\n[tool.splitdiff]\npair_substitutions = false\n')

        assert _load_pyproject_section(pyproject) == {"pair_substitutions": False}
        assert load_config_file(pyproject) == {"pair_substitutions": False}

    def test_load_pyproject_without_tool_section(self, tmp_path):
        """Test that a pyproject without the section gives an empty config."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n')
        assert _load_pyproject_section(pyproject) == {}

    def test_find_config_in_parent_directory(self, tmp_path):
        """Test that the search walks up to parent directories."""
        config_file = tmp_path / ".splitdiff.toml"
        config_file.write_text("resource_limit = 5\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_in_parents(nested) == config_file.resolve()

    def test_dedicated_config_takes_precedence_over_pyproject(self, tmp_path):
        """Test that dedicated files win in the same directory."""
        (tmp_path / "pyproject.toml").write_text("[tool.splitdiff]\nresource_limit = 1\n")
        dedicated = tmp_path / ".splitdiff.json"
        dedicated.write_text('{"resource_limit": 2}')

        assert find_config_in_parents(tmp_path) == dedicated.resolve()

    def test_pyproject_without_section_is_skipped(self, tmp_path):
        """Test that unrelated pyproject files do not stop the search."""
        (tmp_path / ".splitdiff.toml").write_text("resource_limit = 3\n")
        child = tmp_path / "child"
        child.mkdir()
        (child / "pyproject.toml").write_text('[project]\nname = "child"\n')

        assert find_config_in_parents(child) == (tmp_path / ".splitdiff.toml").resolve()

    def test_invalid_pyproject_is_skipped(self, tmp_path):
        """Test that broken pyproject files are ignored during discovery."""
        (tmp_path / ".splitdiff.toml").write_text("resource_limit = 3\n")
        child = tmp_path / "child"
        child.mkdir()
        (child / "pyproject.toml").write_text("[tool.splitdiff\nbroken")

        assert find_config_in_parents(child) == (tmp_path / ".splitdiff.toml").resolve()

    def test_pyproject_section_must_be_table(self, tmp_path):
        """Test that a non-table tool section is an error."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool]\nsplitdiff = "nope"\n')
        with pytest.raises(ConfigError):
            load_config_file(pyproject)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigLoading:
    """Test loading config files in each format."""

    def test_load_toml_config(self, tmp_path):
        """Test loading TOML configuration."""
        config_file = tmp_path / "config.toml"
        config_file.write_text('section_header_pattern = "^##"\nresource_limit = 1000\n')
        assert load_config_file(config_file) == {"section_header_pattern": "^##", "resource_limit": 1000}

    def test_load_json_config(self, tmp_path):
        """Test loading JSON configuration."""
        config_file = tmp_path / "config.json"
        config_file.write_text(json.dumps({"keep_trailing_empty": True}))
        assert load_config_file(str(config_file)) == {"keep_trailing_empty": True}

    def test_load_yaml_config(self, tmp_path):
        """Test loading YAML configuration."""
        config_file = tmp_path / "config.yml"
        config_file.write_text(yaml.safe_dump({"untitled_section_title": "Misc"}))
        assert load_config_file(config_file) == {"untitled_section_title": "Misc"}

    def test_empty_yaml_is_empty_config(self, tmp_path):
        """Test that an empty YAML file is accepted."""
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert load_config_file(config_file) == {}

    def test_load_config_missing_file_raises_error(self, tmp_path):
        """Test error for a path that does not exist."""
        with pytest.raises(ConfigError, match="does not exist"):
            load_config_file(tmp_path / "nope.toml")

    def test_load_config_directory_raises_error(self, tmp_path):
        """Test error for a directory path."""
        with pytest.raises(ConfigError, match="not a file"):
            load_config_file(tmp_path)

    def test_unsupported_extension(self, tmp_path):
        """Test error for unknown config formats."""
        config_file = tmp_path / "config.ini"
        config_file.write_text("[x]\n")
        with pytest.raises(ConfigError, match="Unsupported config file format"):
            load_config_file(config_file)

    @pytest.mark.parametrize(
        "name,content",
        [
            ("bad.toml", "resource_limit = "),
            ("bad.json", "{not json"),
            ("bad.yaml", "key: [unclosed"),
        ],
    )
    def test_invalid_syntax_raises_error(self, tmp_path, name, content):
        """Test that parse errors become ConfigError with the cause attached."""
        config_file = tmp_path / name
        config_file.write_text(content)
        with pytest.raises(ConfigError) as exc_info:
            load_config_file(config_file)
        assert exc_info.value.original_error is not None
        assert exc_info.value.config_path == str(config_file)

    @pytest.mark.parametrize("name,content", [("list.json", "[1, 2]"), ("list.yaml", "- 1\n- 2\n")])
    def test_non_mapping_raises_error(self, tmp_path, name, content):
        """Test that top-level lists are rejected."""
        config_file = tmp_path / name
        config_file.write_text(content)
        with pytest.raises(ConfigError):
            load_config_file(config_file)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigMerging:
    """Test merge_configs function."""

    def test_merge_configs_simple(self):
        """Test that override values win."""
        assert merge_configs({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_merge_configs_nested(self):
        """Test that nested dictionaries merge recursively."""
        base = {"render": {"width": 80, "color": "auto"}}
        override = {"render": {"width": 120}}
        assert merge_configs(base, override) == {"render": {"width": 120, "color": "auto"}}

    def test_merge_does_not_mutate_base(self):
        """Test that the base mapping is left untouched."""
        base = {"a": 1}
        merge_configs(base, {"a": 2})
        assert base == {"a": 1}


@pytest.mark.unit
@pytest.mark.cli
class TestConfigPriority:
    """Test load_config_with_priority function."""

    def test_explicit_path_wins(self, tmp_path):
        """Test that --config beats the environment variable."""
        explicit = tmp_path / "explicit.json"
        explicit.write_text('{"resource_limit": 1}')
        env = tmp_path / "env.json"
        env.write_text('{"resource_limit": 2}')

        assert load_config_with_priority(str(explicit), str(env)) == {"resource_limit": 1}

    def test_env_var_path(self, tmp_path):
        """Test loading from the environment variable path."""
        env = tmp_path / "env.yaml"
        env.write_text("resource_limit: 2\n")
        assert load_config_with_priority(None, str(env)) == {"resource_limit": 2}

    def test_auto_discovery(self, tmp_path):
        """Test falling back to discovery."""
        (tmp_path / ".splitdiff.toml").write_text("resource_limit = 3\n")
        with patch("pathlib.Path.cwd", return_value=tmp_path):
            assert load_config_with_priority() == {"resource_limit": 3}

    def test_returns_empty_when_not_found(self, tmp_path):
        """Test the empty default."""
        cwd = tmp_path / "work"
        home = tmp_path / "home"
        cwd.mkdir()
        home.mkdir()
        with patch("pathlib.Path.cwd", return_value=cwd):
            with patch("pathlib.Path.home", return_value=home):
                assert load_config_with_priority() == {}

    def test_missing_explicit_path_raises(self, tmp_path):
        """Test that an explicit but missing file is an error."""
        with pytest.raises(ConfigError):
            load_config_with_priority(str(Path(tmp_path) / "missing.toml"))
