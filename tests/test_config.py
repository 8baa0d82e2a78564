"""Tests for repocheck configuration management."""

from __future__ import annotations

from pathlib import Path

import pytest

from repocheck.config import RepoCheckConfig, find_config_file, load_config


class TestRepoCheckConfig:
    """Tests for the RepoCheckConfig dataclass."""

    def test_default_values(self) -> None:
        """Test that default values are set correctly."""
        config = RepoCheckConfig()
        assert config.root == "."
        assert config.plugins_dir == "plugins"
        assert config.manifest_name == "plugin.json"
        assert config.script_pattern == "*.sh"
        assert config.json_pattern == "*.json"
        assert config.shell == "bash"

    @pytest.mark.parametrize(
        "field_name",
        ["root", "plugins_dir", "manifest_name", "script_pattern", "json_pattern", "shell"],
    )
    def test_validation_empty_values(self, field_name: str) -> None:
        """Test that empty values raise ValueError."""
        with pytest.raises(ValueError, match=f"{field_name} must be a non-empty string"):
            RepoCheckConfig(**{field_name: ""})

    def test_validation_manifest_name_is_file_name(self) -> None:
        """Test that manifest_name cannot contain a path separator."""
        with pytest.raises(ValueError, match="manifest_name must be a file name"):
            RepoCheckConfig(manifest_name=".claude-plugin/plugin.json")

    def test_validation_pattern_is_file_glob(self) -> None:
        """Test that patterns match file names only."""
        with pytest.raises(ValueError, match="json_pattern must match file names"):
            RepoCheckConfig(json_pattern="config/*.json")

    def test_get_root_path(self, tmp_path: Path) -> None:
        """Test get_root_path resolves root against the base path."""
        config = RepoCheckConfig(root="repo")
        assert config.get_root_path(tmp_path) == (tmp_path / "repo").resolve()

    def test_get_root_path_absolute(self, tmp_path: Path) -> None:
        """Test an absolute root ignores the base path."""
        config = RepoCheckConfig(root=str(tmp_path))
        assert config.get_root_path(Path("/somewhere/else")) == tmp_path.resolve()


class TestFindConfigFile:
    """Tests for find_config_file."""

    def test_finds_file_in_parent(self, tmp_path: Path) -> None:
        """Test the search walks up the directory tree."""
        (tmp_path / ".repocheckrc").write_text('plugins_dir = "ext"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(".repocheckrc", nested) == (tmp_path / ".repocheckrc").resolve()

    def test_returns_none_when_absent(self, tmp_path: Path) -> None:
        """Test None is returned when no file exists up the tree."""
        assert find_config_file(".repocheckrc-does-not-exist", tmp_path) is None


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_defaults(self, tmp_path: Path) -> None:
        """Test defaults apply with no other sources."""
        assert load_config(start_dir=tmp_path) == RepoCheckConfig()

    def test_pyproject_section(self, tmp_path: Path) -> None:
        """Test values are read from [tool.repocheck]."""
        (tmp_path / "pyproject.toml").write_text(
            '[tool.repocheck]\nplugins_dir = "addons"\nunknown_key = 1\n'
        )
        config = load_config(start_dir=tmp_path)
        assert config.plugins_dir == "addons"

    def test_rc_overrides_pyproject(self, tmp_path: Path) -> None:
        """Test .repocheckrc wins over pyproject.toml."""
        (tmp_path / "pyproject.toml").write_text('[tool.repocheck]\nplugins_dir = "addons"\n')
        (tmp_path / ".repocheckrc").write_text('plugins_dir = "ext"\n')
        assert load_config(start_dir=tmp_path).plugins_dir == "ext"

    def test_env_overrides_rc(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test environment variables win over .repocheckrc."""
        (tmp_path / ".repocheckrc").write_text('manifest_name = "a.json"\n')
        monkeypatch.setenv("REPOCHECK_MANIFEST_NAME", "b.json")
        assert load_config(start_dir=tmp_path).manifest_name == "b.json"

    def test_cli_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test CLI overrides win over everything, and None overrides are ignored."""
        monkeypatch.setenv("REPOCHECK_MANIFEST_NAME", "b.json")
        config = load_config(
            cli_overrides={"manifest_name": "c.json", "plugins_dir": None},
            start_dir=tmp_path,
        )
        assert config.manifest_name == "c.json"
        assert config.plugins_dir == "plugins"

    def test_invalid_toml_ignored(self, tmp_path: Path) -> None:
        """Test an unparsable config file falls back to defaults."""
        (tmp_path / ".repocheckrc").write_text("this is = = not toml")
        assert load_config(start_dir=tmp_path) == RepoCheckConfig()

    def test_invalid_value_raises(self, tmp_path: Path) -> None:
        """Test an invalid merged value raises ValueError."""
        with pytest.raises(ValueError):
            load_config(cli_overrides={"manifest_name": "a/b.json"}, start_dir=tmp_path)
