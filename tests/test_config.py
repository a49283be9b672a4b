"""
Tests for glive configuration loading and the config command.

Tests verify:
- .glive/config.toml and pyproject.toml [tool.glive] are found upwards
- GLIVE_<SECTION>__<KEY> environment variables override the file
- Unparseable config files are reported and skipped
- Values of the wrong type raise ConfigFileError
- Blank [build] values count as unset
- config get/list expose effective values
"""

from pathlib import Path

import pytest
from click.testing import CliRunner

from glive.cli import cli
from glive.config import CONFIGURABLE_KEYS, config_get, load_config
from glive.core.exceptions import ConfigFileError, ConfigValidationError
from glive.core.settings import find_config_file


def _write_config(root: Path, text: str) -> Path:
    config_dir = root / ".glive"
    config_dir.mkdir()
    path = config_dir / "config.toml"
    path.write_text(text)
    return path


class TestFindConfigFile:
    def test_none_when_missing(self, tmp_path: Path) -> None:
        assert find_config_file(str(tmp_path)) is None

    def test_found_in_parent_directory(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path, '[build]\nsuite = "bookworm"\n')
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config_file(str(nested)) == path

    def test_pyproject_needs_glive_table(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[project]\nname = "x"\n')
        assert find_config_file(str(tmp_path)) is None

        pyproject.write_text('[tool.glive.build]\nsuite = "trixie"\n')
        assert find_config_file(str(tmp_path)) == pyproject


class TestLoadConfig:
    def test_defaults(self, tmp_path: Path) -> None:
        config = load_config(start_dir=str(tmp_path))

        assert config["build"]["suite"] is None
        assert config["build"]["build_only"] is None
        assert config["changelist"]["package_prefix"] is None
        assert config["logging"]["level"] == "warning"
        assert "_config_file" not in config

    def test_values_from_config_file(self, tmp_path: Path) -> None:
        path = _write_config(
            tmp_path,
            '[build]\nsuite = "bookworm"\nbuild_only = true\n\n'
            '[changelist]\npackage_prefix = "grml"\n',
        )

        config = load_config(start_dir=str(tmp_path))

        assert config["build"]["suite"] == "bookworm"
        assert config["build"]["build_only"] is True
        assert config["changelist"]["package_prefix"] == "grml"
        assert config["_config_file"] == str(path)

    def test_values_from_pyproject(self, tmp_path: Path) -> None:
        (tmp_path / "pyproject.toml").write_text('[tool.glive.build]\nname = "grml-full"\n')

        config = load_config(start_dir=str(tmp_path))

        assert config["build"]["name"] == "grml-full"

    def test_explicit_path(self, tmp_path: Path) -> None:
        path = tmp_path / "custom.toml"
        path.write_text('[build]\narchitecture = "arm64"\n')

        config = load_config(config_path=path)

        assert config["build"]["architecture"] == "arm64"

    def test_environment_overrides_file(self, tmp_path: Path, monkeypatch) -> None:
        _write_config(tmp_path, '[build]\nsuite = "bookworm"\narchitecture = "amd64"\n')
        monkeypatch.setenv("GLIVE_BUILD__SUITE", "sid")

        config = load_config(start_dir=str(tmp_path))

        assert config["build"]["suite"] == "sid"
        assert config["build"]["architecture"] == "amd64"

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        _write_config(tmp_path, '[build]\nsuite = "bookworm"\nflavour = "x"\n\n[other]\na = 1\n')

        config = load_config(start_dir=str(tmp_path))

        assert config["build"]["suite"] == "bookworm"
        assert "other" not in config
        assert "flavour" not in config["build"]

    def test_invalid_toml_is_reported(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "[build\nsuite = \n")

        config = load_config(start_dir=str(tmp_path))

        assert config["_config_error"].startswith("Failed to parse config file")
        assert config["build"]["suite"] is None

    def test_wrong_value_type_is_an_error(self, tmp_path: Path) -> None:
        path = _write_config(tmp_path, "[build]\nversion = 2024.01\n")

        expected = "build.version: Input should be a valid string"
        with pytest.raises(ConfigFileError, match=expected) as exc:
            load_config(start_dir=str(tmp_path))

        assert exc.value.context == {"file_path": str(path)}

    def test_wrong_type_from_environment(self, tmp_path: Path, monkeypatch) -> None:
        monkeypatch.setenv("GLIVE_LOGGING__LEVEL", "loud")

        with pytest.raises(ConfigFileError, match="logging.level"):
            load_config(start_dir=str(tmp_path))

    def test_blank_build_values_are_unset(self, tmp_path: Path) -> None:
        _write_config(tmp_path, '[build]\nsuite = "  "\nname = ""\narchitecture = "amd64"\n')

        config = load_config(start_dir=str(tmp_path))

        assert config["build"]["suite"] is None
        assert config["build"]["name"] is None
        assert config["build"]["architecture"] == "amd64"


class TestConfigGet:
    def test_effective_value(self, tmp_path: Path) -> None:
        _write_config(tmp_path, '[build]\ncodename = "Glumpad"\n')

        assert config_get("build.codename", start_dir=str(tmp_path)) == "Glumpad"

    def test_unknown_key(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigValidationError, match="Unknown config key"):
            config_get("build.nope", start_dir=str(tmp_path))

    def test_unknown_key_is_value_error(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError):
            config_get("nope", start_dir=str(tmp_path))

    def test_all_keys_have_descriptions(self) -> None:
        for key, info in CONFIGURABLE_KEYS.items():
            assert info["description"], key
            assert key.split(".")[0] in {"build", "changelist", "logging"}


class TestConfigCommand:
    @pytest.fixture
    def runner(self, tmp_path: Path, monkeypatch) -> CliRunner:
        monkeypatch.chdir(tmp_path)
        return CliRunner()

    def test_get(self, runner: CliRunner, tmp_path: Path) -> None:
        _write_config(tmp_path, '[build]\nsuite = "bookworm"\n')

        result = runner.invoke(cli, ["config", "get", "build.suite"])

        assert result.exit_code == 0
        assert "build.suite: bookworm" in result.output

    def test_get_unset(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["config", "get", "build.name"])

        assert result.exit_code == 0
        assert "build.name: (not set)" in result.output

    def test_get_unknown_key(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["config", "get", "build.nope"])

        assert result.exit_code == 1
        assert "Unknown config key: build.nope" in result.output

    def test_list(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["config", "list"])

        assert result.exit_code == 0
        for key in CONFIGURABLE_KEYS:
            assert key in result.output

    def test_unparseable_file_does_not_stop_commands(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        _write_config(tmp_path, "[build\n")

        result = runner.invoke(cli, ["check-name", "grml-full"])

        assert result.exit_code == 0, result.output
        assert "grml-full: ok" in result.output

    def test_wrong_value_type_is_a_clean_error(
        self, runner: CliRunner, tmp_path: Path
    ) -> None:
        _write_config(tmp_path, "[build]\nversion = 2024.01\n")

        result = runner.invoke(cli, ["config", "get", "build.version"])

        assert result.exit_code == 1
        assert "Error: Invalid configuration: build.version" in result.output
        assert not isinstance(result.exception, ValueError)
        assert "Traceback" not in result.output
