"""
Unit tests for the 'glive build' CLI command.

The launcher registered in the service container is replaced by a fake,
so no command is actually run.
"""

import pytest
from click.testing import CliRunner
from dependency_injector import providers

from glive.cli import cli
from glive.core.bootstrap import bootstrap
from glive.core.interfaces.launcher import ILauncher


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def install_launcher(workdir):
    """Register a launcher double in the bootstrapped container."""

    def install(fake):
        container = bootstrap(start_dir=str(workdir))
        container.override(ILauncher, providers.Object(fake))
        return fake

    return install


class TestBuildCommand:
    def test_runs_grml_live_with_expected_arguments(
        self, runner, workdir, install_launcher, make_launcher
    ):
        launcher = install_launcher(make_launcher(exit_code=0))

        result = runner.invoke(
            cli,
            ["build", "-a", "amd64", "-c", "grml-full", "-s", "bookworm", "-V", "2024.01"],
            env={"WORKSPACE": "/ws", "LOGNAME": "alice"},
        )

        assert result.exit_code == 0, result.output
        assert launcher.commands == [
            [
                "sudo", "-A", "grml-live", "-F", "-V", "-A",
                "-a", "amd64",
                "-c", "grml-full",
                "-s", "bookworm",
                "-U", "alice",
                "-v", "2024.01",
                "-r", "autobuild-2024.01",
                "-g", "autobuild",
                "-o", "/ws",
            ]
        ]  # fmt: skip
        assert "Running grml-live was successful." in result.output

    def test_failure_exits_non_zero(self, runner, workdir, install_launcher, make_launcher):
        install_launcher(make_launcher(exit_code=2))

        result = runner.invoke(cli, ["build"], env={"WORKSPACE": str(workdir)})

        assert result.exit_code == 1
        assert "Fatal error while running grml-live." in result.output
        assert "Build failed." in result.output

    def test_workspace_option_used_as_cwd_and_output(
        self, runner, workdir, install_launcher, make_launcher
    ):
        launcher = install_launcher(make_launcher())
        workspace = workdir / "job"
        workspace.mkdir()

        result = runner.invoke(cli, ["build", "-w", str(workspace), "--build-only"])

        assert result.exit_code == 0, result.output
        command = launcher.commands[0]
        assert "-b" in command
        assert command[-2:] == ["-o", str(workspace)]
        assert launcher.calls[0]["cwd"] == workspace.resolve()

    def test_config_defaults_and_overrides(
        self, runner, workdir, install_launcher, make_launcher
    ):
        (workdir / ".glive").mkdir()
        (workdir / ".glive" / "config.toml").write_text(
            '[build]\nsuite = "trixie"\narchitecture = "i386"\nname = "grml-small"\n'
        )
        launcher = install_launcher(make_launcher())

        result = runner.invoke(cli, ["build", "-a", "amd64"], env={"WORKSPACE": "/ws"})

        assert result.exit_code == 0, result.output
        command = launcher.commands[0]
        assert command[command.index("-a") + 1] == "amd64"
        assert command[command.index("-s") + 1] == "trixie"
        assert command[command.index("-g") + 1] == "grml-small"

    def test_blank_option_is_ignored(self, runner, workdir, install_launcher, make_launcher):
        launcher = install_launcher(make_launcher())

        result = runner.invoke(
            cli, ["build", "-s", "  ", "-r", ""], env={"WORKSPACE": "/ws", "BUILD_NUMBER": "9"}
        )

        assert result.exit_code == 0, result.output
        command = launcher.commands[0]
        assert "-s" not in command
        assert command[command.index("-r") + 1] == "autobuild-build9"

    def test_dry_run_prints_command_only(
        self, runner, workdir, install_launcher, make_launcher
    ):
        launcher = install_launcher(make_launcher())

        result = runner.invoke(
            cli, ["build", "--dry-run", "-g", "grml"], env={"WORKSPACE": "/ws"}
        )

        assert result.exit_code == 0, result.output
        assert launcher.calls == []
        assert "sudo -A grml-live -F -V -A" in result.output
        assert "-g grml -o /ws" in result.output

    def test_short_name_warns(self, runner, workdir, install_launcher, make_launcher):
        install_launcher(make_launcher())

        result = runner.invoke(cli, ["build", "-g", "abc"], env={"WORKSPACE": "/ws"})

        assert result.exit_code == 0, result.output
        assert "Isn't the name too short?" in result.output

    def test_unparseable_config_is_a_warning(
        self, runner, workdir, install_launcher, make_launcher
    ):
        (workdir / ".glive").mkdir()
        (workdir / ".glive" / "config.toml").write_text("[build\n")
        launcher = install_launcher(make_launcher())

        result = runner.invoke(cli, ["build"], env={"WORKSPACE": "/ws"})

        assert result.exit_code == 0, result.output
        assert "Warning: Failed to parse config file" in result.output
        assert len(launcher.calls) == 1

    def test_wrong_config_type_fails_before_launch(
        self, runner, workdir, install_launcher, make_launcher
    ):
        (workdir / ".glive").mkdir()
        (workdir / ".glive" / "config.toml").write_text("[build]\nversion = 2024.01\n")
        launcher = install_launcher(make_launcher())

        result = runner.invoke(cli, ["build"], env={"WORKSPACE": "/ws"})

        assert result.exit_code == 1
        assert "Invalid configuration: build.version" in result.output
        assert launcher.calls == []


class TestCheckNameCommand:
    def test_ok(self, runner, workdir):
        result = runner.invoke(cli, ["check-name", "grml-full"])

        assert result.exit_code == 0
        assert "grml-full: ok" in result.output

    def test_short_name_warning(self, runner, workdir):
        result = runner.invoke(cli, ["check-name", "abc"])

        assert result.exit_code == 0
        assert "Isn't the name too short?" in result.output

    def test_empty_name_fails(self, runner, workdir):
        result = runner.invoke(cli, ["check-name", ""])

        assert result.exit_code == 1
        assert "Please set a name" in result.output


class TestChangelistCommand:
    def test_missing_package_list_fails(self, runner, workdir, install_launcher, make_launcher):
        install_launcher(make_launcher())

        result = runner.invoke(cli, ["changelist", "-w", str(workdir)])

        assert result.exit_code == 1
        assert "Could not find package list" in result.output

    def test_writes_changelog(self, runner, workdir, install_launcher, make_launcher):
        fai_logs = workdir / "grml_logs" / "fai"
        fai_logs.mkdir(parents=True)
        (fai_logs / "dpkg.list").write_text("ii  bash  5.2  amd64  shell\n")
        install_launcher(make_launcher())

        result = runner.invoke(
            cli,
            ["changelist", "-p", "grml-", "-f", "changes.txt"],
            env={"WORKSPACE": str(workdir), "JOB_NAME": "daily", "BUILD_ID": "3"},
        )

        assert result.exit_code == 0, result.output
        text = (workdir / "changes.txt").read_text()
        assert "daily 3\n" in text
        assert "  Added:\n     bash\n" in text


class TestCliGroup:
    def test_help_without_command(self, runner):
        result = runner.invoke(cli, [])

        assert result.exit_code == 0
        assert "glive build" in result.output
