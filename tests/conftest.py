"""
Shared pytest fixtures for glive tests.

Provides test doubles for the collaborators a build step is given:
- FakeBuild: environment, workspace and a recording halt()
- FakeListener: records messages, captures child output
- FakeLauncher: records launched commands and returns scripted exit codes
"""

import io
from collections.abc import Callable
from pathlib import Path

import pytest

from glive.core import bootstrap as app
from glive.core.exceptions import BuildAbortedError
from glive.core.interfaces.build import IBuild
from glive.core.interfaces.launcher import ILauncher
from glive.core.interfaces.listener import IBuildListener

CI_ENV_VARS = (
    "WORKSPACE",
    "BUILD_NUMBER",
    "BUILD_ID",
    "JOB_NAME",
    "LOGNAME",
    "USER",
    "GRML_LIVE_USER",
)


class FakeBuild(IBuild):
    """Build double; halt() records the message and raises unless told not to."""

    def __init__(self, env=None, workspace=None, raise_on_halt=True):
        self._env = dict(env or {})
        self._workspace = Path(workspace or "/ws")
        self._raise_on_halt = raise_on_halt
        self.halt_messages: list[str] = []

    @property
    def env(self):
        return self._env

    @property
    def workspace(self):
        return self._workspace

    def halt(self, message):
        self.halt_messages.append(message)
        if self._raise_on_halt:
            raise BuildAbortedError(message)


class FakeListener(IBuildListener):
    def __init__(self):
        self._output = io.StringIO()
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []

    @property
    def output(self):
        return self._output

    def info(self, message):
        self.infos.append(message)

    def warning(self, message):
        self.warnings.append(message)

    def error(self, message):
        self.errors.append(message)


class FakeLauncher(ILauncher):
    """
    Launcher double.

    handler(command, cwd) may return an exit code, or a (exit_code, output)
    tuple whose output is written to the stdout sink.
    """

    def __init__(self, exit_code: int = 0, handler: Callable | None = None):
        self.exit_code = exit_code
        self.handler = handler
        self.calls: list[dict] = []

    def launch(self, command, cwd, stdout, stderr=None):
        self.calls.append({"command": list(command), "cwd": Path(cwd), "stderr": stderr})
        if self.handler is None:
            return self.exit_code
        outcome = self.handler(list(command), Path(cwd))
        if isinstance(outcome, tuple):
            exit_code, output = outcome
            stdout.write(output)
            return exit_code
        return outcome

    @property
    def commands(self) -> list[list[str]]:
        return [call["command"] for call in self.calls]


@pytest.fixture(autouse=True)
def clean_app_state(monkeypatch):
    """Isolate tests from CI variables, the log file and the global container."""
    for var in CI_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("GLIVE_LOGGING__FILE", "false")
    app.reset()
    yield
    app.reset()


@pytest.fixture
def listener() -> FakeListener:
    return FakeListener()


@pytest.fixture
def launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def make_build() -> Callable[..., FakeBuild]:
    return FakeBuild


@pytest.fixture
def make_launcher() -> Callable[..., FakeLauncher]:
    return FakeLauncher
