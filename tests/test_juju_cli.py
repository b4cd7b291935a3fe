from __future__ import annotations

import json
import subprocess

import pytest

import adapters.juju_cli as juju_cli
from adapters.juju_cli import JujuLister, SubprocessRunner
from core.config import AppSettings
from core.domain.models import BackendCommand, CandidateKind
from core.errors import EXIT_INTERRUPTED, BackendUnavailable, MalformedOutput


class FakeRun:
    def __init__(self, returncode: int = 0, stdout: str = "", stderr: str = "", raises: BaseException | None = None):
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        self.raises = raises
        self.calls: list[tuple[list[str], dict]] = []

    def __call__(self, argv, **kwargs):
        self.calls.append((argv, kwargs))
        if self.raises is not None:
            raise self.raises
        return subprocess.CompletedProcess(argv, self.returncode, stdout=self.stdout, stderr=self.stderr)


@pytest.fixture
def fake_run(monkeypatch: pytest.MonkeyPatch) -> FakeRun:
    fake = FakeRun()
    monkeypatch.setattr(juju_cli.subprocess, "run", fake)
    return fake


class TestJujuLister:
    @pytest.mark.parametrize(
        "kind, argv",
        [
            (CandidateKind.CONTROLLERS, ["juju", "controllers", "--format=json"]),
            (CandidateKind.MODELS, ["juju", "models", "--format=json"]),
            (CandidateKind.UNITS, ["juju", "status", "--format=json"]),
            (CandidateKind.APPLICATIONS, ["juju", "status", "--format=json"]),
        ],
    )
    def test_listing_argv(self, kind, argv):
        assert JujuLister(backend_bin="juju").listing_argv(kind) == argv

    def test_lists_models(self, fake_run):
        fake_run.stdout = json.dumps({"models": [{"name": "a"}, {"name": "b"}]})

        assert JujuLister(backend_bin="juju").list(CandidateKind.MODELS) == ["a", "b"]
        argv, kwargs = fake_run.calls[0]
        assert argv == ["juju", "models", "--format=json"]
        assert kwargs["capture_output"] is True

    def test_backend_bin_from_settings(self, fake_run):
        fake_run.stdout = json.dumps({"controllers": {}})

        JujuLister(AppSettings(backend_bin="/snap/bin/juju")).list(CandidateKind.CONTROLLERS)

        assert fake_run.calls[0][0][0] == "/snap/bin/juju"

    def test_non_zero_exit(self, fake_run):
        fake_run.returncode = 1
        fake_run.stderr = "ERROR no controller selected\n"

        with pytest.raises(BackendUnavailable) as excinfo:
            JujuLister(backend_bin="juju").list(CandidateKind.UNITS)

        assert "no controller selected" in str(excinfo.value)
        assert excinfo.value.returncode == 1

    def test_missing_binary(self, fake_run):
        fake_run.raises = FileNotFoundError(2, "No such file or directory")

        with pytest.raises(BackendUnavailable):
            JujuLister(backend_bin="juju").list(CandidateKind.UNITS)

    def test_malformed_json(self, fake_run):
        fake_run.stdout = "{"

        with pytest.raises(MalformedOutput):
            JujuLister(backend_bin="juju").list(CandidateKind.CONTROLLERS)


class TestSubprocessRunner:
    def test_returns_exit_code_and_inherits_streams(self, fake_run):
        fake_run.returncode = 5

        code = SubprocessRunner().run(BackendCommand(argv=("juju", "ssh", "a/0", "--proxy")))

        assert code == 5
        argv, kwargs = fake_run.calls[0]
        assert argv == ["juju", "ssh", "a/0", "--proxy"]
        assert "stdout" not in kwargs
        assert "capture_output" not in kwargs

    def test_missing_binary(self, fake_run):
        fake_run.raises = FileNotFoundError(2, "No such file or directory")

        with pytest.raises(BackendUnavailable):
            SubprocessRunner().run(BackendCommand(argv=("juju", "status")))

    def test_interrupt(self, fake_run):
        fake_run.raises = KeyboardInterrupt()

        assert SubprocessRunner().run(BackendCommand(argv=("juju", "debug-log"))) == EXIT_INTERRUPTED
