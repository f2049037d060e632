"""
Pytest configuration and shared fixtures for distrokit tests.
"""

import subprocess
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from distrokit.utils import executil


@pytest.fixture
def os_release(tmp_path: Path):
    """Write a temporary os-release file from the given text."""
    def _write(text: str) -> Path:
        path = tmp_path / "os-release"
        path.write_text(text)
        return path

    return _write


@pytest.fixture
def os_release_ubuntu(os_release) -> Path:
    return os_release(
        'NAME="Ubuntu"\n'
        'VERSION="22.04 LTS (Jammy Jellyfish)"\n'
        'ID=ubuntu\n'
        'ID_LIKE=debian\n'
        'VERSION_ID="22.04"\n'
        'VERSION_CODENAME=jammy\n'
    )


@pytest.fixture
def os_release_arch(os_release) -> Path:
    return os_release(
        'NAME="Arch Linux"\n'
        'PRETTY_NAME="Arch Linux"\n'
        'ID=arch\n'
        'BUILD_ID=rolling\n'
        'ANSI_COLOR="38;2;23;147;209"\n'
    )


@dataclass
class Call:
    argv: list
    input: bytes | None = None
    env: dict | None = None


@dataclass
class FakeRun:
    """Stand-in for subprocess.run that records every invocation."""

    calls: list = field(default_factory=list)
    results: list = field(default_factory=list)

    def queue(self, returncode=0, stdout=b"", stderr=b""):
        self.results.append((returncode, stdout, stderr))

    @property
    def argvs(self):
        return [c.argv for c in self.calls]

    def __call__(self, argv, input=None, stdout=None, stderr=None, env=None):
        self.calls.append(Call(list(argv), input, env))
        returncode, out, err = self.results.pop(0) if self.results else (0, b"", b"")
        return subprocess.CompletedProcess(
            argv,
            returncode,
            out if stdout == subprocess.PIPE else None,
            err if stderr == subprocess.PIPE else None,
        )


@pytest.fixture
def fake_run(monkeypatch) -> FakeRun:
    """Intercept process creation in distrokit.utils.executil."""
    fake = FakeRun()
    monkeypatch.setattr(executil.subprocess, "run", fake)
    return fake
