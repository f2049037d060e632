"""
Tests for the command lines built by each package manager adapter.
"""

import io
import logging

import pytest

from distrokit.backends import DebManager, PackageType, PacmanManager, RpmManager
from distrokit.utils.errors import CommandError


class TestPacmanManager:
    @pytest.mark.parametrize(
        "op, args, argv",
        [
            ("install", ("vim", "git"), ["/usr/bin/pacman", "-S", "--needed", "--noprogressbar", "vim", "git"]),
            ("remove", ("vim",), ["/usr/bin/pacman", "-Rs", "vim"]),
            ("purge", ("vim",), ["/usr/bin/pacman", "-Rsn", "vim"]),
            ("update_index", (), ["/usr/bin/pacman", "-Sy"]),
            ("update", (), ["/usr/bin/pacman", "-Syu", "--needed", "--noprogressbar"]),
            ("upgrade", (), ["/usr/bin/pacman", "-Syu"]),
            ("clean", (), ["/usr/bin/paccache", "-r"]),
        ],
    )
    def test_command_lines(self, fake_run, op, args, argv):
        getattr(PacmanManager(), op)(*args)

        assert fake_run.argvs == [argv]

    def test_failure_is_raised(self, fake_run):
        fake_run.queue(returncode=1)

        with pytest.raises(CommandError):
            PacmanManager().install("nope")

    def test_attributes(self):
        manager = PacmanManager()

        assert manager.package_type is PackageType.PACMAN
        assert manager.path_exec == "/usr/bin/pacman"


class TestRpmManager:
    @pytest.mark.parametrize(
        "op, args, argv",
        [
            ("install", ("vim", "git"), ["/usr/bin/yum", "install", "vim", "git"]),
            ("remove", ("vim",), ["/usr/bin/yum", "remove", "vim"]),
            ("purge", ("vim",), ["/usr/bin/yum", "remove", "vim"]),
            ("update_index", (), ["/usr/bin/yum", "makecache"]),
            ("update", (), ["/usr/bin/yum", "update"]),
            ("upgrade", (), ["/usr/bin/yum", "update"]),
            ("clean", (), ["/usr/bin/yum", "clean", "packages"]),
        ],
    )
    def test_command_lines(self, fake_run, op, args, argv):
        getattr(RpmManager(), op)(*args)

        assert fake_run.argvs == [argv]

    def test_purge_is_logged(self, fake_run, caplog):
        with caplog.at_level(logging.INFO, logger="distrokit.backends.rpm"):
            RpmManager().purge("vim")

        assert "Purging vim" in caplog.text
        assert fake_run.argvs == [["/usr/bin/yum", "remove", "vim"]]

    def test_attributes(self):
        assert RpmManager().package_type is PackageType.RPM
        assert RpmManager().path_exec == "/usr/bin/yum"


class TestDebManager:
    @pytest.mark.parametrize(
        "op, args, argvs",
        [
            ("install", ("vim", "git"), [["/usr/bin/apt-get", "install", "-y", "vim", "git"]]),
            ("remove", ("vim",), [["/usr/bin/apt-get", "remove", "-y", "vim"]]),
            ("purge", ("vim",), [["/usr/bin/apt-get", "purge", "-y", "vim"]]),
            ("update_index", (), [["/usr/bin/apt-get", "update", "-qq"]]),
            ("update", (), [["/usr/bin/apt-get", "upgrade", "-y"]]),
            ("upgrade", (), [["/usr/bin/apt-get", "upgrade", "-y"]]),
            ("clean", (), [["/usr/bin/apt-get", "autoremove", "-y"], ["/usr/bin/apt-get", "clean"]]),
        ],
    )
    def test_command_lines(self, fake_run, op, args, argvs):
        getattr(DebManager(), op)(*args)

        assert fake_run.argvs == argvs

    def test_noninteractive_env(self, fake_run):
        DebManager().install("vim")

        assert fake_run.calls[0].env["DEBIAN_FRONTEND"] == "noninteractive"

    def test_only_exit_code_100_fails(self, fake_run):
        manager = DebManager()
        fake_run.queue(returncode=1)
        fake_run.queue(returncode=100)

        manager.install("vim")
        with pytest.raises(CommandError) as exc:
            manager.install("vim")

        assert exc.value.returncode == 100

    def test_clean_stops_on_autoremove_failure(self, fake_run):
        fake_run.queue(returncode=100)

        with pytest.raises(CommandError):
            DebManager().clean()

        assert fake_run.argvs == [["/usr/bin/apt-get", "autoremove", "-y"]]

    def test_set_stdout(self):
        manager = DebManager()
        out = io.BytesIO()

        manager.set_stdout(out)

        assert manager.cmd.stdout is out

    def test_attributes(self):
        manager = DebManager()

        assert manager.package_type is PackageType.DEB
        assert manager.path_exec == "/usr/bin/apt-get"
        assert repr(manager) == "DebManager(path_exec='/usr/bin/apt-get')"
