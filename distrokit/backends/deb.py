# distrokit/backends/deb.py
#
# 'apt' is for the terminal and gives beautiful output.
# 'apt-get' and 'apt-cache' are for scripts and give stable, parsable output.

import logging
import os
import posixpath
from pathlib import Path
from urllib.parse import urlparse

from distrokit.backends.base import Manager, PackageType
from distrokit.utils.download import download
from distrokit.utils.errors import KeyUrlError, StderrError
from distrokit.utils.executil import Command

logger = logging.getLogger(__name__)

PATH_APT_GET = "/usr/bin/apt-get"
PATH_GPG = "/usr/bin/gpg"

DIR_KEYRINGS = Path("/usr/share/keyrings")
DIR_SOURCES = Path("/etc/apt/sources.list.d")
DIR_GNUPG = Path("/root/.gnupg")

DEFAULT_KEYSERVER = "hkp://keyserver.ubuntu.com:80"

# apt-get returns 100 on error
BAD_EXIT_CODES = (100,)


def new_command() -> Command:
    return Command(
        env=["DEBIAN_FRONTEND=noninteractive"],
        bad_exit_codes=BAD_EXIT_CODES,
    )


class DebManager(Manager):
    """
    Package manager of the Linux systems based on Debian.

    Besides the common operations it handles signing keys and APT
    repositories, both named by an alias:

        <keyring_dir>/<alias>-archive-keyring.gpg
        <sources_dir>/<alias>.list

    Multi-step operations have no rollback: when a later step fails,
    files written by the earlier ones are left in place.
    """

    package_type = PackageType.DEB
    path_exec = PATH_APT_GET

    def __init__(
        self,
        cmd: Command | None = None,
        keyring_dir: Path = DIR_KEYRINGS,
        sources_dir: Path = DIR_SOURCES,
        gnupg_dir: Path = DIR_GNUPG,
    ):
        super().__init__(cmd if cmd is not None else new_command())
        self.keyring_dir = Path(keyring_dir)
        self.sources_dir = Path(sources_dir)
        self.gnupg_dir = Path(gnupg_dir)

    def keyring(self, alias: str) -> Path:
        return self.keyring_dir / f"{alias}-archive-keyring.gpg"

    def repository(self, alias: str) -> Path:
        return self.sources_dir / f"{alias}.list"

    def pre_usage(self):
        """Create the GnuPG home required to import keys."""
        try:
            self.gnupg_dir.mkdir(mode=0o700)
        except FileExistsError:
            if not self.gnupg_dir.is_dir():
                raise NotADirectoryError(f"{str(self.gnupg_dir)!r} must be a directory") from None

    # == Packages

    def install(self, *names):
        logger.info("Installing %s", " ".join(names))
        self.cmd.run(PATH_APT_GET, "install", "-y", *names)

    def remove(self, *names):
        logger.info("Removing %s", " ".join(names))
        self.cmd.run(PATH_APT_GET, "remove", "-y", *names)

    def purge(self, *names):
        logger.info("Purging %s", " ".join(names))
        self.cmd.run(PATH_APT_GET, "purge", "-y", *names)

    def update_index(self):
        logger.info("Updating package index")
        result = self.cmd.output_stderr(PATH_APT_GET, "update", "-qq")
        self.cmd.check_stderr(result)

    def update(self):
        logger.info("Updating packages")
        self.cmd.run(PATH_APT_GET, "upgrade", "-y")

    def upgrade(self):
        logger.info("Upgrading packages")
        self.cmd.run(PATH_APT_GET, "upgrade", "-y")

    def clean(self):
        logger.info("Cleaning packages")
        self.cmd.run(PATH_APT_GET, "autoremove", "-y")
        self.cmd.run(PATH_APT_GET, "clean")

    # == Keys
    # apt-key is deprecated: keys go to a keyring referenced by 'signed-by'.

    def import_key(self, alias: str, key_url: str):
        """Download an armored key from key_url and store it dearmored."""
        logger.info("Importing key %s", alias)
        if "." not in posixpath.basename(urlparse(key_url).path):
            raise KeyUrlError(key_url)

        key = download(key_url)

        result = self.cmd.output_combined(PATH_GPG, "--dearmor", input=key)
        self.cmd.check_stderr(result)

        with open(self.keyring(alias), "wb") as fh:
            fh.write(result.stdout)
            fh.flush()
            os.fsync(fh.fileno())

    def import_key_from_server(self, alias: str, key: str, keyserver: str = ""):
        logger.info("Importing key %s from keyserver", alias)
        if not keyserver:
            keyserver = DEFAULT_KEYSERVER

        result = self.cmd.output_stderr(
            PATH_GPG,
            "--no-default-keyring",
            "--keyring", self.keyring(alias),
            "--keyserver", keyserver,
            "--recv-keys", key,
        )
        if b"failed" in result.stderr:
            raise StderrError(result.stderr)
        self.cmd.check(result)

    def remove_key(self, alias: str):
        logger.info("Removing key %s", alias)
        self.keyring(alias).unlink()

    # == Repositories

    def add_repo(self, alias: str, *urls: str):
        logger.info("Adding repository %s", alias)
        if not urls:
            raise ValueError("add_repo requires a repository URL")

        # no code name: the entry must work for repositories without a
        # Release file per suite
        self.repository(alias).write_text(
            f"deb [signed-by={self.keyring(alias)}] {urls[0]} main/\n"
        )
        self.update_index()

    def remove_repo(self, alias: str):
        logger.info("Removing repository %s", alias)
        self.keyring(alias).unlink()
        self.repository(alias).unlink()
        self.update_index()
