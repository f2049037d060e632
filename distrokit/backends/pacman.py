# distrokit/backends/pacman.py

import logging

from distrokit.backends.base import Manager, PackageType

logger = logging.getLogger(__name__)

PATH_PACMAN = "/usr/bin/pacman"
PATH_PACCACHE = "/usr/bin/paccache"


class PacmanManager(Manager):
    """Package manager of Arch and the distributions based on it."""

    package_type = PackageType.PACMAN
    path_exec = PATH_PACMAN

    def install(self, *names):
        logger.info("Installing %s", " ".join(names))
        self.cmd.run(PATH_PACMAN, "-S", "--needed", "--noprogressbar", *names)

    def remove(self, *names):
        logger.info("Removing %s", " ".join(names))
        self.cmd.run(PATH_PACMAN, "-Rs", *names)

    def purge(self, *names):
        logger.info("Purging %s", " ".join(names))
        self.cmd.run(PATH_PACMAN, "-Rsn", *names)

    def update_index(self):
        logger.info("Updating package index")
        self.cmd.run(PATH_PACMAN, "-Sy")

    def update(self):
        logger.info("Updating packages")
        self.cmd.run(PATH_PACMAN, "-Syu", "--needed", "--noprogressbar")

    def upgrade(self):
        logger.info("Upgrading packages")
        self.cmd.run(PATH_PACMAN, "-Syu")

    def clean(self):
        logger.info("Cleaning package cache")
        self.cmd.run(PATH_PACCACHE, "-r")
