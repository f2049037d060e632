# distrokit/backends/rpm.py

import logging

from distrokit.backends.base import Manager, PackageType

logger = logging.getLogger(__name__)

PATH_YUM = "/usr/bin/yum"


class RpmManager(Manager):
    package_type = PackageType.RPM
    path_exec = PATH_YUM

    def install(self, *names):
        logger.info("Installing %s", " ".join(names))
        self.cmd.run(PATH_YUM, "install", *names)

    def remove(self, *names):
        logger.info("Removing %s", " ".join(names))
        self.cmd.run(PATH_YUM, "remove", *names)

    def purge(self, *names):
        # yum keeps no configuration apart from the package
        logger.info("Purging %s", " ".join(names))
        self.cmd.run(PATH_YUM, "remove", *names)

    def update_index(self):
        logger.info("Updating package index")
        self.cmd.run(PATH_YUM, "makecache")

    def update(self):
        logger.info("Updating packages")
        self.cmd.run(PATH_YUM, "update")

    def upgrade(self):
        logger.info("Upgrading packages")
        self.cmd.run(PATH_YUM, "update")

    def clean(self):
        logger.info("Cleaning package cache")
        self.cmd.run(PATH_YUM, "clean", "packages")
