# distrokit/backends/base.py

import abc
import enum
import logging

from distrokit.utils.executil import Command

logger = logging.getLogger(__name__)


class PackageType(enum.Enum):
    DEB = "deb"
    RPM = "rpm"
    PACMAN = "pacman"

    def __str__(self):
        return self.value


class Manager(abc.ABC):
    """
    Common capability set of a package manager.

    Every operation runs its command synchronously and raises the
    command's error; nothing is retried.
    """

    package_type: PackageType
    path_exec: str

    def __init__(self, cmd: Command | None = None, **options):
        # options of other families, e.g. the Debian keyring_dir, are ignored
        self.cmd = cmd if cmd is not None else Command()

    def __repr__(self):
        return f"{type(self).__name__}(path_exec={self.path_exec!r})"

    def set_stdout(self, out):
        self.cmd.set_stdout(out)

    def pre_usage(self):
        """Prepare the system before the first use of the manager."""

    @abc.abstractmethod
    def install(self, *names):
        ...

    @abc.abstractmethod
    def remove(self, *names):
        ...

    @abc.abstractmethod
    def purge(self, *names):
        ...

    @abc.abstractmethod
    def update_index(self):
        ...

    @abc.abstractmethod
    def update(self):
        ...

    @abc.abstractmethod
    def upgrade(self):
        ...

    @abc.abstractmethod
    def clean(self):
        ...
