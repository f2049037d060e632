import enum
import pathlib
import re
import shlex

import psutil

from distrokit.utils.errors import KeyNotFoundError, OsReleaseError

OS_RELEASE = pathlib.Path("/etc/os-release")

RE_KEY = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


class System(enum.Enum):
    UNKNOWN = "unknown system"
    LINUX = "Linux"
    MACOS = "macOS"
    WINDOWS = "Windows"
    FREEBSD = "FreeBSD"

    def __str__(self):
        return self.value


class Distribution(enum.Enum):
    """Most used Linux distributions."""

    UNKNOWN = "unknown distribution"

    DEBIAN = "Debian"
    UBUNTU = "Ubuntu"

    FEDORA = "Fedora"
    CENTOS = "CentOS"

    OPENSUSE = "openSUSE"

    ARCH = "Arch"
    MANJARO = "Manjaro"

    def __str__(self):
        return self.value


ID_TO_DISTRO = {
    "debian": Distribution.DEBIAN,
    "ubuntu": Distribution.UBUNTU,

    "centos": Distribution.CENTOS,
    "fedora": Distribution.FEDORA,

    "opensuse-leap": Distribution.OPENSUSE,
    "opensuse-tumbleweed": Distribution.OPENSUSE,

    "arch": Distribution.ARCH,
    "manjaro": Distribution.MANJARO,  # based on Arch
}


def detect_system() -> System:
    if psutil.LINUX:
        return System.LINUX
    if psutil.MACOS:
        return System.MACOS
    if psutil.WINDOWS:
        return System.WINDOWS
    if psutil.FREEBSD:
        return System.FREEBSD
    return System.UNKNOWN


def get_os():
    system = detect_system()
    if system is System.MACOS:
        return "macos"
    if system is System.WINDOWS:
        return "windows"
    if system is System.FREEBSD:
        return "freebsd"
    return "linux"


def parse_os_release(path=OS_RELEASE) -> dict:
    """
    Parse a shell-style KEY=value file such as /etc/os-release.

    Values may be quoted and use shell escapes. Raises OsReleaseError
    on any line that is not a comment, blank, or a valid assignment.
    """
    path = pathlib.Path(path)
    data = {}
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise OsReleaseError(f"{path}: {e}") from e

    for lineno, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        key, sep, raw = line.partition("=")
        if not sep or not RE_KEY.match(key):
            raise OsReleaseError(f"{path}:{lineno}: invalid line {line!r}")
        try:
            words = shlex.split(raw)
        except ValueError as e:
            raise OsReleaseError(f"{path}:{lineno}: {e}") from e
        if len(words) > 1:
            raise OsReleaseError(f"{path}:{lineno}: unquoted value {raw!r}")

        data[key] = words[0] if words else ""
    return data


def _get(path, key):
    path = pathlib.Path(path)
    if not path.exists():
        raise OsReleaseError(str(Distribution.UNKNOWN))
    data = parse_os_release(path)
    try:
        return data[key]
    except KeyError:
        raise KeyNotFoundError(key, path) from None


def detect_distro(path=OS_RELEASE) -> Distribution:
    """
    Return the Linux distribution named by the ID field of os-release.

    A missing file is not an error: it reports Distribution.UNKNOWN,
    as does an ID absent from ID_TO_DISTRO.
    """
    path = pathlib.Path(path)
    if not path.exists():
        return Distribution.UNKNOWN
    id_ = parse_os_release(path).get("ID", "")
    return ID_TO_DISTRO.get(id_, Distribution.UNKNOWN)


def detect_distro_version(path=OS_RELEASE) -> str:
    return _get(path, "VERSION_ID")


def detect_distro_codename(path=OS_RELEASE) -> str:
    """Return the release code name, e.g. 'bookworm' or 'jammy'."""
    return _get(path, "VERSION_CODENAME")
