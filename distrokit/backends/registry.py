from distrokit.backends.base import PackageType
from distrokit.backends.deb import DebManager
from distrokit.backends.pacman import PacmanManager
from distrokit.backends.rpm import RpmManager
from distrokit.user import must_be_superuser
from distrokit.utils.errors import UnsupportedDistroError
from distrokit.utils.osdetect import OS_RELEASE, Distribution, detect_distro

BACKENDS = {
    PackageType.DEB: DebManager,
    PackageType.RPM: RpmManager,
    PackageType.PACMAN: PacmanManager,
}

DISTRO_TO_TYPE = {
    Distribution.DEBIAN: PackageType.DEB,
    Distribution.UBUNTU: PackageType.DEB,

    Distribution.FEDORA: PackageType.RPM,
    Distribution.CENTOS: PackageType.RPM,

    Distribution.ARCH: PackageType.PACMAN,
    Distribution.MANJARO: PackageType.PACMAN,
}


def package_type_for(distro: Distribution) -> PackageType:
    try:
        return DISTRO_TO_TYPE[distro]
    except KeyError:
        raise UnsupportedDistroError(f"no package manager for {distro}") from None


def new_manager(pkg_type: PackageType, **kwargs):
    """Return the adapter for pkg_type; Debian requires superuser privileges."""
    if pkg_type is PackageType.DEB:
        must_be_superuser()
    return BACKENDS[pkg_type](**kwargs)


def detect_manager(path=OS_RELEASE, **kwargs):
    return new_manager(package_type_for(detect_distro(path)), **kwargs)
