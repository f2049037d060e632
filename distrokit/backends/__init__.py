from .base    import Manager, PackageType
from .deb     import DebManager
from .rpm     import RpmManager
from .pacman  import PacmanManager

__all__ = [
    "Manager",
    "PackageType",
    "DebManager",
    "RpmManager",
    "PacmanManager",
]
