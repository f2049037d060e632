import functools
import logging
import sys

logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


class DistroKitError(Exception):
    """Base class for every error raised by distrokit."""


class OsReleaseError(DistroKitError):
    """The os-release file is missing or cannot be parsed."""


class KeyNotFoundError(DistroKitError, KeyError):
    def __init__(self, key, path):
        super().__init__(key)
        self.key = key
        self.path = path

    def __str__(self):
        return f"key not found: {self.key} in {self.path}"


class UnsupportedDistroError(DistroKitError):
    pass


class CommandError(DistroKitError):
    """An external command exited with a failing status."""

    def __init__(self, argv, returncode, stderr=b""):
        self.argv = list(argv)
        self.returncode = returncode
        self.stderr = stderr or b""
        super().__init__(str(self))

    def __str__(self):
        msg = f"command {' '.join(self.argv)!r} exited with status {self.returncode}"
        detail = self.stderr.decode(errors="replace").strip()
        if detail:
            msg += f": {detail}"
        return msg


class StderrError(DistroKitError):
    """An external command wrote to stderr where no output was expected."""

    def __init__(self, stderr):
        if isinstance(stderr, bytes):
            stderr = stderr.decode(errors="replace")
        self.stderr = stderr
        super().__init__(stderr.strip())


class KeyUrlError(DistroKitError, ValueError):
    def __init__(self, url):
        self.url = url
        super().__init__(f"the URL must point to a key file: {url}")


class SuperUserError(DistroKitError, PermissionError):
    def __init__(self):
        super().__init__("you MUST have superuser privileges")


class UnknownGroupError(DistroKitError, KeyError):
    def __init__(self, group):
        super().__init__(group)
        self.group = group

    def __str__(self):
        return f"group: unknown group {self.group}"


class UnknownUserError(DistroKitError, KeyError):
    def __init__(self, user):
        super().__init__(user)
        self.user = user

    def __str__(self):
        return f"user: unknown user {self.user}"


def handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except SystemExit:
            raise
        except Exception as e:
            logging.error(f"{func.__name__} ▶ {e}")
            print(f"[!] {func.__name__} failed: {e}")
            sys.exit(1)

    return wrapper
