import logging
import os
import subprocess
from dataclasses import dataclass

from distrokit.utils.errors import CommandError, StderrError

logger = logging.getLogger(__name__)


@dataclass
class Result:
    argv: list
    returncode: int
    stdout: bytes = b""
    stderr: bytes = b""


class Command:
    """
    Reusable configuration to run external commands.

    env holds "NAME=value" entries layered over the current environment.
    When bad_exit_codes is given, only those codes are failures; otherwise
    any non-zero status outside ok_exit_codes is.
    """

    def __init__(self, env=(), ok_exit_codes=(), bad_exit_codes=(), stdout=None):
        self.env = list(env)
        self.ok_exit_codes = frozenset(ok_exit_codes)
        self.bad_exit_codes = frozenset(bad_exit_codes)
        self.stdout = stdout

    def __repr__(self):
        return (
            f"Command(env={self.env!r}, ok_exit_codes={sorted(self.ok_exit_codes)!r}, "
            f"bad_exit_codes={sorted(self.bad_exit_codes)!r})"
        )

    def set_stdout(self, out):
        self.stdout = out

    def environ(self) -> dict | None:
        if not self.env:
            return None
        environ = dict(os.environ)
        for entry in self.env:
            name, _, value = entry.partition("=")
            environ[name] = value
        return environ

    def failed(self, returncode: int) -> bool:
        if self.bad_exit_codes:
            return returncode in self.bad_exit_codes
        return returncode != 0 and returncode not in self.ok_exit_codes

    def check(self, result: Result) -> Result:
        if self.failed(result.returncode):
            raise CommandError(result.argv, result.returncode, result.stderr)
        return result

    def _exec(self, argv, stdout, stderr, input=None) -> Result:
        argv = [str(a) for a in argv]
        logger.debug("exec: %s", " ".join(argv))
        proc = subprocess.run(
            argv,
            input=input,
            stdout=stdout,
            stderr=stderr,
            env=self.environ(),
        )
        return Result(argv, proc.returncode, proc.stdout or b"", proc.stderr or b"")

    def run(self, *argv) -> Result:
        """Run argv with output going to the configured streams."""
        return self.check(self._exec(argv, self.stdout, None))

    def output_stderr(self, *argv) -> Result:
        """Run argv capturing stderr. The exit status is not checked."""
        return self._exec(argv, self.stdout, subprocess.PIPE)

    def output_combined(self, *argv, input=None) -> Result:
        """Run argv capturing stdout and stderr. The exit status is not checked."""
        return self._exec(argv, subprocess.PIPE, subprocess.PIPE, input=input)

    def check_stderr(self, result: Result) -> Result:
        if result.stderr.strip():
            raise StderrError(result.stderr)
        return self.check(result)
