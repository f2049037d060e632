# distrokit/user.py

import grp
import logging
import os
import pwd

import psutil

from distrokit.utils.errors import SuperUserError, UnknownGroupError, UnknownUserError
from distrokit.utils.executil import Command
from distrokit.utils.osdetect import System, detect_system

logger = logging.getLogger(__name__)

SUPPORTED = (System.LINUX,)


def _must_be_supported(system: System):
    # abort, not an error
    if system not in SUPPORTED:
        raise SystemExit(f"unimplemented: {system}")


def real_user() -> str:
    """
    Return the name of the user that started the program.

    Under sudo that is SUDO_USER, otherwise the owner of the real uid.
    """
    name = os.environ.get("SUDO_USER")
    if name:
        return name
    return psutil.Process().username()


def is_superuser() -> bool:
    return psutil.Process().uids().effective == 0


def must_be_superuser(system: System | None = None):
    _must_be_supported(system or detect_system())
    if not is_superuser():
        raise SuperUserError()


def add_group_from_cmd(group: str, system: System | None = None, cmd: Command | None = None) -> str:
    """
    Add the real user to group through usermod.

    Returns an information message when the command is run, and an
    empty string when the user already belongs to the group.
    """
    _must_be_supported(system or detect_system())
    cmd = cmd if cmd is not None else Command()

    username = real_user()

    try:
        gid = grp.getgrnam(group).gr_gid
    except KeyError:
        raise UnknownGroupError(group) from None

    try:
        usr = pwd.getpwnam(username)
    except KeyError:
        raise UnknownUserError(username) from None
    groups = os.getgrouplist(usr.pw_name, usr.pw_gid)

    if gid in groups:
        logger.debug("user %s already in group %s", username, group)
        return ""

    logger.info("Adding user %s to group %s", username, group)
    cmd.check_stderr(cmd.output_stderr("usermod", "-aG", group, usr.pw_name))

    return (
        f'the user "{username}" has been added to the group "{group}".\n'
        "You MUST reboot the system.\n"
    )
