#!/usr/bin/env python3
import argparse
import logging
import sys

from rich.console import Console

from distrokit import pkgmanager
from distrokit.utils.osdetect import OS_RELEASE

console = Console()

# action -> number of targets it takes (None: one or more)
ACTIONS = {
    "distro": 0,
    "version": 0,
    "install": None,
    "remove": None,
    "purge": None,
    "update-index": 0,
    "update": 0,
    "upgrade": 0,
    "clean": 0,
    "import-key": 2,
    "import-key-server": 2,
    "remove-key": 1,
    "add-repo": 2,
    "remove-repo": 1,
    "add-group": 1,
}


class RichParser(argparse.ArgumentParser):
    def error(self, message):
        console.print(f"[bold red]Error:[/] {message}\n")
        self.print_help()
        sys.exit(2)


def parse_args(argv=None):
    parser = RichParser(
        prog="distrokit",
        description="distrokit: one interface to the package managers of Linux distributions",
        allow_abbrev=False,
    )

    parser.add_argument("action", choices=list(ACTIONS), help="Action to perform")
    parser.add_argument(
        "target", nargs="*",
        help="Package names, key/repository alias and URL or key id, or group name",
    )

    parser.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation")
    parser.add_argument(
        "--keyserver", type=str, default="", help="Keyserver for import-key-server"
    )
    parser.add_argument(
        "--os-release", type=str, default=str(OS_RELEASE), help="os-release file to read"
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors")

    args = parser.parse_args(argv)

    want = ACTIONS[args.action]
    if want is None and not args.target:
        parser.error(f"{args.action} requires at least one package name")
    if want is not None and len(args.target) != want:
        parser.error(f"{args.action} takes {want} argument(s), got {len(args.target)}")
    return args


def main(argv=None):
    args = parse_args(argv)
    if args.quiet:
        logging.getLogger().setLevel(logging.WARNING)

    act = args.action
    tgt = args.target
    osr = args.os_release

    if act == "distro":
        pkgmanager.show_distro(osr)
    elif act == "version":
        pkgmanager.show_version(osr)
    elif act == "install":
        pkgmanager.install(tgt, osr, assume_yes=args.yes)
    elif act == "remove":
        pkgmanager.remove(tgt, osr, assume_yes=args.yes)
    elif act == "purge":
        pkgmanager.remove(tgt, osr, assume_yes=args.yes, purge=True)
    elif act == "update-index":
        pkgmanager.update_index(osr)
    elif act == "update":
        pkgmanager.update(osr)
    elif act == "upgrade":
        pkgmanager.upgrade(osr)
    elif act == "clean":
        pkgmanager.clean(osr)
    elif act == "import-key":
        pkgmanager.import_key(tgt[0], tgt[1], os_release=osr)
    elif act == "import-key-server":
        pkgmanager.import_key_from_server(tgt[0], tgt[1], args.keyserver, os_release=osr)
    elif act == "remove-key":
        pkgmanager.remove_key(tgt[0], os_release=osr)
    elif act == "add-repo":
        pkgmanager.add_repo(tgt[0], tgt[1], os_release=osr)
    elif act == "remove-repo":
        pkgmanager.remove_repo(tgt[0], os_release=osr)
    elif act == "add-group":
        pkgmanager.add_group(tgt[0])
    else:
        console.print(f"[bold red]Unknown action:[/] {act}")
        sys.exit(1)


if __name__ == "__main__":
    main()
