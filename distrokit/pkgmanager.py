# distrokit/pkgmanager.py

from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt

from distrokit.backends.deb import DebManager
from distrokit.backends.registry import detect_manager, package_type_for
from distrokit.user import add_group_from_cmd
from distrokit.utils.errors import KeyNotFoundError, UnsupportedDistroError, handle_errors
from distrokit.utils.osdetect import (
    OS_RELEASE,
    Distribution,
    detect_distro,
    detect_distro_version,
    get_os,
)

console = Console()


def _confirm(title: str, names, assume_yes: bool, style: str) -> bool:
    console.print(Panel.fit(
        "\n".join(f"[bold]Package[/bold]: {n}" for n in names),
        title=f"[{style}]{title}[/{style}]",
        border_style=style
    ))
    if assume_yes:
        return True
    return Prompt.ask("Proceed?", choices=["y", "n"], default="n") == "y"


def _done(msg: str):
    console.print(Panel.fit(f"[bold green]✔️ {msg}[/bold green]", border_style="green"))


def _deb_manager(os_release) -> DebManager:
    manager = detect_manager(os_release)
    if not isinstance(manager, DebManager):
        raise UnsupportedDistroError(
            f"keys and repositories are only handled on Debian-based systems, "
            f"not {manager.package_type}"
        )
    manager.pre_usage()
    return manager


@handle_errors
def show_distro(os_release=OS_RELEASE):
    distro = detect_distro(os_release)
    lines = [
        f"[bold]System[/bold]: {get_os()}",
        f"[bold]Distribution[/bold]: {distro}",
    ]
    if distro is not Distribution.UNKNOWN:
        try:
            version = detect_distro_version(os_release)
        except KeyNotFoundError:
            version = "-"
        lines.append(f"[bold]Version[/bold]: {version}")
        try:
            lines.append(f"[bold]Package type[/bold]: {package_type_for(distro)}")
        except UnsupportedDistroError:
            lines.append("[bold]Package type[/bold]: -")
    console.print(Panel.fit("\n".join(lines), title="[cyan]Distribution[/cyan]", border_style="cyan"))


@handle_errors
def show_version(os_release=OS_RELEASE):
    console.print(detect_distro_version(os_release))


@handle_errors
def install(names, os_release=OS_RELEASE, assume_yes=False):
    if not names:
        raise ValueError("install requires a package name")
    manager = detect_manager(os_release)
    if not _confirm("Ready to Install", names, assume_yes, "cyan"):
        return console.print("[yellow]Cancelled[/yellow]")

    console.print(f"[cyan]Installing {' '.join(names)}...[/cyan]")
    manager.install(*names)
    _done(f"Installed {' '.join(names)}")


@handle_errors
def remove(names, os_release=OS_RELEASE, assume_yes=False, purge=False):
    if not names:
        raise ValueError("remove requires a package name")
    manager = detect_manager(os_release)
    title = "Confirm Purge" if purge else "Confirm Removal"
    if not _confirm(title, names, assume_yes, "magenta"):
        return console.print("[yellow]Aborted[/yellow]")

    verb = "Purg" if purge else "Remov"
    console.print(f"[magenta]{verb}ing {' '.join(names)}...[/magenta]")
    if purge:
        manager.purge(*names)
    else:
        manager.remove(*names)
    _done(f"{verb}ed {' '.join(names)}")


@handle_errors
def update_index(os_release=OS_RELEASE):
    console.print("[yellow]🔄 Updating package index[/yellow]")
    detect_manager(os_release).update_index()
    _done("Package index updated")


@handle_errors
def update(os_release=OS_RELEASE):
    console.print("[yellow]🔄 Updating packages[/yellow]")
    detect_manager(os_release).update()
    _done("Packages updated")


@handle_errors
def upgrade(os_release=OS_RELEASE):
    console.print("[yellow]⬆️ Upgrading packages[/yellow]")
    detect_manager(os_release).upgrade()
    _done("Packages upgraded")


@handle_errors
def clean(os_release=OS_RELEASE):
    detect_manager(os_release).clean()
    _done("Package cache cleaned")


@handle_errors
def import_key(alias: str, url: str, os_release=OS_RELEASE):
    _deb_manager(os_release).import_key(alias, url)
    _done(f"Key {alias} imported")


@handle_errors
def import_key_from_server(alias: str, key: str, keyserver: str = "", os_release=OS_RELEASE):
    _deb_manager(os_release).import_key_from_server(alias, key, keyserver)
    _done(f"Key {alias} imported")


@handle_errors
def remove_key(alias: str, os_release=OS_RELEASE):
    _deb_manager(os_release).remove_key(alias)
    _done(f"Key {alias} removed")


@handle_errors
def add_repo(alias: str, url: str, os_release=OS_RELEASE):
    _deb_manager(os_release).add_repo(alias, url)
    _done(f"Repository {alias} added")


@handle_errors
def remove_repo(alias: str, os_release=OS_RELEASE):
    _deb_manager(os_release).remove_repo(alias)
    _done(f"Repository {alias} removed")


@handle_errors
def add_group(group: str):
    msg = add_group_from_cmd(group)
    if msg:
        console.print(Panel.fit(f"[bold yellow]{msg.strip()}[/bold yellow]", border_style="yellow"))
    else:
        console.print(f"[green]Already a member of {group}[/green]")
