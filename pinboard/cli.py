"""Pinboard CLI — pin asset files for quick access."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from pinboard import __version__
from pinboard.assets.resolver import AssetResolver
from pinboard.config import PinboardConfig, load_config
from pinboard.errors import (
    AssetNotFoundError,
    AssetResolutionError,
    ConfigError,
    PersistenceUnavailableError,
)
from pinboard.logging_setup import configure_logging
from pinboard.naming import display_name
from pinboard.registry.models import PinList
from pinboard.registry.pin_registry import PinRegistry
from pinboard.store.json_store import JsonPinStore

console = Console()


class Session:
    """Objects shared by every command of one invocation."""

    def __init__(self, config: PinboardConfig):
        self.config = config
        self.resolver = AssetResolver(config.assets_root, config.extensions)
        self.registry = PinRegistry(JsonPinStore(config.data_path)).load()


pass_session = click.make_pass_decorator(Session)


@click.group()
@click.version_option(version=__version__)
@click.option("--config", "config_path", default=None, help="Path to a .pinboard.yaml file")
@click.option("--data", "data_path", default=None, help="JSON file the pins are stored in")
@click.option("--root", "assets_root", default=None, help="Project directory assets live under")
@click.option("--verbose", "-v", is_flag=True, help="Log debug output")
@click.pass_context
def main(ctx, config_path: str | None, data_path: str | None, assets_root: str | None, verbose: bool):
    """Pinboard — keep a short list of the assets you are working on.

    Pinned assets stay at hand; unpinning moves them to a history list they
    can be restored from.
    """
    try:
        config = load_config(config_path)
        if data_path:
            config.data_path = Path(data_path).expanduser()
        if assets_root:
            config.assets_root = Path(assets_root).expanduser()
    except ConfigError as e:
        console.print(f"[red]Configuration error:[/] {escape(str(e))}")
        ctx.exit(1)

    configure_logging("DEBUG" if verbose else config.log_level)
    ctx.obj = Session(config)


def _persisting(action, argument):
    """Run a registry mutation, reporting an unavailable store."""
    try:
        return action(argument)
    except PersistenceUnavailableError as e:
        console.print(f"[red]Could not save pins:[/] {escape(str(e))}")
        raise click.exceptions.Exit(1)


def _identifier_from_argument(resolver: AssetResolver, argument: str) -> str:
    """Accept either an identifier or a filesystem path to an asset.

    Returns the root-relative form, so every spelling of one file pins the
    same identifier.
    """
    if not Path(argument).expanduser().is_absolute():
        try:
            return resolver.identifier_for(resolver.resolve(argument))
        except AssetNotFoundError:
            if not Path(argument).exists():
                raise
    path = resolver.resolve(resolver.identifier_for(argument))
    return resolver.identifier_for(path)


# ── Pinned list ──────────────────────────────────────────────────────


@main.command()
@click.argument("paths", nargs=-1, required=True)
@pass_session
def pin(session: Session, paths: tuple):
    """Pin one or more assets.

    PATHS can be identifiers relative to the project root
    (Assets/Prefabs/Door.prefab) or paths to the files themselves.
    """
    for argument in paths:
        try:
            identifier = _identifier_from_argument(session.resolver, argument)
        except AssetResolutionError as e:
            console.print(f"  [yellow]![/] Cannot pin {escape(argument)}: {escape(e.reason)}")
            continue

        if _persisting(session.registry.pin, identifier):
            console.print(f"  [green]+[/] Pinned {escape(display_name(identifier))}")
        else:
            console.print(f"  [dim]=[/] Already pinned: {escape(display_name(identifier))}")


@main.command()
@click.argument("identifier")
@pass_session
def unpin(session: Session, identifier: str):
    """Unpin an asset and move it to the history list."""
    if _persisting(session.registry.unpin, identifier):
        console.print(f"  [green]-[/] Unpinned {escape(display_name(identifier))}")
    else:
        console.print(f"  [dim]=[/] Not pinned: {escape(identifier)}")


# ── History ──────────────────────────────────────────────────────────


@main.command()
@click.argument("identifier")
@pass_session
def restore(session: Session, identifier: str):
    """Pin an asset from the history list again."""
    if _persisting(session.registry.restore, identifier):
        console.print(f"  [green]+[/] Restored {escape(display_name(identifier))}")
    else:
        console.print(f"  [dim]=[/] Not in history: {escape(identifier)}")


@main.command()
@click.argument("identifier")
@pass_session
def forget(session: Session, identifier: str):
    """Remove an asset from the history list."""
    if _persisting(session.registry.remove_from_history, identifier):
        console.print(f"  [green]-[/] Forgot {escape(display_name(identifier))}")
    else:
        console.print(f"  [dim]=[/] Not in history: {escape(identifier)}")


# ── Both lists ───────────────────────────────────────────────────────


@main.command()
@click.option("--history", "use_history", is_flag=True, help="Clear the history list instead")
@pass_session
def clear(session: Session, use_history: bool):
    """Clear the pinned list (its items move to history) or the history list."""
    which = PinList.HISTORY if use_history else PinList.PINNED
    count = _persisting(session.registry.clear, which)

    if which == PinList.HISTORY:
        console.print(f"  Cleared {count} history item(s).")
    else:
        console.print(f"  Moved {count} pinned item(s) to history.")


@main.command(name="list")
@click.option("--history", "use_history", is_flag=True, help="Show the history list")
@pass_session
def list_items(session: Session, use_history: bool):
    """List pinned assets (or the history list)."""
    items = session.registry.history if use_history else session.registry.pinned
    title = "History" if use_history else "Pinned"

    if not items:
        console.print(f"[yellow]{title} list is empty.[/]")
        return

    table = Table(title=f"{title} ({len(items)})")
    table.add_column("#", style="dim", width=3)
    table.add_column("Name", style="cyan")
    table.add_column("Identifier")
    table.add_column("On disk", justify="center")

    for i, identifier in enumerate(items):
        exists = (session.resolver.root / identifier).is_file()
        table.add_row(
            str(i + 1),
            escape(display_name(identifier)),
            escape(identifier),
            "[green]Y[/]" if exists else "[red]N[/]",
        )

    console.print(table)


@main.command()
@click.argument("identifier")
@pass_session
def show(session: Session, identifier: str):
    """Print the file path of a pinned or history asset."""
    if identifier not in session.registry:
        console.print(f"[yellow]Not pinned or in history:[/] {escape(identifier)}")
        return

    path = session.resolver.root / identifier
    if not path.is_file():
        console.print(f"[yellow]Asset is missing on disk:[/] {escape(str(path))}")
        return
    click.echo(str(path))


@main.command()
@pass_session
def discover(session: Session):
    """List pinnable assets under the project root."""
    identifiers = session.resolver.discover()
    if not identifiers:
        console.print(f"[yellow]No pinnable assets under {escape(str(session.resolver.root))}.[/]")
        return

    for identifier in identifiers:
        marker = "[green]*[/]" if session.registry.is_pinned(identifier) else " "
        console.print(f"  {marker} {escape(identifier)}", soft_wrap=True)


if __name__ == "__main__":
    main()
