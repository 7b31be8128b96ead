"""Toy inventory commands and interactive form."""

from __future__ import annotations

import logging
from typing import Any

import click
from prompt_toolkit import PromptSession
from rich.console import Console

from toydesk.cli.rendering import render_store_result, render_toy_table
from toydesk.core.config import get_settings
from toydesk.core.logging import setup_logging
from toydesk.inventory import StoreUnavailableError, ToyManager, ToyRecord, create_store
from toydesk.inventory.factory import BACKENDS

logger = logging.getLogger(__name__)

console = Console()


def _open_manager(backend: str | None) -> ToyManager:
    """Open the configured store. Failing to open it aborts the command."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.app_log_path)
    try:
        store = create_store(settings, backend)
    except StoreUnavailableError as e:
        logger.critical("Toy store unavailable: %s", e)
        click.echo(f"Error: toy store unavailable: {e}", err=True)
        raise SystemExit(1)
    return ToyManager(store)


@click.group()
@click.option(
    "--backend",
    type=click.Choice(BACKENDS, case_sensitive=False),
    default=None,
    help="Persistence backend (defaults to TOYDESK_TOY_BACKEND).",
)
@click.pass_context
def toys(ctx: click.Context, backend: str | None) -> None:
    """Manage the toy inventory."""
    # The store is opened by each subcommand so --help never touches disk
    ctx.obj = backend


@toys.command("list")
@click.pass_obj
def list_toys(backend: str | None) -> None:
    """List all toys."""
    manager = _open_manager(backend)
    console.print(render_toy_table(manager.toys))


@toys.command()
@click.argument("name")
@click.argument("amount", type=click.IntRange(min=0))
@click.pass_obj
def add(backend: str | None, name: str, amount: int) -> None:
    """Add a new toy."""
    record = _open_manager(backend).create_toy(name, amount)
    console.print(f"Added [bold]{record.name}[/bold] ({record.amount})")


@toys.command()
@click.argument("name")
@click.argument("amount", type=click.IntRange(min=0))
@click.pass_obj
def update(backend: str | None, name: str, amount: int) -> None:
    """Set the amount of the first toy named NAME."""
    result = _open_manager(backend).update_quantity(name, amount)
    console.print(render_store_result(result, f"Update {name}"))


@toys.command()
@click.argument("category")
@click.pass_obj
def category(backend: str | None, category: str) -> None:
    """Apply CATEGORY to every toy."""
    result = _open_manager(backend).add_category(category)
    console.print(render_store_result(result, f"Category {category}"))


@toys.command()
@click.pass_obj
def shell(backend: str | None) -> None:
    """Interactive toy manager."""
    ToyForm(_open_manager(backend)).run()


class ToyForm:
    """Terminal form with the add, category and list sections."""

    ACTIONS = ("add", "update", "category", "list", "quit")

    def __init__(
        self,
        manager: ToyManager,
        out: Console | None = None,
        session: Any = None,
    ) -> None:
        self._manager = manager
        self._console = out or console
        self._session: PromptSession = session or PromptSession()

    def _on_change(self, toys: list[ToyRecord]) -> None:
        self._console.print(render_toy_table(toys))

    def _ask(self, label: str) -> str:
        """Return the entered text verbatim."""
        return self._session.prompt(f"{label}: ")

    def _ask_amount(self) -> int | None:
        """Read a non-negative whole number; anything else is ignored."""
        raw = self._ask("Amount")
        try:
            value = int(raw)
        except ValueError:
            self._console.print("[yellow]Amount must be a whole number[/yellow]")
            return None
        if value < 0:
            self._console.print("[yellow]Amount must not be negative[/yellow]")
            return None
        return value

    def _add(self) -> None:
        name = self._ask("Name")
        amount = self._ask_amount()
        if amount is not None:
            self._manager.create_toy(name, amount)

    def _update(self) -> None:
        name = self._ask("Name")
        amount = self._ask_amount()
        if amount is None:
            return
        result = self._manager.update_quantity(name, amount)
        self._console.print(render_store_result(result, f"Update {name}"))

    def _category(self) -> None:
        result = self._manager.add_category(self._ask("Category"))
        self._console.print(render_store_result(result, "Apply category"))

    def run(self) -> None:
        self._console.print("[bold blue]Santa's Toy Manager[/bold blue]")
        self._console.print(render_toy_table(self._manager.toys))
        self._manager.subscribe(self._on_change)
        handlers = {
            "add": self._add,
            "update": self._update,
            "category": self._category,
            "list": lambda: self._on_change(self._manager.toys),
        }
        try:
            while True:
                try:
                    action = self._ask(f"Action [{'/'.join(self.ACTIONS)}]").strip().lower()
                except (EOFError, KeyboardInterrupt):
                    break
                if not action:
                    continue
                if action in ("quit", "q", "exit"):
                    break
                handler = handlers.get(action)
                if handler is None:
                    self._console.print(f"[red]Unknown action: {action}[/red]")
                    continue
                try:
                    handler()
                except (EOFError, KeyboardInterrupt):
                    self._console.print()
        finally:
            self._manager.unsubscribe(self._on_change)
