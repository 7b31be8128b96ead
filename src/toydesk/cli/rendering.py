"""Rendering helpers using Rich."""

from __future__ import annotations

from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from toydesk.inventory.models import StoreResult, ToyRecord

NO_RESPONSE = "[No response]"


def format_exchange(prompt: str, reply: str | None) -> str:
    """Format one prompt/reply pair for the chat transcript."""
    return f"\n\n👤: {prompt}\n🤖: {reply if reply is not None else NO_RESPONSE}"


def render_reply(reply: str | None) -> Markdown | Text:
    """Render an assistant reply, or the placeholder when there is none."""
    if reply is None:
        return Text(NO_RESPONSE, style="dim red")
    return Markdown(reply)


def render_toy_table(toys: list[ToyRecord], title: str = "Toys List") -> Table:
    """Render the toy collection as a table."""
    table = Table(title=title, title_style="bold", expand=False)
    table.add_column("Name", style="bold")
    table.add_column("Amount", justify="right")
    table.add_column("Category", style="dim")
    for toy in toys:
        table.add_row(toy.name, str(toy.amount), toy.display_category)
    return table


def render_store_result(result: StoreResult, action: str) -> Panel | Text:
    """Render the outcome of a store mutation."""
    if result is StoreResult.OK:
        return Text(f"{action}: done", style="green")
    if result is StoreResult.NOT_FOUND:
        return Text(f"{action}: no matching toy", style="yellow")
    return Panel(
        Text(f"{action} was applied in memory but could not be saved."),
        title="[red]Write Failed[/red]",
        border_style="red",
        expand=False,
    )
