"""Click CLI group with chat, ask, and toys commands."""

from __future__ import annotations

import asyncio

import click

from toydesk.cli.rendering import NO_RESPONSE
from toydesk.cli.toys import toys
from toydesk.core.config import Settings, get_settings
from toydesk.core.logging import setup_logging


def _require_api_key(settings: Settings) -> None:
    if not settings.openai_api_key:
        click.echo("Error: OPENAI_API_KEY not set. Add it to .env or the environment.")
        raise SystemExit(1)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """AI chat client and toy inventory manager."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(chat)


@cli.command()
def chat() -> None:
    """Start an interactive chat session."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.app_log_path)
    _require_api_key(settings)

    from toydesk.cli.chat import run_chat

    run_chat(settings)


@cli.command()
@click.argument("question", nargs=-1, required=True)
def ask(question: tuple[str, ...]) -> None:
    """Ask a single question and print the reply."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.app_log_path)
    _require_api_key(settings)

    text = " ".join(question)
    if not text:
        raise click.UsageError("QUESTION must not be empty")

    from toydesk.cli.chat import ask_once

    reply = asyncio.run(ask_once(settings, text))
    click.echo(reply if reply is not None else NO_RESPONSE)


cli.add_command(toys)
