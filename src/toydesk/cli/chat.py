"""Interactive chat interface with Rich rendering and prompt_toolkit input."""

from __future__ import annotations

import asyncio
import logging

from prompt_toolkit import PromptSession
from prompt_toolkit.history import FileHistory
from rich.console import Console

from toydesk.cli.rendering import format_exchange, render_reply
from toydesk.core.config import Settings
from toydesk.llm.client import ChatCompletionClient

logger = logging.getLogger(__name__)

_QUIT_COMMANDS = ("/quit", "/exit")


class ChatInterface:
    """Single-screen chat: one prompt, one reply, appended to a transcript."""

    def __init__(
        self,
        settings: Settings,
        client: ChatCompletionClient | None = None,
        console: Console | None = None,
    ) -> None:
        self._settings = settings
        self._client = client or ChatCompletionClient.from_settings(settings)
        self._console = console or Console()
        self._transcript = ""
        self._busy = False

    @property
    def transcript(self) -> str:
        return self._transcript

    @property
    def busy(self) -> bool:
        return self._busy

    async def send_message(self, text: str) -> bool:
        """Send one prompt and append the exchange to the transcript.

        Returns False without sending when the text is empty or a request
        is already in flight.
        """
        if not text:
            return False
        if self._busy:
            logger.debug("Ignoring prompt while a request is in flight")
            return False

        self._busy = True
        try:
            with self._console.status("[dim]Waiting for reply...[/dim]"):
                reply = await self._client.complete(text)
            self._transcript += format_exchange(text, reply)
            self._console.print(render_reply(reply))
        finally:
            self._busy = False
        return True

    async def close(self) -> None:
        await self._client.close()

    async def run(self) -> None:
        """Main interactive chat loop."""
        self._console.print(
            f"[bold blue]AI Chat[/bold blue] ({self._client.model}) - "
            "Type /quit or press Ctrl+C to exit\n"
        )

        history_path = self._settings.prompt_history_path
        history_path.parent.mkdir(parents=True, exist_ok=True)
        prompt_session: PromptSession = PromptSession(
            history=FileHistory(str(history_path))
        )

        try:
            while True:
                try:
                    user_input = await prompt_session.prompt_async("You: ")
                except (EOFError, KeyboardInterrupt):
                    self._console.print("\n[dim]Goodbye![/dim]")
                    break

                if user_input.strip() in _QUIT_COMMANDS:
                    self._console.print("[dim]Goodbye![/dim]")
                    break

                await self.send_message(user_input)
        finally:
            await self.close()


async def ask_once(settings: Settings, question: str) -> str | None:
    """Send a single question and return the reply."""
    client = ChatCompletionClient.from_settings(settings)
    try:
        return await client.complete(question)
    finally:
        await client.close()


def run_chat(settings: Settings) -> None:
    interface = ChatInterface(settings)
    asyncio.run(interface.run())
