# client/cli.py
"""
Terminal chat for the evaluation service.

Run: python -m client.cli [--url http://127.0.0.1:8000]
"""
import argparse
import asyncio
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from client.api_client import EvaluationClient
from client.render import LOADING_TEXT, render_log, render_message
from client.state import ChatSession
from config.settings import settings
from util.constants import InternalURIs
from util.logger import setup_logging

EXIT_WORDS = {"exit", "quit", ":q"}

console = Console()


async def run_chat(session: ChatSession, console: Console = console) -> None:
    render_log(session.state.messages, console)
    while True:
        try:
            text = await asyncio.to_thread(Prompt.ask, "[bold]Ask a question...[/bold]")
        except (EOFError, KeyboardInterrupt):
            console.print()
            return
        if text.strip().lower() in EXIT_WORDS:
            return

        before = len(session.state)
        with console.status(LOADING_TEXT):
            submitted = await session.submit(text)
        if not submitted:
            continue
        for message in session.state.messages[before:]:
            console.print(render_message(message))


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="evaluation-chat", description="Evaluation Chat")
    parser.add_argument("--url", default=settings.EVALUATION_API_URL, help="Service base URL")
    parser.add_argument("--timeout", type=float, default=None, help="Request timeout in seconds")
    args = parser.parse_args(argv)

    # Keep log lines out of the chat transcript unless something goes wrong.
    setup_logging("ERROR")

    client = EvaluationClient(args.url, timeout=args.timeout)
    console.print(
        Panel.fit(
            f"[bold]Evaluation Chat[/bold]\nAPI Endpoint: {client.base_url}{InternalURIs.EVALUATE}",
            border_style="cyan",
        )
    )
    asyncio.run(run_chat(ChatSession(client)))


if __name__ == "__main__":
    main()
