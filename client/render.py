# client/render.py
from datetime import datetime
from typing import Iterable
from rich import box
from rich.align import Align
from rich.console import Console, Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from model.api import EvaluationResponse
from model.chat import (
    ChatMessage,
    ErrorContent,
    QuestionContent,
    ResponseContent,
    VerificationContent,
)

EMPTY_HINT = 'Try: "Is Berlin the capital of Germany?"'
LOADING_TEXT = "Evaluating question..."


def format_timestamp(ts: datetime) -> str:
    return ts.strftime("%H:%M")


def _link(label: str, url: str, style: str = "") -> Text:
    return Text(label, style=f"{style} link {url}".strip())


def render_sources(result: EvaluationResponse) -> RenderableType | None:
    if not result.sources:
        return None
    count = len(result.sources)
    table = Table(
        title=f"Sources ({count} source{'s' if count > 1 else ''})",
        box=box.ROUNDED,
        show_header=False,
        expand=True,
    )
    table.add_column("title", style="bold blue")
    table.add_column("url", overflow="fold")
    for source in result.sources:
        table.add_row(source.title, _link(source.url, source.url, "blue"))
    return table


def render_result(result: EvaluationResponse) -> RenderableType:
    verdict = "True" if result.answer else "False"
    badges = Text.assemble(
        (f" Answer: {verdict} ", "bold white on green" if result.answer else "bold white on red"),
        " ",
        (f" {result.status.value} ", "reverse"),
    )

    details = Table.grid(padding=(0, 1))
    details.add_column(style="bold")
    details.add_column(overflow="fold")
    details.add_row("Question:", result.question)
    details.add_row("Hash:", Text(result.hash, style="dim"))
    details.add_row("Transaction:", Text(result.tx_hash, style="dim"))
    details.add_row("", _link("Verify on Etherscan", result.explorer_url, "underline"))

    parts: list[RenderableType] = [badges]
    sources = render_sources(result)
    if sources is not None:
        parts.append(sources)
    parts.append(details)
    return Group(*parts)


def render_message(message: ChatMessage) -> RenderableType:
    content = message.content
    stamp = format_timestamp(message.timestamp)

    if isinstance(content, VerificationContent):
        banner = Text.assemble(
            (" Verified on Blockchain ", "bold green reverse"),
            "  ",
            _link("View Transaction", content.explorer_url, "green underline"),
        )
        return Align.center(banner)

    if isinstance(content, QuestionContent):
        bubble = Panel(
            content.text,
            subtitle=stamp,
            subtitle_align="right",
            border_style="blue",
            expand=False,
        )
        return Align.right(bubble)

    if isinstance(content, ErrorContent):
        body: RenderableType = Text(content.message, style="red")
    elif isinstance(content, ResponseContent):
        body = render_result(content.result)
    else:
        raise TypeError(f"Unsupported message content: {type(content).__name__}")

    return Align.left(
        Panel(body, subtitle=stamp, subtitle_align="left", expand=False)
    )


def render_log(
    messages: Iterable[ChatMessage], console: Console, loading: bool = False
) -> None:
    messages = list(messages)
    if not messages and not loading:
        console.print(Align.center(Text("Ask a question to get started!", style="dim")))
        console.print(Align.center(Text(EMPTY_HINT, style="dim")))
        return
    for message in messages:
        console.print(render_message(message))
    if loading:
        console.print(Text(LOADING_TEXT, style="italic"))
