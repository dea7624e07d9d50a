"""Pretty-print support for toolrelay output objects.

Uses rich library for formatted terminal output.
All functions accept their target object and print to a rich Console.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.console import Console, Group
from rich.markdown import Markdown
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from toolrelay.models import TextBlock, ToolResultBlock, ToolUseBlock

if TYPE_CHECKING:
    from toolrelay.models import ModelResponse
    from toolrelay.tools.models import ToolDescriptor


def _make_console(file: Any = None) -> Console:
    """Create a Console, optionally writing to a file-like object."""
    if file is not None:
        return Console(file=file, force_terminal=False, width=100)
    return Console()


def _format_call(block: ToolUseBlock) -> Text:
    call_text = Text()
    call_text.append(block.name, style="bold cyan")
    call_text.append("(", style="dim")
    arg_parts = [f"{k}={v!r}" for k, v in block.input.items()]
    call_text.append(", ".join(arg_parts), style="white")
    call_text.append(")", style="dim")
    call_text.append(f"  [{block.id}]", style="dim")
    return call_text


def pprint_response(
    response: ModelResponse,
    *,
    prompt: str | None = None,
    abbreviate: bool = False,
    file: Any = None,
) -> None:
    """Pretty-print a ModelResponse.

    Args:
        response: The response to render.
        prompt: Optional user query shown above the response.
        abbreviate: If True, truncate long text. Default False (show full).
        file: Optional file-like object for output (used in tests).
    """
    console = _make_console(file)

    if prompt:
        console.print(Panel(prompt, title="[bold]User[/bold]", border_style="blue"))

    body_parts: list[Any] = []
    for block in response.content:
        if isinstance(block, TextBlock):
            text = block.text
            if abbreviate and len(text) > 200:
                text = text[:197] + "..."
            body_parts.append(Markdown(text))
        elif isinstance(block, ToolUseBlock):
            body_parts.append(_format_call(block))
        elif isinstance(block, ToolResultBlock):
            style = "red" if block.is_error else "white"
            body_parts.append(Text(block.content, style=style))

    if not body_parts:
        body_parts.append(Text("(empty response)"))

    has_tool_calls = bool(response.tool_uses)
    u = response.usage
    footer = Text.from_markup(
        f"[dim]{response.model} | stop_reason={response.stop_reason} | "
        f"{u.input_tokens} input + {u.output_tokens} output"
        f" = {u.total_tokens} tokens[/dim]"
    )

    console.print(Panel(
        Group(*body_parts, Text(""), footer),
        title="[bold]Tool Call[/bold]" if has_tool_calls else "[bold]Assistant[/bold]",
        border_style="magenta" if has_tool_calls else "green",
    ))


def pprint_tools(tools: list[ToolDescriptor], *, file: Any = None) -> None:
    """Display a tool catalog as a table."""
    console = _make_console(file)
    if not tools:
        console.print("[dim]No tools.[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Name", style="cyan")
    table.add_column("Required", style="yellow")
    table.add_column("Description")

    for tool in tools:
        required = tool.input_schema.get("required", [])
        table.add_row(tool.name, ", ".join(required), tool.description)

    console.print(table)
