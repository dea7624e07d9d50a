"""toolrelay ask -- run a single query through the tool-use exchange."""

from __future__ import annotations

import asyncio

import click

from toolrelay.cli.formatting import format_error, get_console
from toolrelay.exceptions import ToolRelayError
from toolrelay.formatting import pprint_response


@click.command()
@click.argument("query")
@click.option(
    "--tool-errors",
    type=click.Choice(["raise", "report"]),
    default="raise",
    show_default=True,
    help="Abort on a failed tool call, or report it to the model.",
)
@click.pass_context
def ask(ctx: click.Context, query: str, tool_errors: str) -> None:
    """Send QUERY with the mock tool catalog and print the final answer."""
    from toolrelay.cli import _make_gateway
    from toolrelay.orchestrator import Orchestrator
    from toolrelay.tools.mock import MockToolProvider

    console = get_console()
    gateway = _make_gateway(ctx)

    async def _run():
        try:
            orchestrator = Orchestrator(
                MockToolProvider(), gateway, tool_errors=tool_errors
            )
            return await orchestrator.run(query)
        finally:
            await gateway.aclose()

    try:
        response = asyncio.run(_run())
    except ToolRelayError as e:
        format_error(str(e), console)
        raise SystemExit(1) from None
    pprint_response(response, prompt=query)
