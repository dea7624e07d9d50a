"""toolrelay demo -- run the sample queries back to back."""

from __future__ import annotations

import asyncio

import click

from toolrelay.cli.formatting import format_error, format_query_header, get_console
from toolrelay.exceptions import ToolRelayError
from toolrelay.formatting import pprint_response

SAMPLE_QUERIES = (
    "What's the weather in Tokyo?",
    'Search the customers database for "Tanaka".',
)


@click.command()
@click.option(
    "--delay",
    type=float,
    default=1.0,
    show_default=True,
    help="Seconds to wait between queries.",
)
@click.pass_context
def demo(ctx: click.Context, delay: float) -> None:
    """Run the sample weather and database queries in sequence.

    A failing query is reported and the next one still runs.
    """
    from toolrelay.cli import _make_gateway
    from toolrelay.orchestrator import Orchestrator
    from toolrelay.tools.mock import MockToolProvider

    console = get_console()
    gateway = _make_gateway(ctx)

    async def _run() -> int:
        failures = 0
        orchestrator = Orchestrator(MockToolProvider(), gateway)
        try:
            for i, query in enumerate(SAMPLE_QUERIES):
                if i:
                    await asyncio.sleep(delay)
                format_query_header(query, console)
                try:
                    response = await orchestrator.run(query)
                except ToolRelayError as e:
                    failures += 1
                    format_error(f"Query {query!r} failed: {e}", console)
                    continue
                pprint_response(response, prompt=query)
        finally:
            await gateway.aclose()
        return failures

    failures = asyncio.run(_run())
    if failures == len(SAMPLE_QUERIES):
        raise SystemExit(1)
