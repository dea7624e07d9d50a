"""toolrelay tools -- list the mock tool catalog."""

from __future__ import annotations

import asyncio

import click

from toolrelay.formatting import pprint_tools


@click.command()
def tools() -> None:
    """Show the tools the mock provider advertises to the model."""
    from toolrelay.tools.mock import MockToolProvider

    catalog = asyncio.run(MockToolProvider().list_tools())
    pprint_tools(catalog)
