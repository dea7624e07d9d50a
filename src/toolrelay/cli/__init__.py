"""toolrelay CLI -- run tool-calling queries against the mock tool provider.

This module is NEVER imported from toolrelay/__init__.py.
It is only loaded via the ``toolrelay`` entry point defined in pyproject.toml.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

try:
    import click
    from dotenv import load_dotenv
except ImportError:
    raise ImportError(
        "CLI dependencies not installed. Install with: pip install toolrelay[cli]"
    ) from None

from toolrelay.cli.formatting import configure_logging, format_error, get_console

if TYPE_CHECKING:
    from toolrelay.gateway.client import AnthropicGateway


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.option(
    "--model",
    default=None,
    envvar="TOOLRELAY_MODEL",
    help="Model identifier (defaults to the built-in model).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, model: str | None) -> None:
    """toolrelay: tool calling against the Messages API with mock tools."""
    load_dotenv()
    configure_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["model"] = model


def _make_gateway(ctx: click.Context) -> AnthropicGateway:
    """Build a gateway from the environment, exiting on configuration errors."""
    from toolrelay.config import GatewayConfig
    from toolrelay.exceptions import ConfigurationError
    from toolrelay.gateway.client import AnthropicGateway

    overrides = {}
    if ctx.obj.get("model"):
        overrides["model"] = ctx.obj["model"]
    try:
        return AnthropicGateway(config=GatewayConfig.from_env(**overrides))
    except ConfigurationError as e:
        format_error(str(e), get_console())
        raise SystemExit(1) from None


# Register subcommands after cli group is defined
from toolrelay.cli.commands.ask import ask  # noqa: E402
from toolrelay.cli.commands.demo import demo  # noqa: E402
from toolrelay.cli.commands.tools import tools  # noqa: E402

cli.add_command(ask)
cli.add_command(demo)
cli.add_command(tools)
