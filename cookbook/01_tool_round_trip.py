"""Tool Round Trip

Part 1 -- List the mock tool catalog and call a tool directly, no model
involved. Shows what the orchestrator will hand to the model and what the
model gets back.

Part 2 -- The full exchange: send a query with the catalog, let the model
ask for tools, execute them, and print the final answer.

Demonstrates: MockToolProvider, list_tools(), call_tool(), AnthropicGateway,
              Orchestrator.run(), pprint_tools(), pprint_response()
"""

import asyncio

from dotenv import load_dotenv

from toolrelay import (
    AnthropicGateway,
    GatewayConfig,
    MockToolProvider,
    Orchestrator,
    pprint_response,
    pprint_tools,
)

load_dotenv()


# ---------------------------------------------------------------------------
# Part 1: The catalog and a direct call (no model)
# ---------------------------------------------------------------------------

async def part1_catalog():
    """Inspect the tools and invoke one by hand."""
    print("=" * 60)
    print("PART 1 -- Tool catalog (no model)")
    print("=" * 60)

    provider = MockToolProvider()
    pprint_tools(await provider.list_tools())

    result = await provider.call_tool("get_weather", {"city": "Tokyo"})
    print(f"\nget_weather -> {result.text}\n")


# ---------------------------------------------------------------------------
# Part 2: One query through the model
# ---------------------------------------------------------------------------

async def part2_round_trip():
    """Let the model call tools and answer with their results."""
    print("=" * 60)
    print("PART 2 -- Query with tool calls")
    print("=" * 60)

    query = "What's the weather in Tokyo?"
    async with AnthropicGateway(config=GatewayConfig.from_env()) as gateway:
        orchestrator = Orchestrator(MockToolProvider(), gateway)
        response = await orchestrator.run(query)

    pprint_response(response, prompt=query)


async def main():
    await part1_catalog()
    await part2_round_trip()


if __name__ == "__main__":
    asyncio.run(main())
