"""Canned tools standing in for an MCP server.

Two lookup tools with fixed outputs: a weather report and a customer
database search. Both are deterministic for a given set of arguments.
"""

from __future__ import annotations

from toolrelay.tools.models import FunctionToolHandler, ToolDescriptor
from toolrelay.tools.registry import ToolRegistry

GET_WEATHER = ToolDescriptor(
    name="get_weather",
    description="Get the current weather for the given city.",
    input_schema={
        "type": "object",
        "properties": {
            "city": {
                "type": "string",
                "description": "City to look up (e.g. Tokyo, Osaka).",
            },
            "unit": {
                "type": "string",
                "enum": ["celsius", "fahrenheit"],
                "description": "Temperature unit.",
                "default": "celsius",
            },
        },
        "required": ["city"],
    },
)

SEARCH_DATABASE = ToolDescriptor(
    name="search_database",
    description="Search the customer database and return matching records.",
    input_schema={
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "Search query.",
            },
            "table": {
                "type": "string",
                "enum": ["customers", "orders", "products"],
                "description": "Table to search.",
            },
            "limit": {
                "type": "number",
                "description": "Maximum number of records to return.",
                "default": 10,
            },
        },
        "required": ["query", "table"],
    },
)

_CANNED_ROWS = [
    ("Taro Tanaka", "001"),
    ("Hanako Sato", "002"),
    ("Jiro Yamada", "003"),
]


def get_weather(city: str, unit: str = "celsius") -> str:
    temperature = "77°F" if unit == "fahrenheit" else "25°C"
    return f"Current weather in {city}: sunny, {temperature}, humidity 60%, wind 3 m/s"


def search_database(query: str, table: str, limit: int | float = 10) -> str:
    rows = _CANNED_ROWS[: max(int(limit), 0)]
    lines = [f'Searched the {table} table for "{query}": {len(rows)} result(s) found.']
    for i, (name, record_id) in enumerate(rows, start=1):
        lines.append(f"{i}. {name} (ID: {record_id})")
    return "\n".join(lines)


class MockToolProvider(ToolRegistry):
    """ToolRegistry preloaded with get_weather and search_database."""

    def __init__(self) -> None:
        super().__init__()
        self.register(GET_WEATHER, FunctionToolHandler(get_weather))
        self.register(SEARCH_DATABASE, FunctionToolHandler(search_database))
