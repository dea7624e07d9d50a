"""CLI tests for toolrelay -- tools, ask and demo via Click's CliRunner.

The gateway factory is patched to route requests through an httpx mock
transport, so no network access or real credentials are needed.
"""

from __future__ import annotations

import httpx
import pytest
from click.testing import CliRunner

import toolrelay.cli
from toolrelay.cli import cli
from toolrelay.cli.commands.demo import SAMPLE_QUERIES
from tests.conftest import (
    RecordingHandler,
    make_gateway,
    response_payload,
    text_block,
    tool_use_block,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def runner():
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _no_dotenv(monkeypatch):
    """Keep a developer's .env file out of the tests."""
    monkeypatch.setattr(toolrelay.cli, "load_dotenv", lambda: False)


def _patch_gateway(monkeypatch, handler) -> None:
    monkeypatch.setattr(toolrelay.cli, "_make_gateway", lambda ctx: make_gateway(handler))


# ---------------------------------------------------------------------------
# tools
# ---------------------------------------------------------------------------

class TestToolsCommand:

    def test_lists_mock_catalog(self, runner):
        result = runner.invoke(cli, ["tools"])
        assert result.exit_code == 0, result.output
        assert "get_weather" in result.output
        assert "search_database" in result.output


# ---------------------------------------------------------------------------
# ask
# ---------------------------------------------------------------------------

class TestAskCommand:

    def test_tool_round_prints_final_answer(self, runner, monkeypatch):
        handler = RecordingHandler(
            response_payload(tool_use_block("toolu_1", "get_weather", city="Tokyo")),
            response_payload(text_block("Sunny skies in Tokyo.")),
        )
        _patch_gateway(monkeypatch, handler)

        result = runner.invoke(cli, ["ask", "Weather in Tokyo?"])
        assert result.exit_code == 0, result.output
        assert "Sunny skies in Tokyo." in result.output
        assert len(handler.requests) == 2

    def test_gateway_error_exits_nonzero(self, runner, monkeypatch):
        _patch_gateway(monkeypatch, RecordingHandler({}, status_code=401))

        result = runner.invoke(cli, ["ask", "Hi"])
        assert result.exit_code == 1
        assert "401" in result.output

    def test_unreachable_api_exits_nonzero(self, runner, monkeypatch):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        _patch_gateway(monkeypatch, handler)

        result = runner.invoke(cli, ["ask", "Hi"])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "Could not reach model API" in result.output

    def test_report_policy_option(self, runner, monkeypatch):
        handler = RecordingHandler(
            response_payload(tool_use_block("toolu_1", "launch_rocket")),
            response_payload(text_block("That tool does not exist.")),
        )
        _patch_gateway(monkeypatch, handler)

        result = runner.invoke(cli, ["ask", "--tool-errors", "report", "Launch!"])
        assert result.exit_code == 0, result.output
        tool_result = handler.bodies[1]["messages"][2]["content"][0]
        assert tool_result["is_error"] is True

    def test_missing_api_key(self, runner):
        result = runner.invoke(cli, ["ask", "Hi"])
        assert result.exit_code == 1
        assert "No API key" in result.output


# ---------------------------------------------------------------------------
# demo
# ---------------------------------------------------------------------------

class TestDemoCommand:

    def test_runs_both_sample_queries(self, runner, monkeypatch):
        handler = RecordingHandler(
            response_payload(tool_use_block("toolu_1", "get_weather", city="Tokyo")),
            response_payload(text_block("Tokyo: sunny.")),
            response_payload(tool_use_block(
                "toolu_2", "search_database", query="Tanaka", table="customers",
            )),
            response_payload(text_block("Found Taro Tanaka.")),
        )
        _patch_gateway(monkeypatch, handler)

        result = runner.invoke(cli, ["demo", "--delay", "0"])
        assert result.exit_code == 0, result.output
        assert "Tokyo: sunny." in result.output
        assert "Found Taro Tanaka." in result.output
        assert len(handler.requests) == 4
        assert handler.bodies[0]["messages"][0]["content"] == SAMPLE_QUERIES[0]
        assert handler.bodies[2]["messages"][0]["content"] == SAMPLE_QUERIES[1]

    def test_failed_query_does_not_stop_the_next(self, runner, monkeypatch):
        calls = 0

        def handler(request):
            nonlocal calls
            calls += 1
            if calls == 1:
                return httpx.Response(500)
            return httpx.Response(200, json=response_payload(text_block("Second ok.")))

        _patch_gateway(monkeypatch, handler)

        result = runner.invoke(cli, ["demo", "--delay", "0"])
        assert result.exit_code == 0, result.output
        assert "500" in result.output
        assert "Second ok." in result.output
        assert calls == 2

    def test_timeout_does_not_stop_the_next(self, runner, monkeypatch):
        calls = 0

        def handler(request):
            nonlocal calls
            calls += 1
            if calls == 1:
                raise httpx.ReadTimeout("timed out", request=request)
            return httpx.Response(200, json=response_payload(text_block("Second ok.")))

        _patch_gateway(monkeypatch, handler)

        result = runner.invoke(cli, ["demo", "--delay", "0"])
        assert result.exit_code == 0, result.output
        assert "ReadTimeout" in result.output
        assert "Second ok." in result.output
        assert calls == 2

    def test_all_queries_failing_exits_nonzero(self, runner, monkeypatch):
        _patch_gateway(monkeypatch, RecordingHandler({}, status_code=503))

        result = runner.invoke(cli, ["demo", "--delay", "0"])
        assert result.exit_code == 1
