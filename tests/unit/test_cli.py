"""Tests for the CLI module."""

from __future__ import annotations

import json
from unittest.mock import patch

import httpx
import pytest
import respx
from click.testing import CliRunner

from quote_chart.cli import cli
from quote_chart.core.models import DateRange
from quote_chart.prices.request import build_request_url

BASE_URL = "https://quotes.test/dl"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def _provider_env(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("QUOTE_CHART_CONFIG", raising=False)
    monkeypatch.setenv("QUOTE_CHART_PROVIDER__BASE_URL", BASE_URL)


@pytest.fixture
def msft_url(sample_range) -> str:
    return build_request_url("MSFT", sample_range, BASE_URL)


RANGE_ARGS = ["--start", "2021-01-01", "--end", "2021-06-30"]


class TestFetchCommand:
    @respx.mock
    def test_json(self, runner, msft_url, sample_csv):
        respx.get(msft_url).mock(return_value=httpx.Response(200, text=sample_csv))

        result = runner.invoke(cli, ["fetch", "MSFT", *RANGE_ARGS, "--format", "json"])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["dates"] == ["2021-01-04", "2021-01-05", "2021-01-06"]
        assert payload["volumes"] == [37130100, 23823000, 35930700]

    @respx.mock
    def test_csv(self, runner, msft_url, sample_csv):
        respx.get(msft_url).mock(return_value=httpx.Response(200, text=sample_csv))

        result = runner.invoke(cli, ["fetch", "MSFT", *RANGE_ARGS, "--format", "csv"])

        assert result.exit_code == 0, result.output
        lines = result.output.splitlines()
        assert lines[0] == "date,close,volume"
        assert lines[1] == "2021-01-04,217.690002,37130100"

    @respx.mock
    def test_table(self, runner, msft_url, sample_csv):
        respx.get(msft_url).mock(return_value=httpx.Response(200, text=sample_csv))
        result = runner.invoke(cli, ["fetch", "MSFT", *RANGE_ARGS])
        assert result.exit_code == 0, result.output
        assert "2021-01-04" in result.output

    @respx.mock
    def test_default_range_from_config(self, runner, sample_csv):
        url = build_request_url(
            "MSFT", DateRange(start="2021-01-01", end="2021-12-31"), BASE_URL
        )
        route = respx.get(url).mock(return_value=httpx.Response(200, text=sample_csv))
        result = runner.invoke(cli, ["fetch", "MSFT", "--format", "json"])
        assert result.exit_code == 0, result.output
        assert route.called

    @respx.mock
    def test_start_only_keeps_configured_end(self, runner, sample_csv):
        url = build_request_url(
            "MSFT", DateRange(start="2021-03-01", end="2021-12-31"), BASE_URL
        )
        route = respx.get(url).mock(return_value=httpx.Response(200, text=sample_csv))
        result = runner.invoke(cli, ["fetch", "MSFT", "--start", "2021-03-01", "--format", "json"])
        assert result.exit_code == 0, result.output
        assert route.called

    @respx.mock
    def test_provider_error_exits_1(self, runner, msft_url):
        respx.get(msft_url).mock(return_value=httpx.Response(404))
        result = runner.invoke(cli, ["fetch", "MSFT", *RANGE_ARGS])
        assert result.exit_code == 1
        assert "Could not fetch MSFT" in result.output

    def test_blank_symbol_is_usage_error(self, runner):
        result = runner.invoke(cli, ["fetch", " ", *RANGE_ARGS])
        assert result.exit_code == 2
        assert "empty symbol" in result.output

    def test_bad_date_option(self, runner):
        result = runner.invoke(cli, ["fetch", "MSFT", "--start", "01/01/2021"])
        assert result.exit_code == 2


class TestChartCommand:
    @respx.mock
    def test_prints_chart_spec(self, runner, msft_url, sample_csv):
        respx.get(msft_url).mock(return_value=httpx.Response(200, text=sample_csv))

        result = runner.invoke(cli, ["chart", "MSFT", *RANGE_ARGS])

        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["layout"]["title"] == "MSFT"
        assert [t["name"] for t in payload["data"]] == ["Price", "Volume"]
        assert "yaxis" not in payload["data"][0]


class TestServeCommand:
    def test_runs_uvicorn_with_config_defaults(self, runner):
        with patch("uvicorn.run") as run:
            result = runner.invoke(cli, ["serve"])
        assert result.exit_code == 0, result.output
        run.assert_called_once_with(
            "quote_chart.api.app:create_app",
            factory=True,
            host="0.0.0.0",
            port=8080,
            reload=False,
        )

    def test_port_override(self, runner):
        with patch("uvicorn.run") as run:
            runner.invoke(cli, ["serve", "--port", "9000"])
        assert run.call_args.kwargs["port"] == 9000


class TestConfigOption:
    def test_bad_config_file_exits_1(self, runner, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("- not\n- a mapping\n")
        result = runner.invoke(cli, ["--config", str(path), "fetch", "MSFT"])
        assert result.exit_code == 1
        assert "Configuration error" in result.output
