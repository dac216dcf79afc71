"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
import json
from io import StringIO
from unittest.mock import patch

import pytest

from kiosk_board.cli import cmd_fetch, cmd_info, cmd_serve, create_parser, main
from kiosk_board.schemas import (
    AggregatedResponse,
    CurrentConditions,
    HourlyForecastEntry,
    MealMenu,
)


def sample_response() -> AggregatedResponse:
    return AggregatedResponse(
        current_conditions=CurrentConditions(temperature_text="21℃", condition_emoji="☀️"),
        hourly_forecast=tuple(HourlyForecastEntry(time_slot=f"{h:02d}00") for h in range(9, 14)),
        meal_menu=MealMenu(meal_type="중식", lines=("잡곡밥", "된장국")),
    )


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "kiosk-board"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        parser = create_parser()
        args = parser.parse_args(["--debug", "info"])
        assert args.debug is True

    def test_parser_fetch_command(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["fetch"])
        assert args.command == "fetch"

    def test_parser_serve_defaults(self) -> None:
        """Serve command defaults host/port to settings."""
        parser = create_parser()
        args = parser.parse_args(["serve"])
        assert args.command == "serve"
        assert args.host is None
        assert args.port is None

    def test_parser_serve_port(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["serve", "--port", "8080", "--host", "127.0.0.1"])
        assert args.port == 8080
        assert args.host == "127.0.0.1"


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_returns_zero(self) -> None:
        """Info command returns exit code 0."""
        assert cmd_info(argparse.Namespace()) == 0

    def test_prints_app_info(self) -> None:
        """Info command prints application information."""
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            cmd_info(argparse.Namespace())
            output = mock_stdout.getvalue()
            assert "Application" in output
            assert "Version" in output
            assert "NEIS key set" in output


class TestCmdFetch:
    """Tests for cmd_fetch function."""

    def test_prints_wire_json(self) -> None:
        """Fetch prints the document with front-end field names."""
        with (
            patch("kiosk_board.cli.build_response", return_value=sample_response()) as mock_build,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            exit_code = cmd_fetch(argparse.Namespace())

            assert exit_code == 0
            mock_build.assert_called_once()
            data = json.loads(mock_stdout.getvalue())
            assert data["current_weather"]["temp"] == "21℃"
            assert data["lunch_menu"]["menu"] == ["잡곡밥", "된장국"]
            assert len(data["hourly_forecast"]) == 5


class TestCmdServe:
    """Tests for cmd_serve function."""

    def test_runs_uvicorn_with_port(self) -> None:
        args = argparse.Namespace(host="127.0.0.1", port=8123)

        with (
            patch("uvicorn.run") as mock_run,
            patch("kiosk_board.app.create_app") as mock_create,
            patch("sys.stdout", new=StringIO()),
        ):
            exit_code = cmd_serve(args)

            assert exit_code == 0
            mock_create.assert_called_once()
            mock_run.assert_called_once_with(
                mock_create.return_value, host="127.0.0.1", port=8123
            )

    def test_port_from_settings(self) -> None:
        args = argparse.Namespace(host=None, port=None)

        with (
            patch("uvicorn.run") as mock_run,
            patch("kiosk_board.app.create_app"),
            patch("kiosk_board.cli.get_settings") as mock_settings,
            patch("sys.stdout", new=StringIO()),
        ):
            mock_settings.return_value.host = "0.0.0.0"
            mock_settings.return_value.port = 5000
            cmd_serve(args)

            assert mock_run.call_args.kwargs == {"host": "0.0.0.0", "port": 5000}


class TestMain:
    """Tests for main entry point."""

    def test_no_command_prints_help(self) -> None:
        with (
            patch("sys.argv", ["kiosk-board"]),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            assert main() == 0
            assert "usage" in mock_stdout.getvalue().lower()

    def test_dispatches_info(self) -> None:
        with (
            patch("sys.argv", ["kiosk-board", "info"]),
            patch("kiosk_board.cli.cmd_info", return_value=0) as mock_info,
        ):
            assert main() == 0
            mock_info.assert_called_once()
