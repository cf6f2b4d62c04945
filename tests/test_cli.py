"""
Tests for CLI functionality.

These tests verify the command-line interface logic; flows are patched out.
"""

from __future__ import annotations

import argparse
from io import StringIO
from unittest.mock import patch

import pytest

from bikeshare_explorer.analysis.views import (
    CountryStationsView,
    DirectoryView,
    NetworkCard,
    StationsView,
    stations_error_view,
)
from bikeshare_explorer.cli import (
    cmd_countries,
    cmd_country,
    cmd_info,
    cmd_search,
    cmd_stations,
    create_parser,
    main,
)
from bikeshare_explorer.errors import FetchError
from bikeshare_explorer.schemas import CountrySummaryEntry

DIRECTORY_VIEW = DirectoryView(
    query="paris",
    cards=[
        NetworkCard(
            network_id="velib",
            name="Velib",
            city="Paris",
            country_code="FR",
            country_name="France",
            flag="",
        )
    ],
    countries=[CountrySummaryEntry(country_code="FR", display_name="France", flag="", count=1)],
    total_matches=1,
)


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "bikeshare-explorer"

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

    def test_parser_search_joins_words(self) -> None:
        """Search accepts multi-word queries."""
        parser = create_parser()
        args = parser.parse_args(["search", "new", "york"])
        assert args.command == "search"
        assert args.query == ["new", "york"]

    def test_parser_search_empty_query(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["search"])
        assert args.query == []

    def test_parser_stations_command(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["stations", "velib"])
        assert args.network_id == "velib"

    def test_parser_country_command(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["country", "fr", "--max-networks", "3"])
        assert args.country_code == "fr"
        assert args.max_networks == 3

    def test_parser_country_default_max(self) -> None:
        parser = create_parser()
        args = parser.parse_args(["country", "fr"])
        assert args.max_networks is None


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_prints_app_info(self) -> None:
        with patch("sys.stdout", new=StringIO()) as mock_stdout:
            exit_code = cmd_info(argparse.Namespace())
            output = mock_stdout.getvalue()

        assert exit_code == 0
        assert "bikeshare-explorer" in output
        assert "api.citybik.es" in output


class TestCmdSearch:
    """Tests for cmd_search / cmd_countries."""

    def test_prints_results(self) -> None:
        with (
            patch("bikeshare_explorer.cli.search_networks", return_value=DIRECTORY_VIEW) as flow,
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            exit_code = cmd_search(argparse.Namespace(query=["pa", "ris"]))

        assert exit_code == 0
        flow.assert_called_once_with("pa ris")
        assert "Velib" in mock_stdout.getvalue()

    def test_countries_prints_pills(self) -> None:
        with (
            patch("bikeshare_explorer.cli.search_networks", return_value=DIRECTORY_VIEW),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            exit_code = cmd_countries(argparse.Namespace(query=[]))

        assert exit_code == 0
        assert 'search: "France"' in mock_stdout.getvalue()


class TestCmdStations:
    """Tests for cmd_stations."""

    def test_error_view_returns_one(self) -> None:
        view = stations_error_view("velib", FetchError("HTTP 404"))
        with (
            patch("bikeshare_explorer.cli.network_stations", return_value=view),
            patch("sys.stdout", new=StringIO()) as mock_stdout,
        ):
            exit_code = cmd_stations(argparse.Namespace(network_id="velib"))

        assert exit_code == 1
        assert "HTTP 404" in mock_stdout.getvalue()

    def test_success_returns_zero(self) -> None:
        with (
            patch(
                "bikeshare_explorer.cli.network_stations",
                return_value=StationsView(network_id="velib"),
            ),
            patch("sys.stdout", new=StringIO()),
        ):
            assert cmd_stations(argparse.Namespace(network_id="velib")) == 0


class TestCmdCountry:
    """Tests for cmd_country."""

    def test_passes_max_networks(self) -> None:
        view = CountryStationsView(country_code="fr", display_name="France", flag="")
        with (
            patch("bikeshare_explorer.cli.country_stations", return_value=view) as flow,
            patch("sys.stdout", new=StringIO()),
        ):
            exit_code = cmd_country(argparse.Namespace(country_code="fr", max_networks=3))

        assert exit_code == 0
        flow.assert_called_once_with("fr", max_networks=3)

    def test_rejects_non_positive_max(self) -> None:
        with (
            patch("bikeshare_explorer.cli.country_stations") as flow,
            patch("sys.stderr", new=StringIO()),
        ):
            exit_code = cmd_country(argparse.Namespace(country_code="fr", max_networks=0))

        assert exit_code == 2
        flow.assert_not_called()


class TestMain:
    """Tests for main function."""

    def test_no_command_shows_help(self) -> None:
        with patch("sys.argv", ["bikeshare-explorer"]), patch("sys.stdout", new=StringIO()):
            assert main() == 0

    def test_search_command_executes(self) -> None:
        with patch("bikeshare_explorer.cli.cmd_search") as mock_cmd:
            mock_cmd.return_value = 0
            assert main(["search", "oslo"]) == 0
            mock_cmd.assert_called_once()

    def test_country_command_executes(self) -> None:
        with patch("bikeshare_explorer.cli.cmd_country") as mock_cmd:
            mock_cmd.return_value = 1
            assert main(["country", "fr"]) == 1

    def test_unknown_command_shows_help(self) -> None:
        """Unknown command shows help and returns 1."""
        with (
            patch("bikeshare_explorer.cli.create_parser") as mock_parser,
        ):
            mock_parser.return_value.parse_args.return_value = argparse.Namespace(command="unknown")
            assert main([]) == 1
