"""Tests for the mongouri command line."""

import json
import logging

import pytest

from mongouri import cli
from mongouri.constants import EXIT_FAILURE, EXIT_SUCCESS, VERSION


@pytest.fixture(autouse=True)
def reset_cli_logger():
    """Drop handlers the CLI installs so they do not outlive captured streams."""
    yield
    logger = logging.getLogger("mongouri")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class _FakeAdapter:
    instances = []

    def __init__(self, uri, fail=False):
        self.uri = uri
        self.fail = fail
        _FakeAdapter.instances.append(self)

    def __enter__(self):
        if self.fail:
            raise ConnectionError("Failed to connect to MongoDB (timeout): no servers")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        pass

    def ping(self):
        return 0.002


class TestMain:
    """Test cli.main."""

    def test_plain_report(self, capsys):
        """Test the default text report."""
        assert cli.main(["mongodb://h:1/db"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "h:1  (tcp)" in out
        assert "Database: db" in out

    def test_json_report(self, capsys):
        """Test --json prints masked JSON."""
        assert cli.main(["mongodb://u:pw@h", "--json"]) == EXIT_SUCCESS
        data = json.loads(capsys.readouterr().out)
        assert data["password"] == "***"
        assert data["hosts"] == [{"host": "h", "port": 27017, "socket": False}]

    def test_missing_argument(self, capsys):
        """Test usage is printed without a connection string."""
        assert cli.main([]) == EXIT_FAILURE
        err = capsys.readouterr().err
        assert "Missing connection string" in err
        assert "Usage:" in err

    def test_too_many_arguments(self, capsys):
        """Test extra positional arguments are rejected."""
        assert cli.main(["mongodb://a", "mongodb://b"]) == EXIT_FAILURE
        assert "Too many arguments" in capsys.readouterr().err

    def test_parse_error(self, capsys):
        """Test parse failures exit with an error message."""
        assert cli.main(["mongodb://user@host"]) == EXIT_FAILURE
        assert "Error: Invalid credentials" in capsys.readouterr().err

    def test_version(self, capsys):
        """Test --version."""
        assert cli.main(["--version"]) == EXIT_SUCCESS
        assert VERSION in capsys.readouterr().out

    def test_connect_success(self, capsys, monkeypatch):
        """Test --connect pings through the adapter."""
        _FakeAdapter.instances = []
        monkeypatch.setattr(cli, "MongoDBAdapter", _FakeAdapter)
        assert cli.main(["mongodb://h", "--connect"]) == EXIT_SUCCESS
        assert "Connection OK" in capsys.readouterr().out
        assert _FakeAdapter.instances[0].uri.hosts[0].host == "h"

    def test_connect_failure(self, capsys, monkeypatch):
        """Test --connect reports connection errors."""
        monkeypatch.setattr(cli, "MongoDBAdapter", lambda uri: _FakeAdapter(uri, fail=True))
        assert cli.main(["mongodb://h", "--connect"]) == EXIT_FAILURE
        assert "Error: Failed to connect" in capsys.readouterr().err

    def test_verbose_sets_debug(self):
        """Test --verbose lowers the log level."""
        assert cli.main(["mongodb://h", "--verbose"]) == EXIT_SUCCESS
        assert logging.getLogger("mongouri").level == logging.DEBUG
