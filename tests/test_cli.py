"""
Tests for the dtrack-client command line interface.
"""

import logging
from unittest.mock import patch

import httpx
import pytest
from click.testing import CliRunner

from dtrack_client.cli import cli, setup_logging
from dtrack_client.client import DTrackClient

PROJECT_UUID = "7f5c3a52-2b1e-4a8c-9a0f-3c2d1e0b9a87"


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def invoke(runner, fake_server, monkeypatch):
    """Invoke the CLI against the fake server."""
    for name in ("DTRACK_BASE_URL", "DTRACK_API_KEY", "DTRACK_WAIT_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)

    def factory(settings, transport=None):
        return DTrackClient(
            settings.base_url,
            api_key=settings.api_key,
            transport=fake_server.transport,
        )

    def run(*args: str):
        with patch.object(DTrackClient, "from_settings", side_effect=factory):
            return runner.invoke(
                cli,
                ["--url", "https://dtrack.test", "--api-key", "k", *args],
                obj={},
            )

    return run


def test_version(invoke, fake_server):
    """Test the version command prints server information."""
    fake_server.add(
        "GET", "/api/version", httpx.Response(200, json={"version": "4.12.7"})
    )

    result = invoke("version")

    assert result.exit_code == 0, result.output
    assert '"version": "4.12.7"' in result.output


def test_project_latest(invoke, fake_server, sample_project_data):
    """Test the project latest command."""
    fake_server.add(
        "GET",
        "/api/v1/project/latest/acme-app",
        httpx.Response(200, json=sample_project_data),
    )

    result = invoke("project", "latest", "acme-app")

    assert result.exit_code == 0, result.output
    assert '"name": "acme-app"' in result.output


def test_project_clone_and_wait(invoke, fake_server):
    """Test cloning with --wait polls the event until done."""
    fake_server.add(
        "PUT", "/api/v1/project/clone", httpx.Response(200, json={"token": "abc-123"})
    )
    fake_server.add(
        "GET",
        "/api/v1/event/token/abc-123",
        [
            httpx.Response(200, json={"processing": True}),
            httpx.Response(200, json={"processing": False}),
        ],
    )

    result = invoke(
        "project", "clone", PROJECT_UUID, "2.0.0", "--make-latest", "--wait"
    )

    assert result.exit_code == 0, result.output
    assert "abc-123" in result.output.splitlines()
    assert fake_server.json_body(0)["makeCloneLatest"] is True
    assert len(fake_server.requests) == 3


def test_event_status(invoke, fake_server):
    """Test the event status command."""
    fake_server.add(
        "GET",
        "/api/v1/event/token/abc-123",
        httpx.Response(200, json={"processing": True}),
    )

    result = invoke("event", "status", "abc-123")

    assert result.exit_code == 0, result.output
    assert "processing" in result.output.splitlines()


def test_event_wait(invoke, fake_server):
    """Test the event wait command reports the number of checks."""
    fake_server.add(
        "GET",
        "/api/v1/event/token/abc-123",
        [
            httpx.Response(200, json={"processing": True}),
            httpx.Response(200, json={"processing": True}),
            httpx.Response(200, json={"processing": False}),
        ],
    )

    result = invoke("event", "wait", "abc-123")

    assert result.exit_code == 0, result.output
    assert "done after 3 checks" in result.output.splitlines()


def test_errors_become_click_exceptions(invoke, fake_server):
    """Test library errors exit with status 1 and a message."""
    fake_server.add("GET", "/api/version", httpx.Response(401, text="denied"))

    result = invoke("version")

    assert result.exit_code == 1
    assert "returned 401" in result.output


@pytest.mark.parametrize(
    ("name", "value"),
    [("DTRACK_LOG_LEVEL", "LOUD"), ("DTRACK_WAIT_TIMEOUT", "-5")],
)
def test_invalid_configuration_exits_cleanly(invoke, fake_server, monkeypatch, name, value):
    """Test bad settings exit with status 1 instead of a traceback."""
    monkeypatch.setenv(name, value)

    result = invoke("version")

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output
    assert fake_server.requests == []


def test_setup_logging_quiets_http_stack(mock_settings):
    """Test the client logger follows the configured level while httpx stays quiet."""
    setup_logging(mock_settings.model_copy(update={"log_level": "INFO"}))

    assert logging.getLogger("dtrack_client").level == logging.INFO
    assert logging.getLogger("httpx").level == logging.WARNING

    setup_logging(mock_settings)

    assert logging.getLogger("dtrack_client").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.DEBUG
