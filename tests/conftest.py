import io

import pytest
from rich.console import Console
from unittest.mock import AsyncMock, MagicMock

from eventflow.config import Settings
from eventflow.core.container import Services
from eventflow.core.service_registry import build_container


@pytest.fixture
def settings(tmp_path):
    """Settings isolated from the real environment and .env file."""
    return Settings(
        _env_file=None,
        SITE_ROOT=tmp_path,
        LOG_DIR=tmp_path / "logs",
        GITHUB_API_TOKEN="test-token",
        GITHUB_API_USER="test-user",
        GOOGLE_MAPS_API_KEY="maps-key",
    )


@pytest.fixture
def console():
    """Console writing into a buffer; read it with console.file.getvalue()."""
    return Console(file=io.StringIO(), width=120)


@pytest.fixture
def container(settings, console):
    """Real container with every external service mocked; site data is written to tmp_path."""
    c = build_container(settings)
    c.override(Services.CONSOLE, console)
    c.override(Services.PROMPTER, MagicMock())
    c.override(Services.GITHUB, MagicMock())
    c.override(Services.GEOCODER, MagicMock())

    form = MagicMock()
    form.submit = AsyncMock(return_value="https://docs.google.com/forms/edit/abc")
    c.override(Services.CALENDAR_FORM, form)

    runner = MagicMock()
    runner.run = AsyncMock(return_value=0)
    c.override(Services.SCRIPT_RUNNER, runner)
    return c
