"""Default marks and fixtures for end-to-end CLI tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner

# pylint: disable=unused-argument, redefined-outer-name

E2E_ROOT = Path(__file__).parent.resolve()


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add default `e2e` marks to items in `tests/e2e/`."""
    for item in items:
        if E2E_ROOT in item.path.resolve().parents:
            item.add_marker(pytest.mark.e2e)


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated filesystem."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture(autouse=True)
def no_env_root(monkeypatch: pytest.MonkeyPatch):
    """Keep the caller's namespace root configuration out of the tests."""
    monkeypatch.delenv("PATHIDENT_NAMESPACE_ROOT", raising=False)

