"""Pytest fixtures for hcptf tests."""

import pytest

# Small registry covering every routing shape
TEST_COMMAND_PATHS = [
    "organization list",
    "organization show",
    "organization create",
    "organization delete",
    "workspace list",
    "workspace read",
    "workspace create",
    "workspace delete",
    "workspace lock",
    "team list",
    "team create",
    "team delete",
    "team show",
    "team add-member",
    "project list",
    "project read",
    "project delete",
    "run list",
    "run show",
    "run apply",
    "run cancel",
    "run discard",
    "plan read",
    "plan logs",
    "apply read",
    "apply logs",
    "comment list",
    "policycheck list",
    "configversion read",
    "state list",
    "state outputs",
    "variable list",
    "version",
]


@pytest.fixture
def command_paths():
    """Command paths for a small test registry."""
    return list(TEST_COMMAND_PATHS)


@pytest.fixture
def tree(command_paths):
    """CommandTree built from the test registry."""
    from hcptf.router.command_tree import CommandTree

    return CommandTree(command_paths)


@pytest.fixture
def router(command_paths):
    """Router over the test registry."""
    from hcptf.router import Router

    return Router(command_paths)


@pytest.fixture
def catalog_router():
    """Router over the full command catalog."""
    from hcptf import Router, command_paths

    return Router(command_paths())


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run in an empty project directory with no user config."""
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("hcptf.config.USER_CONFIG_PATH", tmp_path / "no-exist.toml")
    monkeypatch.delenv("HCPTF_LOG", raising=False)
    monkeypatch.delenv("HCPTF_ADDRESS", raising=False)
    monkeypatch.delenv("TFE_ADDRESS", raising=False)
    return tmp_path


@pytest.fixture
def wide_console(monkeypatch):
    """Fresh Rich consoles wide enough that table cells never wrap."""
    monkeypatch.setenv("COLUMNS", "200")
    monkeypatch.setattr("hcptf.cli.utils._console", None)
    monkeypatch.setattr("hcptf.cli.utils._error_console", None)


@pytest.fixture
def cli_env(isolated_config, wide_console, clean_handlers):
    """Isolated environment for running hcptf.cli.main end to end."""
    return isolated_config


@pytest.fixture
def clean_handlers():
    """Start and finish with an empty handler registry."""
    from hcptf.cli.dispatch import clear_handlers

    clear_handlers()
    yield
    clear_handlers()
