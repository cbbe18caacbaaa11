"""
Shared pytest fixtures for the f test suite.

Usage in tests:
    def test_something(flow_factory):
        cli = flow_factory.create_cli([flow_factory.command("init")])

    def test_ranking(sample_commands):
        init, install, config = sample_commands
"""

import pytest

from fcli.log import reset_logging
from tests.factories import FlowTestFactory


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's F_* settings out of tests."""
    for name in ("F_SYMBOLS", "F_LOG_LEVEL", "F_ASCII_ONLY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def flow_factory(tmp_path):
    """Empty FlowTestFactory rooted at tmp_path."""
    return FlowTestFactory(tmp_path)


@pytest.fixture
def sample_commands(flow_factory):
    """
    Three stub commands in registration order:
    init ("Create manifest"), install ("Install deps", alias "i"),
    config ("Show settings").
    """
    return [
        flow_factory.command("init", "Create manifest"),
        flow_factory.command("install", "Install deps", aliases=["i"]),
        flow_factory.command("config", "Show settings"),
    ]


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop the handler configure_logging() attached during a test."""
    yield
    reset_logging()
