"""Shared pytest fixtures.

Every test runs with a clean `DEMO_*` environment and an empty, test-local
config directory so settings never pick up the developer's shell or a
mounted `application.yml`.
"""

import logging
import os

import pytest

from demo_common.logging import HANDLER_NAME


@pytest.fixture(autouse=True)
def config_dir(monkeypatch, tmp_path):
    """Isolate settings from the environment; yields the config dir path."""
    for key in list(os.environ):
        if key.startswith("DEMO_"):
            monkeypatch.delenv(key)
    directory = tmp_path / "config"
    directory.mkdir()
    monkeypatch.setenv("DEMO_CONFIG_DIR", str(directory))
    yield directory


@pytest.fixture
def restore_root_logging():
    """Undo `configure_logging` side effects on the root logger."""
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if handler.get_name() == HANDLER_NAME:
            root.removeHandler(handler)
    root.setLevel(level)
