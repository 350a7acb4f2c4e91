"""Shared test fixtures."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _isolate_logging():
    """Drop file handlers left on the root logger by tests that configure error.log."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if isinstance(handler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run inside an empty directory with no Notion variables in the environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("NOTION_DB_ID", raising=False)
    monkeypatch.delenv("NOTION_TOKEN", raising=False)
    return tmp_path


@pytest.fixture
def notion_env(workdir, monkeypatch):
    """Working directory with NOTION_DB_ID=db123 and NOTION_TOKEN=tok456 exported."""
    monkeypatch.setenv("NOTION_DB_ID", "db123")
    monkeypatch.setenv("NOTION_TOKEN", "tok456")
    return workdir
