"""
helpers — environment and logging setup
"""

import logging
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from helpers import configure_logging, default_key


@pytest.fixture(autouse=True)
def restore_root_level(monkeypatch):
    monkeypatch.delenv("PLAYFAIR_LOG_LEVEL", raising=False)
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_explicit_level_wins(monkeypatch):
    monkeypatch.setenv("PLAYFAIR_LOG_LEVEL", "ERROR")
    assert configure_logging("debug") == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG

def test_level_from_env(monkeypatch):
    monkeypatch.setenv("PLAYFAIR_LOG_LEVEL", "info")
    assert configure_logging() == logging.INFO

def test_default_level():
    assert configure_logging() == logging.WARNING

def test_unknown_level_falls_back(monkeypatch):
    monkeypatch.setenv("PLAYFAIR_LOG_LEVEL", "chatty")
    assert configure_logging() == logging.WARNING

def test_default_key(monkeypatch):
    monkeypatch.setenv("PLAYFAIR_KEY", "monarchy")
    assert default_key() == "monarchy"
    monkeypatch.delenv("PLAYFAIR_KEY")
    assert default_key() == ""
