"""Shared fixtures for the commit-art tests."""

import random
from datetime import date

import pytest

from commitart import gitops


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def sunday():
    return date(2024, 1, 7)


@pytest.fixture
def fake_git(monkeypatch):
    """Record git invocations instead of running them."""
    calls = []

    def run(cmd, cwd=None, env=None):
        calls.append({"cmd": list(cmd), "cwd": cwd, "env": env})
        return ""

    monkeypatch.setattr(gitops, "run", run)
    monkeypatch.setattr(gitops, "git_available", lambda: True)
    return calls
