"""Pytest fixtures for sexp-engine tests."""

import pytest

from sexp_engine.log import disable_verbose
from sexp_engine.nodes import Integer, Pair, Symbol, Text


@pytest.fixture
def one():
    """The integer atom 1."""
    return Integer(1)


@pytest.fixture
def sample_trees():
    """Hand-built trees covering every node shape."""
    one = Integer(1)
    two = Integer(2)
    return [
        None,
        one,
        Integer(0),
        Text(""),
        Text("hello world"),
        Symbol("abc"),
        Symbol("x1y2"),
        Pair(),
        Pair(one),
        Pair(None, one),
        Pair(one, one),
        Pair(one, Pair(two)),
        Pair(one, Pair(two, Integer(3))),
        Pair(one, Pair(None, one)),
        Pair(one, Pair()),
        Pair(None, Pair(None)),
        Pair(Pair(), Pair(Pair(one))),
        Pair(Pair(one, two), Pair(Text("b"), Pair(Symbol("a")))),
        Pair(Pair(Pair(Pair())), Text("deep")),
    ]


@pytest.fixture
def isolated_config(tmp_path, monkeypatch):
    """Run with no user config and an empty project directory."""
    (tmp_path / ".git").mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sexp_engine.config.USER_CONFIG_PATH", tmp_path / "no-exist.toml")
    return tmp_path


@pytest.fixture(autouse=True)
def quiet_logging():
    """Reset the package logger after each test."""
    yield
    disable_verbose()
