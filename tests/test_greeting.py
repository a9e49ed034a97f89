"""Tests for the greeting function."""

from core.greeting import GREETING, hello


def test_hello_returns_fixed_greeting():
    assert hello() == "Hello, World!"
    assert hello() == GREETING


def test_hello_is_deterministic():
    assert len({hello() for _ in range(5)}) == 1
