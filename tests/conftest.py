"""Shared fixtures for the resolver tests."""
import pytest


class CountingSource:
    """Module producer that records how many times it was invoked."""
    def __init__(self, text, source=None):
        self.text = text
        self.calls = 0
        if source is not None:
            self.source = source

    def __call__(self):
        self.calls += 1
        return self.text


@pytest.fixture
def counting_source():
    """Factory for producers that count their invocations."""
    return CountingSource


@pytest.fixture
def table():
    """Build a module table from plain strings of source text."""
    def build(**sources):
        return {name.replace('__', '/'): (lambda text=text: text) for name, text in sources.items()}
    return build
