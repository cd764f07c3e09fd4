"""
Shared fixtures for the benchmark tests.

Provides: temporary Markdown documents, a call-counting fake renderer
"""

import pytest


class CountingRenderer:
    """Fake renderer that records every input it is asked to render."""

    def __init__(self, output="<p>rendered</p>"):
        self.output = output
        self.calls = []

    def __call__(self, text):
        self.calls.append(text)
        return f"{self.output}#{len(self.calls)}"


@pytest.fixture
def counting_renderer():
    return CountingRenderer()


@pytest.fixture
def markdown_file(tmp_path):
    """Write a one-line document with a heading and a link."""
    path = tmp_path / "TEST.md"
    path.write_text("# Hello [World](http://example.com)\n", encoding="utf-8")
    return path
