"""Shared fakes for rendering and input tests."""

from collections import deque

import pytest


class FakeTerminal:
    """Records draw calls and replays scripted key presses."""

    def __init__(self, polled=(), waited=(), screen_size=(30, 50), pit_origin=(4, 4)):
        self.screen_size = screen_size
        self.pit_origin = pit_origin
        self.polled = deque(polled)
        self.waited = deque(waited)
        self.calls = []
        self.cells = {}
        self.texts = []
        self.presents = 0

    def clear(self):
        self.calls.append("clear")
        self.cells = {}
        self.texts = []

    def draw_cell(self, row, col, glyph):
        self.calls.append("draw_cell")
        self.cells[(row, col)] = glyph

    def draw_text(self, row, col, text):
        self.calls.append("draw_text")
        self.texts.append((row, col, text))

    def present(self):
        self.calls.append("present")
        self.presents += 1

    def poll_key(self):
        return self.polled.popleft() if self.polled else None

    def wait_key(self):
        if not self.waited:
            raise AssertionError("wait_key called with no scripted keys left")
        return self.waited.popleft()

    @property
    def text(self):
        return [t for _, _, t in self.texts]


@pytest.fixture
def make_terminal():
    return FakeTerminal
