"""Tests for the terminal glue that does not need a real terminal."""

import asyncio

from term_snake.terminal import DEFAULT_NAME, _drain_keys, prompt_name


class FakeWindow:
    def __init__(self, keys):
        self._keys = list(keys)

    def getch(self):
        return self._keys.pop(0) if self._keys else -1


class TestPromptName:
    def test_uses_typed_name(self):
        assert prompt_name(lambda prompt: "  ann ") == "ann"

    def test_blank_defaults(self):
        assert prompt_name(lambda prompt: "") == DEFAULT_NAME

    def test_eof_defaults(self):
        def closed(prompt):
            raise EOFError

        assert prompt_name(closed) == DEFAULT_NAME


class TestDrainKeys:
    def test_moves_all_pending_keys(self):
        queue: asyncio.Queue = asyncio.Queue()
        _drain_keys(FakeWindow([119, 97, 113]), queue)
        assert [queue.get_nowait() for _ in range(queue.qsize())] == [119, 97, 113]

    def test_nothing_pending(self):
        queue: asyncio.Queue = asyncio.Queue()
        _drain_keys(FakeWindow([]), queue)
        assert queue.empty()
