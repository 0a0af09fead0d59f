"""Tests for the asyncio game loop."""

from __future__ import annotations

import asyncio
import curses
from dataclasses import replace

import pytest

from term_snake.engine import Game, GameEngine, GameStatus
from term_snake.loop import GameLoop, GameOutcome

TICK = 0.005


def _engine(food=(0, 0)) -> GameEngine:
    engine = GameEngine(seed=0)
    engine.game = replace(engine.game, food=food)
    return engine


def _queue(*keys) -> asyncio.Queue:
    queue: asyncio.Queue = asyncio.Queue()
    for key in keys:
        queue.put_nowait(key)
    return queue


class TestLoopTermination:
    @pytest.mark.asyncio
    async def test_runs_until_wall(self):
        frames: list[Game] = []
        engine = _engine()
        outcome = await GameLoop(engine, _queue(), frames.append, TICK).run()
        assert outcome == GameOutcome(score=0)
        assert engine.game_over
        assert engine.game.snake.head == (5, 9)
        # Initial frame plus one per tick.
        assert len(frames) == engine.game.tick + 1
        assert frames[-1].game_over

    @pytest.mark.asyncio
    async def test_quit_skips_score(self):
        engine = _engine()
        outcome = await GameLoop(engine, _queue(ord("q")), None, TICK).run()
        assert outcome.quit
        assert outcome.score is None
        assert not engine.game_over

    @pytest.mark.asyncio
    async def test_quit_wins_over_simultaneous_game_over(self):
        engine = _engine()
        engine.game = replace(engine.game, status=GameStatus.GAME_OVER, score=3)
        outcome = await GameLoop(engine, _queue("q"), None, TICK).run()
        assert outcome == GameOutcome(score=None, quit=True)

    @pytest.mark.asyncio
    async def test_quit_mid_game(self):
        engine = _engine()
        keys = _queue()
        loop = GameLoop(engine, keys, None, 1.0)
        task = asyncio.create_task(loop.run())
        await asyncio.sleep(0.01)
        keys.put_nowait("q")
        outcome = await asyncio.wait_for(task, timeout=1.0)
        assert outcome.quit
        assert engine.game.tick == 0


class TestLoopInput:
    @pytest.mark.asyncio
    async def test_arrow_key_turns(self):
        engine = _engine(food=(9, 9))
        outcome = await GameLoop(engine, _queue(curses.KEY_UP), None, TICK).run()
        assert outcome.score == 0
        assert engine.game.snake.head == (0, 5)

    @pytest.mark.asyncio
    async def test_reversal_ignored(self):
        engine = _engine()
        await GameLoop(engine, _queue("a"), None, TICK).run()
        assert engine.game.snake.head == (5, 9)

    @pytest.mark.asyncio
    async def test_keys_between_ticks_collapse(self):
        engine = _engine(food=(9, 9))
        await GameLoop(engine, _queue("w", "a"), None, TICK).run()
        assert engine.game.snake.head == (5, 0)

    @pytest.mark.asyncio
    async def test_unmapped_keys_ignored(self):
        engine = _engine()
        await GameLoop(engine, _queue("x", ord("z"), -1), None, TICK).run()
        assert engine.game.snake.head == (5, 9)


class TestLoopErrors:
    def test_invalid_interval(self):
        with pytest.raises(ValueError, match="positive"):
            GameLoop(_engine(), _queue(), None, 0)

    @pytest.mark.asyncio
    async def test_renderer_failure_propagates(self):
        calls: list[Game] = []

        def renderer(game: Game) -> None:
            calls.append(game)
            if len(calls) == 3:
                raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            await GameLoop(_engine(), _queue(), renderer, TICK).run()
