"""Tests for frame and screen rendering."""

from collections import deque

from pit_snake.engine import GameEngine, RunState
from pit_snake.render import (
    Glyph,
    head_glyph,
    render_end_screen,
    render_frame,
    render_start_screen,
    status_line,
)
from pit_snake.snake import Direction


def _engine() -> GameEngine:
    engine = GameEngine(pit_height=20, pit_width=20, seed=0)
    engine.food.position = (3, 3)
    return engine


class TestHeadGlyph:
    def test_head_follows_direction(self):
        assert head_glyph(Direction.UP) is Glyph.HEAD_UP
        assert head_glyph(Direction.DOWN) is Glyph.HEAD_DOWN
        assert head_glyph(Direction.LEFT) is Glyph.HEAD_LEFT
        assert head_glyph(Direction.RIGHT) is Glyph.HEAD_RIGHT


class TestRenderFrame:
    def test_draws_pit_contents(self, make_terminal):
        surface = make_terminal()
        render_frame(surface, _engine().snapshot())
        assert surface.calls[0] == "clear"
        assert surface.calls[-1] == "present"
        assert surface.cells[(11, 11)] is Glyph.HEAD_RIGHT
        assert surface.cells[(11, 10)] is Glyph.BODY
        assert surface.cells[(11, 9)] is Glyph.BODY
        assert surface.cells[(3, 3)] is Glyph.FOOD
        borders = [pos for pos, g in surface.cells.items() if g is Glyph.BORDER]
        assert len(borders) == 84

    def test_status_line_above_pit(self, make_terminal):
        surface = make_terminal(pit_origin=(4, 6))
        render_frame(surface, _engine().snapshot())
        assert (3, 6, "Length: 3/40") in surface.texts

    def test_head_glyph_after_turn(self, make_terminal):
        engine = _engine()
        engine.set_direction(Direction.DOWN)
        engine.advance()
        surface = make_terminal()
        render_frame(surface, engine.snapshot())
        assert surface.cells[(12, 11)] is Glyph.HEAD_DOWN


class TestScreens:
    def test_start_screen(self, make_terminal):
        surface = make_terminal()
        render_start_screen(surface, 40)
        assert "   SNAKE GAME   " in surface.text
        assert "To Win: Reach a length of 40" in surface.text
        assert "Press SPACE to start" in surface.text
        assert "Press 'q' to quit" in surface.text
        assert surface.presents == 1

    def test_text_is_centered(self, make_terminal):
        surface = make_terminal(screen_size=(30, 50))
        render_start_screen(surface, 40)
        row, col, text = next(t for t in surface.texts if t[2] == "Eat food to grow")
        assert col == (50 - len(text)) // 2

    def test_game_over_screen(self, make_terminal):
        engine = _engine()
        engine.snake.body = deque([(5, 1), (5, 2), (5, 3)])
        engine.snake.direction = Direction.LEFT
        engine.advance()
        frame = engine.snapshot()
        assert frame.run_state is RunState.GAME_OVER
        surface = make_terminal()
        render_end_screen(surface, frame)
        assert surface.text == ["GAME OVER!", "Final Length: 3", "Press 'q' to quit"]
        assert surface.cells[(5, 1)] is Glyph.BODY

    def test_victory_screen(self, make_terminal):
        engine = _engine()
        path = [(1, c) for c in range(1, 21)] + [(2, c) for c in range(20, 1, -1)]
        engine.snake.body = deque(reversed(path))
        engine.snake.direction = Direction.LEFT
        engine.food.position = (2, 1)
        engine.advance()
        surface = make_terminal()
        render_end_screen(surface, engine.snapshot())
        assert surface.text == ["YOU WIN!", "Length: 40/40", "Press 'q' to quit"]

    def test_status_line(self):
        assert status_line(_engine().snapshot()) == "Length: 3/40"
