"""Tests for the input / tick / render cycle of a canvas session."""

from __future__ import annotations

import pytest

from pixelcanvas import config
from pixelcanvas.core.engine import CanvasSession, CanvasState, Settings, handle_input, render, tick
from pixelcanvas.core.grid import PixelGrid
from pixelcanvas.core.models import (
    BrushChanged,
    BrushKind,
    ButtonPressed,
    ButtonReleased,
    ColorsChanged,
    DisplayChanged,
    ExitRequested,
    GridResized,
    MouseButton,
    PointerMoved,
    ResetRequested,
    ViewportResized,
)

WHITE = (255, 255, 255)
GREEN = (10, 200, 30)
DEFAULT = config.DEFAULT_CELL_COLOR


def _session(grid_size: int = 16) -> CanvasSession:
    """Session whose cells are 10 units wide, pointer at the origin (cell 8, 8)."""
    side = 10.0 * grid_size
    session = CanvasSession(
        settings=Settings(grid_size=grid_size, primary_color=WHITE, secondary_color=GREEN),
        state=CanvasState(viewport=(side, side)),
    )
    tick(session)
    return session


def _painted(session: CanvasSession):
    grid = session.grid
    return {
        (x, y)
        for x in range(grid.size)
        for y in range(grid.size)
        if grid.get(x, y) != DEFAULT
    }


def test_first_tick_computes_positions() -> None:
    session = _session()

    assert not session.grid.positions_dirty
    assert session.grid.edge_length == pytest.approx(10.0)
    assert session.grid.is_blank()


def test_nothing_is_painted_without_a_button() -> None:
    session = _session()
    handle_input(session, PointerMoved(5.0, 5.0))

    tick(session)

    assert session.grid.is_blank()


def test_left_button_paints_primary_color() -> None:
    session = _session()
    handle_input(session, PointerMoved(5.0, 5.0))
    handle_input(session, ButtonPressed(MouseButton.LEFT))

    tick(session)

    assert _painted(session) == {(8, 8)}
    assert session.grid.get(8, 8) == WHITE


def test_right_button_paints_secondary_color() -> None:
    session = _session()
    handle_input(session, PointerMoved(-5.0, 15.0))
    handle_input(session, ButtonPressed(MouseButton.RIGHT))

    tick(session)

    assert _painted(session) == {(7, 9)}
    assert session.grid.get(7, 9) == GREEN


def test_painting_wins_when_both_buttons_are_held() -> None:
    session = _session()
    handle_input(session, ButtonPressed(MouseButton.LEFT))
    handle_input(session, ButtonPressed(MouseButton.RIGHT))

    tick(session)

    assert session.grid.get(8, 8) == WHITE


def test_held_button_paints_every_tick() -> None:
    session = _session()
    handle_input(session, ButtonPressed(MouseButton.LEFT))
    tick(session)

    handle_input(session, PointerMoved(25.0, 5.0))
    tick(session)

    assert _painted(session) == {(8, 8), (10, 8)}


def test_release_stops_painting() -> None:
    session = _session()
    handle_input(session, ButtonPressed(MouseButton.LEFT))
    tick(session)
    handle_input(session, ButtonReleased(MouseButton.LEFT))

    handle_input(session, PointerMoved(25.0, 5.0))
    tick(session)

    assert _painted(session) == {(8, 8)}


def test_middle_button_is_ignored() -> None:
    session = _session()
    handle_input(session, ButtonPressed(MouseButton.MIDDLE))

    tick(session)

    assert not session.state.drawing
    assert not session.state.erasing
    assert session.grid.is_blank()


def test_square_brush_stamp() -> None:
    session = _session()
    handle_input(session, BrushChanged(size=3))
    handle_input(session, ButtonPressed(MouseButton.LEFT))

    tick(session)

    assert _painted(session) == {(x, y) for x in (7, 8, 9) for y in (7, 8, 9)}


def test_circle_brush_piles_up_at_corner() -> None:
    """Off-grid offsets are clamped onto the edge, never dropped or raised."""
    session = _session()
    handle_input(session, BrushChanged(kind=BrushKind.CIRCLE, size=4))
    handle_input(session, PointerMoved(-1000.0, -1000.0))
    handle_input(session, ButtonPressed(MouseButton.LEFT))

    tick(session)

    assert _painted(session) == {(0, 0)}


def test_square_brush_off_grid_paints_nothing() -> None:
    session = _session()
    handle_input(session, PointerMoved(-1000.0, 5.0))
    handle_input(session, ButtonPressed(MouseButton.LEFT))

    tick(session)

    assert session.grid.is_blank()


@pytest.mark.parametrize("new_size", [16, 8, 64])
def test_resize_is_destructive(new_size: int) -> None:
    session = _session()
    handle_input(session, ButtonPressed(MouseButton.LEFT))
    tick(session)
    handle_input(session, ButtonReleased(MouseButton.LEFT))

    handle_input(session, GridResized(new_size))
    tick(session)

    assert session.grid.size == new_size
    assert session.grid.is_blank()
    assert session.grid.edge_length == pytest.approx(160.0 / new_size)


def test_reset_is_applied_before_painting() -> None:
    session = _session()
    handle_input(session, ButtonPressed(MouseButton.LEFT))
    tick(session)
    handle_input(session, PointerMoved(25.0, 5.0))
    handle_input(session, ResetRequested())

    tick(session)

    assert not session.state.should_reset
    assert _painted(session) == {(10, 8)}


def test_resize_clamps_brush_size() -> None:
    session = _session()
    handle_input(session, BrushChanged(size=10))

    handle_input(session, GridResized(4))

    assert session.brush.size == 4


@pytest.mark.parametrize("event", [
    GridResized(0),
    GridResized(65),
    BrushChanged(size=0),
    BrushChanged(size=17),
    ColorsChanged(primary=(256, 0, 0)),
    ViewportResized(0, 100),
])
def test_out_of_range_events_raise(event) -> None:
    session = _session()
    with pytest.raises(ValueError):
        handle_input(session, event)


def test_unknown_event_raises() -> None:
    with pytest.raises(TypeError):
        handle_input(_session(), "paint")


def test_viewport_resize_recomputes_positions() -> None:
    session = _session()
    handle_input(session, ViewportResized(320.0, 480.0))

    assert session.state.should_calc_positions
    tick(session)

    assert session.grid.edge_length == pytest.approx(20.0)
    assert session.grid.centers[0] == pytest.approx(-150.0)


def test_colors_and_display_settings() -> None:
    session = _session()
    handle_input(session, ColorsChanged(primary=(1, 2, 3)))
    handle_input(session, DisplayChanged(display_fps=False, dark_mode=False))

    assert session.settings.primary_color == (1, 2, 3)
    assert session.settings.secondary_color == GREEN
    assert not session.settings.display_fps
    assert not session.settings.dark_mode


def test_exit_request_sets_flag() -> None:
    session = _session()
    handle_input(session, ExitRequested())

    assert session.state.should_exit


def test_session_adopts_given_grid_size() -> None:
    session = CanvasSession(grid=PixelGrid(8))

    assert session.settings.grid_size == 8


def test_render_blank_canvas() -> None:
    session = _session()

    frame = render(session)

    assert frame.background == config.BACKGROUND_COLOR
    assert len(frame.rects) == 16
    assert len(frame.overlay) == 1
    assert frame.overlay[0].width == pytest.approx(10.0)


def test_render_does_not_mutate_session() -> None:
    session = _session()
    handle_input(session, BrushChanged(kind=BrushKind.CIRCLE, size=5))
    handle_input(session, ButtonPressed(MouseButton.LEFT))
    tick(session)
    before = session.grid.colors.copy()

    first = render(session)
    second = render(session)

    assert first == second
    assert (session.grid.colors == before).all()
