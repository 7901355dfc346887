"""GamePlay sessions: move counting, direction moves, and roll tracing."""

from __future__ import annotations

import logging

import pytest

from rollingcubes.engine.gameplay import GamePlay
from rollingcubes.engine.gamestate import GameState
from rollingcubes.models.cube import Cube
from rollingcubes.models.direction import Direction
from rollingcubes.models.tray import PuzzleState, RollEvent


def test_defaults_to_initial_tray() -> None:
    game = GamePlay()
    assert game.state.tray == PuzzleState.default()
    assert game.state.moves == 0
    assert not game.is_won


def test_roll_counts_legal_moves_only() -> None:
    game = GamePlay()
    assert not game.roll(0, 0)
    assert not game.roll(1, 1)
    assert game.state.moves == 0

    assert game.roll(0, 1)
    assert game.state.tray.empty_pos == (0, 1)
    assert game.state.moves == 1


@pytest.mark.parametrize(
    ("direction", "source"),
    [
        (Direction.UP, (2, 1)),
        (Direction.DOWN, (0, 1)),
        (Direction.LEFT, (1, 2)),
        (Direction.RIGHT, (1, 0)),
    ],
)
def test_move_rolls_cube_travelling_in_direction(
    direction: Direction, source: tuple[int, int]
) -> None:
    game = GamePlay()
    cube = game.state.tray.cube_at(*source)
    assert game.move(direction)
    assert game.state.tray.empty_pos == source
    assert game.state.tray.cube_at(1, 1) is cube.roll_to(direction)


def test_move_off_the_edge_is_rejected() -> None:
    game = GamePlay()
    assert game.move(Direction.DOWN)  # empty space moves to (0, 1)
    assert not game.move(Direction.DOWN)
    assert game.state.moves == 1


def test_near_goal_is_won_after_one_move() -> None:
    game = GamePlay(PuzzleState.near_goal())
    assert game.move(Direction.DOWN)
    assert game.is_won
    assert game.state.is_solved


def test_extra_observers_receive_events() -> None:
    events: list[RollEvent] = []
    game = GamePlay(observers=[events.append])
    game.roll(1, 0)
    assert events == [
        RollEvent(1, 0, Direction.RIGHT, Cube.CUBE5, Cube.CUBE5.roll_to(Direction.RIGHT))
    ]


def test_rolls_are_logged(caplog: pytest.LogCaptureFixture) -> None:
    game = GamePlay()
    with caplog.at_level(logging.INFO, logger="rollingcubes"):
        game.roll(0, 1)
    assert "Cube at (0,1) is rolled to down" in caplog.text


def test_game_state_pause_and_resume() -> None:
    state = GameState(PuzzleState.default())
    state.pause()
    frozen = state.elapsed_time
    assert state.elapsed_time == frozen
    state.resume()
    assert state.elapsed_time >= frozen


def test_game_state_counts_direct_rolls() -> None:
    tray = PuzzleState.default()
    state = GameState(tray)
    event = tray.roll_to_empty_space(2, 1)
    assert state.moves == 1
    assert state.last_roll == event

    state.detach()
    tray.roll_to_empty_space(1, 1)
    assert state.moves == 1
    assert state.last_roll == event


# -- shared trays -------------------------------------------------------------


def _roll_lines(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [r.getMessage() for r in caplog.records if "is rolled to" in r.getMessage()]


def test_sessions_sharing_a_tray_log_once(caplog: pytest.LogCaptureFixture) -> None:
    tray = PuzzleState.default()
    first = GamePlay(tray)
    second = GamePlay(tray)
    with caplog.at_level(logging.INFO, logger="rollingcubes"):
        assert second.roll(0, 1)
    assert _roll_lines(caplog) == ["Cube at (0,1) is rolled to down"]
    assert first.state.moves == 1
    assert second.state.moves == 1


def test_close_detaches_session(caplog: pytest.LogCaptureFixture) -> None:
    tray = PuzzleState.default()
    events: list[RollEvent] = []
    game = GamePlay(tray, observers=[events.append])
    game.close()
    game.close()
    assert tray.observers == ()

    with caplog.at_level(logging.INFO, logger="rollingcubes"):
        tray.roll_to_empty_space(0, 1)
    assert _roll_lines(caplog) == []
    assert events == []
    assert game.state.moves == 0
