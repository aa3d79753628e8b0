from __future__ import annotations

import pytest

from rushhour.moves import Move
from rushhour.playback import play, replay
from rushhour.rh_exceptions import InvalidMove
from rushhour.rh_puzzle import Vehicle

BLOCKED_B = (
    Vehicle("H", 2, 2, 0, True),
    Vehicle("V", 2, 1, 3),
)

SOLUTION = [Move(1, -1)] + [Move(0, 1)] * 4


def test_replay_yields_every_frame():
    frames = list(replay(BLOCKED_B, SOLUTION))
    assert len(frames) == len(SOLUTION) + 1
    assert frames[0] == (0, None, BLOCKED_B)
    assert frames[1][2][1] == Vehicle("V", 2, 0, 3)
    assert frames[-1][2][0] == Vehicle("H", 2, 2, 4, True)


def test_replay_stops_on_illegal_step():
    frames = replay(BLOCKED_B, [Move(0, 1), Move(0, 1)])
    next(frames)
    next(frames)
    with pytest.raises(InvalidMove):
        next(frames)


def test_play_renders_snapshots_without_sleeping(monkeypatch):
    monkeypatch.setattr("rushhour.playback.time.sleep", lambda s: pytest.fail("slept"))
    lines = []
    final = play(BLOCKED_B, SOLUTION, delay=0, out=lines.append)

    assert final[0] == Vehicle("H", 2, 2, 4, True)
    assert lines[0] == "Start:"
    assert "Move 1: A up" in lines
    assert "Move 5: R right" in lines
    assert lines[-2].splitlines()[2] == ". . . . R R"


def test_play_uses_configured_delay(monkeypatch):
    slept = []
    monkeypatch.setenv("RH_PLAYBACK_DELAY", "0.25")
    monkeypatch.setattr("rushhour.playback.time.sleep", slept.append)
    play(BLOCKED_B, SOLUTION[:2], out=lambda line: None)
    assert slept == [0.25, 0.25, 0.25]
