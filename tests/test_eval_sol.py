from __future__ import annotations

import pytest

from rushhour.eval_sol import check_move, validate_solution
from rushhour.moves import Move
from rushhour.rh_exceptions import InvalidMove, VehicleNotFound
from rushhour.rh_puzzle import Vehicle

BLOCKED_B = (
    Vehicle("H", 2, 2, 0, True),
    Vehicle("V", 2, 1, 3),
)

SOLUTION = [Move(1, -1)] + [Move(0, 1)] * 4


def test_optimal_and_not_optimal_labels():
    assert validate_solution(BLOCKED_B, SOLUTION, min_moves=5) == (True, "OPTIMAL")
    assert validate_solution(BLOCKED_B, SOLUTION, min_moves=4) == (True, "NOT_OPTIMAL")
    assert validate_solution(BLOCKED_B, SOLUTION) == (True, "SOLVED")


def test_moves_as_dicts():
    moves = [{"vehicleIndex": 1, "delta": -1}] + [{"vehicle_index": 0, "delta": 1}] * 4
    assert validate_solution(BLOCKED_B, moves) == (True, "SOLVED")


def test_failure_labels():
    assert validate_solution(BLOCKED_B, SOLUTION[:3]) == (False, "UNSOLVED")
    assert validate_solution(BLOCKED_B, [Move(0, 1), Move(0, 1)]) == (False, "INVALID_MOVE")
    assert validate_solution(BLOCKED_B, [Move(7, 1)]) == (False, "VEHICLE_NOT_FOUND")
    assert validate_solution(BLOCKED_B, ["R right 4"]) == (False, "TYPE_ERROR")
    assert validate_solution((Vehicle("H", 2, 2, 0),), []) == (False, "MISSING_TARGET")
    assert validate_solution(BLOCKED_B, [{"vehicle_index": 1, "delta": "up"}]) == (False, "TYPE_ERROR")
    assert validate_solution(BLOCKED_B, [{"vehicle_index": 1, "delta": None}]) == (False, "TYPE_ERROR")
    assert validate_solution(BLOCKED_B, [{"vehicle_index": True, "delta": 1}]) == (False, "TYPE_ERROR")


def test_fractional_delta_is_not_a_step():
    moves = [{"vehicle_index": 1, "delta": -1.5}] + [{"vehicle_index": 0, "delta": 1}] * 4
    assert validate_solution(BLOCKED_B, moves) == (False, "TYPE_ERROR")


def test_moves_from_a_generator():
    assert validate_solution(BLOCKED_B, (m for m in SOLUTION), min_moves=5) == (True, "OPTIMAL")
    assert validate_solution(BLOCKED_B, iter(SOLUTION), min_moves=4) == (True, "NOT_OPTIMAL")


def test_check_move_messages():
    with pytest.raises(InvalidMove, match="out of bounds"):
        check_move(BLOCKED_B, Move(0, -1))
    with pytest.raises(InvalidMove, match="blocked"):
        check_move(((Vehicle("H", 2, 2, 1, True),) + BLOCKED_B[1:]), Move(0, 1))
    with pytest.raises(InvalidMove, match="one cell"):
        check_move(BLOCKED_B, Move(1, 2))
    with pytest.raises(VehicleNotFound):
        check_move(BLOCKED_B, Move(-1, 1))
    check_move(BLOCKED_B, Move(1, 1))
