import logging
from typing import Optional

from rushhour.moves import Move, apply_move
from rushhour.rh_exceptions import InvalidMove, VehicleNotFound
from rushhour.rh_puzzle import HORIZONTAL, Configuration, as_configuration, find_target, in_bounds, occupancy
from rushhour.rh_solver import is_goal

logger = logging.getLogger(__name__)


def _as_move(m) -> Optional[Move]:
    if isinstance(m, Move):
        return m
    if isinstance(m, dict):
        idx = m.get("vehicle_index", m.get("vehicleIndex"))
        delta = m.get("delta")
        # bool is an int subclass; floats and strings are not steps
        if not all(isinstance(v, int) and not isinstance(v, bool) for v in (idx, delta)):
            return None
        return Move(idx, delta)
    return None


def check_move(config: Configuration, move: Move) -> None:
    """Raise if move is not a legal single-cell step for config."""
    if not 0 <= move.vehicle_index < len(config):
        raise VehicleNotFound(f"Vehicle {move.vehicle_index} not found on the board.")
    if move.delta not in (-1, 1):
        raise InvalidMove(f"Vehicle {move.vehicle_index} cannot move by {move.delta}; steps are one cell.")

    car = config[move.vehicle_index]
    if car.orient == HORIZONTAL:
        r, c = (car.row, car.col - 1) if move.delta < 0 else (car.row, car.col + car.length)
    else:
        r, c = (car.row - 1, car.col) if move.delta < 0 else (car.row + car.length, car.col)

    if not in_bounds(r, c):
        raise InvalidMove(f"Vehicle {move.vehicle_index} cannot move by {move.delta}; out of bounds.")
    if occupancy(config)[r][c] is not None:
        raise InvalidMove(f"Vehicle {move.vehicle_index} cannot move by {move.delta}; path blocked.")


def validate_solution(initial, moves, min_moves: Optional[int] = None) -> tuple[bool, str]:
    """
    Replay moves from initial and report whether they free the target.

    Returns (valid, label). With min_moves given, a valid solution is labelled
    OPTIMAL or NOT_OPTIMAL; without it, SOLVED.
    """
    sim = as_configuration(initial)
    target = find_target(sim)
    if target is None:
        return False, "MISSING_TARGET"

    steps = 0
    for i, m in enumerate(moves, 1):
        move = _as_move(m)
        if move is None:
            logger.info("move %d is not a move: %r", i, m)
            return False, "TYPE_ERROR"
        try:
            check_move(sim, move)
        except VehicleNotFound as e:
            logger.info("move %d vehicle not found: %s", i, e)
            return False, "VEHICLE_NOT_FOUND"
        except InvalidMove as e:
            logger.info("move %d invalid: %s", i, e)
            return False, "INVALID_MOVE"
        sim = apply_move(sim, move)
        steps = i

    if not is_goal(sim, target):
        return False, "UNSOLVED"

    if min_moves is None:
        return True, "SOLVED"

    if steps != min_moves:
        return True, "NOT_OPTIMAL"

    return True, "OPTIMAL"
