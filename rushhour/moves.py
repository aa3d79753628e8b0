from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from rushhour.rh_puzzle import (
    BOARD_SIZE,
    HORIZONTAL,
    Configuration,
    Vehicle,
    in_bounds,
    occupancy,
    vehicle_names,
)


@dataclass(frozen=True)
class Move:
    """A single-cell step of one vehicle along its own axis (delta is -1 or +1)."""

    vehicle_index: int
    delta: int

    def reversed(self) -> "Move":
        return Move(self.vehicle_index, -self.delta)


def direction_name(vehicle: Vehicle, delta: int) -> str:
    if vehicle.orient == HORIZONTAL:
        return "right" if delta > 0 else "left"
    return "down" if delta > 0 else "up"


def generate_moves(config: Configuration, n: int = BOARD_SIZE) -> Iterator[tuple[Move, Configuration]]:
    """
    Yield every (move, neighbor) pair reachable from config in one step.

    Each vehicle is tried in index order, -1 before +1. A slide over several
    cells shows up as several separate single-cell moves.
    """
    occ = occupancy(config, n)

    for idx, car in enumerate(config):
        if car.orient == HORIZONTAL:
            before = (car.row, car.col - 1)
            after = (car.row, car.col + car.length)
        else:
            before = (car.row - 1, car.col)
            after = (car.row + car.length, car.col)

        for delta, (r, c) in ((-1, before), (+1, after)):
            if in_bounds(r, c, n) and occ[r][c] is None:
                move = Move(idx, delta)
                yield move, apply_move(config, move)


def apply_move(config: Configuration, move: Move) -> Configuration:
    """
    Return a new configuration with one vehicle shifted by move.delta.

    No legality check is done here; callers only apply moves they know to be
    legal for this configuration.
    """
    idx = move.vehicle_index
    return config[:idx] + (config[idx].moved(move.delta),) + config[idx + 1:]


def apply_moves(config: Configuration, moves: Iterable[Move]) -> Configuration:
    for move in moves:
        config = apply_move(config, move)
    return config


def to_slides(config: Configuration, moves: Iterable[Move]) -> list[dict[str, str | int]]:
    """
    Fold runs of same-vehicle, same-direction steps into slide dicts.

    Returns [{"name": "B", "direction": "up", "distance": 2}, ...], the move
    format used by the puzzle datasets.
    """
    names = vehicle_names(config)
    slides: list[dict[str, str | int]] = []
    last = None

    for move in moves:
        if move == last:
            slides[-1]["distance"] += 1
            continue
        vehicle = config[move.vehicle_index]
        slides.append({
            "name": names[move.vehicle_index],
            "direction": direction_name(vehicle, move.delta),
            "distance": 1,
        })
        last = move

    return slides
