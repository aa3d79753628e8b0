from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Iterable, Optional

from rushhour.rh_exceptions import InvalidConfiguration

BOARD_SIZE = 6
HORIZONTAL = "H"
VERTICAL = "V"

TARGET_NAME = "R"


@dataclass(frozen=True)
class Vehicle:
    """
    One rigid vehicle on the board.

    (row, col) is the head cell, i.e. the top-left one. Only the position ever
    changes during a search; orientation and length are fixed.
    """

    orient: str
    length: int
    row: int
    col: int
    is_target: bool = False

    def moved(self, delta: int) -> "Vehicle":
        if self.orient == HORIZONTAL:
            return replace(self, col=self.col + delta)
        return replace(self, row=self.row + delta)


# A configuration is a tuple of vehicles; the index of a vehicle is its identity.
Configuration = tuple[Vehicle, ...]


def in_bounds(row: int, col: int, n: int = BOARD_SIZE) -> bool:
    return 0 <= row < n and 0 <= col < n


def cells_of(vehicle: Vehicle) -> list[tuple[int, int]]:
    cells = []
    for k in range(vehicle.length):
        rr = vehicle.row + (k if vehicle.orient == VERTICAL else 0)
        cc = vehicle.col + (k if vehicle.orient == HORIZONTAL else 0)
        cells.append((rr, cc))
    return cells


def _to_vehicle(item) -> Vehicle:
    if isinstance(item, Vehicle):
        return item
    if isinstance(item, dict):
        return Vehicle(
            orient=item["orient"],
            length=int(item["length"]),
            row=int(item["row"]),
            col=int(item["col"]),
            is_target=bool(item.get("is_target", item.get("isTarget", False))),
        )
    if isinstance(item, (tuple, list)) and len(item) in (4, 5):
        orient, length, row, col = item[:4]
        is_target = bool(item[4]) if len(item) == 5 else False
        return Vehicle(orient, int(length), int(row), int(col), is_target)
    raise InvalidConfiguration(f"Cannot read a vehicle from {item!r}")


def as_configuration(vehicles: Iterable) -> Configuration:
    """
    Normalise vehicle descriptors into a configuration tuple.

    Accepts Vehicle objects, dicts with orient/length/row/col/isTarget keys,
    or (orient, length, row, col[, is_target]) tuples.
    """
    return tuple(_to_vehicle(v) for v in vehicles)


def state_key(config: Configuration) -> tuple:
    """
    Canonical key of a configuration.

    One (orient, length, row, col) tuple per vehicle, in configuration order.
    The target flag is left out: the target index is fixed for a whole search.
    """
    return tuple((v.orient, v.length, v.row, v.col) for v in config)


def find_target(config: Configuration) -> Optional[int]:
    targets = [i for i, v in enumerate(config) if v.is_target]
    if len(targets) > 1:
        raise InvalidConfiguration(f"More than one target vehicle: indices {targets}")
    return targets[0] if targets else None


def occupancy(config: Configuration, n: int = BOARD_SIZE) -> list[list[Optional[int]]]:
    """N x N grid holding the index of the vehicle in each cell, or None."""
    occ: list[list[Optional[int]]] = [[None] * n for _ in range(n)]
    for idx, vehicle in enumerate(config):
        for r, c in cells_of(vehicle):
            if in_bounds(r, c, n):
                occ[r][c] = idx
    return occ


def vehicle_names(config: Configuration) -> list[str]:
    """Display letters: the target is 'R', the rest get A, B, C, ... skipping R."""
    letters = (chr(code) for code in range(ord("A"), ord("Z") + 1) if chr(code) != TARGET_NAME)
    names = []
    for vehicle in config:
        if vehicle.is_target:
            names.append(TARGET_NAME)
        else:
            names.append(next(letters, "?"))
    return names


def board_grid(config: Configuration, n: int = BOARD_SIZE) -> list[list[str]]:
    names = vehicle_names(config)
    return [
        [names[idx] if idx is not None else "." for idx in row]
        for row in occupancy(config, n)
    ]


def board_to_str(board: list[list[str]]) -> str:
    return "\n".join("".join(row) for row in board)


def snapshot(config: Configuration, n: int = BOARD_SIZE) -> str:
    """ ASCII snapshot to visualize the board. """
    return "\n".join(" ".join(row) for row in board_grid(config, n))


def validate(config: Configuration, n: int = BOARD_SIZE) -> None:
    """
    Check the board invariants the search engine assumes.

    The engine never calls this; it is meant for whatever builds the
    configuration (a file loader, an editor) before handing it to a solver.
    """
    seen: dict[tuple[int, int], int] = {}
    for idx, v in enumerate(config):
        if v.orient not in (HORIZONTAL, VERTICAL):
            raise InvalidConfiguration("orientation must be 'H' or 'V' for vehicle %d" % idx)
        if v.length not in (2, 3):
            raise InvalidConfiguration("vehicle length must be 2 or 3 for vehicle %d" % idx)

        for r, c in cells_of(v):
            if not in_bounds(r, c, n):
                raise InvalidConfiguration("Vehicle %d out of bounds at (%d,%d)" % (idx, r, c))
            if (r, c) in seen:
                raise InvalidConfiguration(
                    "Overlap at (%d,%d) between vehicles %d and %d" % (r, c, seen[(r, c)], idx)
                )
            seen[(r, c)] = idx

    if find_target(config) is None:
        raise InvalidConfiguration("No target vehicle marked")
