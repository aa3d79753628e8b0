import time
from typing import Callable, Iterable, Iterator, Optional

from rushhour import config as rh_config
from rushhour.eval_sol import check_move
from rushhour.moves import Move, apply_move, direction_name
from rushhour.rh_puzzle import Configuration, as_configuration, snapshot, vehicle_names


def replay(initial, moves: Iterable[Move]) -> Iterator[tuple[int, Optional[Move], Configuration]]:
    """
    Step through a solution one move at a time.

    Yields (0, None, start) first, then (i, move, configuration after move i).
    An illegal step raises InvalidMove or VehicleNotFound before it is applied.
    """
    state = as_configuration(initial)
    yield 0, None, state
    for i, move in enumerate(moves, 1):
        check_move(state, move)
        state = apply_move(state, move)
        yield i, move, state


def play(
    initial,
    moves: Iterable[Move],
    delay: Optional[float] = None,
    out: Callable[[str], None] = print,
) -> Configuration:
    """Print every frame of a solution, sleeping `delay` seconds between them."""
    delay = rh_config.playback_delay() if delay is None else delay
    start = as_configuration(initial)
    names = vehicle_names(start)
    state = start

    for i, move, state in replay(start, moves):
        if move is None:
            out("Start:")
        else:
            car = state[move.vehicle_index]
            out(f"Move {i}: {names[move.vehicle_index]} {direction_name(car, move.delta)}")
        out(snapshot(state))
        out("")
        if delay > 0:
            time.sleep(delay)

    return state
