from __future__ import annotations

import enum
import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterable, Optional

from rushhour import config as rh_config
from rushhour.frontier import Frontier
from rushhour.moves import Move, generate_moves
from rushhour.rh_puzzle import (
    BOARD_SIZE,
    HORIZONTAL,
    Configuration,
    as_configuration,
    find_target,
    state_key,
)

logger = logging.getLogger(__name__)


class SearchStatus(enum.Enum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"              # every reachable state was seen, no exit
    BUDGET_EXCEEDED = "budget_exceeded"  # gave up; solvability unknown
    MISSING_TARGET = "missing_target"


@dataclass
class SearchResult:
    status: SearchStatus
    moves: Optional[list[Move]] = None
    nodes_expanded: int = 0

    @property
    def solved(self) -> bool:
        return self.status is SearchStatus.SOLVED

    @property
    def num_moves(self) -> Optional[int]:
        return len(self.moves) if self.moves is not None else None


@dataclass
class _Node:
    key: tuple
    config: Configuration
    g: int


def heuristic(config: Configuration, target_index: Optional[int], n: int = BOARD_SIZE) -> int:
    """
    Cells left between the target's head and its exit position.

    Blockers are ignored and every move shifts the target by at most one cell,
    so this never overestimates.
    """
    if target_index is None:
        return 0
    t = config[target_index]
    if t.orient == HORIZONTAL:
        return max(0, (n - t.length) - t.col)
    return max(0, (n - t.length) - t.row)


def is_goal(config: Configuration, target_index: Optional[int], n: int = BOARD_SIZE) -> bool:
    """Goal: the target's tail touches the exit edge (right for H, bottom for V)."""
    if target_index is None:
        return False
    t = config[target_index]
    if t.orient == HORIZONTAL:
        return t.col + t.length == n
    return t.row + t.length == n


def reconstruct(came_from: dict[tuple, tuple[tuple, Move]], key: tuple) -> list[Move]:
    moves = []
    cur = key
    while cur in came_from:
        prev_key, move = came_from[cur]
        moves.append(move)
        cur = prev_key
    moves.reverse()
    return moves


def _budget(max_nodes: Optional[int]) -> int:
    return rh_config.max_nodes() if max_nodes is None else max_nodes


def solve_astar(initial: Iterable, max_nodes: Optional[int] = None) -> SearchResult:
    """
    Find a shortest sequence of single-cell moves that frees the target.

    Args:
        initial: the start configuration (anything as_configuration accepts).
        max_nodes: how many nodes may be popped before giving up; defaults to RH_MAX_NODES.

    Returns:
        SearchResult; moves is set only when status is SOLVED.
    """
    start = as_configuration(initial)
    budget = _budget(max_nodes)
    target = find_target(start)

    if target is None:
        logger.warning("No target vehicle in configuration, not searching")
        return SearchResult(SearchStatus.MISSING_TARGET)

    logger.debug("A* start: %d vehicles, budget %d", len(start), budget)

    frontier = Frontier()
    start_key = state_key(start)
    best_g = {start_key: 0}
    came_from: dict[tuple, tuple[tuple, Move]] = {}
    frontier.push(heuristic(start, target), _Node(start_key, start, 0))
    nodes = 0

    while True:
        if not frontier:
            result = SearchResult(SearchStatus.EXHAUSTED, nodes_expanded=nodes)
            break

        node = frontier.pop()
        nodes += 1
        if nodes > budget:
            result = SearchResult(SearchStatus.BUDGET_EXCEEDED, nodes_expanded=budget)
            break

        # superseded by a cheaper path pushed later
        if node.g > best_g[node.key]:
            continue

        if is_goal(node.config, target):
            result = SearchResult(SearchStatus.SOLVED, reconstruct(came_from, node.key), nodes)
            break

        g = node.g + 1
        for move, neighbor in generate_moves(node.config):
            key = state_key(neighbor)
            if key not in best_g or g < best_g[key]:
                best_g[key] = g
                came_from[key] = (node.key, move)
                frontier.push(g + heuristic(neighbor, target), _Node(key, neighbor, g))

    logger.info(
        "A* finished: %s after %d nodes (%d states seen)",
        result.status.value, result.nodes_expanded, len(best_g),
    )
    return result


def solve_bfs(initial: Iterable, max_nodes: Optional[int] = None) -> SearchResult:
    """Breadth-first reference solver over the same single-cell moves."""
    start = as_configuration(initial)
    budget = _budget(max_nodes)
    target = find_target(start)

    if target is None:
        logger.warning("No target vehicle in configuration, not searching")
        return SearchResult(SearchStatus.MISSING_TARGET)

    start_key = state_key(start)
    q = deque([(start_key, start)])
    visited = {start_key}
    came_from: dict[tuple, tuple[tuple, Move]] = {}
    nodes = 0

    while True:
        if not q:
            result = SearchResult(SearchStatus.EXHAUSTED, nodes_expanded=nodes)
            break

        key, state = q.popleft()
        nodes += 1
        if nodes > budget:
            result = SearchResult(SearchStatus.BUDGET_EXCEEDED, nodes_expanded=budget)
            break

        if is_goal(state, target):
            result = SearchResult(SearchStatus.SOLVED, reconstruct(came_from, key), nodes)
            break

        for move, neighbor in generate_moves(state):
            nb_key = state_key(neighbor)
            if nb_key in visited:
                continue
            visited.add(nb_key)
            came_from[nb_key] = (key, move)
            q.append((nb_key, neighbor))

    logger.info("BFS finished: %s after %d nodes", result.status.value, result.nodes_expanded)
    return result


def solve(initial: Iterable, method: str = "astar", max_nodes: Optional[int] = None) -> SearchResult:
    if method == "astar":
        return solve_astar(initial, max_nodes)
    elif method == "bfs":
        return solve_bfs(initial, max_nodes)
    else:
        raise ValueError("Unknown method. Choose from: astar, bfs.")
