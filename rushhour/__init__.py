from rushhour.moves import Move, apply_move, apply_moves, generate_moves, to_slides
from rushhour.rh_exceptions import InvalidConfiguration, InvalidMove, RushHourException, VehicleNotFound
from rushhour.rh_puzzle import BOARD_SIZE, HORIZONTAL, VERTICAL, Vehicle, as_configuration, snapshot, state_key
from rushhour.rh_solver import SearchResult, SearchStatus, heuristic, is_goal, solve, solve_astar, solve_bfs
