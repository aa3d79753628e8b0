import argparse
import logging
import os

from rushhour import config as rh_config
from rushhour.analysis import plot_solution_lengths, run_batch, summarize
from rushhour.data_loader import data_loader, load_cars_file
from rushhour.moves import to_slides
from rushhour.playback import play
from rushhour.rh_exceptions import RushHourException
from rushhour.rh_puzzle import snapshot, validate
from rushhour.rh_solver import solve

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="rushhour", description="Rush Hour A* solver")
    sub = ap.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("solve", help="solve a single exported `cars = [...]` board")
    sp.add_argument("file", help="text file with the exported cars list")
    sp.add_argument("--method", default="astar", choices=["astar", "bfs"])
    sp.add_argument("--max-nodes", type=int, default=None, help="node budget (default: RH_MAX_NODES)")
    sp.add_argument("--slides", action="store_true", help="print moves folded into slides")
    sp.add_argument("--play", action="store_true", help="replay the solution frame by frame")
    sp.add_argument("--delay", type=float, default=None, help="seconds between frames when playing")

    bp = sub.add_parser("batch", help="solve every puzzle of a JSON dataset")
    bp.add_argument("file", help="JSON list of {name, cars, min_moves}")
    bp.add_argument("--method", default="astar", choices=["astar", "bfs"])
    bp.add_argument("--max-nodes", type=int, default=None)
    bp.add_argument("--out", default="solutions.csv", help="CSV file for the per-puzzle results")
    bp.add_argument("--plot", default=None, help="PNG file for the solution length chart")

    return ap


def cmd_solve(args) -> int:
    cars = load_cars_file(args.file)
    validate(cars)

    print(snapshot(cars))
    print()

    result = solve(cars, method=args.method, max_nodes=args.max_nodes)
    if not result.solved:
        print(f"No solution: {result.status.value} after {result.nodes_expanded} nodes")
        return 1

    print(f"Solved in {result.num_moves} moves ({result.nodes_expanded} nodes expanded)")
    if args.slides:
        for slide in to_slides(cars, result.moves):
            print(slide)
    else:
        for move in result.moves:
            print({"vehicle_index": move.vehicle_index, "delta": move.delta})

    if args.play:
        print()
        play(cars, result.moves, delay=args.delay)
    return 0


def cmd_batch(args) -> int:
    puzzles = data_loader(args.file)
    df = run_batch(puzzles, method=args.method, max_nodes=args.max_nodes)

    df.to_csv(args.out, index=False)
    print(f"Saved results: {os.path.abspath(args.out)}")
    print(summarize(df).to_string())

    if args.plot:
        plot_solution_lengths(df, args.plot)
        print(f"Saved plot: {os.path.abspath(args.plot)}")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=rh_config.log_level(),
        format="%(asctime)s %(levelname)s: %(message)s",
    )

    try:
        if args.command == "solve":
            return cmd_solve(args)
        return cmd_batch(args)
    except RushHourException as e:
        logger.error("%s", e)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
