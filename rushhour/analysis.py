import time
from typing import Optional

import pandas as pd
from matplotlib import pyplot as plt
from tqdm import tqdm

from rushhour.rh_solver import SearchStatus, solve

COLUMNS = ["name", "status", "moves", "nodes_expanded", "seconds", "min_moves", "optimal"]


def run_batch(puzzles: dict, method: str = "astar", max_nodes: Optional[int] = None) -> pd.DataFrame:
    """Solve every puzzle from data_loader and collect one row per puzzle."""
    rows = []
    for name, puzzle in tqdm(puzzles.items(), desc="Solving", unit="puzzle"):
        start = time.perf_counter()
        result = solve(puzzle["cars"], method=method, max_nodes=max_nodes)
        end = time.perf_counter()

        min_moves = puzzle.get("min_moves")
        optimal = None
        if result.solved and min_moves is not None:
            optimal = result.num_moves == min_moves

        rows.append({
            "name": name,
            "status": result.status.value,
            "moves": result.num_moves,
            "nodes_expanded": result.nodes_expanded,
            "seconds": end - start,
            "min_moves": min_moves,
            "optimal": optimal,
        })

    return pd.DataFrame(rows, columns=COLUMNS)


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    """Puzzle count, mean nodes and mean time per outcome."""
    return (
        df.groupby("status")
        .agg(puzzles=("name", "count"), mean_nodes=("nodes_expanded", "mean"), mean_seconds=("seconds", "mean"))
        .reindex([s.value for s in SearchStatus])
        .dropna(how="all")
    )


def plot_solution_lengths(df: pd.DataFrame, fname: str) -> None:
    solved = df[df["status"] == SearchStatus.SOLVED.value]
    counts = solved["moves"].astype(int).value_counts().sort_index()

    plt.figure()
    plt.bar(counts.index, counts.values)
    plt.xlabel("Solution Length (single-cell moves)")
    plt.ylabel("Puzzles")
    plt.title(f"Solved Puzzles by Solution Length ({len(solved)}/{len(df)} solved)")
    plt.tight_layout()
    plt.savefig(fname, bbox_inches='tight')
    plt.close()
