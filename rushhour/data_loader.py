import json

from rushhour.rh_puzzle import as_configuration
from rushhour.textualize import parse_cars

def data_loader(file_path):
    """
    Load all puzzles from a single JSON file into a dictionary.

    Each puzzle looks like {"name": 1, "cars": [["H", 2, 2, 0], ...], "min_moves": 7};
    the first car is the target.

    Args:
        file_path (str): Path to the JSON file containing all puzzles.

    Returns:
        dict: {puzzle_name: {"id", "cars", "min_moves"}} with "cars" a configuration tuple
    """
    with open(file_path, "r", encoding="utf-8") as file:
        puzzles_list = json.load(file)

    # Convert list of puzzles to dictionary {name: puzzle}
    puzzles = {
        puzzle["name"]: {
            "id": puzzle["name"],
            "cars": as_configuration(
                (*car[:4], i == 0) for i, car in enumerate(puzzle["cars"])
            ),
            "min_moves": puzzle.get("min_moves"),
        }
        for puzzle in puzzles_list
    }

    return puzzles

def load_cars_file(file_path):
    """Read a text file holding an exported `cars = [...]` list."""
    with open(file_path, "r", encoding="utf-8") as file:
        return parse_cars(file.read())
