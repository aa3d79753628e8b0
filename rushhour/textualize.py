import ast
import re

from rushhour.rh_exceptions import InvalidConfiguration
from rushhour.rh_puzzle import Configuration, Vehicle, find_target

# Board export format of the editor:
# cars = [
#   ("H", 2, 2, 0),
#   ("V", 3, 0, 3),
# ]
# Index 0 is always the target.

_PREFIX = re.compile(r"^\s*cars\s*=\s*")


def export_cars(config: Configuration) -> str:
    """Textualize a configuration; the target is moved to index 0."""
    if find_target(config) is None:
        raise InvalidConfiguration("Cannot export a board without a target vehicle")
    ordered = sorted(config, key=lambda v: not v.is_target)
    lines = [f'("{v.orient}", {v.length}, {v.row}, {v.col})' for v in ordered]
    return "cars = [\n  " + ",\n  ".join(lines) + "\n]"


def parse_cars(text: str) -> Configuration:
    """Read an exported cars list back; the first tuple becomes the target."""
    body = _PREFIX.sub("", text.strip(), count=1)
    try:
        raw = ast.literal_eval(body)
    except (ValueError, SyntaxError) as e:
        raise InvalidConfiguration(f"Could not parse cars list: {e}") from e

    if not isinstance(raw, (list, tuple)):
        raise InvalidConfiguration(f"Expected a list of tuples, got {type(raw).__name__}")

    vehicles = []
    for idx, item in enumerate(raw):
        if not isinstance(item, (list, tuple)) or len(item) != 4:
            raise InvalidConfiguration(f"Entry {idx} is not (orient, length, row, col): {item!r}")
        orient, length, row, col = item
        vehicles.append(Vehicle(str(orient), int(length), int(row), int(col), is_target=(idx == 0)))
    return tuple(vehicles)
