import random
from pathlib import Path
from typing import List, NamedTuple, Union

import tsplib95


Number = Union[int, float]


class Location(NamedTuple):
    x: Number
    y: Number


def random_location(rng: random.Random, x_max: int, y_max: int) -> Location:
    """Uniform integer location in [-x_max, x_max] x [-y_max, y_max]."""
    return Location(rng.randint(-x_max, x_max), rng.randint(-y_max, y_max))


def random_locations(rng: random.Random, num_locations: int, x_max: int, y_max: int) -> List[Location]:
    return [random_location(rng, x_max, y_max) for _ in range(num_locations)]


def load_locations(path: Union[str, Path]) -> List[Location]:
    """
    Read the NODE_COORD_SECTION of a TSPLIB file as a point set, in node order.
    """
    problem = tsplib95.load(str(path))
    coords = problem.node_coords
    if not coords:
        raise ValueError(f"{path} has no node coordinates (type={problem.type}).")
    locations = []
    for node in sorted(coords):
        xy = coords[node]
        if len(xy) < 2:
            raise ValueError(f"Node {node} in {path} has fewer than 2 coordinates.")
        locations.append(Location(xy[0], xy[1]))
    return locations
