import math
import random
from dataclasses import dataclass
from typing import List, Sequence

from .data import Location


def distance(a: Location, b: Location) -> float:
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2)


def tour_cost(locations: Sequence[Location]) -> float:
    """
    Cost used by the search: every consecutive edge, with the last edge
    (second-to-last -> last) counted twice instead of closing the loop.
    """
    n = len(locations)
    if n < 2:
        raise ValueError(f"A tour needs at least 2 locations, got {n}.")
    total = 0.0
    for i in range(n - 1):
        total += distance(locations[i], locations[i + 1])
    total += distance(locations[n - 2], locations[n - 1])
    return total


def closed_tour_length(locations: Sequence[Location]) -> float:
    dist = 0.0
    n = len(locations)
    for i in range(n):
        dist += distance(locations[i], locations[(i + 1) % n])
    return float(dist)


@dataclass(eq=False)
class Tour:
    locations: List[Location]
    total_distance: float


def make_tour(locations: Sequence[Location]) -> Tour:
    locations = list(locations)
    return Tour(locations=locations, total_distance=tour_cost(locations))


def shuffle(locations: Sequence[Location], rng: random.Random) -> List[Location]:
    result = list(locations)
    rng.shuffle(result)
    return result
