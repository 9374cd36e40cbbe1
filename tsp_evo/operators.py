import random
from typing import List, Sequence

from .data import Location
from .tour import Tour, make_tour


def _check_rate(rate: float) -> None:
    if not 0.0 <= rate <= 1.0:
        raise ValueError(f"Mutation rate must be in [0, 1], got {rate}.")


def mutate(locations: List[Location], rate: float, rng: random.Random) -> List[Location]:
    """
    Swap mutation, applied in place: each position independently, with
    probability ``rate``, trades places with a uniformly drawn position.
    Drawing the position itself is a no-op and is not retried.
    """
    _check_rate(rate)
    length = len(locations)
    for i in range(length):
        if rng.random() < rate:
            point = rng.randrange(length)
            if point != i:
                locations[i], locations[point] = locations[point], locations[i]
    return locations


def make_children(
    elites: Sequence[Tour], children_per_elite: int, rate: float, rng: random.Random
) -> List[Tour]:
    if children_per_elite < 0:
        raise ValueError(f"children_per_elite must be >= 0, got {children_per_elite}.")
    _check_rate(rate)
    children: List[Tour] = []
    for elite in elites:
        for _ in range(children_per_elite):
            # Each child owns a fresh list; mutating it must not touch the elite.
            child = elite.locations[:]
            children.append(make_tour(mutate(child, rate, rng)))
    return children
