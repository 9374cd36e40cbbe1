from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .tour import Tour


@dataclass
class PopulationStats:
    best: float
    mean: float
    worst: float
    size: int


def summarize(population: Sequence[Tour]) -> PopulationStats:
    if not population:
        return PopulationStats(best=float("inf"), mean=float("inf"), worst=float("inf"), size=0)
    costs = np.fromiter((t.total_distance for t in population), dtype=float, count=len(population))
    return PopulationStats(
        best=float(costs.min()),
        mean=float(costs.mean()),
        worst=float(costs.max()),
        size=len(population),
    )
