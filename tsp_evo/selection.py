from typing import List, Sequence

from .tour import Tour


def get_smallest(population: Sequence[Tour], k: int) -> List[Tour]:
    """
    Return the ``k`` lowest-cost tours of ``population`` (the same objects,
    not copies), cheapest first.

    Each round scans the whole population for the cheapest tour whose
    position has not been picked yet. The running minimum only moves on a
    strictly smaller cost, so among equal costs the lowest index wins.
    """
    if k < 0 or k > len(population):
        raise ValueError(f"Cannot select {k} tours from a population of {len(population)}.")
    chosen: List[int] = []
    taken = set()
    for _ in range(k):
        index = None
        for j, tour in enumerate(population):
            if j in taken:
                continue
            if index is None or tour.total_distance < population[index].total_distance:
                index = j
        chosen.append(index)
        taken.add(index)
    return [population[i] for i in chosen]
