import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .data import Location, random_locations
from .operators import make_children
from .selection import get_smallest
from .tour import Tour, make_tour, shuffle


@dataclass
class EvolutionConfig:
    population_size: int = 200
    num_locations: int = 10
    x_max: int = 500
    y_max: int = 500
    num_elites: int = 20
    children_per_elite: int = 10
    mutation_rate: float = 0.1
    generations: int = 1000
    report_every: int = 100
    random_seed: Optional[int] = None

    def __post_init__(self):
        if self.population_size < 1:
            raise ValueError("population_size must be at least 1.")
        if self.num_elites < 1:
            raise ValueError("num_elites must be at least 1.")
        if self.num_elites > self.population_size:
            raise ValueError(
                f"num_elites ({self.num_elites}) exceeds population_size ({self.population_size})."
            )
        if self.children_per_elite < 1:
            raise ValueError("children_per_elite must be at least 1.")
        if not 0.0 <= self.mutation_rate <= 1.0:
            raise ValueError("mutation_rate must be in [0, 1].")
        if self.num_locations < 2:
            raise ValueError("num_locations must be at least 2.")
        if self.x_max < 0 or self.y_max < 0:
            raise ValueError("x_max and y_max must be non-negative.")
        if self.generations < 0:
            raise ValueError("generations must be non-negative.")
        if self.report_every < 1:
            raise ValueError("report_every must be at least 1.")


def new_generation(num_tours: int, locations: Sequence[Location], rng: random.Random) -> List[Tour]:
    """Independently shuffled tours over one shared point set."""
    if len(locations) < 2:
        raise ValueError(f"A point set needs at least 2 locations, got {len(locations)}.")
    if num_tours < 1:
        raise ValueError("num_tours must be at least 1.")
    return [make_tour(shuffle(locations, rng)) for _ in range(num_tours)]


class EvolutionarySearch:
    def __init__(
        self,
        config: EvolutionConfig,
        locations: Sequence[Location] = None,
        rng: random.Random = None,
    ):
        self.cfg = config
        self.rng = rng or random.Random(config.random_seed)
        if locations is None:
            locations = random_locations(self.rng, config.num_locations, config.x_max, config.y_max)
        self.locations: List[Location] = list(locations)
        self.population: List[Tour] = new_generation(config.population_size, self.locations, self.rng)
        self.generation = 0

    def step(self) -> None:
        elites = get_smallest(self.population, self.cfg.num_elites)
        best = get_smallest(elites, 1)[0]
        children = make_children(elites, self.cfg.children_per_elite, self.cfg.mutation_rate, self.rng)
        # Elitism: the best tour survives unmutated.
        children.append(best)
        self.population = children
        self.generation += 1

    def best(self) -> Tour:
        return get_smallest(self.population, 1)[0]

    def run(self, callback: Callable[["EvolutionarySearch"], None] = None) -> Tour:
        for i in range(self.cfg.generations):
            if callback is not None and i % self.cfg.report_every == 0:
                callback(self)
            self.step()
        return self.best()
