import random

from tsp_evo.data import Location
from tsp_evo.evolutionary import EvolutionConfig, EvolutionarySearch


UNIT_SQUARE = [Location(0, 0), Location(1, 0), Location(1, 1), Location(0, 1)]


def main(seed: int = 7):
    cfg = EvolutionConfig(
        population_size=50,
        num_locations=len(UNIT_SQUARE),
        num_elites=5,
        children_per_elite=5,
        mutation_rate=0.1,
        generations=200,
        random_seed=seed,
    )
    search = EvolutionarySearch(cfg, locations=UNIT_SQUARE, rng=random.Random(seed))
    before = search.best().total_distance
    after = search.run().total_distance
    print(f"before={before:.4f} after={after:.4f}")
    return before, after


if __name__ == "__main__":
    main()
