import random

import pytest

from tsp_evo.data import Location
from tsp_evo.operators import make_children, mutate
from tsp_evo.tour import make_tour, tour_cost


class CountingRandom(random.Random):
    def __init__(self, seed=None):
        super().__init__(seed)
        self.draws = 0

    def randrange(self, *args, **kwargs):
        self.draws += 1
        return super().randrange(*args, **kwargs)


def _locations(n):
    return [Location(i, (i * 7) % 5) for i in range(n)]


def test_mutate_rate_one_draws_a_target_per_position():
    rng = CountingRandom(5)
    locs = _locations(12)
    result = mutate(locs, 1.0, rng)
    assert rng.draws == 12
    assert result is locs
    assert sorted(result) == sorted(_locations(12))


def test_mutate_rate_zero_is_identity():
    rng = CountingRandom(5)
    locs = _locations(12)
    assert mutate(locs, 0.0, rng) == _locations(12)
    assert rng.draws == 0


def test_mutate_rejects_bad_rate():
    with pytest.raises(ValueError):
        mutate(_locations(3), 1.5, random.Random(0))


def test_make_children_size_and_zero_rate_copies():
    rng = random.Random(2)
    elites = [make_tour(_locations(6)), make_tour(list(reversed(_locations(6))))]
    children = make_children(elites, 4, 0.0, rng)
    assert len(children) == 8
    for i, child in enumerate(children):
        parent = elites[i // 4]
        assert child.locations == parent.locations
        assert child.locations is not parent.locations
        assert child.total_distance == parent.total_distance


def test_children_do_not_alias_parent_or_siblings():
    rng = random.Random(9)
    elite = make_tour(_locations(20))
    snapshot = list(elite.locations)
    children = make_children([elite], 5, 1.0, rng)
    assert elite.locations == snapshot
    assert len({id(c.locations) for c in children}) == 5
    for child in children:
        assert sorted(child.locations) == sorted(snapshot)
        assert child.total_distance == pytest.approx(tour_cost(child.locations))
