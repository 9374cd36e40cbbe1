import math

import pytest

from tsp_evo.data import Location
from tsp_evo.evaluation import summarize
from tsp_evo.tour import Tour


def test_summarize_costs():
    population = [Tour([Location(0, 0), Location(1, 0)], c) for c in (3.0, 1.0, 2.0)]
    stats = summarize(population)
    assert stats.best == 1.0
    assert stats.worst == 3.0
    assert stats.mean == pytest.approx(2.0)
    assert stats.size == 3


def test_summarize_empty():
    stats = summarize([])
    assert math.isinf(stats.best) and stats.size == 0
