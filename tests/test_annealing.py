import random

import pytest

from spatialgo.annealing import (
    CITIES,
    AnnealingResult,
    anneal,
    euclidean,
    main,
    path_length,
    swap_neighbour,
)

SMALL = [(0, 0), (5, 0), (5, 5), (0, 5), (2, 2), (8, 1)]


def test_euclidean():
    assert euclidean((0, 0), (3, 4)) == pytest.approx(5.0)
    assert euclidean((1, 1), (1, 1)) == 0


def test_path_length_is_open_path():
    cities = [(0, 0), (3, 4), (3, 0)]
    expected = euclidean(cities[0], cities[1]) + euclidean(cities[1], cities[2])
    assert path_length([1, 2, 3], cities) == pytest.approx(expected)


def test_path_length_reversed_is_equal():
    order = list(range(1, len(CITIES) + 1))
    assert path_length(order, CITIES) == pytest.approx(path_length(order[::-1], CITIES))


def test_swap_neighbour_keeps_start_and_swaps_two():
    rng = random.Random(1)
    order = list(range(1, 11))
    for _ in range(50):
        new = swap_neighbour(order, rng)
        assert new[0] == 1
        assert sorted(new) == order
        assert sum(a != b for a, b in zip(order, new)) == 2


def test_swap_neighbour_does_not_modify_input():
    order = [1, 2, 3, 4]
    swap_neighbour(order, random.Random(0))
    assert order == [1, 2, 3, 4]


def test_swap_neighbour_too_short():
    with pytest.raises(ValueError):
        swap_neighbour([1, 2], random.Random(0))


def test_anneal_returns_consistent_permutation():
    result = anneal(SMALL, t_start=100.0, t_end=1.0, cooling=0.5, chain_length=50,
                    rng=random.Random(3))
    assert isinstance(result, AnnealingResult)
    assert result.order[0] == 1
    assert sorted(result.order) == list(range(1, len(SMALL) + 1))
    assert result.length == pytest.approx(path_length(result.order, SMALL))


def test_anneal_counts_cooling_steps():
    result = anneal(SMALL, t_start=8.0, t_end=1.0, cooling=0.5, chain_length=1,
                    rng=random.Random(0))
    assert result.cooling_steps == 3


def test_anneal_is_reproducible():
    kwargs = dict(t_start=50.0, t_end=0.5, cooling=0.7, chain_length=30)
    a = anneal(CITIES, rng=random.Random(9), **kwargs)
    b = anneal(CITIES, rng=random.Random(9), **kwargs)
    assert a == b


def test_anneal_low_temperature_never_gets_worse():
    initial = path_length(range(1, len(CITIES) + 1), CITIES)
    result = anneal(CITIES, t_start=1e-9, t_end=1e-10, cooling=0.5, chain_length=500,
                    rng=random.Random(4))
    assert result.length <= initial


@pytest.mark.parametrize("cooling", [0.0, 1.0, 1.5])
def test_anneal_rejects_bad_cooling(cooling):
    with pytest.raises(ValueError):
        anneal(SMALL, cooling=cooling)


def test_main_prints_route(capsys):
    assert main(["--t-start", "10", "--t-end", "1", "--cooling", "0.5",
                 "--chain-length", "20", "--seed", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    route = [int(x) for x in lines[1].split(",")]
    assert route[0] == 1
    assert sorted(route) == list(range(1, len(CITIES) + 1))