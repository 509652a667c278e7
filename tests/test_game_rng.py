import pytest

from game_rng import GameRNG


def test_get_int_is_inclusive():
    rng = GameRNG(seed=3)
    values = {rng.get_int(4, 7) for _ in range(400)}
    assert values == {4, 5, 6, 7}


def test_get_int_single_value_range():
    assert GameRNG(seed=1).get_int(2, 2) == 2


def test_get_int_rejects_reversed_range():
    with pytest.raises(ValueError):
        GameRNG(seed=1).get_int(3, 2)


def test_seeded_shuffle_is_reproducible():
    first, second = list(range(10)), list(range(10))
    GameRNG(seed=9).shuffle(first)
    GameRNG(seed=9).shuffle(second)
    assert first == second
    assert sorted(first) == list(range(10))


def test_shuffle_keeps_tuples_intact():
    directions = [(1, 0), (-1, 0), (0, 1), (0, -1)]
    GameRNG(seed=2).shuffle(directions)
    assert sorted(directions) == sorted([(1, 0), (-1, 0), (0, 1), (0, -1)])
    assert all(isinstance(d, tuple) for d in directions)


def test_coin_flip_extremes():
    rng = GameRNG(seed=4)
    assert rng.coin_flip(heads_probability=1.0) == "heads"
    assert rng.coin_flip(heads_probability=0.0) == "tails"
    assert rng.coin_flip(num_flips=3, heads_probability=1.0) == ["heads"] * 3
    with pytest.raises(ValueError):
        rng.coin_flip(heads_probability=1.5)


def test_unseeded_instance_draws_a_seed():
    rng = GameRNG()
    assert 0 <= rng.initial_seed < 2**32
