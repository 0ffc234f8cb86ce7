from cslib.randomness import (
    random_chance,
    random_integer,
    random_real,
    set_random_seed,
)


def test_random_integer_stays_in_inclusive_range():
    set_random_seed(1)
    values = {random_integer(1, 6) for _ in range(2000)}
    assert values == {1, 2, 3, 4, 5, 6}


def test_random_integer_single_value_range():
    assert all(random_integer(4, 4) == 4 for _ in range(50))


def test_random_integer_negative_range():
    set_random_seed(2)
    values = [random_integer(-3, -1) for _ in range(500)]
    assert min(values) >= -3
    assert max(values) <= -1


def test_random_real_half_open():
    set_random_seed(3)
    values = [random_real(2.0, 3.0) for _ in range(1000)]
    assert all(2.0 <= v < 3.0 for v in values)


def test_random_chance_extremes():
    assert not any(random_chance(0) for _ in range(200))
    assert all(random_chance(1) for _ in range(200))


def test_seed_makes_sequence_repeatable():
    set_random_seed(42)
    first = [random_integer(0, 1000) for _ in range(20)]
    set_random_seed(42)
    second = [random_integer(0, 1000) for _ in range(20)]
    assert first == second


def test_different_seeds_differ():
    set_random_seed(10)
    first = [random_real(0, 1) for _ in range(10)]
    set_random_seed(11)
    second = [random_real(0, 1) for _ in range(10)]
    assert first != second