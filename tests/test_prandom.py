from itertools import islice

import pytest

from crumble.common import max_value_of
from crumble.prandom import PRandom


def test_source_sequence_runs_in_range():
    pr = PRandom()
    values = [pr.next(), pr.seed(123), pr.next(), pr.rseed(), pr.next()]
    for value in values:
        assert 0 <= value <= max_value_of("u64")


@pytest.mark.parametrize("index, expected", [(0, 0.755701), (1, 0.766208), (2, 0.781467), (3, 0.724838), (4, 0.730469)])
def test_seeded_float_sequence(index, expected):
    pr = PRandom(123)
    values = [pr.next_float(0.7, 0.8) for _ in range(5)]
    assert values[index] - expected < 0.00001
    assert 0.69999 <= values[index] <= 0.80001


def test_same_seed_same_sequence():
    a = PRandom(42)
    b = PRandom(42)
    assert [a.next() for _ in range(10)] == [b.next() for _ in range(10)]


def test_different_seeds_differ():
    a = PRandom(1)
    b = PRandom(2)
    assert [a.next() for _ in range(4)] != [b.next() for _ in range(4)]


def test_seed_returns_first_value_constructor_discards():
    p = PRandom(0)
    first = p.seed(123)
    q = PRandom(123)
    assert p.next() == q.next()
    r = PRandom(5)
    assert r.seed(123) == first


def test_seed_wraps_to_u64():
    a = PRandom(-1)
    b = PRandom(max_value_of("u64"))
    assert a.next() == b.next()


def test_rseed_advances_shared_stream():
    pr = PRandom(7)
    first = pr.rseed()
    second = pr.rseed()
    assert first != second


def test_next_float_unit_range():
    pr = PRandom(99)
    for _ in range(200):
        assert 0.0 <= pr.next_float() <= 1.0


def test_next_float_single_argument_is_max():
    scaled = PRandom(9).next_float(2.0)
    unit = PRandom(9).next_float()
    assert scaled == unit * 2.0
    assert 0.0 <= scaled <= 2.0


def test_next_float_min_max_range():
    pr = PRandom(3)
    for _ in range(200):
        assert -5.0 <= pr.next_float(-5.0, 5.0) <= 5.0


def test_next_float_too_many_arguments():
    with pytest.raises(TypeError):
        PRandom(1).next_float(0.0, 1.0, 2.0)


def test_iteration_matches_next():
    a = PRandom(11)
    b = PRandom(11)
    assert list(islice(a, 5)) == [b.next() for _ in range(5)]
    assert next(a) == b.next()
    assert iter(a) is a