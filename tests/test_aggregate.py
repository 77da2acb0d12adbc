import pytest

from ekit.aggregate import max_value, min_value, sum_values


@pytest.mark.parametrize("values, want", [([1], 1), ([2, 3, 1], 3)])
def test_max_value(values, want):
    assert max_value(values) == want


@pytest.mark.parametrize("values", [[], ()])
def test_max_value_empty_raises(values):
    with pytest.raises(ValueError):
        max_value(values)


@pytest.mark.parametrize("values, want", [([3], 3), ([3, 1, 2], 1)])
def test_min_value(values, want):
    assert min_value(values) == want


@pytest.mark.parametrize("values", [[], ()])
def test_min_value_empty_raises(values):
    with pytest.raises(ValueError):
        min_value(values)


@pytest.mark.parametrize(
    "values, want", [([], 0), ([1], 1), ([1, 2, 3], 6)]
)
def test_sum_values(values, want):
    assert sum_values(values) == want


@pytest.mark.parametrize("kind", [int, float])
def test_numeric_kinds(kind):
    values = [kind(1), kind(2), kind(3)]
    assert max_value(values) == kind(3)
    assert min_value(values) == kind(1)
    assert sum_values(values) == kind(6)


def test_examples():
    assert sum_values([1, 2, 3]) == 6
    assert sum_values([]) == 0
    assert min_value([1, 2, 3]) == 1
    assert max_value([1, 2, 3]) == 3


def test_accepts_generator():
    assert max_value(x for x in [4, 9, 2]) == 9