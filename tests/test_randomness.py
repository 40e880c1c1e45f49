import pytest

from cui_rpg.randomness import generate


def test_results_stay_in_range():
    values = {generate(1, 3) for _ in range(300)}
    assert values <= {1, 2, 3}


def test_all_values_eventually_appear():
    values = {generate(1, 4) for _ in range(1000)}
    assert values == {1, 2, 3, 4}


def test_single_value_range():
    assert generate(7, 7) == 7


def test_empty_range_raises():
    with pytest.raises(ValueError):
        generate(5, 1)