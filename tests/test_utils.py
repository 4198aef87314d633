import numpy as np

from chromapix.utils import (
    get_dimension,
    as_components,
    from_components,
    round_half_up,
    is_close,
    np_unit_clamp,
    value_or_default,
)

def test_none_dimension():
    assert get_dimension(None) == 0

def test_sized_dimension():
    assert get_dimension([1, 2, 3]) == 3
    assert get_dimension((1, 2)) == 2
    assert get_dimension((255, 0, 0, 128)) == 4

def test_non_sized_dimension():
    assert get_dimension(42) == 1
    assert get_dimension(0.5) == 1

def test_components():
    assert as_components(7) == (7,)
    assert as_components((1, 2, 3)) == (1, 2, 3)
    assert as_components([0.5, 0.25]) == (0.5, 0.25)
    assert from_components((7,)) == 7
    assert from_components((1, 2)) == (1, 2)

def test_round_half_up():
    assert round_half_up(127.5) == 128
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2
    assert round_half_up(0.0) == 0

def test_is_close():
    assert is_close(0.5, 0.5 + 1e-7)
    assert not is_close(0.5, 0.5 + 1e-5)
    assert is_close(0.5, 0.6, tol=0.2)

def test_np_unit_clamp():
    result = np_unit_clamp(np.array([-1.0, 0.25, 1.5]))
    assert result.dtype == np.float64
    assert result.tolist() == [0.0, 0.25, 1.0]

def test_value_or_default():
    assert value_or_default(None, 1.0) == 1.0
    assert value_or_default(0.0, 1.0) == 0.0
    assert value_or_default(0, 255) == 0
