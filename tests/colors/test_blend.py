import pytest

from chromapix.colors import mean_blend, blend
from chromapix.errors import ContractViolation


def test_plain_mean():
    assert mean_blend([(1.0, 0.0, 0.0), (0.0, 0.0, 1.0)]) == (0.5, 0.0, 0.5)
    assert blend([(255, 0, 0), (0, 0, 255)]) == (128, 0, 128)


def test_mixed_representations():
    assert mean_blend([(255, 255, 255), (0.0, 0.0, 0.0)]) == (0.5, 0.5, 0.5)


def test_gray_levels():
    assert mean_blend([0.0, 1.0, 0.5]) == 0.5
    assert blend([0, 255]) == 128


def test_weighted():
    result = mean_blend([(0.25, (1.0, 0.0, 0.0)), (0.75, (0.0, 0.0, 1.0))])
    assert result == pytest.approx((0.25, 0.0, 0.75))
    assert blend([(0.25, 255), (0.75, 0)]) == 64


def test_weighted_sum_is_clamped():
    assert mean_blend([(1.0, (1.0, 0.5, 0.0)), (1.0, (1.0, 0.75, 0.0))]) == (1.0, 1.0, 0.0)


def test_empty():
    with pytest.raises(ContractViolation):
        mean_blend([])
    with pytest.raises(ContractViolation):
        blend([])


def test_arity_mismatch():
    with pytest.raises(ContractViolation):
        mean_blend([(1.0, 0.0, 0.0), 0.5])
    with pytest.raises(ContractViolation):
        mean_blend([(1.0, 0.0, 0.0, 1.0), (1.0, 0.0, 0.0, 1.0)])
