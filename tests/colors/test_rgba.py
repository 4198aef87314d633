import pytest

from chromapix.colors import rgba
from chromapix.errors import ContractViolation


@pytest.mark.parametrize(
    "alpha, expected",
    [(True, 255), (False, 0), (1, 255), (0, 0), (128, 128), (0.5, 128), (1.0, 255)],
)
def test_a1b(alpha, expected):
    assert rgba.a1b(alpha) == expected


@pytest.mark.parametrize(
    "alpha, expected",
    [(True, 1.0), (False, 0.0), (1, 1.0), (0, 0.0), (51, 0.2), (1.5, 1.0), (0.25, 0.25)],
)
def test_a1f(alpha, expected):
    assert rgba.a1f(alpha) == pytest.approx(expected)


@pytest.mark.parametrize("bad", [300, -1, "opaque", None])
def test_illegal_alpha(bad):
    with pytest.raises(ContractViolation):
        rgba.a1b(bad)
    with pytest.raises(ContractViolation):
        rgba.a1f(bad)


def test_new_col4_clamps():
    assert rgba.new_col4b(300, 1, 2, -3) == (255, 1, 2, 0)
    assert rgba.new_col4f(1.5, 0.5, 0.0, -1.0) == (1.0, 0.5, 0.0, 0.0)


def test_new_col4():
    assert rgba.new_col4((255, 0, 0), 0.5) == (255, 0, 0, 128)
    assert rgba.new_col4((1.0, 0.0, 0.0), 255, "argb") == (1.0, 1.0, 0.0, 0.0)
    assert rgba.new_col4((0, 0, 255), True, "abgr") == (255, 0, 0, 255)


def test_new_col4_needs_four_channel_format():
    with pytest.raises(ContractViolation):
        rgba.new_col4((1, 2, 3), 0.5, "rgb")


def test_to_col3():
    assert rgba.to_col3((255, 128, 0, 64)) == (255, 128, 0)
    assert rgba.to_col3((64, 0, 128, 255), "abgr") == (0, 128, 255)


def test_hex():
    assert rgba.to_hex((255, 128, 0, 64)) == "#FF800040"
    assert rgba.to_hex((64, 255, 128, 0), "argb") == "#FF800040"
    assert rgba.to_hex((1.0, 0.5, 0.0, 0.25)) == "#FF800040"
    assert rgba.from_hex("#FF800040") == (255, 128, 0, 64)
    assert rgba.from_hex("#FF800040", "bgra") == (0, 128, 255, 64)
    assert rgba.from_hex("#FF000033", format_type="float") == pytest.approx((1.0, 0.0, 0.0, 0.2))


def test_from_hex_rejects():
    with pytest.raises(ContractViolation):
        rgba.from_hex("#FF8000")


def test_css():
    assert rgba.to_css((255, 128, 0, 128)) == "rgba(255 128 0 0.502)"
    assert rgba.to_css((1.0, 0.5, 0.0, 0.25)) == "rgba(255 128 0 0.25)"
    assert rgba.to_css((255, 255, 0, 0), "argb") == "rgba(255 0 0 1.0)"


def test_equals():
    assert rgba.equals((0.5, 0.5, 0.5, 1.0), (0.5, 0.5, 0.5, 1.0 - 1e-8))
    assert not rgba.equals((0.5, 0.5, 0.5, 1.0), (0.5, 0.5, 0.5, 0.9))
