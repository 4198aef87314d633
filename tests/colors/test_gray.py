import pytest

from chromapix.colors import gray


def test_new_clamps():
    assert gray.new(447) == 255
    assert gray.new(-3) == 0
    assert gray.new(1.5) == 1.0
    assert gray.new(0.25) == 0.25


def test_gray_pc():
    assert gray.gray_pc(50) == 0.5
    assert gray.gray_pc(50, "byte") == 128
    assert gray.gray_pc(150) == 1.0


def test_dark():
    assert gray.dark(gray.WHITE_BYTE) == 128
    assert gray.dark(100) == 50
    assert gray.dark(0.8) == pytest.approx(0.4)


def test_pale():
    assert gray.pale(gray.BLACK_BYTE) == 128
    assert gray.pale(255) == 255
    assert gray.pale(0.5) == 0.75


def test_lerp():
    assert gray.lerp(0.2, 0.0, 0.9) == 0.2
    assert gray.lerp(0.2, 1.0, 0.9) == 0.9
    assert gray.lerp(0.0, 0.25, 1.0) == 0.25


def test_to_col3():
    assert gray.to_col3(gray.GRAY_BYTE) == (128, 128, 128)
    assert gray.to_col3(0.5) == (0.5, 0.5, 0.5)
