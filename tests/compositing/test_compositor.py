import pytest

from chromapix.compositing import (
    BlendEquation as E,
    BlendFactor as F,
    BlendMode,
    alpha_blend,
    REPLACE,
    ALPHA_OVER,
    ADDITIVE,
    MULTIPLY,
    SCREEN,
    DARKEN,
    LIGHTEN,
)
from chromapix.errors import ContractViolation, MissingBlendConstant

HALF_CONST = BlendMode(
    E.ADD, E.ADD,
    F.CONST_ALPHA, F.ONE_MINUS_CONST_ALPHA, None,
    F.ONE, F.ZERO, 0.5,
)


def test_constant_alpha_mix():
    assert alpha_blend((255, 0, 255), "rgb", (0, 0, 0), "rgb", HALF_CONST) == (128, 0, 128)


def test_raw_tuple_mode():
    mode = ("add", "add", "const_alpha", "one_minus_const_alpha", None, "one", "zero", 0.5)
    assert alpha_blend((255, 0, 255), "rgb", (0, 0, 0), "rgb", mode) == (128, 0, 128)


def test_replace_is_identity_on_src():
    assert alpha_blend((10, 20, 30, 40), "rgba", (1, 2, 3, 4), "rgba") == (10, 20, 30, 40)
    assert alpha_blend((10, 20, 30, 40), "rgba", (1, 2, 3, 4), "rgba", REPLACE) == (10, 20, 30, 40)


def test_opaque_over():
    assert alpha_blend((0, 255, 0, 255), "rgba", (255, 0, 0), "rgb", ALPHA_OVER) == (0, 255, 0)


def test_half_transparent_over():
    assert alpha_blend((255, 0, 0, 128), "rgba", (0, 0, 255), "rgb", ALPHA_OVER) == (128, 0, 127)
    assert alpha_blend((255, 0, 0, 128), "rgba", (0, 0, 255, 255), "rgba", ALPHA_OVER) == (128, 0, 127, 255)


def test_other_channel_orders():
    assert alpha_blend((128, 255, 0, 0), "argb", (0, 0, 255), "rgb", ALPHA_OVER) == (128, 0, 127)
    assert alpha_blend((0, 0, 255, 128), "bgra", (255, 0, 0), "bgr", ALPHA_OVER) == (127, 0, 128)


def test_rgb_source_is_opaque():
    assert alpha_blend((0, 0, 255), "rgb", (255, 0, 0, 0), "rgba", ALPHA_OVER) == (0, 0, 255, 255)


def test_gray_formats():
    assert alpha_blend((255, 128), "gray_alpha", 0, "gray", ALPHA_OVER) == 128
    assert alpha_blend(255, "gray", (0, 0), "alpha_gray", ALPHA_OVER) == (255, 255)


def test_darken_lighten():
    src, dst = (200, 50, 100), (100, 150, 100)
    assert alpha_blend(src, "rgb", dst, "rgb", DARKEN) == (100, 50, 100)
    assert alpha_blend(src, "rgb", dst, "rgb", LIGHTEN) == (200, 150, 100)
    assert alpha_blend((200, 50, 100, 30), "rgba", (100, 150, 100, 90), "rgba", DARKEN) == (100, 50, 100, 30)
    assert alpha_blend((200, 50, 100, 30), "rgba", (100, 150, 100, 90), "rgba", LIGHTEN) == (200, 150, 100, 90)


def test_subtract_clamps():
    mode = BlendMode(E.SUBTRACT, E.ADD, F.ONE, F.ONE)
    assert alpha_blend((100, 100, 100), "rgb", (200, 0, 50), "rgb", mode) == (0, 100, 50)
    mode = BlendMode(E.REVERSE_SUBTRACT, E.ADD, F.ONE, F.ONE)
    assert alpha_blend((100, 100, 100), "rgb", (200, 0, 50), "rgb", mode) == (100, 0, 0)


def test_additive_clamps():
    assert alpha_blend((200, 100, 50), "rgb", (100, 100, 50), "rgb", ADDITIVE) == (255, 200, 100)


def test_multiply():
    assert alpha_blend((255, 255, 0), "rgb", (128, 128, 128), "rgb", MULTIPLY) == (128, 128, 0)


def test_screen_float():
    result = alpha_blend((0.5, 0.0, 1.0), "rgb", (0.5, 0.5, 0.5), "rgb", SCREEN)
    assert result == pytest.approx((0.75, 0.5, 1.0))
    assert all(isinstance(c, float) for c in result)


def test_output_follows_destination_representation():
    assert alpha_blend((255, 0, 0), "rgb", (0.0, 0.0, 0.0), "rgb") == (1.0, 0.0, 0.0)
    assert alpha_blend((1.0, 0.0, 0.0), "rgb", (0, 0, 0), "rgb") == (255, 0, 0)


def test_constant_color():
    mode = BlendMode(E.ADD, E.ADD, F.CONST_COLOR, F.ZERO, (255, 0, 0), F.ONE, F.ZERO)
    assert alpha_blend((255, 255, 255), "rgb", (0, 0, 0), "rgb", mode) == (255, 0, 0)


def test_color_factor_on_alpha_side():
    mode = BlendMode(E.ADD, E.ADD, F.ONE, F.ZERO, None, F.SRC_COLOR, F.ZERO)
    assert alpha_blend((255, 0, 0, 128), "rgba", (0, 0, 0, 0), "rgba", mode) == (255, 0, 0, 64)


def test_zero_zero():
    mode = BlendMode(E.ADD, E.ADD, F.ZERO, F.ZERO, None, F.ZERO, F.ZERO)
    assert alpha_blend((255, 255, 255, 255), "rgba", (9, 9, 9, 9), "rgba", mode) == (0, 0, 0, 0)


@pytest.mark.parametrize(
    "src, src_format, dst, dst_format",
    [
        (7, "index", (0, 0, 0), "rgb"),
        ((0, 0, 0), "rgb", 128, "alpha"),
        ((255, 0, 0), "rgb", (0, 0, 255), "bgr"),
        ((255, 0, 0), "rgb", 0, "gray"),
        ((255, 0, 0), "rgba", (0, 0, 255), "rgb"),
    ],
)
def test_rejected_inputs(src, src_format, dst, dst_format):
    with pytest.raises(ContractViolation):
        alpha_blend(src, src_format, dst, dst_format, ALPHA_OVER)


def test_constant_color_size():
    mode = BlendMode(E.ADD, E.ADD, F.CONST_COLOR, F.ZERO, (1.0, 0.0, 0.0), F.ONE, F.ZERO)
    with pytest.raises(ContractViolation):
        alpha_blend(255, "gray", 0, "gray", mode)


def test_raw_tuple_missing_constant():
    mode = ("add", "add", "const_color", "zero", None, "one", "zero", None)
    with pytest.raises(MissingBlendConstant):
        alpha_blend((1, 2, 3), "rgb", (4, 5, 6), "rgb", mode)


def test_raw_tuple_wrong_length():
    with pytest.raises(ContractViolation):
        alpha_blend((1, 2, 3), "rgb", (4, 5, 6), "rgb", ("add", "add"))


def test_integer_one_constant_alpha_is_opaque():
    mode = BlendMode(E.ADD, E.ADD, F.CONST_ALPHA, F.ONE_MINUS_CONST_ALPHA, None, F.ONE, F.ZERO, 1)
    assert alpha_blend((255, 0, 0), "rgb", (0, 0, 255), "rgb", mode) == (255, 0, 0)


def test_min_max_ignore_constant_color_size():
    mode = BlendMode(E.MIN, E.MIN, F.ONE, F.ZERO, (1.0, 0.0, 0.0), F.ONE, F.ZERO)
    assert alpha_blend(200, "gray", 100, "gray", mode) == 100


@pytest.mark.parametrize(
    "equation, src_alpha, dst_alpha, expected",
    [
        (E.SUBTRACT, 200, 50, 150),
        (E.SUBTRACT, 50, 200, 0),
        (E.REVERSE_SUBTRACT, 50, 200, 150),
        (E.REVERSE_SUBTRACT, 200, 50, 0),
    ],
)
def test_alpha_equation_subtract(equation, src_alpha, dst_alpha, expected):
    mode = BlendMode(E.ADD, equation, F.ONE, F.ZERO, None, F.ONE, F.ONE)
    result = alpha_blend((10, 20, 30, src_alpha), "rgba", (0, 0, 0, dst_alpha), "rgba", mode)
    assert result == (10, 20, 30, expected)
