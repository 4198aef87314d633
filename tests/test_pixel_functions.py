import pytest

from chromapix.colors import rgb, rgba
from chromapix.errors import ContractViolation
from chromapix.pixel_format import PixelFormat
from chromapix.pixel_functions import compile_pipeline


def _swap(col):
    return col[2], col[1], col[0]


def test_single_stage():
    src, fun, dst = compile_pipeline([("rgb", rgb.dark, None)])
    assert src == PixelFormat.RGB
    assert dst == PixelFormat.RGB
    assert fun((255, 100, 0)) == (128, 50, 0)


def test_chain_tracks_formats():
    stages = [
        ("rgb", rgb.pale, None),
        ("rgb", _swap, "bgr"),
        ("bgr", lambda col: rgba.new_col4(col, 255, "bgra"), "bgra"),
    ]
    src, fun, dst = compile_pipeline(stages)
    assert src == PixelFormat.RGB
    assert dst == PixelFormat.BGRA
    assert fun((255, 0, 0)) == (128, 128, 255, 255)


def test_stages_run_in_order():
    calls = []
    stages = [
        ("gray", lambda c: calls.append("first") or c, None),
        ("gray", lambda c: calls.append("second") or c, None),
    ]
    _, fun, _ = compile_pipeline(stages)
    assert fun(10) == 10
    assert calls == ["first", "second"]


def test_empty_pipeline():
    with pytest.raises(ContractViolation):
        compile_pipeline([])


def test_broken_chain():
    with pytest.raises(ContractViolation):
        compile_pipeline([("rgb", _swap, "bgr"), ("rgb", rgb.dark, None)])


def test_stage_not_callable():
    with pytest.raises(ContractViolation):
        compile_pipeline([("rgb", "dark", None)])
