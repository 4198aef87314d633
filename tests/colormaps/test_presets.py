import pytest

from chromapix.colormaps import lookup, validate, presets


@pytest.mark.parametrize(
    "build, top",
    [
        (presets.dark_red, (255, 0, 0)),
        (presets.dark_green, (0, 255, 0)),
        (presets.dark_blue, (0, 0, 255)),
        (presets.dark_magenta, (255, 0, 255)),
    ],
)
def test_dark_ramps(build, top):
    cmap = build()
    assert validate(cmap) == 255
    assert lookup(cmap, 0) == (0, 0, 0)
    assert lookup(cmap, 255) == top


@pytest.mark.parametrize(
    "build, top",
    [
        (presets.sat_red, (255, 0, 0)),
        (presets.sat_green, (0, 255, 0)),
        (presets.sat_blue, (0, 0, 255)),
        (presets.sat_magenta, (255, 0, 255)),
    ],
)
def test_sat_ramps(build, top):
    cmap = build()
    assert lookup(cmap, 0) == (255, 255, 255)
    assert lookup(cmap, 255) == top


def test_dark_ramp_midpoint():
    assert lookup(presets.dark_red(), 128) == (128, 0, 0)


def test_blue_white_red():
    cmap = presets.blue_white_red()
    assert validate(cmap) == 255
    assert lookup(cmap, 0) == (64, 64, 191)
    assert lookup(cmap, 127) == (255, 255, 255)
    assert lookup(cmap, 255) == (191, 64, 64)
