import numpy as np
from numpy.typing import NDArray

from .numbers import unit

## RGB to HSL conversions

def rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to unit HSL.

    Hue is normalized to [0, 1) rather than degrees.
    Achromatic colors (r == g == b) get hue 0.0 and saturation 0.0;
    hue carries no information there, 0.0 is the convention.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (h, s, l) in [0, 1]
    """
    vmax = max(r, g, b)
    vmin = min(r, g, b)
    lightness = (vmax + vmin) / 2.0

    if vmax == vmin:
        return 0.0, 0.0, lightness

    delta = vmax - vmin
    if lightness < 0.5:
        saturation = delta / (vmax + vmin)
    else:
        saturation = delta / (2.0 - vmax - vmin)

    # ties between channels resolve to red, then green
    if vmax == r:
        hue = (g - b) / delta + (6.0 if g < b else 0.0)
    elif vmax == g:
        hue = (b - r) / delta + 2.0
    else:
        hue = (r - g) / delta + 4.0

    return hue / 6.0, saturation, lightness


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to unit HSL.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,1), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    vmax = np.maximum.reduce([r, g, b])
    vmin = np.minimum.reduce([r, g, b])
    delta = vmax - vmin

    lightness = (vmax + vmin) / 2.0

    saturation = np.zeros(out_shape)
    hue = np.zeros(out_shape)
    chroma = delta > 0

    low = chroma & (lightness < 0.5)
    high = chroma & ~(lightness < 0.5)
    saturation[low] = delta[low] / (vmax[low] + vmin[low])
    saturation[high] = delta[high] / (2.0 - vmax[high] - vmin[high])

    mask_r = chroma & (vmax == r)
    mask_g = chroma & ~mask_r & (vmax == g)
    mask_b = chroma & ~mask_r & ~mask_g

    hue[mask_r] = (g[mask_r] - b[mask_r]) / delta[mask_r] + np.where(g[mask_r] < b[mask_r], 6.0, 0.0)
    hue[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2.0
    hue[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4.0

    return np.stack([hue / 6.0, saturation, lightness], axis=-1)

## HSL to RGB conversions

def hue_to_channel(p: float, q: float, t: float) -> float:
    """One RGB channel from the HSL intermediates p, q and a hue offset t."""
    if t < 0.0:
        t += 1.0
    elif t >= 1.0:
        t -= 1.0

    if t < 1 / 6:
        return p + (q - p) * 6.0 * t
    if t < 3 / 6:
        return q
    if t < 4 / 6:
        return p + (q - p) * (4 / 6 - t) * 6.0
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert unit HSL to unit RGB.

    Args:
        h: Hue in [0, 1)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    if s == 0.0:
        return l, l, l

    q = l * (1.0 + s) if l < 0.5 else l + s - l * s
    p = 2.0 * l - q
    return (
        hue_to_channel(p, q, h + 1 / 3),
        hue_to_channel(p, q, h),
        hue_to_channel(p, q, h - 1 / 3),
    )


def _np_hue_to_channel(p: NDArray, q: NDArray, t: NDArray) -> NDArray:
    t = np.where(t < 0.0, t + 1.0, t)
    t = np.where(t >= 1.0, t - 1.0, t)
    return np.select(
        [t < 1 / 6, t < 3 / 6, t < 4 / 6],
        [p + (q - p) * 6.0 * t, q, p + (q - p) * (4 / 6 - t) * 6.0],
        default=p,
    )


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert unit HSL to unit RGB.

    Args:
        h: array-like or scalar, hue in [0, 1)
        s: array-like or scalar, saturation in [0, 1]
        l: array-like or scalar, lightness in [0, 1]

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h = np.asarray(h, dtype=float)
    s = np.asarray(s, dtype=float)
    l = np.asarray(l, dtype=float)

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    q = np.where(l < 0.5, l * (1.0 + s), l + s - l * s)
    p = 2.0 * l - q

    r = _np_hue_to_channel(p, q, h + 1 / 3)
    g = _np_hue_to_channel(p, q, h)
    b = _np_hue_to_channel(p, q, h - 1 / 3)

    achromatic = s == 0.0
    r = np.where(achromatic, l, r)
    g = np.where(achromatic, l, g)
    b = np.where(achromatic, l, b)

    return np.stack([r, g, b], axis=-1)

## CSS integer HSL format

def hsl_to_unit(hsl: tuple[int, int, int]) -> tuple[float, float, float]:
    """CSS integer HSL (degrees 0-360, percent 0-100, percent 0-100) to unit HSL."""
    h, s, l = hsl
    return (
        max(0, min(h, 360)) / 360.0,
        max(0, min(s, 100)) / 100.0,
        max(0, min(l, 100)) / 100.0,
    )


def unit_to_hsl(hsl: tuple[float, float, float]) -> tuple[int, int, int]:
    """Unit HSL to CSS integer HSL; values are truncated, not rounded."""
    h, s, l = hsl
    return int(360.0 * unit(h)), int(100.0 * unit(s)), int(100.0 * unit(l))
