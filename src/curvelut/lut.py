"""Evaluate key points into integer lookup tables."""

import logging

import numpy as np

from curvelut.keypoints import CHANNEL_NAMES, KeypointSet, grid_index
from curvelut.spline import second_derivatives, segment_coefficients

logger = logging.getLogger(__name__)

LUT_DTYPE = np.uint16


def identity_lut(bits: int) -> np.ndarray:
    """Return the passthrough table ``LUT[i] == i``."""
    return np.arange(1 << bits, dtype=LUT_DTYPE)


def quantize(values: np.ndarray | float, scale: int) -> np.ndarray:
    """Round normalized values half-up to the grid and clamp to ``[0, scale]``."""
    return np.clip(np.floor(np.asarray(values) * scale + 0.5), 0, scale).astype(
        LUT_DTYPE
    )


def build_lut(keypoints: KeypointSet) -> np.ndarray:
    """Build the lookup table of a channel.

    Indices left of the first key point and right of the last one are padded
    with the value of the nearest key point. Inside, every spline segment
    writes the inclusive grid range ``[xStart, xEnd]``, so a boundary index is
    written twice and the later segment wins.
    """
    bits = keypoints.bits
    if keypoints.is_empty():
        return identity_lut(bits)

    lut_size = 1 << bits
    scale = keypoints.scale
    xs, ys = keypoints.xs, keypoints.ys
    lut = np.empty(lut_size, dtype=LUT_DTYPE)

    m = second_derivatives(xs, ys)
    logger.debug(
        f"{CHANNEL_NAMES[keypoints.channel]} curve: {len(keypoints)} points, "
        f"second derivatives {m.tolist()}"
    )

    # left padding
    lut[: grid_index(xs[0], scale)] = quantize(ys[0], scale)

    for i, (a, b, c, d) in enumerate(segment_coefficients(xs, ys, m)):
        x_start = grid_index(xs[i], scale)
        x_end = grid_index(xs[i + 1], scale)
        xx = np.arange(x_end - x_start + 1, dtype=np.float64) / scale
        yy = a + b * xx + c * xx * xx + d * xx * xx * xx
        lut[x_start : x_end + 1] = quantize(yy, scale)

    # right padding
    lut[grid_index(xs[-1], scale) :] = quantize(ys[-1], scale)
    return lut
