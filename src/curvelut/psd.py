"""Curves taken from Photoshop Curves adjustment layers."""

import logging
from typing import Any, Optional

from psd_tools import PSDImage
from psd_tools.api import adjustments

from curvelut.acv import ACV_CHANNELS, ACV_MAX_VALUE, CurvePoints
from curvelut.errors import InvalidFormat, IOFailure

logger = logging.getLogger(__name__)


def keypoints_from_layer(layer: adjustments.Curves) -> CurvePoints:
    """Extract normalized ``(x, y)`` points keyed by channel from a Curves layer.

    Photoshop channel ids are 0 for the composite curve and 1-3 for red, green
    and blue, the same order as ACV files. Points are stored as
    ``(output, input)`` pairs in ``[0, 255]``.
    """
    extra: Any = getattr(layer.data, "extra", None)
    if not extra:
        logger.info(f"Curves layer '{layer.name}' has no curve data")
        return {}

    curves: CurvePoints = {}
    for item in extra:
        if not 0 <= item.channel_id < len(ACV_CHANNELS):
            logger.warning(
                f"Curves layer '{layer.name}': "
                f"Unknown channel ID {item.channel_id}, skipping"
            )
            continue
        curves[ACV_CHANNELS[item.channel_id]] = [
            (x / ACV_MAX_VALUE, y / ACV_MAX_VALUE) for y, x in item.points
        ]
    return curves


def find_curves_layer(psd: PSDImage) -> Optional[adjustments.Curves]:
    """Return the first Curves adjustment layer of a document."""
    for layer in psd.descendants():
        if isinstance(layer, adjustments.Curves):
            return layer
    return None


def load_curves_layer(path: str) -> CurvePoints:
    """Open a PSD file and read its first Curves adjustment layer."""
    try:
        psd = PSDImage.open(path)
    except OSError as e:
        raise IOFailure(f"unable to read PSD file {path}: {e.strerror or e}") from e
    layer = find_curves_layer(psd)
    if layer is None:
        raise InvalidFormat(f"PSD file {path} has no Curves adjustment layer")
    logger.debug(f"Using Curves layer '{layer.name}' from {path}")
    return keypoints_from_layer(layer)
