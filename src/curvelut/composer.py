import logging
from typing import Sequence

import numpy as np

from curvelut.keypoints import MASTER

logger = logging.getLogger(__name__)


def compose(luts: Sequence[np.ndarray], has_master: bool) -> list[np.ndarray]:
    """Apply the master table on top of the red, green and blue tables.

    The result is ``master[channel[v]]``: the channel curve runs first and the
    master curve second. Without a master curve the tables pass through.
    """
    composed = list(luts)
    if not has_master:
        return composed
    master = luts[MASTER]
    for channel in range(MASTER):
        composed[channel] = master[luts[channel]]
    logger.debug("Composed master curve over color curves")
    return composed
