import logging
import struct
from typing import Callable, Sequence

import pytest

logger = logging.getLogger(__name__)


def build_acv(curves: Sequence[Sequence[tuple[int, int]]], version: int = 4) -> bytes:
    """Build ACV bytes from ``(input, output)`` points in [0, 255].

    Curves are given in file order: master, red, green, blue.
    """
    data = struct.pack(">HH", version, len(curves))
    for points in curves:
        data += struct.pack(">H", len(points))
        for x, y in points:
            data += struct.pack(">HH", y, x)
    return data


@pytest.fixture
def acv_builder() -> Callable[..., bytes]:
    return build_acv


@pytest.fixture
def master_acv() -> bytes:
    """ACV data holding a single two point master curve."""
    return build_acv([[(0, 51), (255, 204)]])
