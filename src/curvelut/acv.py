"""Reader for Photoshop ACV curve files.

The file is a sequence of big-endian unsigned 16-bit integers::

    version, count,
    count x (points, points x (output, input))

Values are in ``[0, 255]``. The curves are stored in master, red, green, blue
order; anything past the fourth curve is ignored.
"""

import logging
import os
import struct
from typing import Optional

from curvelut.errors import InvalidFormat, IOFailure, TruncatedFile
from curvelut.keypoints import BLUE, GREEN, MASTER, RED
from curvelut.resource_limits import ResourceLimits

logger = logging.getLogger(__name__)

ACV_CHANNELS = (MASTER, RED, GREEN, BLUE)
ACV_MAX_VALUE = 255.0

_UINT16 = struct.Struct(">H")

CurvePoints = dict[int, list[tuple[float, float]]]


class _Reader:
    def __init__(self, data: bytes) -> None:
        self.data = data
        self.offset = 0

    def read_u16(self, what: str) -> int:
        if len(self.data) - self.offset < _UINT16.size:
            raise TruncatedFile(
                f"ACV data truncated at byte {self.offset} while reading {what}"
            )
        (value,) = _UINT16.unpack_from(self.data, self.offset)
        self.offset += _UINT16.size
        return value


def decode_acv(data: bytes) -> CurvePoints:
    """Decode ACV bytes into normalized ``(x, y)`` points keyed by channel."""
    reader = _Reader(data)
    version = reader.read_u16("version")
    count = reader.read_u16("curve count")
    logger.debug(f"ACV version {version} with {count} curve(s)")
    if count > len(ACV_CHANNELS):
        logger.warning(
            f"ACV data holds {count} curves, only the first "
            f"{len(ACV_CHANNELS)} are used"
        )

    curves: CurvePoints = {}
    for channel in ACV_CHANNELS[:count]:
        num_points = reader.read_u16("point count")
        points = []
        for _ in range(num_points):
            y = reader.read_u16("point output")
            x = reader.read_u16("point input")
            points.append((x / ACV_MAX_VALUE, y / ACV_MAX_VALUE))
        curves[channel] = points
    return curves


def read_acv(path: str, limits: Optional[ResourceLimits] = None) -> CurvePoints:
    """Read and decode an ACV file."""
    limits = limits or ResourceLimits.default()
    try:
        with open(path, "rb") as f:
            if limits.is_file_size_limited():
                size = os.fstat(f.fileno()).st_size
                if size > limits.max_file_size:
                    raise InvalidFormat(
                        f"ACV file {path} is {size} bytes, "
                        f"exceeding the limit of {limits.max_file_size} bytes"
                    )
            data = f.read()
    except OSError as e:
        raise IOFailure(f"unable to read ACV file {path}: {e.strerror or e}") from e
    return decode_acv(data)
