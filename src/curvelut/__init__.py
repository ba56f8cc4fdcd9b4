from logging import getLogger

from curvelut.acv import decode_acv, read_acv
from curvelut.curves import Curves, SampleFormat, Source, build_luts
from curvelut.errors import (
    CurveError,
    DegenerateCurve,
    InvalidFormat,
    InvalidRange,
    IOFailure,
    MalformedInput,
    NonMonotonic,
    OutOfMemory,
    TruncatedFile,
    UnsupportedFormat,
)
from curvelut.keypoints import KeypointSet, Point
from curvelut.lut import build_lut
from curvelut.presets import Preset
from curvelut.resource_limits import ResourceLimits
from curvelut.version import __version__ as __version__

logger = getLogger(__name__)

__all__ = [
    "Curves",
    "CurveError",
    "DegenerateCurve",
    "InvalidFormat",
    "InvalidRange",
    "IOFailure",
    "KeypointSet",
    "MalformedInput",
    "NonMonotonic",
    "OutOfMemory",
    "Point",
    "Preset",
    "ResourceLimits",
    "SampleFormat",
    "Source",
    "TruncatedFile",
    "UnsupportedFormat",
    "build_lut",
    "build_luts",
    "decode_acv",
    "read_acv",
]
