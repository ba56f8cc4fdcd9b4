"""Curves filter: resolve curve sources, build and apply lookup tables.

Every channel picks its key points from the first available source in this
order::

    explicit curve > curve file (ACV or PSD layer) > preset > identity

The table is evaluated once when the filter is built. Finished tables are
read-only and can be shared by any number of readers.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

import numpy as np

from curvelut.acv import CurvePoints, decode_acv, read_acv
from curvelut.composer import compose
from curvelut.errors import MalformedInput, UnsupportedFormat
from curvelut.keypoints import CHANNEL_NAMES, MASTER, KeypointSet
from curvelut.lut import build_lut
from curvelut.presets import Preset, get_preset, preset_curves
from curvelut.psd import load_curves_layer
from curvelut.resource_limits import ResourceLimits

logger = logging.getLogger(__name__)

CurveValue = Union[str, Sequence[float], KeypointSet]

MIN_BITS = 8
MAX_BITS = 16
MAX_COLOR_PLANES = 3


class Source(str, Enum):
    EXPLICIT = "explicit"
    FILE = "file"
    PRESET = "preset"
    IDENTITY = "identity"


@dataclass(frozen=True)
class SampleFormat:
    """Layout of the samples the curves are applied to."""

    num_planes: int = 3
    bits_per_sample: int = 8
    sample_type: str = "integer"

    def validate(self) -> None:
        if (
            self.sample_type != "integer"
            or not MIN_BITS <= self.bits_per_sample <= MAX_BITS
        ):
            raise UnsupportedFormat(
                "only constant format 8-16 bit integer input supported"
            )
        if self.num_planes < 1:
            raise UnsupportedFormat(
                f"at least one plane is required, got {self.num_planes}"
            )

    @property
    def color_planes(self) -> int:
        """Number of planes that have their own curve; extra planes pass through."""
        return min(self.num_planes, MAX_COLOR_PLANES)


def _is_set(value: Optional[object]) -> bool:
    if value is None:
        return False
    if isinstance(value, KeypointSet):
        return not value.is_empty()
    return len(value) > 0  # type: ignore[arg-type]


class Curves:
    """Per-channel lookup tables built from key points.

    Args:
        format: Sample layout; defaults to 3 planes of 8-bit integers.
        preset: Preset id (0-10), name or :class:`Preset`.
        curves: Up to one curve per colour plane, each an ``"x/y x/y"`` string,
            a flat ``[x0, y0, x1, y1, ...]`` sequence or a :class:`KeypointSet`.
        master: Curve applied on top of every colour curve.
        planes: Plane indices to process; all colour planes by default.
        acv: ACV file path or raw ACV bytes.
        psd: PSD file path; its first Curves adjustment layer is used.
        limits: Input limits; read from the environment by default.
    """

    def __init__(
        self,
        format: Optional[SampleFormat] = None,
        preset: Union[int, str, Preset] = Preset.NONE,
        curves: Optional[Sequence[Optional[CurveValue]]] = None,
        master: Optional[CurveValue] = None,
        planes: Optional[Sequence[int]] = None,
        acv: Union[str, bytes, None] = None,
        psd: Optional[str] = None,
        limits: Optional[ResourceLimits] = None,
    ) -> None:
        self.format = format or SampleFormat()
        self.format.validate()
        self.limits = limits or ResourceLimits.default()
        self.preset = get_preset(preset)
        self.process = self._parse_planes(planes)

        curves = list(curves or [])
        if len(curves) > self.format.color_planes:
            raise MalformedInput("more curves given than there are planes")
        explicit: dict[int, Optional[CurveValue]] = dict(enumerate(curves))
        explicit[MASTER] = master

        file_curves = self._load_file_curves(acv, psd)
        defaults = preset_curves(self.preset)

        self.sources: dict[int, Source] = {}
        keypoints = []
        for channel in range(MASTER + 1):
            value, source = self._resolve(
                channel, explicit.get(channel), file_curves, defaults
            )
            self.sources[channel] = source
            keypoints.append(self._parse_keypoints(value, channel))

        luts = [build_lut(k) for k in keypoints]
        luts = compose(luts, has_master=self.sources[MASTER] != Source.IDENTITY)
        for lut in luts:
            lut.setflags(write=False)
        self.luts: tuple[np.ndarray, ...] = tuple(luts)
        logger.debug(
            "Built curves: "
            + ", ".join(
                f"{CHANNEL_NAMES[c]}={s.value}" for c, s in self.sources.items()
            )
        )

    @property
    def bits(self) -> int:
        return self.format.bits_per_sample

    @property
    def scale(self) -> int:
        return (1 << self.bits) - 1

    def _parse_planes(self, planes: Optional[Sequence[int]]) -> tuple[bool, ...]:
        count = self.format.color_planes
        if not planes:
            return (True,) * count
        process = [False] * count
        for plane in planes:
            if not 0 <= plane < count:
                raise MalformedInput("plane index out of range")
            if process[plane]:
                raise MalformedInput("plane specified twice")
            process[plane] = True
        return tuple(process)

    def _load_file_curves(
        self, acv: Union[str, bytes, None], psd: Optional[str]
    ) -> CurvePoints:
        if acv is not None and psd is not None:
            raise MalformedInput("acv and psd curve files are mutually exclusive")
        if isinstance(acv, (bytes, bytearray)):
            return decode_acv(bytes(acv))
        if acv is not None:
            return read_acv(acv, self.limits)
        if psd is not None:
            return load_curves_layer(psd)
        return {}

    def _resolve(
        self,
        channel: int,
        value: Optional[CurveValue],
        file_curves: CurvePoints,
        defaults: dict[int, str],
    ) -> tuple[Optional[CurveValue], Source]:
        if _is_set(value):
            return value, Source.EXPLICIT
        if file_curves.get(channel):
            return KeypointSet.from_points(
                file_curves[channel], bits=self.bits, channel=channel
            ), Source.FILE
        if channel in defaults:
            logger.info(
                f"Using {self.preset.name.lower()} preset for "
                f"{CHANNEL_NAMES[channel]} curve"
            )
            return defaults[channel], Source.PRESET
        return None, Source.IDENTITY

    def _parse_keypoints(
        self, value: Optional[CurveValue], channel: int
    ) -> KeypointSet:
        keypoints = KeypointSet.parse(value, bits=self.bits, channel=channel)
        if self.limits.is_points_limited() and len(keypoints) > self.limits.max_points:
            raise MalformedInput(
                f"{CHANNEL_NAMES[channel]} curve has {len(keypoints)} points, "
                f"exceeding the limit of {self.limits.max_points}"
            )
        return keypoints

    def apply(self, planes: Sequence[np.ndarray]) -> list[np.ndarray]:
        """Remap sample planes through the tables.

        Planes must hold unsigned integers; processed planes may not exceed the
        sample depth. Planes that are not processed, including any plane past
        the third, are returned unchanged.
        """
        if len(planes) != self.format.num_planes:
            raise MalformedInput(
                f"expected {self.format.num_planes} planes, got {len(planes)}"
            )
        result = []
        for index, plane in enumerate(planes):
            plane = np.asarray(plane)
            if plane.dtype.kind != "u":
                raise UnsupportedFormat(
                    "only constant format 8-16 bit integer input supported"
                )
            if index < len(self.process) and self.process[index]:
                if plane.size and plane.max() > self.scale:
                    raise UnsupportedFormat(
                        f"plane {index} has samples above the {self.bits}-bit "
                        f"maximum of {self.scale}"
                    )
                result.append(self.luts[index][plane].astype(plane.dtype, copy=False))
            else:
                result.append(plane)
        return result


def build_luts(
    bits: int = 8,
    preset: Union[int, str, Preset] = Preset.NONE,
    curves: Optional[Sequence[Optional[CurveValue]]] = None,
    master: Optional[CurveValue] = None,
    acv: Union[str, bytes, None] = None,
    num_planes: int = 3,
) -> tuple[np.ndarray, ...]:
    """Build the red, green, blue and master lookup tables."""
    return Curves(
        SampleFormat(num_planes=num_planes, bits_per_sample=bits),
        preset=preset,
        curves=curves,
        master=master,
        acv=acv,
    ).luts
