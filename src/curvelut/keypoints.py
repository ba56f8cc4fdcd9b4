"""Validated control points for one curve channel."""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, NamedTuple, Sequence

import numpy as np

from curvelut.errors import DegenerateCurve, InvalidRange, MalformedInput, NonMonotonic

logger = logging.getLogger(__name__)

RED, GREEN, BLUE, MASTER = 0, 1, 2, 3
CHANNEL_NAMES = ("red", "green", "blue", "master")


class Point(NamedTuple):
    x: float
    y: float


def grid_index(value: float, scale: int) -> int:
    """Round a normalized value half-up onto the integer grid ``[0, scale]``."""
    return int(math.floor(value * scale + 0.5))


@dataclass(frozen=True)
class KeypointSet:
    """Ordered control points of one channel.

    Points are strictly increasing on the x-axis once rounded onto the
    ``2**bits - 1`` grid. An empty set stands for the identity mapping.
    """

    points: tuple[Point, ...] = ()
    bits: int = 8
    channel: int = MASTER

    def __post_init__(self) -> None:
        scale = self.scale
        last: Point | None = None
        for point in self.points:
            if not (0.0 <= point.x <= 1.0 and 0.0 <= point.y <= 1.0):
                raise InvalidRange(
                    "invalid key point coordinates, x and y must be in the [0;1] range"
                )
            if last is not None and grid_index(last.x, scale) >= grid_index(
                point.x, scale
            ):
                raise NonMonotonic(
                    "key point coordinates are too close from each other or "
                    "not strictly increasing on the x-axis"
                )
            last = point
        if len(self.points) == 1:
            raise DegenerateCurve(
                "only one point is defined, this is unlikely to behave as you expect"
            )

    @property
    def scale(self) -> int:
        return (1 << self.bits) - 1

    @property
    def xs(self) -> np.ndarray:
        return np.array([p.x for p in self.points], dtype=np.float64)

    @property
    def ys(self) -> np.ndarray:
        return np.array([p.y for p in self.points], dtype=np.float64)

    def is_empty(self) -> bool:
        return not self.points

    def __len__(self) -> int:
        return len(self.points)

    @classmethod
    def from_points(
        cls,
        points: Iterable[tuple[float, float]],
        bits: int = 8,
        channel: int = MASTER,
    ) -> "KeypointSet":
        """Create a set from ``(x, y)`` pairs."""
        return cls(
            tuple(Point(float(x), float(y)) for x, y in points),
            bits=bits,
            channel=channel,
        )

    @classmethod
    def from_array(
        cls, values: Sequence[float], bits: int = 8, channel: int = MASTER
    ) -> "KeypointSet":
        """Create a set from a flat ``[x0, y0, x1, y1, ...]`` sequence."""
        if len(values) % 2:
            raise MalformedInput(
                f"{CHANNEL_NAMES[channel]} curve array length must be a multiple "
                f"of 2, got {len(values)}"
            )
        pairs = zip(values[0::2], values[1::2])
        return cls.from_points(pairs, bits=bits, channel=channel)

    @classmethod
    def from_string(
        cls, text: str, bits: int = 8, channel: int = MASTER
    ) -> "KeypointSet":
        """Create a set from the legacy ``"x/y x/y ..."`` notation."""
        pairs = []
        for token in text.split():
            x, _, y = token.partition("/")
            try:
                pairs.append((float(x), float(y)))
            except ValueError as e:
                raise MalformedInput(
                    f"invalid key point {token!r} in {CHANNEL_NAMES[channel]} "
                    "curve, expected x/y"
                ) from e
        return cls.from_points(pairs, bits=bits, channel=channel)

    @classmethod
    def parse(
        cls,
        value: "str | Sequence[float] | KeypointSet | None",
        bits: int = 8,
        channel: int = MASTER,
    ) -> "KeypointSet":
        """Create a set from any supported curve notation."""
        if value is None:
            return cls(bits=bits, channel=channel)
        if isinstance(value, KeypointSet):
            if value.bits == bits and value.channel == channel:
                return value
            return cls(value.points, bits=bits, channel=channel)
        if isinstance(value, str):
            return cls.from_string(value, bits=bits, channel=channel)
        return cls.from_array(value, bits=bits, channel=channel)
