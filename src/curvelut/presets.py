"""Built-in curve presets.

The point tables are the classic photographic looks shipped with the curves
filter. Colour presets fill the red, green and blue curves; tone presets fill
only the master curve.
"""

import logging
from enum import IntEnum
from numbers import Integral

from curvelut.errors import MalformedInput
from curvelut.keypoints import BLUE, GREEN, MASTER, RED

logger = logging.getLogger(__name__)


class Preset(IntEnum):
    NONE = 0
    COLOR_NEGATIVE = 1
    CROSS_PROCESS = 2
    DARKER = 3
    INCREASE_CONTRAST = 4
    LIGHTER = 5
    LINEAR_CONTRAST = 6
    MEDIUM_CONTRAST = 7
    NEGATIVE = 8
    STRONG_CONTRAST = 9
    VINTAGE = 10


PRESETS: dict[Preset, dict[int, str]] = {
    Preset.NONE: {},
    Preset.COLOR_NEGATIVE: {
        RED: "0.129/1 0.466/0.498 0.725/0",
        GREEN: "0.109/1 0.301/0.498 0.517/0",
        BLUE: "0.098/1 0.235/0.498 0.423/0",
    },
    Preset.CROSS_PROCESS: {
        RED: "0/0 0.25/0.156 0.501/0.501 0.686/0.745 1/1",
        GREEN: "0/0 0.25/0.188 0.38/0.501 0.745/0.815 1/0.815",
        BLUE: "0/0 0.231/0.094 0.709/0.874 1/1",
    },
    Preset.DARKER: {MASTER: "0/0 0.5/0.4 1/1"},
    Preset.INCREASE_CONTRAST: {MASTER: "0/0 0.149/0.066 0.831/0.905 0.905/0.98 1/1"},
    Preset.LIGHTER: {MASTER: "0/0 0.4/0.5 1/1"},
    Preset.LINEAR_CONTRAST: {MASTER: "0/0 0.305/0.286 0.694/0.713 1/1"},
    Preset.MEDIUM_CONTRAST: {MASTER: "0/0 0.286/0.219 0.639/0.643 1/1"},
    Preset.NEGATIVE: {MASTER: "0/1 1/0"},
    Preset.STRONG_CONTRAST: {MASTER: "0/0 0.301/0.196 0.592/0.6 0.686/0.737 1/1"},
    Preset.VINTAGE: {
        RED: "0/0.11 0.42/0.51 1/0.95",
        GREEN: "0/0 0.50/0.48 1/1",
        BLUE: "0/0.22 0.49/0.44 1/0.8",
    },
}


def get_preset(preset: "int | str | Preset") -> Preset:
    """Resolve a preset id or name such as ``"vintage"`` or ``"cross-process"``."""
    if isinstance(preset, str) and not preset.strip().isdigit():
        key = preset.strip().upper().replace("-", "_")
        if key not in Preset.__members__:
            raise MalformedInput(f"unknown preset {preset!r}")
        return Preset[key]
    if isinstance(preset, bool) or not isinstance(preset, (Integral, str)):
        raise MalformedInput(
            f"preset must be an id or a name, got {type(preset).__name__}"
        )
    try:
        return Preset(int(preset))
    except ValueError as e:
        raise MalformedInput(
            "preset must be 0, 1, 2, 3, 4, 5, 6, 7, 8, 9, or 10"
        ) from e


def preset_curves(preset: "int | str | Preset") -> dict[int, str]:
    """Return the default curves of a preset keyed by channel."""
    return PRESETS[get_preset(preset)]
