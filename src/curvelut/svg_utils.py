"""SVG export of finished curves.

The red, green and blue tables become ``feFuncR``/``feFuncG``/``feFuncB``
children of an ``feComponentTransfer`` primitive with ``type="table"``::

    <filter id="curves" color-interpolation-filters="sRGB">
      <feComponentTransfer>
        <feFuncR type="table" tableValues="0 0.0039 ..." />
        ...
      </feComponentTransfer>
    </filter>
"""

import logging
import xml.etree.ElementTree as ET
from typing import Any, Optional, Sequence

import numpy as np

from curvelut.curves import Curves
from curvelut.keypoints import BLUE, GREEN, RED

logger = logging.getLogger(__name__)

NAMESPACE = "http://www.w3.org/2000/svg"

DEFAULT_NUMBER_DIGITS = 4
DEFAULT_TABLE_SIZE = 256


def num2str(num: int | float | bool, digit: int = DEFAULT_NUMBER_DIGITS) -> str:
    """Convert a number to a string, using the specified format for floats."""
    if isinstance(num, bool):
        return "true" if num else "false"
    if isinstance(num, int):
        return str(num)
    if isinstance(num, float):
        if num.is_integer():
            return str(int(num))
        number = f"{num:.{digit}f}".rstrip("0").rstrip(".")
        return "0" if number in ("-0", "") else number
    raise ValueError(f"Unsupported type: {type(num)}")


def seq2str(
    seq: Sequence[int | float | bool],
    sep: str = " ",
    digit: int = DEFAULT_NUMBER_DIGITS,
) -> str:
    """Convert a sequence of numbers to a string, using the specified format for floats."""
    return sep.join(num2str(n, digit) for n in seq)


def create_node(
    tag: str, parent: Optional[ET.Element] = None, **kwargs: Any
) -> ET.Element:
    """Create an XML node; underscores in attribute names become hyphens."""
    node = ET.Element(tag)
    for key, value in kwargs.items():
        if value is None:
            continue
        key = key.rstrip("_").replace("_", "-")
        node.set(key, num2str(value) if isinstance(value, (int, float)) else str(value))
    if parent is not None:
        parent.append(node)
    return node


def table_values(
    lut: np.ndarray, scale: int, size: int = DEFAULT_TABLE_SIZE
) -> list[float]:
    """Normalize a table to [0, 1], resampled to at most ``size`` entries."""
    if len(lut) > size:
        indices = np.floor(np.linspace(0, len(lut) - 1, size) + 0.5).astype(np.int64)
        lut = lut[indices]
    return (lut.astype(np.float64) / scale).tolist()


def create_component_transfer(
    curves: Curves,
    parent: Optional[ET.Element] = None,
    digit: int = DEFAULT_NUMBER_DIGITS,
) -> ET.Element:
    """Create an ``feComponentTransfer`` element from the colour tables.

    Channels that are not processed are left out, which SVG treats as identity.
    """
    node = create_node("feComponentTransfer", parent=parent)
    for channel, tag in ((RED, "feFuncR"), (GREEN, "feFuncG"), (BLUE, "feFuncB")):
        if channel >= len(curves.process) or not curves.process[channel]:
            continue
        values = table_values(curves.luts[channel], curves.scale)
        create_node(
            tag,
            parent=node,
            type="table",
            tableValues=seq2str(values, digit=digit),
        )
    return node


def create_filter(curves: Curves, id: str = "curves") -> ET.Element:
    """Create a standalone SVG document holding the curves filter."""
    svg = create_node("svg", xmlns=NAMESPACE, width=0, height=0)
    defs = create_node("defs", parent=svg)
    filter = create_node(
        "filter", parent=defs, id=id, color_interpolation_filters="sRGB"
    )
    create_component_transfer(curves, parent=filter)
    return svg


def tostring(node: ET.Element, indent: str = "  ") -> str:
    """Convert an XML node to a string."""
    ET.indent(node, space=indent)
    return ET.tostring(node, encoding="unicode", xml_declaration=False)


def write(node: ET.Element, file: Any, indent: str = "  ") -> None:
    """Write an XML node to a file."""
    tree = ET.ElementTree(node)
    ET.indent(tree, space=indent)
    tree.write(file, encoding="unicode", xml_declaration=False)
