import logging
import os
from typing import Any, Optional

import numpy as np
from PIL import Image

from curvelut.curves import Curves, SampleFormat
from curvelut.errors import MalformedInput, UnsupportedFormat

logger = logging.getLogger(__name__)

# Bits per sample of the Pillow modes curves can be applied to.
MODE_BITS = {"L": 8, "RGB": 8, "RGBA": 8, "I;16": 16}


def image_format(image: Image.Image) -> SampleFormat:
    """Describe the sample layout of a PIL image."""
    if image.mode not in MODE_BITS:
        raise UnsupportedFormat(
            f"unsupported image mode {image.mode}, "
            f"expected one of {', '.join(MODE_BITS)}"
        )
    return SampleFormat(
        num_planes=len(image.getbands()), bits_per_sample=MODE_BITS[image.mode]
    )


def apply_curves(
    image: Image.Image, curves: Optional[Curves] = None, **kwargs: Any
) -> Image.Image:
    """Apply curves to a PIL image.

    Either pass prebuilt ``curves`` or the keyword arguments of
    :class:`~curvelut.curves.Curves`, in which case the sample format is taken
    from the image. The alpha band is never remapped.
    """
    format = image_format(image)
    if curves is None:
        curves = Curves(format, **kwargs)
    elif curves.format != format:
        raise MalformedInput(
            f"curves built for {curves.format}, image is {format}"
        )

    if format.bits_per_sample == 8:
        table: list[int] = []
        for band in range(format.num_planes):
            if band < len(curves.process) and curves.process[band]:
                table.extend(curves.luts[band].tolist())
            else:
                table.extend(range(256))
        return image.point(table)

    planes = curves.apply([np.asarray(image)])
    return Image.fromarray(planes[0])


def save_image(
    image: Image.Image, filepath: str, image_format: Optional[str] = None
) -> None:
    """Save a PIL Image to file, with JPEG conversion if needed.

    Note:
        JPEG doesn't support alpha channel, so RGBA images are converted
        to RGB with a white background.
    """
    if image_format is None:
        extension = os.path.splitext(filepath)[1].lower()
        image_format = Image.registered_extensions().get(extension, "PNG")
    if image_format.upper() == "JPEG" and image.mode == "RGBA":
        rgb_image = Image.new("RGB", image.size, (255, 255, 255))
        rgb_image.paste(image, mask=image.split()[3])  # Use alpha as mask
        rgb_image.save(filepath, format="JPEG")
    else:
        image.save(filepath, format=image_format.upper())
