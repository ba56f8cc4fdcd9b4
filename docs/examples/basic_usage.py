"""Basic curves examples."""

import numpy as np
from PIL import Image

from curvelut import Curves, SampleFormat
from curvelut.image_utils import apply_curves
from curvelut.svg_utils import create_filter, write

# Example 1: Apply a preset to an image
print("Example 1: Preset")
image = Image.open("input.png").convert("RGB")
apply_curves(image, preset="cross_process").save("cross_process.png")
print("✓ Created cross_process.png")

# Example 2: Key points per channel plus a master curve
print("\nExample 2: Key points")
curves = Curves(
    SampleFormat(num_planes=3, bits_per_sample=8),
    curves=["0/0 0.5/0.58 1/1", None, "0/0.1 1/0.9"],
    master="0/0 0.25/0.2 0.75/0.8 1/1",
)
apply_curves(image, curves).save("custom.png")
print("✓ Created custom.png")

# Example 3: Photoshop ACV file on 16-bit planes
print("\nExample 3: ACV file")
curves = Curves(SampleFormat(num_planes=3, bits_per_sample=16), acv="film.acv")
planes = [np.zeros((4, 4), dtype=np.uint16) for _ in range(3)]
red, green, blue = curves.apply(planes)
print(f"✓ Remapped planes, red[0, 0] = {red[0, 0]}")

# Example 4: Export the tables as an SVG filter
print("\nExample 4: SVG filter")
with open("curves.svg", "w", encoding="utf-8") as f:
    write(create_filter(Curves(preset="vintage")), f)
print("✓ Created curves.svg")
