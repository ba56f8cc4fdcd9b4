import argparse
import logging
import sys
from typing import Optional, Sequence

from PIL import Image

from curvelut.curves import Curves
from curvelut.errors import CurveError
from curvelut.image_utils import apply_curves, image_format, save_image
from curvelut.presets import Preset
from curvelut.svg_utils import create_filter, write

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Apply color adjustments to an image using curves"
    )
    parser.add_argument("input", metavar="INPUT", type=str, help="Input image path")
    parser.add_argument("output", metavar="OUTPUT", type=str, help="Output image path")
    parser.add_argument(
        "--preset",
        metavar="PRESET",
        type=str,
        default="none",
        help="Preset name or id: "
        + ", ".join(p.name.lower() for p in Preset)
        + ". Default: none",
    )
    parser.add_argument(
        "--curve",
        dest="curves",
        metavar="POINTS",
        type=str,
        action="append",
        default=None,
        help='Key points "x/y x/y ..." of the next plane. Repeat once per plane.',
    )
    parser.add_argument(
        "--master",
        metavar="POINTS",
        type=str,
        default=None,
        help="Key points of the master curve, applied after the plane curves.",
    )
    parser.add_argument(
        "--planes",
        metavar="N",
        type=int,
        nargs="+",
        default=None,
        help="Plane indices to process. Default: all color planes",
    )
    curve_file = parser.add_mutually_exclusive_group()
    curve_file.add_argument(
        "--acv", metavar="PATH", type=str, default=None, help="Photoshop ACV file."
    )
    curve_file.add_argument(
        "--psd",
        metavar="PATH",
        type=str,
        default=None,
        help="PSD file whose first Curves adjustment layer is used.",
    )
    parser.add_argument(
        "--svg",
        metavar="PATH",
        type=str,
        default=None,
        help="Also write the curves as an SVG feComponentTransfer filter.",
    )
    parser.add_argument(
        "--loglevel",
        metavar="LEVEL",
        default="WARNING",
        help="Logging level, default WARNING",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Apply curves to an image."""
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.loglevel.upper(), "WARNING"))
    try:
        with Image.open(args.input) as image:
            curves = Curves(
                image_format(image),
                preset=args.preset,
                curves=args.curves,
                master=args.master,
                planes=args.planes,
                acv=args.acv,
                psd=args.psd,
            )
            result = apply_curves(image, curves)
        save_image(result, args.output)
        logger.info(f"Saved {args.output}")
        if args.svg:
            with open(args.svg, "w", encoding="utf-8") as f:
                write(create_filter(curves), f)
    except (CurveError, OSError) as e:
        print(e, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
