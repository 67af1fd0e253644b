import argparse
import logging
import sys

from nestedradius import batch, calculator
from nestedradius import constants


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Calculate the corner radius of a rectangle nested inside a rounded rectangle.")
    parser.add_argument("--outer-radius", type=float, default=None, help=f"Corner radius of the outer rectangle (0-1024). Default: {constants.DEFAULT_OUTER_RADIUS:g}, or {constants.POSITIONED_OUTER_RADIUS:g} with --positioned")
    parser.add_argument("--distance", type=float, default=constants.DEFAULT_DISTANCE, help="Distance from the outer rectangle on every side (0-1024)")
    parser.add_argument("--width", type=float, default=None, help="Outer rectangle width. Together with --height, radius and distance are clamped to fit.")
    parser.add_argument("--height", type=float, default=None, help="Outer rectangle height")
    parser.add_argument("--min-size", type=float, default=None, help="Smallest allowed outer width/height. Example: 256. Needs --width and --height, or --resizable")
    parser.add_argument("--max-size", type=float, default=None, help="Largest allowed outer width/height. Example: 512. Needs --width and --height, or --resizable")
    parser.add_argument("--resizable", action="store_true", help=f"Use the resizable box: size range {constants.MIN_SIZE:g}-{constants.MAX_SIZE:g} unless overridden, {constants.DEFAULT_WIDTH:g} x {constants.DEFAULT_HEIGHT:g} unless --width/--height are given")
    parser.add_argument("--csv", dest="csv_file", help="Path to a CSV file with OuterRadius and Distance columns (optional Width, Height)", required=False)
    parser.add_argument("--output", help="Path to the output CSV file (batch mode only)", required=False)
    parser.add_argument("--positioned", action="store_true", help="Use an inner rectangle with its own size and offset instead of a uniform distance")
    parser.add_argument("--inner-width", type=float, default=constants.POSITIONED_INNER_WIDTH, help="Inner rectangle width (--positioned)")
    parser.add_argument("--inner-height", type=float, default=constants.POSITIONED_INNER_HEIGHT, help="Inner rectangle height (--positioned)")
    parser.add_argument("--x", type=float, default=constants.POSITIONED_X, help="Inner rectangle offset from the left (--positioned)")
    parser.add_argument("--y", type=float, default=constants.POSITIONED_Y, help="Inner rectangle offset from the top (--positioned)")
    parser.add_argument("--verbose", action="store_true", help="Log every clamp step")
    return parser


def run(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    size_range_given = args.min_size is not None or args.max_size is not None
    if size_range_given and not args.resizable and (args.width is None or args.height is None or args.csv_file or args.positioned):
        parser.error("--min-size/--max-size need --width and --height (or --resizable)")

    if args.resizable:
        if args.min_size is None:
            args.min_size = constants.MIN_SIZE
        if args.max_size is None:
            args.max_size = constants.MAX_SIZE
        if args.width is None:
            args.width = constants.DEFAULT_WIDTH
        if args.height is None:
            args.height = constants.DEFAULT_HEIGHT

    # configure basic logging to console so users are kept up-to-date
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="%(message)s")
    logger = logging.getLogger("calculateRadius")

    try:
        if args.csv_file:
            batch.main(args.csv_file, args.output)
        elif args.positioned:
            calculator.main_positioned(
                args.width if args.width is not None else constants.POSITIONED_OUTER_WIDTH,
                args.height if args.height is not None else constants.POSITIONED_OUTER_HEIGHT,
                args.outer_radius if args.outer_radius is not None else constants.POSITIONED_OUTER_RADIUS,
                args.inner_width,
                args.inner_height,
                args.x,
                args.y,
            )
        else:
            calculator.main(
                args.outer_radius if args.outer_radius is not None else constants.DEFAULT_OUTER_RADIUS,
                args.distance,
                width=args.width,
                height=args.height,
                min_size=args.min_size,
                max_size=args.max_size,
            )
    except ValueError as exc:
        logger.error("Error: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
