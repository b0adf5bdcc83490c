"""Command line interface for imagecompare."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Optional

from .compare import COMPARISON_UNIT_FORMULAS, ImageComparison
from .core.types import ComparisonState
from .errors import InvalidConfigError
from .presets import CompareConfig, get_preset, load_config_file, parse_color
from .report import write_json_report
from .utils.image_ops import load_raster, save_result_images

EXIT_MATCH = 0
EXIT_MISMATCH = 1
EXIT_USAGE = 2
EXIT_SIZE_MISMATCH = 3

_EXIT_CODES = {
    ComparisonState.MATCH: EXIT_MATCH,
    ComparisonState.MISMATCH: EXIT_MISMATCH,
    ComparisonState.SIZE_MISMATCH: EXIT_SIZE_MISMATCH,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="imagecompare",
        description="Shift tolerant fuzzy comparison of two images.",
    )
    parser.add_argument("--expected", help="Path to the baseline image")
    parser.add_argument("--actual", help="Path to the image under test")
    parser.add_argument("--output-dir", help="Directory receiving comparison images on mismatch")
    parser.add_argument("--json", help="Comparison report path (JSON)")
    parser.add_argument("--preset", default="default", help="Preset name (default|strict|loose)")
    parser.add_argument("--config", help="JSON file with configuration overrides")
    parser.add_argument("--threshold", type=float, help="Per channel tolerance (0-1)")
    parser.add_argument("--max-usage", type=int, help="Times one target pixel may be matched")
    parser.add_argument("--search-distance", type=int, help="Ring radius bound for the pixel search")
    parser.add_argument("--max-box-width", type=int, help="Maximum width of a difference box")
    parser.add_argument("--max-box-height", type=int, help="Maximum height of a difference box")
    parser.add_argument(
        "--percent-allowed",
        type=float,
        help="Fraction of failed pixel comparisons still accepted as a match",
    )
    parser.add_argument("--outline-color", help="Box color (#RRGGBB or r,g,b)")
    parser.add_argument(
        "--denominator",
        choices=sorted(COMPARISON_UNIT_FORMULAS),
        default="literal",
        help="Formula for the number of compared pixels",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        from . import __version__

        print(__version__)
        return EXIT_MATCH

    if not args.expected or not args.actual:
        parser.error("--expected and --actual are required")

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        config = get_preset(args.preset).config
        if args.config:
            config = load_config_file(args.config, base=config)
        config = _override_config(config, args)
    except (KeyError, ValueError) as exc:
        # InvalidConfigError is a ValueError as well.
        parser.error(str(exc))
        return EXIT_USAGE

    expected = load_raster(args.expected)
    actual = load_raster(args.actual)

    engine = ImageComparison(config, comparison_units=COMPARISON_UNIT_FORMULAS[args.denominator])
    result = engine.compare(expected, actual)

    if args.output_dir:
        save_result_images(result, args.output_dir)
    if args.json:
        write_json_report(result, args.json)

    print(result.outcome.value)
    return _EXIT_CODES[result.outcome]


def _override_config(config: CompareConfig, args: argparse.Namespace) -> CompareConfig:
    overrides = {}
    for field_name, arg_name in (
        ("pixel_threshold", "threshold"),
        ("max_usage_per_pixel", "max_usage"),
        ("max_search_distance", "search_distance"),
        ("max_box_width", "max_box_width"),
        ("max_box_height", "max_box_height"),
        ("percent_allowed_different", "percent_allowed"),
    ):
        value = getattr(args, arg_name)
        if value is not None:
            overrides[field_name] = value
    if args.outline_color:
        color = parse_color(args.outline_color)
        if color is None:
            raise InvalidConfigError(f"Invalid outline color '{args.outline_color}'")
        overrides["outline_color"] = color
    return config.copy(**overrides)


if __name__ == "__main__":
    sys.exit(main())
