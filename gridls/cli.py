"""Command-line front door for gridls.

Parses flags, merges them over the persisted config, and hands the resulting
``ListingConfig`` to the walker. Flags always win over stored preferences.
"""

from __future__ import annotations

import argparse

from . import config
from .log import configure_logging
from .ui_theme import available_theme_names
from .walker import EXIT_OK, ListingConfig, walk


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridls",
        description="List directory contents in columns, across, or in long format.",
    )
    parser.add_argument("paths", nargs="*", metavar="path", help="Files or directories. Defaults to '.'.")
    parser.add_argument("-l", dest="long", action="store_true", help="Use the long listing format.")
    parser.add_argument("-x", dest="horizontal", action="store_true", help="List entries across rows.")
    parser.add_argument(
        "-C",
        dest="columns",
        action="store_true",
        help="List entries down columns, even when output is not a terminal.",
    )
    parser.add_argument("-R", dest="recursive", action="store_true", help="List subdirectories recursively.")
    parser.add_argument("-a", "--all", dest="all", action="store_true", help="Include names starting with '.'.")
    parser.add_argument("-1", dest="one_per_line", action="store_true", help="List one name per line.")
    parser.add_argument(
        "--color",
        choices=config.COLOR_CHOICES,
        default=None,
        help="Colorize names: auto (terminal only), always, or never.",
    )
    parser.add_argument("--no-color", action="store_true", help="Alias for --color=never.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"Color theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument(
        "--width",
        type=_positive_int,
        default=None,
        help="Assume this terminal width instead of detecting it.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def build_config(args: argparse.Namespace) -> ListingConfig:
    """Merge parsed flags over persisted preferences."""
    long_format = args.long
    horizontal = args.horizontal
    if not (args.long or args.horizontal or args.columns or args.one_per_line):
        layout = config.load_layout()
        long_format = layout == "long"
        horizontal = layout == "across"

    if args.no_color:
        color = "never"
    elif args.color is not None:
        color = args.color
    else:
        color = config.load_color_mode()

    return ListingConfig(
        long=long_format,
        horizontal=horizontal,
        recursive=args.recursive,
        include_hidden=args.all or config.load_show_hidden(),
        paths=tuple(args.paths),
        one_per_line=args.one_per_line,
        force_columns=args.columns,
        color=color,
        theme=args.theme or config.load_theme_name(),
        width=args.width,
    )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments and list the requested paths.

    Exits with a non-zero status when any path could not be listed.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    listing_config = build_config(args)
    status = walk(listing_config.paths, listing_config)
    if status != EXIT_OK:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
