"""
Command line interface.

Usage::

    buup list [--category SLUG]
    buup <transformer> [TEXT ...] [-i FILE] [-o FILE] [--inverse]
    echo "Hello" | buup base64encode

Input is taken from the TEXT arguments, else from ``--input``, else from
standard input.
"""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from buup.inverse import inverse_of
from buup.listing import categorized_listing, render_listing
from buup.registry import get_registry
from buup.types import InvalidInputError, TransformerCategory
from buup.utils.env import load_settings
from buup.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def _package_version() -> str:
    try:
        return version("buup")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buup",
        description="Transform text with encoders, decoders, formatters, hashes and converters",
        epilog="Run 'buup list' to see every transformer.",
    )
    parser.add_argument("transformer", nargs="?", help="Transformer id, or 'list' to show all transformers")
    parser.add_argument("text", nargs="*", help="Input text (joined with spaces); defaults to --input or stdin")
    parser.add_argument("-i", "--input", dest="input_file", help="Read input from FILE")
    parser.add_argument("-o", "--output", dest="output_file", help="Write output to FILE")
    parser.add_argument("--inverse", action="store_true", help="Run the inverse of the named transformer")
    parser.add_argument(
        "--category",
        choices=[category.value for category in TransformerCategory],
        help="With 'list': only show one category",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")
    return parser


def _print_list(category_slug: str | None) -> int:
    listing = categorized_listing()
    if category_slug:
        category = TransformerCategory.from_slug(category_slug)
        listing = [(cat, infos) for cat, infos in listing if cat is category]
    print(render_listing(listing))
    return 0


def _print_unknown(transformer_id: str) -> int:
    print(f"Error: Unknown transformer: {transformer_id}", file=sys.stderr)
    print("Valid transformers:", file=sys.stderr)
    for valid_id in get_registry().ids():
        print(f"  {valid_id}", file=sys.stderr)
    return 1


def _read_input(args: argparse.Namespace) -> str:
    """Resolve input text: arguments, then file, then stdin."""
    if args.text:
        return " ".join(args.text)
    if args.input_file:
        return Path(args.input_file).read_text(encoding="utf-8")
    return sys.stdin.read()


def main(argv: list[str] | None = None) -> int:
    """
    Run the command line interface.

    Parameters
    ----------
    argv : list[str], optional
        Arguments without the program name; ``sys.argv[1:]`` by default.

    Returns
    -------
    int
        Process exit status.
    """
    parser = build_parser()
    args = parser.parse_intermixed_args(argv)
    setup_logging("DEBUG" if args.verbose else load_settings().log_level)

    if args.transformer is None:
        parser.print_help(sys.stderr)
        return 1
    if args.transformer == "list":
        return _print_list(args.category)

    registry = get_registry()
    transformer_id = args.transformer
    if transformer_id not in registry:
        return _print_unknown(transformer_id)
    if args.inverse:
        inverse_id = inverse_of(transformer_id)
        if inverse_id is None:
            print(f"Error: No inverse transformer available for {transformer_id}", file=sys.stderr)
            return 1
        logger.debug("Using inverse %s of %s", inverse_id, transformer_id)
        transformer_id = inverse_id
    transformer = registry.get(transformer_id)

    try:
        text = _read_input(args)
    except OSError as e:
        print(f"Error: Could not read input file: {e}", file=sys.stderr)
        return 1

    try:
        result = transformer.transform(text)
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.output_file:
        try:
            Path(args.output_file).write_text(result, encoding="utf-8")
        except OSError as e:
            print(f"Error: Could not write output file: {e}", file=sys.stderr)
            return 1
        logger.debug("Wrote %s characters to %s", len(result), args.output_file)
    else:
        sys.stdout.write(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
