"""Command line entry point for quick_union."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from .pipeline import ConnectivityConfig
from .runner import connect_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Group indices into connected components from a list of pairs.")
    parser.add_argument("input", type=Path, help="Path to the input CSV or Excel file of pairs")
    parser.add_argument("output", type=Path, help="Path where the component table will be written")
    parser.add_argument("--left-column", default="p", help="Column holding the first index of each pair (default: p)")
    parser.add_argument("--right-column", default="q", help="Column holding the second index of each pair (default: q)")
    parser.add_argument(
        "--size",
        type=int,
        default=None,
        help="Number of elements in the universe (default: largest index + 1)",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument("--quiet", action="store_true", help="Suppress step-by-step progress output")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    config = ConnectivityConfig(
        left_column=args.left_column,
        right_column=args.right_column,
        size=args.size,
        use_tqdm=not args.disable_tqdm,
        verbose=not args.quiet,
    )

    result = connect_file(args.input, args.output, config)
    return 0 if result is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
