"""Command line entry point for the union_find library."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from .pipeline import ComponentLabelerConfig
from .runner import label_file


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Label the connected components of an edge list.")
    parser.add_argument("input", type=Path, help="Path to the input CSV or Excel edge list")
    parser.add_argument("output", type=Path, help="Path where the node labels will be written")
    parser.add_argument(
        "--source-column",
        default=os.getenv("UNION_FIND_SOURCE_COLUMN", "source"),
        help="Column holding the first endpoint of each edge (default: source)",
    )
    parser.add_argument(
        "--target-column",
        default=os.getenv("UNION_FIND_TARGET_COLUMN", "target"),
        help="Column holding the second endpoint of each edge (default: target)",
    )
    parser.add_argument(
        "--weight-column",
        default=os.getenv("UNION_FIND_WEIGHT_COLUMN"),
        help="Optional edge weight column; enables the minimum spanning forest step",
    )
    parser.add_argument(
        "--node-count",
        type=int,
        default=None,
        help="Number of nodes to create up front, including isolated ones",
    )
    parser.add_argument(
        "--disable-tqdm",
        action="store_true",
        help="Disable progress bars even if tqdm is installed",
    )
    parser.add_argument("--quiet", action="store_true", help="Only print errors")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    config = ComponentLabelerConfig(
        source_column=args.source_column,
        target_column=args.target_column,
        weight_column=args.weight_column or None,
        node_count=args.node_count,
        use_tqdm=not args.disable_tqdm,
        verbose=not args.quiet,
    )

    result = label_file(args.input, args.output, config)
    return 0 if result is not None else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
