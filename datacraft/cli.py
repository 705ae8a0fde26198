"""Command line entry point: generate records from a JSON data spec."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Mapping, Sequence

from datacraft.factories import register
from datacraft.interfaces import DatacraftError, SpecError
from datacraft.loader import SpecLoader
from datacraft.registry import Registry


def process_spec(
    spec: Mapping[str, Mapping[str, Any]], iterations: int
) -> list[dict[str, Any]]:
    """Generate and print values for every field, once per iteration.

    Returns the successfully generated values, one dict per iteration.
    """
    registry = Registry()
    register(registry)
    loader = SpecLoader(registry, spec)

    records: list[dict[str, Any]] = []
    for iteration in range(iterations):
        record: dict[str, Any] = {}
        for field, field_spec in spec.items():
            print(f"Generating value for field '{field}':")
            print(f"Spec: {dict(field_spec)}")
            try:
                supplier = loader.get(field)
            except DatacraftError as exc:
                print(f"Error getting supplier for field '{field}': {exc}")
                continue
            try:
                value = supplier.next(iteration)
            except DatacraftError as exc:
                print(f"Error generating value for field '{field}': {exc}")
                continue
            record[field] = value
            print(f"Generated value for field '{field}': {value}")
            print()
        records.append(record)
    return records


def load_spec(path: str | Path) -> dict[str, dict[str, Any]]:
    """Read a JSON spec mapping field names to field specs."""
    try:
        content = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise SpecError(f"failed to read spec file: {exc}") from exc
    try:
        spec = json.loads(content)
    except json.JSONDecodeError as exc:
        raise SpecError(f"failed to parse spec file: {exc}") from exc
    if not isinstance(spec, dict) or not all(
        isinstance(value, dict) for value in spec.values()
    ):
        raise SpecError(
            "failed to parse spec file: expected an object of field objects"
        )
    return spec


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="datacraft")
    parser.add_argument(
        "-s", "--spec", default="", help="Path to the specification file (JSON)"
    )
    parser.add_argument(
        "-i",
        "--iterations",
        type=int,
        default=1,
        help="Number of records to generate",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line tool and return its exit status."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.spec:
        print("Error: --spec (-s) flag is required")
        parser.print_usage(sys.stderr)
        return 1
    if args.iterations < 1:
        print("Error: --iterations (-i) must be greater than 0")
        parser.print_usage(sys.stderr)
        return 1

    try:
        spec = load_spec(args.spec)
    except SpecError as exc:
        print(f"Error loading spec file: {exc}")
        return 1

    process_spec(spec, args.iterations)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())