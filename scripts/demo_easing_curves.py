#!/usr/bin/env python3
"""
Easing Curve Demo

Samples every ease type and reports how each one behaves:
- Minimum and maximum value over the unit interval
- Whether it overshoots [0, 1]
- Value at the midpoint

Optionally writes all samples to a JSON file for plotting elsewhere.
"""

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table

from tweenkit.core.easing import (
    ease_array,
    get_ease_family,
    list_ease_types,
    sample_grid,
)
from tweenkit.core.utils.json import write_json

console = Console()


def main() -> None:
    parser = argparse.ArgumentParser(description="Summarize every easing curve")
    parser.add_argument("--samples", type=int, default=201, help="Samples per curve")
    parser.add_argument("--out", type=Path, default=None, help="Write samples to JSON")
    args = parser.parse_args()

    grid = sample_grid(args.samples)

    table = Table(title=f"Easing curves ({args.samples} samples)")
    table.add_column("Curve")
    table.add_column("Family")
    table.add_column("min", justify="right")
    table.add_column("max", justify="right")
    table.add_column("f(0.5)", justify="right")
    table.add_column("Overshoot")

    samples: dict[str, list[float]] = {}
    for ease_type in list_ease_types():
        values = ease_array(ease_type, 0.0, 1.0, grid)
        samples[ease_type.value] = values.tolist()
        overshoot = values.min() < -1e-9 or values.max() > 1 + 1e-9
        table.add_row(
            ease_type.value,
            get_ease_family(ease_type).value,
            f"{values.min():.4f}",
            f"{values.max():.4f}",
            f"{values[len(values) // 2]:.4f}",
            "[yellow]yes[/yellow]" if overshoot else "no",
        )

    console.print(table)

    if args.out:
        write_json(args.out, {"t": grid, "curves": samples})
        console.print(f"[green]📁 Samples saved to:[/green] {args.out}")


if __name__ == "__main__":
    main()
