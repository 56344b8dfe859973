"""Command-line interface for tweenkit.

Evaluate, sample and list easing curves from the shell.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from rich.console import Console
from rich.table import Table

from tweenkit.core.config.loader import configure_logging_from_config, load_app_config
from tweenkit.core.config.models import AppConfig
from tweenkit.core.easing import (
    EaseFamily,
    ease,
    get_ease_direction,
    get_ease_family,
    list_ease_types,
    resolve_ease_type,
    sample_ease,
)
from tweenkit.core.profiling.timespan import TimeSpanLogger
from tweenkit.core.utils.json import write_json
from tweenkit.core.utils.logging import get_logger

console = Console()
logger = logging.getLogger(__name__)


def _ease_type_arg(value: str):
    resolved = resolve_ease_type(value)
    if resolved is None:
        raise argparse.ArgumentTypeError(f"unknown ease type: {value!r}")
    return resolved


def run_list(args: argparse.Namespace, config: AppConfig) -> int:
    """Print every ease type with its family and direction."""
    family = EaseFamily(args.family) if args.family else None

    table = Table(title="Ease types")
    table.add_column("Name")
    table.add_column("Family")
    table.add_column("Direction")
    for ease_type in list_ease_types(family):
        table.add_row(
            ease_type.value,
            get_ease_family(ease_type).value,
            get_ease_direction(ease_type).value,
        )

    console.print(table)
    return 0


def run_ease(args: argparse.Namespace, config: AppConfig) -> int:
    """Evaluate a single curve value."""
    defaults = config.easing
    value = ease(
        args.ease_type,
        args.from_value,
        args.to_value,
        args.t,
        clamp=defaults.clamp and not args.no_clamp,
        amplitude=defaults.amplitude if args.amplitude is None else args.amplitude,
        amplitude_duration=(
            defaults.amplitude_duration if args.duration is None else args.duration
        ),
    )
    console.print(f"{value:.6f}")
    return 0


def run_sample(args: argparse.Namespace, config: AppConfig) -> int:
    """Sample a curve on a uniform grid and print or save the points."""
    n_samples = args.samples or config.sampling.n_samples
    timer = TimeSpanLogger(log=get_logger(config.timing.logger_name, command="sample"))

    with timer.measure(f"sampling {args.ease_type.value}"):
        points = sample_ease(
            args.ease_type,
            n_samples,
            from_=args.from_value,
            to=args.to_value,
            clamp=config.easing.clamp,
            amplitude=config.easing.amplitude,
            amplitude_duration=config.easing.amplitude_duration,
        )

    if args.json:
        write_json(args.json, [p.model_dump() for p in points])
        console.print(f"[green]Wrote {len(points)} samples to[/green] {args.json}")
        return 0

    table = Table(title=f"{args.ease_type.value} ({n_samples} samples)")
    table.add_column("t", justify="right")
    table.add_column("value", justify="right")
    for p in points:
        table.add_row(f"{p.t:.4f}", f"{p.v:.6f}")
    console.print(table)
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Build argument parser for CLI."""
    p = argparse.ArgumentParser(
        prog="tweenkit",
        description="tweenkit - easing curves for keyframe animation",
    )
    p.add_argument("--config", default=None, help="Path to app config (JSON or YAML)")
    p.add_argument("--log-level", default=None, help="Override the configured log level")
    sub = p.add_subparsers(dest="cmd", required=True)

    lst = sub.add_parser("list", help="List available ease types")
    lst.add_argument(
        "--family",
        choices=[f.value for f in EaseFamily],
        help="Only list one family",
    )

    ev = sub.add_parser("ease", help="Evaluate a curve at one point")
    ev.add_argument("ease_type", type=_ease_type_arg, help="Curve name, e.g. OutBounce")
    ev.add_argument("from_value", type=float, help="Value at t=0")
    ev.add_argument("to_value", type=float, help="Value at t=1")
    ev.add_argument("t", type=float, help="Progress")
    ev.add_argument("--no-clamp", action="store_true", help="Allow t outside [0, 1]")
    ev.add_argument("--amplitude", type=float, default=None)
    ev.add_argument("--duration", type=float, default=None, help="Amplitude duration")

    smp = sub.add_parser("sample", help="Sample a curve on a uniform grid")
    smp.add_argument("ease_type", type=_ease_type_arg, help="Curve name, e.g. InOutSine")
    smp.add_argument("--samples", type=int, default=None, help="Number of samples (>= 2)")
    smp.add_argument("--from", dest="from_value", type=float, default=0.0)
    smp.add_argument("--to", dest="to_value", type=float, default=1.0)
    smp.add_argument("--json", type=Path, default=None, help="Write samples to a JSON file")

    return p


_COMMANDS = {
    "list": run_list,
    "ease": run_ease,
    "sample": run_sample,
}


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    p = build_arg_parser()
    args = p.parse_args(argv)

    try:
        config = load_app_config(args.config)
        if args.log_level:
            data = config.model_dump()
            data["logging"]["level"] = args.log_level.upper()
            config = AppConfig.model_validate(data)
        configure_logging_from_config(config)
        return _COMMANDS[args.cmd](args, config)
    except (ValueError, FileNotFoundError) as e:
        logger.debug("Command %s failed", args.cmd, exc_info=True)
        console.print(f"[red]ERROR: {e}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
