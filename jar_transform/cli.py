from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from jar_tools.properties import load_properties

from .config import Settings
from .runner import TransformOutcome, collect_jars, run_transforms

logger = logging.getLogger(__name__)

_COMMANDS = {"scan", "show"}


def _resolve_input_path(p: str) -> Path:
    return Path(p).expanduser().resolve()


def _configure_logging(verbosity: int, default_level: str) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.getLevelName(default_level)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="jar-analyzer",
        description="Record the Java packages contained in jars as .properties files.",
    )
    p.add_argument("-v", "--verbose", action="count", default=0, help="-v for progress, -vv for per-jar detail")
    sub = p.add_subparsers(dest="cmd", required=False)

    scan = sub.add_parser("scan", help="transform jars (or directories of jars) into .properties files")
    scan.add_argument("paths", nargs="+", help="jar files, or directories whose first level holds jars")
    scan.add_argument(
        "--results-dir",
        default=str(settings.results_dir),
        help="where the .properties files are written, default results/",
    )
    scan.add_argument("--workers", type=int, default=settings.max_workers, help="parallel transforms, default cpu count")

    show = sub.add_parser("show", help="print the entries of a .properties file")
    show.add_argument("path", help="properties file to read")

    return p


def _print_outcome(outcome: TransformOutcome) -> None:
    if outcome.ok:
        print(f"OK: {outcome.input_path} -> {outcome.output_path}")
    else:
        cause = outcome.error.__cause__ if outcome.error is not None else None
        print(f"FAIL: {outcome.input_path}: {cause or outcome.error}")


def _cmd_scan(args: argparse.Namespace) -> int:
    if args.workers is not None and args.workers < 1:
        raise SystemExit("--workers must be at least 1")
    results_dir = _resolve_input_path(args.results_dir)

    jars: list[Path] = []
    for raw in args.paths:
        try:
            jars.extend(collect_jars(Path(raw)))
        except FileNotFoundError as e:
            raise SystemExit(str(e))
    if not jars:
        print("no jars found")
        return 0

    try:
        outcomes = run_transforms(jars, output_dir=results_dir, max_workers=args.workers)
    except ValueError as e:
        raise SystemExit(str(e))

    for outcome in outcomes:
        _print_outcome(outcome)
    failed = sum(1 for o in outcomes if not o.ok)
    if failed:
        logger.error("%d of %d jar(s) failed", failed, len(outcomes))
        return 1
    return 0


def _cmd_show(args: argparse.Namespace) -> int:
    path = _resolve_input_path(args.path)
    if not path.is_file():
        raise SystemExit(f"not a file: {path}")
    try:
        values = load_properties(path)
    except ValueError as e:
        raise SystemExit(f"cannot parse {path}: {e}")
    for key in values:
        print(f"{key}: {values[key]}")
    return 0


def _apply_scan_shorthand(argv: list[str]) -> list[str]:
    """`jar-analyzer [-v] <path>` is shorthand for `jar-analyzer [-v] scan <path>`."""
    for i, arg in enumerate(argv):
        if arg.startswith("-"):
            continue
        if arg in _COMMANDS:
            return argv
        return [*argv[:i], "scan", *argv[i:]]
    return argv


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    argv = _apply_scan_shorthand(list(argv))

    try:
        settings = Settings.from_env()
    except ValueError as e:
        raise SystemExit(str(e))
    parser = build_parser(settings)
    args = parser.parse_args(argv)
    _configure_logging(args.verbose, settings.log_level)

    if args.cmd == "scan":
        return _cmd_scan(args)
    if args.cmd == "show":
        return _cmd_show(args)

    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
