#!/usr/bin/env python3
"""
CLI for the POJO tester.

Usage:
    python -m pojo_tester myapp.models
    python -m pojo_tester myapp.models:Employee myapp.dto:Address --trace
    python -m pojo_tester myapp.models --check constructor --output results.json
"""

import argparse
import importlib
import json
import os
import sys
from pathlib import Path

from .console_reporter import ConsoleReporter
from .models import CheckKind
from .runner import PojoRunner

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


class TargetError(Exception):
    """A command line target cannot be resolved to classes."""


def env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pojo-tester",
        description="Check that the setters and getters of data objects round-trip values",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "targets",
        nargs="+",
        metavar="TARGET",
        help="'package.module' (every data object in it) or 'package.module:ClassName'",
    )
    parser.add_argument(
        "--check", "-c",
        choices=[k.value for k in CheckKind],
        default=CheckKind.ALL.value,
        help="Check to run (default: all)",
    )
    parser.add_argument(
        "--trace", "-t",
        action="store_true",
        default=env_flag("POJO_TESTER_TRACE"),
        help="Print every construction, setter and getter call (or set POJO_TESTER_TRACE=1)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Only print the summary",
    )
    parser.add_argument(
        "--output", "-o",
        help="Output file for results JSON",
    )
    return parser


def resolve_target(target: str, runner: PojoRunner) -> list[type]:
    """Turn 'module' or 'module:Class' into the classes to check."""
    module_name, _, class_name = target.partition(":")
    try:
        module = importlib.import_module(module_name)
    except Exception as e:
        # Covers errors raised by the module body as well as missing modules
        raise TargetError(f"Cannot import module '{module_name}': {e}") from e

    if not class_name:
        return runner.discover_classes(module)

    obj = module
    for part in class_name.split("."):
        obj = getattr(obj, part, None)
        if obj is None:
            raise TargetError(f"Module '{module_name}' has no class '{class_name}'")
    if not isinstance(obj, type):
        raise TargetError(f"'{target}' is not a class")
    return [obj]


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    runner = PojoRunner(log_enabled=args.trace, verbose=not args.quiet)

    classes = []
    for target in args.targets:
        try:
            classes.extend(resolve_target(target, runner))
        except TargetError as e:
            print(f"Error: {e}")
            return EXIT_USAGE

    if not classes:
        print("Error: No data object classes found in the given targets")
        return EXIT_USAGE

    results = runner.run_classes(classes, CheckKind(args.check))
    summary = runner.summarize(results)

    ConsoleReporter().report(results, summary)

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(json.dumps({
            "summary": summary.to_dict(),
            "results": [r.to_dict() for r in results],
        }, indent=2))
        print(f"Results written to {output_path}")

    return EXIT_OK if summary.success else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
