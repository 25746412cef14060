"""Command-line interface for statesync."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from statesync import (
    ActionKind,
    ConfigError,
    ReconcileConfig,
    Reconciler,
    ReconcileResult,
    StateError,
    StateLoadError,
    __version__,
    load_config,
)
from statesync.rich_trace import RichTraceSink
from statesync.states import JsonFileState


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("current", help="Path to the current state JSON file")
    parser.add_argument("desired", help="Path to the desired state JSON file")
    parser.add_argument("--config", help="Path to statesync.json")
    parser.add_argument("--verbose", "-v", action="store_true", help="Trace every action and enable debug logging")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="statesync")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)
    diff_parser = subparsers.add_parser("diff", help="Show the actions needed without changing anything")
    _add_common_arguments(diff_parser)

    apply_parser = subparsers.add_parser("apply", help="Reconcile the current state file")
    _add_common_arguments(apply_parser)
    apply_parser.add_argument("--output", "-o", help="Write the reconciled state here instead of CURRENT")

    return parser


def _resolve_config(args: argparse.Namespace) -> ReconcileConfig:
    config = load_config(args.config) if args.config else ReconcileConfig()
    return config.model_copy(
        update={
            "dry_run": config.dry_run or args.command == "diff",
            "verbose": config.verbose or args.verbose,
        }
    )


def _run(args: argparse.Namespace) -> ReconcileResult:
    config = _resolve_config(args)
    current = JsonFileState.load(args.current, strict=config.strict)
    desired = JsonFileState.load(args.desired)

    trace = RichTraceSink() if config.verbose else None
    result = Reconciler(config, trace=trace).run(current, desired)

    written: Path | None = None
    if not result.dry_run:
        written = current.save(getattr(args, "output", None))
    print(_format_summary(result, written))
    return result


def _format_summary(result: ReconcileResult, written: Path | None) -> str:
    mode = "dry-run" if result.dry_run else "apply"
    lines = [
        "",
        f"statesync - reconcile complete ({mode})",
        "",
        f"  Create:  {result.count(ActionKind.CREATE)}",
        f"  Update:  {result.count(ActionKind.UPDATE)}",
        f"  Delete:  {result.count(ActionKind.DELETE)}",
        "",
    ]

    if result.converged:
        lines.append("  Already converged")
    for action in result.actions:
        lines.append(f"  {action.kind:<6}  {action.key:<16}  {action.reason}")

    if written is not None:
        lines.append("")
        lines.append(f"  State:   {written}")

    if result.dry_run:
        lines.append("")
        lines.append("  [dry-run] No changes were made")

    lines.append("")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        _run(args)
        return 0
    except (ConfigError, StateLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except StateError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1
