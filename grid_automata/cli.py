from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from grid_automata.domain.errors import InvalidInputError
from grid_automata.registry import SolutionRegistry, build_registry

logger = logging.getLogger(__name__)


def _add_common_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--data-dir", type=Path, default=Path("data"))
    p.add_argument("--verbose", action="store_true", help="Log simulation progress")


def _build_list_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("list", help="List registered solutions")
    p.set_defaults(func=_handle_list)
    _add_common_arguments(p)


def _build_run_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("run", help="Run one or more named solutions")
    p.set_defaults(func=_handle_run)
    p.add_argument("names", nargs="+", metavar="NAME")
    _add_common_arguments(p)


def _build_run_all_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("run-all", help="Run every registered solution")
    p.set_defaults(func=_handle_run_all)
    _add_common_arguments(p)


def _run_named(registry: SolutionRegistry, names: list[str]) -> int:
    """Print ``name: result`` for each solution; return the process exit status."""
    status = 0
    for name in names:
        try:
            result = registry.run(name)
        except (OSError, InvalidInputError) as exc:
            logger.error("%s failed: %s", name, exc)
            print(f"{name}: error: {exc}")
            status = 1
            continue
        print(f"{name}: {result}")
    return status


def _handle_list(args: argparse.Namespace) -> int:
    for name in build_registry(args.data_dir).names():
        print(name)
    return 0


def _handle_run(args: argparse.Namespace) -> int:
    registry = build_registry(args.data_dir)
    unknown = [name for name in args.names if name not in registry]
    if unknown:
        raise SystemExit(f"unknown solution(s): {', '.join(unknown)}")
    return _run_named(registry, args.names)


def _handle_run_all(args: argparse.Namespace) -> int:
    registry = build_registry(args.data_dir)
    return _run_named(registry, registry.names())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-automata", description="Run grid and cellular-automaton puzzle solutions"
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _build_list_parser(sub)
    _build_run_parser(sub)
    _build_run_all_parser(sub)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
