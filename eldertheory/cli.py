"""Command-line entry point for the hierarchical Elder Theory system."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence, TextIO

_DESCRIPTION = """\
Elder Theory Hierarchical AI System: a comprehensive implementation of Elder
Theory featuring hierarchical artificial intelligence with Elder, Mentor, and
Erudite entities.

The system implements gravitational field dynamics, heliomorphic functions,
and multi-level knowledge transfer across domains."""

_SIMULATION_STEPS = (
    "Initializing Elder entities...",
    "Setting up gravitational fields...",
    "Starting orbital dynamics...",
    "Simulation completed successfully!",
)

_TRAINING_STEPS = (
    "Initializing hierarchical training...",
    "Training Elder entities...",
    "Training Mentor entities across domains...",
    "Training Erudite entities for specific tasks...",
    "Training completed successfully!",
)

_ANALYSIS_STEPS = (
    "Analyzing system performance...",
    "Checking conservation laws...",
    "Validating mathematical properties...",
    "Generating performance report...",
    "Analysis completed successfully!",
)


def _emit(steps: Iterable[str], stream: TextIO | None = None) -> list[str]:
    """Write each step on its own line and return the steps written."""
    out = stream if stream is not None else sys.stdout
    written = []
    for step in steps:
        out.write(f"{step}\n")
        written.append(step)
    return written


def run_simulation() -> list[str]:
    """Report the stages of a simulation run and return them."""
    return _emit(_SIMULATION_STEPS)


def run_training() -> list[str]:
    """Report the stages of hierarchical training and return them."""
    return _emit(_TRAINING_STEPS)


def run_analysis() -> list[str]:
    """Report the stages of a system analysis and return them."""
    return _emit(_ANALYSIS_STEPS)


_COMMANDS = {
    "simulate": (
        "Run Elder Theory simulation",
        "Execute orbital dynamics simulation with Elder, Mentor, and Erudite entities",
        "Starting Elder Theory simulation...",
        run_simulation,
    ),
    "train": (
        "Train hierarchical models",
        "Train Elder, Mentor, and Erudite entities using hierarchical learning algorithms",
        "Starting hierarchical training...",
        run_training,
    ),
    "analyze": (
        "Analyze system performance",
        "Analyze Elder Theory system performance and generate reports",
        "Starting system analysis...",
        run_analysis,
    ),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eldertheory",
        description=_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command")
    for name, (short, long, _, _) in _COMMANDS.items():
        subparsers.add_parser(name, help=short, description=long)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named in argv, or print a short banner when none is given."""
    args = _build_parser().parse_args(argv)
    if args.command is None:
        _emit(
            (
                "Elder Theory Hierarchical AI System",
                "Use 'eldertheory --help' to see available commands",
            )
        )
        return 0
    _, _, banner, action = _COMMANDS[args.command]
    _emit((banner,))
    action()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())