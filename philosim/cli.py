"""Command-line entry point of the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philosim.config import UsageError, parse_args
from philosim.simulation import Simulation


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the simulation and return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_args(args)
    except UsageError as exc:
        print(exc)
        return 1
    try:
        Simulation(config).run()
    except RuntimeError as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())