"""Command-line entry point for the dining philosophers simulation."""

import sys
from typing import Optional, Sequence

from philosophers.config import InvalidInput, parse_arguments
from philosophers.table import Table


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run a dinner from command-line arguments and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        config = parse_arguments(args)
    except InvalidInput as exc:
        sys.stdout.write(str(exc))
        sys.stdout.flush()
        return 1
    Table(config, sys.stdout).run()
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())