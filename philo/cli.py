"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philo.settings import InvalidNumberError, parse_settings
from philo.simulation import Table


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation with the given arguments and return an exit status.

    The arguments are: number of philosophers, time to die, time to eat,
    time to sleep and, optionally, the number of meals each must eat.
    A malformed number ends the program quietly with status 0; a wrong
    number of arguments ends it with status 1.
    """
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        settings = parse_settings(args)
    except InvalidNumberError as exc:
        print(exc)
        return 0
    except ValueError as exc:
        print(exc, end="")
        sys.stdout.flush()
        return 1
    Table(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())