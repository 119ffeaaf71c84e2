# philo

A threaded simulation of the dining philosophers problem.

Philosophers sit around a table with one fork between each pair of
neighbours. Each philosopher runs in its own thread. It takes the two
forks beside it, eats, puts the forks down, sleeps, thinks, and starts
over. A monitor thread watches the table. The simulation ends when a
philosopher goes longer than the time to die without starting a meal.
If a meal target was given, it also ends when every philosopher has eaten
at least that many times.

## Installation

```
pip install .
```

## Usage

```
philo NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

The same command can be run as `python -m philo.cli`.

All times are in milliseconds. Every argument must be a plain run of
ASCII decimal digits. An empty argument counts as zero. A sign,
whitespace or any other character makes the command print
`invalid atoi` and exit with status 0, without running the simulation.
With the wrong number of arguments the command prints
`nbr of arg not valid` with no trailing newline and exits with status 1.

Example:

```
philo 5 800 200 200 7
```

Each event is printed as the milliseconds since the start, followed by
the philosopher's number (counting from 1) and what happened:

```
0 Philosopher 1 get left fork
0 Philosopher 1 get right fork
0 Philosopher 1 is eating
200 Philosopher 1 is sleeping
...
All philosophers have eaten!
```

Even-numbered seats pick up the left fork first and odd-numbered seats
pick up the right fork first. When the number of philosophers is odd, a
philosopher waits a further `2 * TIME_TO_EAT - TIME_TO_SLEEP`
milliseconds after thinking. If a philosopher starves, the last line is
`<ms> Philosopher <n> died`. Once the simulation has stopped, no further
status lines are printed.

## Use from Python

```python
import sys

from philo.settings import parse_settings
from philo.simulation import Table

settings = parse_settings(["4", "410", "200", "200", "3"])
outcome = Table(settings, sys.stdout).run()
```

- `philo.settings.parse_number(text)` parses a single argument. It raises
  `InvalidNumberError`, a subclass of `ValueError`, for anything other
  than digits.
- `philo.settings.parse_settings(args)` takes four or five arguments and
  returns a frozen `Settings` dataclass with the fields `philosophers`,
  `time_to_die`, `time_to_eat`, `time_to_sleep` and `meals_required`.
  `meals_required` is `None` when no fifth argument was given. It raises
  `ValueError` for any other number of arguments.
- `philo.simulation.Table(settings, out=None)` lays the table. Log lines
  go to `out`, or to standard output when `out` is not given.
  `Table.run()` starts the philosopher threads and the monitor thread and
  waits for all of them to finish. It returns the number of the
  philosopher who died, or `None` if everyone ate the required number of
  meals.
- `Table` also provides `monitor()`, `dine(philosopher)`,
  `report(seat, status)`, `sleep(duration_ms)`, `pause(duration_ms)`,
  `stop()`, `stopped()` and `elapsed_ms()`. `now_ms()` returns the
  wall-clock time in milliseconds.

## Tests

```
pip install .[test]
pytest
```