# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread. A philosopher takes the two forks beside them, eats, sleeps and
then thinks, over and over. A monitor watches the table. The dinner ends when
a philosopher has gone longer than the time to die without starting a meal,
or, if a meal count was given, when every philosopher has eaten at least that
many times.

## Installation

```
pip install .
```

## Usage

```
philo NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

The same program also runs with `python -m philosophers.cli`.

All times are in milliseconds. Every value must be a whole number from 1 to
2147483647, written with the digits 0-9 only. Signs, spaces and other
characters are not accepted. `MEALS` is optional.

Example:

```
philo 5 800 200 200 7
```

Each output line holds the milliseconds since the dinner started, the
philosopher's number (counting from 1), and the action:

```
<ms> <n> grabbed a fork
<ms> <n> is eating
<ms> <n> is sleeping
<ms> <n> is thinking
<ms> <n> died
```

A philosopher prints `grabbed a fork` twice after taking both forks. Even
numbered philosophers wait 3 ms before their first try, and thinking lasts
10 ms. When there is only one philosopher, they print `has taken a fork`,
wait for the time to die, and then the monitor reports their death.

Exit status:

- With the wrong number of arguments, the command prints
  `4 arguments required.` and a usage line, and exits with status 1.
- With a value that is not a positive whole number, it prints
  `INVALID INPUT` / `All values must be positives` and exits with status 1.
- Otherwise it runs the dinner to its end and exits with status 0.

## Library use

```python
import sys

from philosophers.config import InvalidInput, parse_arguments
from philosophers.table import Table

config = parse_arguments(["4", "410", "200", "200", "3"])
Table(config, sys.stdout).run()
```

- `philosophers.config.parse_arguments(args)` takes four or five strings and
  returns a frozen `Config` with `philosophers`, `time_to_die`, `time_to_eat`,
  `time_to_sleep` and `meals` (which is `None` when not given). It raises
  `InvalidInput`, a subclass of `ValueError`, when the count is wrong or a
  value is not a positive whole number.
- `philosophers.table.Table(config, out)` writes its log lines to `out`, or to
  standard output when `out` is `None`. `run()` starts one thread per
  philosopher, watches them until the dinner ends, and waits for every thread
  to finish. `is_over()` reports whether the dinner has ended. `stop()` ends
  it.
- `philosophers.timing.get_time()` returns the wall-clock time in
  milliseconds. `parse_int(text)` parses a digits-only integer and raises
  `ValueError` otherwise.

## Tests

```
pip install .[test]
pytest
```