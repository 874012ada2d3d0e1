# philosim

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread and sits between two forks, each of which is a lock. A philosopher
takes both forks, eats, sleeps and then thinks, over and over. A monitor stops
the simulation as soon as one philosopher has gone too long without eating.
If a meal count is given, it also stops once every philosopher has eaten that
many times.

## Installation

```
pip install .
```

## Usage

```
philosim number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

The same command can be started with `python -m philosim.cli`.

Every argument must be a positive whole number made only of the digits 0-9;
signs, spaces and zero are rejected. All times are in milliseconds. If the
arguments are wrong, the usage table is printed and the command exits with
status 1. After a normal run it exits with status 0.

Example:

```
philosim 5 800 200 200 7
```

Each line of output is one event: the milliseconds since the start, the
philosopher's number (counted from 1) and what happened. Philosophers with an
even number wait about 10 ms before they first reach for their forks. The
output looks like this (the exact times vary from run to run):

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
...
```

The possible events are `has taken a fork`, `is eating`, `is sleeping` and
`is thinking`. The run ends with either `<ms> <id> died` or
`Every philosopher ate <n> times`; no status line is printed after that.

A table with one philosopher has only one fork. That philosopher takes it,
cannot take a second, puts it back and stops; the monitor then reports its
death once `time_to_die` has passed.

## Library use

```python
import io

from philosim.config import UsageError, parse_args
from philosim.simulation import Simulation

config = parse_args(["4", "410", "200", "200", "3"])
out = io.StringIO()
Simulation(config, out=out).run()
print(out.getvalue().splitlines()[-1])
```

- `philosim.config.parse_args(argv)` takes the arguments after the program
  name and returns a frozen `Config` dataclass (`philo_count`,
  `time_to_die_ms`, `time_to_eat_ms`, `time_to_sleep_ms`, `required_meals`,
  where `required_meals` of 0 means no meal limit). It raises `UsageError`, a
  `ValueError` whose message is the usage table, for invalid input.
- `parse_positive_int(text)` parses one argument the same way, and
  `usage_text()` returns the usage table.
- `philosim.simulation.Simulation(config, out=None)` writes its lines to `out`,
  or to standard output when none is given. `run()` starts the philosopher
  threads, monitors them until the end and joins them; `start()`, `monitor()`
  and `join()` do those steps one at a time. `is_over()` tells whether the run
  has ended.
- `timestamp_ms()` returns the wall-clock time in milliseconds.

## Running the tests

```
pip install .[test]
pytest
```