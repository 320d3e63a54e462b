"""The dining table: philosophers, forks and the monitor that watches them."""

import sys
import threading
import time
from dataclasses import dataclass, field
from typing import List, Optional, TextIO, Tuple

from philosophers.config import Config
from philosophers.timing import get_time

TAKEN_FORK = "has taken a fork"
GRABBED_FORK = "grabbed a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"

_THINK_MS = 10
_EVEN_START_DELAY_MS = 3
_MONITOR_PAUSE_MS = 1
_POLL_SECONDS = 0.0005


@dataclass
class Philosopher:
    """One diner; ``fork`` is the fork on the philosopher's left."""

    number: int
    last_meal: int = 0
    meals: int = 0
    fork: threading.Lock = field(
        default_factory=threading.Lock, repr=False, compare=False
    )


class Table:
    """Runs one dinner and writes its log lines to ``out``."""

    def __init__(self, config: Config, out: Optional[TextIO] = None) -> None:
        self.config = config
        self.out = out if out is not None else sys.stdout
        self.start_time = get_time()
        self.philosophers: List[Philosopher] = [
            Philosopher(number=n, last_meal=self.start_time)
            for n in range(1, config.philosophers + 1)
        ]
        self._over = False
        self._state_lock = threading.Lock()
        self._print_lock = threading.RLock()
        self._meal_lock = threading.Lock()

    def is_over(self) -> bool:
        """Whether someone died or everyone has eaten enough."""
        with self._state_lock:
            return self._over

    def stop(self) -> None:
        """End the dinner."""
        with self._state_lock:
            self._over = True

    def sleep(self, milliseconds: int) -> None:
        """Wait the given time, returning early once the dinner is over."""
        start = get_time()
        while get_time() - start < milliseconds:
            time.sleep(_POLL_SECONDS)
            if self.is_over():
                break

    def _write(self, philosopher: Philosopher, action: str) -> None:
        self.out.write(
            f"{get_time() - self.start_time} {philosopher.number} {action}\n"
        )

    def announce(self, philosopher: Philosopher, action: str) -> None:
        """Log an action unless the dinner is already over."""
        with self._print_lock:
            if not self.is_over():
                self._write(philosopher, action)

    def forks_of(self, philosopher: Philosopher) -> Tuple[int, int]:
        """Indices of the philosopher's two forks, in the order to take them."""
        left = philosopher.number - 1
        right = philosopher.number % self.config.philosophers
        return (left, right) if left < right else (right, left)

    def grab_forks(self, philosopher: Philosopher) -> None:
        """Take both forks, lower index first, and log it."""
        for index in self.forks_of(philosopher):
            self.philosophers[index].fork.acquire()
        with self._print_lock:
            self.announce(philosopher, GRABBED_FORK)
            self.announce(philosopher, GRABBED_FORK)

    def drop_forks(self, philosopher: Philosopher) -> None:
        """Put both forks back, in the reverse order of taking them."""
        for index in reversed(self.forks_of(philosopher)):
            self.philosophers[index].fork.release()

    def eat(self, philosopher: Philosopher) -> bool:
        """Take the forks and eat one meal; False if the dinner ended first."""
        if self.is_over():
            return False
        self.grab_forks(philosopher)
        if self.is_over():
            self.drop_forks(philosopher)
            return False
        with self._meal_lock:
            philosopher.last_meal = get_time()
        self.announce(philosopher, EATING)
        self.sleep(self.config.time_to_eat)
        with self._meal_lock:
            philosopher.meals += 1
        self.drop_forks(philosopher)
        return True

    def routine(self, philosopher: Philosopher) -> None:
        """Eat, sleep and think until the dinner is over."""
        if self.config.philosophers == 1:
            self.announce(philosopher, TAKEN_FORK)
            self.sleep(self.config.time_to_die)
            return
        if philosopher.number % 2 == 0:
            self.sleep(_EVEN_START_DELAY_MS)
        while self.eat(philosopher):
            if self.is_over():
                break
            self.announce(philosopher, SLEEPING)
            self.sleep(self.config.time_to_sleep)
            if self.is_over():
                break
            self.announce(philosopher, THINKING)
            self.sleep(_THINK_MS)

    def everyone_fed(self) -> bool:
        """Whether every philosopher has eaten the required number of meals."""
        if self.config.meals is None:
            return False
        with self._meal_lock:
            return all(p.meals >= self.config.meals for p in self.philosophers)

    def check_starvation(self, philosopher: Philosopher) -> bool:
        """Log the death and end the dinner if the philosopher starved."""
        with self._print_lock:
            with self._meal_lock:
                last_meal = philosopher.last_meal
            if get_time() - last_meal > self.config.time_to_die:
                self._write(philosopher, DIED)
                self.stop()
                return True
        return False

    def monitor(self) -> None:
        """Watch the table until a death or until everyone is fed."""
        while True:
            if any(self.check_starvation(p) for p in self.philosophers):
                return
            if self.is_over():
                return
            if self.everyone_fed():
                self.stop()
                return
            self.sleep(_MONITOR_PAUSE_MS)

    def run(self) -> None:
        """Seat everyone, run the dinner to its end and wait for all threads."""
        self.start_time = get_time()
        with self._meal_lock:
            for philosopher in self.philosophers:
                philosopher.last_meal = self.start_time
        threads = [
            threading.Thread(target=self.routine, args=(p,), name=f"philo-{p.number}")
            for p in self.philosophers
        ]
        for thread in threads:
            thread.start()
        try:
            self.monitor()
        finally:
            self.stop()
            for thread in threads:
                thread.join()