"""Named counters and CPU-time stopwatches."""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Callable, Iterator

Clock = Callable[[], int]


def _user_time_us() -> int:
    """User CPU time of this process, in microseconds."""
    return int(os.times().user * 1_000_000)


class Stopwatch:
    """Measures elapsed time in microseconds on a clock (user CPU time by default)."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or _user_time_us
        self._started = 0
        self._finished = -1
        self._elapsed = 0
        self.start()

    def start(self) -> None:
        self._started = self._clock()
        self._finished = -1
        self._elapsed = 0

    def stop(self) -> None:
        if self._finished < self._started:
            self._finished = self._clock()

    def resume(self) -> None:
        if self._finished >= self._started:
            self._elapsed += self._finished - self._started
            self._started = self._clock()
            self._finished = -1

    def elapsed(self) -> int:
        """Elapsed microseconds, including the running segment if any."""
        if self._finished < self._started:
            return self._elapsed + self._clock() - self._started
        return self._elapsed + self._finished - self._started

    def to_seconds(self) -> float:
        return self.elapsed() / 1_000_000

    def __str__(self) -> str:
        time = self.elapsed()
        hours = time // 3_600_000_000
        minutes = time // 60_000_000 - hours * 60
        seconds = time / 1_000_000 - minutes * 60 - hours * 3600
        text = ""
        if hours > 0:
            text += f"{hours}h"
        if minutes > 0:
            text += f"{minutes}m"
        return text + f"{seconds:g}s"


class Stats:
    """A collection of named counters and named stopwatches."""

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock
        self._counters: dict[str, int] = {}
        self._watches: dict[str, Stopwatch] = {}

    def _watch(self, name: str) -> Stopwatch:
        watch = self._watches.get(name)
        if watch is None:
            watch = self._watches[name] = Stopwatch(self._clock)
        return watch

    def reset(self) -> None:
        self._counters.clear()
        self._watches.clear()

    def get(self, name: str) -> int:
        return self._counters.setdefault(name, 0)

    def uset(self, name: str, value: int) -> int:
        self._counters[name] = value
        return value

    def count(self, name: str) -> None:
        self._counters[name] = self._counters.get(name, 0) + 1

    def count_max(self, name: str, value: int) -> None:
        self._counters[name] = max(self._counters.get(name, 0), value)

    def start(self, name: str) -> None:
        self._watch(name).start()

    def stop(self, name: str) -> None:
        self._watch(name).stop()

    def resume(self, name: str) -> None:
        self._watch(name).resume()

    @contextmanager
    def scoped(self, name: str, reset: bool = False) -> Iterator[None]:
        """Time the enclosed block; with ``reset`` the watch is ``<name>.last``, restarted."""
        if reset:
            name += ".last"
            self.start(name)
        else:
            self.resume(name)
        try:
            yield
        finally:
            self.stop(name)

    def report(self) -> str:
        lines = ["\n\n************** STATS ***************** \n"]
        lines.extend(f"{k}: {v}\n" for k, v in sorted(self._counters.items()))
        lines.extend(f"{k}: {w}\n" for k, w in sorted(self._watches.items()))
        lines.append("************** STATS END ***************** \n")
        return "".join(lines)

    def report_brunch(self) -> str:
        lines = ["\n\n************** BRUNCH STATS ***************** \n"]
        lines.extend(f"BRUNCH_STAT {k} {v}\n" for k, v in sorted(self._counters.items()))
        lines.extend(
            f"BRUNCH_STAT {k} {w.to_seconds():g}sec \n" for k, w in sorted(self._watches.items())
        )
        lines.append("************** BRUNCH STATS END ***************** \n")
        return "".join(lines)