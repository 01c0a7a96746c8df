"""
Benchmark timing.

Runs an operation a fixed number of times and reports the mean wall-clock
cost of one call. Construction of the operand is kept out of the timed
region so in-place operations (``transpose``) can start from a fresh
matrix on every iteration.
"""

import time
from typing import Any, Callable


class Timer:
    """
    Repeat-and-average timer for matrix operations.

    Usage:
        timer = Timer(repeat=1000)
        timer.measure('transpose', Matrix.transpose, setup=make_matrix)
        timer.measure('determinant', matrix.determinant)
        timer.averages()
        # {'transpose': 2.1e-06, 'determinant': 1.4e-05}
    """

    def __init__(self, repeat: int):
        if repeat < 1:
            raise ValueError(f"repeat must be positive, got {repeat}")
        self.repeat = repeat
        self._elapsed: dict[str, float] = {}
        self._calls: dict[str, int] = {}

    def measure(
        self,
        name: str,
        operation: Callable[..., Any],
        setup: Callable[[], Any] | None = None,
    ) -> float:
        """
        Time ``repeat`` calls of ``operation``.

        Args:
            name: Operation label; measuring the same label again pools
                the calls
            operation: Called with the result of ``setup()`` when given,
                otherwise with no arguments
            setup: Untimed factory for the operand of each call

        Returns:
            Mean seconds per call for this measurement
        """
        elapsed = 0.0
        for _ in range(self.repeat):
            args = (setup(),) if setup is not None else ()
            start = time.perf_counter()
            operation(*args)
            elapsed += time.perf_counter() - start

        self._elapsed[name] = self._elapsed.get(name, 0.0) + elapsed
        self._calls[name] = self._calls.get(name, 0) + self.repeat
        return elapsed / self.repeat

    def averages(self) -> dict[str, float]:
        """Mean seconds per call for every measured operation, in order measured."""
        return {name: self._elapsed[name] / self._calls[name] for name in self._elapsed}

    def report(self) -> str:
        """Per-call timings in microseconds, one operation per line."""
        lines = [
            f"{name:>12}: {seconds * 1e6:>9.2f} us/iter"
            for name, seconds in self.averages().items()
        ]
        return "\n".join(lines)
