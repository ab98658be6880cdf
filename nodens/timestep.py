"""Frame time deltas."""

from __future__ import annotations

import functools


@functools.total_ordering
class TimeStep:
    """Time elapsed between two frames, in seconds.

    A time step behaves like a number wherever one is expected.
    """

    __slots__ = ("_time",)

    def __init__(self, time: float = 0.0) -> None:
        self._time = float(time)

    @property
    def seconds(self) -> float:
        """The step in seconds."""
        return self._time

    @property
    def milliseconds(self) -> float:
        """The step in milliseconds."""
        return self._time * 1000

    def __float__(self) -> float:
        return self._time

    def __add__(self, other: float) -> float:
        return self._time + float(other)

    def __radd__(self, other: float) -> float:
        return float(other) + self._time

    def __sub__(self, other: float) -> float:
        return self._time - float(other)

    def __rsub__(self, other: float) -> float:
        return float(other) - self._time

    def __mul__(self, other: float) -> float:
        return self._time * float(other)

    def __rmul__(self, other: float) -> float:
        return float(other) * self._time

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (TimeStep, int, float)):
            return self._time == float(other)
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, (TimeStep, int, float)):
            return self._time < float(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._time)

    def __repr__(self) -> str:
        return f"TimeStep({self._time!r})"