"""
Collaborator interfaces consumed by the plot controller.

The controller never draws anything itself, it talks to four small
interfaces:

- ``Renderer``: an ordered, growing sequence of 3D points shown as a path
- ``VisibilityToggle``: shows/hides the plotted path
- ``Clock``: seconds elapsed since the previous tick
- ``CursorStore``: the position of the plotting cursor

Headless in-memory implementations are provided here, the matplotlib ones
live in ``graphsweep._plotting``.
"""
from __future__ import annotations

import time
from typing import Protocol, runtime_checkable

from graphsweep._functions import Point3


ORIGIN = Point3(0.0, 0.0, 0.0)


# ---------------------------------------------------------------------------
# Protocols (structural typing interfaces)
# ---------------------------------------------------------------------------
@runtime_checkable
class Renderer(Protocol):
    """Point buffer drawn as a connected path."""

    def set_point_count(self, n: int) -> None:
        ...

    def set_point(self, index: int, position: Point3) -> None:
        ...

    def get_point_count(self) -> int:
        ...


@runtime_checkable
class VisibilityToggle(Protocol):
    def set_visible(self, visible: bool) -> None:
        ...


@runtime_checkable
class Clock(Protocol):
    def delta_time(self) -> float:
        """Seconds elapsed since the last tick."""
        ...


@runtime_checkable
class CursorStore(Protocol):
    def get(self) -> Point3:
        ...

    def set(self, position: Point3) -> None:
        ...


# ---------------------------------------------------------------------------
# In-memory implementations
# ---------------------------------------------------------------------------
class PointBuffer:
    """Renderer that only keeps the points in a list."""

    def __init__(self):
        self.points = []

    def set_point_count(self, n: int) -> None:
        if n < len(self.points):
            del self.points[n:]
        else:
            self.points.extend([ORIGIN] * (n - len(self.points)))

    def set_point(self, index: int, position: Point3) -> None:
        self.points[index] = Point3(*position)

    def get_point_count(self) -> int:
        return len(self.points)


class Visibility:
    def __init__(self, visible: bool = False):
        self.visible = visible

    def set_visible(self, visible: bool) -> None:
        self.visible = visible


class Cursor:
    def __init__(self, position: Point3 = ORIGIN):
        self.position = Point3(*position)

    def get(self) -> Point3:
        return self.position

    def set(self, position: Point3) -> None:
        self.position = Point3(*position)


class FixedClock:
    """Clock returning the same time step on every tick."""

    def __init__(self, dt: float):
        self.dt = dt

    def delta_time(self) -> float:
        return self.dt


class WallClock:
    """Clock measuring real time between successive ``delta_time`` calls.

    The first call returns 0.0.
    """

    def __init__(self, timer=time.perf_counter):
        self.timer = timer
        self._last = None

    def delta_time(self) -> float:
        now = self.timer()
        if self._last is None:
            dt = 0.0
        else:
            dt = now - self._last
        self._last = now
        return dt
