"""
graphsweep: animated back-and-forth plotting of elementary functions.

Usage::

    from graphsweep import PlotController, FunctionFamily
    from graphsweep import PointBuffer, Visibility, Cursor

    pc = PlotController(PointBuffer(), Visibility(), Cursor(),
                        family=FunctionFamily.SQUARED, coefficient=0.5)
    pc.tick(1 / 60)
"""
from ._functions import (
    FunctionFamily,
    Point3,
    DomainBounds,
    get_plot_function,
    domain_bounds,
    sample_curve,
)
from ._collaborators import (
    Renderer,
    VisibilityToggle,
    Clock,
    CursorStore,
    PointBuffer,
    Visibility,
    Cursor,
    FixedClock,
    WallClock,
)
from ._controller import Direction, PlotPhase, PlotState, PlotController

__all__ = [
    "FunctionFamily",
    "Point3",
    "DomainBounds",
    "get_plot_function",
    "domain_bounds",
    "sample_curve",
    "Renderer",
    "VisibilityToggle",
    "Clock",
    "CursorStore",
    "PointBuffer",
    "Visibility",
    "Cursor",
    "FixedClock",
    "WallClock",
    "Direction",
    "PlotPhase",
    "PlotState",
    "PlotController",
]
