"""
Headless sweep without matplotlib.

Drives a PlotController with the in-memory collaborators and prints the
emitted points, switching from a line to a cube half way through.
"""
from graphsweep import (
    PlotController,
    FunctionFamily,
    PointBuffer,
    Visibility,
    Cursor,
    FixedClock,
)

pc = PlotController(PointBuffer(), Visibility(), Cursor(),
                    clock=FixedClock(0.25),
                    family=FunctionFamily.LINE,
                    coefficient=2.0, y_intercept=1.0)

for i in range(60):
    if i == 30:
        pc.family = FunctionFamily.CUBED
    p = pc.tick()
    if p is None:
        print(f"{i:3d}  {pc.phase.value}")
    else:
        print(f"{i:3d}  x = {p.x:6.2f}  y = {p.y:7.2f}  "
              f"({pc.state.direction.name.lower()})")

print(f"{pc.renderer.get_point_count()} points on the path")
