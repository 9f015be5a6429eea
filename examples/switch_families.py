"""
Runtime family switching.

Cycles through every function family, switching every 400 frames. Each
switch clears the path and pauses for one second before plotting resumes.
"""
import logging

import matplotlib.pyplot as plt

from graphsweep import FunctionFamily
from graphsweep._plotting import animate_plot

logging.basicConfig(level=logging.INFO)

families = list(FunctionFamily)


def cycle(pc, frame):
    """Select the next family every 400 frames."""
    pc.family = families[(frame // 400) % len(families)]


fig, ax, anim = animate_plot(
    frames=400 * len(families), interval=20,
    on_frame=cycle,
    coefficient=1.0,
    plot_speed=2.0,
    input_range=4,
)

plt.show()
