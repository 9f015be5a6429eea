"""
Animated sine sweep.

Plots y = 1.5 sin(x) + 0.5 over [-6, 6], sweeping the input back and forth
with the full curve drawn faintly behind the path.
"""
import logging

import matplotlib.pyplot as plt

from graphsweep import FunctionFamily
from graphsweep._plotting import animate_plot

logging.basicConfig(level=logging.INFO)

fig, ax, anim = animate_plot(
    frames=None, interval=20,
    figsize=(10, 5),
    show_reference=True,
    family=FunctionFamily.SINE,
    coefficient=1.5,
    y_intercept=0.5,
    plot_speed=3.0,
    input_range=6,
)

plt.show()
