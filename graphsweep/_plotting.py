"""
Matplotlib front end for the plot controller.

Wraps 3D matplotlib artists in the collaborator interfaces the controller
consumes and drives the controller from ``FuncAnimation``.

Usage::

    from graphsweep import FunctionFamily
    from graphsweep._plotting import animate_plot

    def switch(pc, frame):
        if frame == 300:
            pc.family = FunctionFamily.COSINE

    fig, ax, anim = animate_plot(frames=600, interval=20, on_frame=switch,
                                 family=FunctionFamily.SINE, coefficient=1.0)
    plt.show()
"""
import logging

import numpy

try:
    from matplotlib import pyplot
    from matplotlib.animation import FuncAnimation
    from mpl_toolkits.mplot3d import Axes3D  # noqa: F401, registers 3d
except ImportError:
    logging.warning("Plotting functions are unavailable. To use install "
                    "matplotlib, install using ex. `pip install matplotlib` ")
    matplotlib_available = False
else:
    matplotlib_available = True

from graphsweep._collaborators import ORIGIN, FixedClock
from graphsweep._controller import PlotController
from graphsweep._functions import Point3

# Define colours:
lo = numpy.array([242, 189, 138]) / 255  # light orange
do = numpy.array([235, 129, 27]) / 255  # Dark alert orange


class LineRenderer:
    """Renderer backed by a 3D matplotlib line.

    Points are kept in an (N, 3) array that is pushed to the line with
    ``set_data_3d`` whenever it changes.
    """
    def __init__(self, line):
        self.line = line
        self.points = numpy.empty((0, 3))
        self._push()

    def set_point_count(self, n):
        if n <= self.points.shape[0]:
            self.points = self.points[:n].copy()
        else:
            grow = numpy.zeros((n - self.points.shape[0], 3))
            self.points = numpy.vstack([self.points, grow])
        self._push()

    def set_point(self, index, position):
        self.points[index] = position
        self._push()

    def get_point_count(self):
        return self.points.shape[0]

    def _push(self):
        self.line.set_data_3d(self.points[:, 0], self.points[:, 1],
                              self.points[:, 2])


class ArtistVisibility:
    """Show/hide a group of matplotlib artists together."""
    def __init__(self, *artists):
        self.artists = artists

    def set_visible(self, visible):
        for a in self.artists:
            a.set_visible(visible)


class ArtistCursor:
    """Cursor store that moves a single point marker."""
    def __init__(self, marker, position=ORIGIN):
        self.marker = marker
        self.set(position)

    def get(self):
        return self.position

    def set(self, position):
        self.position = Point3(*position)
        self.marker.set_data_3d([self.position.x], [self.position.y],
                                [self.position.z])


class PlotAnimator:
    """
    Figure, artists and controller for an animated function plot.

    ``update(frame)`` advances the controller by one tick and is the
    callback handed to ``FuncAnimation``.
    """
    def __init__(self, dt=1 / 60, on_frame=None, fig=None, ax=None,
                 figsize=None, show_reference=False, samples=200,
                 **controller_kwargs):
        """
        :param dt: float, seconds of plot time per frame
        :param on_frame: callable, optional, ``on_frame(controller, frame)``
                         called before every tick, ex. to switch family
        :param fig: matplotlib Figure, optional
        :param ax: 3D matplotlib Axes, optional
        :param figsize: tuple, optional, size of a newly created figure
        :param show_reference: bool, draw the full curve of the active family
                               behind the animated path
        :param samples: int, number of samples of the reference curve
        :param controller_kwargs: passed to PlotController
        """
        if not matplotlib_available:
            raise ImportError("PlotAnimator requires matplotlib, install "
                              "using ex. `pip install matplotlib`")
        if fig is None:
            fig = pyplot.figure(figsize=figsize)
        if ax is None:
            ax = fig.add_subplot(1, 1, 1, projection='3d')
        self.fig = fig
        self.ax = ax
        self.on_frame = on_frame
        self.show_reference = show_reference
        self.samples = samples

        self.line, = ax.plot([], [], [], color=do, lw=1.5)
        self.marker, = ax.plot([], [], [], '.', color=do, markersize=10)
        self.reference, = ax.plot([], [], [], color=lo, lw=0.75)
        self.reference.set_visible(show_reference)

        self.controller = PlotController(
            LineRenderer(self.line),
            ArtistVisibility(self.line, self.marker),
            ArtistCursor(self.marker),
            clock=FixedClock(dt),
            **controller_kwargs)
        self._framed_family = None
        self.frame_axes()

        ax.set_xlabel('$x$')
        ax.set_ylabel('$f(x)$')
        ax.set_zlabel('$z$')

    def frame_axes(self):
        """Fit the axes limits to the active family's curve."""
        pc = self.controller
        curve = pc.reference_curve(samples=self.samples)
        bounds = pc.bounds
        pad = pc.plot_speed * pc.clock.delta_time()
        self.ax.set_xlim(bounds.min - pad, bounds.max + pad)

        ys = curve[:, 1][numpy.isfinite(curve[:, 1])]
        if ys.size == 0:
            ys = numpy.array([0.0])
        y_lo, y_hi = ys.min(), ys.max()
        fac = 5e-2
        margin = max(fac * (y_hi - y_lo), fac)
        self.ax.set_ylim(y_lo - margin, y_hi + margin)
        self.ax.set_zlim(-1, 1)

        self.reference.set_data_3d(curve[:, 0], curve[:, 1], curve[:, 2])
        self._framed_family = pc.family

    def update(self, frame):
        if self.on_frame is not None:
            self.on_frame(self.controller, frame)
        self.controller.tick()
        if self._framed_family != self.controller.state.previous_family:
            self.frame_axes()
        return self.line, self.marker, self.reference


def animate_plot(frames=600, interval=50, on_frame=None, figsize=None,
                 show_reference=False, **controller_kwargs):
    """
    Animate the sweep of a plot function.

    Each frame is one controller tick of ``interval`` milliseconds.

    :param frames: int, number of frames (None animates indefinitely)
    :param interval: int, delay between frames in milliseconds
    :param on_frame: callable, optional, ``on_frame(controller, frame)``
    :param figsize: tuple, optional
    :param show_reference: bool, draw the full curve behind the path
    :param controller_kwargs: passed to PlotController, ex. ``family=``,
                              ``coefficient=``, ``plot_speed=``
    :return: fig, ax, anim
    """
    animator = PlotAnimator(dt=interval / 1000.0, on_frame=on_frame,
                            figsize=figsize, show_reference=show_reference,
                            **controller_kwargs)
    anim = FuncAnimation(animator.fig, animator.update, frames=frames,
                         interval=interval, blit=False)
    anim.animator = animator
    return animator.fig, animator.ax, anim
