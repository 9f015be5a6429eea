"""
Plot controller: sweeps the input of the active plot function back and forth
across its domain bounds, emitting one point per tick to a renderer.

Every tick is evaluated in this order:

1. Family change: if ``current_family != previous_family`` the plot is reset
   (``reset_plot``) and the domain bounds recomputed (``recompute_bounds``).
   This can interrupt a transition that is already in progress.
2. Transition: while transitioning the elapsed time is accumulated and
   plotting resumes on the first tick where it exceeds
   ``transition_duration``.
3. Plotting: reverse direction at the bounds, step the cursor input by
   ``plot_speed * dt`` and write the evaluated position to the renderer at
   the current point index.

Usage::

    from graphsweep import PlotController, FunctionFamily
    from graphsweep import PointBuffer, Visibility, Cursor, FixedClock

    pc = PlotController(PointBuffer(), Visibility(), Cursor(),
                        clock=FixedClock(1 / 60),
                        family=FunctionFamily.SINE, coefficient=1.0)
    for _ in range(600):
        pc.tick()
    pc.family = FunctionFamily.CUBED  # reset happens on the next tick
"""
import enum
import logging

import numpy

from graphsweep._collaborators import ORIGIN
from graphsweep._functions import (
    FunctionFamily,
    Point3,
    clamp_input_range,
    domain_bounds,
    get_plot_function,
    sample_curve,
)


class Direction(enum.Enum):
    FORWARD = 1
    BACKWARD = -1


class PlotPhase(enum.Enum):
    PLOTTING = 'plotting'
    TRANSITIONING = 'transitioning'


class PlotState:
    """Mutable state of a plotting run, owned by a single PlotController.

    ``previous_family`` starts as None so that it differs from any family and
    the first tick always resets the plot.
    """
    def __init__(self, family):
        self.current_family = family
        self.previous_family = None
        self.direction = Direction.FORWARD
        self.input_value = 0.0
        self.cursor_position = ORIGIN
        self.point_index = 0
        self.is_transitioning = True
        self.transition_elapsed = 0.0

    def __repr__(self):
        return (f"PlotState(family={self.current_family}, "
                f"direction={self.direction}, "
                f"cursor_position={tuple(self.cursor_position)}, "
                f"point_index={self.point_index}, "
                f"is_transitioning={self.is_transitioning}, "
                f"transition_elapsed={self.transition_elapsed})")


class PlotController:
    def __init__(self, renderer, visibility, cursor, clock=None,
                 family=FunctionFamily.LINE, coefficient=0.0, y_intercept=0.0,
                 plot_speed=1.0, input_range=2, transition_duration=1.0):
        """
        :param renderer: Renderer, point buffer drawn as a connected path
        :param visibility: VisibilityToggle, shows/hides the plotted path
        :param cursor: CursorStore, position of the plotting cursor
        :param clock: Clock, optional, supplies the time step when ``tick``
                      is called without one
        :param family: FunctionFamily, the function to plot, may be changed
                       at runtime through the ``family`` property
        :param coefficient: float, free parameter k of the plot function
        :param y_intercept: float, free parameter b of the plot function
        :param plot_speed: float, input units advanced per second, must be
                           positive
        :param input_range: int, magnitude of the domain bounds, clamped to
                            [2, 20]. Changes take effect on the next family
                            switch
        :param transition_duration: float, seconds paused after a reset
        """
        self.renderer = renderer
        self.visibility = visibility
        self.cursor = cursor
        self.clock = clock

        self.coefficient = coefficient
        self.y_intercept = y_intercept
        self.plot_speed = plot_speed
        self.input_range = input_range
        self.transition_duration = transition_duration

        self._check_family(family)
        self._state = PlotState(family)
        self._bounds = domain_bounds(family, self._input_range)

    # %% Configuration
    @property
    def family(self):
        return self._state.current_family

    @family.setter
    def family(self, family):
        self._check_family(family)
        self._state.current_family = family

    @property
    def input_range(self):
        return self._input_range

    @input_range.setter
    def input_range(self, input_range):
        self._input_range = clamp_input_range(input_range)

    @property
    def plot_speed(self):
        return self._plot_speed

    @plot_speed.setter
    def plot_speed(self, speed):
        if speed <= 0:
            raise ValueError(f"plot_speed must be positive, got {speed}")
        self._plot_speed = float(speed)

    @property
    def transition_duration(self):
        return self._transition_duration

    @transition_duration.setter
    def transition_duration(self, duration):
        if duration < 0:
            raise ValueError(f"transition_duration must be non-negative, "
                             f"got {duration}")
        self._transition_duration = float(duration)

    @staticmethod
    def _check_family(family):
        if not isinstance(family, FunctionFamily):
            raise TypeError(f"family must be a FunctionFamily, got "
                            f"{family!r}")

    # %% Read-only views
    @property
    def state(self):
        """The PlotState of this run, for inspection only.

        It is mutated by the controller alone, callers must not write to it.
        """
        return self._state

    @property
    def bounds(self):
        return self._bounds

    @property
    def is_transitioning(self):
        return self._state.is_transitioning

    @property
    def phase(self):
        if self._state.is_transitioning:
            return PlotPhase.TRANSITIONING
        return PlotPhase.PLOTTING

    # %% Tick
    def tick(self, delta_time=None):
        """
        Advance the controller by one tick.

        :param delta_time: float, optional, seconds since the last tick.
                           Taken from ``self.clock`` when not supplied
        :return: Point3 written to the renderer, or None if the controller
                 was transitioning
        """
        if delta_time is None:
            if self.clock is None:
                raise ValueError("tick() needs a delta_time when the "
                                 "controller has no clock")
            delta_time = self.clock.delta_time()

        state = self._state
        if state.current_family != state.previous_family:
            self.reset_plot()
            self.recompute_bounds()

        if state.is_transitioning:
            state.transition_elapsed += delta_time
            if state.transition_elapsed > self._transition_duration:
                state.is_transitioning = False
                state.transition_elapsed = 0.0
                logging.info(f"Plotting {state.current_family.value} on "
                             f"[{self._bounds.min}, {self._bounds.max}]")
            else:
                return None

        self._update_direction()
        self._step_input(delta_time)
        return self._emit()

    def _update_direction(self):
        # Both thresholds are checked on every tick, the last match wins
        state = self._state
        x = self.cursor.get()[0]
        if x > self._bounds.max:
            if state.direction is not Direction.BACKWARD:
                logging.debug(f"x = {x} > {self._bounds.max}, reversing")
            state.direction = Direction.BACKWARD
        if x < self._bounds.min:
            if state.direction is not Direction.FORWARD:
                logging.debug(f"x = {x} < {self._bounds.min}, reversing")
            state.direction = Direction.FORWARD

    def _step_input(self, delta_time):
        state = self._state
        state.input_value = state.direction.value * self.plot_speed * delta_time
        state.cursor_position = Point3(
            state.cursor_position.x + state.input_value,
            state.cursor_position.y,
            0.0)
        self.cursor.set(state.cursor_position)

    def _emit(self):
        state = self._state
        self.visibility.set_visible(True)
        if self.renderer.get_point_count() <= state.point_index:
            self.renderer.set_point_count(state.point_index + 1)

        state.cursor_position = self._evaluate(self.cursor.get()[0])
        self.cursor.set(state.cursor_position)
        self.renderer.set_point(state.point_index, state.cursor_position)
        state.point_index += 1
        return state.cursor_position

    def _evaluate(self, x):
        f = get_plot_function(self._state.current_family)
        # sqrt may overshoot below 0 by one step at the lower bound (NaN)
        with numpy.errstate(invalid='ignore'):
            p = f(x, self.coefficient, self.y_intercept)
        return Point3(float(p.x), float(p.y), float(p.z))

    # %% Reset protocol
    def reset_plot(self):
        """
        Discard the plotted path and pause for ``transition_duration``.

        The cursor returns to the origin moving forward, and its stored
        position is the plot function evaluated at input 0.
        """
        state = self._state
        if state.previous_family is not None:
            logging.info(f"Switching plot function from "
                         f"{state.previous_family.value} to "
                         f"{state.current_family.value}")
        state.previous_family = state.current_family
        self.renderer.set_point_count(0)
        state.point_index = 0
        self.visibility.set_visible(False)
        self.cursor.set(ORIGIN)
        state.direction = Direction.FORWARD
        state.input_value = 0.0
        state.cursor_position = self._evaluate(ORIGIN.x)
        state.is_transitioning = True
        state.transition_elapsed = 0.0

    def recompute_bounds(self):
        self._bounds = domain_bounds(self._state.current_family,
                                     self._input_range)
        return self._bounds

    # %% Whole-curve sampling
    def reference_curve(self, samples=200):
        """
        Sample the active plot function over the current domain bounds.

        :param samples: int, number of inputs spaced evenly over the bounds
        :return: ndarray of shape (samples, 3)
        """
        xs = numpy.linspace(self._bounds.min, self._bounds.max, samples)
        return sample_curve(self._state.current_family, xs,
                            self.coefficient, self.y_intercept)
