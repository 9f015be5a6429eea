"""
Plot function library.

Maps every ``FunctionFamily`` to a pure plot function of signature
``f(x, coefficient, y_intercept) -> Point3`` with ``z = 0``. The functions are
written with numpy ufuncs so the same callable evaluates a single float or a
whole array of inputs (see ``sample_curve``).

Usage::

    from graphsweep._functions import FunctionFamily, get_plot_function

    f = get_plot_function(FunctionFamily.SQUARED)
    f(2.0, 1.0, 0.5)    # Point3(x=2.0, y=4.5, z=0.0)
"""
import collections
import enum
import logging

import numpy


class FunctionFamily(enum.Enum):
    """The closed set of function shapes that can be plotted"""
    LINE = 'line'
    SQUARED = 'squared'
    CUBED = 'cubed'
    SQUARE_ROOT = 'square_root'
    SINE = 'sine'
    COSINE = 'cosine'


Point3 = collections.namedtuple('Point3', ['x', 'y', 'z'])
DomainBounds = collections.namedtuple('DomainBounds', ['min', 'max'])

# Range attribute limits of the input domain magnitude
INPUT_RANGE_MIN = 2
INPUT_RANGE_MAX = 20

# Smallest input for the square root family (avoids sqrt of negatives)
SQUARE_ROOT_MIN = 0.1


def line(x, coefficient, y_intercept):
    return Point3(x, coefficient * x + y_intercept, 0.0)


def squared(x, coefficient, y_intercept):
    return Point3(x, coefficient * x ** 2 + y_intercept, 0.0)


def cubed(x, coefficient, y_intercept):
    return Point3(x, coefficient * x ** 3 + y_intercept, 0.0)


def square_root(x, coefficient, y_intercept):
    # Only valid on x >= 0, which domain_bounds guarantees while plotting
    return Point3(x, coefficient * numpy.sqrt(x) + y_intercept, 0.0)


def sine(x, coefficient, y_intercept):
    return Point3(x, coefficient * numpy.sin(x) + y_intercept, 0.0)


def cosine(x, coefficient, y_intercept):
    return Point3(x, coefficient * numpy.cos(x) + y_intercept, 0.0)


_PLOT_FUNCTIONS = {
    FunctionFamily.LINE: line,
    FunctionFamily.SQUARED: squared,
    FunctionFamily.CUBED: cubed,
    FunctionFamily.SQUARE_ROOT: square_root,
    FunctionFamily.SINE: sine,
    FunctionFamily.COSINE: cosine,
}

assert set(_PLOT_FUNCTIONS) == set(FunctionFamily), \
    "every FunctionFamily must map to a plot function"


def get_plot_function(family):
    """
    Return the plot function associated with ``family``.

    :param family: FunctionFamily, the function shape to look up
    :return: callable, f(x, coefficient, y_intercept) -> Point3
    """
    assert family in _PLOT_FUNCTIONS, f"Unmapped function family {family!r}"
    return _PLOT_FUNCTIONS[family]


def domain_bounds(family, input_range):
    """
    Input interval swept for ``family``.

    The square root family starts at 0.1 instead of -input_range so that it
    never produces non-real values, every other family is symmetric about 0.

    :param family: FunctionFamily
    :param input_range: int, magnitude of the input domain
    :return: DomainBounds(min, max)
    """
    if family is FunctionFamily.SQUARE_ROOT:
        return DomainBounds(SQUARE_ROOT_MIN, input_range)
    return DomainBounds(-input_range, input_range)


def clamp_input_range(input_range):
    """Clamp ``input_range`` to [INPUT_RANGE_MIN, INPUT_RANGE_MAX]."""
    clamped = int(min(max(input_range, INPUT_RANGE_MIN), INPUT_RANGE_MAX))
    if clamped != input_range:
        logging.warning(f"input_range = {input_range} is outside of "
                        f"[{INPUT_RANGE_MIN}, {INPUT_RANGE_MAX}], it was "
                        f"clamped to {clamped}.")
    return clamped


def sample_curve(family, xs, coefficient, y_intercept):
    """
    Evaluate the plot function of ``family`` at every input in ``xs``.

    :param family: FunctionFamily
    :param xs: array_like of shape (N,), inputs
    :param coefficient: float, free parameter k
    :param y_intercept: float, free parameter b
    :return: ndarray of shape (N, 3), non-finite outputs are NaN
    """
    xs = numpy.asarray(xs, dtype=float)
    with numpy.errstate(invalid='ignore', divide='ignore', over='ignore'):
        p = get_plot_function(family)(xs, coefficient, y_intercept)
    points = numpy.empty((xs.shape[0], 3))
    for i, c in enumerate(p):
        points[:, i] = numpy.broadcast_to(c, xs.shape)
    points[~numpy.isfinite(points)] = numpy.nan
    return points
