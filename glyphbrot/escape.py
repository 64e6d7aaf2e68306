"""
Escape-time evaluation of a single point of the complex plane.
"""

import operator

from numba import njit

from glyphbrot.errors import InvalidDimensionError

# Half-width of the bounding square an orbit must leave to escape.
ESCAPE_VALUE = 2.0


@njit
def escape_count_xy(real, imag, max_iterations):
    """
    Given the real and imaginary parts of a complex number *c*, return
    the number of iterations of ``z = z * z + c`` (from ``z = 0``) made
    before ``z`` left the square of half-width ESCAPE_VALUE, or
    *max_iterations* if it never did.

    The test is per axis, so a point only escapes once one of its
    components exceeds 2.0 in magnitude.
    """
    z_real = 0.0
    z_imag = 0.0
    for i in range(max_iterations + 1):
        if (z_real > ESCAPE_VALUE or z_real < -ESCAPE_VALUE
                or z_imag > ESCAPE_VALUE or z_imag < -ESCAPE_VALUE):
            return i
        z_real_n = z_real * z_real - z_imag * z_imag + real
        z_imag = 2.0 * z_real * z_imag + imag
        z_real = z_real_n

    return max_iterations


def check_count(name, value):
    """
    Validate *value* as a non-negative integer and return it as an int.
    """
    value = operator.index(value)
    if value < 0:
        raise InvalidDimensionError(name, value)
    return value


def escape_count(c, max_iterations):
    """
    Return the escape iteration count of the complex point *c*, in
    ``[0, max_iterations]``.  *max_iterations* is returned for points
    that are treated as members of the Mandelbrot set.
    """
    max_iterations = check_count('max_iterations', max_iterations)
    c = complex(c)
    return int(escape_count_xy(c.real, c.imag, max_iterations))
