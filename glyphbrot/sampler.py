"""
Sampling of the escape-time field over a rectangular region of the
complex plane.
"""

from collections import namedtuple
from timeit import default_timer as timer

import numpy as np
from numba import njit

from glyphbrot.escape import check_count, escape_count_xy
from glyphbrot.log import make_logger


class PlaneRegion(namedtuple('PlaneRegion',
                             ['real_min', 'real_max',
                              'imaginary_min', 'imaginary_max'])):
    """
    A rectangle of the complex plane.  Ranges of zero width are allowed
    and collapse the image into a single repeated column or row.
    """
    __slots__ = ()

    @property
    def real_length(self):
        return self.real_max - self.real_min

    @property
    def imaginary_length(self):
        return self.imaginary_max - self.imaginary_min


@njit
def _interpolate(pixel, size, axis_min, axis_max):
    # fraction of the axis covered, then scaled and offset onto the plane
    percent = pixel / size
    return percent * (axis_max - axis_min) + axis_min


@njit
def _fill_field(image, max_iterations, real_min, real_max,
                imaginary_min, imaginary_max):
    height = image.shape[0]
    width = image.shape[1]

    for y in range(height):
        imag = _interpolate(y, height, imaginary_min, imaginary_max)
        for x in range(width):
            real = _interpolate(x, width, real_min, real_max)
            image[y, x] = escape_count_xy(real, imag, max_iterations)

    return image


def _as_region(region):
    if isinstance(region, PlaneRegion):
        return region
    return PlaneRegion(*(float(v) for v in region))


def plane_point(region, x, y, width, height):
    """
    Return the complex plane point sampled for grid cell (*x*, *y*) of a
    *width* x *height* grid laid over *region*.
    """
    region = _as_region(region)
    real = _interpolate(x, width, region.real_min, region.real_max)
    imag = _interpolate(y, height, region.imaginary_min,
                        region.imaginary_max)
    return complex(real, imag)


def sample_field(max_iterations, region, width, height):
    """
    Compute the escape count of every cell of a *width* x *height* grid
    laid over *region*.

    Returns a read-only ``intp`` array of shape ``(height, width)``.  Row 0
    samples ``region.imaginary_min`` and column 0 samples
    ``region.real_min``; the last row and column stop one cell short of
    the maxima.
    """
    logger = make_logger(__name__)

    max_iterations = check_count('max_iterations', max_iterations)
    width = check_count('width', width)
    height = check_count('height', height)
    region = _as_region(region)

    image = np.zeros((height, width), dtype=np.intp)
    ts = timer()
    _fill_field(image, max_iterations,
                float(region.real_min), float(region.real_max),
                float(region.imaginary_min), float(region.imaginary_max))
    te = timer()
    logger.debug("sampled %dx%d field (max_iterations=%d) in %f s",
                 width, height, max_iterations, te - ts)

    image.setflags(write=False)
    return image
