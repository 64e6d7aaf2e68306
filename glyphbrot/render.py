"""
Character-art rendering of escape-count grids.
"""

import sys

import numpy as np


# Ordered (inclusive upper bound, glyph) buckets for escaped points.
# Counts beyond the last bucket that are not set members overflow.
PALETTE = (
    (2, '¸'),
    (5, '.'),
    (10, '•'),
    (30, '›'),
    (100, '-'),
    (200, '˛'),
    (400, '˙'),
    (700, '˛'),
    (800, '‘'),
    (900, '¨'),
    (999, '¸'),
)

MEMBER_GLYPH = ' '
OVERFLOW_GLYPH = '!'

_bounds = np.array([bound for bound, _ in PALETTE], dtype=np.intp)
_glyphs = np.array([glyph for _, glyph in PALETTE] + [OVERFLOW_GLYPH])


def glyph_for(count, max_iterations):
    """
    The display glyph for one escape *count*.
    """
    if count == max_iterations:
        return MEMBER_GLYPH
    for bound, glyph in PALETTE:
        if count <= bound:
            return glyph
    return OVERFLOW_GLYPH


def _glyph_grid(grid, max_iterations):
    grid = np.asarray(grid)
    glyphs = _glyphs[np.searchsorted(_bounds, grid, side='left')]
    glyphs[grid == max_iterations] = MEMBER_GLYPH
    return glyphs


def render_lines(grid, max_iterations):
    """
    Yield one line of text per row of *grid*, in row order.
    """
    glyphs = _glyph_grid(grid, max_iterations)
    for row in glyphs:
        yield ''.join(row)


def render(grid, max_iterations, file=None):
    """
    Write *grid* to *file* (default: sys.stdout), one row per line.
    """
    if file is None:
        file = sys.stdout
    for line in render_lines(grid, max_iterations):
        print(line, file=file)
