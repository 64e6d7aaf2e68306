"""
Expose top-level symbols that are safe for import *
"""

__version__ = '0.1.0'

from glyphbrot import config, errors

# Re-export error classes
from glyphbrot.errors import *

from glyphbrot.escape import ESCAPE_VALUE, escape_count
from glyphbrot.sampler import PlaneRegion, plane_point, sample_field
from glyphbrot.render import PALETTE, glyph_for, render, render_lines


def test(*argv, **kwds):
    from glyphbrot import runtests
    return runtests.main(*argv, **kwds)


__all__ = """
    ESCAPE_VALUE
    PALETTE
    PlaneRegion
    escape_count
    glyph_for
    plane_point
    render
    render_lines
    sample_field
    """.split() + errors.__all__
