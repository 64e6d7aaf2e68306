"""
Exceptions and warnings raised by glyphbrot.
"""

__all__ = ["GlyphbrotError", "InvalidDimensionError", "GlyphbrotWarning",
           "ConfigWarning"]


class GlyphbrotError(Exception):
    "Base class for glyphbrot errors"


class InvalidDimensionError(GlyphbrotError, ValueError):
    """
    A grid dimension or iteration cap was negative.
    """

    def __init__(self, name, value):
        self.name = name
        self.value = value
        super(InvalidDimensionError, self).__init__(
            "%s must be a non-negative integer, got %r" % (name, value))


class GlyphbrotWarning(Warning):
    """
    Base category for all glyphbrot warnings.
    """


class ConfigWarning(GlyphbrotWarning):
    """
    Warning category for problems reading the configuration sources.
    """
