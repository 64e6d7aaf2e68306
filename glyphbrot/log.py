"""
Logging setup for glyphbrot.

Module loggers are plain children of the ``glyphbrot`` logger and
propagate to it; only that package logger is configured, from
``config.LOG_LEVEL``.
"""

import logging
import sys

from glyphbrot import config


PACKAGE_LOGGER = 'glyphbrot'

_FORMAT = '== glyphbrot [%(relativeCreated)d] %(levelname)5s -- %(message)s'


class _StderrHandler(logging.StreamHandler):
    # writes to whatever sys.stderr is at emit time, like logging.lastResort

    def __init__(self, level=logging.NOTSET):
        logging.Handler.__init__(self, level)
        self.setFormatter(logging.Formatter(fmt=_FORMAT))

    @property
    def stream(self):
        return sys.stderr


class _SilentHandler(logging.NullHandler):
    pass


_OWN_HANDLERS = (_StderrHandler, _SilentHandler)


def _config_level():
    lvl = str(config.LOG_LEVEL).upper()
    if not lvl:
        return None
    lvl = getattr(logging, lvl, None)
    if not isinstance(lvl, int):
        # unknown names keep the package quiet
        return logging.CRITICAL
    return lvl


def apply_log_level():
    """
    Bring the package logger in line with ``config.LOG_LEVEL``.  Handlers
    installed on it by the application take precedence, and the logger is
    then left untouched.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    own = [h for h in logger.handlers if isinstance(h, _OWN_HANDLERS)]
    if len(own) != len(logger.handlers):
        return logger

    lvl = _config_level()
    if lvl is None:
        wanted, level = _SilentHandler, logging.NOTSET
    else:
        wanted, level = _StderrHandler, lvl
    if logger.level == level and [type(h) for h in own] == [wanted]:
        return logger

    for handler in own:
        logger.removeHandler(handler)
    logger.setLevel(level)
    logger.addHandler(wanted())
    return logger


def make_logger(name):
    apply_log_level()
    return logging.getLogger(name)
