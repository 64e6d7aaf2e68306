"""
Assorted utilities for use in tests.
"""

import contextlib
import io
import os
import subprocess
import sys
import threading
import unittest

import numpy as np

from glyphbrot import config


class TestCase(unittest.TestCase):

    longMessage = True

    def assertGridShape(self, grid, height, width):
        self.assertIsInstance(grid, np.ndarray)
        self.assertEqual(grid.ndim, 2)
        self.assertEqual(grid.shape, (height, width))

    def assertCountsInRange(self, grid, max_iterations):
        grid = np.asarray(grid)
        if grid.size:
            self.assertGreaterEqual(grid.min(), 0)
            self.assertLessEqual(grid.max(), max_iterations)


@contextlib.contextmanager
def override_config(name, value):
    """
    Return a context manager that temporarily sets glyphbrot config
    variable *name* to *value*.  *name* must be the name of an existing
    variable in glyphbrot.config.
    """
    old_value = getattr(config, name)
    setattr(config, name, value)
    try:
        yield
    finally:
        setattr(config, name, old_value)


@contextlib.contextmanager
def override_env_config(name, value):
    """
    Return a context manager that temporarily sets a glyphbrot config
    environment *name* to *value*.
    """
    old = os.environ.get(name)
    os.environ[name] = value
    config.reload_config()

    try:
        yield
    finally:
        if old is None:
            # If it wasn't set originally, delete the environ var
            del os.environ[name]
        else:
            # Otherwise, restore to the old value
            os.environ[name] = old
        # Always reload config
        config.reload_config()


@contextlib.contextmanager
def captured_output(stream_name):
    """Return a context manager used by captured_stdout/stderr
    that temporarily replaces the sys stream *stream_name* with a StringIO."""
    orig_stream = getattr(sys, stream_name)
    setattr(sys, stream_name, io.StringIO())
    try:
        yield getattr(sys, stream_name)
    finally:
        setattr(sys, stream_name, orig_stream)


def captured_stdout():
    """Capture the output of sys.stdout:

       with captured_stdout() as stdout:
           print("hello")
       self.assertEqual(stdout.getvalue(), "hello\\n")
    """
    return captured_output("stdout")


def captured_stderr():
    """Capture the output of sys.stderr."""
    return captured_output("stderr")


def run_cmd(cmdline, env=None, timeout=120):
    """
    Run *cmdline* and return its decoded (stdout, stderr).  A non-zero exit
    code raises AssertionError.
    """
    if env is None:
        env = os.environ.copy()
    # make sure the child finds this copy of glyphbrot
    root = os.path.dirname(os.path.dirname(os.path.dirname(
        os.path.abspath(__file__))))
    env['PYTHONPATH'] = os.pathsep.join(
        [root] + [p for p in [env.get('PYTHONPATH')] if p])
    env.setdefault('PYTHONIOENCODING', 'utf-8')

    popen = subprocess.Popen(cmdline,
                             stdout=subprocess.PIPE,
                             stderr=subprocess.PIPE,
                             env=env)

    timeout_timer = threading.Timer(timeout, popen.kill)
    try:
        timeout_timer.start()
        out, err = popen.communicate()
        if popen.returncode != 0:
            raise AssertionError(
                "process failed with code %s: stderr follows\n%s\n" %
                (popen.returncode, err.decode('utf-8', 'replace')))
        return out.decode('utf-8'), err.decode('utf-8')
    finally:
        timeout_timer.cancel()
