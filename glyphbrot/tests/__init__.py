import os
from fnmatch import fnmatch
from os.path import dirname, isfile, join, splitext
from unittest.suite import TestSuite


def load_testsuite(loader, dir):
    """Find tests in 'dir'."""
    suite = TestSuite()
    for f in sorted(os.listdir(dir)):
        if isfile(join(dir, f)) and fnmatch(f, 'test_*.py'):
            suite.addTests(
                loader.loadTestsFromName('%s.%s' % (__name__, splitext(f)[0])))
    return suite


def load_tests(loader, tests, pattern):
    return load_testsuite(loader, dirname(__file__))
