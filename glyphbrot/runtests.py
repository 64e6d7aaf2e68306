import unittest


def _main(argv, **kwds):
    # This helper function assumes the first element of argv
    # is the name of the calling program.
    # The 'main' API function is invoked in-process, and thus
    # will synthesize that name.
    program = unittest.main(module=None, argv=argv,
                            defaultTest='glyphbrot.tests', exit=False,
                            **kwds)
    return program.result.wasSuccessful()


def main(*argv, **kwds):
    """keyword arguments are passed to unittest.main(), e.g. verbosity."""

    return _main(['<main>'] + list(argv), **kwds)


if __name__ == '__main__':
    import sys
    sys.exit(0 if _main(sys.argv) else 1)
