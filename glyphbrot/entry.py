import argparse
import os
import sys


def get_sys_info(file=None):
    # delay these imports until now as they are only needed in this
    # function which then exits.
    import platform
    from datetime import datetime

    from glyphbrot import config

    if file is None:
        file = sys.stdout

    def emit(*args):
        print(*args, file=file)

    try:
        fmt = "%-35s : %-s"
        emit("-" * 80)
        emit("__Time Stamp__")
        emit(datetime.now())
        emit("")

        emit("__OS Information__")
        emit(fmt % ("Platform", platform.platform(aliased=True)))
        emit(fmt % ("Machine", platform.machine()))
        emit("")

        emit("__Python Information__")
        emit(fmt % ("Python Implementation",
                    platform.python_implementation()))
        emit(fmt % ("Python Version", platform.python_version()))
        emit("")

        emit("__Library Versions__")
        for modname in ('glyphbrot', 'numpy', 'numba', 'llvmlite', 'yaml'):
            try:
                mod = __import__(modname)
            except ImportError:
                version = "not installed"
            else:
                version = getattr(mod, '__version__', 'unknown')
            emit(fmt % (modname, version))
        emit("")

        emit("__Configuration__")
        for name in sorted(dir(config)):
            if name.isupper():
                emit(fmt % (name, getattr(config, name)))
        emit("-" * 80)

    except Exception as e:
        emit("Error: The system reporting tool has failed unexpectedly.")
        emit("Exception was:")
        emit(e)


def _non_negative_int(text):
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError("invalid int value: %r" % text)
    if value < 0:
        raise argparse.ArgumentTypeError("must be non-negative: %r" % text)
    return value


def make_parser():
    parser = argparse.ArgumentParser(
        prog='glyphbrot',
        description='Render the Mandelbrot set as character art')
    parser.add_argument('--width', type=_non_negative_int,
                        help='Grid width in characters')
    parser.add_argument('--height', type=_non_negative_int,
                        help='Grid height in characters')
    parser.add_argument('--small', action='store_true',
                        help='Use the small screen preset size')
    parser.add_argument('--max-iterations', type=_non_negative_int,
                        help='Iteration cap for every point')
    parser.add_argument('--real-min', type=float,
                        help='Lower bound of the real axis')
    parser.add_argument('--real-max', type=float,
                        help='Upper bound of the real axis')
    parser.add_argument('--imaginary-min', type=float,
                        help='Lower bound of the imaginary axis')
    parser.add_argument('--imaginary-max', type=float,
                        help='Upper bound of the imaginary axis')
    parser.add_argument('-o', '--output',
                        help='Write the image to this file instead of stdout')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Log progress to stderr')
    parser.add_argument('-s', '--sysinfo', action='store_true',
                        help='Output system information for bug reporting')
    return parser


def _pick(value, default):
    return default if value is None else value


_LOG_LEVEL_ENV = 'GLYPHBROT_LOG_LEVEL'


def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)

    if not args.verbose:
        return _run(args)

    old = os.environ.get(_LOG_LEVEL_ENV)
    os.environ[_LOG_LEVEL_ENV] = 'DEBUG'
    try:
        return _run(args)
    finally:
        if old is None:
            del os.environ[_LOG_LEVEL_ENV]
        else:
            os.environ[_LOG_LEVEL_ENV] = old
        from glyphbrot import config
        from glyphbrot.log import apply_log_level
        config.reload_config()
        apply_log_level()


def _run(args):
    from glyphbrot import config
    config.reload_config()

    if args.sysinfo:
        print("System info:")
        get_sys_info()
        return 0

    from glyphbrot.log import make_logger
    from glyphbrot.render import render
    from glyphbrot.sampler import PlaneRegion, sample_field

    _logger = make_logger(__name__)

    if args.small:
        width, height = config.SMALL_WIDTH, config.SMALL_HEIGHT
    else:
        width, height = config.WIDTH, config.HEIGHT
    width = _pick(args.width, width)
    height = _pick(args.height, height)
    max_iterations = _pick(args.max_iterations, config.MAX_ITERATIONS)
    base = config.default_region()
    region = PlaneRegion(_pick(args.real_min, base.real_min),
                         _pick(args.real_max, base.real_max),
                         _pick(args.imaginary_min, base.imaginary_min),
                         _pick(args.imaginary_max, base.imaginary_max))
    _logger.info("rendering %dx%d, max_iterations=%d, region=%s",
                 width, height, max_iterations, region)

    grid = sample_field(max_iterations, region, width, height)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            render(grid, max_iterations, file=f)
    else:
        render(grid, max_iterations)
    return 0
