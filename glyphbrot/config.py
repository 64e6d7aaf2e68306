import os
import warnings

# YAML needed to use file based glyphbrot config
try:
    import yaml
    _HAVE_YAML = True
except ImportError:
    _HAVE_YAML = False


# this is the name of the user supplied configuration file
_config_fname = '.glyphbrot_config.yaml'

_ENV_PREFIX = 'GLYPHBROT_'


def _config_file_settings():
    """
    Settings from .glyphbrot_config.yaml in the working directory, keyed
    like the GLYPHBROT_* environment variables.  A file that can't be used
    produces a ConfigWarning and no settings.
    """
    if not os.path.isfile(_config_fname):
        return {}

    from glyphbrot.errors import ConfigWarning

    if not _HAVE_YAML:
        warnings.warn("%s found but PyYAML is not installed; "
                      "install `pyyaml` to use it" % _config_fname,
                      ConfigWarning)
        return {}

    try:
        with open(_config_fname, 'rt') as f:
            settings = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        warnings.warn("failed to read %s: %s" % (_config_fname, e),
                      ConfigWarning)
        return {}

    if settings is None:
        return {}
    if not isinstance(settings, dict):
        warnings.warn("%s must hold a mapping of setting names to values, "
                      "not %s" % (_config_fname, type(settings).__name__),
                      ConfigWarning)
        return {}
    return dict((_ENV_PREFIX + str(k).upper(), v)
                for k, v in settings.items())


class _EnvReloader(object):

    def __init__(self):
        self.reset()

    def reset(self):
        self.old_environ = {}
        self.update(force=True)

    def update(self, force=False):
        # environment variables win over the config file
        new_environ = _config_file_settings()
        new_environ.update((name, value) for name, value in os.environ.items()
                           if name.startswith(_ENV_PREFIX))

        # Only reprocess when a source changed, so values assigned
        # directly on this module survive reload_config().
        if force or self.old_environ != new_environ:
            self.process_environ(new_environ)
            # Store a copy
            self.old_environ = dict(new_environ)

    def process_environ(self, environ):
        def _readenv(name, ctor, default):
            value = environ.get(name)
            if value is None:
                return default() if callable(default) else default
            try:
                return ctor(value)
            except Exception:
                warnings.warn("environ %s defined but failed to parse '%s'" %
                              (name, value), RuntimeWarning)
                return default

        def non_negative_int(x):
            value = int(x)
            if value < 0:
                raise ValueError(x)
            return value

        # Print glyphbrot warnings to screen
        #   0 = glyphbrot warnings suppressed (default)
        #   1 = All glyphbrot warnings shown
        WARNINGS = _readenv("GLYPHBROT_WARNINGS", int, 0)

        # Logging level for the glyphbrot loggers.
        # Any level name from the *logging* module.  Case insensitive.
        # Logging is silent if not set or invalid.
        # Note: This setting only applies when logging is not configured.
        #       Any existing logging configuration is preserved.
        LOG_LEVEL = _readenv("GLYPHBROT_LOG_LEVEL", str, '')

        # Full screen grid, in characters
        WIDTH = _readenv("GLYPHBROT_WIDTH", non_negative_int, 230)
        HEIGHT = _readenv("GLYPHBROT_HEIGHT", non_negative_int, 66)

        # Small screen preset used by ``glyphbrot --small``
        SMALL_WIDTH = _readenv("GLYPHBROT_SMALL_WIDTH", non_negative_int, 100)
        SMALL_HEIGHT = _readenv("GLYPHBROT_SMALL_HEIGHT", non_negative_int,
                                28)

        # Iteration cap shared by every cell
        MAX_ITERATIONS = _readenv("GLYPHBROT_MAX_ITERATIONS",
                                  non_negative_int, 1000)

        # Bounds of the sampled region of the complex plane
        REAL_MIN = _readenv("GLYPHBROT_REAL_MIN", float, -2.0)
        REAL_MAX = _readenv("GLYPHBROT_REAL_MAX", float, 1.0)
        IMAGINARY_MIN = _readenv("GLYPHBROT_IMAGINARY_MIN", float, -1.0)
        IMAGINARY_MAX = _readenv("GLYPHBROT_IMAGINARY_MAX", float, 1.0)

        # Inject the configuration values into the module globals
        for name, value in locals().copy().items():
            if name.isupper():
                globals()[name] = value

        # delay this until now, let the globals for the module be updated
        # prior to loading glyphbrot.errors
        from glyphbrot.errors import GlyphbrotWarning
        if WARNINGS == 0:
            warnings.simplefilter('ignore', GlyphbrotWarning)
        else:
            warnings.simplefilter('default', GlyphbrotWarning)


_env_reloader = _EnvReloader()


def reload_config():
    """
    Reload the configuration from environment variables, if necessary.
    """
    _env_reloader.update()


def default_region():
    """
    The configured region of the complex plane, as a PlaneRegion.
    """
    from glyphbrot.sampler import PlaneRegion
    return PlaneRegion(REAL_MIN, REAL_MAX, IMAGINARY_MIN, IMAGINARY_MAX)
