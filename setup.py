import sys

from setuptools import find_packages, setup

_version_module = None
try:
    from packaging import version as _version_module
except ImportError:
    try:
        from setuptools._vendor.packaging import version as _version_module
    except ImportError:
        pass


min_python_version = "3.9"
min_numpy_run_version = "1.22"
min_numba_version = "0.57"


def _guard_py_ver():
    if _version_module is None:
        return

    parse = _version_module.parse

    min_py = parse(min_python_version)
    cur_py = parse('.'.join(map(str, sys.version_info[:3])))

    if not min_py <= cur_py:
        msg = ('Cannot install on Python version {}; only versions >={} '
               'are supported.')
        raise RuntimeError(msg.format(cur_py, min_py))


_guard_py_ver()


def _read_version():
    # read __version__ without importing the package and its dependencies
    with open('glyphbrot/__init__.py') as f:
        for line in f:
            if line.startswith('__version__'):
                return line.split('=')[1].strip().strip("'\"")
    raise RuntimeError("unable to find __version__")


packages = find_packages(include=["glyphbrot", "glyphbrot.*"])

install_requires = [
    'numba >={}'.format(min_numba_version),
    'numpy >={}'.format(min_numpy_run_version),
]

metadata = dict(
    name='glyphbrot',
    description="escape-time Mandelbrot set rendered as character art",
    version=_read_version(),
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: BSD License",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Scientific/Engineering :: Mathematics",
    ],
    entry_points={
        'console_scripts': [
            'glyphbrot = glyphbrot.entry:main',
        ],
    },
    packages=packages,
    install_requires=install_requires,
    extras_require={
        'yaml': ['pyyaml'],
        'test': ['pytest', 'pyyaml'],
    },
    python_requires=">={}".format(min_python_version),
    license="BSD",
)

with open('README.rst') as f:
    metadata['long_description'] = f.read()

setup(**metadata)
