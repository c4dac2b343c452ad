#
# This setup.py file creates a wheel of the symmetry axes library.
#
#   python3 -m pip wheel .
#
# The library only needs numpy for transform arithmetic, tinyarray for
# points passed to Place, and sortedcontainers for the axis relation index.
#
from setuptools import setup, find_packages

# Use README.md as long_description
import os.path
dir = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(dir, 'README.md')) as f:
    long_description = f.read()

setup(
    name = 'symaxes',

    packages = find_packages(where = 'src'),
    package_dir = {'': 'src'},

    description = "Hierarchical symmetry axes of structures made of repeats",

    long_description = long_description,
    long_description_content_type = "text/markdown",

    version = '1.0.0',
    python_requires = '>=3.9',

    install_requires = [
        'numpy',                # Transform matrices
        'tinyarray',            # Points multiplied by Place
        'sortedcontainers',     # Repeat relations in axis order
    ],

    extras_require = {
        'test': ['pytest'],
    },

    classifiers = [
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Science/Research',
        'Programming Language :: Python :: 3',
    ],
)
