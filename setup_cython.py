"""Optional build script for a Cython-compiled trie.

Not part of the package install and not exercised by the test suite;
the pure-Python lextrie/trie.py is the supported module.

Usage:
    python setup_cython.py build_ext --inplace

This compiles lextrie/trie.py into a shared-object (.so / .pyd) file that
Python imports in place of the pure-Python module.
"""

from setuptools import setup, Extension
from Cython.Build import cythonize

extensions = [
    Extension(
        "lextrie.trie",
        ["lextrie/trie.py"],
    ),
]

setup(
    name="lextrie-cython",
    ext_modules=cythonize(
        extensions,
        compiler_directives={
            "language_level": "3",
            "boundscheck": False,
            "wraparound": False,
        },
    ),
)
