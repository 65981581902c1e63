"""Build configuration for the sexpr package."""

from setuptools import setup

setup(
    packages=["sexpr"],
    package_dir={"sexpr": "python/sexpr"},
    package_data={"sexpr": ["py.typed"]},
)
