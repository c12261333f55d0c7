"""Setup shim for the Voice Services provider package.

Package metadata and dependencies live in pyproject.toml.
"""
from setuptools import setup

setup()
