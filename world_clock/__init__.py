"""
World Clock Widget main package.

This package contains the entry point, core timezone logic and PyQt6 user
interface for a small always-on-top desktop clock that shows the time of a
selected country next to the converted times of a fixed set of others.
"""

__version__ = "0.1.0"
__author__ = "World Clock Team"
