"""
PyQt6 user interface for the World Clock Widget.
"""
