"""
Tests package for the World Clock Widget.
"""
