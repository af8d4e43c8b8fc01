"""Raindrops: concentric-ring rain animation on a Qt canvas."""

__version__ = "0.1.0"
