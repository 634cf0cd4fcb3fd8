"""Least-squares parabola / cubic fitting with a best-triangle point picker."""

__version__ = "0.1.0"
