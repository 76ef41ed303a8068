"""Sprout - scaffold new projects from starter templates."""

__version__ = "0.1.0"
