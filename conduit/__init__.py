"""Conduit: a RealWorld-style blogging API backend."""

__version__ = "0.1.0"
