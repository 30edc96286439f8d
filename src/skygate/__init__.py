"""SKYGATE - side-scrolling pipe dodger with a deterministic simulation core."""

__version__ = "0.1.0"
