"""Multi-timezone meeting equity scheduler."""

__version__ = "0.1.0"
