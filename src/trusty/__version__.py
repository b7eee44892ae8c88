"""Version information for trusty."""

__version__ = "0.1.0"
