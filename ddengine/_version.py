"""Version information for ddengine."""

__version__ = "0.1.0"
