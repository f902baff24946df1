"""Version information for graphsolve."""

__version__ = "0.3.0"
