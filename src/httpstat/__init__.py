"""httpstat: curl timing breakdown in the terminal."""

__version__ = "0.1.0"
