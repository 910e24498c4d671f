"""termfolio - browse a YAML portfolio from the terminal."""

__version__ = "0.1.0"
