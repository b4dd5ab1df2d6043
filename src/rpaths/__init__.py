"""rpaths: assemble PATH-style search paths from paths.d directories."""

__version__ = "0.1.0"
