"""Interactive Mandelbrot and Julia set explorer, with strict number parsers."""

__version__ = "0.1.0"