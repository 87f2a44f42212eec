""" mandelgrid computes the Mandelbrot set over a rectangle of the complex
    plane as a grid of escape counts, and writes that grid as ASCII art, a
    16 bit grayscale PNG or a single checksum value.

    This is the public API to mandelgrid:

    >>> import mandelgrid
    >>> A = mandelgrid.mandelbrot(255, (80, 20),
    ...                           mandelgrid.default_plane_rectangle(80, 20))

    Rows of the grid are independent and may be computed by several
    processes, see mandelgrid.fractal.grid.mandelbrot.
"""

from .revision import __version__

# ---------------------------------
# Setup the tester from numpy
# ---------------------------------
from numpy._pytesttester import PytestTester
test = PytestTester(__name__)
del PytestTester

# --------------------------------
# Core computation
# --------------------------------
from mandelgrid.fractal.escape import escapes
from mandelgrid.fractal.grid import mandelbrot, default_plane_rectangle

# --------------------------------
# Output
# --------------------------------
from mandelgrid.output.scaling import scale_escape_counts
from mandelgrid.output.ascii_art import display
from mandelgrid.output.image import render
from mandelgrid.output.checksum import checksum
