"""Raster rendering of a scaled escape grid using the Python Imaging Library
"""

import numpy as num
from PIL import Image

from mandelgrid.config import output_dtype


def render(f, A):
    """Write A as a single channel 16 bit grayscale PNG to binary stream f.

    A must be two dimensional. Values are taken as unsigned 16 bit samples,
    row-major, width = number of columns, height = number of rows.
    """

    A = num.ascontiguousarray(A, dtype=output_dtype)
    assert A.ndim == 2, 'Matrix must be 2 dimensional'

    height, width = A.shape
    im = Image.frombytes('I;16', (width, height), A.astype('<u2').tobytes())
    im.save(f, format='PNG')
