"""Narrowing of escape counts onto the 16 bit output range
"""

import numpy as num

from mandelgrid.config import output_max, output_dtype
from mandelgrid.mandelgrid_exceptions import NumericOverflowError


def scale_escape_counts(A, bound, output_max=output_max):
    """Map escape counts in [0, bound+1] onto [0, output_max].

    Each value v becomes floor(v*output_max/(bound+1)), so the sentinel
    bound + 1 maps to output_max.  Arithmetic is done in uint64 and the
    result is returned as uint16.  NumericOverflowError is raised if
    v*output_max could exceed uint64.
    """

    A = num.asarray(A)
    denominator = bound + 1

    if denominator*output_max > num.iinfo(num.uint64).max:
        msg = ('Iteration bound %d is too large to scale onto [0, %d]'
               % (bound, output_max))
        raise NumericOverflowError(msg)

    scaled = A.astype(num.uint64)*num.uint64(output_max)//num.uint64(denominator)
    return scaled.astype(output_dtype)
