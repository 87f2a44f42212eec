"""Reduction of a scaled escape grid to a single value
"""

import numpy as num

from mandelgrid.config import checksum_modulus


def checksum(A):
    """Sum all values of A with wrapping 16 bit addition."""

    total = int(num.asarray(A, dtype=num.uint64).sum(dtype=num.uint64))
    return total % checksum_modulus
