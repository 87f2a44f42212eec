"""Escape time evaluation of a single point under the quadratic map

   z <- z*z + c, starting from z = 0
"""

from mandelgrid.config import escape_radius_squared


def escapes(bound, c):
    """Return the iteration index at which the orbit of c escapes.

    bound -- maximal number of iterations tested (non-negative integer)
    c     -- point in the complex plane, either a complex number or
             a (real, imag) pair

    The escape test |z|**2 > 4 is made before every step, so the
    returned index g satisfies 0 <= g < bound.  None is returned if the
    orbit stays within the escape radius for all bound steps, which is
    always the case for bound == 0.
    Points exactly on the escape radius are not considered escaped.
    """

    if not isinstance(c, complex):
        c = complex(*c)

    z = complex(0.0, 0.0)
    for g in range(bound):
        if z.real*z.real + z.imag*z.imag > escape_radius_squared:
            return g
        z = z*z + c

    return None
