"""Text rendering of a scaled escape grid
"""

from mandelgrid.config import ascii_low_threshold, ascii_high_threshold
from mandelgrid.config import ascii_characters


def cell_character(v):
    if v < ascii_low_threshold:
        return ascii_characters[0]
    elif v < ascii_high_threshold:
        return ascii_characters[1]
    else:
        return ascii_characters[2]


def display(f, A):
    """Write A to the text stream f, one line per grid row.
    """

    for row in A:
        f.write(''.join(cell_character(v) for v in row))
        f.write('\n')
