""" Generic file utilities for opening output streams in a manner
    consistent across mandelgrid.
"""

import sys
from contextlib import contextmanager

from mandelgrid.mandelgrid_exceptions import OutputFileError


@contextmanager
def open_output(filename=None, binary=False):
    """Open filename for writing, or use stdout if filename is None.

    A file opened here is closed on exit, stdout is left open.
    OutputFileError is raised if the file cannot be created.
    """

    if filename is None:
        stream = sys.stdout.buffer if binary else sys.stdout
        yield stream
        stream.flush()
        return

    mode = 'wb' if binary else 'w'
    try:
        fid = open(filename, mode)
    except OSError as e:
        raise OutputFileError('output file: %s' % e)

    with fid:
        yield fid
