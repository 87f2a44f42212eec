"""Fundamental routines for computing the Mandelbrot set over a region

A region is given by a resolution (width, height) in pixels and a plane
rectangle ((real_min, real_max), (imag_min, imag_max)).  Column i and row j
of the resulting grid sample the point

    real_min + i*(real_max - real_min)/width
    + 1j*(imag_min + j*(imag_max - imag_min)/height)

Ranges are half-open, so real_max and imag_max are never sampled.  A range
whose end is less than its start is accepted and mirrors the image.
"""

import os
import time
from concurrent.futures import ProcessPoolExecutor

import numpy as num

import mandelgrid.utilities.log as log
from mandelgrid.config import grid_dtype, imag_extent
from mandelgrid.config import default_processes, default_schedule
from mandelgrid.fractal.escape import escapes
from mandelgrid.fractal.partition import partition_rows
from mandelgrid.mandelgrid_exceptions import InvalidResolutionError
from mandelgrid.mandelgrid_exceptions import InvalidBoundError


def default_plane_rectangle(width, height):
    """Plane rectangle with the aspect ratio of the given resolution.

    The imaginary axis spans [-1, 1] and the real axis [-ratio, ratio]
    where ratio = width/height.  The height must be positive.
    """

    if height <= 0:
        msg = 'Height must be positive, got %d' % height
        raise InvalidResolutionError(msg)

    ratio = float(width)/height
    return ((-imag_extent*ratio, imag_extent*ratio),
            (-imag_extent, imag_extent))


def calculate_rows(bound, resolution, plane_rect, rows):
    """Calculate the given rows of the set.

    Returns a (len(rows), width) array whose k'th row holds the escape
    counts of grid row rows[k].  Points that do not escape within bound
    iterations hold bound + 1.
    """

    width, height = resolution
    (real_min, real_max), (imag_min, imag_max) = plane_rect

    # Each axis is divided by its own dimension
    real_step = (real_max - real_min)/width
    imag_step = (imag_max - imag_min)/height

    sentinel = bound + 1
    A = num.zeros((len(rows), width), dtype=grid_dtype)

    for k, j in enumerate(rows):
        y = imag_min + j*imag_step
        for i in range(width):
            c = complex(real_min + i*real_step, y)
            g = escapes(bound, c)
            A[k, i] = sentinel if g is None else g

    return A


def _calculate_task(args):
    bound, resolution, plane_rect, rows = args
    return rows, calculate_rows(bound, resolution, plane_rect, rows)


def mandelbrot(bound, resolution, plane_rect,
               processes=default_processes, schedule=default_schedule):
    """Calculate the Mandelbrot set over plane_rect with the given resolution.

    bound      -- iteration bound, non-negative integer
    resolution -- (width, height) of the pixel grid
    plane_rect -- ((real_min, real_max), (imag_min, imag_max))
    processes  -- number of worker processes.  1 computes in this process,
                  0 or None uses every available CPU.
    schedule   -- how rows are distributed over workers, one of
                  'rows', 'blockwise' or 'cyclic'

    Returns a height x width integer array, row-major, holding for each
    pixel the escape index or bound + 1 if the point did not escape.
    The result does not depend on processes or schedule.

    A zero width or height gives an empty grid.
    """

    width, height = resolution

    if width < 0 or height < 0:
        msg = 'Resolution must be non-negative, got %dx%d' % (width, height)
        raise InvalidResolutionError(msg)

    if bound < 0:
        msg = 'Iteration bound must be non-negative, got %d' % bound
        raise InvalidBoundError(msg)

    A = num.zeros((height, width), dtype=grid_dtype)
    if width == 0 or height == 0:
        return A

    if not processes:
        processes = os.cpu_count() or 1

    tasks = partition_rows(height, processes, schedule)

    log.debug('Computing %dx%d region with bound %d on %d process(es), '
              '%d tasks (%s)'
              % (width, height, bound, processes, len(tasks), schedule))

    t0 = time.time()
    work = [(bound, resolution, plane_rect, rows) for rows in tasks]
    if processes == 1:
        _assemble(A, map(_calculate_task, work))
    else:
        with ProcessPoolExecutor(max_workers=processes) as executor:
            _assemble(A, executor.map(_calculate_task, work))

    log.info('Computed region in %.2f seconds' % (time.time() - t0))

    return A


def _assemble(A, results):
    # Each task owns its rows exclusively
    for rows, block in results:
        A[rows, :] = block
