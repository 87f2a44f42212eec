#!/usr/bin/env python3
"""
    Compute the Mandelbrot set and write it as ASCII art, a 16 bit
    grayscale PNG or a checksum.

    With --ascii the text goes to the given file or stdout.  Otherwise a
    PNG is written if a file is given, and the checksum of the grid is
    printed if not.
"""

import sys

import mandelgrid.utilities.log as log
from mandelgrid.fractal.grid import mandelbrot, default_plane_rectangle
from mandelgrid.output.scaling import scale_escape_counts
from mandelgrid.output.ascii_art import display
from mandelgrid.output.image import render
from mandelgrid.output.checksum import checksum
from mandelgrid.utilities.argparsing import create_standard_parser
from mandelgrid.utilities.file_utils import open_output
from mandelgrid.mandelgrid_exceptions import MandelgridError
from mandelgrid.mandelgrid_exceptions import InvalidResolutionError
from mandelgrid.mandelgrid_exceptions import OutputFileError


def run(args):
    width, height = args.dims
    if width == 0 or height == 0:
        msg = 'invalid dimensions %dx%d: width and height must be positive' \
              % (width, height)
        raise InvalidResolutionError(msg)

    plane_rect = default_plane_rectangle(width, height)
    A = mandelbrot(args.bound, (width, height), plane_rect,
                   processes=args.np, schedule=args.schedule)
    A = scale_escape_counts(A, args.bound)

    if args.ascii:
        with open_output(args.filename) as f:
            display(f, A)
        log.info('Wrote %dx%d ASCII art to %s'
                 % (width, height, args.filename or 'stdout'))
    elif args.filename is not None:
        with open_output(args.filename, binary=True) as f:
            render(f, A)
        log.info('Wrote %dx%d image to %s' % (width, height, args.filename))
    else:
        print(checksum(A))


def main(argv=None):
    parser = create_standard_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        log.console_logging_level = log.INFO
    else:
        log.console_logging_level = log.DefaultConsoleLogLevel
    log.log_filename = args.logfile
    log.reset()
    log.setup()

    try:
        run(args)
    except (MandelgridError, OutputFileError) as e:
        log.error('ERROR: %s' % e)
        sys.stderr.write('%s\n' % e)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
