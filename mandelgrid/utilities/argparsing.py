"""Command line argument parsing for mandelgrid scripts
"""

import argparse

from mandelgrid.config import default_bound, default_dimensions
from mandelgrid.config import default_processes, default_schedule, schedules
from mandelgrid.mandelgrid_exceptions import ParsingError


def parse_dimensions(s):
    """Parse a '<width>x<height>' string into a (width, height) tuple.

    Raises ParsingError if s does not have exactly two integer parts.
    """

    parts = s.split('x')
    if len(parts) != 2:
        raise ParsingError('invalid dimensions format: expected <width>x<height>.')

    try:
        width = int(parts[0])
        height = int(parts[1])
    except ValueError:
        msg = 'invalid dimensions %s: width and height must be integers' % s
        raise ParsingError(msg)

    return width, height


def _dimensions(s):
    try:
        return parse_dimensions(s)
    except ParsingError as e:
        raise argparse.ArgumentTypeError(str(e))


def _non_negative_int(s):
    value = int(s)
    if value < 0:
        raise argparse.ArgumentTypeError('must be non-negative, got %d' % value)
    return value


def create_standard_parser():
    """ Creates a standard argument parser"""

    parser = argparse.ArgumentParser(
        description='Compute the Mandelbrot set and write it as ASCII art, '
                    'a PNG image or a checksum')

    parser.add_argument('-d', '--dims', type=_dimensions,
                        default=default_dimensions,
                        help='image dimensions <width>x<height>')

    parser.add_argument('-b', '--bound', type=_non_negative_int,
                        default=default_bound,
                        help='maximal number of iterations per point')

    parser.add_argument('-a', '--ascii', action='store_true',
                        help='write ASCII art instead of an image')

    parser.add_argument('-np', type=_non_negative_int, default=default_processes,
                        help='number of processes to be used (0 for all CPUs)')

    parser.add_argument('--schedule', choices=schedules, default=default_schedule,
                        help='distribution of rows over processes')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='turn on verbosity')

    parser.add_argument('--logfile', type=str, default=None,
                        help='file to log to')

    parser.add_argument('filename', nargs='?', default=None,
                        help='output file, stdout if omitted')

    return parser
