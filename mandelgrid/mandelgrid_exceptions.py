"""Exceptions used by mandelgrid
"""


class MandelgridError(Exception):
    """ Generic mandelgrid error. """
    pass

class InvalidResolutionError(MandelgridError):
    """ Pixel grid dimensions that cannot be rendered. """
    pass

class InvalidBoundError(MandelgridError):
    """ Negative iteration bound. """
    pass

class NumericOverflowError(MandelgridError):
    """ Escape counts cannot be narrowed without overflow. """
    pass

class ParsingError(ValueError):
    """ Could not parse a command line value. """
    pass

class OutputFileError(IOError):
    """ Output file could not be created. """
    pass
