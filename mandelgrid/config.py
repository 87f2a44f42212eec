"""Module where global mandelgrid parameters and default values are set
"""

import numpy as num


################################################################################
# Numerical constants
################################################################################

escape_radius_squared = 4.0         # |z|**2 beyond which an orbit has escaped
grid_dtype = num.int64              # Internal escape counter, wider than any
                                    # output encoding


################################################################################
# Default framing and resolution used by the command line
################################################################################

default_bound = 255
default_dimensions = '80x20'
imag_extent = 1.0                   # Imaginary axis spans [-1, 1], real axis
                                    # spans [-ratio, ratio], ratio = width/height


################################################################################
# Output encoding
################################################################################

output_max = 2**16 - 1              # Escape counts are narrowed onto [0, 65535]
output_dtype = num.uint16
checksum_modulus = 2**16            # Checksum folds with wrapping 16 bit addition

# Text renderer: cells below the low threshold print as ascii_characters[0],
# below the high threshold as ascii_characters[1], otherwise ascii_characters[2]
ascii_low_threshold = 6554
ascii_high_threshold = 32767
ascii_characters = ' .*'


################################################################################
# Parallel execution
################################################################################

default_processes = 1               # 0 means use every available CPU
default_schedule = 'rows'
schedules = ('rows', 'blockwise', 'cyclic')
