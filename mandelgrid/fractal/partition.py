"""Distribution of grid rows over parallel workers
"""

from math import floor

from mandelgrid.config import schedules


def balance(N, P, p):
    """Compute p'th interval when N is distributed over P bins.

    Returns (Nlo, Nhi) such that the interval is range(Nlo, Nhi).
    The first N % P bins receive one item more than the rest.
    """

    L = int(floor(float(N)/P))
    K = N - P*L
    if p < K:
        Nlo = p*L + p
        Nhi = Nlo + L + 1
    else:
        Nlo = p*L + K
        Nhi = Nlo + L

    return Nlo, Nhi


def partition_rows(height, P, schedule='rows'):
    """Split rows 0..height-1 into lists of row indices, one per task.

    schedule 'rows'      -- one task per row
    schedule 'blockwise' -- P contiguous blocks of near equal size
    schedule 'cyclic'    -- rows p, p+P, p+2P, ... for each of the P tasks

    Every row appears in exactly one task. Empty tasks are dropped.
    """

    if schedule not in schedules:
        msg = 'Unknown schedule %s, expected one of %s' % (schedule, schedules)
        raise ValueError(msg)

    if P < 1:
        raise ValueError('Number of bins must be positive, got %d' % P)

    if schedule == 'rows':
        tasks = [[j] for j in range(height)]
    elif schedule == 'blockwise':
        tasks = [list(range(*balance(height, P, p))) for p in range(P)]
    else:
        tasks = [list(range(p, height, P)) for p in range(P)]

    return [rows for rows in tasks if len(rows) > 0]
