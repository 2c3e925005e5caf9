# -*- coding: utf-8 -*-

"""
Rendering of converted numbers: the console table and the digit matrix.

"""

import numpy as np

from .exceptions import RadixException
from .expansion import FractionalExpansion, MAX_DIGITS

__all__ = [
    'format_table',
    'display',
    'digit_matrix',
    'draw',
    'PRECISION',
]

PRECISION = 8

def format_table(base, numbers, expansions, precision=PRECISION):
    """Returns the lines of the comparison table.

    Parameters
    ----------
    base : int
        The target base, used in the header of the second column.
    numbers : list
        The decimal numbers.
    expansions : list
        The textual expansions of `numbers` in `base`.
    precision : int
        The number of decimal places used for `numbers`.

    Returns
    -------
    lines : list of str
        The header, the separator and one row for each number.

    Examples
    --------
    >>> for line in format_table(2, [0.5], ['0.1;']):
    ...     print(line)
    |  Base 10   |         Base 2         |
    |:-----------|:-----------------------|
    | 0.50000000 | 0.1;                   |

    """
    if len(numbers) != len(expansions):
        msg = 'Got {0} numbers but {1} expansions.'
        raise RadixException(msg.format(len(numbers), len(expansions)))

    lines = [
        '| {0:^10} | {1:^22} |'.format('Base 10', 'Base {0}'.format(base)),
        '|{0:-<12}|{1:-<24}|'.format(':', ':'),
    ]
    for number, expansion in zip(numbers, expansions):
        value = '{0:.{1}f}'.format(number, precision)
        lines.append('| {0:<7} | {1:<22} |'.format(value, expansion))

    return lines

def display(base, numbers, expansions, precision=PRECISION):
    """Prints the comparison table to stdout."""
    for line in format_table(base, numbers, expansions, precision):
        print(line)

def digit_matrix(fractions, base, max_digits=MAX_DIGITS):
    """Returns the digits of several fractions stacked row-wise.

    Parameters
    ----------
    fractions : list
        The numbers to expand.
    base : int
        The target base.
    max_digits : int
        The maximum number of digits, and the number of columns.

    Returns
    -------
    arr : masked array
        An array of shape (len(fractions), max_digits). Row `i` contains the
        digits of `fractions[i]`. Positions after an early termination are
        masked.

    """
    expansion = FractionalExpansion(base, max_digits=max_digits)

    arr = np.ma.masked_all((len(fractions), max_digits), dtype=np.int64)
    for i, fraction in enumerate(fractions):
        digits = expansion.expand(fraction)
        arr[i, :len(digits)] = digits

    return arr

def draw(fractions, base, max_digits=MAX_DIGITS, ax=None):
    """Draw the digit matrix of `fractions` in `base`.

    Parameters
    ----------
    fractions : list
        The numbers to expand, one row each.
    base : int
        The target base.
    max_digits : int
        The maximum number of digits, one column each.
    ax : Matplotlib Axes | None
        The axis to receive the plot. If `None`, the current axis is used.

    Returns
    -------
    ax : Matplotlib Axes
        The axis holding the plot.

    """
    import matplotlib.pyplot as plt
    if ax is None:
        ax = plt.gca()

    arr = digit_matrix(fractions, base, max_digits=max_digits)

    ax.matshow(arr, cmap=plt.cm.gray_r, vmin=0, vmax=base - 1)
    ax.set_title('Base {0}'.format(base))
    ax.set_xlabel('digit position')
    ax.set_ylabel('input')
    ax.xaxis.set_ticks_position('bottom')
    ax.set_xticks(range(max_digits))
    ax.set_xticklabels([str(p) for p in range(1, max_digits + 1)])
    ax.set_yticks(range(len(fractions)))
    ax.set_yticklabels(['{0:g}'.format(f) for f in fractions])

    return ax
