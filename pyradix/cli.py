"""
Convert fractional decimal numbers to another base and print a table.

Usage:
    pyradix [options] [base] <number> [<number> ...]

The first argument is the target base if it is an unsigned integer,
otherwise the base defaults to 2 and the argument is read as a number.
Arguments which are not valid numbers are skipped. Options must come
before the base and the numbers.

Options:
    --max-digits <n>, -m <n>
        Maximum number of digits computed for each number (default 8).
    --plot <file>, -p <file>
        Also save a picture of the digit matrix to <file>. Needs Matplotlib.
    --verbose, -v
        Enable verbose / debug logging.

Examples:
    pyradix 2 0.1 0.25 0.5
    pyradix --plot base60.png 60 0.16666 0.5
"""
import argparse
import logging
import re
import sys

import numpy as np

from .exceptions import RadixException
from .expansion import FractionalExpansion, MAX_DIGITS
from .table import display, draw

__all__ = [
    'parse_input',
    'main',
    'DEFAULT_BASE',
]

DEFAULT_BASE = 2

# Largest base accepted on the command line (unsigned 32 bit).
MAX_BASE = 2**32 - 1

_UNSIGNED = re.compile(r'\+?[0-9]+')

logger = logging.getLogger(__name__)

_handler = None

def setup_logging(verbose=False):
    """(Re)attach a handler for the current stderr to the package logger."""
    global _handler
    package_logger = logging.getLogger('pyradix')
    if _handler is not None:
        package_logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter('%(levelname)s: %(message)s')
    _handler.setFormatter(formatter)
    package_logger.addHandler(_handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)

def parse_base(arg):
    """Returns `arg` as an unsigned integer, or `None` if it is not one."""
    if arg is None or not _UNSIGNED.fullmatch(arg):
        return None
    value = int(arg)
    if value > MAX_BASE:
        return None
    return value

def parse_number(arg):
    """Returns `arg` as a finite float, or `None` if it is not one."""
    # float() is more lenient than a plain literal; reject what it trims.
    if arg != arg.strip() or '_' in arg:
        return None
    try:
        value = float(arg)
    except ValueError:
        return None
    if not np.isfinite(value):
        return None
    return value

def parse_input(args):
    """Returns the target base and the numbers given in `args`.

    Parameters
    ----------
    args : list of str
        The positional command line arguments.

    Returns
    -------
    base : int
        The first argument if it is an unsigned integer, else `DEFAULT_BASE`.
    numbers : list of float
        The remaining arguments which parse as finite floats, in order.

    Examples
    --------
    >>> parse_input(['2', '0.1', '0.25', '0.5'])
    (2, [0.1, 0.25, 0.5])
    >>> parse_input(['0.5', 'abc'])
    (2, [0.5])

    """
    args = list(args)
    base = parse_base(args[0]) if args else None
    if base is None:
        base = DEFAULT_BASE
        logger.debug('No base given, using %d', base)
    else:
        args = args[1:]

    numbers = []
    for arg in args:
        value = parse_number(arg)
        if value is None:
            logger.debug('Skipping argument %r: not a finite number', arg)
            continue
        numbers.append(value)

    return base, numbers

def build_parser():
    parser = argparse.ArgumentParser(
        prog='pyradix',
        description='Convert fractional decimal numbers to another base.',
    )
    parser.add_argument('values', nargs=argparse.REMAINDER, metavar='value',
                        help='Target base followed by the numbers to convert')
    parser.add_argument('--max-digits', '-m', type=int, default=MAX_DIGITS,
                        help='Maximum number of digits for each number')
    parser.add_argument('--plot', '-p', type=str, metavar='FILE',
                        help='Save the digit matrix to FILE')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Enable verbose debug logging')
    return parser

def save_plot(path, numbers, base, max_digits=MAX_DIGITS):
    """Save the digit matrix of `numbers` to `path`."""
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots()
    try:
        draw(numbers, base, max_digits=max_digits, ax=ax)
        fig.savefig(path)
    finally:
        plt.close(fig)
    logger.info('Saved digit matrix to %s', path)

def main(argv=None):
    parser = build_parser()
    args, extras = parser.parse_known_args(argv)

    setup_logging(args.verbose)
    for extra in extras:
        logger.debug('Skipping unknown option %r', extra)

    base, numbers = parse_input(args.values)
    try:
        expansion = FractionalExpansion(base, max_digits=args.max_digits)
    except RadixException as e:
        parser.error(str(e))
    logger.debug('Converting %d number(s) with %r', len(numbers), expansion)

    display(base, numbers, expansion.convert_many(numbers))

    if args.plot:
        if not numbers:
            logger.warning('Nothing to plot')
            return 0
        try:
            save_plot(args.plot, numbers, base, max_digits=args.max_digits)
        except ImportError:
            logger.error('Plotting requires matplotlib: pip install pyradix[plot]')
            return 1

    return 0
