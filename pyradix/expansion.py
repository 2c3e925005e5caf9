# -*- coding: utf-8 -*-

"""
Fractional expansions in an arbitrary base.

The fractional part of a number is expanded by repeated multiplication: the
remainder is multiplied by the base, the integer part of the product is the
next digit, and the product minus that digit becomes the new remainder. The
expansion stops after `max_digits` digits or as soon as the remainder is
exactly zero.

"""

import logging
from numbers import Integral

import numpy as np

from .exceptions import RadixException

__all__ = [
    'FractionalExpansion',
    'convert',
    'MAX_DIGITS',
    'SEPARATOR',
    'PREFIX',
]

MAX_DIGITS = 8
SEPARATOR = ';'
PREFIX = '0.'

# Digits are stored as unsigned 32 bit values; larger products saturate.
MAX_DIGIT_VALUE = 2**32 - 1

logger = logging.getLogger(__name__)

class FractionalExpansion(object):
    def __init__(self, base, max_digits=MAX_DIGITS, separator=SEPARATOR,
                 prefix=PREFIX):
        """Initialize the expansion of fractions into `base`.

        Parameters
        ----------
        base : int
            The target base. Bases larger than 10 are supported, each digit
            is rendered as its decimal value, so base 16 digit twelve is
            written '12'. Bases smaller than 2 are not checked and give
            meaningless expansions.
        max_digits : int
            The maximum number of digits computed for each fraction.
        separator : str
            The string written after every digit.
        prefix : str
            The string written before the first digit.

        Examples
        --------
        >>> x = FractionalExpansion(2)
        >>> y = FractionalExpansion(60, max_digits=4)

        """
        if not isinstance(max_digits, Integral) or max_digits < 1:
            msg = 'max_digits must be a positive integer, got {0!r}.'
            raise RadixException(msg.format(max_digits))

        self.base = int(base)
        self.max_digits = int(max_digits)
        self.separator = separator
        self.prefix = prefix


    def __repr__(self):
        return 'FractionalExpansion({0}, max_digits={1})'.format(self.base,
                                                                 self.max_digits)


    def expand(self, fraction):
        """Returns the digits of `fraction` in the target base.

        Parameters
        ----------
        fraction : float
            The number to expand. Only its fractional part is represented.
            Digits are clipped to [0, 2**32 - 1], so negative numbers give
            zeros and very large numbers give saturated digits.

        Returns
        -------
        digits : 1d array
            The digits, most significant first. The array holds between 1
            and `max_digits` entries.

        Examples
        --------
        >>> FractionalExpansion(2).expand(0.25)
        array([0, 1])

        """
        digits = np.zeros(self.max_digits, dtype=np.int64)
        remainder = float(fraction)
        base = self.base

        count = 0
        for i in range(self.max_digits):
            remainder *= base
            digit = np.nan_to_num(np.floor(remainder), nan=0.0)
            digit = np.clip(digit, 0, MAX_DIGIT_VALUE)
            digits[i] = digit
            remainder -= digit
            count = i + 1

            # Exact comparison. Fractions which are not exact in floating
            # point never reach zero and use every digit.
            if remainder == 0.0:
                logger.debug('%r terminates after %d digit(s) in base %d',
                             fraction, count, base)
                break

        return digits[:count]


    def format_digits(self, digits):
        """Returns the textual form of a digit sequence.

        Each digit is followed by `separator`, and the whole sequence is
        preceded by `prefix`.

        """
        parts = ['{0}{1}'.format(int(d), self.separator) for d in digits]
        return self.prefix + ''.join(parts)


    def convert(self, fraction):
        """Returns the textual expansion of `fraction` in the target base.

        Examples
        --------
        >>> FractionalExpansion(2).convert(0.5)
        '0.1;'
        >>> FractionalExpansion(16).convert(0.75)
        '0.12;'

        """
        return self.format_digits(self.expand(fraction))


    def convert_many(self, fractions):
        """Returns the textual expansions of every fraction in `fractions`."""
        return [self.convert(fraction) for fraction in fractions]


def convert(fraction, base, max_digits=MAX_DIGITS, separator=SEPARATOR,
            prefix=PREFIX):
    """Converts `fraction` to its textual expansion in `base`.

    Parameters
    ----------
    fraction : float
        The number to convert.
    base : int
        The target base.
    max_digits : int
        The maximum number of digits.
    separator : str
        The string written after every digit.
    prefix : str
        The string written before the first digit.

    Returns
    -------
    out : str
        The digits of the expansion, each followed by ';', prefixed by '0.'.

    Examples
    --------
    >>> convert(0.125, 2)
    '0.0;0;1;'
    >>> convert(0.5, 60)
    '0.30;'

    """
    expansion = FractionalExpansion(base, max_digits=max_digits,
                                    separator=separator, prefix=prefix)
    return expansion.convert(fraction)
