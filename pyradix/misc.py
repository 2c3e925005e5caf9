from fractions import Fraction
from math import floor

from .exceptions import DigitRangeException
from .expansion import MAX_DIGITS

__all__ = [
    'reconstruct',
    'is_finite_expansion',
]

def reconstruct(digits, base):
    """
    Returns the exact value of the fractional expansion `digits` in `base`.

    Parameters
    ----------
    digits : list | array
        The digits of the expansion, most significant first. The first digit
        has weight base**-1.
    base : int
        The base of the expansion.

    Returns
    -------
    out : Fraction
        The value sum(digits[i] * base**-(i+1)).

    Raises
    ------
    DigitRangeException
        Raised when a digit is negative or not smaller than `base`.

    Examples
    --------
    >>> reconstruct([0, 1], 2)
    Fraction(1, 4)
    >>> reconstruct([30], 60)
    Fraction(1, 2)

    """
    out = Fraction(0)
    weight = Fraction(1)
    for position, digit in enumerate(digits):
        digit = int(digit)
        if digit < 0 or digit >= base:
            raise DigitRangeException(digit, base, position)
        weight /= base
        out += digit * weight

    return out

def is_finite_expansion(fraction, base, max_digits=MAX_DIGITS):
    """
    Returns `True` if the fractional part of `fraction` has an expansion in
    `base` with at most `max_digits` digits.

    The exact binary value of `fraction` is used, so 0.1 is not finite in
    base 10: the float nearest to 0.1 has a denominator of 2**55.

    Examples
    --------
    >>> is_finite_expansion(0.125, 2)
    True
    >>> is_finite_expansion(0.1, 2)
    False
    >>> is_finite_expansion(2**-9, 2)
    False

    """
    value = Fraction(fraction)
    value -= floor(value)
    denominator = value.denominator

    # A terminating expansion of length k exists iff denominator | base**k.
    power = 1
    for _ in range(max_digits + 1):
        if power % denominator == 0:
            return True
        power *= base

    return False
