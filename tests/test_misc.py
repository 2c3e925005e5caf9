from fractions import Fraction

import pytest

from pyradix import DigitRangeException, RadixException
from pyradix.misc import is_finite_expansion, reconstruct

def test_reconstruct():
    assert reconstruct([1], 2) == Fraction(1, 2)
    assert reconstruct([0, 0, 1], 2) == Fraction(1, 8)
    assert reconstruct([12], 16) == Fraction(3, 4)
    assert reconstruct([9, 59], 60) == Fraction(9 * 60 + 59, 3600)
    assert reconstruct([], 10) == 0

def test_reconstruct_digit_out_of_range():
    with pytest.raises(DigitRangeException) as excinfo:
        reconstruct([1, 2], 2)
    assert excinfo.value.digit == 2
    assert excinfo.value.position == 1
    assert str(excinfo.value) == 'Digit 2 at position 1 is not valid in base 2.'

def test_reconstruct_negative_digit():
    with pytest.raises(RadixException):
        reconstruct([-1], 10)

def test_is_finite_expansion():
    assert is_finite_expansion(0.5, 2)
    assert is_finite_expansion(0.125, 2)
    assert is_finite_expansion(0.0, 7)
    assert is_finite_expansion(0.75, 60)
    assert is_finite_expansion(0.25, 60)
    assert not is_finite_expansion(0.1, 2)
    assert not is_finite_expansion(0.1, 10)
    assert not is_finite_expansion(0.5, 3)

def test_is_finite_expansion_respects_max_digits():
    assert is_finite_expansion(2**-8, 2)
    assert not is_finite_expansion(2**-9, 2)
    assert is_finite_expansion(2**-9, 2, max_digits=9)
    assert not is_finite_expansion(0.125, 2, max_digits=2)

def test_is_finite_expansion_ignores_integer_part():
    assert is_finite_expansion(3.25, 2)

def test_exception_repr():
    e = RadixException('boom')
    assert str(e) == 'boom'
    assert repr(e) == "RadixException('boom',)"

def test_exception_msg_keyword():
    e = RadixException(1, 2, msg='bad setting')
    assert str(e) == 'bad setting'
    assert e.args == (1, 2)
