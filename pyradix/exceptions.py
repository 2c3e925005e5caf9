# -*- coding: utf-8 -*-

"""
Exceptions

"""

__all__ = [
    'RadixException',
    'DigitRangeException',
]

class RadixException(Exception):
    """
    Base class for the errors raised by `pyradix`.

    Conversions themselves never fail; this covers invalid settings, such as
    a non-positive `max_digits`, and digit sequences that do not fit a base.
    The message may be given positionally or through the `msg` keyword.

    """
    def __init__(self, *args, **kwargs):
        if 'msg' in kwargs:
            # Override the message in the first argument.
            self.msg = kwargs['msg']
        elif args:
            self.msg = args[0]
        else:
            self.msg = ''
        self.args = args
        self.kwargs = kwargs

    def __str__(self):
        return self.msg

    def __repr__(self):
        return "{0}{1}".format(self.__class__.__name__, repr(self.args))

class DigitRangeException(RadixException):
    """
    Raised when a digit sequence holds a value outside of [0, base).

    """
    def __init__(self, digit, base, position=None):
        if position is None:
            msg = 'Digit {0} is not valid in base {1}.'.format(digit, base)
        else:
            msg = 'Digit {0} at position {1} is not valid in base {2}.'
            msg = msg.format(digit, position, base)
        RadixException.__init__(self, digit, base, position, msg=msg)
        self.digit = digit
        self.base = base
        self.position = position
