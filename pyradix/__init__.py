"""
pyradix: fractional decimal numbers in an arbitrary base.

"""

from .exceptions import *
from .expansion import *
from .misc import *
from .table import *

__version__ = '0.1.0'
