"""
Distance functions for comparing pairs of observations.

The ``distances`` module holds the pure functions, the ``selector`` module
wraps each of them in a configurable object that can be built from a name,
and the ``errors`` module defines what strict mode raises.
"""

from .errors import *
from .distances import *
from .selector import *
