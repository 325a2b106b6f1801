"""Utilities module"""

from . import testing
