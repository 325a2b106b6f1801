# noqa
"""Vector distance functions for clustering, implemented in NumPy"""

from . import utils
from . import metrics
