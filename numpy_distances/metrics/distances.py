"""
Common distance functions for measuring the distance between two observations.

Minkowski-`p` is the most general of the pairwise distances below: `p = 1`
gives the Manhattan distance, `p = 2` gives the Euclidean distance, and the
Chebyshev distance is the limit as `p` goes to infinity. Since these three are
used so often they are computed directly rather than via :func:`minkowski`.

Each function accepts a keyword-only `strict` flag. When `strict` is False
(the default) no input validation is performed: mismatched lengths,
zero denominators, and invalid exponents are passed straight through to the
arithmetic, so results may be NaN or infinite. When `strict` is True these
cases raise a :class:`~numpy_distances.metrics.errors.DistanceError`
subclass instead.
"""
import numpy as np

from .errors import (
    DimensionMismatchError,
    InvalidParameterError,
    DegenerateInputError,
)

# equatorial radius of the earth in meters (WGS-84)
EARTH_RADIUS = 6378137.0

__all__ = [
    "EARTH_RADIUS",
    "lp_norm",
    "manhattan",
    "squared_euclidean",
    "euclidean",
    "minkowski",
    "weighted_minkowski",
    "chebyshev",
    "hamming",
    "bray_curtis",
    "canberra",
    "earth",
]


#######################################################################
#                           Input Handling                            #
#######################################################################


def _as_vector(x):
    return np.asarray(x, dtype=float).ravel()


def _aligned(x, y, strict, name="y"):
    """
    Return `y` aligned index-for-index with `x`.

    In strict mode the lengths must agree. Otherwise `y` is read only up to
    the length of `x`, and an `IndexError` is raised if it is shorter.
    """
    if strict:
        if x.shape != y.shape:
            fstr = "x and {} must have the same length, but got {} and {}"
            raise DimensionMismatchError(fstr.format(name, len(x), len(y)))
        return y

    if len(y) < len(x):
        fstr = "index {} is out of bounds for `{}` with length {}"
        raise IndexError(fstr.format(len(y), name, len(y)))
    return y[: len(x)]


def _pair(x, y, strict):
    x, y = _as_vector(x), _as_vector(y)
    return x, _aligned(x, y, strict)


def _check_p(p, strict):
    # written so that NaN fails the check too
    if strict and not p >= 1:
        raise InvalidParameterError("p must be >= 1, but got {}".format(p))


def _root(total, p):
    return total ** np.true_divide(1, p)


#######################################################################
#                               Norms                                 #
#######################################################################


def lp_norm(x, p, strict=False):
    r"""
    Compute the `Lp` norm of a single real vector.

    Notes
    -----
    The `Lp` norm of a vector **x** is its Minkowski-`p` distance from the
    origin:

    .. math::

        \lVert \mathbf{x} \rVert_p = \left( \sum_i |x_i|^p \right)^{1/p}

    Parameters
    ----------
    x : :py:class:`ndarray <numpy.ndarray>` of shape `(N,)`
        The vector to compute the norm of
    p : float >= 1
        The order of the norm. Values below 1 do not give a valid norm; `p = 0`
        results in an exponent of `1/p = inf`.
    strict : bool
        Whether to raise an :class:`InvalidParameterError` for `p < 1`.
        Default is False.

    Returns
    -------
    n : float
        The `Lp` norm of **x**.
    """
    _check_p(p, strict)
    x = _as_vector(x)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return _root(np.sum(np.abs(x) ** p), p)


#######################################################################
#                          Distance Metrics                           #
#######################################################################


def manhattan(x, y, strict=False):
    r"""
    Compute the Manhattan (`L1`) distance between two real vectors

    Notes
    -----
    The Manhattan distance between two vectors **x** and **y** is

    .. math::

        d(\mathbf{x}, \mathbf{y}) = \sum_i |x_i - y_i|

    Parameters
    ----------
    x,y : :py:class:`ndarray <numpy.ndarray>` s of shape `(N,)`
        The two vectors to compute the distance between
    strict : bool
        Whether to raise a :class:`DimensionMismatchError` if **x** and **y**
        have different lengths. Default is False.

    Returns
    -------
    d : float
        The L1 distance between **x** and **y**.
    """
    x, y = _pair(x, y, strict)
    with np.errstate(invalid="ignore", over="ignore"):
        return np.sum(np.abs(x - y))


def squared_euclidean(x, y, strict=False):
    r"""
    Compute the squared Euclidean distance between two real vectors.

    Notes
    -----
    The squared Euclidean distance between two vectors **x** and **y** is

    .. math::

        d(\mathbf{x}, \mathbf{y}) = \sum_i (x_i - y_i)^2

    This places progressively greater weight on points that are far apart.
    It does not obey the triangle inequality and so is not a true metric, but
    it preserves the ordering of Euclidean distances while skipping the square
    root, which makes it the usual choice for nearest-centroid comparisons.

    Parameters
    ----------
    x,y : :py:class:`ndarray <numpy.ndarray>` s of shape `(N,)`
        The two vectors to compute the distance between
    strict : bool
        Whether to raise a :class:`DimensionMismatchError` if **x** and **y**
        have different lengths. Default is False.

    Returns
    -------
    d : float
        The squared L2 distance between **x** and **y**.
    """
    x, y = _pair(x, y, strict)
    with np.errstate(invalid="ignore", over="ignore"):
        d = x - y
        return d @ d


def euclidean(x, y, strict=False):
    r"""
    Compute the Euclidean (`L2`) distance between two real vectors

    Notes
    -----
    The Euclidean distance between two vectors **x** and **y** is

    .. math::

        d(\mathbf{x}, \mathbf{y}) = \sqrt{ \sum_i (x_i - y_i)^2  }

    Parameters
    ----------
    x,y : :py:class:`ndarray <numpy.ndarray>` s of shape `(N,)`
        The two vectors to compute the distance between
    strict : bool
        Whether to raise a :class:`DimensionMismatchError` if **x** and **y**
        have different lengths. Default is False.

    Returns
    -------
    d : float
        The L2 distance between **x** and **y**.
    """
    with np.errstate(invalid="ignore"):
        return np.sqrt(squared_euclidean(x, y, strict=strict))


def minkowski(x, y, p, strict=False):
    r"""
    Compute the Minkowski-`p` distance between two real vectors.

    Notes
    -----
    The Minkowski-`p` distance between two vectors **x** and **y** is

    .. math::

        d(\mathbf{x}, \mathbf{y}) = \left( \sum_i |x_i - y_i|^p \right)^{1/p}

    Parameters
    ----------
    x,y : :py:class:`ndarray <numpy.ndarray>` s of shape `(N,)`
        The two vectors to compute the distance between
    p : float >= 1
        The parameter of the distance function. When `p = 1`, this is the `L1`
        distance, and when `p=2`, this is the `L2` distance. For `p < 1`,
        Minkowski-`p` does not satisfy the triangle inequality and hence is not
        a valid distance metric.
    strict : bool
        Whether to raise on mismatched lengths or `p < 1`. Default is False.

    Returns
    -------
    d : float
        The Minkowski-`p` distance between **x** and **y**.
    """
    _check_p(p, strict)
    x, y = _pair(x, y, strict)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return _root(np.sum(np.abs(x - y) ** p), p)


def weighted_minkowski(x, y, w, p, strict=False):
    r"""
    Compute the weighted Minkowski-`p` distance between two real vectors.

    Notes
    -----
    The weighted Minkowski-`p` distance between two vectors **x** and **y**
    with per-dimension weights **w** is

    .. math::

        d(\mathbf{x}, \mathbf{y}) =
            \left( \sum_i w_i |x_i - y_i|^p \right)^{1/p}

    A weight of 0 drops the corresponding dimension. The weights do not need
    to sum to 1.

    Parameters
    ----------
    x,y : :py:class:`ndarray <numpy.ndarray>` s of shape `(N,)`
        The two vectors to compute the distance between
    w : :py:class:`ndarray <numpy.ndarray>` of shape `(N,)`
        Non-negative weight for each dimension
    p : float >= 1
        The parameter of the distance function.
    strict : bool
        Whether to raise on mismatched lengths, negative weights, or `p < 1`.
        Default is False.

    Returns
    -------
    d : float
        The weighted Minkowski-`p` distance between **x** and **y**.
    """
    _check_p(p, strict)
    x, y = _pair(x, y, strict)
    w = _aligned(x, _as_vector(w), strict, name="w")

    if strict and np.any(w < 0):
        raise InvalidParameterError("Weights must be non-negative")

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return _root(np.sum(w * np.abs(x - y) ** p), p)


def chebyshev(x, y, strict=False):
    r"""
    Compute the Chebyshev (:math:`L_\infty`) distance between two real vectors

    Notes
    -----
    The Chebyshev distance between two vectors **x** and **y** is

    .. math::

        d(\mathbf{x}, \mathbf{y}) = \max_i |x_i - y_i|

    The maximum starts from 0 and dimensions whose difference is NaN are
    skipped, so two empty vectors are at distance 0.

    Parameters
    ----------
    x,y : :py:class:`ndarray <numpy.ndarray>` s of shape `(N,)`
        The two vectors to compute the distance between
    strict : bool
        Whether to raise a :class:`DimensionMismatchError` if **x** and **y**
        have different lengths. Default is False.

    Returns
    -------
    d : float
        The Chebyshev distance between **x** and **y**.
    """
    x, y = _pair(x, y, strict)
    with np.errstate(invalid="ignore", over="ignore"):
        return np.fmax.reduce(np.abs(x - y), initial=0.0)


def hamming(x, y, strict=False):
    r"""
    Compute the Hamming distance between two vectors of discrete codes.

    Notes
    -----
    The Hamming distance between two vectors **x** and **y** is the number of
    positions at which they differ:

    .. math::

        d(\mathbf{x}, \mathbf{y}) = \sum_i \mathbb{1}_{x_i \neq y_i}

    Components are compared with exact floating-point inequality. On
    continuous-valued vectors almost every dimension will count as different.

    Parameters
    ----------
    x,y : :py:class:`ndarray <numpy.ndarray>` s of shape `(N,)`
        The two vectors to compute the distance between. Both vectors should
        hold categorical codes.
    strict : bool
        Whether to raise a :class:`DimensionMismatchError` if **x** and **y**
        have different lengths. Default is False.

    Returns
    -------
    d : float
        The number of dimensions where **x** and **y** differ.
    """
    x, y = _pair(x, y, strict)
    return np.sum(x != y, dtype=float)


def bray_curtis(x, y, strict=False):
    r"""
    Compute the Bray-Curtis distance between two real vectors.

    Notes
    -----
    The Bray-Curtis distance between two vectors **x** and **y** is

    .. math::

        d(\mathbf{x}, \mathbf{y}) = \frac{\sum_i |x_i - y_i|}{\sum_i |x_i + y_i|}

    If the denominator is zero (e.g., **x** = -**y**) the result is NaN or
    infinite, unless `strict` is True.

    Parameters
    ----------
    x,y : :py:class:`ndarray <numpy.ndarray>` s of shape `(N,)`
        The two vectors to compute the distance between
    strict : bool
        Whether to raise on mismatched lengths or a zero denominator.
        Default is False.

    Returns
    -------
    d : float
        The Bray-Curtis distance between **x** and **y**.
    """
    x, y = _pair(x, y, strict)
    with np.errstate(invalid="ignore", over="ignore"):
        numerator = np.sum(np.abs(x - y))
        denominator = np.sum(np.abs(x + y))

    if strict and denominator == 0:
        raise DegenerateInputError("Bray-Curtis denominator sum |x + y| is 0")

    with np.errstate(divide="ignore", invalid="ignore"):
        return np.true_divide(numerator, denominator)


def canberra(x, y, strict=False):
    r"""
    Compute the Canberra distance between two real vectors.

    Notes
    -----
    The Canberra distance between two vectors **x** and **y** is

    .. math::

        d(\mathbf{x}, \mathbf{y}) = \sum_i \frac{|x_i - y_i|}{|x_i| + |y_i|}

    A dimension where both components are 0 contributes 0/0 = NaN, which makes
    the whole sum NaN unless `strict` is True.

    Parameters
    ----------
    x,y : :py:class:`ndarray <numpy.ndarray>` s of shape `(N,)`
        The two vectors to compute the distance between
    strict : bool
        Whether to raise on mismatched lengths or a zero denominator.
        Default is False.

    Returns
    -------
    d : float
        The Canberra distance between **x** and **y**.
    """
    x, y = _pair(x, y, strict)
    with np.errstate(invalid="ignore", over="ignore"):
        denominator = np.abs(x) + np.abs(y)

    if strict and np.any(denominator == 0):
        ix = np.flatnonzero(denominator == 0)
        fstr = "Canberra denominator |x_i| + |y_i| is 0 at dimensions {}"
        raise DegenerateInputError(fstr.format(ix.tolist()))

    with np.errstate(divide="ignore", invalid="ignore"):
        return np.sum(np.abs(x - y) / denominator)


def earth(x, y, strict=False):
    r"""
    Compute the great-circle distance in meters between two points on the
    earth's surface.

    Notes
    -----
    Each vector holds a `[longitude, latitude]` pair in degrees. Using the
    spherical law of cosines, the distance between points
    :math:`(\lambda_1, \phi_1)` and :math:`(\lambda_2, \phi_2)` is

    .. math::

        d = R \arccos \left( \sin \phi_1 \sin \phi_2 +
            \cos \phi_1 \cos \phi_2 \cos (\lambda_2 - \lambda_1) \right)

    where `R` is :data:`EARTH_RADIUS`. The argument to arccos is clipped to
    [-1, 1] so that rounding error cannot produce NaN for coincident or
    antipodal points.

    References
    ----------
    .. [1] http://www.movable-type.co.uk/scripts/latlong.html

    Parameters
    ----------
    x,y : :py:class:`ndarray <numpy.ndarray>` s of shape `(2,)`
        The `[longitude, latitude]` coordinates of the two points, in degrees
    strict : bool
        Whether to raise if either input is not 2-dimensional or holds an
        out-of-range coordinate. Default is False.

    Returns
    -------
    d : float
        The great-circle distance between **x** and **y**, in meters.
    """
    x, y = _as_vector(x), _as_vector(y)

    if strict:
        for name, v in [("x", x), ("y", y)]:
            if v.shape != (2,):
                fstr = "`{}` must be a [longitude, latitude] pair, but got {} values"
                raise DimensionMismatchError(fstr.format(name, len(v)))

            lng, lat = v
            if not -180 <= lng <= 180:
                fstr = "Longitude must lie in [-180, 180], but got {}"
                raise InvalidParameterError(fstr.format(lng))
            if not -90 <= lat <= 90:
                fstr = "Latitude must lie in [-90, 90], but got {}"
                raise InvalidParameterError(fstr.format(lat))

    lat1, lat2 = np.radians(x[1]), np.radians(y[1])

    with np.errstate(invalid="ignore", over="ignore"):
        d_lng = np.radians(y[0] - x[0])
        cos_c = np.sin(lat1) * np.sin(lat2) + np.cos(lat1) * np.cos(lat2) * np.cos(d_lng)
        return EARTH_RADIUS * np.arccos(np.clip(cos_c, -1.0, 1.0))
