import numpy as np


#######################################################################
#                             Assertions                              #
#######################################################################


def is_symmetric(metric, x, y):
    """Check that `metric` gives the same distance in both directions"""
    return np.allclose(metric(x, y), metric(y, x), equal_nan=True)


def is_nonnegative(d):
    """True if the distance `d` is non-negative (NaN counts as False)"""
    return bool(d >= 0)


#######################################################################
#                           Data Generators                           #
#######################################################################


def random_vector_pair(n_dims, standardize=False):
    """
    Create two random real-valued vectors of length `n_dims`. If `standardize`
    is True, shift and scale both vectors by their pooled mean and std.
    """
    offset = np.random.randint(-300, 300, (2, n_dims))
    X = np.random.rand(2, n_dims) + offset

    if standardize:
        eps = np.finfo(float).eps
        X = (X - X.mean()) / (X.std() + eps)
    return X[0], X[1]


def random_categorical_vector(n_dims, n_categories=3):
    """
    Create a random vector of `n_dims` integer category codes in
    `[0, n_categories)`, stored as floats.
    """
    return np.random.randint(0, n_categories, n_dims).astype(float)


def random_weights(n_dims, sparsity=0.0):
    """
    Create a random non-negative weight vector of length `n_dims`. `sparsity`
    is the expected fraction of weights that are exactly 0.
    """
    w = np.random.rand(n_dims)
    w[np.random.rand(n_dims) < sparsity] = 0
    return w


def random_lnglat(n_points=1):
    """
    Draw `n_points` random `[longitude, latitude]` pairs, in degrees. Returns
    an array of shape `(n_points, 2)`.
    """
    lng = np.random.uniform(-180, 180, n_points)
    lat = np.random.uniform(-90, 90, n_points)
    return np.column_stack([lng, lat])
