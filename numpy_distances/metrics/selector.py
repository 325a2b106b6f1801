import re
import ast
import warnings
from copy import copy
from abc import ABC, abstractmethod

import numpy as np

from . import distances
from .errors import DistanceWarning

__all__ = [
    "DistanceBase",
    "Manhattan",
    "Euclidean",
    "SquaredEuclidean",
    "Minkowski",
    "WeightedMinkowski",
    "Chebyshev",
    "Hamming",
    "BrayCurtis",
    "Canberra",
    "Earth",
    "DistanceInitializer",
]


class DistanceBase(ABC):
    def __init__(self, strict=False):
        super().__init__()
        self.parameters = {}
        self.hyperparameters = {"strict": strict}

    @abstractmethod
    def _distance(self, x, y):
        raise NotImplementedError

    def __call__(self, x, y):
        """
        Compute the distance between two vectors.

        If the result is NaN or infinite, a :class:`DistanceWarning` is
        issued and the value is returned unchanged.
        """
        d = self._distance(x, y)
        if not np.isfinite(d):
            warnings.warn("{} returned {}".format(self, d), DistanceWarning)
        return d

    def __str__(self):
        P, H = self.parameters, self.hyperparameters
        kwargs = dict(P)
        if H["strict"]:
            kwargs["strict"] = True
        p_str = ", ".join(["{}={}".format(k, _fmt(v)) for k, v in kwargs.items()])
        return "{}({})".format(H["id"], p_str)

    def summary(self):
        """Return the dictionary of metric parameters, hyperparameters, and ID"""
        return {
            "id": self.hyperparameters["id"],
            "parameters": self.parameters,
            "hyperparameters": self.hyperparameters,
        }

    def set_params(self, summary_dict):
        """
        Set the metric parameters and hyperparameters using the settings in
        `summary_dict`.

        Parameters
        ----------
        summary_dict : dict
            A dictionary with keys 'parameters' and 'hyperparameters',
            structured as would be returned by the :meth:`summary` method. If
            a particular (hyper)parameter is not included in this dict, the
            current value will be used.

        Returns
        -------
        new_metric : :doc:`Distance <numpy_distances.metrics.selector>` instance
            A distance with parameters and hyperparameters adjusted to those
            specified in `summary_dict`.
        """
        dm, sd = self, dict(summary_dict)

        # collapse `parameters` and `hyperparameters` nested dicts into a single
        # merged dictionary
        flatten_keys = ["parameters", "hyperparameters"]
        for k in flatten_keys:
            if k in sd:
                entry = sd[k]
                sd.update(entry)
                del sd[k]

        for k, v in sd.items():
            if k in self.parameters:
                dm.parameters[k] = copy(v)
            if k in self.hyperparameters and k != "id":
                dm.hyperparameters[k] = v
        return dm


def _fmt(v):
    if isinstance(v, (np.ndarray, np.generic)):
        v = v.tolist()
    return repr(v)


class Manhattan(DistanceBase):
    def __init__(self, strict=False):
        """The Manhattan (`L1`) distance. See :func:`~.distances.manhattan`."""
        super().__init__(strict=strict)
        self.hyperparameters["id"] = "Manhattan"

    def _distance(self, x, y):
        return distances.manhattan(x, y, strict=self.hyperparameters["strict"])


class Euclidean(DistanceBase):
    def __init__(self, strict=False):
        """The Euclidean (`L2`) distance. See :func:`~.distances.euclidean`."""
        super().__init__(strict=strict)
        self.hyperparameters["id"] = "Euclidean"

    def _distance(self, x, y):
        return distances.euclidean(x, y, strict=self.hyperparameters["strict"])


class SquaredEuclidean(DistanceBase):
    def __init__(self, strict=False):
        """
        The squared Euclidean distance. Not a metric, but cheaper than
        :class:`Euclidean` when only the ordering of distances matters.
        """
        super().__init__(strict=strict)
        self.hyperparameters["id"] = "SquaredEuclidean"

    def _distance(self, x, y):
        H = self.hyperparameters
        return distances.squared_euclidean(x, y, strict=H["strict"])


class Minkowski(DistanceBase):
    def __init__(self, p=2, strict=False):
        """
        The Minkowski-`p` distance.

        Parameters
        ----------
        p : float >= 1
            The order of the distance. Default is 2.
        strict : bool
            Whether to validate inputs. Default is False.
        """
        super().__init__(strict=strict)
        self.hyperparameters["id"] = "Minkowski"
        self.parameters = {"p": p}

    def _distance(self, x, y):
        P, H = self.parameters, self.hyperparameters
        return distances.minkowski(x, y, P["p"], strict=H["strict"])


class WeightedMinkowski(DistanceBase):
    def __init__(self, p=2, weights=None, strict=False):
        """
        The weighted Minkowski-`p` distance.

        Parameters
        ----------
        p : float >= 1
            The order of the distance. Default is 2.
        weights : list, :py:class:`ndarray <numpy.ndarray>` of shape `(N,)`, or None
            Non-negative per-dimension weights. If None, every dimension gets a
            weight of 1. Default is None.
        strict : bool
            Whether to validate inputs. Default is False.
        """
        super().__init__(strict=strict)
        self.hyperparameters["id"] = "WeightedMinkowski"
        self.parameters = {"p": p, "weights": copy(weights)}

    def _distance(self, x, y):
        P, H = self.parameters, self.hyperparameters
        w = P["weights"]
        w = np.ones(np.size(x)) if w is None else w
        return distances.weighted_minkowski(x, y, w, P["p"], strict=H["strict"])


class Chebyshev(DistanceBase):
    def __init__(self, strict=False):
        """The Chebyshev (:math:`L_\\infty`) distance."""
        super().__init__(strict=strict)
        self.hyperparameters["id"] = "Chebyshev"

    def _distance(self, x, y):
        return distances.chebyshev(x, y, strict=self.hyperparameters["strict"])


class Hamming(DistanceBase):
    def __init__(self, strict=False):
        """The Hamming distance between vectors of categorical codes."""
        super().__init__(strict=strict)
        self.hyperparameters["id"] = "Hamming"

    def _distance(self, x, y):
        return distances.hamming(x, y, strict=self.hyperparameters["strict"])


class BrayCurtis(DistanceBase):
    def __init__(self, strict=False):
        super().__init__(strict=strict)
        self.hyperparameters["id"] = "BrayCurtis"

    def _distance(self, x, y):
        return distances.bray_curtis(x, y, strict=self.hyperparameters["strict"])


class Canberra(DistanceBase):
    def __init__(self, strict=False):
        super().__init__(strict=strict)
        self.hyperparameters["id"] = "Canberra"

    def _distance(self, x, y):
        return distances.canberra(x, y, strict=self.hyperparameters["strict"])


class Earth(DistanceBase):
    def __init__(self, strict=False):
        """
        Great-circle distance in meters between two `[longitude, latitude]`
        points given in degrees.
        """
        super().__init__(strict=strict)
        self.hyperparameters["id"] = "Earth"

    def _distance(self, x, y):
        return distances.earth(x, y, strict=self.hyperparameters["strict"])


# lowercase names with underscores removed
_METRICS = {
    "manhattan": Manhattan,
    "cityblock": Manhattan,
    "l1": Manhattan,
    "euclidean": Euclidean,
    "l2": Euclidean,
    "squaredeuclidean": SquaredEuclidean,
    "sqeuclidean": SquaredEuclidean,
    "minkowski": Minkowski,
    "lp": Minkowski,
    "weightedminkowski": WeightedMinkowski,
    "wminkowski": WeightedMinkowski,
    "chebyshev": Chebyshev,
    "linf": Chebyshev,
    "hamming": Hamming,
    "braycurtis": BrayCurtis,
    "canberra": Canberra,
    "earth": Earth,
    "greatcircle": Earth,
}

_IDS = {cls.__name__: cls for cls in set(_METRICS.values())}


class DistanceInitializer(object):
    def __init__(self, param=None):
        """
        A class for initializing distance metrics. Valid inputs are:
            (a) __str__ representations of `DistanceBase` instances
            (b) `DistanceBase` instances
            (c) Parameter dicts (e.g., as produced via the :meth:`summary`
                method in `DistanceBase` instances)
            (d) Any other callable taking two vectors, which is returned as-is

        If `param` is None, return `Euclidean`.
        """
        self.param = param

    def __call__(self):
        param = self.param
        if param is None:
            metric = Euclidean()
        elif isinstance(param, DistanceBase):
            metric = param
        elif isinstance(param, str):
            metric = self.init_from_str()
        elif isinstance(param, dict):
            metric = self.init_from_dict()
        elif callable(param):
            metric = param
        else:
            raise ValueError("Unknown distance: {}".format(param))
        return metric

    def init_from_str(self):
        r = r"([a-zA-Z0-9_]*)\s*=\s*(\[[^\]]*\]|[^,)]*)"
        name = re.match(r"\s*([a-zA-Z0-9_\-\s]*)", self.param).group(1)
        key = re.sub(r"[_\-\s]", "", name).lower()
        if key.endswith("distance"):
            key = key[: -len("distance")]

        if key not in _METRICS:
            raise NotImplementedError("{}".format(self.param))

        kwargs = dict([(i, _literal(j)) for (i, j) in re.findall(r, self.param)])
        try:
            return _METRICS[key](**kwargs)
        except TypeError:
            fstr = "Unknown parameters for {}: {}"
            raise ValueError(fstr.format(_METRICS[key].__name__, sorted(kwargs)))

    def init_from_dict(self):
        S = self.param
        sc = S["hyperparameters"] if "hyperparameters" in S else None

        if sc is None:
            raise ValueError("Must have `hyperparameters` key: {}".format(S))

        if sc["id"] not in _IDS:
            raise NotImplementedError("{}".format(sc["id"]))
        return _IDS[sc["id"]]().set_params(S)


def _literal(s):
    s = s.strip()
    try:
        return ast.literal_eval(s)
    except (ValueError, SyntaxError):
        # e.g., p=inf
        return float(s)
