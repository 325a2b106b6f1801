# flake8: noqa
import numpy as np
import pytest

import scipy.spatial.distance as ssd

from numpy_distances.metrics.distances import euclidean, earth
from numpy_distances.metrics.errors import DistanceWarning, DegenerateInputError
from numpy_distances.metrics.selector import (
    DistanceBase,
    DistanceInitializer,
    Manhattan,
    Euclidean,
    SquaredEuclidean,
    Minkowski,
    WeightedMinkowski,
    Chebyshev,
    Hamming,
    BrayCurtis,
    Canberra,
    Earth,
)
from numpy_distances.utils.testing import random_vector_pair, random_weights

ALL_METRICS = [
    Manhattan(),
    Euclidean(),
    SquaredEuclidean(),
    Minkowski(p=3),
    WeightedMinkowski(p=1.5, weights=[1, 0.5, 0]),
    Chebyshev(),
    Hamming(),
    BrayCurtis(),
    Canberra(),
    Earth(strict=True),
]


def test_metrics_match_scipy(N=15):
    np.random.seed(12345)
    i = 0
    while i < N:
        n_dims = np.random.randint(1, 100)
        x, y = random_vector_pair(n_dims)
        w = random_weights(n_dims)
        p = np.random.uniform(1, 4)

        pairs = [
            (Manhattan(), ssd.cityblock),
            (Euclidean(), ssd.euclidean),
            (SquaredEuclidean(), ssd.sqeuclidean),
            (Minkowski(p=p), lambda a, b: ssd.minkowski(a, b, p)),
            (WeightedMinkowski(p=p, weights=w), lambda a, b: ssd.minkowski(a, b, p, w=w)),
            (Chebyshev(), ssd.chebyshev),
            (BrayCurtis(), ssd.braycurtis),
            (Canberra(), ssd.canberra),
        ]
        for mine, theirs in pairs:
            np.testing.assert_allclose(mine(x, y), theirs(x, y), rtol=1e-10)
        print("PASSED")
        i += 1


def test_weighted_minkowski_default_weights():
    x, y = random_vector_pair(10)
    np.testing.assert_allclose(WeightedMinkowski(p=2)(x, y), euclidean(x, y))


def test_str():
    assert str(Euclidean()) == "Euclidean()"
    assert str(Minkowski(p=3)) == "Minkowski(p=3)"
    assert str(Hamming(strict=True)) == "Hamming(strict=True)"
    assert str(WeightedMinkowski(weights=[1, 0.5])) == "WeightedMinkowski(p=2, weights=[1, 0.5])"
    assert str(WeightedMinkowski(p=np.float64(2.5), weights=np.array([1.0, 0.0]))) == (
        "WeightedMinkowski(p=2.5, weights=[1.0, 0.0])"
    )


def test_init_from_str():
    cases = {
        "euclidean": Euclidean,
        "L2": Euclidean,
        "manhattan": Manhattan,
        "cityblock": Manhattan,
        "l1": Manhattan,
        "SquaredEuclidean": SquaredEuclidean,
        "sqeuclidean": SquaredEuclidean,
        "squared_euclidean": SquaredEuclidean,
        "minkowski(p=3)": Minkowski,
        "chebyshev": Chebyshev,
        "Linf": Chebyshev,
        "hamming": Hamming,
        "BrayCurtisDistance": BrayCurtis,
        "bray_curtis": BrayCurtis,
        "canberra": Canberra,
        "earth": Earth,
        "great_circle": Earth,
    }
    for s, cls in cases.items():
        metric = DistanceInitializer(s)()
        assert isinstance(metric, cls), s

    metric = DistanceInitializer("Minkowski(p=3, strict=True)")()
    assert metric.parameters["p"] == 3
    assert metric.hyperparameters["strict"] is True

    metric = DistanceInitializer("minkowski(p=inf)")()
    assert metric.parameters["p"] == np.inf

    metric = DistanceInitializer("WeightedMinkowski(p=2, weights=[1, 0.25])")()
    assert metric.parameters["weights"] == [1, 0.25]
    np.testing.assert_almost_equal(metric([0, 0], [3, 8]), 5)


def test_init_roundtrip():
    for metric in ALL_METRICS:
        from_str = DistanceInitializer(str(metric))()
        from_dict = DistanceInitializer(metric.summary())()
        for new in [from_str, from_dict]:
            assert type(new) is type(metric)
            assert new.parameters == metric.parameters
            assert new.hyperparameters == metric.hyperparameters


def test_init_other():
    assert isinstance(DistanceInitializer()(), Euclidean)

    metric = Chebyshev()
    assert DistanceInitializer(metric)() is metric
    assert DistanceInitializer(earth)() is earth

    with pytest.raises(NotImplementedError):
        DistanceInitializer("cosine")()
    with pytest.raises(NotImplementedError):
        DistanceInitializer({"hyperparameters": {"id": "Cosine"}})()
    with pytest.raises(ValueError):
        DistanceInitializer({"parameters": {"p": 3}})()
    with pytest.raises(ValueError):
        DistanceInitializer(3)()


def test_set_params():
    metric = Minkowski(p=3)
    metric.set_params({"parameters": {"p": 4}, "hyperparameters": {"strict": True}})
    assert metric.parameters["p"] == 4
    assert metric.hyperparameters["strict"] is True
    assert metric.hyperparameters["id"] == "Minkowski"

    metric.set_params({"p": 1, "id": "Euclidean"})
    assert metric.parameters["p"] == 1
    assert metric.hyperparameters["id"] == "Minkowski"


def test_nonfinite_warning():
    with pytest.warns(DistanceWarning):
        d = Canberra()([0, 1], [0, 2])
    assert np.isnan(d)

    with pytest.warns(DistanceWarning):
        d = BrayCurtis()([1, -2], [-1, 2])
    assert np.isinf(d)

    with pytest.raises(DegenerateInputError):
        Canberra(strict=True)([0, 1], [0, 2])


def test_is_abstract():
    with pytest.raises(TypeError):
        DistanceBase()


def test_init_unknown_parameters():
    with pytest.raises(ValueError):
        DistanceInitializer("euclidean(p=3)")()
    with pytest.raises(ValueError):
        DistanceInitializer("Minkowski(p=3, weights=[1, 2])")()


def test_params_not_shared():
    weights = [1, 1]
    metric = WeightedMinkowski(p=2, weights=weights)
    weights.append(5)
    assert metric.parameters["weights"] == [1, 1]

    from_dict = DistanceInitializer(metric.summary())()
    from_dict.parameters["weights"].append(5)
    assert metric.parameters["weights"] == [1, 1]
    assert from_dict.parameters["weights"] == [1, 1, 5]
