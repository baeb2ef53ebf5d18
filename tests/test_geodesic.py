from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest
from pytest import approx

from geoinverse import GeoPoint, Distance
from geoinverse.geodesic import *

from tests.functions import load_reference_distances


def test_inverse_coincident():
    assert inverse(GeoPoint(0., 0.), GeoPoint(0., 0.)).meters == 0.0

    p = GeoPoint(12.5, -33.1)
    assert inverse(p, p) == Distance(0.)

    # Numerically but not lexically identical; sin(sigma) underflows to zero
    actual = inverse(GeoPoint(0., 0.), GeoPoint(0., 1e-300))
    assert actual.meters == 0.0
    assert actual.converged


def test_inverse_along_meridian_and_equator():
    assert inverse(GeoPoint(0., 0.), GeoPoint(0., 1.)).meters == 111319.491
    assert inverse(GeoPoint(0., 0.), GeoPoint(1., 0.)).meters == 110574.389


def test_inverse_slow_convergence():
    actual = inverse(GeoPoint(0., 0.), GeoPoint(0.5, 179.5))
    assert actual.converged
    assert actual.meters == 19936288.579


def test_inverse_failure_to_converge():
    actual = inverse(GeoPoint(0., 0.), GeoPoint(0.5, 179.7))
    assert not actual.converged
    assert actual.meters == -1.0
    assert actual == -1.0
    assert actual == Distance.not_converged()


def test_inverse_failure_to_converge_warns_once(caplog, monkeypatch):
    monkeypatch.setattr('geoinverse.utils.logging._WARNINGS', set())

    inverse(GeoPoint(0., 0.), GeoPoint(0.5, 179.7))
    assert 'did not converge' in caplog.text

    inverse(GeoPoint(0., 0.), GeoPoint(0.5, 179.7))
    assert caplog.text.count('did not converge') == 1


def test_inverse_boston_new_york():
    boston = GeoPoint(42.3541165, -71.0693514)
    new_york = GeoPoint(40.7791472, -73.9680804)
    assert inverse(boston, new_york).meters == 298396.057


def test_inverse_symmetry():
    pairs = [
        (GeoPoint(42.3541165, -71.0693514), GeoPoint(40.7791472, -73.9680804)),
        (GeoPoint(0., 0.), GeoPoint(1., 1.)),
        (GeoPoint(-33.8688, 151.2093), GeoPoint(51.5074, -0.1278)),
    ]
    for p, q in pairs:
        assert inverse(p, q).meters == approx(inverse(q, p).meters, abs=1e-3)


def test_inverse_millimeter_rounding():
    points = [
        GeoPoint(0., 1.),
        GeoPoint(1., 1.),
        GeoPoint(0.001, 0.001),
        GeoPoint(-33.8688, 151.2093),
        GeoPoint(51.5074, -0.1278),
    ]
    for point in points:
        meters = inverse(GeoPoint(0., 0.), point).meters
        assert meters > 0
        assert meters == round(meters, 3)


def test_inverse_reference_distances():
    for lat1, lon1, lat2, lon2, expected in load_reference_distances():
        actual = inverse(GeoPoint(lat1, lon1), GeoPoint(lat2, lon2))
        assert actual.meters == approx(expected, abs=0.0011)


def test_inverse_concurrent_callers():
    boston = GeoPoint(42.3541165, -71.0693514)
    new_york = GeoPoint(40.7791472, -73.9680804)
    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(lambda _: inverse(boston, new_york).meters, range(32)))

    assert results == [298396.057] * 32


def test_inverse_array():
    data = load_reference_distances()
    actual = inverse_array(data[:, 0], data[:, 1], data[:, 2], data[:, 3])
    assert actual.dtype == np.float64
    assert actual.shape == (len(data), )
    assert actual == approx(data[:, 4], abs=0.0011)

    # Identical to the scalar solver, including the non-convergence sentinel
    actual = inverse_array([0., 0., 0.], [0., 0., 0.], [0., 0.5, 0.5], [0., 179.5, 179.7])
    assert actual.tolist() == [0.0, 19936288.579, -1.0]

    # Broadcasting
    actual = inverse_array(0., 0., [0., 1.], [1., 0.])
    assert actual.tolist() == [111319.491, 110574.389]
