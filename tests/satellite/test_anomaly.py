#!/usr/bin/env python3
"""Tests for anomaly, latitude and perturbation computations"""

import math
import unittest

import numpy as np
import pytest

from pygpsorbit.core.ephemeris import EphemerisRecord
from pygpsorbit.satellite.anomaly import compute_anomalies, eccentric_anomaly, true_anomaly
from pygpsorbit.satellite.kepler import solve_kepler
from pygpsorbit.satellite.orbit import position_ecef
from pygpsorbit.satellite.perturbation import correct_orbit, harmonic_corrections


def wrap_to_pi(angle):
    return math.atan2(math.sin(angle), math.cos(angle))


# One eccentric anomaly per quadrant of the true anomaly
QUADRANTS = [
    (0.7, 0.0, math.pi / 2),
    (2.2, math.pi / 2, math.pi),
    (4.0, -math.pi, -math.pi / 2),
    (5.5, -math.pi / 2, 0.0),
]


@pytest.mark.parametrize("e", [0.0, 0.0059, 0.1, 0.6])
@pytest.mark.parametrize("E_true, v_low, v_high", QUADRANTS)
def test_eccentric_anomaly_keeps_quadrant(E_true, v_low, v_high, e):
    v = true_anomaly(E_true, e)
    assert v_low < v < v_high

    E = eccentric_anomaly(v, e)
    assert E == pytest.approx(wrap_to_pi(E_true), abs=1e-9)
    assert math.sin(E) == pytest.approx(math.sin(E_true), abs=1e-9)


def test_true_anomaly_circular_orbit():
    for E in (-3.0, -1.0, 0.5, 2.5):
        assert true_anomaly(E, 0.0) == pytest.approx(E, abs=1e-14)


def test_true_anomaly_leads_eccentric_anomaly():
    # On the outbound half of the orbit the true anomaly runs ahead
    e = 0.3
    for E in (0.3, 1.0, 2.0, 3.0):
        assert true_anomaly(E, e) > E


def test_apsides():
    e = 0.2
    assert eccentric_anomaly(0.0, e) == 0.0
    assert eccentric_anomaly(math.pi, e) == pytest.approx(math.pi)


def test_compute_anomalies():
    anomalies = compute_anomalies(1.0, 0.01, -0.88)
    assert anomalies.v == pytest.approx(true_anomaly(1.0, 0.01))
    assert anomalies.E == pytest.approx(1.0, abs=1e-12)
    assert anomalies.phi == pytest.approx(anomalies.v - 0.88)


class TestPerturbations(unittest.TestCase):

    def setUp(self):
        self.eph = EphemerisRecord(
            sqrtA=5153.65531, e=0.005912038265, M0=-0.290282040486,
            omega=-1.641464733, i0=0.9848407943, Omega0=1.038062411,
            OmegaDot=-8.249201321e-9, deltaN=4.908419e-9, iDot=9.178953e-11,
            Cuc=4.017726e-6, Cus=7.698312e-6, Crc=2.259375e2, Crs=7.321875e1,
            Cic=6.146729e-8, Cis=2.086163e-7, toe=147456.0)

    def test_harmonic_corrections(self):
        phi = 0.3
        du, dr, di = harmonic_corrections(phi, self.eph)
        self.assertAlmostEqual(du, 7.698312e-6 * math.sin(0.6) + 4.017726e-6 * math.cos(0.6))
        self.assertAlmostEqual(dr, 7.321875e1 * math.sin(0.6) + 2.259375e2 * math.cos(0.6))
        self.assertAlmostEqual(di, 2.086163e-7 * math.sin(0.6) + 6.146729e-8 * math.cos(0.6))

    def test_corrected_orbit(self):
        orbit = correct_orbit(0.3, 1.2, 3600.0, self.eph)
        a = self.eph.sqrtA**2

        self.assertEqual(orbit.u, 0.3 + orbit.du)
        self.assertAlmostEqual(orbit.r, a * (1 - self.eph.e * math.cos(1.2)) + orbit.dr, places=6)
        self.assertAlmostEqual(orbit.i, self.eph.i0 + orbit.di + self.eph.iDot * 3600.0, places=15)

    def test_radius_bounds_and_position_norm(self):
        a = self.eph.sqrtA**2
        e = self.eph.e
        for M in np.linspace(0.0, 2 * np.pi, 37, endpoint=False):
            E_est = solve_kepler(M, e).E
            anomalies = compute_anomalies(E_est, e, self.eph.omega)
            orbit = correct_orbit(anomalies.phi, anomalies.E, 1000.0, self.eph)

            self.assertGreaterEqual(orbit.r, a * (1 - e) - abs(orbit.dr))
            self.assertLessEqual(orbit.r, a * (1 + e) + abs(orbit.dr))

            rs = position_ecef(orbit.r, orbit.u, orbit.i, 1.3)
            self.assertAlmostEqual(np.linalg.norm(rs) / orbit.r, 1.0, delta=1e-6)


if __name__ == '__main__':
    unittest.main()
