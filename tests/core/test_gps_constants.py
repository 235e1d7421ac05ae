#!/usr/bin/env python3
"""Test suite for physical constants"""

import unittest
import numpy as np
from pygpsorbit.core.constants import (
    GME, MU_GPS, OMGE_GPS,
    WEEK_SECONDS, HALF_WEEK_SECONDS, KEPLER_TOL, KEPLER_MAX_ITER,
    R2D, D2R
)


class TestPhysicalConstants(unittest.TestCase):
    """Test physical constants values"""

    def test_gravitational_parameter(self):
        self.assertEqual(GME, 3.986004418e14)
        self.assertEqual(MU_GPS, GME)

    def test_earth_rotation_rate(self):
        self.assertEqual(OMGE_GPS, 7.292115e-5)


class TestDerivedConstants(unittest.TestCase):
    """Test time and unit constants"""

    def test_week(self):
        self.assertEqual(WEEK_SECONDS, 7 * 86400.0)
        self.assertEqual(HALF_WEEK_SECONDS, WEEK_SECONDS / 2)

    def test_solver_defaults(self):
        self.assertEqual(KEPLER_TOL, 1e-12)
        self.assertEqual(KEPLER_MAX_ITER, 20)

    def test_unit_conversions(self):
        self.assertAlmostEqual(180.0 * D2R, np.pi)
        self.assertAlmostEqual(R2D * D2R, 1.0)


if __name__ == '__main__':
    unittest.main()
