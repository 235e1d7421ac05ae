#!/usr/bin/env python3
"""Test suite for the broadcast ephemeris record"""

import dataclasses
import unittest
from types import SimpleNamespace

import numpy as np

from pygpsorbit.core.data_structures import SatelliteState
from pygpsorbit.core.ephemeris import EphemerisRecord, validate_ephemeris
from pygpsorbit.core.exceptions import InvalidInputError, OrbitComputationError

# GPS week 910 broadcast parameters, RINEX navigation names
RINEX_SV = {
    'GPSWeek': 910,
    'Toe': 410400,
    'Eccentricity': 4.27323824e-3,
    'sqrtA': 5.15353571e3,
    'Cic': 9.8720193e-8,
    'Crc': 282.28125,
    'Cis': -3.9115548e-8,
    'Crs': -132.71875,
    'Cuc': -6.60121440e-6,
    'Cus': 5.31412661e-6,
    'DeltaN': 4.3123e-9,
    'Omega0': 2.29116688,
    'omega': -0.88396725,
    'Io': 0.97477102,
    'OmegaDot': -8.025691e-9,
    'IDOT': -4.23946e-10,
    'M0': 2.24295542,
}


def make_record(**overrides):
    return dataclasses.replace(EphemerisRecord.from_dict(RINEX_SV), **overrides)


class TestEphemerisRecord(unittest.TestCase):
    """Test ephemeris record construction and validation"""

    def test_from_rinex_names(self):
        eph = EphemerisRecord.from_dict(RINEX_SV)

        self.assertEqual(eph.e, 4.27323824e-3)
        self.assertEqual(eph.i0, 0.97477102)
        self.assertEqual(eph.iDot, -4.23946e-10)
        self.assertEqual(eph.deltaN, 4.3123e-9)
        self.assertEqual(eph.toe, 410400.0)
        self.assertIsInstance(eph.toe, float)

    def test_from_field_names(self):
        eph = EphemerisRecord.from_dict(RINEX_SV)
        self.assertEqual(EphemerisRecord.from_dict(dataclasses.asdict(eph)), eph)

    def test_missing_parameter(self):
        data = dict(RINEX_SV)
        del data['Crs']
        del data['Toe']
        with self.assertRaisesRegex(InvalidInputError, "Crs, toe"):
            EphemerisRecord.from_dict(data)

    def test_malformed_parameter(self):
        for bad in (None, "n/a", [1.0]):
            data = dict(RINEX_SV, Crs=bad)
            with self.assertRaisesRegex(InvalidInputError, "Crs"):
                EphemerisRecord.from_dict(data)

    def test_non_numeric_field(self):
        with self.assertRaises(InvalidInputError):
            make_record(Cuc="x")
        with self.assertRaises(InvalidInputError):
            make_record(toe=None)

    def test_semi_major_axis(self):
        eph = EphemerisRecord.from_dict(RINEX_SV)
        self.assertAlmostEqual(eph.semi_major_axis, 5.15353571e3**2)

    def test_frozen(self):
        eph = EphemerisRecord.from_dict(RINEX_SV)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            eph.e = 0.5

    def test_invalid_eccentricity(self):
        for e in (1.0, 1.5, -0.1):
            with self.assertRaises(InvalidInputError):
                make_record(e=e)

    def test_invalid_sqrt_a(self):
        for sqrt_a in (0.0, -5153.0):
            with self.assertRaises(InvalidInputError):
                make_record(sqrtA=sqrt_a)

    def test_non_finite(self):
        with self.assertRaises(InvalidInputError):
            make_record(Crc=float('nan'))
        with self.assertRaises(InvalidInputError):
            make_record(OmegaDot=float('inf'))

    def test_error_hierarchy(self):
        with self.assertRaises(ValueError):
            make_record(e=1.0)
        with self.assertRaises(OrbitComputationError):
            make_record(e=1.0)

    def test_validate_duck_typed_record(self):
        fields = dataclasses.asdict(EphemerisRecord.from_dict(RINEX_SV))
        validate_ephemeris(SimpleNamespace(**fields))

        fields['e'] = 1.0
        with self.assertRaises(InvalidInputError):
            validate_ephemeris(SimpleNamespace(**fields))


class TestSatelliteState(unittest.TestCase):
    """Test satellite state result"""

    def setUp(self):
        self.state = SatelliteState(sat=5, time=248721.9229,
                                    rs=np.array([3.0e6, 4.0e6, 0.0]),
                                    vs=[0.0, 3.0, 4.0])

    def test_accessors(self):
        self.assertEqual(self.state.x, 3.0e6)
        self.assertEqual(self.state.y, 4.0e6)
        self.assertEqual(self.state.z, 0.0)
        self.assertAlmostEqual(self.state.radius, 5.0e6)
        self.assertAlmostEqual(self.state.speed, 5.0)

    def test_arrays_read_only(self):
        self.assertIsInstance(self.state.vs, np.ndarray)
        with self.assertRaises(ValueError):
            self.state.rs[0] = 0.0
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.state.sat = 6

    def test_equality(self):
        same = SatelliteState(sat=5, time=248721.9229,
                              rs=[3.0e6, 4.0e6, 0.0], vs=np.array([0.0, 3.0, 4.0]))
        moved = SatelliteState(sat=5, time=248721.9229,
                               rs=[3.0e6, 4.0e6, 1.0], vs=[0.0, 3.0, 4.0])

        self.assertEqual(self.state, same)
        self.assertNotEqual(self.state, moved)
        self.assertNotEqual(self.state, (5, 248721.9229))


if __name__ == '__main__':
    unittest.main()
