# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Core GPS Orbit Module.

This module provides the fundamental components shared by the orbit
computation:

- **Constants**: physical constants (gravitational parameter, Earth rotation
  rate), time parameters and Kepler solver defaults
- **Ephemeris**: the immutable broadcast ephemeris record and its validation
- **Data Structures**: the satellite state returned by the computation
- **Time**: GPS time-of-week differences with half-week rollover handling
- **Exceptions**: the error taxonomy raised by the computation

Example Usage:
    >>> from pygpsorbit.core import EphemerisRecord, timediff
    >>> eph = EphemerisRecord.from_dict(rinex_fields)
    >>> tk = timediff(248721.9229, eph.toe)
"""

from .constants import *
from .ephemeris import RINEX_FIELD_NAMES, EphemerisRecord, validate_ephemeris
from .exceptions import (
    InvalidInputError,
    NotFoundError,
    NumericalError,
    OrbitComputationError,
)
from .time import timediff
from .data_structures import SatelliteState

__all__ = [
    'GME', 'MU_GPS', 'OMGE_GPS',
    'WEEK_SECONDS', 'HALF_WEEK_SECONDS', 'KEPLER_TOL', 'KEPLER_MAX_ITER',
    'R2D', 'D2R',
    'EphemerisRecord', 'RINEX_FIELD_NAMES', 'validate_ephemeris',
    'SatelliteState',
    'OrbitComputationError', 'InvalidInputError', 'NotFoundError', 'NumericalError',
    'timediff',
]
