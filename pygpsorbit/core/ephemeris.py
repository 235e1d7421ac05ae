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

"""Broadcast ephemeris record"""

import math
from dataclasses import dataclass, fields
from typing import Any, Mapping

from .exceptions import InvalidInputError

# RINEX navigation message names -> EphemerisRecord field names
RINEX_FIELD_NAMES = {
    'sqrtA': 'sqrtA',
    'Eccentricity': 'e',
    'M0': 'M0',
    'omega': 'omega',
    'Io': 'i0',
    'Omega0': 'Omega0',
    'OmegaDot': 'OmegaDot',
    'DeltaN': 'deltaN',
    'IDOT': 'iDot',
    'Cuc': 'Cuc',
    'Cus': 'Cus',
    'Crc': 'Crc',
    'Crs': 'Crs',
    'Cic': 'Cic',
    'Cis': 'Cis',
    'Toe': 'toe',
}


@dataclass(frozen=True)
class EphemerisRecord:
    """GPS broadcast ephemeris for one satellite at one reference epoch.

    Attributes
    ----------
    sqrtA : float
        Square root of the semi-major axis (m^1/2)
    e : float
        Eccentricity, 0 <= e < 1
    M0 : float
        Mean anomaly at reference time (rad)
    omega : float
        Argument of perigee (rad)
    i0 : float
        Inclination angle at reference time (rad)
    Omega0 : float
        Longitude of ascending node at weekly epoch (rad)
    OmegaDot : float
        Rate of right ascension (rad/s)
    deltaN : float
        Mean motion difference from computed value (rad/s)
    iDot : float
        Rate of inclination angle (rad/s)
    Cuc, Cus : float
        Argument of latitude correction amplitudes (rad)
    Crc, Crs : float
        Orbit radius correction amplitudes (m)
    Cic, Cis : float
        Inclination correction amplitudes (rad)
    toe : float
        Reference time of ephemeris, GPS time of week (s)

    Notes
    -----
    Records are validated on construction: sqrtA must be positive, the
    eccentricity must lie in [0, 1) and every field must be finite.
    """
    sqrtA: float
    e: float
    M0: float
    omega: float
    i0: float
    Omega0: float
    OmegaDot: float
    deltaN: float
    iDot: float
    Cuc: float
    Cus: float
    Crc: float
    Crs: float
    Cic: float
    Cis: float
    toe: float

    def __post_init__(self):
        validate_ephemeris(self)

    @property
    def semi_major_axis(self) -> float:
        """Semi-major axis (m)"""
        return self.sqrtA * self.sqrtA

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'EphemerisRecord':
        """Build a record from a mapping of orbital parameters.

        Keys may be either the record's own field names or the RINEX
        navigation names listed in ``RINEX_FIELD_NAMES`` (``Eccentricity``,
        ``Io``, ``IDOT``, ``DeltaN``, ``Toe``...). Unrelated keys such as
        clock parameters are ignored.

        Raises
        ------
        InvalidInputError
            If a parameter is missing or invalid
        """
        names = {f.name for f in fields(cls)}
        values = {}
        for key, value in data.items():
            name = key if key in names else RINEX_FIELD_NAMES.get(key)
            if name is not None:
                try:
                    values[name] = float(value)
                except (TypeError, ValueError) as e:
                    raise InvalidInputError(f"Ephemeris parameter {key} is not a number: {value!r}") from e

        missing = sorted(names - values.keys())
        if missing:
            raise InvalidInputError(f"Missing ephemeris parameters: {', '.join(missing)}")

        return cls(**values)


def validate_ephemeris(eph) -> None:
    """Check that an ephemeris describes a well-defined elliptical orbit.

    Raises
    ------
    InvalidInputError
        If any parameter is not a finite number, sqrtA <= 0 or e is
        outside [0, 1)
    """
    for f in fields(EphemerisRecord):
        value = getattr(eph, f.name)
        try:
            finite = math.isfinite(value)
        except TypeError as e:
            raise InvalidInputError(f"Ephemeris parameter {f.name} is not a number: {value!r}") from e
        if not finite:
            raise InvalidInputError(f"Ephemeris parameter {f.name} is not finite: {value}")

    if eph.sqrtA <= 0.0:
        raise InvalidInputError(f"sqrtA must be positive, got {eph.sqrtA}")
    if not 0.0 <= eph.e < 1.0:
        raise InvalidInputError(f"Eccentricity must be in [0, 1), got {eph.e}")
