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

"""Second harmonic orbit perturbation corrections"""

import math
from typing import NamedTuple, Tuple


class CorrectedOrbit(NamedTuple):
    """Orbit parameters after second harmonic corrections"""
    u: float   # corrected argument of latitude (rad)
    r: float   # corrected radius (m)
    i: float   # corrected inclination (rad)
    du: float  # argument of latitude correction (rad)
    dr: float  # radius correction (m)
    di: float  # inclination correction (rad)


def harmonic_corrections(phi: float, eph) -> Tuple[float, float, float]:
    """
    Compute the second harmonic corrections at argument of latitude phi.

    Returns
    -------
    Tuple[float, float, float]
        (delta_u, delta_r, delta_i): argument of latitude (rad),
        radius (m) and inclination (rad) corrections
    """
    sin2p = math.sin(2.0 * phi)
    cos2p = math.cos(2.0 * phi)

    du = eph.Cus * sin2p + eph.Cuc * cos2p
    dr = eph.Crs * sin2p + eph.Crc * cos2p
    di = eph.Cis * sin2p + eph.Cic * cos2p
    return du, dr, di


def correct_orbit(phi: float, E: float, tk: float, eph) -> CorrectedOrbit:
    """
    Apply the second harmonic corrections to latitude, radius and inclination.

    Parameters
    ----------
    phi : float
        Argument of latitude (rad)
    E : float
        Eccentric anomaly (rad)
    tk : float
        Time from ephemeris reference epoch (s)
    eph : EphemerisRecord
        Broadcast ephemeris

    Returns
    -------
    CorrectedOrbit
        Corrected argument of latitude, radius and inclination together
        with the corrections themselves
    """
    du, dr, di = harmonic_corrections(phi, eph)

    u = phi + du
    r = eph.sqrtA**2 * (1.0 - eph.e * math.cos(E)) + dr
    i = eph.i0 + di + eph.iDot * tk
    return CorrectedOrbit(u, r, i, du, dr, di)
