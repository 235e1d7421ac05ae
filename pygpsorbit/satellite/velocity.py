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

"""Satellite velocity in ECEF"""

import math

import numpy as np

from ..coordinate.rotation import orbit2ecef
from ..core.constants import OMGE_GPS

# Earth rotation vector in ECEF (rad/s)
OMEGA_E_VEC = np.array([0.0, 0.0, OMGE_GPS])
OMEGA_E_VEC.setflags(write=False)


def orbital_velocity(eph, E: float, n: float) -> np.ndarray:
    """
    Satellite velocity in the perifocal frame (x towards perigee).

    V = n*a / (1 - e*cos(E)) * [-sin(E), sqrt(1 - e^2)*cos(E), 0]

    Parameters
    ----------
    eph : EphemerisRecord
        Broadcast ephemeris
    E : float
        Eccentric anomaly (rad)
    n : float
        Corrected mean motion (rad/s)

    Returns
    -------
    np.ndarray
        Perifocal velocity (m/s), shape (3,)
    """
    a = eph.sqrtA**2
    scale = n * a / (1.0 - eph.e * math.cos(E))
    return scale * np.array([-math.sin(E), math.sqrt(1.0 - eph.e**2) * math.cos(E), 0.0])


def velocity_ecef(eph, E: float, n: float, inc: float, node: float,
                  position: np.ndarray) -> np.ndarray:
    """
    Satellite velocity with respect to the rotating Earth, in ECEF.

    The perifocal velocity is rotated by argument of perigee, inclination
    and node longitude, then the velocity induced by Earth rotation
    (OMEGA_E x r) is subtracted.

    Parameters
    ----------
    eph : EphemerisRecord
        Broadcast ephemeris
    E : float
        Eccentric anomaly (rad)
    n : float
        Corrected mean motion (rad/s)
    inc : float
        Corrected inclination (rad)
    node : float
        Corrected longitude of the ascending node (rad)
    position : np.ndarray
        Satellite ECEF position (m), shape (3,)

    Returns
    -------
    np.ndarray
        Satellite ECEF velocity (m/s), shape (3,)
    """
    v_orb = orbital_velocity(eph, E, n)
    return orbit2ecef(v_orb, eph.omega, inc, node) - np.cross(OMEGA_E_VEC, position)
