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

"""Orbital plane to ECEF position transformation"""

import math

import numpy as np

from ..coordinate.rotation import rotate_x, rotate_z
from ..core.constants import MU_GPS, OMGE_GPS


def mean_motion(eph) -> float:
    """Corrected mean motion n = sqrt(mu / A^3) + deltaN (rad/s)"""
    return math.sqrt(MU_GPS / eph.sqrtA**6) + eph.deltaN


def node_longitude(eph, tk: float) -> float:
    """
    Compute the longitude of the ascending node in ECEF.

    Omega_k = Omega0 + (OmegaDot - OMGE) * tk - OMGE * toe

    The Earth rotation since the start of the GPS week is folded into
    the node longitude.

    Parameters
    ----------
    eph : EphemerisRecord
        Broadcast ephemeris
    tk : float
        Time from ephemeris reference epoch (s)

    Returns
    -------
    float
        Corrected longitude of the ascending node (rad)
    """
    return eph.Omega0 + (eph.OmegaDot - OMGE_GPS) * tk - OMGE_GPS * eph.toe


def orbital_plane_position(r: float, u: float) -> np.ndarray:
    """Position in the orbital plane, x axis towards the ascending node"""
    return np.array([r * math.cos(u), r * math.sin(u), 0.0])


def position_ecef(r: float, u: float, inc: float, node: float) -> np.ndarray:
    """
    Place the satellite in its orbital plane and rotate it into ECEF.

    Equivalent to

        x = x'*cos(Omega_k) - y'*cos(i_k)*sin(Omega_k)
        y = x'*sin(Omega_k) + y'*cos(i_k)*cos(Omega_k)
        z = y'*sin(i_k)

    with x' = r*cos(u), y' = r*sin(u).

    Parameters
    ----------
    r : float
        Corrected radius (m)
    u : float
        Corrected argument of latitude (rad)
    inc : float
        Corrected inclination (rad)
    node : float
        Corrected longitude of the ascending node (rad)

    Returns
    -------
    np.ndarray
        Satellite position in ECEF (m), shape (3,)
    """
    return rotate_z(rotate_x(orbital_plane_position(r, u), inc), node)
