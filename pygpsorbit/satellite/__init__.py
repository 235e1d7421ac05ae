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

"""
Satellite position computation from GPS broadcast ephemeris.

The computation follows the GPS Interface Specification IS-GPS-200 as
tabulated in Grewal & Andrews (Table 3.2). Data flows in one direction:

kepler : module
    Newton-Raphson solution of Kepler's equation with an iteration cap
anomaly : module
    True anomaly, recomputed eccentric anomaly and argument of latitude
perturbation : module
    Second harmonic corrections to latitude, radius and inclination
orbit : module
    Node longitude and the orbital plane to ECEF position transformation
velocity : module
    Perifocal velocity rotated into ECEF with Earth rotation removed
satellite_position : module
    Ephemeris lookup and the full position/velocity computation

Usage Examples
--------------
    >>> from pygpsorbit.satellite import compute_satellite_position
    >>> state = compute_satellite_position(ephemerides, 248721.9229, sat=5)
    >>> print(f"Satellite position: {state.rs} m")

Notes
-----
Time: all functions expect GPS time of week (s). The time from the ephemeris
reference epoch is wrapped to +/- half a week.

Coordinates: positions and velocities are in Earth-Centered Earth-Fixed
(ECEF) coordinates; velocities are relative to the rotating Earth.

Every call is independent and holds no state, so satellites and epochs can
be evaluated in parallel.
"""

from .anomaly import OrbitAnomalies, compute_anomalies, eccentric_anomaly, true_anomaly
from .ephemeris import select_ephemeris
from .kepler import KeplerSolution, solve_kepler
from .orbit import mean_motion, node_longitude, orbital_plane_position, position_ecef
from .perturbation import CorrectedOrbit, correct_orbit, harmonic_corrections
from .satellite_position import calc_sat_pos_ecef, compute_satellite_position, eph2posvel
from .velocity import OMEGA_E_VEC, orbital_velocity, velocity_ecef

__all__ = [
    'solve_kepler', 'KeplerSolution',
    'true_anomaly', 'eccentric_anomaly', 'compute_anomalies', 'OrbitAnomalies',
    'harmonic_corrections', 'correct_orbit', 'CorrectedOrbit',
    'mean_motion', 'node_longitude', 'orbital_plane_position', 'position_ecef',
    'orbital_velocity', 'velocity_ecef', 'OMEGA_E_VEC',
    'select_ephemeris',
    'eph2posvel', 'compute_satellite_position', 'calc_sat_pos_ecef',
]
