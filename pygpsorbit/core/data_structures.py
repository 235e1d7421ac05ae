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

"""Core data structures for satellite orbit computation"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True, eq=False)
class SatelliteState:
    """Satellite position and velocity in ECEF at one instant.

    Attributes
    ----------
    sat : int
        Satellite identifier used for the ephemeris lookup
    time : float
        GPS time of week the state is valid at (s)
    rs : np.ndarray
        Position in ECEF coordinates (X, Y, Z in meters), shape (3,)
    vs : np.ndarray
        Velocity in ECEF coordinates (Vx, Vy, Vz in m/s), shape (3,)

    Notes
    -----
    The arrays are made read-only on construction. States compare equal
    when all fields match element-wise.
    """
    sat: int
    time: float
    rs: np.ndarray
    vs: np.ndarray

    def __post_init__(self):
        rs = np.array(self.rs, dtype=float)
        vs = np.array(self.vs, dtype=float)
        rs.setflags(write=False)
        vs.setflags(write=False)
        object.__setattr__(self, 'rs', rs)
        object.__setattr__(self, 'vs', vs)

    def __eq__(self, other):
        if not isinstance(other, SatelliteState):
            return NotImplemented
        return (self.sat == other.sat and self.time == other.time
                and np.array_equal(self.rs, other.rs)
                and np.array_equal(self.vs, other.vs))

    @property
    def x(self) -> float:
        return float(self.rs[0])

    @property
    def y(self) -> float:
        return float(self.rs[1])

    @property
    def z(self) -> float:
        return float(self.rs[2])

    @property
    def radius(self) -> float:
        """Geocentric distance (m)"""
        return float(np.linalg.norm(self.rs))

    @property
    def speed(self) -> float:
        """Speed relative to the rotating Earth (m/s)"""
        return float(np.linalg.norm(self.vs))
