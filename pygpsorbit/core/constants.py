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

"""GPS Constants and Orbit Computation Parameters"""

import numpy as np

# Earth Parameters (GPS ICD / WGS84)
GME = 3.986004418E14           # earth gravitational constant (m^3/s^2)
MU_GPS = GME                   # gravitational constant used for GPS orbits
OMGE_GPS = 7.292115E-5         # earth angular velocity (rad/s)

# Time Parameters
WEEK_SECONDS = 604800.0        # seconds in a GPS week
HALF_WEEK_SECONDS = 302400.0   # half week, bound of the wrapped time difference

# Kepler solver defaults
KEPLER_TOL = 1E-12             # convergence threshold on the eccentric anomaly step (rad)
KEPLER_MAX_ITER = 20           # iteration cap

# Unit conversions
R2D = 180.0 / np.pi            # radians to degrees
D2R = np.pi / 180.0            # degrees to radians
