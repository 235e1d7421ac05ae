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

"""True anomaly, eccentric anomaly and argument of latitude"""

import math
from typing import NamedTuple


class OrbitAnomalies(NamedTuple):
    """Anomalies of the satellite along its orbit (rad)"""
    v: float    # true anomaly
    E: float    # eccentric anomaly recomputed from the true anomaly
    phi: float  # argument of latitude


def true_anomaly(E: float, e: float) -> float:
    """
    Compute the true anomaly from the eccentric anomaly.

    Both atan2 arguments are normalized by (1 - e*cos(E)); the common factor
    cancels but keeps the tabulated form of the ICD algorithm.

    Parameters
    ----------
    E : float
        Eccentric anomaly (rad)
    e : float
        Eccentricity

    Returns
    -------
    float
        True anomaly in (-pi, pi] (rad)
    """
    den = 1.0 - e * math.cos(E)
    sin_v = math.sqrt(1.0 - e * e) * math.sin(E) / den
    cos_v = (math.cos(E) - e) / den
    return math.atan2(sin_v, cos_v)


def eccentric_anomaly(v: float, e: float) -> float:
    """
    Recompute the eccentric anomaly from the true anomaly.

    acos only returns values in [0, pi], so the sign of the true anomaly is
    carried over to the result: E and v always lie in the same half of the
    orbit. The acos argument is clipped to [-1, 1] against rounding.

    Parameters
    ----------
    v : float
        True anomaly in (-pi, pi] (rad)
    e : float
        Eccentricity

    Returns
    -------
    float
        Eccentric anomaly in [-pi, pi] (rad)
    """
    cos_E = (e + math.cos(v)) / (1.0 + e * math.cos(v))
    E = math.acos(max(-1.0, min(1.0, cos_E)))
    return math.copysign(E, v)


def compute_anomalies(E_est: float, e: float, omega: float) -> OrbitAnomalies:
    """
    Derive true anomaly, refined eccentric anomaly and argument of latitude.

    Parameters
    ----------
    E_est : float
        Eccentric anomaly estimate from the Kepler solver (rad)
    e : float
        Eccentricity
    omega : float
        Argument of perigee (rad)

    Returns
    -------
    OrbitAnomalies
        (v_k, E_k, PHI_k) in radians
    """
    v = true_anomaly(E_est, e)
    E = eccentric_anomaly(v, e)
    return OrbitAnomalies(v, E, v + omega)
