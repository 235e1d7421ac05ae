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

"""Satellite position and velocity computation from broadcast ephemeris"""

import logging
import math
from typing import Mapping, Tuple

import numpy as np

from ..core.constants import KEPLER_MAX_ITER, KEPLER_TOL
from ..core.data_structures import SatelliteState
from ..core.ephemeris import EphemerisRecord, validate_ephemeris
from ..core.exceptions import InvalidInputError
from ..core.time import timediff
from .anomaly import compute_anomalies
from .ephemeris import select_ephemeris
from .kepler import solve_kepler
from .orbit import mean_motion, node_longitude, position_ecef
from .perturbation import correct_orbit
from .velocity import velocity_ecef

logger = logging.getLogger(__name__)


def _check_finite(name: str, value: float) -> float:
    if not math.isfinite(value):
        raise InvalidInputError(f"Non-finite {name}: {value}")
    return value


def eph2posvel(eph: EphemerisRecord, time: float,
               tol: float = KEPLER_TOL,
               max_iter: int = KEPLER_MAX_ITER) -> Tuple[np.ndarray, np.ndarray]:
    """
    Compute satellite ECEF position and velocity from broadcast ephemeris.

    Implements the GPS ICD algorithm (Grewal & Andrews, Table 3.2): Kepler's
    equation, second harmonic perturbations, rotation into ECEF and the
    velocity with Earth rotation removed.

    Parameters
    ----------
    eph : EphemerisRecord
        Broadcast ephemeris of the satellite
    time : float
        GPS system time of week (s)
    tol : float, optional
        Kepler solver convergence threshold (rad)
    max_iter : int, optional
        Kepler solver iteration cap

    Returns
    -------
    Tuple[np.ndarray, np.ndarray]
        - rs : satellite ECEF position (m), shape (3,)
        - vs : satellite ECEF velocity (m/s), shape (3,)

    Raises
    ------
    InvalidInputError
        If the ephemeris or time is invalid, or an intermediate value is
        not finite
    NumericalError
        If Kepler's equation does not converge

    Notes
    -----
    The time from ephemeris reference epoch is wrapped into
    [-302400, 302400] s to handle week rollover.
    """
    validate_ephemeris(eph)

    tk = timediff(time, eph.toe)
    try:
        n = mean_motion(eph)
    except (OverflowError, ZeroDivisionError) as e:
        raise InvalidInputError(f"Mean motion out of range for sqrtA={eph.sqrtA}") from e
    M = _check_finite("mean anomaly", eph.M0 + n * tk)

    E_est = solve_kepler(M, eph.e, tol, max_iter).E
    anomalies = compute_anomalies(E_est, eph.e, eph.omega)
    _check_finite("argument of latitude", anomalies.phi)

    orbit = correct_orbit(anomalies.phi, anomalies.E, tk, eph)
    _check_finite("argument of latitude", orbit.u)
    _check_finite("radius", orbit.r)
    _check_finite("inclination", orbit.i)
    node = _check_finite("node longitude", node_longitude(eph, tk))

    rs = position_ecef(orbit.r, orbit.u, orbit.i, node)
    vs = velocity_ecef(eph, anomalies.E, n, orbit.i, node, rs)

    if not (np.all(np.isfinite(rs)) and np.all(np.isfinite(vs))):
        raise InvalidInputError(f"Non-finite satellite state: rs={rs}, vs={vs}")

    logger.debug("tk=%.3f M=%.12f E=%.12f v=%.12f r=%.3f node=%.12f",
                 tk, M, anomalies.E, anomalies.v, orbit.r, node)

    return rs, vs


def compute_satellite_position(ephemerides: Mapping[int, EphemerisRecord],
                               time: float, sat: int,
                               tol: float = KEPLER_TOL,
                               max_iter: int = KEPLER_MAX_ITER) -> SatelliteState:
    """
    Compute the ECEF state of one satellite at a GPS time.

    Parameters
    ----------
    ephemerides : Mapping[int, EphemerisRecord]
        Ephemeris records keyed by satellite identifier
    time : float
        GPS system time of week (s)
    sat : int
        Satellite identifier
    tol : float, optional
        Kepler solver convergence threshold (rad)
    max_iter : int, optional
        Kepler solver iteration cap

    Returns
    -------
    SatelliteState
        Position (m) and velocity (m/s) in ECEF, valid at ``time``

    Raises
    ------
    NotFoundError
        If the satellite is not in ``ephemerides``
    InvalidInputError
        If the ephemeris or time is invalid
    NumericalError
        If Kepler's equation does not converge

    Examples
    --------
    >>> state = compute_satellite_position(ephemerides, 248721.9229, 5)
    >>> print(f"Satellite position: {state.rs} m, speed {state.speed:.1f} m/s")
    """
    eph = select_ephemeris(ephemerides, sat)

    try:
        rs, vs = eph2posvel(eph, time, tol, max_iter)
    except InvalidInputError as e:
        logger.debug("Invalid input for satellite %s: %s", sat, e)
        raise

    logger.debug("Satellite %s at %.4f: rs=%s vs=%s", sat, time, rs, vs)
    return SatelliteState(sat=sat, time=float(time), rs=rs, vs=vs)


def calc_sat_pos_ecef(ephemerides: Mapping[int, EphemerisRecord],
                      t_sv: float, sv_id: int) -> Tuple[float, float, float, np.ndarray]:
    """
    Compute satellite ECEF coordinates and velocity.

    Convenience form returning the coordinates as separate values.

    Parameters
    ----------
    ephemerides : Mapping[int, EphemerisRecord]
        Ephemeris records keyed by satellite identifier
    t_sv : float
        GPS system time of week (s)
    sv_id : int
        Satellite identifier

    Returns
    -------
    Tuple[float, float, float, np.ndarray]
        x_ecef, y_ecef, z_ecef (m) and the ECEF velocity vector (m/s)
    """
    state = compute_satellite_position(ephemerides, t_sv, sv_id)
    return state.x, state.y, state.z, state.vs
