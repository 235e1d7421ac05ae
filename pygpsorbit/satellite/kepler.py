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

"""Kepler's equation solver"""

import logging
import math
from typing import NamedTuple

from ..core.constants import KEPLER_MAX_ITER, KEPLER_TOL
from ..core.exceptions import InvalidInputError, NumericalError
from ..logger import LogLevel

logger = logging.getLogger(__name__)


class KeplerSolution(NamedTuple):
    """Eccentric anomaly and the number of Newton-Raphson steps taken"""
    E: float
    iterations: int


def solve_kepler(M: float, e: float,
                 tol: float = KEPLER_TOL,
                 max_iter: int = KEPLER_MAX_ITER) -> KeplerSolution:
    """
    Solve Kepler's equation E - e*sin(E) = M for the eccentric anomaly.

    Uses Newton-Raphson iteration seeded with E_0 = M:

        E_{i+1} = E_i - (E_i - e*sin(E_i) - M) / (1 - e*cos(E_i))

    Parameters
    ----------
    M : float
        Mean anomaly (rad)
    e : float
        Eccentricity, 0 <= e < 1
    tol : float, optional
        Convergence threshold on |E_{i+1} - E_i| (rad), default 1e-12
    max_iter : int, optional
        Maximum number of iterations, default 20

    Returns
    -------
    KeplerSolution
        Eccentric anomaly (rad) and iteration count

    Raises
    ------
    InvalidInputError
        If M or e is not finite or e is outside [0, 1)
    NumericalError
        If the iteration does not converge within max_iter steps

    Notes
    -----
    Convergence is quadratic for 0 <= e < 1. For a circular orbit the first
    step has zero residual and E = M is returned after one iteration.
    """
    if not (math.isfinite(M) and math.isfinite(e)):
        raise InvalidInputError(f"Non-finite Kepler input: M={M}, e={e}")
    if not 0.0 <= e < 1.0:
        raise InvalidInputError(f"Eccentricity must be in [0, 1), got {e}")

    E = M
    step = math.inf
    for iteration in range(1, max_iter + 1):
        E_new = E - (E - e * math.sin(E) - M) / (1.0 - e * math.cos(E))

        step = abs(E_new - E)
        if step < tol:
            logger.log(LogLevel.TRACE.value,
                       "Kepler solver converged in %d iterations (E=%.15f)", iteration, E_new)
            return KeplerSolution(E_new, iteration)

        E = E_new

    raise NumericalError(
        f"Kepler solver did not converge in {max_iter} iterations "
        f"(M={M}, e={e}, last step={step:.3e})")
