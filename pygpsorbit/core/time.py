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

"""GPS time-of-week arithmetic"""

import math

from .constants import WEEK_SECONDS
from .exceptions import InvalidInputError


def timediff(t1: float, t2: float) -> float:
    """Calculate time difference in seconds with week rollover handling.

    Parameters
    ----------
    t1 : float
        First time as GPS time of week (s)
    t2 : float
        Second time as GPS time of week (s)

    Returns
    -------
    float
        Time difference (t1 - t2) in seconds, normalized to the range
        [-302400, 302400] (half a week) so that the shortest difference
        across a week boundary is returned.

    Raises
    ------
    InvalidInputError
        If either time is not finite

    Examples
    --------
    >>> timediff(100000.0, 50000.0)
    50000.0
    >>> timediff(10000.0, 590000.0)  # crosses the week boundary
    24800.0
    """
    dt = float(t1) - float(t2)
    if not math.isfinite(dt):
        raise InvalidInputError(f"Non-finite time difference: {t1} - {t2}")

    # Handle week rollover, result in [-302400, 302400]
    dt = math.remainder(dt, WEEK_SECONDS)

    return dt
