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

"""Ephemeris lookup"""

import logging
from typing import Mapping

from ..core.ephemeris import EphemerisRecord
from ..core.exceptions import NotFoundError

logger = logging.getLogger(__name__)


def select_ephemeris(ephemerides: Mapping[int, EphemerisRecord], sat: int) -> EphemerisRecord:
    """
    Select the ephemeris of a satellite.

    Parameters
    ----------
    ephemerides : Mapping[int, EphemerisRecord]
        Ephemeris records keyed by satellite identifier
    sat : int
        Satellite identifier

    Returns
    -------
    EphemerisRecord
        Ephemeris of the satellite

    Raises
    ------
    NotFoundError
        If the satellite has no ephemeris
    """
    try:
        return ephemerides[sat]
    except KeyError:
        logger.debug("No ephemeris for satellite %s", sat)
        raise NotFoundError(sat) from None
