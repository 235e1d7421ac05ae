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
pygpsorbit - GPS satellite position and velocity from broadcast ephemeris

Computes a GPS satellite's Earth-Centered Earth-Fixed (ECEF) position and
velocity at a requested GPS time from one set of broadcast ephemeris
parameters, following the GPS interface specification algorithm.
"""

__version__ = "1.0.0"
__author__ = "pygpsorbit Development Team"
__title__ = "pygpsorbit"
__description__ = "GPS satellite ECEF position and velocity from broadcast ephemeris"

from .core import *
from .coordinate import *
from .satellite import *
from .logger import LogLevel, get_logger, setup_logger, setup_logger_from_config
