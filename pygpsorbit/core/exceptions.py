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

"""Errors raised by the satellite orbit computation"""


class OrbitComputationError(Exception):
    """Base class for all errors raised while computing a satellite state"""


class InvalidInputError(OrbitComputationError, ValueError):
    """Ephemeris or time input that makes the orbit geometry ill-defined.

    Raised for eccentricity outside [0, 1), non-positive sqrtA, and any
    non-finite input or intermediate value.
    """


class NotFoundError(OrbitComputationError, KeyError):
    """Requested satellite is absent from the ephemeris lookup"""

    def __init__(self, sat):
        self.sat = sat
        super().__init__(sat)

    def __str__(self):
        return f"No ephemeris for satellite {self.sat}"


class NumericalError(OrbitComputationError, ArithmeticError):
    """Iterative solver did not converge within its iteration cap"""
