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
Elementary frame rotations.

Rotations are applied directly to 3-vectors instead of building direction
cosine matrices. All rotations are right-handed and active: a positive angle
turns the vector counter-clockwise about the axis.

The orbital-plane to ECEF transformation is the composition
``Rz(Omega_k) Rx(i_k) Rz(omega)``: the argument of perigee rotates within the
orbital plane, the inclination tilts the plane about the line of nodes and the
node longitude turns the line of nodes about the Earth's spin axis.
"""

import numpy as np
from numba import njit


@njit(cache=True, fastmath=True)
def rotate_x(v, phi):
    """
    Rotate a vector about the x-axis.

    Parameters
    ----------
    v : ndarray, shape (3,)
        Input vector
    phi : float
        Rotation angle in radians

    Returns
    -------
    ndarray, shape (3,)
        Rotated vector
    """
    sinP = np.sin(phi)
    cosP = np.cos(phi)
    return np.array([v[0],
                     cosP*v[1] - sinP*v[2],
                     sinP*v[1] + cosP*v[2]],
                    dtype=np.double)


@njit(cache=True, fastmath=True)
def rotate_z(v, psi):
    """
    Rotate a vector about the z-axis.

    Parameters
    ----------
    v : ndarray, shape (3,)
        Input vector
    psi : float
        Rotation angle in radians

    Returns
    -------
    ndarray, shape (3,)
        Rotated vector
    """
    sinS = np.sin(psi)
    cosS = np.cos(psi)
    return np.array([cosS*v[0] - sinS*v[1],
                     sinS*v[0] + cosS*v[1],
                     v[2]],
                    dtype=np.double)


@njit(cache=True, fastmath=True)
def orbit2ecef(v, omega, inc, node):
    """
    Rotate a perifocal-frame vector into ECEF.

    Parameters
    ----------
    v : ndarray, shape (3,)
        Vector in the perifocal frame (x towards perigee)
    omega : float
        Argument of perigee (rad)
    inc : float
        Inclination (rad)
    node : float
        Longitude of the ascending node, corrected for Earth rotation (rad)

    Returns
    -------
    ndarray, shape (3,)
        Vector in ECEF
    """
    return rotate_z(rotate_x(rotate_z(v, omega), inc), node)
