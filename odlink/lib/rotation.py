"""Library for rotation matrices and quaternions

Description:
------------

Creates rotation matrices for rotation around the axes of a right handed Cartesian coordinate system and their
derivatives (from Midgard), and converts between rotation matrices and unit quaternions.

Quaternions are stored scalar first, `q = (w, x, y, z)`, and describe the rotation from a body-fixed to an inertial
frame, `r_inertial = R(q) @ r_body_fixed`.
"""

# External library imports
import numpy as np
from scipy.spatial.transform import Rotation

# Include all rotation matrices defined in Midgard
from midgard.math.rotation import *  # noqa


def quaternion_to_matrix(quaternion):
    """Rotation matrix of a quaternion

    The quaternion is not normalized first, the partials in :func:`dmatrix_dquaternion` are taken of this exact
    expression.

    Args:
        quaternion (Numpy array):   Quaternion (w, x, y, z).

    Returns:
        Numpy array: 3x3 rotation matrix.
    """
    w, x, y, z = quaternion
    return np.array(
        [
            [w * w + x * x - y * y - z * z, 2 * (x * y - w * z), 2 * (x * z + w * y)],
            [2 * (x * y + w * z), w * w - x * x + y * y - z * z, 2 * (y * z - w * x)],
            [2 * (x * z - w * y), 2 * (y * z + w * x), w * w - x * x - y * y + z * z],
        ]
    )


def dmatrix_dquaternion(quaternion):
    """Partial derivatives of the rotation matrix with respect to each of the quaternion elements

    Args:
        quaternion (Numpy array):   Quaternion (w, x, y, z).

    Returns:
        Numpy array: 4x3x3 array, the i'th matrix is dR/dq_i.
    """
    w, x, y, z = quaternion
    dR_dw = 2 * np.array([[w, -z, y], [z, w, -x], [-y, x, w]])
    dR_dx = 2 * np.array([[x, y, z], [y, -x, -w], [z, w, -x]])
    dR_dy = 2 * np.array([[-y, x, w], [x, y, z], [-w, z, -y]])
    dR_dz = 2 * np.array([[-z, -w, x], [w, -z, y], [x, y, z]])
    return np.stack((dR_dw, dR_dx, dR_dy, dR_dz))


def matrix_to_quaternion(matrix):
    """Unit quaternion (w, x, y, z) of a rotation matrix, with non-negative scalar part"""
    x, y, z, w = Rotation.from_matrix(matrix).as_quat()
    quaternion = np.array([w, x, y, z])
    return -quaternion if w < 0 else quaternion


def body_fixed_to_inertial(angle):
    """Rotation from body-fixed to inertial frame for a rotation `angle` about the z-axis"""
    return R3(-angle)  # noqa


def dbody_fixed_to_inertial_dangle(angle):
    """Derivative of :func:`body_fixed_to_inertial` with respect to the rotation angle"""
    return -dR3(-angle)  # noqa
