# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Utility functions for internal use in the `pdbtorsion.structure`
package.
"""

__name__ = "pdbtorsion.structure"
__author__ = "The PDBTorsion developers"
__all__ = ["vector_dot", "matrix_rotate"]

import numpy as np


def vector_dot(v1, v2):
    """
    Calculate vector dot product of two vectors.

    Parameters
    ----------
    v1, v2 : ndarray
        The arrays to calculate the product from.
        The vectors are represented by the last axis.

    Returns
    -------
    product : float or ndarray
        Scalar product over the last dimension of the arrays.
    """
    return (v1 * v2).sum(axis=-1)


def matrix_rotate(v, matrix, support=None):
    """
    Rotate position vectors with a rotation matrix, using the
    right-multiply convention ``v @ matrix``.

    Parameters
    ----------
    v : ndarray, shape=(3,) or shape=(n,3)
        The position vector(s).
    matrix : ndarray, shape=(3,3)
        The rotation matrix.
    support : ndarray, shape=(3,), optional
        The center of the rotation.
        By default, the rotation is performed about the origin.

    Returns
    -------
    rotated : ndarray, shape=(3,) or shape=(n,3)
        The rotated position vector(s).
    """
    if support is None:
        return v @ matrix
    support = np.asarray(support, dtype=float)
    return (v - support) @ matrix + support
