# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module provides transformations that can be applied on
structures.
"""

__name__ = "pdbtorsion.structure"
__author__ = "The PDBTorsion developers"
__all__ = ["AffineTransformation", "rotate_about_axis", "translate"]

import numpy as np
from pdbtorsion.structure.atoms import Atom, _Container, coord
from pdbtorsion.structure.geometry import rotation_matrix


class AffineTransformation:
    """
    An affine transformation, consisting of translations and a rotation.

    A position vector *x* is transformed into
    ``(x + center_translation) @ rotation + target_translation``.

    Parameters
    ----------
    center_translation : ndarray, shape=(3,), dtype=float
        The translation vector for moving the centroid into the
        origin.
    rotation : ndarray, shape=(3,3), dtype=float
        The rotation matrix in right-multiply convention.
    target_translation : ndarray, shape=(3,), dtype=float
        The translation vector for moving the structure onto the
        fixed one.

    Attributes
    ----------
    center_translation, rotation, target_translation : ndarray
        Same as the parameters.
    """

    def __init__(self, center_translation, rotation, target_translation):
        self.center_translation = np.asarray(center_translation, dtype=float)
        self.rotation = np.asarray(rotation, dtype=float)
        self.target_translation = np.asarray(target_translation, dtype=float)

    def apply(self, atoms):
        """
        Apply this transformation on the given structure.

        Parameters
        ----------
        atoms : Atom or Residue or Chain or Protein or ndarray, shape=(3,) or shape=(n,3), dtype=float
            The structure to apply the transformation on.

        Returns
        -------
        transformed : Atom or Residue or Chain or Protein or ndarray, shape=(3,) or shape=(n,3), dtype=float
            A copy of the `atoms` structure, with transformations applied.
            Only coordinates are returned, if coordinates were given in
            `atoms`.

        Examples
        --------

        >>> coord = np.arange(15).reshape(5,3)
        >>> print(coord)
        [[ 0  1  2]
         [ 3  4  5]
         [ 6  7  8]
         [ 9 10 11]
         [12 13 14]]
        >>> # Rotates 90 degrees around the z-axis
        >>> transform = AffineTransformation(
        ...     center_translation=np.array([0,0,0]),
        ...     rotation=np.array([
        ...         [ 0, 1, 0],
        ...         [-1, 0, 0],
        ...         [ 0, 0, 1]
        ...     ]),
        ...     target_translation=np.array([0,0,0])
        ... )
        >>> print(transform.apply(coord))
        [[ -1.   0.   2.]
         [ -4.   3.   5.]
         [ -7.   6.   8.]
         [-10.   9.  11.]
         [-13.  12.  14.]]
        """
        transformed = self._transform(coord(atoms))
        if isinstance(atoms, (Atom, _Container)):
            moved = atoms.copy()
            _put_coord(moved, transformed)
            return moved
        return transformed

    def apply_inplace(self, atoms):
        """
        Apply this transformation on the coordinates of the given
        structure, without creating a copy.

        Parameters
        ----------
        atoms : Atom or Residue or Chain or Protein
            The structure to apply the transformation on.
        """
        _put_coord(atoms, self._transform(coord(atoms)))

    def as_matrix(self):
        """
        Get the translations and rotation as a combined 4x4
        transformation matrix.

        Multiplying coordinates in the form *(x, y, z, 1)* with this
        matrix from the right will apply the same transformation as
        :meth:`apply()` to coordinates in the form *(x, y, z)*.

        Returns
        -------
        transformation_matrix : ndarray, shape=(4,4), dtype=float
            The transformation matrix.
        """
        center_translation_mat = np.identity(4)
        center_translation_mat[3, :3] = self.center_translation
        rotation_mat = np.identity(4)
        rotation_mat[:3, :3] = self.rotation
        target_translation_mat = np.identity(4)
        target_translation_mat[3, :3] = self.target_translation
        return center_translation_mat @ rotation_mat @ target_translation_mat

    def _transform(self, positions):
        return (
            (positions + self.center_translation) @ self.rotation
            + self.target_translation
        )

    def __eq__(self, other):
        if not isinstance(other, AffineTransformation):
            return False
        if not np.array_equal(self.center_translation, other.center_translation):
            return False
        if not np.array_equal(self.rotation, other.rotation):
            return False
        if not np.array_equal(self.target_translation, other.target_translation):
            return False
        return True


def translate(atoms, vector):
    """
    Translate the given atoms or coordinates by a given vector.

    Parameters
    ----------
    atoms : Atom or Residue or Chain or Protein or ndarray, shape=(3,) or shape=(n,3)
        The atoms of which the coordinates are transformed.
        The coordinates can be directly provided as :class:`ndarray`.
    vector : array-like, shape=(3,)
        The translation vector.

    Returns
    -------
    transformed : Atom or Residue or Chain or Protein or ndarray, shape=(3,) or shape=(n,3)
        A copy of the input atoms or coordinates, translated by the
        given vector.
    """
    positions = coord(atoms).copy()
    positions += np.asarray(vector, dtype=float)
    return _put_back(atoms, positions)


def rotate_about_axis(atoms, axis, angle, support=None):
    """
    Rotate the given atoms or coordinates about a given axis by a given
    angle.

    Parameters
    ----------
    atoms : Atom or Residue or Chain or Protein or ndarray, shape=(3,) or shape=(n,3)
        The atoms of which the coordinates are transformed.
        The coordinates can be directly provided as :class:`ndarray`.
    axis : array-like, length=3
        A vector representing the direction of the rotation axis.
        The length of the vector is irrelevant.
    angle : float
        The rotation angle in radians.
    support : array-like, length=3, optional
        An optional support vector for the rotation axis, i.e. the
        center of the rotation.
        By default, the center of the rotation is at *(0,0,0)*.

    Returns
    -------
    transformed : Atom or Residue or Chain or Protein or ndarray, shape=(3,) or shape=(n,3)
        A copy of the input atoms or coordinates, rotated about the
        given axis.

    Examples
    --------
    Rotation about a custom axis on the *y*-*z*-plane by 90 degrees:

    >>> position = np.array([2.0, 0.0, 0.0])
    >>> axis = [0.0, 1.0, 1.0]
    >>> rotated = rotate_about_axis(position, axis, angle=0.5*np.pi)
    >>> print(np.round(rotated, 3) + 0)
    [ 0.     1.414 -1.414]
    """
    if np.linalg.norm(axis) == 0:
        raise ValueError("Length of the rotation axis is 0")
    positions = coord(atoms).copy()
    if support is not None:
        # Transform coordinates
        # so that the axis support vector is at (0,0,0)
        positions -= np.asarray(support, dtype=float)
    positions = positions @ rotation_matrix(axis, angle)
    if support is not None:
        # Transform coordinates back to original support vector position
        positions += np.asarray(support, dtype=float)
    return _put_back(atoms, positions)


def _put_back(input_atoms, transformed):
    """
    Put the altered coordinates back into a copy of the :class:`Atom`
    or structure, if the input was one of these types.
    """
    if isinstance(input_atoms, (Atom, _Container)):
        moved_atoms = input_atoms.copy()
        _put_coord(moved_atoms, transformed)
        return moved_atoms
    else:
        return transformed


def _put_coord(atoms, positions):
    if isinstance(atoms, Atom):
        atoms.coord = positions
    else:
        atoms.set_coord(positions)
