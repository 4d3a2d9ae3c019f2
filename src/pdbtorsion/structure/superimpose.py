# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module provides functions for structure superimposition.
"""

__name__ = "pdbtorsion.structure"
__author__ = "The PDBTorsion developers"
__all__ = ["superimpose", "superimpose_matrix", "rmsd_after_superimpose"]

import numpy as np
from pdbtorsion.structure.atoms import coord
from pdbtorsion.structure.error import DimensionMismatchError
from pdbtorsion.structure.geometry import centroid, rmsd
from pdbtorsion.structure.transform import AffineTransformation


def superimpose(fixed, mobile, atom_mask=None):
    """
    Superimpose structures onto each other, minimizing the RMSD between
    them.

    More precisely, the `mobile` structure is rotated and translated onto
    the `fixed` structure, using the *Kabsch* algorithm.

    Parameters
    ----------
    fixed : Residue or Chain or Protein or list of Atom or ndarray, shape(n,3), dtype=float
        The fixed structure.
        Alternatively coordinates can be given.
    mobile : Residue or Chain or Protein or list of Atom or ndarray, shape(n,3), dtype=float
        The structure which is superimposed on the `fixed` structure.
        Each atom at index *i* in `mobile` must correspond the
        atom at index *i* in `fixed` to obtain correct results.
        Alternatively coordinates can be given.
    atom_mask : ndarray, dtype=bool, optional
        If given, only the atoms covered by this boolean mask will be
        considered for superimposition.
        This means that the algorithm will minimize the RMSD based
        on the covered atoms instead of all atoms.
        The returned superimposed structure will contain all atoms
        of the input structure, regardless of this parameter.

    Returns
    -------
    fitted : Residue or Chain or Protein or ndarray, shape(n,3), dtype=float
        A copy of the `mobile` structure, superimposed on the fixed
        structure.
        Only coordinates are returned, if coordinates or an atom list
        were given in `mobile`.
    transformation : AffineTransformation
        The affine transformation that was applied on `mobile`.
        :meth:`AffineTransformation.apply()` can be used to transform
        another structure in the same way.

    Notes
    -----
    The `transformation` can come in handy, in case you want to
    superimpose two structures with different amount of atoms.
    Often only the *CA* atoms of both structures are superimposed,
    e.g. via :meth:`Protein.filter_coord()`.
    Afterwards the transformation can be applied on the complete
    structure using :meth:`AffineTransformation.apply()`.

    Examples
    --------

    >>> fixed = np.array([[0, 0, 0], [1, 0, 0], [0, 2, 0], [0, 0, 3]])
    >>> mobile = fixed @ rotation_matrix([1, 1, 1], 1.0) + [4, 5, 6]
    >>> print(rmsd(fixed, mobile) > 1.0)
    True
    >>> fitted, transformation = superimpose(fixed, mobile)
    >>> print(f"{rmsd(fixed, fitted):.3f}")
    0.000
    """
    mob_coord = coord(mobile)
    fix_coord = coord(fixed)
    if mob_coord.shape != fix_coord.shape:
        raise DimensionMismatchError(
            f"Coordinates with shape {fix_coord.shape} and {mob_coord.shape} "
            f"cannot be superimposed"
        )

    if atom_mask is not None:
        # Implicitly this creates array copies
        mob_filtered = mob_coord[atom_mask]
        fix_filtered = fix_coord[atom_mask]
    else:
        mob_filtered = mob_coord
        fix_filtered = fix_coord

    fix_centroid, rotation, mob_centroid = superimpose_matrix(
        fix_filtered, mob_filtered
    )
    transform = AffineTransformation(-mob_centroid, rotation, fix_centroid)
    if isinstance(mobile, (np.ndarray, list, tuple)):
        return transform.apply(mob_coord), transform
    return transform.apply(mobile), transform


def superimpose_matrix(fixed, mobile):
    """
    Calculate the centroids and the rotation matrix, that superimpose
    `mobile` onto `fixed` with minimum RMSD.

    The superimposed coordinates are obtained by
    ``(mobile - mobile_center) @ rotation + fixed_center``.

    Parameters
    ----------
    fixed, mobile : Residue or Chain or Protein or list of Atom or ndarray, shape(n,3), dtype=float
        The structures or coordinates.

    Returns
    -------
    fixed_center : ndarray, shape=(3,), dtype=float
        The centroid of `fixed`.
    rotation : ndarray, shape=(3,3), dtype=float
        The rotation matrix in right-multiply convention.
        It is always a proper rotation, i.e. its determinant is *+1*.
    mobile_center : ndarray, shape=(3,), dtype=float
        The centroid of `mobile`.

    Raises
    ------
    DimensionMismatchError
        If the number of coordinates differs.
    """
    fix_coord = coord(fixed)
    mob_coord = coord(mobile)
    if fix_coord.shape != mob_coord.shape:
        raise DimensionMismatchError(
            f"Coordinates with shape {fix_coord.shape} and {mob_coord.shape} "
            f"cannot be superimposed"
        )
    if len(fix_coord) == 0:
        raise ValueError("At least one coordinate is required")

    # Center coordinates at (0,0,0)
    fix_centroid = centroid(fix_coord)
    mob_centroid = centroid(mob_coord)
    rotation = _get_rotation_matrix(
        fix_coord - fix_centroid, mob_coord - mob_centroid
    )
    return fix_centroid, rotation, mob_centroid


def rmsd_after_superimpose(fixed, mobile):
    """
    Calculate the RMSD between two structures, after `mobile` was
    superimposed onto `fixed`.

    Parameters
    ----------
    fixed, mobile : Residue or Chain or Protein or list of Atom or ndarray, shape(n,3), dtype=float
        The structures or coordinates.

    Returns
    -------
    rmsd : float
        The minimum RMSD between both structures.
    """
    fix_centroid, rotation, mob_centroid = superimpose_matrix(fixed, mobile)
    fitted = (coord(mobile) - mob_centroid) @ rotation + fix_centroid
    return rmsd(fixed, fitted)


def _get_rotation_matrix(fixed, mobile):
    """
    Get the rotation matrix to superimpose the given mobile
    coordinates onto the given fixed coordinates, minimizing the RMSD.

    Uses the *Kabsch* algorithm.
    Both sets of coordinates must already be centered at origin.
    """
    # Calculate cross-covariance matrix
    cov = mobile.T @ fixed
    u, s, vt = np.linalg.svd(cov)
    # Remove possibility of reflected atom coordinates
    if np.linalg.det(u) * np.linalg.det(vt) < 0:
        u[:, -1] *= -1
    return u @ vt
