# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module provides functions for geometric measurements between atoms
in a structure, mainly lengths and angles.
"""

__name__ = "pdbtorsion.structure"
__author__ = "The PDBTorsion developers"
__all__ = [
    "vector_angle",
    "rotation_matrix",
    "rotation_matrix_between",
    "distance",
    "dihedral",
    "dihedral_backbone",
    "centroid",
    "rmsd",
]

import numpy as np
from pdbtorsion.structure.atoms import Protein, coord
from pdbtorsion.structure.error import DimensionMismatchError
from pdbtorsion.structure.util import vector_dot

_X_AXIS = np.array([1.0, 0.0, 0.0])
_Z_AXIS = np.array([0.0, 0.0, 1.0])


def vector_angle(v1, v2):
    """
    Measure the unsigned angle between two vectors.

    Parameters
    ----------
    v1, v2 : array-like, shape=(3,), dtype=float
        The vectors.

    Returns
    -------
    angle : float
        The angle in radians, in the range *[0, π]*.

    Raises
    ------
    ValueError
        If one of the vectors has length zero.

    Examples
    --------

    >>> print(f"{vector_angle([1, 0, 0], [0, 2, 0]):.4f}")
    1.5708
    >>> print(vector_angle([1, 0, 0], [-2, 0, 0]) == np.pi)
    True
    """
    v1 = np.asarray(v1, dtype=float)
    v2 = np.asarray(v2, dtype=float)
    norm_product = np.linalg.norm(v1) * np.linalg.norm(v2)
    if norm_product == 0:
        raise ValueError("The angle of a vector with length zero is undefined")
    # Rounding errors may exceed the domain of 'arccos()'
    cos_angle = np.clip(vector_dot(v1, v2) / norm_product, -1.0, 1.0)
    return float(np.arccos(cos_angle))


def rotation_matrix(axis, angle):
    """
    Create the matrix for a rotation about an axis through the origin.

    The matrix follows the right-multiply convention:
    A row vector `v` is rotated by ``v @ matrix``.

    Parameters
    ----------
    axis : array-like, shape=(3,), dtype=float
        A vector representing the direction of the rotation axis.
        The length of the vector is irrelevant.
    angle : float
        The rotation angle in radians.
        Positive angles rotate counterclockwise, when looking from the
        tip of `axis` towards the origin.

    Returns
    -------
    matrix : ndarray, shape=(3,3), dtype=float
        The rotation matrix.
        If `axis` has length zero, the rotation is undefined and the
        identity matrix is returned.

    Examples
    --------

    >>> matrix = rotation_matrix([0, 0, 1], np.pi / 2)
    >>> print(np.round(np.array([1, 0, 0]) @ matrix, 6) + 0)
    [0. 1. 0.]
    """
    axis = np.array(axis, dtype=float)
    norm = np.linalg.norm(axis)
    if norm == 0:
        return np.identity(3)
    axis /= norm
    x, y, z = axis
    # Save some interim values, that are used repeatedly in the
    # rotation matrix, for clarity and to save computation time
    sin_a = np.sin(angle)
    cos_a = np.cos(angle)
    icos_a = 1 - cos_a
    # Transposed form of Rodrigues' rotation formula
    return np.array(
        [
            [
                cos_a + icos_a * x**2,
                icos_a * x * y + z * sin_a,
                icos_a * x * z - y * sin_a,
            ],
            [
                icos_a * x * y - z * sin_a,
                cos_a + icos_a * y**2,
                icos_a * y * z + x * sin_a,
            ],
            [
                icos_a * x * z + y * sin_a,
                icos_a * y * z - x * sin_a,
                cos_a + icos_a * z**2,
            ],
        ]
    )


def rotation_matrix_between(source, target):
    """
    Create the matrix for the rotation, that turns the direction of
    `source` onto the direction of `target`.

    The matrix follows the right-multiply convention:
    ``unit(source) @ matrix`` equals ``unit(target)``.

    Parameters
    ----------
    source, target : array-like, shape=(3,), dtype=float
        The vectors.
        Their lengths are irrelevant.

    Returns
    -------
    matrix : ndarray, shape=(3,3), dtype=float
        The rotation matrix.
        The identity matrix is returned for parallel vectors.
        For antiparallel vectors the rotation is a half turn about an
        axis perpendicular to `source`.

    Raises
    ------
    ValueError
        If one of the vectors has length zero.

    Examples
    --------

    >>> matrix = rotation_matrix_between([0, 2, 0], [0, 0, 3])
    >>> print(np.round(np.array([0, 1, 0]) @ matrix, 6) + 0)
    [0. 0. 1.]
    """
    source = np.asarray(source, dtype=float)
    target = np.asarray(target, dtype=float)
    angle = vector_angle(source, target)
    axis = np.cross(source, target)
    norm_product = np.linalg.norm(source) * np.linalg.norm(target)
    if np.linalg.norm(axis) > 1e-12 * norm_product:
        return rotation_matrix(axis, angle)
    if angle < np.pi / 2:
        # Already aligned
        return np.identity(3)
    # Antiparallel: The cross product vanishes, hence the axis is
    # derived from the coordinate axis least aligned with 'source'
    unit_source = source / np.linalg.norm(source)
    axis = np.zeros(3)
    axis[np.argmin(np.abs(unit_source))] = 1
    axis -= vector_dot(axis, unit_source) * unit_source
    return rotation_matrix(axis, np.pi)


def distance(atoms1, atoms2):
    """
    Measure the euclidian distance between atoms.

    Parameters
    ----------
    atoms1, atoms2 : ndarray or Atom or list of Atom or Residue or Chain or Protein
        The atoms to measure the distances between.
        Alternatively an ndarray containing the coordinates can be
        provided.
        Usual *NumPy* broadcasting rules apply.

    Returns
    -------
    dist : float or ndarray
        The atom distances.
    """
    diff = coord(atoms2) - coord(atoms1)
    return np.sqrt(vector_dot(diff, diff))


def dihedral(atom1, atom2, atom3, atom4):
    """
    Measure the dihedral angle between 4 atoms.

    The angle describes the torsion about the bond between `atom2` and
    `atom3`.
    Its sign follows the IUPAC convention:
    Looking along the bond from `atom2` to `atom3`, the angle is
    positive, if `atom1` must be rotated clockwise to eclipse `atom4`.

    Parameters
    ----------
    atom1, atom2, atom3, atom4 : Atom or ndarray, shape=(3,), dtype=float
        The atoms to measure the dihedral angle between.
        Alternatively the coordinates can be provided.

    Returns
    -------
    dihed : float
        The dihedral angle in radians, in the range *[-π, π]*.

    Raises
    ------
    ValueError
        If three of the points are collinear, i.e. the dihedral angle
        is undefined.

    Notes
    -----
    At first the unsigned angle between the normals of the planes
    spanned by *(atom1, atom2, atom3)* and *(atom2, atom3, atom4)* is
    computed.
    To obtain the sign, the coordinate frame is rotated, so that the
    bond from `atom2` to `atom3` lies on the *x*-axis and `atom1` lies
    in the *x*-*z*-plane with a positive *z*-coordinate.
    The angle is negative, if `atom4` has a positive *y*-coordinate in
    this frame.

    Examples
    --------

    >>> print(f"{np.rad2deg(dihedral([1, 0, 1], [0, 0, 0], [1, 0, 0], [1, 1, 1])):.1f}")
    -45.0
    """
    a = coord(atom1)
    b = coord(atom2)
    c = coord(atom3)
    d = coord(atom4)

    normal1 = np.cross(b - a, c - a)
    normal2 = np.cross(b - d, c - d)
    angle = vector_angle(normal1, normal2)

    # Local frame with 'atom2' at the origin
    oa = a - b
    oc = c - b
    od = d - b

    # For vectors, that are already aligned,
    # 'rotation_matrix_between()' returns the identity
    rotation = rotation_matrix_between(oc, _X_AXIS)
    oa = oa @ rotation
    od = od @ rotation

    # Project onto the y-z-plane
    oa[0] = 0
    od[0] = 0

    rotation = rotation_matrix_between(oa, _Z_AXIS)
    od = od @ rotation

    if od[1] > 0:
        angle = -angle
    return angle


def dihedral_backbone(structure):
    """
    Measure the characteristic backbone dihedral angles of all residues
    in a structure.

    Parameters
    ----------
    structure : Chain or Protein
        The protein structure to measure the dihedral angles for.
        Residues are only considered as adjacent, if they belong to the
        same chain.

    Returns
    -------
    phi, psi, omega : ndarray, dtype=float
        An array containing the 3 backbone dihedral angles for every
        residue.
        `phi` is not defined at the N-terminus, `psi` and `omega` are
        not defined at the C-terminus.
        In these places and for residues with missing backbone atoms the
        arrays have *NaN* values.
    """
    if isinstance(structure, Protein):
        chains = structure.chains
    else:
        chains = [structure]

    phi = []
    psi = []
    omega = []
    for chain in chains:
        residues = chain.residues
        backbone = [_backbone_coord(residue) for residue in residues]
        for i in range(len(residues)):
            n, ca, c = backbone[i]
            prev_c = backbone[i - 1][2] if i > 0 else None
            next_n, next_ca = (
                backbone[i + 1][:2] if i < len(residues) - 1 else (None, None)
            )
            phi.append(_dihedral_or_nan(prev_c, n, ca, c))
            psi.append(_dihedral_or_nan(n, ca, c, next_n))
            omega.append(_dihedral_or_nan(ca, c, next_n, next_ca))
    return np.array(phi), np.array(psi), np.array(omega)


def centroid(atoms):
    """
    Measure the centroid of a structure.

    Parameters
    ----------
    atoms : ndarray or list of Atom or Residue or Chain or Protein
        The structure to determine the centroid from.
        Alternatively an ndarray containing the coordinates can be
        provided.

    Returns
    -------
    centroid : ndarray, shape=(3,), dtype=float
        The centroid of the structure.
    """
    return np.mean(coord(atoms), axis=-2)


def rmsd(reference, subject):
    """
    Calculate the RMSD between two structures.

    The *root mean square deviation* (RMSD) indicates the overall
    deviation of each atom between two structures.
    It is defined as:

    .. math:: RMSD = \\sqrt{ \\frac{1}{n} \\sum\\limits_{i=1}^n (x_i - x_{ref,i})^2}

    Parameters
    ----------
    reference, subject : ndarray, shape=(n,3) or list of Atom or Residue or Chain or Protein
        The structures to compare.
        Each atom at index *i* in `subject` must correspond to the atom
        at index *i* in `reference`.
        Alternatively coordinates can be given.

    Returns
    -------
    rmsd : float
        The RMSD between both structures.

    Raises
    ------
    DimensionMismatchError
        If the number of coordinates differs.
    """
    ref_coord = coord(reference)
    sub_coord = coord(subject)
    if ref_coord.shape != sub_coord.shape:
        raise DimensionMismatchError(
            f"Coordinates with shape {ref_coord.shape} and {sub_coord.shape} "
            f"cannot be compared"
        )
    diff = sub_coord - ref_coord
    return float(np.sqrt(np.mean(vector_dot(diff, diff), axis=-1)))


def _backbone_coord(residue):
    atom_map = residue.atom_map()
    return tuple(
        atom_map[name].coord if name in atom_map else None
        for name in ("N", "CA", "C")
    )


def _dihedral_or_nan(*points):
    if any(point is None for point in points):
        return np.nan
    try:
        return dihedral(*points)
    except ValueError:
        return np.nan
