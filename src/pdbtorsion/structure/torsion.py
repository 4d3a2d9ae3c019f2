# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module provides functions for measuring and rotating the backbone
dihedral angles (*phi*, *psi*) and the side chain dihedral angles
(*chi*) of residues.

All angles are given in radians.
A rotation changes the coordinates of the affected atoms in place.
"""

__name__ = "pdbtorsion.structure"
__author__ = "The PDBTorsion developers"
__all__ = [
    "Dihedral",
    "Side",
    "backbone_dihedral",
    "backbone_rotation_atoms",
    "backbone_rotation",
    "rotate_backbone",
    "set_backbone_dihedral",
    "side_chain_dihedral_count",
    "side_chain_dihedral",
    "side_chain_rotation_atoms",
    "side_chain_rotation",
    "rotate_side_chain",
    "set_side_chain_dihedral",
]

import enum
from pdbtorsion.structure.error import DihedralIndexError
from pdbtorsion.structure.geometry import dihedral, rotation_matrix
from pdbtorsion.structure.info.amino_acids import chi_atom_names
from pdbtorsion.structure.info.atoms import TERMINAL_ATOM_NAMES
from pdbtorsion.structure.util import matrix_rotate


class Dihedral(enum.IntEnum):
    """
    The backbone dihedral angles.
    ``L`` and ``R`` are aliases for the angle on the N-terminal and
    C-terminal side of the *CA* atom, respectively.
    """

    PHI = 0
    PSI = 1
    L = 0
    R = 1


class Side(enum.IntEnum):
    """
    The part of the chain, that is moved, when a backbone dihedral angle
    is rotated.
    ``L`` and ``R`` are aliases for the N-terminal and C-terminal side,
    respectively.
    """

    N = 0
    C = 1
    L = 0
    R = 1


# Atoms of the rotated residue itself, that stay fixed or are moved
_PSI_FIXED_ON_N_SIDE = frozenset({"CA", "C"} | set(TERMINAL_ATOM_NAMES))
_PHI_FIXED_ON_C_SIDE = frozenset({"N", "CA"})
_PSI_MOVED_ON_C_SIDE = frozenset(TERMINAL_ATOM_NAMES)


def backbone_dihedral(residue, dihedral_type):
    """
    Measure a backbone dihedral angle of a residue.

    *phi* is the dihedral angle between *C* of the previous residue and
    *N*, *CA*, *C* of this residue.
    *psi* is the dihedral angle between *N*, *CA*, *C* of this residue
    and *N* of the next residue.

    Parameters
    ----------
    residue : Residue
        The residue, that must be part of a chain.
    dihedral_type : Dihedral
        The angle to measure.

    Returns
    -------
    angle : float
        The dihedral angle in radians.

    Raises
    ------
    MissingAtomError
        If a required backbone atom is missing.
    MissingNeighborError
        If the residue is at the respective terminus of the chain.
    """
    dihedral_type = Dihedral(dihedral_type)
    if dihedral_type == Dihedral.PHI:
        return dihedral(
            residue.previous()["C"], residue["N"], residue["CA"], residue["C"]
        )
    else:
        return dihedral(
            residue["N"], residue["CA"], residue["C"], residue.next()["N"]
        )


def backbone_rotation_atoms(residue, dihedral_type, side):
    """
    Select the atoms, that move when a backbone dihedral angle of a
    residue is rotated.

    All atoms on the given side of the rotated bond are selected,
    including the atoms of all preceding or following residues in the
    chain.

    Parameters
    ----------
    residue : Residue
        The residue, that must be part of a chain.
    dihedral_type : Dihedral
        The rotated angle.
    side : Side
        The side of the chain, that is moved.

    Returns
    -------
    atoms : list of Atom
        The selected atoms.

    Notes
    -----
    The selection for the four combinations is:

    ========= ======== ===================================================
    Dihedral  Side     Moved atoms
    ========= ======== ===================================================
    *phi*     N        all preceding residues
    *psi*     N        all preceding residues, own atoms except
                       *CA*, *C*, *O*, *OXT*
    *phi*     C        own atoms except *N*, *CA*, all following residues
    *psi*     C        own *O*, *OXT*, all following residues
    ========= ======== ===================================================
    """
    dihedral_type = Dihedral(dihedral_type)
    side = Side(side)
    # Raises an error for residues without chain
    index = residue.index()
    residues = residue.owner.residues

    if side == Side.N:
        atoms = [atom for res in residues[:index] for atom in res.atoms]
        if dihedral_type == Dihedral.PSI:
            atoms += [
                atom for atom in residue.atoms
                if atom.name not in _PSI_FIXED_ON_N_SIDE
            ]
    else:
        if dihedral_type == Dihedral.PHI:
            atoms = [
                atom for atom in residue.atoms
                if atom.name not in _PHI_FIXED_ON_C_SIDE
            ]
        else:
            atoms = [
                atom for atom in residue.atoms
                if atom.name in _PSI_MOVED_ON_C_SIDE
            ]
        atoms += [atom for res in residues[index + 1 :] for atom in res.atoms]
    return atoms


def backbone_rotation(residue, dihedral_type, side, delta):
    """
    Compute the rotation, that changes a backbone dihedral angle of a
    residue by the given amount.

    Parameters
    ----------
    residue : Residue
        The residue.
    dihedral_type : Dihedral
        The rotated angle.
    side : Side
        The side of the chain, that is moved.
    delta : float
        The change of the dihedral angle in radians.

    Returns
    -------
    pivot : ndarray, shape=(3,), dtype=float
        The center of the rotation, the *N* atom for *phi* and the *CA*
        atom for *psi*.
    matrix : ndarray, shape=(3,3), dtype=float
        The rotation matrix in right-multiply convention.
        The new coordinates of a moved atom are
        ``(coord - pivot) @ matrix + pivot``.

    Raises
    ------
    MissingAtomError
        If a required backbone atom is missing.
    """
    dihedral_type = Dihedral(dihedral_type)
    side = Side(side)
    if dihedral_type == Dihedral.PHI:
        pivot = residue["N"].coord
        axis = residue["CA"].coord - pivot
    else:
        pivot = residue["CA"].coord
        axis = residue["C"].coord - pivot
    # Moving the N-terminal part in the opposite direction
    # results in the same change of the angle
    if side == Side.N:
        delta = -delta
    return pivot.copy(), rotation_matrix(axis, delta)


def rotate_backbone(residue, dihedral_type, side, delta):
    """
    Change a backbone dihedral angle of a residue by the given amount.

    The atoms given by :func:`backbone_rotation_atoms()` are rotated in
    place.

    Parameters
    ----------
    residue : Residue
        The residue, that must be part of a chain.
    dihedral_type : Dihedral
        The rotated angle.
    side : Side
        The side of the chain, that is moved.
    delta : float
        The change of the dihedral angle in radians.
    """
    pivot, matrix = backbone_rotation(residue, dihedral_type, side, delta)
    _rotate_atoms(
        backbone_rotation_atoms(residue, dihedral_type, side), matrix, pivot
    )


def set_backbone_dihedral(residue, dihedral_type, side, target):
    """
    Rotate a backbone dihedral angle of a residue to the given value.

    Parameters
    ----------
    residue : Residue
        The residue, that must be part of a chain.
    dihedral_type : Dihedral
        The rotated angle.
    side : Side
        The side of the chain, that is moved.
    target : float
        The new dihedral angle in radians.
    """
    delta = target - backbone_dihedral(residue, dihedral_type)
    rotate_backbone(residue, dihedral_type, side, delta)


def side_chain_dihedral_count(residue):
    """
    Get the number of side chain dihedral angles of a residue.

    Parameters
    ----------
    residue : Residue
        The residue.

    Returns
    -------
    count : int
        The number of *chi* angles.

    Raises
    ------
    UnknownResidueError
        If the residue type has no entry in the side chain dihedral
        table.
    """
    return len(chi_atom_names(residue.name))


def side_chain_dihedral(residue, index):
    """
    Measure a side chain dihedral angle of a residue.

    Parameters
    ----------
    residue : Residue
        The residue.
    index : int
        The index of the *chi* angle, starting at 0 for *chi1*.

    Returns
    -------
    angle : float
        The dihedral angle in radians.

    Raises
    ------
    DihedralIndexError
        If the residue type has no *chi* angle with the given index.
    UnknownResidueError
        If the residue type has no entry in the side chain dihedral
        table.
    MissingAtomError
        If an atom defining the angle is missing.
    """
    window = _chi_window(residue, index)
    return dihedral(*[residue[name] for name in window[:4]])


def side_chain_rotation_atoms(residue, index):
    """
    Select the atoms, that move when a side chain dihedral angle of a
    residue is rotated.

    Only atoms of the residue itself are selected.
    All atoms with a name beyond the rotated bond are included, i.e.
    alternate locations are moved as well and side chain atoms
    behind the fourth atom of the angle may be absent.

    Parameters
    ----------
    residue : Residue
        The residue.
    index : int
        The index of the *chi* angle, starting at 0 for *chi1*.

    Returns
    -------
    atoms : list of Atom
        The selected atoms.

    Raises
    ------
    MissingAtomError
        If one of the four atoms defining the angle is missing.
    """
    window = _chi_window(residue, index)
    # The atoms defining the angle must exist
    for name in window[:4]:
        residue[name]
    moving_names = set(window[3:])
    return [atom for atom in residue.atoms if atom.name in moving_names]


def side_chain_rotation(residue, index, delta):
    """
    Compute the rotation, that changes a side chain dihedral angle of a
    residue by the given amount.

    Parameters
    ----------
    residue : Residue
        The residue.
    index : int
        The index of the *chi* angle, starting at 0 for *chi1*.
    delta : float
        The change of the dihedral angle in radians.

    Returns
    -------
    pivot : ndarray, shape=(3,), dtype=float
        The center of the rotation, i.e. the second atom defining the
        angle.
    matrix : ndarray, shape=(3,3), dtype=float
        The rotation matrix in right-multiply convention.
    """
    window = _chi_window(residue, index)
    pivot = residue[window[1]].coord
    axis = residue[window[2]].coord - pivot
    return pivot.copy(), rotation_matrix(axis, delta)


def rotate_side_chain(residue, index, delta):
    """
    Change a side chain dihedral angle of a residue by the given
    amount.

    Parameters
    ----------
    residue : Residue
        The residue.
    index : int
        The index of the *chi* angle, starting at 0 for *chi1*.
    delta : float
        The change of the dihedral angle in radians.
    """
    pivot, matrix = side_chain_rotation(residue, index, delta)
    _rotate_atoms(side_chain_rotation_atoms(residue, index), matrix, pivot)


def set_side_chain_dihedral(residue, index, target):
    """
    Rotate a side chain dihedral angle of a residue to the given value.

    Parameters
    ----------
    residue : Residue
        The residue.
    index : int
        The index of the *chi* angle, starting at 0 for *chi1*.
    target : float
        The new dihedral angle in radians.
    """
    delta = target - side_chain_dihedral(residue, index)
    rotate_side_chain(residue, index, delta)


def _chi_window(residue, index):
    windows = chi_atom_names(residue.name)
    if index < 0 or index >= len(windows):
        raise DihedralIndexError(
            f"Residue '{residue.name}' has {len(windows)} side chain dihedral "
            f"angle(s), index {index} is out of range"
        )
    return windows[index]


def _rotate_atoms(atoms, matrix, pivot):
    for atom in atoms:
        atom.coord = matrix_rotate(atom.coord, matrix, pivot)
