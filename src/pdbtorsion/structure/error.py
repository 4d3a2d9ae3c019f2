# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains all possible errors of the `structure` subpackage.
"""

__name__ = "pdbtorsion.structure"
__author__ = "The PDBTorsion developers"
__all__ = [
    "BadStructureError",
    "MissingAtomError",
    "MissingNeighborError",
    "DihedralIndexError",
    "UnknownResidueError",
    "DimensionMismatchError",
]


class BadStructureError(Exception):
    """
    Indicates that a structure is not suitable for a certain operation.
    """

    pass


class MissingAtomError(BadStructureError, KeyError):
    """
    Indicates that an atom with the requested name is not part of a
    residue.
    """

    # 'KeyError' would otherwise wrap the message in quotes
    __str__ = BadStructureError.__str__


class MissingNeighborError(BadStructureError, IndexError):
    """
    Indicates that a node has no sibling at the requested offset, e.g.
    the residue preceding the N-terminus of a chain.
    """

    pass


class DihedralIndexError(BadStructureError, IndexError):
    """
    Indicates that a residue type has no side chain dihedral angle with
    the requested index.
    """

    pass


class UnknownResidueError(BadStructureError, KeyError):
    """
    Indicates that a residue name is not contained in the side chain
    dihedral table.
    """

    __str__ = BadStructureError.__str__


class DimensionMismatchError(ValueError):
    """
    Indicates that two coordinate sets cannot be compared, because they
    contain a different number of coordinates.
    """

    pass
