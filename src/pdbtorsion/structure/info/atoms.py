# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "pdbtorsion.structure.info"
__author__ = "The PDBTorsion developers"
__all__ = ["is_hydrogen", "BACKBONE_ATOM_NAMES", "TERMINAL_ATOM_NAMES"]

import re

BACKBONE_ATOM_NAMES = ("N", "CA", "C", "O")
# Atoms that are placed at the carbonyl group of a residue
TERMINAL_ATOM_NAMES = ("O", "OXT")

# Optional leading digits, followed by 'H', e.g. 'H', '1HB', 'HG1'
_HYDROGEN_PATTERN = re.compile(r"^\d*H")


def is_hydrogen(atom_name):
    """
    Check whether an atom name denotes a hydrogen atom.

    The decision is based on the naming convention of the PDB:
    A hydrogen atom name starts with an ``'H'``, optionally preceded by
    digits.

    Parameters
    ----------
    atom_name : str
        The (stripped) atom name.

    Returns
    -------
    is_hydrogen : bool
        True, if the atom is a hydrogen atom.

    Examples
    --------

    >>> print([is_hydrogen(name) for name in ["H", "1HB", "HG1", "CA", "NH1"]])
    [True, True, True, False, False]
    """
    return _HYDROGEN_PATTERN.match(atom_name) is not None
