# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "pdbtorsion.structure.info"
__author__ = "The PDBTorsion developers"
__all__ = [
    "amino_acid_names",
    "one_letter_code",
    "three_letter_code",
    "chi_atom_names",
    "chi_count",
]

from pdbtorsion.structure.error import UnknownResidueError


_THREE_TO_ONE = {
    "ALA": "A",
    "ARG": "R",
    "ASN": "N",
    "ASP": "D",
    "CYS": "C",
    "GLN": "Q",
    "GLU": "E",
    "GLY": "G",
    "HIS": "H",
    "ILE": "I",
    "LEU": "L",
    "LYS": "K",
    "MET": "M",
    "PHE": "F",
    "PRO": "P",
    "SER": "S",
    "THR": "T",
    "TRP": "W",
    "TYR": "Y",
    "VAL": "V",
    "UNK": "X",
}
_ONE_TO_THREE = {one: three for three, one in _THREE_TO_ONE.items()}

# Each row is a window of atom names:
# The first four atoms define the chi angle,
# the atoms from the fourth position onwards are moved,
# when the angle is rotated
# fmt: off
_CHI_WINDOWS = {
    "ALA": (),
    "ARG": (
        ("N",  "CA", "CB", "CG", "CD", "NE", "CZ", "NH1", "NH2"),
        ("CA", "CB", "CG", "CD", "NE", "CZ", "NH1", "NH2"),
        ("CB", "CG", "CD", "NE", "CZ", "NH1", "NH2"),
        ("CG", "CD", "NE", "CZ", "NH1", "NH2"),
    ),
    "ASN": (
        ("N",  "CA", "CB", "CG", "OD1", "ND2"),
        ("CA", "CB", "CG", "OD1", "ND2"),
    ),
    "ASP": (
        ("N",  "CA", "CB", "CG", "OD1", "OD2"),
        ("CA", "CB", "CG", "OD1", "OD2"),
    ),
    "CYS": (
        ("N",  "CA", "CB", "SG"),
    ),
    "GLN": (
        ("N",  "CA", "CB", "CG", "CD", "OE1", "NE2"),
        ("CA", "CB", "CG", "CD", "OE1", "NE2"),
        ("CB", "CG", "CD", "OE1", "NE2"),
    ),
    "GLU": (
        ("N",  "CA", "CB", "CG", "CD", "OE1", "OE2"),
        ("CA", "CB", "CG", "CD", "OE1", "OE2"),
        ("CB", "CG", "CD", "OE1", "OE2"),
    ),
    "GLY": (),
    "HIS": (
        ("N",  "CA", "CB", "CG", "ND1", "CD2", "CE1", "NE2"),
        ("CA", "CB", "CG", "ND1", "CD2", "CE1", "NE2"),
    ),
    "ILE": (
        ("N",  "CA", "CB", "CG1", "CG2", "CD1"),
        ("CA", "CB", "CG1", "CD1"),
    ),
    "LEU": (
        ("N",  "CA", "CB", "CG", "CD1", "CD2"),
        ("CA", "CB", "CG", "CD1", "CD2"),
    ),
    "LYS": (
        ("N",  "CA", "CB", "CG", "CD", "CE", "NZ"),
        ("CA", "CB", "CG", "CD", "CE", "NZ"),
        ("CB", "CG", "CD", "CE", "NZ"),
        ("CG", "CD", "CE", "NZ"),
    ),
    "MET": (
        ("N",  "CA", "CB", "CG", "SD", "CE"),
        ("CA", "CB", "CG", "SD", "CE"),
        ("CB", "CG", "SD", "CE"),
    ),
    "PHE": (
        ("N",  "CA", "CB", "CG", "CD1", "CD2", "CE1", "CE2", "CZ"),
        ("CA", "CB", "CG", "CD1", "CD2", "CE1", "CE2", "CZ"),
    ),
    "PRO": (
        ("N",  "CA", "CB", "CG", "CD"),
        ("CA", "CB", "CG", "CD"),
    ),
    "SER": (
        ("N",  "CA", "CB", "OG"),
    ),
    "THR": (
        ("N",  "CA", "CB", "OG1", "CG2"),
    ),
    "TRP": (
        ("N",  "CA", "CB", "CG", "CD1", "CD2", "NE1", "CE2", "CE3", "CZ2",
         "CZ3", "CH2"),
        ("CA", "CB", "CG", "CD1", "CD2", "NE1", "CE2", "CE3", "CZ2", "CZ3",
         "CH2"),
    ),
    "TYR": (
        ("N",  "CA", "CB", "CG", "CD1", "CD2", "CE1", "CE2", "CZ", "OH"),
        ("CA", "CB", "CG", "CD1", "CD2", "CE1", "CE2", "CZ", "OH"),
    ),
    "VAL": (
        ("N",  "CA", "CB", "CG1", "CG2"),
    ),
}
# fmt: on


def amino_acid_names():
    """
    Get the three-letter codes of the standard amino acids, including
    ``'UNK'`` for unknown residues.

    Returns
    -------
    amino_acid_names : list of str
        The three-letter codes.
    """
    return list(_THREE_TO_ONE.keys())


def one_letter_code(res_name):
    """
    Convert a three-letter residue name into the corresponding
    one-letter code.

    Parameters
    ----------
    res_name : str
        The three-letter code, e.g. ``'ALA'``.

    Returns
    -------
    symbol : str
        The one-letter code.
        ``'X'`` is returned for residue names, that are not one of the
        20 standard amino acids.

    Examples
    --------

    >>> print(one_letter_code("TRP"))
    W
    >>> print(one_letter_code("MSE"))
    X
    """
    return _THREE_TO_ONE.get(res_name.upper(), "X")


def three_letter_code(symbol):
    """
    Convert a one-letter code into the corresponding three-letter
    residue name.

    Parameters
    ----------
    symbol : str
        The one-letter code, e.g. ``'A'``.

    Returns
    -------
    res_name : str
        The three-letter code.

    Raises
    ------
    KeyError
        If `symbol` is not a standard amino acid symbol or ``'X'``.
    """
    try:
        return _ONE_TO_THREE[symbol.upper()]
    except KeyError:
        raise KeyError(f"'{symbol}' is not a valid amino acid symbol")


def chi_atom_names(res_name):
    """
    Get the atom name windows that define the side chain dihedral
    angles (*chi*) of the given residue type.

    Parameters
    ----------
    res_name : str
        The three-letter residue name.

    Returns
    -------
    windows : tuple of tuple of str
        One window for each *chi* angle.
        The first four names define the angle, all names from the
        fourth position onwards denote the atoms that are moved, when
        the angle is rotated.

    Raises
    ------
    UnknownResidueError
        If no side chain dihedral information is available for the
        residue type.
    """
    try:
        return _CHI_WINDOWS[res_name]
    except KeyError:
        raise UnknownResidueError(
            f"No side chain dihedral angles are defined for residue '{res_name}'"
        )


def chi_count(res_name):
    """
    Get the number of side chain dihedral angles of a residue type.

    Parameters
    ----------
    res_name : str
        The three-letter residue name.

    Returns
    -------
    count : int
        The number of *chi* angles, e.g. 4 for ``'ARG'``, 0 for
        ``'GLY'``.
    """
    return len(chi_atom_names(res_name))
