# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Function for converting a structure into a sequence.
"""

__name__ = "pdbtorsion.structure"
__author__ = "The PDBTorsion developers"
__all__ = ["to_sequence"]

from pdbtorsion.structure.atoms import Atom
from pdbtorsion.structure.info.amino_acids import one_letter_code


def to_sequence(structure):
    """
    Convert the residues of a structure into a one-letter amino acid
    sequence.

    Parameters
    ----------
    structure : Residue or Chain or Protein or list of Protein
        The structure.
        For a :class:`Protein` the residues of all chains are
        concatenated.
        For a list of proteins, e.g. multiple models, each protein is
        converted separately.

    Returns
    -------
    sequence : str or list of str
        The one-letter sequence.
        A list with one sequence per protein is returned, if a list of
        proteins is given.
        Residues, that are not one of the 20 standard amino acids, are
        represented by ``'X'``.

    Examples
    --------

    >>> chain = Chain("A")
    >>> for num, name in enumerate(["MET", "ALA", "MSE"], start=1):
    ...     residue = Residue(name, num, owner=chain)
    >>> print(to_sequence(chain))
    MAX
    """
    if isinstance(structure, list):
        return [to_sequence(protein) for protein in structure]
    if isinstance(structure, Atom):
        raise TypeError("A single atom cannot be converted into a sequence")
    return "".join(
        one_letter_code(residue.name) for residue in structure.get_residues()
    )
