# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains a convenience function for loading structures from
general structure files.
"""

__name__ = "pdbtorsion.structure.io"
__author__ = "The PDBTorsion developers"
__all__ = ["load_structure", "save_structure"]

import os.path


def load_structure(file_path, **kwargs):
    """
    Load a :class:`Protein` or a list of :class:`Protein` objects from a
    structure file without the need to manually instantiate a
    :class:`File` object.

    Internally this function uses a :class:`File` object, based on the
    file extension.

    Parameters
    ----------
    file_path : str
        The path to structure file.
    **kwargs
        Additional parameters will be passed to the
        :func:`get_structure()` method of the file object.

    Returns
    -------
    structure : Protein or list of Protein
        If the file contains multiple models, a list of proteins is
        returned, otherwise a single :class:`Protein` is returned.

    Raises
    ------
    ValueError
        If the file format (i.e. the file extension) is unknown.
    """
    # We only need the suffix here
    _, suffix = os.path.splitext(file_path)
    match suffix:
        case ".pdb":
            from pdbtorsion.structure.io.pdb import PDBFile

            file = PDBFile.read(file_path)
            proteins = file.get_structure(**kwargs)
            return _as_single_model_if_possible(proteins)
        case unknown_suffix:
            raise ValueError(f"Unknown file format '{unknown_suffix}'")


def save_structure(file_path, structure, **kwargs):
    """
    Save a structure to a file without the need to manually instantiate
    a :class:`File` object.

    Internally this function uses a :class:`File` object, based on the
    file extension.
    PDB files (``.pdb``) receive the atom records, FASTA files
    (``.fasta``, ``.fa``) receive the one-letter sequence of the
    structure.

    Parameters
    ----------
    file_path : str
        The path to structure file.
    structure : Atom or Residue or Chain or Protein or list of Protein
        The structure to be saved.
    **kwargs
        Additional parameters will be passed to the respective
        `set_structure` function.

    Raises
    ------
    ValueError
        If the file format (i.e. the file extension) is unknown.
    """
    # We only need the suffix here
    _, suffix = os.path.splitext(file_path)
    match suffix:
        case ".pdb":
            from pdbtorsion.structure.io.pdb import PDBFile

            file = PDBFile()
            file.set_structure(structure, **kwargs)
            file.write(file_path)
        case ".fasta" | ".fa":
            from pdbtorsion.sequence.io.fasta import FastaFile, set_structure

            file = FastaFile()
            set_structure(file, structure, **kwargs)
            file.write(file_path)
        case unknown_suffix:
            raise ValueError(f"Unknown file format '{unknown_suffix}'")


def _as_single_model_if_possible(proteins):
    if isinstance(proteins, list) and len(proteins) == 1:
        # List containing only one model -> return as single protein
        return proteins[0]
    else:
        return proteins
