# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
Some convenience functions for consistency with other ``io``
subpackages.
"""

__name__ = "pdbtorsion.structure.io.pdb"
__author__ = "The PDBTorsion developers"
__all__ = ["get_model_count", "get_structure", "set_structure"]


def get_model_count(pdb_file):
    """
    Get the number of models contained in a :class:`PDBFile`.

    Parameters
    ----------
    pdb_file : PDBFile
        The file object.

    Returns
    -------
    model_count : int
        The number of models.
    """
    return pdb_file.get_model_count()


def get_structure(
    pdb_file, model=None, include_hydrogen=False, strict=False, name=None
):
    """
    Create a :class:`Protein` or a list of :class:`Protein` objects from
    a :class:`PDBFile`.

    This function is a thin wrapper around the :class:`PDBFile` method
    :func:`get_structure()` for the sake of consistency with other
    ``io`` subpackages.

    Parameters
    ----------
    pdb_file : PDBFile
        The file object.
    model : int, optional
        If this parameter is given, the function will return a single
        :class:`Protein` from the atoms corresponding to the given
        model number (starting at 1).
        Negative values are used to index models starting from the last
        model instead of the first model.
        If this parameter is omitted, a list of proteins containing all
        models will be returned, even if the structure contains only one
        model.
    include_hydrogen : bool, optional
        If false, hydrogen atoms are omitted.
    strict : bool, optional
        If true, records lacking the element and charge columns
        raise an :class:`InvalidFileError`.
        By default, the missing fields are left empty and a warning is
        issued.
    name : str, optional
        The name of the returned protein(s).
        By default, the name of the file without extension is used.

    Returns
    -------
    structure : Protein or list of Protein
        The return type depends on the `model` parameter.
    """
    return pdb_file.get_structure(model, include_hydrogen, strict, name)


def set_structure(pdb_file, structure):
    """
    Write a structure into a :class:`PDBFile`.

    This function is a thin wrapper around the :class:`PDBFile` method
    :func:`set_structure()` for the sake of consistency with other
    ``io`` subpackages.

    Parameters
    ----------
    pdb_file : PDBFile
        The file object.
    structure : Atom or Residue or Chain or Protein or list of Protein
        The structure to be written.
        If a list is given, each protein will be in a separate model.
    """
    pdb_file.set_structure(structure)
