# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "pdbtorsion.sequence.io.fasta"
__author__ = "The PDBTorsion developers"
__all__ = ["get_sequence", "set_sequence", "set_structure"]

from pdbtorsion.structure.sequence import to_sequence


def get_sequence(fasta_file, header=None):
    """
    Get a sequence string from a :class:`FastaFile` instance.

    Parameters
    ----------
    fasta_file : FastaFile
        The :class:`FastaFile` to be accessed.
    header : str, optional
        The header to get the sequence from.
        By default, the first sequence of the file is returned.

    Returns
    -------
    sequence : str
        The requested sequence in the `FastaFile`.

    Raises
    ------
    ValueError
        If the file contains no sequence.
    """
    if header is not None:
        return fasta_file[header]
    for seq_str in fasta_file.values():
        return seq_str
    raise ValueError("File does not contain any sequences")


def set_sequence(fasta_file, sequence, header=None):
    """
    Set a sequence string in a :class:`FastaFile` instance.

    Parameters
    ----------
    fasta_file : FastaFile
        The :class:`FastaFile` to be accessed.
    sequence : str
        The sequence to be set.
    header : str, optional
        The header for the sequence.
        Default is ``'sequence'``.
    """
    if header is None:
        header = "sequence"
    fasta_file[header] = str(sequence)


def set_structure(fasta_file, structure, header=None):
    """
    Set the one-letter sequence of a structure in a :class:`FastaFile`
    instance.

    Parameters
    ----------
    fasta_file : FastaFile
        The :class:`FastaFile` to be accessed.
    structure : Residue or Chain or Protein or list of Protein
        The structure, whose residues are converted into a one-letter
        sequence via :func:`to_sequence()`.
        For a list of proteins, e.g. multiple models, one entry is
        added for each protein.
    header : str or list of str, optional
        The header for the sequence.
        By default, the name of the structure is used.
        For a list of proteins a list of headers can be given.
        Otherwise, if the proteins share the same name, the model
        number (or the position in the list) is appended to make the
        headers distinct.

    Raises
    ------
    ValueError
        If the headers for a list of proteins are not unique or their
        number does not match the number of proteins.

    Examples
    --------

    >>> protein = Protein("1abc")
    >>> chain = Chain("A", protein)
    >>> for num, name in enumerate(["GLY", "LEU", "TRP"], start=1):
    ...     residue = Residue(name, num, owner=chain)
    >>> file = FastaFile()
    >>> set_structure(file, protein)
    >>> print(file)
    >1abc
    GLW
    <BLANKLINE>
    """
    if isinstance(structure, list):
        headers = _model_headers(structure, header)
        for model_header, sequence in zip(headers, to_sequence(structure)):
            fasta_file[model_header] = sequence
        return
    if header is None:
        header = structure.name
    fasta_file[header] = to_sequence(structure)


def _model_headers(proteins, header):
    if isinstance(header, (list, tuple)):
        headers = list(header)
        if len(headers) != len(proteins):
            raise ValueError(
                f"Got {len(headers)} headers for {len(proteins)} proteins"
            )
    else:
        names = [
            protein.name if header is None else header for protein in proteins
        ]
        if len(set(names)) == len(names):
            headers = names
        else:
            headers = [
                f"{name} model "
                f"{i if protein.model is None else protein.model}"
                for i, (name, protein) in enumerate(zip(names, proteins), start=1)
            ]
    if len(set(headers)) != len(headers):
        raise ValueError("The headers for the proteins are not unique")
    return headers
