# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "pdbtorsion.sequence.io.fasta"
__author__ = "The PDBTorsion developers"
__all__ = ["FastaFile"]

from collections import OrderedDict
from collections.abc import MutableMapping
from pdbtorsion.file import InvalidFileError, TextFile, wrap_string


class FastaFile(TextFile, MutableMapping):
    """
    A FASTA file, accessed like a dictionary of sequences.

    Each entry consists of a header line, starting with ``>``,
    followed by the lines of its sequence, up to the next header line.
    The keys of the mapping are the headers without the ``>``,
    the values are the sequences as plain strings.
    Assigning to an existing header replaces the entry and moves it to
    the end of the file.

    Parameters
    ----------
    chars_per_line : int, optional
        If given, sequences added to the file are split into lines of
        this length.
        By default, each sequence occupies a single line.

    Examples
    --------

    >>> file = FastaFile()
    >>> file["seq1"] = "MAGIC"
    >>> print(file["seq1"])
    MAGIC
    >>> file["seq2"] = "PEPTIDE"
    >>> print(file)
    >seq1
    MAGIC
    >seq2
    PEPTIDE
    <BLANKLINE>
    >>> del file["seq1"]
    >>> print(dict(file.items()))
    {'seq2': 'PEPTIDE'}
    """

    def __init__(self, chars_per_line=None):
        super().__init__()
        self._chars_per_line = chars_per_line
        # Header -> (index of header line, index after last sequence line)
        self._entries = OrderedDict()

    @classmethod
    def read(cls, file, chars_per_line=None):
        """
        Parse a FASTA file.

        Blank lines and comment lines, starting with ``;``, are
        dropped.

        Parameters
        ----------
        file : file-like object or str or PathLike
            A path to the file or an already opened text stream.
        chars_per_line : int, optional
            The line length for sequences added afterwards.

        Returns
        -------
        file_object : FastaFile
            The parsed file.

        Raises
        ------
        InvalidFileError
            If the file has no entries or the first line is not a
            header.
        """
        file = super().read(file, chars_per_line)
        file.lines = [
            line for line in file.lines if line.strip() and not line.startswith(";")
        ]
        if not file.lines:
            raise InvalidFileError("The file has no entries")
        file._index_entries()
        return file

    def __setitem__(self, header, seq_str):
        if not isinstance(header, str):
            raise IndexError("'FastaFile' only supports header strings as keys")
        if not isinstance(seq_str, str):
            raise TypeError("'FastaFile' only supports sequence strings as values")
        entry_lines = [">" + header.replace("\n", "").strip()]
        entry_lines += wrap_string(seq_str, width=self._chars_per_line)
        if header in self._entries:
            del self[header]
        start = len(self.lines)
        self.lines += entry_lines
        self._entries[header] = (start, len(self.lines))

    def __getitem__(self, header):
        if not isinstance(header, str):
            raise IndexError("'FastaFile' only supports header strings as keys")
        start, stop = self._entries[header]
        return "".join(line.strip() for line in self.lines[start + 1 : stop])

    def __delitem__(self, header):
        start, stop = self._entries[header]
        del self.lines[start:stop]
        self._index_entries()

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __contains__(self, header):
        return header in self._entries

    def __copy_create__(self):
        return FastaFile(self._chars_per_line)

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        clone._index_entries()

    def _index_entries(self):
        if self.lines and not self.lines[0].startswith(">"):
            raise InvalidFileError(
                f"Expected a header line, but the file starts with "
                f"'{self.lines[0][:1]}'"
            )
        header_indices = [
            i for i, line in enumerate(self.lines) if line.startswith(">")
        ]
        # Each entry ends where the next one begins
        stops = header_indices[1:] + [len(self.lines)]
        self._entries = OrderedDict(
            (self.lines[start].strip()[1:], (start, stop))
            for start, stop in zip(header_indices, stops)
        )
