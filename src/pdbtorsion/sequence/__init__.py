# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for sequence output of structures.

Sequences are represented as plain strings of one-letter amino acid
codes, as obtained from :func:`pdbtorsion.structure.to_sequence()`.
The :mod:`pdbtorsion.sequence.io.fasta` subpackage writes them into
FASTA files.
"""

__name__ = "pdbtorsion.sequence"
__author__ = "The PDBTorsion developers"
