# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for reading and writing structure related data.

PDB files can be used to load a :class:`Protein` (or one
:class:`Protein` per model).
Structures can be written back into PDB files or into FASTA files,
containing their one-letter sequence.
"""

__name__ = "pdbtorsion.structure.io"
__author__ = "The PDBTorsion developers"

from .general import *
