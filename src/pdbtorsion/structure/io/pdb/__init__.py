# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This subpackage is used for reading and writing a :class:`Protein`
using the PDB format.

Only *ATOM* records are read, the columns of each record are parsed
according to the fixed-width layout of the PDB format.
Writing a structure that was read from a file reproduces the original
*ATOM* records.
"""

__name__ = "pdbtorsion.structure.io.pdb"
__author__ = "The PDBTorsion developers"

from .file import *
from .convert import *
