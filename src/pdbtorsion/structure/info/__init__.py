# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for obtaining static information about residues and atoms:
one-letter and three-letter amino acid codes, the atom name windows of
the side chain dihedral angles and the naming convention of hydrogen
atoms.
"""

__name__ = "pdbtorsion.structure.info"
__author__ = "The PDBTorsion developers"

from .amino_acids import *
from .atoms import *
