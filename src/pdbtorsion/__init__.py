# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This is the top-level package of *PDBTorsion*.
It does not provide structure functionality by itself, but it provides
the base classes for copyable objects and text files, that are used by
the subpackages.

The structure functionality lives in :mod:`pdbtorsion.structure`,
FASTA output in :mod:`pdbtorsion.sequence.io.fasta`.
"""

__version__ = "0.3.0"
__name__ = "pdbtorsion"
__author__ = "The PDBTorsion developers"

from .file import *
from .copyable import *
