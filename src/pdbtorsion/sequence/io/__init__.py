# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for reading and writing sequence files.
"""

__name__ = "pdbtorsion.sequence.io"
__author__ = "The PDBTorsion developers"
