# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
A subpackage for handling protein structures.

A structure is represented as a hierarchy of four node types:

=========  ================  ==========================================
Node       Children          Identifying attributes
=========  ================  ==========================================
Protein    Chain             ``name``, ``model``
Chain      Residue           ``name`` (chain ID)
Residue    Atom              ``name``, ``num``, ``ins`` (``comp_num``)
Atom       -                 ``name``, ``serial``
=========  ================  ==========================================

Each node is exclusively owned by its parent, which is referenced by the
``owner`` attribute.
A node, that is constructed with an owner, appends itself to the
children of the owner.
:meth:`copy()` creates an independent deep copy of a node and its
children, that has no owner.

Containers can be iterated, indexed by position or by key
(``protein["A"]["52A"]["CA"]``) and flattened via
:meth:`get_atoms()`.
Children navigate to their siblings via :meth:`previous()` and
:meth:`next()` and detach themselves from their owner via
:meth:`remove()`.

Based on this hierarchy, this package contains functions for geometric
measurements, superimposition and the measurement and rotation of
backbone and side chain dihedral angles.

All angles are given in radians.
Rotation matrices follow the right-multiply convention, i.e. a row
vector *v* is rotated via ``v @ matrix``.
The universal length unit in this package is Å.
"""

__name__ = "pdbtorsion.structure"
__author__ = "The PDBTorsion developers"

from .atoms import *
from .error import *
from .geometry import *
from .sequence import *
from .superimpose import *
from .torsion import *
from .transform import *
