# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

"""
This module contains the hierarchical structure model of
*PDBTorsion*: A :class:`Protein` owns its :class:`Chain` objects, a
:class:`Chain` owns its :class:`Residue` objects and a
:class:`Residue` owns its :class:`Atom` objects.
"""

__name__ = "pdbtorsion.structure"
__author__ = "The PDBTorsion developers"
__all__ = ["Atom", "Residue", "Chain", "Protein", "coord", "split_comp_num"]

import abc
import re
import numpy as np
from pdbtorsion.copyable import Copyable
from pdbtorsion.structure.error import (
    BadStructureError,
    DimensionMismatchError,
    MissingAtomError,
    MissingNeighborError,
)

_DEFAULT_FILTER = frozenset({"CA"})
_COMP_NUM_PATTERN = re.compile(r"^(-?\d+)(\D*)$")


class _Child(metaclass=abc.ABCMeta):
    """
    Behavior of a node, that is owned by a container:
    Navigation between siblings and detachment from the owner.

    Looking up a sibling requires a linear search for the node in the
    child list of its owner.
    """

    def index(self):
        """
        Get the position of this node in the child list of its owner.

        Returns
        -------
        index : int
            The position of this node.

        Raises
        ------
        BadStructureError
            If this node has no owner.
        """
        if self.owner is None:
            raise BadStructureError(f"{type(self).__name__} has no owner")
        # Identity comparison, as nodes do not implement '__eq__()'
        return self.owner._children.index(self)

    def previous(self, n=1):
        """
        Get the sibling `n` positions before this node.

        Parameters
        ----------
        n : int, optional
            The offset.

        Returns
        -------
        sibling
            The preceding sibling.

        Raises
        ------
        MissingNeighborError
            If there is no such sibling.
        """
        return self._sibling(-n)

    def next(self, n=1):
        """
        Get the sibling `n` positions after this node.

        Parameters
        ----------
        n : int, optional
            The offset.

        Returns
        -------
        sibling
            The following sibling.

        Raises
        ------
        MissingNeighborError
            If there is no such sibling.
        """
        return self._sibling(n)

    def remove(self):
        """
        Detach this node from its owner.

        The node itself, including all of its children, stays intact and
        can be attached to another container.

        Returns
        -------
        node
            This node, now without owner.
        """
        if self.owner is not None:
            del self.owner._children[self.index()]
            self.owner = None
        return self

    def _sibling(self, offset):
        if self.owner is None:
            raise MissingNeighborError(
                f"{type(self).__name__} has no owner, hence no siblings"
            )
        position = self.index() + offset
        # Negative positions must not wrap around
        if position < 0 or position >= len(self.owner._children):
            raise MissingNeighborError(
                f"{type(self).__name__} at position {position - offset} "
                f"has no sibling at offset {offset}"
            )
        return self.owner._children[position]


class _Container(Copyable, metaclass=abc.ABCMeta):
    """
    Behavior of a node, that owns an ordered list of child nodes.

    Subclasses define the type of their children via the `_child_type`
    class attribute and the string key of a child via :meth:`_key()`.
    """

    _child_type = None
    _missing_key_error = KeyError

    def __init__(self):
        self._children = []

    @abc.abstractmethod
    def _key(self, child):
        """
        Get the string, that identifies the given child in
        :meth:`__getitem__()`.
        """
        pass

    @abc.abstractmethod
    def get_atoms(self):
        """
        Get all atoms of this structure in order.

        Returns
        -------
        atoms : list of Atom
            The atoms.
        """
        pass

    @abc.abstractmethod
    def get_residues(self):
        """
        Get all residues of this structure in order.

        Returns
        -------
        residues : list of Residue
            The residues.
        """
        pass

    def filter_atoms(self, names=_DEFAULT_FILTER):
        """
        Get all atoms of this structure, whose name is contained in the
        given set of names.

        Parameters
        ----------
        names : set of str, optional
            The atom names to select.
            By default only *CA* atoms are selected.

        Returns
        -------
        atoms : list of Atom
            The selected atoms.
        """
        return [atom for atom in self.get_atoms() if atom.name in names]

    def get_coord(self):
        """
        Get the coordinates of all atoms as single array.

        Returns
        -------
        coord : ndarray, shape=(n,3), dtype=float
            The coordinates.
            Modifying this array does not affect the atoms.
        """
        return _coord_of_atoms(self.get_atoms())

    def filter_coord(self, names=_DEFAULT_FILTER):
        """
        Get the coordinates of all atoms, whose name is contained in
        the given set of names.

        Parameters
        ----------
        names : set of str, optional
            The atom names to select.
            By default only *CA* atoms are selected.

        Returns
        -------
        coord : ndarray, shape=(n,3), dtype=float
            The coordinates of the selected atoms.
        """
        return _coord_of_atoms(self.filter_atoms(names))

    def set_coord(self, coord):
        """
        Assign new coordinates to all atoms of this structure.

        Parameters
        ----------
        coord : array-like, shape=(n,3), dtype=float
            The new coordinates in the order of :meth:`get_atoms()`.

        Raises
        ------
        DimensionMismatchError
            If the number of coordinates does not match the number of
            atoms.
        """
        atoms = self.get_atoms()
        coord = np.asarray(coord, dtype=float)
        if coord.shape != (len(atoms), 3):
            raise DimensionMismatchError(
                f"Expected coordinates with shape ({len(atoms)}, 3), "
                f"but got {coord.shape}"
            )
        for atom, position in zip(atoms, coord):
            atom.coord = position

    def center(self):
        """
        Calculate the centroid of all atom coordinates.

        Returns
        -------
        center : ndarray, shape=(3,), dtype=float
            The centroid.

        Raises
        ------
        BadStructureError
            If the structure contains no atoms.
        """
        coord = self.get_coord()
        if len(coord) == 0:
            raise BadStructureError(
                f"{type(self).__name__} contains no atoms, "
                f"the centroid is undefined"
            )
        return coord.mean(axis=0)

    def move_center(self):
        """
        Translate all atoms in place, so that the centroid of this
        structure is at the origin.
        """
        center = self.center()
        for atom in self.get_atoms():
            atom.coord = atom.coord - center

    def renumber_residues(self, start=1):
        """
        Renumber all residues sequentially in their current order.

        The insertion codes are removed.
        For proteins with multiple chains the numbering continues
        across chain borders.

        Parameters
        ----------
        start : int, optional
            The number of the first residue.
        """
        for num, residue in enumerate(self.get_residues(), start=start):
            residue.num = num
            residue.ins = ""

    def renumber_atoms(self, start=1):
        """
        Renumber the serial of all atoms sequentially in their current
        order.

        Parameters
        ----------
        start : int, optional
            The serial of the first atom.
        """
        for serial, atom in enumerate(self.get_atoms(), start=start):
            atom.serial = serial

    def remove_altloc(self):
        """
        Remove alternate locations of atoms.

        Atoms with the alternate location ``'A'`` are kept and their
        alternate location code is cleared, all other atoms with an
        alternate location code are detached.
        """
        for atom in self.get_atoms():
            if atom.alt_loc == "A":
                atom.alt_loc = ""
            elif atom.alt_loc != "":
                atom.remove()

    def append(self, nodes, copy=True):
        """
        Attach nodes to the end of the child list.

        Parameters
        ----------
        nodes : node or iterable object of node
            The nodes to attach.
            Their type must match the child type of this container.
        copy : bool, optional
            If true, deep copies of the nodes are attached and the given
            nodes remain untouched.
            Otherwise, the nodes themselves are moved:
            They are detached from their previous owner first.

        Returns
        -------
        attached : list of node
            The nodes, that were actually attached.
        """
        return self.insert(len(self._children), nodes, copy)

    def insert(self, index, nodes, copy=True):
        """
        Attach nodes at the given position of the child list.

        Parameters
        ----------
        index : int
            The position of the first inserted node.
            When nodes are moved, the position refers to the child list
            after the nodes were detached from their previous owner.
        nodes : node or iterable object of node
            The nodes to attach.
            Their type must match the child type of this container.
        copy : bool, optional
            If true, deep copies of the nodes are attached and the given
            nodes remain untouched.
            Otherwise, the nodes themselves are moved:
            They are detached from their previous owner first.

        Returns
        -------
        attached : list of node
            The nodes, that were actually attached.

        Raises
        ------
        TypeError
            If a node does not match the child type.
        ValueError
            If a node appears multiple times in `nodes` in move mode.
        """
        if isinstance(nodes, self._child_type):
            nodes = [nodes]
        nodes = list(nodes)
        for node in nodes:
            self._check_child(node)
        if not copy and len({id(node) for node in nodes}) != len(nodes):
            raise ValueError("The same node cannot be moved multiple times")
        if copy:
            attached = [node.copy() for node in nodes]
        else:
            attached = [node.remove() for node in nodes]
        for i, node in enumerate(attached):
            node.owner = self
            self._children.insert(index + i, node)
        return attached

    def _attach(self, child):
        self._check_child(child)
        child.owner = self
        self._children.append(child)

    def _check_child(self, child):
        if not isinstance(child, self._child_type):
            raise TypeError(
                f"Expected '{self._child_type.__name__}', "
                f"but got '{type(child).__name__}'"
            )

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        for child in self._children:
            clone._attach(child.copy())

    def __iter__(self):
        return iter(self._children)

    def __reversed__(self):
        return reversed(self._children)

    def __len__(self):
        return len(self._children)

    def __getitem__(self, key):
        if isinstance(key, str):
            for child in self._children:
                if self._key(child) == key:
                    return child
            raise self._missing_key_error(
                f"{type(self).__name__} has no "
                f"{self._child_type.__name__.lower()} '{key}'"
            )
        elif isinstance(key, slice):
            return self._children[key]
        else:
            return self._children[int(key)]

    def __contains__(self, item):
        if isinstance(item, str):
            return any(self._key(child) == item for child in self._children)
        return any(child is item for child in self._children)


class Atom(_Child, Copyable):
    """
    A single atom.

    Parameters
    ----------
    name : str, optional
        The atom name, e.g. ``'CA'``.
    coord : array-like, shape=(3,), dtype=float, optional
        The position of the atom.
        By default, the atom is placed at the origin.
    owner : Residue, optional
        If given, the atom is appended to this residue.
    serial : int, optional
        The atom serial number.
    alt_loc, occupancy, temp_factor, element, charge : str, optional
        Further annotations.
        Occupancy and temperature factor are kept verbatim as strings.

    Attributes
    ----------
    name, serial, alt_loc, occupancy, temp_factor, element, charge
        Same as the parameters.
    coord : ndarray, shape=(3,), dtype=float
        The position of the atom.
    owner : Residue or None
        The residue this atom belongs to.

    Examples
    --------

    >>> atom = Atom("CA", [1, 2, 3], element="C")
    >>> print(atom.coord)
    [1. 2. 3.]
    >>> print(atom.owner)
    None
    """

    def __init__(
        self,
        name="",
        coord=None,
        owner=None,
        serial=0,
        alt_loc="",
        occupancy="",
        temp_factor="",
        element="",
        charge="",
    ):
        self.name = name
        self.coord = np.zeros(3) if coord is None else coord
        self.serial = serial
        self.alt_loc = alt_loc
        self.occupancy = occupancy
        self.temp_factor = temp_factor
        self.element = element
        self.charge = charge
        self.owner = None
        if owner is not None:
            owner._attach(self)

    @property
    def coord(self):
        return self._coord

    @coord.setter
    def coord(self, value):
        value = np.array(value, dtype=float)
        if value.shape != (3,):
            raise ValueError("Position must be ndarray with shape (3,)")
        self._coord = value

    def __copy_create__(self):
        return Atom(
            self.name,
            self._coord,
            serial=self.serial,
            alt_loc=self.alt_loc,
            occupancy=self.occupancy,
            temp_factor=self.temp_factor,
            element=self.element,
            charge=self.charge,
        )

    def __repr__(self):
        x, y, z = self._coord
        return f"<Atom {self.name} {self.serial} ({x:.3f}, {y:.3f}, {z:.3f})>"


class Residue(_Child, _Container):
    """
    A residue, owning an ordered list of atoms.

    Atoms can be accessed by their position or by their name:
    ``residue["CA"]`` returns the first atom named *CA*.

    Parameters
    ----------
    name : str, optional
        The three-letter residue name, e.g. ``'ALA'``.
    num : int, optional
        The residue sequence number.
    ins : str, optional
        The insertion code.
    owner : Chain, optional
        If given, the residue is appended to this chain.

    Attributes
    ----------
    name, num, ins
        Same as the parameters.
    comp_num : str
        The combination of residue number and insertion code, that
        identifies the residue within its chain, e.g. ``'52A'``.
    atoms : list of Atom
        A shallow copy of the child list.
    owner : Chain or None
        The chain this residue belongs to.
    """

    _child_type = Atom
    _missing_key_error = MissingAtomError

    def __init__(self, name="", num=0, ins="", owner=None):
        super().__init__()
        self.name = name
        self.num = num
        self.ins = ins
        self.owner = None
        if owner is not None:
            owner._attach(self)

    @property
    def comp_num(self):
        return f"{self.num}{self.ins}"

    @comp_num.setter
    def comp_num(self, value):
        self.num, self.ins = split_comp_num(value)

    @property
    def atoms(self):
        return list(self._children)

    def get_atoms(self):
        return list(self._children)

    def get_residues(self):
        return [self]

    def atom_map(self):
        """
        Map atom names to atoms.

        Returns
        -------
        atom_map : dict of (str -> Atom)
            The atoms of this residue.
            For duplicate atom names the first atom is kept.
        """
        atom_map = {}
        for atom in self._children:
            atom_map.setdefault(atom.name, atom)
        return atom_map

    def coord_map(self):
        """
        Map atom names to a copy of the atom coordinates.

        Returns
        -------
        coord_map : dict of (str -> ndarray)
            The coordinates of this residue.
        """
        return {name: atom.coord.copy() for name, atom in self.atom_map().items()}

    def _key(self, child):
        return child.name

    def __copy_create__(self):
        return Residue(self.name, self.num, self.ins)

    def __repr__(self):
        return f"<Residue {self.name} {self.comp_num} ({len(self)} atoms)>"


class Chain(_Child, _Container):
    """
    A chain, owning an ordered list of residues.

    Residues can be accessed by their position or by their
    :attr:`Residue.comp_num`: ``chain["52A"]``.

    Parameters
    ----------
    name : str, optional
        The chain ID.
    owner : Protein, optional
        If given, the chain is appended to this protein.

    Attributes
    ----------
    name
        Same as the parameter.
    residues : list of Residue
        A shallow copy of the child list.
    owner : Protein or None
        The protein this chain belongs to.
    """

    _child_type = Residue

    def __init__(self, name="", owner=None):
        super().__init__()
        self.name = name
        self.owner = None
        if owner is not None:
            owner._attach(self)

    @property
    def residues(self):
        return list(self._children)

    def get_atoms(self):
        return [atom for residue in self._children for atom in residue._children]

    def get_residues(self):
        return list(self._children)

    def residue_map(self):
        """
        Map composite residue numbers to residues.

        Returns
        -------
        residue_map : dict of (str -> Residue)
            The residues of this chain.
        """
        residue_map = {}
        for residue in self._children:
            residue_map.setdefault(residue.comp_num, residue)
        return residue_map

    def _key(self, child):
        return child.comp_num

    def __copy_create__(self):
        return Chain(self.name)

    def __repr__(self):
        return f"<Chain {self.name} ({len(self)} residues)>"


class Protein(_Container):
    """
    A protein (or a single model of a protein), owning an ordered list
    of chains.

    Chains can be accessed by their position or by their name:
    ``protein["A"]``.

    Parameters
    ----------
    name : str, optional
        The name of the protein, usually the PDB ID.
    model : int, optional
        The model number for multi-model files.

    Attributes
    ----------
    name, model
        Same as the parameters.
    chains : list of Chain
        A shallow copy of the child list.

    Examples
    --------

    >>> protein = Protein("1l2y")
    >>> chain = Chain("A", protein)
    >>> residue = Residue("ALA", 1, owner=chain)
    >>> atom = Atom("CA", [1, 2, 3], residue)
    >>> print(protein["A"]["1"]["CA"] is atom)
    True
    """

    _child_type = Chain

    def __init__(self, name="", model=None):
        super().__init__()
        self.name = name
        self.model = model

    @property
    def chains(self):
        return list(self._children)

    def get_atoms(self):
        return [atom for chain in self._children for atom in chain.get_atoms()]

    def get_residues(self):
        return [residue for chain in self._children for residue in chain._children]

    def chain_map(self):
        """
        Map chain names to chains.

        Returns
        -------
        chain_map : dict of (str -> Chain)
            The chains of this protein.
        """
        chain_map = {}
        for chain in self._children:
            chain_map.setdefault(chain.name, chain)
        return chain_map

    def _key(self, child):
        return child.name

    def __copy_create__(self):
        return Protein(self.name, self.model)

    def __repr__(self):
        model = "" if self.model is None else f" model {self.model}"
        return f"<Protein {self.name}{model} ({len(self)} chains)>"


def split_comp_num(comp_num):
    """
    Split a composite residue number into residue number and insertion
    code.

    Parameters
    ----------
    comp_num : str
        The composite residue number, e.g. ``'52A'``.

    Returns
    -------
    num : int
        The residue number.
    ins : str
        The insertion code, empty if there is none.

    Examples
    --------

    >>> print(split_comp_num("52A"))
    (52, 'A')
    >>> print(split_comp_num("-3"))
    (-3, '')
    """
    match = _COMP_NUM_PATTERN.match(str(comp_num).strip())
    if match is None:
        raise ValueError(f"'{comp_num}' is not a valid composite residue number")
    return int(match.group(1)), match.group(2)


def coord(item):
    """
    Get the atom coordinates of the given object.

    Parameters
    ----------
    item : Atom or Residue or Chain or Protein or iterable object of Atom or array-like
        Returns the :attr:`Atom.coord` attribute, if `item` is an
        :class:`Atom` and all atom coordinates of structures.
        Atom lists are converted into a coordinate array.
        Directly returns the input as float :class:`ndarray`
        otherwise.

    Returns
    -------
    coord : ndarray, shape=(3,) or shape=(n,3), dtype=float
        Atom coordinates.
    """
    if isinstance(item, Atom):
        return item.coord
    elif isinstance(item, _Container):
        return item.get_coord()
    elif isinstance(item, np.ndarray):
        return item.astype(float, copy=False)
    item = list(item)
    if len(item) > 0 and all(isinstance(element, Atom) for element in item):
        return _coord_of_atoms(item)
    return np.array(item, dtype=float)


def _coord_of_atoms(atoms):
    if len(atoms) == 0:
        return np.zeros((0, 3))
    return np.stack([atom.coord for atom in atoms])
