# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "pdbtorsion"
__author__ = "The PDBTorsion developers"
__all__ = ["Copyable"]

import abc


class Copyable(metaclass=abc.ABCMeta):
    """
    Base class for all objects, that can be copied.

    The public method :meth:`copy()` first creates a fresh instance via
    :meth:`__copy_create__()`, only passing constructor arguments.
    All state that cannot be given to the constructor, e.g. the child
    nodes of a structure, is transferred afterwards via
    :meth:`__copy_fill__()`, starting with the uppermost base class.

    For nodes of the structure hierarchy this means, that a copy never
    shares ownership with the original:
    The clone is created without an owner and receives copies of all
    children.
    """

    def copy(self):
        """
        Copy the object.

        Returns
        -------
        copy
            A copy of this object.
        """
        clone = self.__copy_create__()
        self.__copy_fill__(clone)
        return clone

    def __copy_create__(self):
        """
        Instantiate a new object of this class.

        Only the constructor should be called in this method.
        All further attributes, that need to be copied are handled
        in :meth:`__copy_fill__()`.

        Do not call the `super()` method here.

        This method must be overridden, if the constructor takes
        parameters.

        Returns
        -------
        copy
            A freshly instantiated copy of *self*.
        """
        return type(self)()

    def __copy_fill__(self, clone):
        """
        Copy all necessary attributes to the new object.

        Always call the `super()` method as first statement.

        Parameters
        ----------
        clone
            The freshly instantiated copy of *self*.
        """
        pass
