# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "pdbtorsion"
__author__ = "The PDBTorsion developers"
__all__ = [
    "File",
    "TextFile",
    "InvalidFileError",
]

import abc
import copy
import io
from os import PathLike
from pdbtorsion.copyable import Copyable


class File(Copyable, metaclass=abc.ABCMeta):
    """
    Common interface of the file formats in this package.

    A new instance represents an empty file, which is populated via the
    format specific ``set_...()`` methods and serialized with
    :func:`write()`.
    Existing files are parsed with the class method :func:`read()`.
    """

    @classmethod
    @abc.abstractmethod
    def read(cls, file):
        """
        Create an instance from the content of a file.

        Parameters
        ----------
        file : file-like object or str or PathLike
            A path to the file or an already opened text stream.

        Returns
        -------
        file : File
            The parsed file, as instance of the subclass this method
            is called on.
        """
        pass

    @abc.abstractmethod
    def write(self, file):
        """
        Serialize this object.

        Parameters
        ----------
        file : file-like object or str or PathLike
            A path to the output file or an already opened text stream.
        """
        pass


class TextFile(File, metaclass=abc.ABCMeta):
    """
    Base class for file formats that are processed line by line.

    The content is kept as list of lines, without the trailing line
    breaks.
    Subclasses interpret and modify these lines, :func:`write()` puts
    them back together.

    Attributes
    ----------
    lines : list of str
        The lines of the file.
        Subclasses may rely on their content, hence this list should
        only be changed by the subclass itself.
    """

    def __init__(self):
        super().__init__()
        self.lines = []

    @classmethod
    def read(cls, file, *args, **kwargs):
        if is_open_compatible(file):
            with open(file, "r") as f:
                content = f.read()
        else:
            _check_text_stream(file)
            content = file.read()
        file_object = cls(*args, **kwargs)
        file_object.lines = content.splitlines()
        return file_object

    def write(self, file):
        """
        Write the lines of this file, each terminated by a line break.

        Parameters
        ----------
        file : file-like object or str or PathLike
            A path to the output file or an already opened text stream.
        """
        if is_open_compatible(file):
            with open(file, "w") as f:
                f.write(str(self))
        else:
            _check_text_stream(file)
            file.write(str(self))

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        clone.lines = copy.copy(self.lines)

    def __str__(self):
        return "".join([line + "\n" for line in self.lines])


class InvalidFileError(Exception):
    """
    The content of a file cannot be interpreted, e.g. a record has
    an unexpected format or required information is missing.
    """

    pass


def is_text(file):
    if isinstance(file, io.TextIOBase):
        return True
    # Wrapped file objects, e.g. from 'tempfile.TemporaryFile()'
    return hasattr(file, "file") and isinstance(file.file, io.TextIOBase)


def is_open_compatible(file):
    return isinstance(file, (str, bytes, PathLike))


def _check_text_stream(file):
    if not is_text(file):
        raise TypeError("The file object must be opened in text mode")


def wrap_string(text, width):
    """
    Split a string into chunks of fixed length.

    In contrast to :func:`textwrap.wrap()` word boundaries and
    whitespace are not taken into account, which makes this function
    suitable for sequence data.

    Parameters
    ----------
    text : str
        The string to be split.
    width : int or None
        The length of each chunk, the last one may be shorter.
        ``None`` disables splitting.

    Returns
    -------
    lines : list of str
        The chunks.
    """
    if width is None:
        return [text]
    return [text[i : i + width] for i in range(0, len(text), width)]
