# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

__name__ = "pdbtorsion.structure.io.pdb"
__author__ = "The PDBTorsion developers"
__all__ = ["PDBFile"]

import os.path
import warnings
from pdbtorsion.file import InvalidFileError, TextFile, is_open_compatible
from pdbtorsion.structure.atoms import Atom, Chain, Protein, Residue
from pdbtorsion.structure.error import BadStructureError
from pdbtorsion.structure.info.atoms import is_hydrogen

# slice objects for readability
# ATOM
_atom_id = slice(6, 11)
_atom_name = slice(12, 16)
_alt_loc = slice(16, 17)
_res_name = slice(17, 20)
_chain_id = slice(21, 22)
_res_id = slice(22, 26)
_ins_code = slice(26, 27)
_coord_x = slice(30, 38)
_coord_y = slice(38, 46)
_coord_z = slice(46, 54)
_occupancy = slice(54, 60)
_temp_f = slice(60, 66)
_element = slice(76, 78)
_charge = slice(78, 80)
# MODEL
_model_id = slice(10, 14)

# Records shorter than this lack the element column
_MIN_RECORD_LENGTH = 78
_RECORD_LENGTH = 80


class PDBFile(TextFile):
    r"""
    This class represents a PDB file.

    This class only provides support for reading/writing the pure atom
    information (*ATOM*, *MODEL* and *ENDMDL* records).
    All other records, including *HETATM*, are ignored when reading.

    Examples
    --------
    Load a `\\*.pdb` file, rotate a backbone dihedral angle and save the
    new structure into a new file:

    >>> import os.path
    >>> file = PDBFile.read(os.path.join(path_to_structures, "peptide.pdb"))
    >>> protein = file.get_structure(model=1)
    >>> rotate_backbone(protein["A"][1], Dihedral.PSI, Side.C, 0.5)
    >>> file = PDBFile()
    >>> file.set_structure(protein)
    >>> file.write(os.path.join(path_to_directory, "peptide_mod.pdb"))
    """

    def __init__(self):
        super().__init__()
        self._structure_name = ""
        self._model_start_i = []
        self._atom_line_i = []

    @classmethod
    def read(cls, file):
        """
        Read a PDB file.

        Parameters
        ----------
        file : file-like object or str
            The file to be read.
            Alternatively a file path can be supplied.

        Returns
        -------
        file_object : PDBFile
            The parsed file.
        """
        file_object = super().read(file)
        file_object._structure_name = _file_stem(file)
        file_object._index_models_and_atoms()
        return file_object

    def get_model_count(self):
        """
        Get the number of models contained in the PDB file.

        Returns
        -------
        model_count : int
            The number of models.
            *ATOM* records in front of the first *MODEL* record count
            as additional leading model.
        """
        return len(self._model_start_i)

    def get_structure(
        self, model=None, include_hydrogen=False, strict=False, name=None
    ):
        """
        Get the structure from the *ATOM* records of the PDB file.

        A new :class:`Chain` starts, whenever the chain ID changes
        between consecutive records.
        A new :class:`Residue` starts, whenever residue number, residue
        name or insertion code change.

        Parameters
        ----------
        model : int, optional
            If this parameter is given, the function will return a
            single :class:`Protein` from the atoms corresponding to the
            given model number (starting at 1).
            Negative values are used to index models starting from the
            last model instead of the first model.
            If this parameter is omitted, a list of :class:`Protein`
            objects, one for each model, is returned, even if the
            structure contains only one model.
        include_hydrogen : bool, optional
            If false, hydrogen atoms are omitted.
            An atom is regarded as hydrogen, if its name starts with
            ``'H'``, optionally preceded by digits.
        strict : bool, optional
            If true, records lacking the element and charge columns
            raise an :class:`InvalidFileError`.
            By default, the missing fields are left empty and a warning
            is issued.
        name : str, optional
            The name of the returned protein(s).
            By default, the name of the file without extension is used.

        Returns
        -------
        structure : Protein or list of Protein
            The return type depends on the `model` parameter.
            The :attr:`Protein.model` attribute is taken from the
            *MODEL* record, it is ``None`` for atoms without preceding
            *MODEL* record.
            Such atoms form a leading model, if the file contains
            *MODEL* records as well.

        Raises
        ------
        InvalidFileError
            If a record contains a malformed number.
        """
        if name is None:
            name = self._structure_name
        if model is None:
            return [
                self._parse_model(i, include_hydrogen, strict, name)
                for i in range(len(self._model_start_i))
            ]
        else:
            model_i = self._get_model_index(model)
            return self._parse_model(model_i, include_hydrogen, strict, name)

    def set_structure(self, structure):
        """
        Set the structure for the file.

        Parameters
        ----------
        structure : Atom or Residue or Chain or Protein or list of Protein
            The structure to be saved into this file.
            If a list of proteins is given, each protein is saved as
            separate model, enclosed by *MODEL* and *ENDMDL* records.
            The model number is taken from :attr:`Protein.model` or
            from the position in the list, if it is ``None``.

        Raises
        ------
        BadStructureError
            If an annotation does not fit into its column.
        """
        self.lines = []
        if isinstance(structure, list):
            for model_num, protein in enumerate(structure, start=1):
                if protein.model is not None:
                    model_num = protein.model
                self.lines.append(f"MODEL     {model_num:4}")
                self.lines.extend(_atom_lines(protein.get_atoms()))
                self.lines.append("ENDMDL")
            if len(structure) > 0:
                self._structure_name = structure[0].name
        elif isinstance(structure, Atom):
            self.lines.extend(_atom_lines([structure]))
        else:
            self.lines.extend(_atom_lines(structure.get_atoms()))
            self._structure_name = structure.name
        self._index_models_and_atoms()

    def __copy_fill__(self, clone):
        super().__copy_fill__(clone)
        clone._structure_name = self._structure_name
        clone._index_models_and_atoms()

    def _index_models_and_atoms(self):
        # Line indices where a new model starts
        self._model_start_i = [
            i for i, line in enumerate(self.lines) if line.startswith("MODEL")
        ]
        # Line indices with ATOM records
        self._atom_line_i = [
            i for i, line in enumerate(self.lines) if line.startswith("ATOM")
        ]
        # ATOM records without preceding 'MODEL' record form a model of
        # their own: Either the only model of a file without 'MODEL'
        # records or an additional leading model
        first_model_start = (
            self._model_start_i[0] if self._model_start_i else len(self.lines)
        )
        if self._atom_line_i and self._atom_line_i[0] < first_model_start:
            self._model_start_i.insert(0, 0)

    def _get_model_index(self, model):
        last_model = len(self._model_start_i)
        if model == 0:
            raise ValueError("The model index must not be 0")
        # Negative models mean index starting from last model
        model = last_model + model + 1 if model < 0 else model
        if model < 1 or model > last_model:
            raise ValueError(
                f"The file has {last_model} models, "
                f"the given model {model} does not exist"
            )
        return model - 1

    def _get_atom_line_indices_for_model(self, model_i):
        start = self._model_start_i[model_i]
        if model_i + 1 < len(self._model_start_i):
            stop = self._model_start_i[model_i + 1]
        else:
            stop = len(self.lines)
        return [i for i in self._atom_line_i if start <= i < stop]

    def _get_model_number(self, model_i):
        line_i = self._model_start_i[model_i]
        line = self.lines[line_i]
        if not line.startswith("MODEL"):
            # Single model file without 'MODEL' record
            return None
        try:
            return int(line[_model_id])
        except ValueError as e:
            raise InvalidFileError(
                f"Invalid model number in line {line_i + 1}: '{line}'"
            ) from e

    def _parse_model(self, model_i, include_hydrogen, strict, name):
        protein = Protein(name, self._get_model_number(model_i))
        chain = None
        residue = None
        short_records = 0
        for line_i in self._get_atom_line_indices_for_model(model_i):
            line = self.lines[line_i]
            if len(line) < _MIN_RECORD_LENGTH:
                if strict:
                    raise InvalidFileError(
                        f"ATOM record in line {line_i + 1} has only "
                        f"{len(line)} columns, "
                        f"at least {_MIN_RECORD_LENGTH} are required"
                    )
                short_records += 1
            line = line.ljust(_RECORD_LENGTH)

            atom_name = line[_atom_name].strip()
            if not include_hydrogen and is_hydrogen(atom_name):
                continue

            try:
                serial = int(line[_atom_id])
                res_id = int(line[_res_id])
                coord = (
                    float(line[_coord_x]),
                    float(line[_coord_y]),
                    float(line[_coord_z]),
                )
            except ValueError as e:
                raise InvalidFileError(
                    f"Invalid ATOM record in line {line_i + 1}: '{line.rstrip()}'"
                ) from e
            chain_id = line[_chain_id].strip()
            res_name = line[_res_name].strip()
            ins_code = line[_ins_code].strip()

            if chain is None or chain.name != chain_id:
                chain = Chain(chain_id, protein)
                residue = None
            if residue is None or (residue.num, residue.name, residue.ins) != (
                res_id,
                res_name,
                ins_code,
            ):
                residue = Residue(res_name, res_id, ins_code, chain)
            Atom(
                atom_name,
                coord,
                residue,
                serial=serial,
                alt_loc=line[_alt_loc].strip(),
                occupancy=line[_occupancy].strip(),
                temp_factor=line[_temp_f].strip(),
                element=line[_element].strip(),
                charge=line[_charge].strip(),
            )

        if short_records > 0:
            warnings.warn(
                f"{short_records} ATOM record(s) lack the element column, "
                f"the missing fields are left empty"
            )
        return protein


def _atom_lines(atoms):
    return [_atom_line(atom) for atom in atoms]


def _atom_line(atom):
    residue = atom.owner
    chain = residue.owner if residue is not None else None
    res_name = residue.name if residue is not None else ""
    res_id = residue.num if residue is not None else 0
    ins_code = residue.ins if residue is not None else ""
    chain_id = chain.name if chain is not None else ""
    _check_pdb_compatibility(atom, res_name, chain_id, ins_code)

    x, y, z = atom.coord
    # Names with 4 characters or a leading digit
    # occupy the complete name column
    if len(atom.name) == 4 or atom.name[:1].isdigit():
        name = f" {atom.name:<4}"
    else:
        name = f"  {atom.name:<3}"
    return (
        f"ATOM  {atom.serial:5d}{name}{atom.alt_loc:>1}{res_name:>3} "
        f"{chain_id:>1}{res_id:4d}{ins_code:>1}   "
        f"{x:8.3f}{y:8.3f}{z:8.3f}{atom.occupancy:>6}{atom.temp_factor:>6}"
        f"          {atom.element:>2}{atom.charge:>2}"
    )


def _check_pdb_compatibility(atom, res_name, chain_id, ins_code):
    if len(atom.name) > 4:
        raise BadStructureError(f"Atom name '{atom.name}' exceeds 4 characters")
    if len(res_name) > 3:
        raise BadStructureError(f"Residue name '{res_name}' exceeds 3 characters")
    if len(chain_id) > 1:
        raise BadStructureError(f"Chain ID '{chain_id}' exceeds 1 character")
    if len(ins_code) > 1:
        raise BadStructureError(f"Insertion code '{ins_code}' exceeds 1 character")
    if len(atom.alt_loc) > 1:
        raise BadStructureError(
            f"Alternate location '{atom.alt_loc}' exceeds 1 character"
        )


def _file_stem(file):
    if is_open_compatible(file):
        path = os.fsdecode(file)
    else:
        # File objects, that were opened from a path
        path = getattr(file, "name", None)
        if not isinstance(path, str):
            return ""
    return os.path.splitext(os.path.basename(path))[0]
