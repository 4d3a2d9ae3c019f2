# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import glob
import io
import itertools
import warnings
from os.path import join
from tempfile import TemporaryFile
import pytest
import pdbtorsion
import pdbtorsion.structure as struc
import pdbtorsion.structure.io.pdb as pdb
from tests.util import data_dir

SINGLE_ATOM_LINE = (
    "ATOM      1  CA  ALA A   1      11.104   6.134  -6.504  1.00  0.00           C  "
)


def test_single_atom():
    """
    Parse a minimal file with a single *ATOM* record.
    """
    pdb_file = pdb.PDBFile.read(io.StringIO(SINGLE_ATOM_LINE + "\n"))
    protein = pdb_file.get_structure(model=1)

    assert len(protein) == 1
    chain = protein[0]
    assert chain.name == "A"
    assert len(chain) == 1
    residue = chain[0]
    assert residue.name == "ALA"
    assert residue.num == 1
    assert residue.ins == ""
    assert len(residue) == 1
    atom = residue[0]
    assert atom.name == "CA"
    assert atom.serial == 1
    assert atom.coord.tolist() == [11.104, 6.134, -6.504]
    assert atom.occupancy == "1.00"
    assert atom.temp_factor == "0.00"
    assert atom.element == "C"
    assert atom.charge == ""
    assert atom.alt_loc == ""


def test_get_model_count():
    pdb_file = pdb.PDBFile.read(join(data_dir("structure"), "two_models.pdb"))
    # Test also the thin wrapper around the method
    # 'get_model_count()'
    test_model_count = pdb.get_model_count(pdb_file)
    ref_model_count = len(pdb.get_structure(pdb_file))
    assert test_model_count == ref_model_count == 2

    pdb_file = pdb.PDBFile.read(join(data_dir("structure"), "peptide.pdb"))
    assert pdb_file.get_model_count() == 1


def test_atoms_before_first_model():
    """
    *ATOM* records in front of the first *MODEL* record are not dropped,
    but form a leading model without model number.
    """
    moved_line = SINGLE_ATOM_LINE.replace("   1      11.104", "   2      11.104")
    lines = [
        SINGLE_ATOM_LINE,
        "MODEL        1",
        moved_line,
        "ENDMDL",
    ]
    pdb_file = pdb.PDBFile.read(io.StringIO("\n".join(lines)))
    assert pdb_file.get_model_count() == 2
    leading, first = pdb_file.get_structure()
    assert leading.model is None
    assert first.model == 1
    assert [residue.num for residue in leading.get_residues()] == [1]
    assert [residue.num for residue in first.get_residues()] == [2]


@pytest.mark.parametrize(
    "path, include_hydrogen",
    itertools.product(
        glob.glob(join(data_dir("structure"), "*.pdb")), [False, True]
    ),
)
def test_conversion(path, include_hydrogen):
    """
    Parsing a file and writing the structure into a new file again
    must reproduce the original *ATOM* records.
    """
    pdb_file = pdb.PDBFile.read(path)
    proteins = pdb_file.get_structure(include_hydrogen=include_hydrogen)

    pdb_file = pdb.PDBFile()
    if len(proteins) == 1:
        pdb.set_structure(pdb_file, proteins[0])
    else:
        pdb.set_structure(pdb_file, proteins)
    temp = TemporaryFile("w+")
    pdb_file.write(temp)

    temp.seek(0)
    pdb_file = pdb.PDBFile.read(temp)
    temp.close()
    test_proteins = pdb_file.get_structure(include_hydrogen=include_hydrogen)

    assert len(test_proteins) == len(proteins)
    for test_protein, ref_protein in zip(test_proteins, proteins):
        assert test_protein.model == ref_protein.model
        assert test_protein.get_coord().tolist() == ref_protein.get_coord().tolist()
        for test_atom, ref_atom in zip(
            test_protein.get_atoms(), ref_protein.get_atoms()
        ):
            for attr in ("name", "serial", "alt_loc", "element", "occupancy"):
                assert getattr(test_atom, attr) == getattr(ref_atom, attr)
            assert test_atom.owner.comp_num == ref_atom.owner.comp_num
            assert test_atom.owner.owner.name == ref_atom.owner.owner.name


@pytest.mark.parametrize("file_name", ["peptide.pdb", "two_models.pdb"])
def test_round_trip_lines(file_name):
    """
    The written *ATOM* and *MODEL* records must be identical to the
    records of the original file, byte for byte.
    """
    path = join(data_dir("structure"), file_name)
    ref_file = pdb.PDBFile.read(path)
    proteins = ref_file.get_structure(include_hydrogen=True)

    test_file = pdb.PDBFile()
    test_file.set_structure(proteins if len(proteins) > 1 else proteins[0])

    record_names = ("ATOM", "MODEL", "ENDMDL")
    ref_lines = [line for line in ref_file.lines if line.startswith(record_names)]
    assert test_file.lines == ref_lines


@pytest.mark.parametrize(
    "atom_name, ref_column",
    [
        ("CA", "  CA "),
        ("N", "  N  "),
        ("OXT", "  OXT"),
        ("HD11", " HD11"),
        ("1HB", " 1HB "),
        ("2HD1", " 2HD1"),
    ],
)
def test_atom_name_justification(atom_name, ref_column):
    """
    Names with four characters or a leading digit start at column 13,
    all other names start at column 14.
    """
    residue = struc.Residue("LEU", 7)
    struc.Atom(atom_name, [1, 2, 3], residue, serial=1, element=atom_name[0])
    pdb_file = pdb.PDBFile()
    pdb_file.set_structure(residue)
    line = pdb_file.lines[0]
    assert len(line) == 80
    assert line[11:16] == ref_column

    # The name is parsed back correctly
    test_atom = pdb_file.get_structure(model=1, include_hydrogen=True)[0][0][0]
    assert test_atom.name == atom_name


def test_model_selection():
    pdb_file = pdb.PDBFile.read(join(data_dir("structure"), "two_models.pdb"))
    proteins = pdb_file.get_structure()
    assert [protein.model for protein in proteins] == [1, 2]

    first = pdb_file.get_structure(model=1)
    last = pdb_file.get_structure(model=-1)
    assert first.model == 1
    assert last.model == 2
    assert last.get_coord().tolist() == proteins[1].get_coord().tolist()
    # Each model starts a fresh chain and residue tracking
    for protein in proteins:
        assert [chain.name for chain in protein] == ["A", "B"]
        assert [len(chain) for chain in protein] == [1, 1]
        assert protein["B"]["5"].name == "GLY"

    for invalid_model in (0, 3, -3):
        with pytest.raises(ValueError):
            pdb_file.get_structure(model=invalid_model)


def test_hydrogen_filter():
    pdb_file = pdb.PDBFile.read(join(data_dir("structure"), "peptide.pdb"))
    without_h = pdb_file.get_structure(model=1)
    with_h = pdb_file.get_structure(model=1, include_hydrogen=True)
    assert len(with_h.get_atoms()) == 24
    assert len(without_h.get_atoms()) == 19
    assert not any(atom.element == "H" for atom in without_h.get_atoms())
    assert "HA2" in with_h["A"][0]


def test_name():
    pdb_file = pdb.PDBFile.read(join(data_dir("structure"), "peptide.pdb"))
    assert pdb_file.get_structure(model=1).name == "peptide"
    assert pdb_file.get_structure(model=1, name="custom").name == "custom"
    # A file-like object has no file name
    pdb_file = pdb.PDBFile.read(io.StringIO(SINGLE_ATOM_LINE))
    assert pdb_file.get_structure(model=1).name == ""


def test_ignored_records():
    """
    *HETATM* and other records are ignored.
    """
    lines = [
        "HEADER    TEST",
        SINGLE_ATOM_LINE,
        "HETATM    2  O   HOH A 101       1.000   2.000   3.000  1.00  0.00           O  ",
        "TER       3      ALA A   1",
        "END",
    ]
    pdb_file = pdb.PDBFile.read(io.StringIO("\n".join(lines)))
    protein = pdb_file.get_structure(model=1)
    assert len(protein.get_atoms()) == 1


def test_chain_and_residue_splitting():
    """
    A new chain starts with every change of the chain ID, a new residue
    with every change of residue number, name or insertion code.
    """
    template = (
        "ATOM  {serial:5d}  CA  {res_name:3} {chain_id:1}{res_id:4d}{ins:1}"
        "      1.000   2.000   3.000  1.00  0.00           C  "
    )
    records = [
        ("ALA", "A", 1, ""),
        ("ALA", "A", 1, ""),
        ("ALA", "A", 1, "A"),
        ("GLY", "A", 1, "A"),
        ("GLY", "B", 1, "A"),
        ("GLY", "A", 1, "A"),
    ]
    lines = [
        template.format(
            serial=i + 1, res_name=res_name, chain_id=chain_id, res_id=res_id, ins=ins
        )
        for i, (res_name, chain_id, res_id, ins) in enumerate(records)
    ]
    protein = pdb.PDBFile.read(io.StringIO("\n".join(lines))).get_structure(model=1)
    assert [chain.name for chain in protein] == ["A", "B", "A"]
    assert [
        (residue.name, residue.comp_num) for residue in protein["A"]
    ] == [("ALA", "1"), ("ALA", "1A"), ("GLY", "1A")]
    assert len(protein["A"][0]) == 2


@pytest.mark.parametrize(
    "columns, value",
    [
        (slice(6, 11), "  abc"),
        (slice(22, 26), "  x1"),
        (slice(30, 38), "   1.0.0"),
        (slice(46, 54), "        "),
    ],
)
def test_malformed_number(columns, value):
    line = SINGLE_ATOM_LINE[: columns.start] + value + SINGLE_ATOM_LINE[columns.stop :]
    lines = [SINGLE_ATOM_LINE, line]
    pdb_file = pdb.PDBFile.read(io.StringIO("\n".join(lines)))
    with pytest.raises(pdbtorsion.InvalidFileError, match="line 2"):
        pdb_file.get_structure()


def test_short_records():
    """
    Records without the element and charge columns are parsed
    leniently with a warning, unless strict parsing is requested.
    """
    short_line = SINGLE_ATOM_LINE[:66]
    pdb_file = pdb.PDBFile.read(io.StringIO(short_line + "\n" + short_line))

    with pytest.warns(UserWarning, match="2 ATOM record"):
        protein = pdb_file.get_structure(model=1)
    atom = protein[0][0][0]
    assert atom.coord.tolist() == [11.104, 6.134, -6.504]
    assert atom.temp_factor == "0.00"
    assert atom.element == ""
    assert atom.charge == ""

    with pytest.raises(pdbtorsion.InvalidFileError, match="line 1"):
        pdb_file.get_structure(model=1, strict=True)


def test_complete_records_no_warning():
    pdb_file = pdb.PDBFile.read(join(data_dir("structure"), "peptide.pdb"))
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        pdb_file.get_structure(strict=True)


@pytest.mark.parametrize(
    "attr, value",
    [
        ("name", "CALPHA"),
        ("alt_loc", "AB"),
    ],
)
def test_incompatible_atom(attr, value):
    atom = struc.Atom("CA", [1, 2, 3])
    setattr(atom, attr, value)
    pdb_file = pdb.PDBFile()
    with pytest.raises(struc.BadStructureError):
        pdb_file.set_structure(atom)


def test_incompatible_chain():
    chain = struc.Chain("AB")
    residue = struc.Residue("ALA", 1, owner=chain)
    struc.Atom("CA", [1, 2, 3], residue)
    with pytest.raises(struc.BadStructureError):
        pdb.PDBFile().set_structure(chain)


def test_model_numbers_written():
    protein = struc.Protein("test")
    chain = struc.Chain("A", protein)
    struc.Atom("CA", [1, 2, 3], struc.Residue("ALA", 1, owner=chain), serial=1)
    second = protein.copy()
    second.model = 5

    pdb_file = pdb.PDBFile()
    pdb_file.set_structure([protein, second])
    assert pdb_file.lines[0] == "MODEL        1"
    assert pdb_file.lines[2] == "ENDMDL"
    assert pdb_file.lines[3] == "MODEL        5"
    assert pdb_file.get_model_count() == 2
    assert [p.model for p in pdb_file.get_structure()] == [1, 5]


def test_read_write_paths(tmp_path):
    pdb_file = pdb.PDBFile.read(join(data_dir("structure"), "peptide.pdb"))
    protein = pdb_file.get_structure(model=1)
    struc.rotate_backbone(protein["A"][1], struc.Dihedral.PSI, struc.Side.C, 0.5)

    out_file = pdb.PDBFile()
    out_file.set_structure(protein)
    out_path = tmp_path / "modified.pdb"
    out_file.write(out_path)

    test_protein = pdb.PDBFile.read(out_path).get_structure(model=1)
    assert test_protein.name == "modified"
    assert test_protein.get_coord() == pytest.approx(protein.get_coord(), abs=1e-3)
    assert struc.backbone_dihedral(
        test_protein["A"][1], struc.Dihedral.PSI
    ) == pytest.approx(
        struc.backbone_dihedral(protein["A"][1], struc.Dihedral.PSI), abs=1e-2
    )


def test_copy():
    pdb_file = pdb.PDBFile.read(join(data_dir("structure"), "two_models.pdb"))
    clone = pdb_file.copy()
    assert clone.lines == pdb_file.lines
    assert clone.lines is not pdb_file.lines
    assert clone.get_model_count() == 2
    assert clone.get_structure(model=1).name == "two_models"


def test_missing_file():
    with pytest.raises(FileNotFoundError):
        pdb.PDBFile.read(join(data_dir("structure"), "missing.pdb"))
