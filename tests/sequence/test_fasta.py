# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import io
from os.path import join
from tempfile import TemporaryFile
import pytest
import pdbtorsion
import pdbtorsion.sequence.io.fasta as fasta
import pdbtorsion.structure as struc
import pdbtorsion.structure.io.pdb as pdb
from tests.util import data_dir


def test_access_low_level():
    path = join(data_dir("sequence"), "random.fasta")
    file = fasta.FastaFile.read(path)
    assert list(file.keys()) == ["seq1 first sequence", "seq2"]
    # Sequences spanning multiple lines are concatenated
    assert file["seq1 first sequence"] == "MAGICPEPTIDE"
    assert file["seq2"] == "GSL"
    assert len(file) == 2
    assert "seq2" in file
    assert "seq3" not in file


def test_get_sequence():
    file = fasta.FastaFile.read(join(data_dir("sequence"), "random.fasta"))
    assert fasta.get_sequence(file) == "MAGICPEPTIDE"
    assert fasta.get_sequence(file, "seq2") == "GSL"
    with pytest.raises(KeyError):
        fasta.get_sequence(file, "seq3")
    with pytest.raises(ValueError):
        fasta.get_sequence(fasta.FastaFile())


def test_set_sequence():
    file = fasta.FastaFile()
    fasta.set_sequence(file, "MAGIC")
    fasta.set_sequence(file, "GSL", "second")
    assert str(file) == ">sequence\nMAGIC\n>second\nGSL\n"


def test_modification():
    file = fasta.FastaFile()
    file["seq1"] = "AAAA"
    file["seq2"] = "CCCC"
    # Replacing an entry moves it to the end
    file["seq1"] = "GGGG"
    assert list(file.items()) == [("seq2", "CCCC"), ("seq1", "GGGG")]
    del file["seq2"]
    assert file.lines == [">seq1", "GGGG"]
    with pytest.raises(TypeError):
        file["seq3"] = 42


@pytest.mark.parametrize("chars_per_line", [None, 1, 4, 80])
def test_line_length(chars_per_line):
    sequence = "MAGICPEPTIDE"
    file = fasta.FastaFile(chars_per_line=chars_per_line)
    file["seq"] = sequence
    sequence_lines = file.lines[1:]
    if chars_per_line is None:
        assert sequence_lines == [sequence]
    else:
        assert all(len(line) <= chars_per_line for line in sequence_lines)
    assert file["seq"] == sequence


def test_set_structure():
    pdb_file = pdb.PDBFile.read(join(data_dir("structure"), "peptide.pdb"))
    protein = pdb_file.get_structure(model=1)
    file = fasta.FastaFile()
    fasta.set_structure(file, protein)
    fasta.set_structure(file, protein["A"])
    fasta.set_structure(file, protein, header="custom")
    assert str(file) == ">peptide\nGSL\n>A\nGSL\n>custom\nGSL\n"


def test_set_structure_models():
    pdb_file = pdb.PDBFile.read(join(data_dir("structure"), "two_models.pdb"))
    file = fasta.FastaFile()
    fasta.set_structure(file, pdb_file.get_structure())
    assert dict(file.items()) == {
        "two_models model 1": "AG",
        "two_models model 2": "AG",
    }


def _protein(name, residue_names):
    protein = struc.Protein(name)
    chain = struc.Chain("A", protein)
    for num, res_name in enumerate(residue_names, start=1):
        struc.Residue(res_name, num, owner=chain)
    return protein


def test_set_structure_protein_list():
    file = fasta.FastaFile()
    proteins = [_protein("p1", ["ALA", "GLY"]), _protein("p2", ["TRP"])]
    fasta.set_structure(file, proteins)
    assert str(file) == ">p1\nAG\n>p2\nW\n"


def test_set_structure_protein_list_headers():
    proteins = [_protein("p", ["ALA"]), _protein("p", ["TRP"])]
    file = fasta.FastaFile()
    fasta.set_structure(file, proteins, header=["first", "second"])
    assert dict(file.items()) == {"first": "A", "second": "W"}

    file = fasta.FastaFile()
    fasta.set_structure(file, proteins, header="custom")
    assert dict(file.items()) == {"custom model 1": "A", "custom model 2": "W"}

    with pytest.raises(ValueError):
        fasta.set_structure(fasta.FastaFile(), proteins, header=["first"])
    with pytest.raises(ValueError):
        fasta.set_structure(fasta.FastaFile(), proteins, header=["same", "same"])


def test_write_read():
    file = fasta.FastaFile()
    residue_names = ["MET", "LYS", "UNK", "TRP"]
    chain = struc.Chain("B")
    for num, name in enumerate(residue_names, start=1):
        struc.Residue(name, num, owner=chain)
    fasta.set_structure(file, chain)

    temp = TemporaryFile("w+")
    file.write(temp)
    temp.seek(0)
    test_file = fasta.FastaFile.read(temp)
    temp.close()
    assert dict(test_file.items()) == {"B": "MKXW"}


def test_invalid_files():
    with pytest.raises(pdbtorsion.InvalidFileError):
        fasta.FastaFile.read(io.StringIO("; only a comment\n\n"))
    with pytest.raises(pdbtorsion.InvalidFileError):
        fasta.FastaFile.read(io.StringIO("MAGIC\n>seq\nGSL\n"))


def test_copy():
    file = fasta.FastaFile.read(join(data_dir("sequence"), "random.fasta"))
    clone = file.copy()
    clone["seq3"] = "AAA"
    assert "seq3" not in file
    assert clone["seq2"] == "GSL"
