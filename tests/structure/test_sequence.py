# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

from os.path import join
import pytest
import pdbtorsion.structure as struc
import pdbtorsion.structure.io.pdb as pdb
from tests.util import data_dir


def test_to_sequence():
    pdb_file = pdb.PDBFile.read(join(data_dir("structure"), "peptide.pdb"))
    protein = pdb_file.get_structure(model=1)
    assert struc.to_sequence(protein) == "GSL"
    assert struc.to_sequence(protein["A"]) == "GSL"
    assert struc.to_sequence(protein["A"][1]) == "S"


def test_to_sequence_multiple_chains():
    pdb_file = pdb.PDBFile.read(join(data_dir("structure"), "two_models.pdb"))
    proteins = pdb_file.get_structure()
    # Each model is converted, all chains of a model are concatenated
    assert struc.to_sequence(proteins) == ["AG", "AG"]
    assert struc.to_sequence([]) == []


def test_to_sequence_unknown_residue():
    chain = struc.Chain("A")
    for num, name in enumerate(["MET", "MSE", "HOH", "UNK"], start=1):
        struc.Residue(name, num, owner=chain)
    assert struc.to_sequence(chain) == "MXXX"


def test_to_sequence_atom():
    with pytest.raises(TypeError):
        struc.to_sequence(struc.Atom("CA"))
