from importlib.metadata import version
import pdbtorsion


def test_version():
    """
    Check if version imported from version.py is correct.
    """
    assert pdbtorsion.__version__ == version("pdbtorsion")
