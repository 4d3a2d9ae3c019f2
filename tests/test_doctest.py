# This source code is part of the PDBTorsion package and is distributed
# under the 3-Clause BSD License. Please see 'LICENSE.rst' for further
# information.

import doctest
import tempfile
from importlib import import_module
from os.path import join
import numpy as np
import pytest


@pytest.mark.parametrize(
    "package_name, context_package_names",
    [
        pytest.param("pdbtorsion", []),
        pytest.param("pdbtorsion.sequence.io.fasta", ["pdbtorsion.structure"]),
        pytest.param("pdbtorsion.structure", ["pdbtorsion.structure.info"]),
        pytest.param("pdbtorsion.structure.info", []),
        pytest.param("pdbtorsion.structure.io", ["pdbtorsion.structure"]),
        pytest.param(
            "pdbtorsion.structure.io.pdb", ["pdbtorsion.structure", "pdbtorsion"]
        ),
    ],
)
def test_doctest(package_name, context_package_names):
    """
    Run all doctest strings in all PDBTorsion subpackages.
    """
    # Collect all attributes of this package and its subpackages
    # as globals for the doctests
    globs = {}
    # The package itself is also used as context
    for name in context_package_names + [package_name]:
        context_package = import_module(name)
        globs.update(
            {attr: getattr(context_package, attr) for attr in dir(context_package)}
        )

    # Add fixed names for certain paths
    globs["path_to_directory"] = tempfile.gettempdir()
    globs["path_to_structures"] = join(".", "tests", "structure", "data")
    # Add frequently used modules
    globs["np"] = np

    # Adjust NumPy print formatting
    np.set_printoptions(precision=3, floatmode="maxprec_equal")

    # Run doctests
    package = import_module(package_name)
    runner = doctest.DocTestRunner(
        verbose=False,
        optionflags=doctest.ELLIPSIS
        | doctest.REPORT_ONLY_FIRST_FAILURE
        | doctest.NORMALIZE_WHITESPACE,
    )
    for test in doctest.DocTestFinder(exclude_empty=False).find(
        package,
        package.__name__,
        # Setting 'module=False' omits the check, whether the
        # star-imported attributes are defined in the package itself
        module=False,
        extraglobs=globs,
    ):
        runner.run(test)
    results = doctest.TestResults(runner.failures, runner.tries)
    try:
        assert results.failed == 0
    except AssertionError:
        print(f"Failing doctest in module {package}")
        raise
