# Shared fixtures.  Lives at the repository root so the flat modules are
# importable from tests/ without installing.

import pytest
from pattern_db import pattern_db


@pytest.fixture(scope='session')
def full_pdb():
    # the depth 4 table the solver uses, built once per test run
    return pattern_db().build()


@pytest.fixture(scope='session')
def small_pdb():
    return pattern_db(max_depth=2).build()
