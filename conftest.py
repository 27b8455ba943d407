# -*- coding: utf-8 -*-
# License: BSD-3-Clause
# Author: L. Kouadio <etanoyau@gmail.com>
"""
conftest.py

Seeds the global random number generators once per test session. Set the
``GOENSEMBLE_SEED`` environment variable to replay a session with the seed
it printed; estimators under test still receive explicit ``random_state``
values where the assertions depend on the draws.
"""

import pytest
import numpy as np
import random
import os

@pytest.fixture(scope='session', autouse=True)
def global_rng_seed():
    """Fixture to set a globally controllable seed for all tests in the session."""
    _random_seed = os.environ.get(
        "GOENSEMBLE_SEED", np.random.randint(0, 2**32 - 1, dtype=np.int64))
    print(f"I: Seeding RNGs for all tests with {_random_seed}")
    np.random.seed(int(_random_seed))
    random.seed(int(_random_seed))
