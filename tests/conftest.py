import os
import numpy as np
import pytest

os.environ.setdefault("NUMBA_DISABLE_JIT", "0")


@pytest.fixture
def rng():
    return np.random.default_rng(967893)
