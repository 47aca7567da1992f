"""
pytest configuration and shared fixtures.
"""

import array as std_array
import ctypes

import numpy as np
import pytest


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


def _as_list(values):
    return list(values)


def _as_numpy(values):
    return np.array(values, dtype=np.float64)


def _as_stdlib_array(values):
    return std_array.array('d', values)


def _as_ctypes(values):
    return (ctypes.c_double * len(values))(*values)


STORAGE = {
    'list': _as_list,
    'numpy': _as_numpy,
    'array': _as_stdlib_array,
    'ctypes': _as_ctypes,
}


@pytest.fixture(params=sorted(STORAGE))
def make_buffer(request):
    """
    Factory building a buffer of the parametrized storage type.

    Every test using this fixture runs once per backing store, so kernels
    are checked against managed sequences and foreign memory alike.
    """
    return STORAGE[request.param]


@pytest.fixture
def random_vec3(rng):
    """Three non-zero random 3-vectors, as lists."""
    return [list(rng.uniform(-10.0, 10.0, size=3)) for _ in range(3)]


@pytest.fixture
def random_mat4(rng):
    """A random 4x4 matrix as a flat column-major list."""
    return list(rng.standard_normal(16))
