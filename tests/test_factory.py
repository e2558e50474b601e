import numpy as np
import pytest

from vecmathpy.factory import clear_cache, get_vector_math
from vecmathpy.vector_math import CheckedVectorMath, VectorMath


@pytest.fixture(autouse=True)
def _fresh_cache(monkeypatch):
    monkeypatch.delenv("VECMATH_PRECISION", raising=False)
    monkeypatch.delenv("VECMATH_CHECKED", raising=False)
    clear_cache()
    yield
    clear_cache()


def test_defaults_to_unchecked_double():
    vm = get_vector_math()

    assert type(vm) is VectorMath
    assert vm.dtype == np.float64


def test_explicit_arguments():
    vm = get_vector_math(np.float32, checked=True)

    assert isinstance(vm, CheckedVectorMath)
    assert vm.dtype == np.float32


def test_instances_are_cached():
    assert get_vector_math("float64", checked=False) is get_vector_math(np.float64, False)
    assert get_vector_math(np.float64, checked=True) is not get_vector_math(
        np.float64, checked=False
    )


def test_environment_selects_instance(monkeypatch):
    monkeypatch.setenv("VECMATH_PRECISION", "float32")
    monkeypatch.setenv("VECMATH_CHECKED", "yes")
    vm = get_vector_math()

    assert isinstance(vm, CheckedVectorMath)
    assert vm.dtype == np.float32


def test_explicit_arguments_override_environment(monkeypatch):
    monkeypatch.setenv("VECMATH_PRECISION", "float32")
    monkeypatch.setenv("VECMATH_CHECKED", "1")
    vm = get_vector_math(np.float64, checked=False)

    assert type(vm) is VectorMath
    assert vm.dtype == np.float64


def test_invalid_environment_falls_back(monkeypatch):
    monkeypatch.setenv("VECMATH_PRECISION", "quad")
    vm = get_vector_math()

    assert vm.dtype == np.float64


def test_invalid_explicit_dtype_raises():
    with pytest.raises(ValueError):
        get_vector_math(np.int64)
