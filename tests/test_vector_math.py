import math

import numpy as np
import numpy.testing as npt
import pytest

from vecmathpy.constants import FLOAT32, FLOAT64
from vecmathpy.fastexp import fastexp_array
from vecmathpy.vector_math import CheckedVectorMath, VectorMath


@pytest.mark.parametrize("dtype", [np.float64, np.float32])
def test_exp_of_zeros_is_exactly_one(dtype):
    vm = VectorMath(dtype)
    x = np.zeros(6, dtype=dtype)
    vm.exp(x, 6)

    assert x.dtype == dtype
    npt.assert_array_equal(x, np.ones(6, dtype=dtype))


def test_formats_are_bound_to_precision():
    assert VectorMath().fmt is FLOAT64
    assert VectorMath(np.float32).fmt is FLOAT32
    assert VectorMath("float32").dtype == np.float32


@pytest.mark.parametrize("dtype", [np.int32, np.float16, "complex128"])
def test_unsupported_dtype(dtype):
    with pytest.raises(ValueError):
        VectorMath(dtype)


def test_float32_exp_accuracy_and_clamps():
    vm = VectorMath(np.float32)
    grid = np.linspace(-20.0, 20.0, 801, dtype=np.float32)
    x = grid.copy()
    vm.exp(x, x.size)

    npt.assert_allclose(x, np.exp(grid.astype(np.float64)), rtol=1e-6)
    npt.assert_allclose(x, fastexp_array(grid), rtol=2e-7)

    edges = np.array([100.0, -100.0], dtype=np.float32)
    vm.exp(edges, 2)
    npt.assert_array_equal(edges, np.array([np.inf, 0.0], dtype=np.float32))


def test_scalar_fastexp_per_precision():
    assert VectorMath().fastexp(100.0) == pytest.approx(math.exp(100.0), rel=1e-12)
    assert VectorMath(np.float32).fastexp(100.0) == np.inf
    assert isinstance(VectorMath(np.float32).fastexp(1.0), np.float32)


def test_float32_scalars_are_coerced():
    vm = VectorMath(np.float32)
    y = np.zeros(3, dtype=np.float32)
    vm.set(y, 0.1, 3)

    npt.assert_array_equal(y, np.full(3, np.float32(0.1)))

    x = np.ones(3, dtype=np.float32)
    vm.aadd(y, 2.0, x, 3)
    npt.assert_allclose(y, np.float32(2.1), rtol=1e-6)


def test_float32_reductions():
    vm = VectorMath(np.float32)
    x = np.array([1.0, 2.0, 3.0], dtype=np.float32)

    assert vm.sum(x, 3) == 6.0
    assert vm.dot(x, x, 3) == 14.0
    assert vm.sumlog(x, 3) == pytest.approx(math.log(6.0), rel=1e-6)
    for result in (vm.sum(x, 3), vm.dot(x, x, 3), vm.sumlog(x, 3)):
        assert isinstance(result, np.float32)


def test_float32_reductions_round_in_single_precision():
    vm = VectorMath(np.float32)
    eps = 2.0**-24
    x = np.array([1.0, eps, eps], dtype=np.float32)
    h = np.array([1.0, 2.0**-12, 2.0**-12], dtype=np.float32)

    # 1 + 2**-24 rounds back to 1 in float32, twice
    assert vm.sum(x, 3) == np.float32(1.0)
    assert vm.dot(h, h, 3) == np.float32(1.0)
    assert VectorMath(np.float64).sum(x.astype(np.float64), 3) == 1.0 + 2 * eps


def test_float32_sum_matches_sequential_single_precision():
    vm = VectorMath(np.float32)
    x = np.full(10_000, 0.1, dtype=np.float32)
    expected = np.cumsum(x, dtype=np.float32)[-1]

    assert vm.sum(x, x.size) == expected
    assert vm.sum(x, x.size) != np.float32(np.sum(x, dtype=np.float64))


def test_float64_reductions_return_float64():
    vm = VectorMath()
    x = np.array([1.0, 2.0, 3.0])

    assert isinstance(vm.sum(x, 3), np.float64)
    assert isinstance(vm.dot(x, x, 3), np.float64)
    assert vm.sum(x, 0) == 0.0


@pytest.mark.parametrize("cls", [VectorMath, CheckedVectorMath])
def test_concrete_walkthrough(cls):
    vm = cls()
    x = np.array([1.0, 2.0, 3.0])

    assert vm.sum(x, 3) == 6.0
    assert vm.dot(x, x, 3) == 14.0

    vm.scale(x, 2, 3)
    npt.assert_array_equal(x, [2.0, 4.0, 6.0])

    vm.inv(x, 3)
    npt.assert_allclose(x, [0.5, 0.25, 1.0 / 6.0])


def test_checked_matches_unchecked():
    rng = np.random.default_rng(1)
    x = rng.normal(size=25)
    y = rng.normal(size=25)

    fast, checked = VectorMath(), CheckedVectorMath()
    y_fast, y_checked = y.copy(), y.copy()

    for vm, out in ((fast, y_fast), (checked, y_checked)):
        vm.aadd(out, 0.25, x, 25)
        vm.mul(out, x, 25)
        vm.asub(out, 2.0, x, 25)
        vm.exp(out, 25)

    npt.assert_array_equal(y_fast, y_checked)
    assert fast.dot(x, y, 25) == checked.dot(x, y, 25)


def test_checked_rejects_short_buffers():
    vm = CheckedVectorMath()

    with pytest.raises(ValueError):
        vm.zero(np.zeros(2), 3)
    with pytest.raises(ValueError):
        vm.add(np.zeros(4), np.zeros(2), 3)
    with pytest.raises(ValueError):
        vm.dot(np.zeros(4), np.zeros(2), 3)


def test_checked_rejects_bad_n():
    vm = CheckedVectorMath()

    with pytest.raises(ValueError):
        vm.sum(np.zeros(2), -1)
    with pytest.raises(TypeError):
        vm.sum(np.zeros(2), 1.0)
    with pytest.raises(TypeError):
        vm.sum(np.zeros(2), True)

    assert vm.sum(np.ones(2), np.int64(2)) == 2.0


def test_checked_rejects_wrong_types():
    vm = CheckedVectorMath()

    with pytest.raises(TypeError):
        vm.sum([1.0, 2.0], 2)
    with pytest.raises(TypeError):
        vm.add(np.zeros(3), np.zeros(3, dtype=np.float32), 3)
    with pytest.raises(TypeError):
        CheckedVectorMath(np.float32).zero(np.zeros(3), 3)


def test_checked_rejects_bad_layout():
    vm = CheckedVectorMath()

    with pytest.raises(ValueError):
        vm.zero(np.zeros((2, 2)), 2)
    with pytest.raises(ValueError):
        vm.zero(np.zeros(10)[::2], 5)

    frozen = np.zeros(3)
    frozen.flags.writeable = False
    with pytest.raises(ValueError):
        vm.set(frozen, 1.0, 3)


def test_checked_rejects_partial_aliasing():
    vm = CheckedVectorMath()
    buf = np.arange(10.0)

    with pytest.raises(ValueError):
        vm.add(buf[1:6], buf[0:5], 5)
    with pytest.raises(ValueError):
        vm.copy(buf[0:5], buf[4:9], 5)

    # Disjoint halves of one allocation are fine.
    vm.add(buf[0:5], buf[5:10], 5)
    npt.assert_array_equal(buf[:5], [5.0, 7.0, 9.0, 11.0, 13.0])


def test_checked_allows_identical_buffers():
    vm = CheckedVectorMath()
    x = np.array([1.0, 2.0, 3.0])

    vm.add(x, x, 3)
    npt.assert_array_equal(x, [2.0, 4.0, 6.0])

    vm.mul(x[:], x, 3)
    npt.assert_array_equal(x, [4.0, 16.0, 36.0])

    assert vm.dot(x, x, 3) == 16.0 + 256.0 + 1296.0


def test_repr():
    assert repr(VectorMath(np.float32)) == "VectorMath(dtype=float32)"
    assert repr(CheckedVectorMath()) == "CheckedVectorMath(dtype=float64)"
