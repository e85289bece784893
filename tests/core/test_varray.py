# topmark:header:start
#
#   project      : UtilCore
#   file         : test_varray.py
#   file_relpath : tests/core/test_varray.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit and property tests for `IntVarray`.

Properties checked for any growth increment:
1) after N appends, ``length == N`` and elements read back in append order;
2) capacity follows the resize policy (power of two, or multiple of k).
"""

from __future__ import annotations

import logging

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from utilcore.core.errors import (
    AllocationError,
    CapacityOverflowError,
    ErrorKind,
    FatalError,
)
from utilcore.core.varray import IntVarray

INT64 = st.integers(min_value=-(2**63), max_value=2**63 - 1)


def _is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def test_new_sequence_is_empty_and_unallocated() -> None:
    """A fresh sequence has no elements and no capacity."""
    a = IntVarray(5)
    assert a.length == 0
    assert a.capacity == 0
    assert a.growth_increment == 5
    assert len(a) == 0
    assert a.tolist() == []


def test_doubling_policy_capacities() -> None:
    """Growth increments <= 1 double the capacity, starting from one slot."""
    a = IntVarray(1)
    seen: list[int] = []
    for i in range(9):
        a.append(i)
        seen.append(a.capacity)
    assert seen == [1, 2, 4, 4, 8, 8, 8, 8, 16]


def test_fixed_increment_policy_capacities() -> None:
    """Growth increments > 1 add exactly that many slots when full."""
    a = IntVarray(3)
    seen: list[int] = []
    for i in range(7):
        a.append(i)
        seen.append(a.capacity)
    assert seen == [3, 3, 3, 6, 6, 6, 9]


def test_sequence_protocol() -> None:
    """Indexing, negative indexing, iteration and repr work on logical elements."""
    a = IntVarray()
    a.extend([10, 20, 30])
    assert a[0] == 10
    assert a[-1] == 30
    assert list(a) == [10, 20, 30]
    assert "length=3" in repr(a)
    with pytest.raises(IndexError):
        _ = a[3]  # capacity is 4, but slot 3 is not a logical element
    with pytest.raises(IndexError):
        _ = a[-4]


def test_release_resets_and_is_idempotent() -> None:
    """Release frees storage and can be called repeatedly."""
    a = IntVarray(4)
    a.extend(range(10))
    a.release()
    assert (a.length, a.capacity, a.growth_increment) == (0, 0, 0)
    a.release()
    assert (a.length, a.capacity, a.growth_increment) == (0, 0, 0)
    IntVarray().release()


def test_sequence_is_usable_after_release() -> None:
    """After release the sequence grows again with the doubling policy."""
    a = IntVarray(10)
    a.append(1)
    a.release()
    a.append(2)
    assert a.tolist() == [2]
    assert a.capacity == 1


def test_value_out_of_range_raises_overflow() -> None:
    """Values must fit in a signed 64-bit slot."""
    a = IntVarray()
    with pytest.raises(OverflowError):
        a.append(2**63)


def test_capacity_overflow_is_fatal_and_checked_before_allocating(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
) -> None:
    """Exceeding the addressable size raises before any storage is added."""
    monkeypatch.setattr(IntVarray, "max_capacity", 4)
    a = IntVarray(3)
    a.extend([1, 2, 3])
    with caplog.at_level(logging.CRITICAL, logger="utilcore"):
        with pytest.raises(CapacityOverflowError) as excinfo:
            a.append(4)
    assert isinstance(excinfo.value, FatalError)
    assert excinfo.value.kind is ErrorKind.OVERFLOW_FATAL
    assert a.capacity == 3
    assert a.tolist() == [1, 2, 3]
    assert any(r.levelno == logging.CRITICAL for r in caplog.records)


def test_doubling_overflow(monkeypatch: pytest.MonkeyPatch) -> None:
    """Doubling past the limit is rejected as well."""
    monkeypatch.setattr(IntVarray, "max_capacity", 2)
    a = IntVarray(0)
    a.extend([1, 2])
    with pytest.raises(CapacityOverflowError):
        a.append(3)


def test_allocation_failure_is_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    """A MemoryError while growing surfaces as AllocationError."""
    a = IntVarray()
    monkeypatch.setattr("utilcore.core.varray.bytes", _raise_memory_error, raising=False)
    with pytest.raises(AllocationError) as excinfo:
        a.append(1)
    assert excinfo.value.kind is ErrorKind.ALLOCATION_FAILURE
    assert a.length == 0
    assert a.capacity == 0


def _raise_memory_error(_size: int) -> bytes:
    raise MemoryError


@settings(max_examples=60)
@given(values=st.lists(INT64, max_size=200), growth=st.integers(min_value=-3, max_value=17))
def test_append_reads_back_in_order(values: list[int], growth: int) -> None:
    """N appends give length N and the same values in append order."""
    a = IntVarray(growth)
    for v in values:
        a.append(v)
    assert a.length == len(values)
    assert a.tolist() == values
    assert a.length <= a.capacity


@settings(max_examples=60)
@given(n=st.integers(min_value=0, max_value=300), growth=st.integers(min_value=-3, max_value=1))
def test_doubling_capacity_is_power_of_two(n: int, growth: int) -> None:
    """With growth_increment <= 1, capacity is a power of two >= N (0 for N=0)."""
    a = IntVarray(growth)
    a.extend(range(n))
    if n == 0:
        assert a.capacity == 0
    else:
        assert _is_power_of_two(a.capacity)
        assert a.capacity >= n
        assert a.capacity < 2 * n


@settings(max_examples=60)
@given(n=st.integers(min_value=0, max_value=300), k=st.integers(min_value=2, max_value=50))
def test_fixed_capacity_is_next_multiple(n: int, k: int) -> None:
    """With growth_increment k > 1, capacity is N rounded up to a multiple of k."""
    a = IntVarray(k)
    a.extend(range(n))
    assert a.capacity == -(-n // k) * k


@pytest.mark.hypothesis_slow
@settings(max_examples=500, deadline=None)
@given(
    ops=st.lists(st.one_of(INT64, st.none()), max_size=400),
    growth=st.integers(min_value=-3, max_value=33),
)
def test_interleaved_append_and_release(ops: list[int | None], growth: int) -> None:
    """A model list tracks the sequence through appends and releases (None = release)."""
    a = IntVarray(growth)
    model: list[int] = []
    for op in ops:
        if op is None:
            a.release()
            model.clear()
        else:
            a.append(op)
            model.append(op)
        assert a.tolist() == model
        assert a.length <= a.capacity
