from typing import Any

import numpy as np
from numba import njit
from sensai.util import logging

log = logging.getLogger(__name__)


def is_numeric_array(x: Any) -> bool:
    """Return whether ``x`` is a numpy array of integers or floats."""
    return isinstance(x, np.ndarray) and (
        np.issubdtype(x.dtype, np.integer) or np.issubdtype(x.dtype, np.floating)
    )


_KERNEL_DTYPES = frozenset(
    np.dtype(t)
    for t in (
        np.int8,
        np.int16,
        np.int32,
        np.int64,
        np.uint8,
        np.uint16,
        np.uint32,
        np.uint64,
        np.float32,
        np.float64,
    )
)


def has_kernel_dtype(arr: Any) -> bool:
    """Return whether ``arr`` is a numeric array the compiled kernels can be applied to.

    Numba supports neither half nor extended precision floats, nor non-native byte order.
    """
    return is_numeric_array(arr) and arr.dtype.isnative and arr.dtype in _KERNEL_DTYPES


_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def is_numeric_target(target: Any) -> bool:
    """Return whether ``target``, a scalar or an array of targets, is an integer or float."""
    if isinstance(target, np.ndarray):
        return is_numeric_array(target)
    if isinstance(target, bool | np.bool_):
        return False
    if isinstance(target, int):
        return _INT64_MIN <= target <= _INT64_MAX
    return isinstance(target, float | np.integer | np.floating)


def cast_targets(arr: np.ndarray, target: Any) -> np.ndarray | None:
    """Convert ``target`` to a flat array of the element type of ``arr``.

    The kernels compare in the element type of ``arr``, which agrees with the comparison of the
    original values only if no target changes its value in the conversion.

    :return: the converted targets, or None if a target is not exactly representable
    """
    if not isinstance(target, np.ndarray):
        try:
            with np.errstate(all="ignore"):
                cast = arr.dtype.type(target)
        except (OverflowError, ValueError):
            return None
        original = target.item() if isinstance(target, np.generic) else target
        if cast.item() != original:
            return None
        return np.array([cast], dtype=arr.dtype)
    targets = target.ravel()
    with np.errstate(all="ignore"):
        cast = targets.astype(arr.dtype)
    if not np.can_cast(targets.dtype, arr.dtype, casting="safe"):
        if any(c != t for c, t in zip(cast.tolist(), targets.tolist(), strict=True)):
            return None
    return cast


def search_array(arr: np.ndarray, target: Any) -> int | np.ndarray | None:
    """Compiled counterpart of :func:`sortsearch.search.search` for a 1-d numeric array."""
    return _apply(_search, arr, target)


def find_first_array(arr: np.ndarray, target: Any) -> int | np.ndarray | None:
    """Compiled counterpart of :func:`sortsearch.search.find_first` for a 1-d numeric array."""
    return _apply(_find_first, arr, target)


def find_last_array(arr: np.ndarray, target: Any) -> int | np.ndarray | None:
    """Compiled counterpart of :func:`sortsearch.search.find_last` for a 1-d numeric array."""
    return _apply(_find_last, arr, target)


def find_insertion_point_array(arr: np.ndarray, target: Any) -> int | np.ndarray | None:
    """Compiled counterpart of :func:`sortsearch.search.find_insertion_point` for 1-d arrays."""
    return _apply(_find_insertion_point, arr, target)


def _apply(kernel: Any, arr: np.ndarray, target: Any) -> int | np.ndarray | None:
    """Run ``kernel`` on a single target or on every entry of a target array.

    A scalar target is searched as a batch of one and the index is returned as a python int;
    an array of targets yields an int64 index array of the same shape. None is returned if the
    targets cannot be converted to the element type of ``arr`` without changing their value.
    """
    targets = cast_targets(arr, target)
    if targets is None:
        return None
    index = kernel(arr, targets)
    if not isinstance(target, np.ndarray):
        return index.item()
    return index.reshape(target.shape)


def pre_compile() -> None:
    """Since Numba needs to compile each kernel on its first call, trigger the compilation
    for the common array types with some fake data, so that the first real query is fast.
    """
    i64 = np.array([0, 1], dtype=np.int64)
    f64 = np.array([0, 1], dtype=np.float64)
    f32 = np.array([0, 1], dtype=np.float32)
    for kernel in (_search, _find_first, _find_last, _find_insertion_point):
        kernel(i64, i64)
        kernel(f64, f64)
        kernel(f32, f32)
    log.debug("Compiled search kernels for int64, float64 and float32 arrays")


@njit
def _search(arr: np.ndarray, targets: np.ndarray) -> np.ndarray:
    result = np.empty(targets.shape[0], dtype=np.int64)
    for i in range(targets.shape[0]):
        target = targets[i]
        result[i] = -1
        left = 0
        right = arr.shape[0] - 1
        while left <= right:
            mid = left + (right - left) // 2
            if arr[mid] == target:
                result[i] = mid
                break
            elif arr[mid] < target:
                left = mid + 1
            else:
                right = mid - 1
    return result


@njit
def _find_first(arr: np.ndarray, targets: np.ndarray) -> np.ndarray:
    result = np.empty(targets.shape[0], dtype=np.int64)
    for i in range(targets.shape[0]):
        target = targets[i]
        found = -1
        left = 0
        right = arr.shape[0] - 1
        while left <= right:
            mid = left + (right - left) // 2
            if arr[mid] == target:
                found = mid
                right = mid - 1
            elif arr[mid] < target:
                left = mid + 1
            else:
                right = mid - 1
        result[i] = found
    return result


@njit
def _find_last(arr: np.ndarray, targets: np.ndarray) -> np.ndarray:
    result = np.empty(targets.shape[0], dtype=np.int64)
    for i in range(targets.shape[0]):
        target = targets[i]
        found = -1
        left = 0
        right = arr.shape[0] - 1
        while left <= right:
            mid = left + (right - left) // 2
            if arr[mid] == target:
                found = mid
                left = mid + 1
            elif arr[mid] < target:
                left = mid + 1
            else:
                right = mid - 1
        result[i] = found
    return result


@njit
def _find_insertion_point(arr: np.ndarray, targets: np.ndarray) -> np.ndarray:
    result = np.empty(targets.shape[0], dtype=np.int64)
    for i in range(targets.shape[0]):
        target = targets[i]
        left = 0
        right = arr.shape[0] - 1
        # no early exit on equality, equal elements still narrow to the left
        while left <= right:
            mid = left + (right - left) // 2
            if arr[mid] < target:
                left = mid + 1
            else:
                right = mid - 1
        result[i] = left
    return result
