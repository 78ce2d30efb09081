"""Binary search over sorted sequences.

All functions in this module are pure: they never modify the sequence they are given, keep no state
between calls and can be used concurrently on the same sequence. The sequence must be sorted in
non-decreasing order with respect to the comparison in use. This is a precondition which is not
verified; for unsorted input the returned index is unspecified.

By default, elements are compared to the target by their natural ordering (``==`` and ``<``).
Sequences of any other element type can be searched by passing a three-way comparator
``cmp(element, target)``, see :mod:`sortsearch.compare`.

One-dimensional numpy arrays of integers or floats searched with the natural ordering are handled
by compiled kernels whenever the target is exactly representable in the element type of the array,
see :mod:`sortsearch.accel`; otherwise the same comparisons as for any other sequence apply. For
such arrays, the target may also be an array of targets, in which case an array of indices of the
same shape is returned.
"""

from collections.abc import Callable, Sequence
from typing import Any

import numpy as np

from sortsearch.accel import (
    find_first_array,
    find_insertion_point_array,
    find_last_array,
    has_kernel_dtype,
    is_numeric_array,
    is_numeric_target,
    search_array,
)
from sortsearch.compare import Comparator, natural_order

NOT_FOUND = -1


class InvalidArgument(ValueError):
    """Raised when a search is invoked without a sequence to search in."""


def search(
    sequence: Sequence | np.ndarray | None,
    target: Any,
    cmp: Comparator | None = None,
) -> int | np.ndarray:
    """Find the index of ``target`` in the sorted ``sequence`` by iterative bisection.

    If the target occurs more than once, the index of any one of its occurrences is returned;
    use :func:`find_first` or :func:`find_last` to get a specific one.

    :param sequence: the sorted sequence to search in; may be empty but not None
    :param target: the value to search for
    :param cmp: a three-way comparator ``cmp(element, target)``; if None, the natural ordering of
        the elements is used
    :return: an index ``i`` with ``sequence[i] == target``, or -1 if the target does not occur
    :raises InvalidArgument: if ``sequence`` is None
    """
    _check_not_none(sequence)
    index = _accelerate(search_array, search, sequence, target, cmp)
    if index is not None:
        return index
    if len(sequence) == 0:
        return NOT_FOUND
    compare = natural_order if cmp is None else cmp
    left = 0
    right = len(sequence) - 1
    while left <= right:
        # left + (right - left) // 2 stays within the index range, unlike (left + right) // 2
        mid = left + (right - left) // 2
        c = compare(sequence[mid], target)
        if c == 0:
            return mid
        elif c < 0:
            left = mid + 1
        else:
            right = mid - 1
    return NOT_FOUND


def search_recursive(
    sequence: Sequence | np.ndarray | None,
    target: Any,
    cmp: Comparator | None = None,
) -> int | np.ndarray:
    """Recursive variant of :func:`search`, returning the same index for every input.

    The recursion depth is logarithmic in the length of the sequence.

    :param sequence: the sorted sequence to search in; may be empty but not None
    :param target: the value to search for
    :param cmp: a three-way comparator ``cmp(element, target)``; if None, the natural ordering of
        the elements is used
    :return: an index ``i`` with ``sequence[i] == target``, or -1 if the target does not occur
    :raises InvalidArgument: if ``sequence`` is None
    """
    _check_not_none(sequence)
    if _is_batch(sequence, target, cmp):
        return _each(search_recursive, sequence, target)
    compare = natural_order if cmp is None else cmp
    return _search_between(sequence, target, compare, 0, len(sequence) - 1)


def _search_between(
    sequence: Sequence | np.ndarray,
    target: Any,
    compare: Comparator,
    left: int,
    right: int,
) -> int:
    if left > right:
        return NOT_FOUND
    mid = left + (right - left) // 2
    c = compare(sequence[mid], target)
    if c == 0:
        return mid
    elif c < 0:
        return _search_between(sequence, target, compare, mid + 1, right)
    else:
        return _search_between(sequence, target, compare, left, mid - 1)


def find_first(
    sequence: Sequence | np.ndarray | None,
    target: Any,
    cmp: Comparator | None = None,
) -> int | np.ndarray:
    """Find the index of the first occurrence of ``target`` in the sorted ``sequence``.

    Unlike :func:`search`, a None sequence is not an error but simply contains nothing.

    :param sequence: the sorted sequence to search in, possibly containing duplicates
    :param target: the value to search for
    :param cmp: a three-way comparator ``cmp(element, target)``; if None, the natural ordering of
        the elements is used
    :return: the smallest index ``i`` with ``sequence[i] == target``, or -1 if the target does not
        occur or ``sequence`` is None or empty
    """
    if sequence is None:
        return NOT_FOUND
    index = _accelerate(find_first_array, find_first, sequence, target, cmp)
    if index is not None:
        return index
    if len(sequence) == 0:
        return NOT_FOUND
    compare = natural_order if cmp is None else cmp
    left = 0
    right = len(sequence) - 1
    result = NOT_FOUND
    while left <= right:
        mid = left + (right - left) // 2
        c = compare(sequence[mid], target)
        if c == 0:
            # keep looking for an earlier occurrence
            result = mid
            right = mid - 1
        elif c < 0:
            left = mid + 1
        else:
            right = mid - 1
    return result


def find_last(
    sequence: Sequence | np.ndarray | None,
    target: Any,
    cmp: Comparator | None = None,
) -> int | np.ndarray:
    """Find the index of the last occurrence of ``target`` in the sorted ``sequence``.

    Unlike :func:`search`, a None sequence is not an error but simply contains nothing.

    :param sequence: the sorted sequence to search in, possibly containing duplicates
    :param target: the value to search for
    :param cmp: a three-way comparator ``cmp(element, target)``; if None, the natural ordering of
        the elements is used
    :return: the largest index ``i`` with ``sequence[i] == target``, or -1 if the target does not
        occur or ``sequence`` is None or empty
    """
    if sequence is None:
        return NOT_FOUND
    index = _accelerate(find_last_array, find_last, sequence, target, cmp)
    if index is not None:
        return index
    if len(sequence) == 0:
        return NOT_FOUND
    compare = natural_order if cmp is None else cmp
    left = 0
    right = len(sequence) - 1
    result = NOT_FOUND
    while left <= right:
        mid = left + (right - left) // 2
        c = compare(sequence[mid], target)
        if c == 0:
            # keep looking for a later occurrence
            result = mid
            left = mid + 1
        elif c < 0:
            left = mid + 1
        else:
            right = mid - 1
    return result


def find_insertion_point(
    sequence: Sequence | np.ndarray | None,
    target: Any,
    cmp: Comparator | None = None,
) -> int | np.ndarray:
    """Find the leftmost position at which ``target`` can be inserted into the sorted ``sequence``
    without breaking its order (the lower bound of ``target``).

    The returned index ``p`` satisfies ``0 <= p <= len(sequence)``, all elements before ``p`` are
    less than ``target`` and all elements at or after ``p`` are greater than or equal to it. If the
    target already occurs in the sequence, ``p`` is the index of its first occurrence.

    :param sequence: the sorted sequence; may be empty (yielding 0) but not None
    :param target: the value to be inserted
    :param cmp: a three-way comparator ``cmp(element, target)``; if None, the natural ordering of
        the elements is used
    :return: the insertion point
    :raises InvalidArgument: if ``sequence`` is None
    """
    _check_not_none(sequence)
    index = _accelerate(find_insertion_point_array, find_insertion_point, sequence, target, cmp)
    if index is not None:
        return index
    compare = natural_order if cmp is None else cmp
    left = 0
    right = len(sequence) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if compare(sequence[mid], target) < 0:
            left = mid + 1
        else:
            right = mid - 1
    return left


def _check_not_none(sequence: Sequence | np.ndarray | None) -> None:
    if sequence is None:
        raise InvalidArgument("sequence must not be None")


def _is_batch(sequence: Sequence | np.ndarray, target: Any, cmp: Comparator | None) -> bool:
    """Return whether ``target`` is an array of targets.

    :raises InvalidArgument: if ``sequence`` is a numpy array which is not one-dimensional, or if
        an array of targets is given for a sequence or comparison it cannot be used with
    """
    if isinstance(sequence, np.ndarray) and sequence.ndim != 1:
        raise InvalidArgument(
            f"sequence must be one-dimensional, got an array of shape {sequence.shape}",
        )
    if not isinstance(target, np.ndarray) or target.ndim == 0:
        return False
    if cmp is not None or not is_numeric_array(sequence) or not is_numeric_array(target):
        raise InvalidArgument(
            "An array of targets can only be searched for in a one-dimensional numeric array "
            "without a comparator",
        )
    return True


def _each(fn: Callable, sequence: np.ndarray, targets: np.ndarray) -> np.ndarray:
    index = np.array([fn(sequence, t) for t in targets.ravel()], dtype=np.int64)
    return index.reshape(targets.shape)


def _accelerate(
    kernel_fn: Callable,
    fn: Callable,
    sequence: Sequence | np.ndarray,
    target: Any,
    cmp: Comparator | None,
) -> int | np.ndarray | None:
    """Answer the query with the compiled kernel ``kernel_fn`` if possible.

    Arrays of targets the kernel cannot take are answered target by target with ``fn``.

    :return: the result, or None if the query is to be answered by the Python loops
    """
    batch = _is_batch(sequence, target, cmp)
    index = None
    if cmp is None and has_kernel_dtype(sequence) and is_numeric_target(target):
        index = kernel_fn(sequence, target)
    if index is None and batch:
        index = _each(fn, sequence, target)
    return index
