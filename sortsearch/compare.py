"""Three-way comparators for searching sequences of arbitrary element types."""

from collections.abc import Callable
from typing import Any

Comparator = Callable[[Any, Any], int]
"""A function ``cmp(element, target)`` returning a negative number, zero or a positive number
if ``element`` is less than, equal to or greater than ``target``."""


def sign(x: int | float) -> int:
    """Normalise the result of a comparator to -1, 0 or 1."""
    return (x > 0) - (x < 0)


def natural_order(a: Any, b: Any) -> int:
    """Compare two values by their natural ordering, i.e. ``<`` and ``==``."""
    if a == b:
        return 0
    return -1 if a < b else 1


def reverse_order(cmp: Comparator = natural_order) -> Comparator:
    """Return a comparator for sequences sorted in descending order of ``cmp``.

    :param cmp: the ordering the sequence is the reverse of
    """

    def reversed_cmp(a: Any, b: Any) -> int:
        return -sign(cmp(a, b))

    return reversed_cmp


def by_key(key: Callable[[Any], Any], cmp: Comparator = natural_order) -> Comparator:
    """Return a comparator that compares ``key(element)`` with the target.

    As with the ``key`` argument of :func:`bisect.bisect_left`, the key is applied to the
    elements of the sequence only; the target is expected to already be a key value.

    :param key: function extracting the sort key from an element
    :param cmp: the ordering of the keys
    """

    def key_cmp(element: Any, target: Any) -> int:
        return cmp(key(element), target)

    return key_cmp
