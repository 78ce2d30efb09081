"""Command line self-check of the search functions.

Runs the named scenarios (normal case, missing elements, boundaries, duplicates, insertion
points, non-numeric elements and None handling) followed by property checks on randomly
generated sorted sequences, logging PASS or FAIL for each::

    python -m sortsearch.selfcheck --config.num_trials 5000 --config.use_numpy false
"""

import sys
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from sensai.util import logging

from sortsearch.config import SelfCheckConfig
from sortsearch.search import (
    InvalidArgument,
    find_first,
    find_insertion_point,
    find_last,
    search,
    search_recursive,
)

log = logging.getLogger(__name__)


@dataclass
class SelfCheckResult:
    num_passed: int = 0
    failed: list[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return len(self.failed) == 0

    def record(self, name: str, passed: bool) -> None:
        if passed:
            self.num_passed += 1
        else:
            self.failed.append(name)


def _raises_invalid_argument(fn: Callable[..., Any]) -> bool:
    try:
        fn(None, 5)
    except InvalidArgument:
        return True
    return False


def _check_scenarios(result: SelfCheckResult) -> None:
    arr = [2, 4, 6, 8, 10, 12, 14]
    with_duplicates = [1, 2, 2, 2, 3, 4, 4, 5]
    sorted_arr = [1, 3, 5, 7, 9]
    strings = ["apple", "banana", "cherry", "date", "elderberry"]
    scenarios: list[tuple[str, Callable[[], Any], Any]] = [
        ("Normal case", lambda: search(arr, 10), 4),
        ("Element not found", lambda: search(arr, 5), -1),
        ("First element", lambda: search(arr, 2), 0),
        ("Last element", lambda: search(arr, 14), 6),
        ("Empty array", lambda: search([], 5), -1),
        ("Single element (found)", lambda: search([5], 5), 0),
        ("Single element (not found)", lambda: search([5], 3), -1),
        ("Two elements (first)", lambda: search([3, 7], 3), 0),
        ("Two elements (second)", lambda: search([3, 7], 7), 1),
        ("Two elements (not found)", lambda: search([3, 7], 5), -1),
        ("Recursive (found)", lambda: search_recursive(arr, 12), 5),
        ("Recursive (not found)", lambda: search_recursive(arr, 13), -1),
        ("First occurrence of 2", lambda: find_first(with_duplicates, 2), 1),
        ("Last occurrence of 2", lambda: find_last(with_duplicates, 2), 3),
        ("First occurrence of 4", lambda: find_first(with_duplicates, 4), 5),
        ("Last occurrence of 4", lambda: find_last(with_duplicates, 4), 6),
        ("Insertion point for 0", lambda: find_insertion_point(sorted_arr, 0), 0),
        ("Insertion point for 4", lambda: find_insertion_point(sorted_arr, 4), 2),
        ("Insertion point for 10", lambda: find_insertion_point(sorted_arr, 10), 5),
        ("Strings (found)", lambda: search(strings, "cherry"), 2),
        ("Strings (not found)", lambda: search(strings, "grape"), -1),
        ("None raises in search", lambda: _raises_invalid_argument(search), True),
        (
            "None raises in search_recursive",
            lambda: _raises_invalid_argument(search_recursive),
            True,
        ),
        (
            "None raises in find_insertion_point",
            lambda: _raises_invalid_argument(find_insertion_point),
            True,
        ),
        ("None not found in find_first", lambda: find_first(None, 5), -1),
        ("None not found in find_last", lambda: find_last(None, 5), -1),
    ]
    for name, fn, expected in scenarios:
        actual = fn()
        passed = actual == expected
        result.record(name, passed)
        if passed:
            log.info(f"{name:<36}: result={actual}, expected={expected} PASS")
        else:
            log.error(f"{name:<36}: result={actual}, expected={expected} FAIL")


def _check_properties(seq: Any, target: Any) -> list[str]:
    """Check the results for one sequence and target against a linear scan and return the names of
    the violated properties.
    """
    values = list(seq)
    occurrences = [i for i, x in enumerate(values) if x == target]
    violated = []
    index = search(seq, target)
    if occurrences:
        if index not in occurrences:
            violated.append("search")
    elif index != -1:
        violated.append("search")
    if search_recursive(seq, target) != index:
        violated.append("search_recursive")
    if find_first(seq, target) != (occurrences[0] if occurrences else -1):
        violated.append("find_first")
    if find_last(seq, target) != (occurrences[-1] if occurrences else -1):
        violated.append("find_last")
    if find_insertion_point(seq, target) != sum(x < target for x in values):
        violated.append("find_insertion_point")
    return violated


def _check_random(config: SelfCheckConfig, result: SelfCheckResult) -> None:
    rng = np.random.default_rng(config.seed)
    num_violations: dict[str, int] = {}
    for _ in range(config.num_trials):
        length = rng.integers(0, config.max_length + 1)
        arr = np.sort(rng.integers(-config.value_range, config.value_range + 1, size=length))
        target = rng.integers(-config.value_range - 1, config.value_range + 2)
        seq = arr if config.use_numpy else arr.tolist()
        target = int(target)
        for name in _check_properties(seq, target):
            num_violations[name] = num_violations.get(name, 0) + 1
            log.debug(f"{name} violated for target={target}, sequence={list(seq)}")
    for name in ("search", "search_recursive", "find_first", "find_last", "find_insertion_point"):
        count = num_violations.get(name, 0)
        result.record(f"Random {name}", count == 0)
        if count == 0:
            log.info(f"Random {name:<29}: {config.num_trials} trials PASS")
        else:
            log.error(f"Random {name:<29}: {count}/{config.num_trials} trials FAIL")


def main(config: SelfCheckConfig) -> SelfCheckResult:
    result = SelfCheckResult()
    log.info("=== Scenario checks ===")
    _check_scenarios(result)
    log.info("=== Randomised property checks ===")
    _check_random(config, result)
    if result.ok:
        log.info(f"All {result.num_passed} checks passed")
    else:
        log.error(f"{len(result.failed)} checks failed: {result.failed}")
    return result


if __name__ == "__main__":
    check_result = logging.run_cli(main, level=logging.INFO)
    sys.exit(0 if check_result.ok else 1)
