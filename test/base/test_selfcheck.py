from sortsearch.config import SelfCheckConfig
from sortsearch.selfcheck import SelfCheckResult, main


def test_selfcheck_numpy() -> None:
    result = main(SelfCheckConfig(num_trials=200))
    assert result.ok, result.failed
    assert result.num_passed > 0


def test_selfcheck_lists() -> None:
    result = main(SelfCheckConfig(num_trials=200, use_numpy=False, value_range=3))
    assert result.ok, result.failed


def test_result_records_failures() -> None:
    result = SelfCheckResult()
    result.record("a", True)
    result.record("b", False)
    assert result.num_passed == 1
    assert result.failed == ["b"]
    assert not result.ok
