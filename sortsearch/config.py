from dataclasses import dataclass

from jsonargparse import set_docstring_parse_options

set_docstring_parse_options(attribute_docstrings=True)


@dataclass
class SelfCheckConfig:
    """Config of the self-check, which runs fixed scenarios and randomised property checks."""

    seed: int = 42
    num_trials: int = 1000
    """Number of randomly generated sorted sequences to check the search functions on"""
    max_length: int = 64
    """Maximum length of a generated sequence"""
    value_range: int = 20
    """Elements are drawn from [-value_range, value_range]; a small range yields many duplicates"""
    use_numpy: bool = True
    """If True, generated sequences are numpy arrays (compiled kernels); otherwise python lists"""
