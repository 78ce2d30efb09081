from sortsearch.compare import Comparator, by_key, natural_order, reverse_order
from sortsearch.search import (
    InvalidArgument,
    find_first,
    find_insertion_point,
    find_last,
    search,
    search_recursive,
)

__version__ = "1.0.0"


def _register_log_config_callback() -> None:
    from sensai.util import logging

    def configure() -> None:
        logging.getLogger("numba").setLevel(logging.INFO)

    logging.set_configure_callback(configure)


_register_log_config_callback()


__all__ = [
    "Comparator",
    "InvalidArgument",
    "by_key",
    "find_first",
    "find_insertion_point",
    "find_last",
    "natural_order",
    "reverse_order",
    "search",
    "search_recursive",
]
