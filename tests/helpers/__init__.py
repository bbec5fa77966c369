from .parity import assert_hex_equal, unhex

__all__ = [
    "assert_hex_equal",
    "unhex",
]
