"""
Test bootstrap:
- Make src/ and tests/ importable at collection time
- Provide common framing options
"""
import pathlib
import sys

import pytest

TESTS_DIR = pathlib.Path(__file__).parent.resolve()
SRC = TESTS_DIR.parent / "src"

for p in (SRC, TESTS_DIR):
    if str(p) not in sys.path:
        sys.path.insert(0, str(p))


@pytest.fixture
def two_byte_options():
    """Framing options with a 2-byte length prefix."""
    from framekit.options import FramingOptions

    return FramingOptions(length_prefix_bytes=2)
