"""
Framekit Frame Codec Module

Stream-oriented writing and reading of length-prefixed frames.

Key components:
- writer.py: FrameWriter, appends byte/integer/string frames to a buffer
- reader.py: FrameReader, decodes the same frames back
"""

from .reader import FrameReader
from .writer import FrameWriter

__all__ = [
    "FrameReader",
    "FrameWriter",
]
