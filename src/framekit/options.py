"""
Framing and XOF option classes.

Provides typed, validated options for the frame writer/reader and the
extendable-output hash facade.
"""

from __future__ import annotations
from typing import Any, Dict, Literal
from pydantic import BaseModel, Field, field_validator

from .util.bytes import DEFAULT_LENGTH_PREFIX_BYTES


class FramingOptions(BaseModel):
    """
    Options shared by every frame in a stream.

    The length prefix width must be agreed on by writer and reader.
    """
    length_prefix_bytes: int = Field(
        default=DEFAULT_LENGTH_PREFIX_BYTES,
        ge=1,
        alias="lengthPrefixBytes",
        description="Width of the big-endian length prefix in bytes",
    )

    model_config = {"populate_by_name": True, "frozen": True}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dictionary."""
        return {"lengthPrefixBytes": self.length_prefix_bytes}


class XofOptions(BaseModel):
    """
    Options for SHAKE and cSHAKE requests.

    With empty function_name and customization, cSHAKE is plain SHAKE.
    """
    bits: Literal[128, 256] = Field(description="Security strength selector")
    output_length_bits: int = Field(
        ge=0,
        alias="outputLengthBits",
        description="Requested output length in bits (whole bytes only)",
    )
    function_name: str = Field(default="", alias="functionName", description="Function-name string N")
    customization: str = Field(default="", description="Customization string S")

    model_config = {"populate_by_name": True, "frozen": True}

    @field_validator("output_length_bits")
    @classmethod
    def validate_output_length(cls, v: int) -> int:
        if v % 8 != 0:
            raise ValueError("output length must be a multiple of 8 bits")
        return v

    @property
    def output_length_bytes(self) -> int:
        return self.output_length_bits // 8

    @property
    def is_plain_shake(self) -> bool:
        return not self.function_name and not self.customization

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a camelCase dictionary."""
        result: Dict[str, Any] = {
            "bits": self.bits,
            "outputLengthBits": self.output_length_bits,
        }
        if self.function_name:
            result["functionName"] = self.function_name
        if self.customization:
            result["customization"] = self.customization
        return result


__all__ = [
    "FramingOptions",
    "XofOptions",
]
