"""Absolute analog sensor and counter input subrecords."""

from __future__ import annotations

from dataclasses import dataclass

from .types import BinaryData, EgtsError

__all__ = ["SrAbsAnSensData", "SrAbsCntrData"]


@dataclass
class SrAbsAnSensData(BinaryData):
    """EGTS_SR_ABS_AN_SENS_DATA: state of one analog input."""

    sensor_number: int = 0
    value: int = 0

    @classmethod
    def decode(cls, content: bytes) -> SrAbsAnSensData:
        """Build the subrecord from its binary form."""
        if len(content) < 4:
            raise EgtsError("invalid abs_an_sens_data length")
        return cls(
            sensor_number=content[0],
            value=int.from_bytes(content[1:4], "little"),
        )

    def encode(self) -> bytes:
        """Return the binary form of the subrecord."""
        return bytes([self.sensor_number & 0xFF]) + (self.value & 0xFFFFFF).to_bytes(
            3, "little"
        )

    def length(self) -> int:
        """Return the encoded length, which is always 4."""
        return 4


@dataclass
class SrAbsCntrData(BinaryData):
    """EGTS_SR_ABS_CNTR_DATA: state of one counter input."""

    counter_number: int = 0
    counter_value: int = 0

    @classmethod
    def decode(cls, content: bytes) -> SrAbsCntrData:
        """Build the subrecord from its binary form."""
        if not content:
            raise EgtsError("cannot read counter number")
        value_bytes = content[1:4]
        if not value_bytes:
            raise EgtsError("cannot read counter value")
        return cls(
            counter_number=content[0],
            counter_value=int.from_bytes(value_bytes, "little"),
        )

    def encode(self) -> bytes:
        """Return the binary form of the subrecord."""
        return bytes([self.counter_number & 0xFF]) + (
            self.counter_value & 0xFFFFFF
        ).to_bytes(3, "little")

    def length(self) -> int:
        """Return the encoded length in bytes."""
        return len(self.encode())