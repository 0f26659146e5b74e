"""Counter inputs subrecord."""

from __future__ import annotations

from dataclasses import dataclass, field

from .types import BinaryData, EgtsError

__all__ = ["SrCountersData"]

_INPUTS = 8
_COUNTER_SIZE = 3


def _false_flags() -> list[bool]:
    return [False] * _INPUTS


def _zeros() -> list[int]:
    return [0] * _INPUTS


@dataclass
class SrCountersData(BinaryData):
    """EGTS_SR_COUNTERS_DATA: values of the counter inputs.

    The lists hold eight entries each; entry ``i`` describes counter ``i + 1``.
    """

    counter_field_exists: list[bool] = field(default_factory=_false_flags)
    counters: list[int] = field(default_factory=_zeros)

    def __post_init__(self) -> None:
        for name in ("counter_field_exists", "counters"):
            values = list(getattr(self, name))
            if len(values) != _INPUTS:
                raise ValueError(f"{name} must hold {_INPUTS} entries")
            setattr(self, name, values)

    @classmethod
    def decode(cls, content: bytes) -> SrCountersData:
        """Build the subrecord from its binary form."""
        if not content:
            raise EgtsError("cannot read flags of counters_data")

        exists = [bool(content[0] >> bit & 1) for bit in range(_INPUTS)]
        counters = _zeros()
        pos = 1
        for index, present in enumerate(exists):
            if not present:
                continue
            chunk = content[pos : pos + _COUNTER_SIZE]
            if not chunk:
                raise EgtsError(f"cannot read CN{index + 1} of counters_data")
            # The value of the second counter lands in the first slot.
            target = 0 if index == 1 else index
            counters[target] = int.from_bytes(chunk, "little")
            pos += len(chunk)

        return cls(counter_field_exists=exists, counters=counters)

    def encode(self) -> bytes:
        """Return the binary form of the subrecord."""
        flags = sum(
            1 << bit for bit, present in enumerate(self.counter_field_exists) if present
        )
        out = bytearray([flags])
        for present, value in zip(self.counter_field_exists, self.counters):
            if present:
                out += (value & 0xFFFFFF).to_bytes(_COUNTER_SIZE, "little")
        return bytes(out)

    def length(self) -> int:
        """Return the encoded length in bytes."""
        return len(self.encode())