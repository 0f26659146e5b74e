"""Transport-level response section."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Union

from .types import BinaryData, EgtsError

__all__ = ["PtResponse"]

_Sdr = Union[BinaryData, bytes, None]


@dataclass
class PtResponse(BinaryData):
    """EGTS_PT_RESPONSE: acknowledgement of a received packet.

    ``sdr`` holds the optional service data that follows the result code:
    raw bytes after decoding, or any section with a binary form.
    """

    response_packet_id: int = 0
    processing_result: int = 0
    sdr: _Sdr = None

    @classmethod
    def decode(cls, content: bytes) -> PtResponse:
        """Build the section from its binary form."""
        content = bytes(content)
        if len(content) < 2:
            raise EgtsError("cannot read response packet id")
        if len(content) < 3:
            raise EgtsError("cannot read processing result")
        rest = content[3:]
        return cls(
            response_packet_id=int.from_bytes(content[:2], "little"),
            processing_result=content[2],
            sdr=rest or None,
        )

    def encode(self) -> bytes:
        """Return the binary form of the section."""
        head = struct.pack(
            "<HB", self.response_packet_id & 0xFFFF, self.processing_result & 0xFF
        )
        if self.sdr is None:
            return head
        if isinstance(self.sdr, (bytes, bytearray)):
            return head + bytes(self.sdr)
        return head + self.sdr.encode()

    def length(self) -> int:
        """Return the encoded length in bytes."""
        return len(self.encode())