"""Protocol constants, error type and the base class of binary sections."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum

__all__ = [
    "SubrecordType",
    "PacketType",
    "ServiceType",
    "ProcessingCode",
    "EgtsError",
    "BinaryData",
]


class SubrecordType(IntEnum):
    """Subrecord type codes."""

    RECORD_RESPONSE = 0
    TERM_IDENTITY = 1
    MODULE_DATA = 2
    DISPATCHER_IDENTITY = 5
    AUTH_INFO = 7
    RESULT_CODE = 9
    EGTS_PLUS_DATA = 15
    POS_DATA = 16
    EXT_POS_DATA = 17
    AD_SENSORS_DATA = 18
    COUNTERS_DATA = 19
    # Holds STATE_DATA when 5 bytes long, ACCEL_DATA otherwise.
    TYPE_20 = 20
    STATE_DATA = 21
    LOOPIN_DATA = 22
    ABS_DIG_SENS_DATA = 23
    ABS_AN_SENS_DATA = 24
    ABS_CNTR_DATA = 25
    ABS_LOOPIN_DATA = 26
    LIQUID_LEVEL_SENSOR = 27
    PASSENGERS_COUNTERS = 28


class PacketType(IntEnum):
    """Transport-level packet types."""

    RESPONSE = 0
    APPDATA = 1


class ServiceType(IntEnum):
    """Service types of service data records."""

    AUTH = 1
    TELEDATA = 2


class ProcessingCode(IntEnum):
    """Packet processing result codes."""

    OK = 0
    DECRYPT_ERROR = 129
    INC_HEADERFORM = 131
    INC_DATAFORM = 132
    UNS_TYPE = 133
    HEADERCRC_ERROR = 137


class EgtsError(Exception):
    """Raised when a section cannot be decoded or encoded."""

    def __init__(self, message: str, code: ProcessingCode | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class BinaryData(ABC):
    """A section of an EGTS packet that has a binary form."""

    @abstractmethod
    def encode(self) -> bytes:
        """Return the binary form of the section."""

    def length(self) -> int:
        """Return the length of the encoded section in bytes."""
        return len(self.encode())