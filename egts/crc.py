"""Checksums used by EGTS packet headers and frame data."""

from __future__ import annotations

__all__ = ["crc8", "crc16"]


def crc8(data: bytes) -> int:
    """Return the CRC-8 (polynomial 0x31, initial 0xFF) of *data*."""
    crc = 0xFF
    for byte in data:
        crc ^= byte
        for _ in range(8):
            if crc & 0x80:
                crc = ((crc << 1) ^ 0x31) & 0xFF
            else:
                crc = (crc << 1) & 0xFF
    return crc


def crc16(data: bytes) -> int:
    """Return the CRC-16 CCITT (polynomial 0x1021, initial 0xFFFF) of *data*."""
    crc = 0xFFFF
    for byte in data:
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ 0x1021) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return crc