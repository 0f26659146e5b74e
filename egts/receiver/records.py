"""Navigation records exported to storages."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any

__all__ = ["NavRecord", "LiquidSensor", "AnSensor"]


@dataclass
class LiquidSensor:
    """Reading of one liquid level sensor."""

    sensor_number: int = 0
    error_flag: str = ""
    value_mm: int = 0
    value_l: int = 0


@dataclass
class AnSensor:
    """Reading of one analog sensor."""

    sensor_number: int = 0
    value: int = 0


def _number(value: Any) -> Any:
    """Write integral floats without a fractional part."""
    if isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        return int(value)
    return value


@dataclass
class NavRecord:
    """Telemetry point built from one service data record."""

    client: int = 0
    packet_id: int = 0
    navigation_timestamp: int = 0
    received_timestamp: int = 0
    latitude: float = 0.0
    longitude: float = 0.0
    speed: int = 0
    pdop: int = 0
    hdop: int = 0
    vdop: int = 0
    nsat: int = 0
    ns: int = 0
    course: int = 0
    an_sensors: list[AnSensor] = field(default_factory=list)
    liquid_sensors: list[LiquidSensor] = field(default_factory=list)

    def to_bytes(self) -> bytes:
        """Return the record as compact UTF-8 JSON; empty sensor lists are null."""
        document = {
            "client": self.client,
            "packet_id": self.packet_id,
            "navigation_unix_time": self.navigation_timestamp,
            "received_unix_time": self.received_timestamp,
            "latitude": _number(self.latitude),
            "longitude": _number(self.longitude),
            "speed": self.speed,
            "pdop": self.pdop,
            "hdop": self.hdop,
            "vdop": self.vdop,
            "nsat": self.nsat,
            "ns": self.ns,
            "course": self.course,
            "an_sensors": [asdict(sensor) for sensor in self.an_sensors] or None,
            "liquid_sensors": [asdict(sensor) for sensor in self.liquid_sensors]
            or None,
        }
        return json.dumps(
            document, separators=(",", ":"), ensure_ascii=False
        ).encode("utf-8")