"""Authentication info and dispatcher identity subrecords."""

from __future__ import annotations

from dataclasses import dataclass

from .types import BinaryData, EgtsError

__all__ = ["SrAuthInfo", "SrDispatcherIdentity"]

_SEPARATOR = b"\x00"
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def _to_text(raw: bytes) -> str:
    return raw.decode(_ENCODING, _ERRORS)


def _to_bytes(text: str) -> bytes:
    return text.encode(_ENCODING, _ERRORS)


@dataclass
class SrAuthInfo(BinaryData):
    """EGTS_SR_AUTH_INFO: credentials of the terminal."""

    user_name: str = ""
    user_password: str = ""
    server_sequence: str = ""

    @classmethod
    def decode(cls, content: bytes) -> SrAuthInfo:
        """Build the subrecord from NUL-terminated string fields."""
        fields = content.split(_SEPARATOR)
        # The last piece is whatever follows the final separator.
        terminated, rest = fields[:-1], fields[-1]
        if len(terminated) < 1:
            raise EgtsError("cannot read user name of auth_info")
        if len(terminated) < 2:
            raise EgtsError("cannot read password of auth_info")
        server_sequence = ""
        if len(terminated) > 2:
            server_sequence = _to_text(terminated[2])
        elif rest:
            raise EgtsError("cannot read server sequence of auth_info")
        return cls(
            user_name=_to_text(terminated[0]),
            user_password=_to_text(terminated[1]),
            server_sequence=server_sequence,
        )

    def encode(self) -> bytes:
        """Return the binary form of the subrecord."""
        parts = [_to_bytes(self.user_name), _to_bytes(self.user_password)]
        # Optional; present only with some encryption algorithms.
        if self.server_sequence:
            parts.append(_to_bytes(self.server_sequence))
        return b"".join(part + _SEPARATOR for part in parts)

    def length(self) -> int:
        """Return the encoded length in bytes."""
        return len(self.encode())


@dataclass
class SrDispatcherIdentity(BinaryData):
    """EGTS_SR_DISPATCHER_IDENTITY: identity of an authorising dispatcher."""

    dispatcher_type: int = 0
    dispatcher_id: int = 0
    description: str = ""

    @classmethod
    def decode(cls, content: bytes) -> SrDispatcherIdentity:
        """Build the subrecord from its binary form."""
        if not content:
            raise EgtsError("cannot read dispatcher type")
        id_bytes = content[1:5]
        if not id_bytes:
            raise EgtsError("cannot read dispatcher id")
        return cls(
            dispatcher_type=content[0],
            dispatcher_id=int.from_bytes(id_bytes, "little"),
            description=_to_text(content[5:]),
        )

    def encode(self) -> bytes:
        """Return the binary form of the subrecord."""
        return (
            bytes([self.dispatcher_type & 0xFF])
            + (self.dispatcher_id & 0xFFFFFFFF).to_bytes(4, "little")
            + _to_bytes(self.description)
        )

    def length(self) -> int:
        """Return the encoded length in bytes."""
        return len(self.encode())