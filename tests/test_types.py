import pytest

from egts.types import BinaryData, EgtsError, PacketType, ProcessingCode, SubrecordType


class _Fixed(BinaryData):
    def encode(self) -> bytes:
        return b"abc"


def test_binary_data_length_follows_encode():
    section = _Fixed()
    assert BinaryData.length(section) == 3


def test_binary_data_is_abstract():
    with pytest.raises(TypeError):
        BinaryData()


def test_egts_error_carries_code_and_message():
    err = EgtsError("bad header", ProcessingCode.INC_HEADERFORM)
    assert err.code is ProcessingCode.INC_HEADERFORM
    assert str(err) == "bad header"


def test_egts_error_code_defaults_to_none():
    err = EgtsError("broken")
    assert (err.code, str(err)) == (None, "broken")


def test_subrecord_type_lookup_from_wire_value():
    assert SubrecordType(20) is SubrecordType.TYPE_20
    assert SubrecordType(25) is SubrecordType.ABS_CNTR_DATA


def test_unknown_subrecord_type_is_rejected():
    with pytest.raises(ValueError):
        SubrecordType(99)


def test_packet_type_lookup_from_wire_value():
    assert PacketType(0).value == 0
    assert PacketType(1).value == 1
    with pytest.raises(ValueError):
        PacketType(7)