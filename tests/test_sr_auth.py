import pytest

from egts.sr_auth import SrAuthInfo, SrDispatcherIdentity
from egts.types import EgtsError

DISPATCHER_BYTES = bytes([0x00, 0x47, 0x00, 0x00, 0x00])


def _auth(server_sequence=""):
    password = "password"
    return SrAuthInfo(user_name="user", user_password=password, server_sequence=server_sequence)


def test_auth_info_wire_form():
    assert _auth().encode() == b"user\x00password\x00"


def test_auth_info_round_trip_without_sequence():
    info = _auth()
    assert SrAuthInfo.decode(info.encode()) == info


def test_auth_info_round_trip_with_sequence():
    info = _auth(server_sequence="seq")
    assert SrAuthInfo.decode(info.encode()) == info


def test_auth_info_length_matches_encoding():
    info = _auth(server_sequence="seq")
    assert info.length() == len(info.encode())


@pytest.mark.parametrize("content", [b"user", b"user\x00password", b"user\x00password\x00seq"])
def test_auth_info_unterminated_fields_are_rejected(content):
    with pytest.raises(EgtsError):
        SrAuthInfo.decode(content)


def test_dispatcher_identity_decode():
    decoded = SrDispatcherIdentity.decode(DISPATCHER_BYTES)
    assert decoded == SrDispatcherIdentity(dispatcher_type=0, dispatcher_id=71)


def test_dispatcher_identity_encode():
    assert SrDispatcherIdentity(dispatcher_type=0, dispatcher_id=71).encode() == DISPATCHER_BYTES


def test_dispatcher_identity_round_trip_with_description():
    identity = SrDispatcherIdentity(dispatcher_type=1, dispatcher_id=71, description="desk")
    assert SrDispatcherIdentity.decode(identity.encode()) == identity
    assert identity.length() == len(identity.encode())


@pytest.mark.parametrize("content", [b"", b"\x00"])
def test_dispatcher_identity_missing_fields_are_rejected(content):
    with pytest.raises(EgtsError):
        SrDispatcherIdentity.decode(content)