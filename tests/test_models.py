from datetime import timedelta

import pytest

from ariclient.models import (
    ConfigData,
    ConfigHandle,
    ConfigTuple,
    DeviceStateData,
    DeviceStateHandle,
    Direction,
    DTMFOptions,
    EndpointData,
    EndpointHandle,
    endpoint_key_id,
    from_endpoint_id,
    new_id,
    parse_config_id,
)


class RecordingAccessor:
    def __init__(self, result=None):
        self.result = result
        self.calls = []

    def data(self, ident):
        self.calls.append(("data", ident))
        return self.result

    def update(self, ident, value):
        self.calls.append(("update", ident, value))

    def delete(self, ident):
        self.calls.append(("delete", ident))


def test_new_id_is_unique_and_alphanumeric():
    ids = [new_id() for _ in range(200)]
    assert len(set(ids)) == len(ids)
    assert all(i.isalnum() and i == i.lower() for i in ids)


def test_direction_from_string():
    assert Direction("both") is Direction.BOTH
    assert Direction.IN == "in"
    with pytest.raises(ValueError):
        Direction("sideways")


def test_dtmf_options_defaults_and_values():
    opts = DTMFOptions(duration=timedelta(milliseconds=250))
    assert opts.duration == timedelta(milliseconds=250)
    assert opts.before == opts.after == opts.between == timedelta(0)


def test_parse_config_id():
    assert parse_config_id("res_pjsip/endpoint/alice") == ("res_pjsip", "endpoint", "alice")


def test_parse_config_id_ignores_extra_parts():
    assert parse_config_id("a/b/c/d") == ("a", "b", "c")


def test_parse_config_id_too_short():
    with pytest.raises(ValueError, match="invalid input ID"):
        parse_config_id("res_pjsip/endpoint")


def test_config_data_id_round_trip():
    data = ConfigData(config_class="res_pjsip", type="endpoint", name="alice")
    assert parse_config_id(data.id()) == ("res_pjsip", "endpoint", "alice")


def test_config_tuple_dict_round_trip():
    item = ConfigTuple("max_contacts", "1")
    assert item.to_dict() == {"attribute": "max_contacts", "value": "1"}
    assert ConfigTuple.from_dict(item.to_dict()) == item


def test_config_handle_delegates():
    expected = ConfigData("res_pjsip", "endpoint", "alice")
    accessor = RecordingAccessor(expected)
    handle = ConfigHandle("res_pjsip/endpoint/alice", accessor)
    tuples = [ConfigTuple("allow", "ulaw")]
    assert handle.data() is expected
    handle.update(tuples)
    handle.delete()
    assert accessor.calls == [
        ("data", "res_pjsip/endpoint/alice"),
        ("update", "res_pjsip/endpoint/alice", tuples),
        ("delete", "res_pjsip/endpoint/alice"),
    ]


def test_device_state_handle_delegates():
    expected = DeviceStateData("Stasis:lamp", "INUSE")
    accessor = RecordingAccessor(expected)
    handle = DeviceStateHandle("Stasis:lamp", accessor)
    assert handle.data() is expected
    handle.update("NOT_INUSE")
    handle.delete()
    assert accessor.calls[1:] == [
        ("update", "Stasis:lamp", "NOT_INUSE"),
        ("delete", "Stasis:lamp"),
    ]


def test_device_state_from_dict():
    data = DeviceStateData.from_dict({"name": "Stasis:lamp", "state": "BUSY"})
    assert data == DeviceStateData("Stasis:lamp", "BUSY")


def test_endpoint_key_id():
    assert endpoint_key_id("PJSIP", "alice") == "PJSIP/alice"


def test_endpoint_id_round_trip():
    data = EndpointData(technology="PJSIP", resource="alice", state="online")
    assert from_endpoint_id(data.id()) == ("PJSIP", "alice")


def test_from_endpoint_id_missing_separator():
    with pytest.raises(ValueError, match="resource format"):
        from_endpoint_id("PJSIP")


def test_from_endpoint_id_too_many_parts():
    with pytest.raises(ValueError, match="conflicting"):
        from_endpoint_id("PJSIP|alice|extra")


def test_endpoint_from_dict():
    data = EndpointData.from_dict(
        {"technology": "SIP", "resource": "bob", "channel_ids": ["c1", "c2"]}
    )
    assert data.channel_ids == ["c1", "c2"]
    assert data.state == ""
    assert from_endpoint_id(data.id()) == ("SIP", "bob")


def test_endpoint_handle_delegates():
    expected = EndpointData("SIP", "bob")
    accessor = RecordingAccessor(expected)
    handle = EndpointHandle("SIP/bob", accessor)
    assert handle.data() is expected
    assert accessor.calls == [("data", "SIP/bob")]