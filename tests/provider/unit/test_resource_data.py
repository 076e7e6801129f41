"""Unit tests for the dict-backed ResourceData."""

import pytest

from infoblox_provider.provider.resource_data import DictResourceData, ResourceData


def test_is_resource_data():
    assert isinstance(DictResourceData({}), ResourceData)


def test_abstract_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        ResourceData()


def test_get_falls_back_to_default():
    data = DictResourceData({"network_view": "default"})
    assert data.get("network_view") == "default"
    assert data.get("allocate_prefix_len") == 0
    assert data.get("unknown") is None


def test_get_ok_distinguishes_unset_and_zero_value():
    data = DictResourceData({"comment": "web"})
    assert data.get_ok("comment") == ("web", True)

    assert DictResourceData({}).get_ok("comment") == ("", False)
    assert DictResourceData({"comment": ""}).get_ok("comment") == ("", False)


def test_has_change_without_prior_is_false():
    assert DictResourceData({"network_view": "a"}).has_change("network_view") is False


def test_has_change_against_prior():
    data = DictResourceData(
        {"network_view": "b", "comment": "same"},
        prior={"network_view": "a", "comment": "same"},
    )
    assert data.has_change("network_view") is True
    assert data.has_change("comment") is False


def test_has_change_uses_defaults_for_missing_prior_keys():
    data = DictResourceData({"comment": ""}, prior={})
    assert data.has_change("comment") is False


def test_set_id():
    data = DictResourceData({}, resource_id="networkcontainer/old")
    assert data.id == "networkcontainer/old"
    data.set_id("networkcontainer/new")
    assert data.id == "networkcontainer/new"
