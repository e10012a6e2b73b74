"""Tests for the Interfaces collection."""

import json
from ipaddress import IPv4Address

import pytest
from pydantic import ValidationError

from ifupdown.errors import ConfigNotSetError, MaskNotSetStaticError
from ifupdown.interfaces import Interfaces
from ifupdown.models.constants import AddressConfig, AddressVersion
from ifupdown.models.interface_models import NetworkInterface

LOOPBACK_AND_DHCP = (
    "auto lo\n"
    "iface lo inet loopback\n"
    "\n"
    "allow-hotplug eth0\n"
    "iface eth0 inet dhcp\n"
    "\n"
)


def test_from_dict_names_records_by_key():
    """Test each record takes its name from its key and is allocated."""
    interfaces = Interfaces.from_dict(
        {
            "eth0": {"name": "other", "config": 2, "version": 1, "hotplug": True},
            "lo": {"auto": True, "config": 1, "version": 1},
        }
    )

    assert set(interfaces) == {"eth0", "lo"}
    assert interfaces["eth0"].name == "eth0"
    assert interfaces["eth0"].config == AddressConfig.DHCP
    assert interfaces["lo"].name == "lo"
    assert all(iface.allocated for iface in interfaces.values())
    assert interfaces.validate() == {}


def test_from_dict_skips_null():
    """Test null records are left out."""
    interfaces = Interfaces.from_dict({"eth0": None, "lo": {"config": 1, "version": 1}})
    assert list(interfaces) == ["lo"]


@pytest.mark.parametrize("data", [[], "eth0", {"eth0": [1, 2]}])
def test_from_dict_rejects_non_objects(data):
    """Test that anything but an object of objects is refused."""
    with pytest.raises(TypeError):
        Interfaces.from_dict(data)


def test_from_json_rejects_bad_field():
    """Test that a malformed literal fails decoding."""
    with pytest.raises(ValidationError):
        Interfaces.from_json('{"eth0": {"address": "10.0.0.300"}}')


def test_json_round_trip():
    """Test that JSON output decodes back to the same records."""
    interfaces = Interfaces.from_text(LOOPBACK_AND_DHCP)
    interfaces["br0"] = (
        NetworkInterface.new("br0")
        .with_static()
        .with_address_version(AddressVersion.V4)
        .with_address("10.1.0.1/16")
        .with_dns(["10.1.0.53"])
        .with_hooks(pre_up=["brctl addbr br0"])
    )

    decoded = Interfaces.from_json(interfaces.to_json())

    assert decoded.to_dict() == interfaces.to_dict()
    assert decoded["br0"].netmask == IPv4Address("255.255.0.0")


def test_to_json_shape():
    """Test the JSON layout of a collection."""
    interfaces = Interfaces.from_text("allow-hotplug eth0\niface eth0 inet dhcp\n")

    assert json.loads(interfaces.to_json()) == {
        "eth0": {"name": "eth0", "hotplug": True, "config": 2, "version": 1}
    }
    assert "\n" not in interfaces.to_json(indent=None)


def test_str_renders_document():
    """Test that the collection renders stanzas separated by blank lines."""
    interfaces = Interfaces.from_text(LOOPBACK_AND_DHCP)
    assert str(interfaces) == LOOPBACK_AND_DHCP


def test_str_skips_invalid_interfaces():
    """Test that interfaces failing validation are left out of the text."""
    interfaces = Interfaces.from_text(LOOPBACK_AND_DHCP)
    interfaces["eth1"] = NetworkInterface.new("eth1").with_address("10.0.0.1")

    assert str(interfaces) == LOOPBACK_AND_DHCP


def test_drop_invalid():
    """Test invalid interfaces are removed and reported."""
    interfaces = Interfaces.from_text(
        LOOPBACK_AND_DHCP + "iface eth1 inet static\naddress 10.0.0.1\nauto eth2\n"
    )

    dropped = interfaces.drop_invalid()

    assert set(dropped) == {"eth1", "eth2"}
    assert dropped["eth1"].has(MaskNotSetStaticError)
    assert dropped["eth2"].has(ConfigNotSetError)
    assert set(interfaces) == {"lo", "eth0"}
    assert interfaces.validate() == {}
