"""Tests for the multi-interface document parser."""

import threading
from ipaddress import IPv4Address

import pytest

from ifupdown.errors import DuplicateInterfaceError, InvalidIfaceDataError, ParseError
from ifupdown.interfaces import Interfaces
from ifupdown.models.constants import AddressConfig, AddressVersion
from ifupdown.parser.multi import MultiParser, is_block_start

SIMPLE = b"""# The loopback network interface
auto lo
iface lo inet loopback

# The primary network interface
allow-hotplug eth0
iface eth0 inet dhcp
"""


def test_parse_simple_valid_data():
    """Test the stock Debian layout."""
    parser = MultiParser()
    assert parser.write(SIMPLE) == len(SIMPLE)

    interfaces = parser.parse()

    assert isinstance(interfaces, Interfaces)
    assert set(interfaces) == {"lo", "eth0"}

    lo = interfaces["lo"]
    assert lo.auto
    assert lo.config == AddressConfig.LOOPBACK
    assert lo.version == AddressVersion.V4

    eth0 = interfaces["eth0"]
    assert eth0.hotplug
    assert not eth0.auto
    assert eth0.config == AddressConfig.DHCP
    assert eth0.version == AddressVersion.V4

    assert interfaces.validate() == {}


def test_names_match_keys():
    """Test every record is filed under its own name."""
    interfaces = Interfaces.from_text(
        SIMPLE
        + b"""
auto br0
iface br0 inet static
    address 192.168.0.2/24
    gateway 192.168.0.1
    pre-up brctl addbr br0
"""
    )
    assert set(interfaces) == {"lo", "eth0", "br0"}
    for name, iface in interfaces.items():
        assert iface.name == name
    assert interfaces["br0"].address == IPv4Address("192.168.0.2")


def test_similar_names_do_not_merge():
    """Test that eth0 and eth01 are separate blocks."""
    interfaces = Interfaces.from_text(
        "auto eth0\n"
        "iface eth0 inet dhcp\n"
        "auto eth01\n"
        "iface eth01 inet6 dhcp\n"
    )
    assert set(interfaces) == {"eth0", "eth01"}
    assert interfaces["eth01"].version == AddressVersion.V6


def test_stanza_without_blank_lines():
    """Test that blocks split on interface names, not blank lines."""
    interfaces = Interfaces.from_text(
        "iface eth0 inet static\n"
        "address 10.0.0.2\n"
        "netmask 255.255.255.0\n"
        "iface eth1 inet manual\n"
        "auto eth1\n"
    )
    assert interfaces["eth0"].netmask == IPv4Address("255.255.255.0")
    assert interfaces["eth1"].auto
    assert not interfaces["eth0"].auto


def test_trailing_block_without_name():
    """Test lines that never name an interface end up under 'unknown'."""
    interfaces = Interfaces.from_text("address 10.0.0.9\n")
    assert list(interfaces) == ["unknown"]
    assert interfaces["unknown"].name == "unknown"
    assert interfaces["unknown"].address == IPv4Address("10.0.0.9")


def test_auto_only_block():
    """Test that a block without an iface directive is kept but invalid."""
    interfaces = Interfaces.from_text("auto eth9\nauto lo\niface lo inet loopback\n")
    assert set(interfaces) == {"eth9", "lo"}
    assert set(interfaces.validate()) == {"eth9"}


def test_block_errors_are_collected():
    """Test that one broken block does not hide the others."""
    parser = MultiParser()
    parser.write(SIMPLE)
    parser.write(b"auto eth1\niface eth1 inet carrier-pigeon\n")

    with pytest.raises(ParseError) as exc_info:
        parser.parse()

    err = exc_info.value
    assert err.has(InvalidIfaceDataError)
    assert "carrier-pigeon" in str(err)
    assert set(err.interfaces) == {"lo", "eth0"}
    assert parser.errors == err.errors


def test_dual_stack_stanzas():
    """Test a second iface stanza for the same name replaces the first."""
    with pytest.raises(ParseError) as exc_info:
        Interfaces.from_text(
            "auto eth0\n"
            "iface eth0 inet dhcp\n"
            "iface eth0 inet6 static\n"
            "    address 2001:db8::10/64\n"
        )
    err = exc_info.value
    assert err.has(DuplicateInterfaceError)
    assert list(err.interfaces) == ["eth0"]
    assert err.interfaces["eth0"].version == AddressVersion.V6


def test_undecodable_bytes_in_comment():
    """Test that a Latin-1 comment does not stop the document from parsing."""
    parser = MultiParser()
    parser.write(b"auto eth0\niface eth0 inet dhcp\n# caf\xe9\n")

    interfaces = parser.parse()

    assert list(interfaces) == ["eth0"]
    assert interfaces["eth0"].config == AddressConfig.DHCP
    assert interfaces.validate() == {}


def test_write_returns_bytes_appended():
    """Test that text input reports its encoded length."""
    parser = MultiParser()
    assert parser.write("# \u00e9\n") == 5
    assert parser.write(b"auto lo\n") == 8


def test_parse_is_repeatable():
    """Test that parsing twice gives the same mapping."""
    parser = MultiParser()
    parser.write(SIMPLE)
    first = parser.parse()
    second = parser.parse()
    assert first == second
    assert parser.errors == []


def test_concurrent_writes():
    """Test that writes from several threads are all kept."""
    parser = MultiParser()

    def writer(i: int) -> None:
        parser.write(f"auto eth{i}\niface eth{i} inet dhcp\n")

    threads = [threading.Thread(target=writer, args=(i,)) for i in range(16)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    interfaces = parser.parse()
    assert set(interfaces) == {f"eth{i}" for i in range(16)}


@pytest.mark.parametrize(
    ("line", "want"),
    [
        ("auto eth0", True),
        ("allow-hotplug eth0", True),
        ("allow-auto eth0", True),
        ("iface eth0 inet dhcp", True),
        ("auto", False),
        ("address 10.0.0.1", False),
    ],
)
def test_is_block_start(line, want):
    """Test which lines open a new block."""
    assert is_block_start(line.split()) is want
