"""Helpers for IP, netmask and hardware address literals."""

from __future__ import annotations

import ipaddress
import re

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address

_MAC_SEPARATED = re.compile(
    r"^[0-9A-Fa-f]{2}([:-])(?:[0-9A-Fa-f]{2}\1){4}[0-9A-Fa-f]{2}$"
)
_MAC_DOTTED = re.compile(r"^[0-9A-Fa-f]{4}\.[0-9A-Fa-f]{4}\.[0-9A-Fa-f]{4}$")


def parse_ip(text: str) -> IPAddress | None:
    """Parse a bare IPv4 or IPv6 literal.

    Returns:
        The address, or None if ``text`` is not an address literal.
    """
    try:
        return ipaddress.ip_address(text.strip())
    except ValueError:
        return None


def parse_cidr(text: str) -> tuple[IPAddress, int] | None:
    """Parse ``address/prefix`` notation.

    Host bits may be set (``10.0.0.5/8`` is accepted).

    Returns:
        Tuple of (address, prefix length), or None if unparsable.
    """
    try:
        iface = ipaddress.ip_interface(text.strip())
    except ValueError:
        return None
    return iface.ip, iface.network.prefixlen


def cidr_mask(ones: int, bits: int) -> IPAddress | None:
    """Build a netmask of ``ones`` leading one bits out of ``bits``.

    Args:
        ones: Prefix length.
        bits: Total mask width, 32 or 128.

    Returns:
        The mask as an address, or None if the combination is invalid.
    """
    if bits not in (32, 128) or ones < 0 or ones > bits:
        return None
    value = ((1 << ones) - 1) << (bits - ones)
    if bits == 32:
        return ipaddress.IPv4Address(value)
    return ipaddress.IPv6Address(value)


def mask_prefix_length(mask: IPAddress) -> int | None:
    """Return the prefix length of a contiguous mask, None if not contiguous."""
    bits = mask.max_prefixlen
    value = int(mask)
    inverted = value ^ ((1 << bits) - 1)
    # contiguous masks invert to 2**n - 1
    if inverted & (inverted + 1):
        return None
    return bits - inverted.bit_length()


def is_contiguous_mask(mask: IPAddress) -> bool:
    return mask_prefix_length(mask) is not None


def parse_mac(text: str) -> str | None:
    """Parse a 48-bit hardware address.

    Accepts ``aa:bb:cc:dd:ee:ff``, ``aa-bb-cc-dd-ee-ff`` and
    ``aabb.ccdd.eeff``.

    Returns:
        Lower-case colon separated form, or None if unparsable.
    """
    text = text.strip()
    if _MAC_SEPARATED.match(text):
        octets = re.split(r"[:-]", text)
    elif _MAC_DOTTED.match(text):
        digits = text.replace(".", "")
        octets = [digits[i : i + 2] for i in range(0, 12, 2)]
    else:
        return None
    return ":".join(octet.lower() for octet in octets)
