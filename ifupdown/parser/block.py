"""Parser for the text of a single interface stanza."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING

from ifupdown.errors import (
    InvalidDNSServerError,
    InvalidIfaceDataError,
    MultipleInterfacesError,
)
from ifupdown.models.constants import HOOK_DIRECTIVES, AddressConfig, AddressVersion
from ifupdown.utils.logger import Logger
from ifupdown.utils.netaddr import cidr_mask, parse_cidr, parse_ip, parse_mac

if TYPE_CHECKING:
    from ifupdown.models.interface_models import NetworkInterface

_LOG_NAME = "parser.block"


def iter_directives(text: str) -> Iterator[tuple[list[str], str]]:
    """Yield (fields, line) for every directive line.

    Lines are stripped; blank lines and ``#`` comments are skipped.
    """
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        yield line.split(), line


def parse_block(iface: NetworkInterface, data: str | bytes) -> int:
    """Populate ``iface`` from the text of one stanza.

    The interface is marked allocated even when parsing fails part way. The
    interface is not validated; call ``iface.validate()`` afterwards.

    Args:
        iface: Interface to fill in.
        data: Stanza text. Bytes are decoded as UTF-8, with undecodable
            bytes replaced.

    Returns:
        Number of bytes consumed, always ``len(data)``.

    Raises:
        MultipleInterfacesError: If more than one iface directive is present.
        InvalidIfaceDataError: If a directive is malformed.
    """
    text = data.decode(errors="replace") if isinstance(data, bytes) else data

    directives = list(iter_directives(text))
    stanzas = sum(1 for fields, _ in directives if fields[0] == "iface")
    if stanzas > 1:
        raise MultipleInterfacesError(f"found {stanzas} iface directives")

    iface._allocate()
    for fields, line in directives:
        handler = _HANDLERS.get(fields[0])
        if handler is None:
            Logger.debug(_LOG_NAME, f"ignoring unsupported directive: {line}")
            continue
        handler(iface, fields, line)

    return len(data)


def _value(fields: list[str], line: str, index: int = 1) -> str:
    if len(fields) <= index:
        raise InvalidIfaceDataError(line)
    return fields[index]


def _auto(iface: NetworkInterface, fields: list[str], line: str) -> None:
    iface.auto = True


def _hotplug(iface: NetworkInterface, fields: list[str], line: str) -> None:
    iface.hotplug = True


def _iface(iface: NetworkInterface, fields: list[str], line: str) -> None:
    if len(fields) < 4:
        raise InvalidIfaceDataError(line)
    iface.name = fields[1]

    version = AddressVersion.from_keyword(fields[2])
    if version is not None:
        iface.version = version
    else:
        Logger.debug(_LOG_NAME, f"unknown address family {fields[2]!r} for {fields[1]}")

    config = AddressConfig.from_keyword(fields[3])
    if config is None:
        raise InvalidIfaceDataError(line)
    iface.config = config


def _address(iface: NetworkInterface, fields: list[str], line: str) -> None:
    value = _value(fields, line)
    if "/" in value:
        parsed = parse_cidr(value)
        if parsed is None:
            raise InvalidIfaceDataError(line)
        iface.address, ones = parsed
        iface.netmask = cidr_mask(ones, iface.address.max_prefixlen)
        return
    address = parse_ip(value)
    if address is None:
        raise InvalidIfaceDataError(line)
    iface.address = address


def _netmask(iface: NetworkInterface, fields: list[str], line: str) -> None:
    if iface.netmask is not None:
        return
    if iface.version != AddressVersion.V4:
        Logger.debug(_LOG_NAME, f"ignoring netmask outside an inet stanza: {line}")
        return
    mask = parse_ip(_value(fields, line))
    if mask is None or mask.version != 4:
        raise InvalidIfaceDataError(line)
    iface.netmask = mask


def _broadcast(iface: NetworkInterface, fields: list[str], line: str) -> None:
    broadcast = parse_ip(_value(fields, line))
    if broadcast is None:
        raise InvalidIfaceDataError(line)
    iface.broadcast = broadcast


def _gateway(iface: NetworkInterface, fields: list[str], line: str) -> None:
    gateway = parse_ip(_value(fields, line))
    if gateway is None:
        raise InvalidIfaceDataError(line)
    iface.gateway = gateway


def _dns_nameservers(iface: NetworkInterface, fields: list[str], line: str) -> None:
    for server in fields[1:]:
        address = parse_ip(server)
        if address is None:
            # dropped, reported by validate()
            iface._field_errors.setdefault("dns_servers", []).append(
                InvalidDNSServerError(server)
            )
            continue
        iface.dns_servers.append(address)


def _dns_search(iface: NetworkInterface, fields: list[str], line: str) -> None:
    iface.dns_search.extend(fields[1:])


def _hwaddress(iface: NetworkInterface, fields: list[str], line: str) -> None:
    if _value(fields, line) != "ether":
        raise InvalidIfaceDataError(line)
    mac = parse_mac(_value(fields, line, 2))
    if mac is None:
        raise InvalidIfaceDataError(line)
    iface.mac_address = mac


def _hook(field: str) -> Callable[[NetworkInterface, list[str], str], None]:
    def handler(iface: NetworkInterface, fields: list[str], line: str) -> None:
        command = line[len(fields[0]) :].strip()
        if command:
            getattr(iface.hooks, field).append(command)

    return handler


_HANDLERS: dict[str, Callable[[NetworkInterface, list[str], str], None]] = {
    "auto": _auto,
    "allow-hotplug": _hotplug,
    "iface": _iface,
    "address": _address,
    "netmask": _netmask,
    "broadcast": _broadcast,
    "gateway": _gateway,
    "dns-nameservers": _dns_nameservers,
    "dns-search": _dns_search,
    "hwaddress": _hwaddress,
    **{directive: _hook(field) for directive, field in HOOK_DIRECTIVES.items()},
}
