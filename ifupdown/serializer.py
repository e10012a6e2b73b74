r"""Render interfaces back into /etc/network/interfaces text.

Output layout for one interface::

    auto <name>
    allow-hotplug <name>
    iface <name> <family> <method>
    \taddress <address>
    \tnetmask <netmask>
    \tbroadcast <broadcast>
    \tgateway <gateway>
    \tdns-nameservers <a> <b> ...
    \tdns-search <a> <b> ...
    \thwaddress ether <mac>
    \tpre-up <cmd>
    ...

The address block is only written for static and manual stanzas that have
both an address and a netmask.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from io import StringIO
from typing import TYPE_CHECKING

from ifupdown.models.constants import HOOK_DIRECTIVES, AddressConfig

if TYPE_CHECKING:
    from ifupdown.models.interface_models import NetworkInterface

INDENT = "\t"


def render_interface(iface: NetworkInterface) -> str:
    """Render one interface stanza.

    Raises:
        InterfaceHasErrorsError: If the interface does not validate.
    """
    err = iface.validate()
    if err is not None:
        raise err

    out = StringIO()

    def line(*parts: object, indent: bool = False) -> None:
        if indent:
            out.write(INDENT)
        out.write(" ".join(str(p) for p in parts))
        out.write("\n")

    if iface.auto:
        line("auto", iface.name)
    if iface.hotplug:
        line("allow-hotplug", iface.name)
    line("iface", iface.name, str(iface.version), str(iface.config))

    if _has_address_block(iface):
        line("address", iface.address, indent=True)
        line("netmask", iface.netmask, indent=True)
        if iface.broadcast is not None:
            line("broadcast", iface.broadcast, indent=True)
        if iface.gateway is not None:
            line("gateway", iface.gateway, indent=True)

    if iface.dns_servers:
        line("dns-nameservers", *iface.dns_servers, indent=True)
    if iface.dns_search:
        line("dns-search", *iface.dns_search, indent=True)
    if iface.mac_address:
        line("hwaddress", "ether", iface.mac_address, indent=True)

    for directive, field in HOOK_DIRECTIVES.items():
        for command in getattr(iface.hooks, field):
            line(directive, command, indent=True)

    return out.getvalue()


def _has_address_block(iface: NetworkInterface) -> bool:
    return (
        iface.config in (AddressConfig.STATIC, AddressConfig.MANUAL)
        and iface.address is not None
        and iface.netmask is not None
        and not iface.address.is_unspecified
    )


def render_interfaces(
    interfaces: Mapping[str, NetworkInterface] | Iterable[NetworkInterface],
) -> str:
    """Render a whole document, one stanza per interface.

    Each stanza is followed by a blank line. Interfaces that do not validate
    are left out; use ``Interfaces.validate()`` to find them first.
    """
    if isinstance(interfaces, Mapping):
        interfaces = interfaces.values()

    out = StringIO()
    for iface in interfaces:
        text = str(iface)
        if not text:
            continue
        out.write(text)
        out.write("\n")
    return out.getvalue()
