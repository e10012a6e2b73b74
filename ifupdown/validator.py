"""Validation of a NetworkInterface against its address config method."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ifupdown.errors import (
    AddressNotSetStaticError,
    AddressSetWhenDHCPError,
    AdressNotLoopbackError,
    ConfigNotSetError,
    IfupdownError,
    InvalidAddressError,
    InvalidAddressVersionError,
    InvalidBroadcastError,
    InvalidGatewayError,
    InvalidMaskError,
    MaskNotSetStaticError,
    UnallocatedInterfaceError,
)
from ifupdown.models.constants import AddressConfig, AddressVersion
from ifupdown.utils.netaddr import is_contiguous_mask

if TYPE_CHECKING:
    from ifupdown.models.interface_models import NetworkInterface

_VERSION_WIDTH = {AddressVersion.V4: 32, AddressVersion.V6: 128}


def validate_interface(iface: NetworkInterface) -> list[IfupdownError]:
    """Collect every rule the interface breaks.

    An unallocated interface yields only ``UnallocatedInterfaceError``.
    Errors recorded by builders come first, followed by config method,
    address family and netmask checks.

    Returns:
        List of errors, empty when the interface is valid.
    """
    if not iface.allocated:
        return [UnallocatedInterfaceError(iface.name or None)]

    errors: list[IfupdownError] = list(iface.build_errors)
    address = iface.address

    if iface.config == AddressConfig.UNSET:
        errors.append(ConfigNotSetError(iface.name or None))

    if iface.config == AddressConfig.DHCP:
        if address is not None:
            errors.append(AddressSetWhenDHCPError(address))
    elif iface.config == AddressConfig.STATIC:
        if address is None:
            errors.append(AddressNotSetStaticError(iface.name or None))
        elif iface.netmask is None and iface.version == AddressVersion.V4:
            errors.append(MaskNotSetStaticError(iface.name or None))
        elif address.is_unspecified:
            errors.append(InvalidAddressError(address))
    elif iface.config == AddressConfig.LOOPBACK:
        if address is not None and not address.is_loopback:
            errors.append(AdressNotLoopbackError(address))

    width = _VERSION_WIDTH.get(iface.version)  # type: ignore[call-overload]
    if width is None:
        detail = f"[{iface.name}] {int(iface.version)}"
        errors.append(InvalidAddressVersionError(detail))
    else:
        errors.extend(_family_errors(iface, width))

    return errors


def _family_errors(iface: NetworkInterface, width: int) -> list[IfupdownError]:
    """Check that addresses match the stanza's family and masks are sane."""
    errors: list[IfupdownError] = []
    if iface.address is not None and iface.address.max_prefixlen != width:
        family = str(iface.version)
        detail = f"[{iface.name}] {iface.address} is not an {family} address"
        errors.append(InvalidAddressVersionError(detail))
    if iface.netmask is not None and (
        iface.netmask.max_prefixlen != width or not is_contiguous_mask(iface.netmask)
    ):
        errors.append(InvalidMaskError(iface.netmask))
    if iface.broadcast is not None and iface.broadcast.max_prefixlen != width:
        errors.append(InvalidBroadcastError(iface.broadcast))
    if iface.gateway is not None and iface.gateway.max_prefixlen != width:
        errors.append(InvalidGatewayError(iface.gateway))
    return errors
