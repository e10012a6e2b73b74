"""Pydantic models for a single ifupdown interface stanza."""

from __future__ import annotations

import json
from ipaddress import IPv4Address, IPv6Address
from typing import Any

from pydantic import BaseModel, Field, PrivateAttr, field_validator

from ifupdown.errors import (
    BufferTooSmallError,
    IfupdownError,
    InterfaceHasErrorsError,
    InvalidAddressError,
    InvalidBroadcastError,
    InvalidDNSServerError,
    InvalidGatewayError,
    InvalidMACAddressError,
    InvalidMaskError,
)
from ifupdown.models.constants import AddressConfig, AddressVersion
from ifupdown.utils.netaddr import cidr_mask, parse_cidr, parse_ip, parse_mac


class Hooks(BaseModel):
    """Shell commands run around bringing the interface up or down."""

    pre_up: list[str] = Field(
        default_factory=list, description="Commands run before the interface is up"
    )
    post_up: list[str] = Field(
        default_factory=list, description="Commands run after the interface is up"
    )
    pre_down: list[str] = Field(
        default_factory=list,
        description="Commands run before the interface is taken down",
    )
    post_down: list[str] = Field(
        default_factory=list,
        description="Commands run after the interface is taken down",
    )


class NetworkInterface(BaseModel):
    """One interface of /etc/network/interfaces.

    A record is populated in one of three ways: the ``with_*`` builders
    (starting from ``NetworkInterface.new``), ``write()`` with the text of a
    single stanza, or ``from_dict`` / ``from_json``. A record that none of
    these touched is unallocated and never validates.

    Builders do not raise. Unparsable input is remembered per field and
    reported by ``validate()``, so chains like the following always complete:

        >>> iface = (
        ...     NetworkInterface.new("eth0")
        ...     .with_static()
        ...     .with_address_version(AddressVersion.V4)
        ...     .with_address("10.0.0.5/8")
        ...     .with_gateway("10.0.0.1")
        ... )
        >>> iface.validate() is None
        True
    """

    name: str = Field("", description="Interface name (e.g., 'lo', 'eth0')")
    hotplug: bool = Field(False, description="Brought up on hotplug events")
    auto: bool = Field(False, description="Brought up automatically at boot")
    address: IPv4Address | IPv6Address | None = Field(
        None, description="Interface address"
    )
    netmask: IPv4Address | IPv6Address | None = Field(
        None, description="Netmask, rendered as an address literal"
    )
    broadcast: IPv4Address | IPv6Address | None = Field(
        None, description="Broadcast address"
    )
    gateway: IPv4Address | IPv6Address | None = Field(
        None, description="Default gateway"
    )
    config: AddressConfig = Field(
        AddressConfig.UNSET, description="Address configuration method"
    )
    version: AddressVersion = Field(AddressVersion.NIL, description="Address family")
    dns_servers: list[IPv4Address | IPv6Address] = Field(
        default_factory=list, description="DNS name servers"
    )
    dns_search: list[str] = Field(
        default_factory=list, description="DNS search domains"
    )
    mac_address: str | None = Field(
        None, description="Hardware address (e.g., '00:11:22:33:44:55')"
    )
    hooks: Hooks = Field(default_factory=Hooks, description="Up/down hooks")

    _allocated: bool = PrivateAttr(default=False)
    _field_errors: dict[str, list[IfupdownError]] = PrivateAttr(default_factory=dict)
    _errs: list[IfupdownError] = PrivateAttr(default_factory=list)

    @field_validator("mac_address")
    @classmethod
    def validate_mac_address(cls, v: str | None) -> str | None:
        """Normalize the hardware address to lower-case colon form."""
        if v is None or v == "":
            return None
        mac = parse_mac(v)
        if mac is None:
            raise ValueError(f"invalid mac address: {v}")
        return mac

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def new(cls, name: str) -> NetworkInterface:
        """Create an interface brought up at boot.

        The record stays unallocated until a builder populates it.
        """
        return cls(name=name, auto=True)

    @classmethod
    def from_text(cls, data: str | bytes) -> NetworkInterface:
        """Parse the text of one interface stanza."""
        iface = cls()
        iface.write(data)
        return iface

    @classmethod
    def from_dict(
        cls, data: dict[str, Any], name: str | None = None
    ) -> NetworkInterface:
        """Decode a record from its JSON mapping.

        Args:
            data: Decoded JSON object.
            name: Overrides the ``name`` field (the key of an enclosing mapping).

        Raises:
            pydantic.ValidationError: If a field has the wrong type or literal.
        """
        iface = cls.model_validate(data)
        if name is not None:
            iface.name = name
        iface._allocated = True
        return iface

    @classmethod
    def from_json(cls, text: str | bytes) -> NetworkInterface:
        return cls.from_dict(json.loads(text))

    @property
    def allocated(self) -> bool:
        """Whether a builder, parser or decoder has populated this record."""
        return self._allocated

    @property
    def errs(self) -> list[IfupdownError]:
        """Specific errors found by the last ``validate()`` call."""
        return list(self._errs)

    @property
    def build_errors(self) -> list[IfupdownError]:
        """Errors recorded by builders for input they could not parse."""
        return [err for errs in self._field_errors.values() for err in errs]

    def _allocate(self) -> None:
        self._allocated = True

    def _set_field_error(self, field: str, error: IfupdownError | None) -> None:
        if error is None:
            self._field_errors.pop(field, None)
        else:
            self._field_errors[field] = [error]

    # -------------------------------------------------------------------------
    # Builders
    # -------------------------------------------------------------------------

    def with_address(self, address: str) -> NetworkInterface:
        """Set the address from a bare literal or ``address/prefix``.

        CIDR input also sets the netmask, sized by the address family.
        """
        self._allocate()
        if "/" in address:
            parsed = parse_cidr(address)
            if parsed is not None:
                ip, ones = parsed
                self.address = ip
                self.netmask = cidr_mask(ones, ip.max_prefixlen)
                self._set_field_error("netmask", None)
                self._set_field_error("address", None)
                return self
        else:
            ip = parse_ip(address)
            if ip is not None:
                self.address = ip
                self._set_field_error("address", None)
                return self
        self.address = None
        self._set_field_error("address", InvalidAddressError(address))
        return self

    def with_netmask(self, ones: int, bits: int) -> NetworkInterface:
        """Set the netmask from a prefix length and total width.

        Ignored until an address is set.
        """
        self._allocate()
        if self.address is None:
            return self
        mask = cidr_mask(ones, bits)
        if mask is None:
            err = InvalidMaskError(f"/{ones} of {bits} bits")
            self._set_field_error("netmask", err)
            return self
        self.netmask = mask
        self._set_field_error("netmask", None)
        return self

    def with_broadcast(self, broadcast: str) -> NetworkInterface:
        self._allocate()
        self.broadcast = parse_ip(broadcast)
        self._set_field_error(
            "broadcast",
            InvalidBroadcastError(broadcast) if self.broadcast is None else None,
        )
        return self

    def with_gateway(self, gateway: str) -> NetworkInterface:
        self._allocate()
        self.gateway = parse_ip(gateway)
        self._set_field_error(
            "gateway",
            InvalidGatewayError(gateway) if self.gateway is None else None,
        )
        return self

    def with_loopback(self) -> NetworkInterface:
        return self.with_address_config(AddressConfig.LOOPBACK)

    def with_dhcp(self) -> NetworkInterface:
        return self.with_address_config(AddressConfig.DHCP)

    def with_static(self) -> NetworkInterface:
        return self.with_address_config(AddressConfig.STATIC)

    def with_manual(self) -> NetworkInterface:
        return self.with_address_config(AddressConfig.MANUAL)

    def with_address_config(self, config: AddressConfig) -> NetworkInterface:
        self._allocate()
        self.config = config
        return self

    def with_address_version(self, version: AddressVersion | int) -> NetworkInterface:
        """Set the address family.

        Out-of-range values are stored as given and rejected by ``validate()``.
        """
        self._allocate()
        self.version = version  # type: ignore[assignment]
        return self

    def with_dns(self, servers: list[str]) -> NetworkInterface:
        """Append name servers, recording an error for each bad literal."""
        self._allocate()
        errors = self._field_errors.setdefault("dns_servers", [])
        for server in servers:
            ip = parse_ip(server)
            if ip is None:
                errors.append(InvalidDNSServerError(server))
            else:
                self.dns_servers.append(ip)
        if not errors:
            del self._field_errors["dns_servers"]
        return self

    def with_dns_search(self, domains: list[str]) -> NetworkInterface:
        self._allocate()
        self.dns_search = list(domains)
        return self

    def with_mac_address(self, mac_address: str) -> NetworkInterface:
        self._allocate()
        self.mac_address = parse_mac(mac_address)
        self._set_field_error(
            "mac_address",
            InvalidMACAddressError(mac_address) if self.mac_address is None else None,
        )
        return self

    def with_hooks(
        self,
        pre_up: list[str] | None = None,
        post_up: list[str] | None = None,
        pre_down: list[str] | None = None,
        post_down: list[str] | None = None,
    ) -> NetworkInterface:
        """Append hook commands."""
        self._allocate()
        self.hooks.pre_up.extend(pre_up or [])
        self.hooks.post_up.extend(post_up or [])
        self.hooks.pre_down.extend(pre_down or [])
        self.hooks.post_down.extend(post_down or [])
        return self

    # -------------------------------------------------------------------------
    # Validation, text and JSON
    # -------------------------------------------------------------------------

    def validate(self) -> InterfaceHasErrorsError | None:  # type: ignore[override]
        """Check the record against the rules of its config method.

        Returns:
            An ``InterfaceHasErrorsError`` wrapping every problem found, or
            None if the record is valid. Nothing is raised.
        """
        from ifupdown.validator import validate_interface

        self._errs = validate_interface(self)
        if self._errs:
            return InterfaceHasErrorsError(self._errs)
        return None

    def write(self, data: str | bytes) -> int:
        """Populate this record from the text of a single stanza.

        Returns:
            Number of input bytes consumed (all of them).

        Raises:
            MultipleInterfacesError: If ``data`` holds several iface stanzas.
            InvalidIfaceDataError: If a directive is malformed.
        """
        from ifupdown.parser.block import parse_block

        return parse_block(self, data)

    def to_text(self) -> str:
        """Render the stanza.

        Raises:
            InterfaceHasErrorsError: If validation fails, including when the
                record was never populated.
        """
        from ifupdown.serializer import render_interface

        return render_interface(self)

    def __str__(self) -> str:
        try:
            return self.to_text()
        except IfupdownError:
            return ""

    def read(self, buffer: bytearray | memoryview) -> int:
        """Copy the rendered stanza into ``buffer``.

        Returns:
            Number of bytes written.

        Raises:
            BufferTooSmallError: If the rendered text does not fit.
            InterfaceHasErrorsError: If validation fails.
        """
        data = self.to_text().encode()
        if len(data) > len(buffer):
            raise BufferTooSmallError(f"need {len(data)} bytes, have {len(buffer)}")
        buffer[: len(data)] = data
        return len(data)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping with empty and zero values left out."""
        # out-of-range versions are kept for validate() to report
        data = self.model_dump(mode="json", warnings=False)
        data.pop("name")
        data["hooks"] = _omit_empty(data["hooks"])
        return {"name": self.name, **_omit_empty(data)}

    def to_json(self, indent: int | None = 4) -> str:
        return json.dumps(self.to_dict(), indent=indent)


# 0 compares equal to False
_EMPTY_VALUES: tuple[Any, ...] = (None, False, "", [], {})


def _omit_empty(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if value not in _EMPTY_VALUES}
