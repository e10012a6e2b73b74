"""Constants for ifupdown models."""

from __future__ import annotations

from enum import IntEnum


class AddressConfig(IntEnum):
    """Address configuration method of an ``iface`` stanza.

    The integer values are the JSON discriminants.
    """

    UNSET = 0
    LOOPBACK = 1
    DHCP = 2
    STATIC = 3
    MANUAL = 4

    def __str__(self) -> str:
        if self is AddressConfig.UNSET:
            return ""
        return self.name.lower()

    @classmethod
    def from_keyword(cls, keyword: str) -> AddressConfig | None:
        """Map a method keyword (``static``, ``dhcp``, ...) to a member."""
        for member in cls:
            if member is not cls.UNSET and str(member) == keyword:
                return member
        return None


class AddressVersion(IntEnum):
    """Address family of an ``iface`` stanza."""

    NIL = 0
    V4 = 1
    V6 = 2

    def __str__(self) -> str:
        return _FAMILY_KEYWORDS.get(self, "")

    @classmethod
    def from_keyword(cls, keyword: str) -> AddressVersion | None:
        """Map ``inet`` / ``inet6`` to a member."""
        for member, family in _FAMILY_KEYWORDS.items():
            if family == keyword:
                return member
        return None


_FAMILY_KEYWORDS: dict[AddressVersion, str] = {
    AddressVersion.V4: "inet",
    AddressVersion.V6: "inet6",
}

# Directives that open an interface block.
BLOCK_START_KEYWORDS = ("auto", "iface")
BLOCK_START_PREFIXES = ("allow-",)

HOOK_DIRECTIVES = {
    "pre-up": "pre_up",
    "post-up": "post_up",
    "pre-down": "pre_down",
    "post-down": "post_down",
}
