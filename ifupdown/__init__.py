"""ifupdown - parse and write /etc/network/interfaces files."""

from ifupdown.errors import (
    IfupdownError,
    InterfaceHasErrorsError,
    InvalidIfaceDataError,
    MultipleInterfacesError,
    ParseError,
)
from ifupdown.interfaces import Interfaces
from ifupdown.models import AddressConfig, AddressVersion, Hooks, NetworkInterface
from ifupdown.parser import MultiParser
from ifupdown.version.ifupdown_version import IFUPDOWN_VERSION, Version

__version__ = str(IFUPDOWN_VERSION)
__version_info__ = IFUPDOWN_VERSION

__all__ = [
    "IFUPDOWN_VERSION",
    "AddressConfig",
    "AddressVersion",
    "Hooks",
    "IfupdownError",
    "InterfaceHasErrorsError",
    "Interfaces",
    "InvalidIfaceDataError",
    "MultiParser",
    "MultipleInterfacesError",
    "NetworkInterface",
    "ParseError",
    "Version",
    "__version__",
    "__version_info__",
]
