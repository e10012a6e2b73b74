"""Pydantic models for interface records."""

from ifupdown.models.constants import AddressConfig, AddressVersion
from ifupdown.models.interface_models import Hooks, NetworkInterface

__all__ = [
    "AddressConfig",
    "AddressVersion",
    "Hooks",
    "NetworkInterface",
]
