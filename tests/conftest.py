"""Shared fixtures."""

import logging

import pytest

from ifupdown.utils.logger import Logger


@pytest.fixture(autouse=True)
def reset_logger():
    """Leave the class-level logger unconfigured between tests."""
    yield
    logger = logging.getLogger("ifupdown")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    Logger._configured = False


@pytest.fixture
def static_eth0_text():
    """A fully featured static stanza in canonical form."""
    return (
        "auto eth0\n"
        "allow-hotplug eth0\n"
        "iface eth0 inet static\n"
        "\taddress 192.168.1.10\n"
        "\tnetmask 255.255.255.0\n"
        "\tbroadcast 192.168.1.255\n"
        "\tgateway 192.168.1.1\n"
        "\tdns-nameservers 1.1.1.1 8.8.8.8\n"
        "\tdns-search example.com lan\n"
        "\thwaddress ether 00:11:22:33:44:55\n"
        "\tpre-up ip link set dev eth0 up\n"
        "\tpost-up ip route add 10.0.0.0/8 via 192.168.1.254\n"
        "\tpre-down ip route del 10.0.0.0/8\n"
        "\tpost-down ip link set dev eth0 down\n"
    )
