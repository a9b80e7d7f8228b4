"""Protocol numbers used in Ethernet and IPv4 headers."""

from __future__ import annotations

from enum import IntEnum


class EtherType(IntEnum):
    """EtherType values of the Ethernet header."""

    ARP = 0x0806
    IPV4 = 0x0800
    IPV6 = 0x86DD


class IpProtocol(IntEnum):
    """Protocol field values of the IPv4 header."""

    ICMP = 0x01
    TCP = 0x06
    UDP = 0x11