"""Address triple (MAC, IPv4, UDP port) carried alongside stream words."""

from __future__ import annotations

from dataclasses import dataclass

MAC_BITS = 48
IP_BITS = 32
PORT_BITS = 16


def _check_width(name: str, value: int, bits: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value < (1 << bits):
        raise ValueError(f"{name} {value:#x} does not fit in {bits} bits")


@dataclass(frozen=True)
class Addresses:
    """A MAC address, an IPv4 address and a UDP port, all as unsigned ints."""

    mac_addr: int = 0
    ip_addr: int = 0
    udp_port: int = 0

    def __post_init__(self) -> None:
        _check_width("mac_addr", self.mac_addr, MAC_BITS)
        _check_width("ip_addr", self.ip_addr, IP_BITS)
        _check_width("udp_port", self.udp_port, PORT_BITS)

    def __str__(self) -> str:
        return f"{{{self.mac_addr:#x}|{self.ip_addr:#x}|{self.udp_port:#x}}}"