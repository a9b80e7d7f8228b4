"""Bit-exact models of Ethernet/IPv4/UDP addresses, protocol numbers, Internet checksums and the Ethernet CRC-32."""

__version__ = "0.1.0"
__all__ = ["addresses", "protocols", "checksum", "crc32"]