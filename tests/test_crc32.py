import zlib

import pytest

from ethwords.addresses import Addresses
from ethwords.crc32 import CRC32, CRC32_RESIDUE, CRC32_RESIDUE_INV_BREV, crc32_preview
from ethwords.protocols import EtherType

SRC = Addresses(0x020000000001, 0xC0A80001, 0x1234)
DST = Addresses(0x020000000002, 0xC0A80002, 0x5678)


def _eth_packet(src, dst, ether_type, payload):
    packet = [
        *dst.mac_addr.to_bytes(6, "big"),
        *src.mac_addr.to_bytes(6, "big"),
        ether_type >> 8, ether_type & 0xFF,
        *payload,
    ]
    packet += [0] * max(0, 60 - len(packet))
    crc = CRC32()
    crc.update(packet)
    return packet + list(crc.value.to_bytes(4, "big"))


def test_check_value_of_standard_message():
    crc = CRC32()
    crc.update(b"123456789")
    assert crc.value == 0x2639F4CB
    assert crc == 0x2639F4CB


def test_fcs_bytes_match_ethernet_wire_order():
    packet = _eth_packet(SRC, DST, EtherType.IPV4, [0xDE, 0xAD, 0xBE, 0xEF])
    body, fcs = packet[:-4], packet[-4:]
    assert len(body) == 60
    assert bytes(fcs) == zlib.crc32(bytes(body)).to_bytes(4, "little")


def test_frame_with_fcs_gives_residue():
    packet = _eth_packet(SRC, DST, EtherType.ARP, list(range(50)))
    crc = CRC32()
    crc.update(packet)
    assert crc.value == CRC32_RESIDUE
    assert crc.accumulator == CRC32_RESIDUE_INV_BREV


def test_corrupted_frame_misses_residue():
    packet = _eth_packet(SRC, DST, EtherType.IPV4, [1, 2, 3])
    packet[20] ^= 0x01
    crc = CRC32()
    crc.update(packet)
    expected = int.from_bytes(zlib.crc32(bytes(packet)).to_bytes(4, "little"), "big")
    assert crc.value == expected
    assert (crc == CRC32_RESIDUE) is False


def test_update_matches_repeated_add():
    by_update = CRC32()
    by_update.update([0x10, 0x20, 0x30, 0x40, 0x50])
    by_add = CRC32()
    for byte in [0x10, 0x20, 0x30, 0x40, 0x50]:
        by_add.add(byte)
    assert by_update == by_add
    assert by_update.value == by_add.value


def test_reset_restores_initial_state():
    crc = CRC32()
    crc.update(b"some bytes")
    crc.reset()
    assert crc.accumulator == 0
    assert crc == CRC32()
    crc.update(b"123456789")
    assert crc.value == 0x2639F4CB


def test_empty_value_is_all_ones():
    assert CRC32().value == 0xFFFFFFFF


def test_bits_selects_range():
    crc = CRC32()
    crc.update(b"123456789")
    assert crc.bits(31, 24) == 0x26
    assert crc.bits(7, 0) == 0xCB
    assert crc.bits(31, 0) == 0x2639F4CB


@pytest.mark.parametrize("high, low", [(32, 0), (0, 1), (3, -1)])
def test_bits_rejects_bad_range(high, low):
    with pytest.raises(ValueError):
        CRC32().bits(high, low)


def test_add_of_palindromic_byte_matches_preview():
    crc = CRC32()
    crc.add(0xFF)
    assert crc.accumulator == crc32_preview(0xFF, 0, 0)


def test_preview_of_zero_without_inversion_is_zero():
    assert crc32_preview(0, 0, 4) == 0


def test_preview_inverts_first_bytes():
    for count in range(4):
        assert crc32_preview(0x5A, 0x12345678, count) == crc32_preview(0xA5, 0x12345678, 4)


def test_preview_is_linear_after_preset():
    a, b = 0x3C, 0xC1
    c1, c2 = 0xDEADBEEF, 0x01234567
    combined = crc32_preview(a ^ b, c1 ^ c2, 5)
    assert combined == crc32_preview(a, c1, 5) ^ crc32_preview(b, c2, 5)


@pytest.mark.parametrize(
    "args",
    [(0x100, 0, 0), (0, 1 << 32, 0), (0, 0, 8), (-1, 0, 0)],
)
def test_preview_rejects_out_of_range(args):
    with pytest.raises(ValueError):
        crc32_preview(*args)


def test_add_rejects_wide_byte():
    with pytest.raises(ValueError):
        CRC32().add(0x100)