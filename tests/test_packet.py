import random

import pytest

from netlab.crc import crc_calculate
from netlab.packet import (
    PACKET_SIZE,
    Packet,
    PacketType,
    introduce_bit_error,
)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


@pytest.mark.parametrize(
    "kind, wire_value, label",
    [
        (PacketType.DATA, 1, "[DAT|"),
        (PacketType.ACK, 2, "[ACK|"),
        (PacketType.NAK, 3, "[NAK|"),
    ],
)
def test_packet_type_on_the_wire(kind, wire_value, label):
    pkt = Packet.build(kind, b"\x00\x00", 5)
    raw = pkt.to_bytes()
    assert raw[0] == wire_value
    assert raw[1] == 5
    assert pkt.describe().startswith(label)
    assert Packet.from_bytes(raw) == pkt


def test_build_wire_layout():
    pkt = Packet.build(PacketType.DATA, b"AB", 0)
    raw = pkt.to_bytes()
    assert len(raw) == PACKET_SIZE
    assert raw[:4] == bytes([1, 0, ord("A"), ord("B")])
    assert raw[4:] == crc_calculate(raw[:4]).to_bytes(2, "big")


def test_build_accepts_str_data():
    assert Packet.build(PacketType.DATA, "CD", 1) == Packet.build(PacketType.DATA, b"CD", 1)


def test_round_trip():
    pkt = Packet.build(PacketType.ACK, b"\x00\x00", 7)
    assert Packet.from_bytes(pkt.to_bytes()) == pkt
    assert Packet.from_bytes(bytearray(pkt.to_bytes())) == pkt


def test_built_packet_is_valid():
    pkt = Packet.build(PacketType.NAK, b"\x00\x00", 4)
    assert pkt.is_valid()
    assert pkt.expected_crc() == pkt.crc_sum


def test_corruption_detected():
    raw = bytearray(Packet.build(PacketType.DATA, b"XY", 11).to_bytes())
    raw[2] ^= 0x10
    corrupted = Packet.from_bytes(raw)
    assert not corrupted.is_valid()
    assert corrupted.expected_crc() != corrupted.crc_sum


def test_describe_data_packet():
    pkt = Packet.build(PacketType.DATA, b"AB", 0)
    assert pkt.describe() == f"[DAT|0|AB|{pkt.crc_sum:x}]"
    assert str(pkt) == pkt.describe()


def test_describe_nul_bytes_as_spaces():
    pkt = Packet.build(PacketType.NAK, b"\x00\x00", 3)
    assert pkt.describe().startswith("[NAK|3|  |")


def test_describe_unknown_type():
    pkt = Packet.from_bytes(bytes([9, 2, 0x41, 0x00, 0x12, 0x34]))
    assert pkt.describe() == "[???|2|A |1234]"


@pytest.mark.parametrize("data", [b"", b"A", b"ABC"])
def test_build_rejects_wrong_data_size(data):
    with pytest.raises(ValueError):
        Packet.build(PacketType.DATA, data, 0)


@pytest.mark.parametrize("seq", [-1, 256])
def test_build_rejects_out_of_range_sequence(seq):
    with pytest.raises(ValueError):
        Packet.build(PacketType.DATA, b"AB", seq)


@pytest.mark.parametrize("length", [0, 5, 7])
def test_from_bytes_rejects_wrong_length(length):
    with pytest.raises(ValueError):
        Packet.from_bytes(bytes(length))


def test_bit_error_flips_everything_when_always_hit():
    data = bytes([0x00, 0x0F, 0xAA, 0xFF])
    result = introduce_bit_error(data, 0.5, _FixedRng(0.5))
    assert result == bytes(b ^ 0xFF for b in data)


def test_bit_error_leaves_data_when_never_hit():
    data = b"\x01\x02ABCD"
    assert introduce_bit_error(data, 0.2, _FixedRng(0.9)) == data


def test_bit_error_does_not_modify_input():
    data = bytearray(b"ABCDEF")
    result = introduce_bit_error(data, 1.0, random.Random(1))
    assert data == bytearray(b"ABCDEF")
    assert len(result) == len(data)


def test_bit_error_deterministic_with_seed():
    data = Packet.build(PacketType.DATA, b"AB", 0).to_bytes()
    first = introduce_bit_error(data, 0.3, random.Random(42))
    second = introduce_bit_error(data, 0.3, random.Random(42))
    assert first == second
    assert len(first) == PACKET_SIZE


def test_negative_rate_never_flips():
    data = bytes(range(32))
    assert introduce_bit_error(data, -1.0, random.Random(3)) == data