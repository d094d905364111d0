"""CRC-16/CCITT-FALSE checksum used by the Go-Back-N packet format."""

GEN_POLY = 0x1021
INIT_CRC = 0xFFFF


def crc_calculate(data: bytes | bytearray | memoryview) -> int:
    """Return the CRC-16/CCITT-FALSE remainder of ``data``."""
    crc = INIT_CRC
    for byte in bytes(data):
        crc ^= byte << 8
        for _ in range(8):
            if crc & 0x8000:
                crc = ((crc << 1) ^ GEN_POLY) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return crc