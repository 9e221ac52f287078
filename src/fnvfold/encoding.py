"""
Conversions between digests and the byte strings handed back to callers.

Digests are encoded the same way a signed arbitrary-precision integer is
converted to bytes: big-endian, as short as possible, but always with room for
a sign bit. Because digests are never negative, that means a value whose top
bit would land on a byte boundary gets an extra leading zero byte, so a 32-bit
digest like 0x8d968dbd comes back as five bytes, `00 8d 96 8d bd`. Callers
that want exactly `length / 8` bytes need to strip or pad that themselves.
"""


def to_signed_bytes(value: int) -> bytes:
    """
    Encodes a non-negative integer as minimal big-endian bytes with room for a
    sign bit. Zero encodes as a single zero byte.
    """

    if value < 0:
        raise ValueError(f"value must be non-negative; received {value}")

    return value.to_bytes(value.bit_length() // 8 + 1, "big")


def from_signed_bytes(data: bytes) -> int:
    """
    Decodes bytes produced by `to_signed_bytes` (or any big-endian two's
    complement encoding) back into an integer.
    """

    if not data:
        raise ValueError("data must contain at least one byte")

    return int.from_bytes(data, "big", signed=True)
