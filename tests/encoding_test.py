import pytest

from fnvfold import from_signed_bytes, to_signed_bytes


@pytest.mark.parametrize(
    "value,expected_hex",
    [
        (0, "00"),
        (1, "01"),
        (0x7F, "7f"),
        (0x80, "0080"),
        (0xFF, "00ff"),
        (0x17F8, "17f8"),
        (0x69C0F, "069c0f"),
        (0x7FFFFFFF, "7fffffff"),
        (0x8D968DBD, "008d968dbd"),
        (0x78FDB7E8E153064D, "78fdb7e8e153064d"),
    ],
)
def test_to_signed_bytes(value, expected_hex):
    assert to_signed_bytes(value) == bytes.fromhex(expected_hex)


def test_to_signed_bytes_full_width_digest():
    res = to_signed_bytes(2**1024 - 1)

    assert len(res) == 129
    assert res[0] == 0x00
    assert res[1:] == b"\xff" * 128


def test_to_signed_bytes_negative():
    with pytest.raises(ValueError):
        to_signed_bytes(-1)


def test_from_signed_bytes():
    assert from_signed_bytes(bytes.fromhex("008d968dbd")) == 0x8D968DBD
    assert from_signed_bytes(bytes.fromhex("17f8")) == 0x17F8
    assert from_signed_bytes(b"\x00") == 0

    # a set top bit reads as negative, which is why digests carry a guard byte
    assert from_signed_bytes(bytes.fromhex("8d968dbd")) < 0


def test_from_signed_bytes_empty():
    with pytest.raises(ValueError):
        from_signed_bytes(b"")
