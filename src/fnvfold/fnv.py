"""
FNV is the Fowler–Noll–Vo hash function, a simple non-cryptographic hash
that's very easy to implement. FNV only defines constants for digests of 32,
64, 128, 256, 512, and 1024 bits, so any other width between 16 and 1024 bits
is produced by hashing at the next canonical width up and XOR folding the
result down to size, as described in the FNV draft:

    https://datatracker.ietf.org/doc/html/draft-eastlake-fnv

Python's integers have unbounded precision, so the fixed width arithmetic is
emulated by masking off everything above the digest's width after each
multiplication.
"""

from enum import Enum
import logging
from typing import Iterable

from .encoding import to_signed_bytes
from .params import FnvParams, params_for_width, select_params

logger = logging.getLogger(__name__)


class Variant(str, Enum):
    """
    The flavor of FNV to compute. The two only differ in the order in which
    each input byte is mixed into the digest.
    """

    FNV1 = "fnv1"
    """
    Multiply the digest by the prime, then XOR in the byte.
    """

    FNV1A = "fnv1a"
    """
    XOR in the byte, then multiply the digest by the prime. Generally has
    slightly better dispersion for short inputs.
    """


def fnv1_digest(data: Iterable[int], params: FnvParams) -> int:
    """
    Hashes data as an FNV-1 digest of exactly `params.width` bits, without any
    folding. Data is normally bytes, but any iterable of integers works, with
    each value's lower 8 bits taken as an unsigned byte.
    """

    hash = params.basis
    mask = params.mask
    prime = params.prime

    for byte in data:
        hash *= prime
        hash &= mask  # take lower N bits of multiplication product
        hash ^= byte & 0xFF

    return hash


def fnv1a_digest(data: Iterable[int], params: FnvParams) -> int:
    """
    Hashes data as an FNV-1a digest of exactly `params.width` bits, without
    any folding. See `fnv1_digest`.
    """

    hash = params.basis
    mask = params.mask
    prime = params.prime

    for byte in data:
        hash ^= byte & 0xFF
        hash *= prime
        hash &= mask

    return hash


__DIGEST_FUNCS = {
    Variant.FNV1: fnv1_digest,
    Variant.FNV1A: fnv1a_digest,
}


def canonical_digest(
    data: Iterable[int], width: int, variant: Variant = Variant.FNV1
) -> int:
    """
    Hashes data at one of the canonical widths and returns the raw digest as
    an integer. Raises `UnsupportedWidthError` if `width` isn't one of
    `CANONICAL_WIDTHS`.
    """

    return __DIGEST_FUNCS[Variant(variant)](data, params_for_width(width))


def xor_fold(digest: int, k: int) -> int:
    """
    XOR folds a digest down to `k` bits by mixing its high bits into its low
    ones and masking off the rest.
    """

    return (digest ^ (digest >> k)) & ((1 << k) - 1)


def fnv_int(data: Iterable[int], length: int, variant: Variant = Variant.FNV1) -> int:
    """
    Hashes data to a `length` bit digest, returned as an integer. `length`
    must be between 16 and 1024, inclusive, and is checked before any data is
    read.
    """

    params = select_params(length)
    digest_func = __DIGEST_FUNCS[Variant(variant)]

    hash = digest_func(data, params)

    if length < params.width:
        logger.debug("Folding %d-bit digest to %d bits", params.width, length)
        hash = xor_fold(hash, length)

    return hash


def fnv(data: Iterable[int], length: int, variant: Variant = Variant.FNV1) -> bytes:
    """
    Hashes data to a `length` bit digest using the given variant. See `fnv1`
    for details on the returned bytes.
    """

    return to_signed_bytes(fnv_int(data, length, variant))


def fnv1(data: Iterable[int], length: int) -> bytes:
    """
    Calculates the FNV-1 hash of data, XOR folding as needed to get a digest of
    `length` bits, which must be between 16 and 1024, inclusive. Data should be
    bytes rather than a string, so encode a string with something like
    `input_str.encode("utf-8")` or `b"string as bytes"`.

    The digest comes back as minimal big-endian bytes with room for a sign
    bit, so it may carry an extra leading zero byte when its top bit is set,
    and widths that aren't a multiple of 8 leave some leading zero bits:

        ```
        fnv1(b"asdfasdfasdfasdf", 32).hex() # "008d968dbd"
        fnv1(b"asdfasdfasdfasdf", 19).hex() # "069c0f"
        ```

    Raises `UnsupportedWidthError` if `length` is out of range.
    """

    return fnv(data, length, Variant.FNV1)


def fnv1a(data: Iterable[int], length: int) -> bytes:
    """
    Calculates the FNV-1a hash of data, XOR folding as needed to get a digest
    of `length` bits. Otherwise identical to `fnv1`.

        ```
        fnv1a(b"asdfasdfasdfasdf", 64).hex() # "78fdb7e8e153064d"
        ```
    """

    return fnv(data, length, Variant.FNV1A)
