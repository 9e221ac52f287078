from dataclasses import dataclass, field
import logging

from .errors import UnsupportedWidthError

logger = logging.getLogger(__name__)

MIN_WIDTH: int = 16
"""
Smallest digest width in bits that may be requested.
"""

MAX_WIDTH: int = 1024
"""
Largest digest width in bits that may be requested.
"""


@dataclass(frozen=True)
class FnvParams:
    """
    The constants governing an FNV digest at one of the canonical widths.
    """

    width: int
    """
    Width of the digest in bits.
    """

    basis: int
    """
    The offset basis, which is the digest's value before any input is hashed.
    """

    prime: int
    """
    The FNV prime that the digest is multiplied by once per input byte.
    """

    modulus: int = field(init=False)
    """
    `2**width`. Every multiplication is reduced by this.
    """

    mask: int = field(init=False)
    """
    A mask of 1s `width` bits long, like 0xffffffff.
    """

    def __post_init__(self):
        # frozen dataclass, so derived fields have to go through object
        object.__setattr__(self, "modulus", 1 << self.width)
        object.__setattr__(self, "mask", (1 << self.width) - 1)


CANONICAL_PARAMS: tuple[FnvParams, ...] = (
    FnvParams(
        width=32,
        basis=0x811C9DC5,
        prime=2**24 + 2**8 + 0x93,
    ),
    FnvParams(
        width=64,
        basis=0xCBF29CE484222325,
        prime=2**40 + 2**8 + 0xB3,
    ),
    FnvParams(
        width=128,
        basis=0x6C62272E07BB014262B821756295C58D,
        prime=2**88 + 2**8 + 0x3B,
    ),
    FnvParams(
        width=256,
        basis=int(
            "DD268DBCAAC550362D98C384C4E576CC"
            "C8B1536847B6BBB31023B4C8CAEE0535",
            16,
        ),
        prime=2**168 + 2**8 + 0x63,
    ),
    FnvParams(
        width=512,
        basis=int(
            "B86DB0B1171F4416DCA1E50F309990AC"
            "AC87D059C90000000000000000000D21"
            "E948F68A34C192F62EA79BC942DBE7CE"
            "182036415F56E34BAC982AAC4AFE9FD9",
            16,
        ),
        prime=2**344 + 2**8 + 0x57,
    ),
    FnvParams(
        width=1024,
        basis=int(
            "0000000000000000005F7A76758ECC4D"
            "32E56D5A591028B74B29FC4223FDADA1"
            "6C3BF34EDA3674DA9A21D90000000000"
            "00000000000000000000000000000000"
            "00000000000000000000000000000000"
            "0000000000000000000000000004C6D7"
            "EB6E73802734510A555F256CC005AE55"
            "6BDE8CC9C6A93B21AFF4B16C71EE90B3",
            16,
        ),
        prime=2**680 + 2**8 + 0x8D,
    ),
)
"""
Parameter sets for every width FNV defines constants for, ordered from
narrowest to widest.
"""

CANONICAL_WIDTHS: tuple[int, ...] = tuple(p.width for p in CANONICAL_PARAMS)
"""
The widths that produce a digest without XOR folding.
"""


def check_width(length: int) -> None:
    """
    Raises `UnsupportedWidthError` unless `length` is a width that can be
    produced either directly or by folding.
    """

    if length < MIN_WIDTH or length > MAX_WIDTH:
        raise UnsupportedWidthError(length, MIN_WIDTH, MAX_WIDTH)


def select_params(length: int) -> FnvParams:
    """
    Selects the parameter set to compute a digest of `length` bits with. This
    is the narrowest canonical set at least `length` bits wide, so a request
    for 19 bits uses the 32-bit constants and one for 513 uses 1024-bit ones.
    """

    check_width(length)

    for params in CANONICAL_PARAMS:
        if length <= params.width:
            logger.debug(
                "Selected %d-bit FNV parameters for %d-bit digest",
                params.width,
                length,
            )
            return params

    # unreachable as long as the widest set is MAX_WIDTH bits
    raise UnsupportedWidthError(length, MIN_WIDTH, MAX_WIDTH)


def params_for_width(width: int) -> FnvParams:
    """
    Returns the parameter set for exactly `width` bits, which must be one of
    `CANONICAL_WIDTHS`.
    """

    for params in CANONICAL_PARAMS:
        if params.width == width:
            return params

    raise UnsupportedWidthError(
        width,
        CANONICAL_WIDTHS[0],
        CANONICAL_WIDTHS[-1],
        message=f"width must be one of {CANONICAL_WIDTHS}; received {width}",
    )
