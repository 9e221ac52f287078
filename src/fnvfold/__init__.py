# Reexport for more ergonomic use in calling code.
from .encoding import (
    from_signed_bytes as from_signed_bytes,
    to_signed_bytes as to_signed_bytes,
)
from .errors import UnsupportedWidthError as UnsupportedWidthError
from .fnv import (
    Variant as Variant,
    canonical_digest as canonical_digest,
    fnv as fnv,
    fnv1 as fnv1,
    fnv1a as fnv1a,
    fnv1_digest as fnv1_digest,
    fnv1a_digest as fnv1a_digest,
    fnv_int as fnv_int,
    xor_fold as xor_fold,
)
from .params import (
    CANONICAL_PARAMS as CANONICAL_PARAMS,
    CANONICAL_WIDTHS as CANONICAL_WIDTHS,
    MAX_WIDTH as MAX_WIDTH,
    MIN_WIDTH as MIN_WIDTH,
    FnvParams as FnvParams,
    params_for_width as params_for_width,
    select_params as select_params,
)
