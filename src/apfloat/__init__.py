"""
apfloat — вещественные числа произвольной точности поверх GMP/MPFR (gmpy2).

Examples:
    >>> from apfloat import APFloat, local_context
    >>> APFloat("0.5") + 0.25
    APFloat('0.75')
    >>> with local_context(print_exp_threshold=2):
    ...     str(APFloat(1024))
    '1.024 e3'
"""

from apfloat.core import (
    INF,
    NEG_INF,
    APFloat,
    ApfContext,
    ConstantMutationError,
    RoundingMode,
    UnsupportedOperandError,
    cos,
    digest,
    erf,
    exp,
    fabs,
    get_context,
    get_hash_parameters,
    get_precision,
    get_print_exp_threshold,
    get_rounding,
    local_context,
    log,
    log10,
    normal_cdf,
    power,
    reset_context,
    reset_precision,
    set_context,
    set_hash_parameters,
    set_precision,
    set_print_exp_threshold,
    set_rounding,
    sin,
    sqrt,
    to_string,
    trim,
)

__version__ = "0.1.0"

__all__ = [
    "INF",
    "NEG_INF",
    "APFloat",
    "ApfContext",
    "ConstantMutationError",
    "RoundingMode",
    "UnsupportedOperandError",
    "cos",
    "digest",
    "erf",
    "exp",
    "fabs",
    "get_context",
    "get_hash_parameters",
    "get_precision",
    "get_print_exp_threshold",
    "get_rounding",
    "local_context",
    "log",
    "log10",
    "normal_cdf",
    "power",
    "reset_context",
    "reset_precision",
    "set_context",
    "set_hash_parameters",
    "set_precision",
    "set_print_exp_threshold",
    "set_rounding",
    "sin",
    "sqrt",
    "to_string",
    "trim",
]
