"""
Core apfloat modules

Значение произвольной точности, контекст точности/округления,
форматтер, digest и функции поверх движка gmpy2.
"""

# Context (precision / rounding state)
from apfloat.core.context import (
    DEFAULT_HASH_DELTA,
    DEFAULT_HASH_MAX,
    DEFAULT_PRECISION,
    DEFAULT_PRINT_EXP_THRESHOLD,
    MIN_PRECISION,
    ApfContext,
    RoundingMode,
    get_context,
    get_hash_parameters,
    get_precision,
    get_print_exp_threshold,
    get_rounding,
    local_context,
    reset_context,
    reset_precision,
    set_context,
    set_hash_parameters,
    set_precision,
    set_print_exp_threshold,
    set_rounding,
)

# Operands (interop union)
from apfloat.core.operands import (
    INT64_MAX,
    INT64_MIN,
    Operand,
    OperandKind,
    classify_native,
    narrow_int,
)

# Value
from apfloat.core.value import (
    APFloat,
    ConstantMutationError,
    UnsupportedOperandError,
)

# Formatter / Digest
from apfloat.core.digest import digest
from apfloat.core.formatting import format_digits, to_string

# Functions
from apfloat.core.functions import (
    cos,
    erf,
    exp,
    fabs,
    log,
    log10,
    normal_cdf,
    power,
    sin,
    sqrt,
    trim,
)

# Constants
from apfloat.core.constants import INF, NEG_INF

__all__ = [
    # Context — Defaults
    "DEFAULT_HASH_DELTA",
    "DEFAULT_HASH_MAX",
    "DEFAULT_PRECISION",
    "DEFAULT_PRINT_EXP_THRESHOLD",
    "MIN_PRECISION",
    # Context — Types
    "ApfContext",
    "RoundingMode",
    # Context — Functions
    "get_context",
    "get_hash_parameters",
    "get_precision",
    "get_print_exp_threshold",
    "get_rounding",
    "local_context",
    "reset_context",
    "reset_precision",
    "set_context",
    "set_hash_parameters",
    "set_precision",
    "set_print_exp_threshold",
    "set_rounding",
    # Operands
    "INT64_MAX",
    "INT64_MIN",
    "Operand",
    "OperandKind",
    "classify_native",
    "narrow_int",
    # Value
    "APFloat",
    "ConstantMutationError",
    "UnsupportedOperandError",
    # Formatter / Digest
    "digest",
    "format_digits",
    "to_string",
    # Functions
    "cos",
    "erf",
    "exp",
    "fabs",
    "log",
    "log10",
    "normal_cdf",
    "power",
    "sin",
    "sqrt",
    "trim",
    # Constants
    "INF",
    "NEG_INF",
]
