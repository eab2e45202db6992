"""
Operands — закрытый union операндов Interop Layer

Ровно три варианта:
- VALUE    — APFloat (payload: mpfr движка)
- FLOAT    — нативный float (payload сужается до double)
- INTEGER  — нативное целое (payload сужается до signed 64-bit)

bool и "символьные" типы (str, bytes) исключены из числового interop,
чтобы не было тихого расширения True → 1 или "7" → 7.

ИЗВЕСТНЫЕ ОГРАНИЧЕНИЯ (не баги):
1. Float-аргумент ограничен точностью double до комбинирования,
   даже если левый операнд несёт 1000 бит.
2. Целые вне [INT64_MIN, INT64_MAX] молча усекаются (two's complement wraparound).
"""

import numbers
from dataclasses import dataclass
from enum import Enum
from typing import Any, Final

# =============================================================================
# CONSTANTS
# =============================================================================

INT64_BITS: Final[int] = 64
INT64_MIN: Final[int] = -(2 ** (INT64_BITS - 1))
INT64_MAX: Final[int] = 2 ** (INT64_BITS - 1) - 1

# Исключены из interop, хотя bool — подкласс int
EXCLUDED_TYPES: Final[tuple[type, ...]] = (bool, str, bytes, bytearray)


# =============================================================================
# OPERAND UNION
# =============================================================================


class OperandKind(str, Enum):
    """Категория операнда"""

    VALUE = "value"
    FLOAT = "float"
    INTEGER = "integer"


@dataclass(frozen=True)
class Operand:
    """Классифицированный операнд: категория + payload для движка."""

    kind: OperandKind
    raw: Any


def narrow_int(value: int) -> int:
    """
    Сузить целое до signed 64-bit (как C-cast к long).

    Examples:
        >>> narrow_int(5)
        5
        >>> narrow_int(2**64 + 5)
        5
        >>> narrow_int(2**63)
        -9223372036854775808
    """
    return ((value - INT64_MIN) % (2**INT64_BITS)) + INT64_MIN


def classify_native(value: Any) -> Operand | None:
    """
    Классифицировать нативный операнд.

    Returns:
        Operand(INTEGER | FLOAT) или None для неподдерживаемых типов
        (bool, str, bytes, complex, прочие объекты)
    """
    if isinstance(value, EXCLUDED_TYPES):
        return None
    if isinstance(value, numbers.Integral):
        return Operand(OperandKind.INTEGER, narrow_int(int(value)))
    if isinstance(value, numbers.Real):
        return Operand(OperandKind.FLOAT, float(value))
    return None
