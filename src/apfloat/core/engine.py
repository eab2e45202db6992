"""
Engine — binding к gmpy2 (GMP/MPFR)

Узкий интерфейс к движку произвольной точности. Слой над ним
не реализует арифметику сам: все вычисления делает MPFR.

Каждый вызов выполняется внутри engine_scope: with-блок ставит свежий
gmpy2 context с точностью и округлением из ApfContext и
восстанавливает предыдущий gmpy2 context на любом выходе.

Traps движка выключены:
- x / 0 → ±inf
- 0 / 0, sqrt(-1), log(-1) → nan
Ошибки парсинга (ValueError) и нехватка памяти пробрасываются как есть.
"""

import operator
from contextlib import contextmanager
from typing import Any, Callable, Iterator

import gmpy2
from gmpy2 import mpfr

from .context import ApfContext, RoundingMode

# Payload, который движок принимает вторым аргументом: mpfr | float | int
Raw = Any

_ROUNDING: dict[RoundingMode, int] = {
    RoundingMode.NEAREST: gmpy2.RoundToNearest,
    RoundingMode.TOWARD_ZERO: gmpy2.RoundToZero,
    RoundingMode.UP: gmpy2.RoundUp,
    RoundingMode.DOWN: gmpy2.RoundDown,
    RoundingMode.AWAY_FROM_ZERO: gmpy2.RoundAwayZero,
}


# =============================================================================
# ENGINE SCOPE
# =============================================================================


@contextmanager
def engine_scope(context: ApfContext, precision: int | None = None) -> Iterator[None]:
    """
    Активировать gmpy2 context на время одной операции.

    Args:
        context: ApfContext (точность и округление)
        precision: переопределение точности результата (для assign)
    """
    bits = precision if precision is not None else context.precision
    with gmpy2.context(precision=bits, round=_ROUNDING[context.rounding]):
        yield


# =============================================================================
# CONSTRUCTION
# =============================================================================


def convert(source: Raw, context: ApfContext, precision: int | None = None) -> mpfr:
    """Новое mpfr из mpfr / float / int с округлением до precision."""
    bits = precision if precision is not None else context.precision
    with engine_scope(context, bits):
        return mpfr(source, bits)


def parse(text: str, context: ApfContext) -> mpfr:
    """
    Десятичная строка → mpfr.

    Raises:
        ValueError: движок не смог разобрать строку
    """
    with engine_scope(context):
        return mpfr(text, context.precision)


def infinity(sign: int, context: ApfContext) -> mpfr:
    with engine_scope(context):
        return gmpy2.inf(sign)


# =============================================================================
# ARITHMETIC
# =============================================================================


def negate(x: Raw, context: ApfContext) -> mpfr:
    with engine_scope(context):
        return -x


def add(x: Raw, y: Raw, context: ApfContext) -> mpfr:
    with engine_scope(context):
        return gmpy2.add(x, y)


def sub(x: Raw, y: Raw, context: ApfContext) -> mpfr:
    with engine_scope(context):
        return gmpy2.sub(x, y)


def mul(x: Raw, y: Raw, context: ApfContext) -> mpfr:
    with engine_scope(context):
        return gmpy2.mul(x, y)


def div(x: Raw, y: Raw, context: ApfContext) -> mpfr:
    with engine_scope(context):
        return gmpy2.div(x, y)


def power(x: Raw, y: Raw, context: ApfContext) -> mpfr:
    # mpfr ** int → pow_si/pow_z, mpfr ** mpfr → pow
    with engine_scope(context):
        return x**y


# =============================================================================
# COMPARISON
# =============================================================================

COMPARATORS: dict[str, Callable[[Any, Any], bool]] = {
    "lt": operator.lt,
    "gt": operator.gt,
    "le": operator.le,
    "ge": operator.ge,
    "eq": operator.eq,
    "ne": operator.ne,
}


def compare(x: Raw, y: Raw, op: str) -> bool:
    """Точное сравнение движком. С nan всё False, кроме ne."""
    return COMPARATORS[op](x, y)


def sign(x: mpfr) -> int:
    return gmpy2.sign(x)


def is_zero(x: mpfr) -> bool:
    return gmpy2.is_zero(x)


def is_nan(x: mpfr) -> bool:
    return gmpy2.is_nan(x)


def is_infinite(x: mpfr) -> bool:
    return gmpy2.is_infinite(x)


def precision_of(x: mpfr) -> int:
    return x.precision


# =============================================================================
# EXTRACTION
# =============================================================================


def digits(x: mpfr, count: int, context: ApfContext) -> tuple[str, int]:
    """
    Десятичные цифры и экспонента: value = ±0.d1d2... × 10^exponent.

    Args:
        count: число цифр; 0 — все значащие цифры (достаточно для round-trip)

    Returns:
        (digit_string, exponent); знак '-' входит в digit_string
    """
    with engine_scope(context):
        text, exponent, _ = x.digits(10, count)
    return text, exponent


def to_double(x: mpfr, context: ApfContext) -> float:
    with engine_scope(context):
        return float(x)


def to_int(x: mpfr) -> int:
    """Усечение к нулю. inf → OverflowError, nan → ValueError (от движка)."""
    return int(x)


# =============================================================================
# TRANSCENDENTAL
# =============================================================================


def _unary(function: Callable[[mpfr], mpfr]) -> Callable[[mpfr, ApfContext], mpfr]:
    def apply(x: mpfr, context: ApfContext) -> mpfr:
        with engine_scope(context):
            return function(x)

    apply.__name__ = function.__name__
    return apply


exp = _unary(gmpy2.exp)
log = _unary(gmpy2.log)
log10 = _unary(gmpy2.log10)
cos = _unary(gmpy2.cos)
sin = _unary(gmpy2.sin)
sqrt = _unary(gmpy2.sqrt)
erf = _unary(gmpy2.erf)
