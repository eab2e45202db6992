"""
Transcendental & Utility Functions

Тонкие обёртки над движком. Аргумент — APFloat или нативное число
(нативное сначала конвертируется через конструктор APFloat).
Результат создаётся с точностью текущего контекста.

Вне области определения результат — nan (traps движка выключены):
    log(-1), sqrt(-1) → nan
"""

from typing import Any, Callable

from . import engine
from .context import get_context
from .value import APFloat


def _as_value(x: Any) -> APFloat:
    return x if isinstance(x, APFloat) else APFloat(x)


def _apply(function: Callable[[Any, Any], Any], x: Any) -> APFloat:
    return APFloat._wrap(function(_as_value(x).raw, get_context()))


def exp(x: Any) -> APFloat:
    return _apply(engine.exp, x)


def log(x: Any) -> APFloat:
    """Натуральный логарифм."""
    return _apply(engine.log, x)


def log10(x: Any) -> APFloat:
    return _apply(engine.log10, x)


def cos(x: Any) -> APFloat:
    return _apply(engine.cos, x)


def sin(x: Any) -> APFloat:
    return _apply(engine.sin, x)


def sqrt(x: Any) -> APFloat:
    return _apply(engine.sqrt, x)


def erf(x: Any) -> APFloat:
    return _apply(engine.erf, x)


def fabs(x: Any) -> APFloat:
    """|x|: копия и смена знака, если x < 0 (без abs-примитива движка)."""
    return abs(_as_value(x))


def normal_cdf(x: Any) -> APFloat:
    """
    Функция распределения стандартного нормального закона.

    Формула:
        Φ(x) = (1 + erf(x / sqrt(2))) / 2

    Examples:
        >>> normal_cdf(0)
        APFloat('0.5')
    """
    return (1 + erf(_as_value(x) / sqrt(APFloat(2)))) / 2


def power(base: Any, exponent: Any) -> APFloat:
    """base ** exponent с диспетчеризацией показателя (см. APFloat.__pow__)."""
    return _as_value(base) ** exponent


def trim(x: Any) -> float:
    """Усечение до double (округление текущего контекста)."""
    return float(_as_value(x))
