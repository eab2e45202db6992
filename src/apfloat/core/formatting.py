"""
Canonical Formatter

Десятичное представление APFloat. Цифры не округляются и не отбрасываются:
форматтер только переставляет то, что вернул движок.

Формат:
- "0"                                  — любой ноль (включая -0)
- "[-]digits[.digits]"                 — plain, если |exp| <= threshold
- "[-]d[.digits] e<exp>"               — scientific, если |exp| > threshold
- "inf" / "-inf" / "nan"               — специальные значения

exp — экспонента нормализованной мантиссы d.ddd (экспонента движка минус 1).
"""

import re
from typing import TYPE_CHECKING, Final

from . import engine
from .context import get_context

if TYPE_CHECKING:
    from .value import APFloat

# Маркер экспоненты в scientific форме (с пробелом)
EXPONENT_MARKER: Final[str] = " e"

# Scientific форма целиком: мантисса без пробелов + один хвостовой " e<int>"
_CANONICAL_SCIENTIFIC: Final = re.compile(r"(?P<mantissa>\S+) e(?P<exponent>[+-]?[0-9]+)")


def format_digits(digits: str, exponent: int, threshold: int) -> str:
    """
    Разложить строку цифр движка в plain или scientific форму.

    Args:
        digits: цифры от движка, возможно с ведущим '-'
            (value = ±0.d1d2... × 10^exponent)
        exponent: экспонента движка
        threshold: порог |exp| для scientific нотации

    Returns:
        Каноническая строка

    Examples:
        >>> format_digits("314159", -1, 10)
        '0.0314159'
        >>> format_digits("123456", 3, 10)
        '123.456'
        >>> format_digits("123456789012345", 13, 10)
        '1.23456789012345 e12'
    """
    negative = digits.startswith("-")
    if negative:
        digits = digits[1:]

    # Хвостовые нули фиксированной ширины движка — не значащие цифры
    digits = digits.rstrip("0") or "0"

    exp = exponent - 1

    if abs(exp) > threshold:
        mantissa = digits[0]
        if len(digits) > 1:
            mantissa += "." + digits[1:]
        text = f"{mantissa}{EXPONENT_MARKER}{exp}"
    elif exp >= 0:
        integer_part = digits[: exp + 1].ljust(exp + 1, "0")
        fraction = digits[exp + 1 :]
        text = integer_part + ("." + fraction if fraction else "")
    else:
        # -exp - 1 нулей между точкой и первой значащей цифрой
        text = "0." + "0" * (-exp - 1) + digits

    return "-" + text if negative else text


def to_string(value: "APFloat") -> str:
    """Каноническая строка для APFloat (все значащие цифры)."""
    raw = value.raw
    if engine.is_zero(raw):
        return "0"
    if engine.is_nan(raw):
        return "nan"
    if engine.is_infinite(raw):
        return "inf" if engine.sign(raw) > 0 else "-inf"

    context = get_context()
    digits, exponent = engine.digits(raw, 0, context)
    return format_digits(digits, exponent, context.print_exp_threshold)


def normalize_canonical(text: str) -> str:
    """
    Подготовить каноническую строку к разбору движком.

    Scientific форма "1.5 e12" содержит пробел, которого движок не принимает:
    он убирается только в этой форме. Любой другой текст передаётся
    движку без изменений — валидацию делает движок.
    """
    match = _CANONICAL_SCIENTIFIC.fullmatch(text)
    if match is None:
        return text
    return f"{match['mantissa']}e{match['exponent']}"
