"""
Context — Precision / Rounding State

Глобальная конфигурация для всех новых APFloat значений:
- precision (биты мантиссы) — фиксируется в значении при создании
- rounding mode — правило округления движка
- print_exp_threshold — граница plain/scientific нотации
- hash_max / hash_delta — параметры digest функции

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Изменения влияют только на БУДУЩИЕ значения (существующие не перепрецизируются)
2. ApfContext immutable — любое изменение создаёт новый объект
3. Синхронизации нет: глобальный контекст — shared mutable state.
   Многопоточный код должен сериализовать изменения сам
   или не менять контекст после старта.
"""

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Any, Final, Iterator

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# =============================================================================
# DEFAULTS
# =============================================================================

# Точность по умолчанию (в битах, не в десятичных цифрах)
DEFAULT_PRECISION: Final[int] = 1000

# Минимальная точность, которую принимает движок
MIN_PRECISION: Final[int] = 2

# |exponent| выше порога → scientific нотация
DEFAULT_PRINT_EXP_THRESHOLD: Final[int] = 10

# Digest: максимум значащих цифр и длина окна свёртки
DEFAULT_HASH_MAX: Final[int] = 200
DEFAULT_HASH_DELTA: Final[int] = 20


# =============================================================================
# ENUMS
# =============================================================================


class RoundingMode(str, Enum):
    """Режим округления движка"""

    NEAREST = "NEAREST"  # ties to even
    TOWARD_ZERO = "TOWARD_ZERO"
    UP = "UP"  # к +inf
    DOWN = "DOWN"  # к -inf
    AWAY_FROM_ZERO = "AWAY_FROM_ZERO"


# =============================================================================
# CONTEXT MODEL
# =============================================================================


class ApfContext(BaseModel):
    """
    Конфигурация построения значений.

    Immutable Pydantic модель. Передаётся явно или берётся из
    default-контекста модуля (get_context).
    """

    precision: int = Field(
        DEFAULT_PRECISION, ge=MIN_PRECISION, description="Точность мантиссы (биты)"
    )
    rounding: RoundingMode = Field(
        RoundingMode.NEAREST, description="Режим округления"
    )
    print_exp_threshold: int = Field(
        DEFAULT_PRINT_EXP_THRESHOLD,
        ge=0,
        description="Порог |exponent| для перехода в scientific нотацию",
    )
    hash_max: int = Field(
        DEFAULT_HASH_MAX, gt=0, description="Максимум значащих цифр для digest"
    )
    hash_delta: int = Field(
        DEFAULT_HASH_DELTA, gt=0, description="Длина окна свёртки digest"
    )

    model_config = {"frozen": True}

    def replace(self, **changes: Any) -> "ApfContext":
        """Копия с изменёнными полями (с валидацией)."""
        return ApfContext.model_validate({**self.model_dump(), **changes})


# =============================================================================
# DEFAULT CONTEXT
# =============================================================================

_current: ApfContext = ApfContext()


def get_context() -> ApfContext:
    """Текущий default-контекст."""
    return _current


def set_context(context: ApfContext) -> None:
    """Установить default-контекст целиком."""
    global _current
    if not isinstance(context, ApfContext):
        raise TypeError(f"context must be ApfContext, got {type(context).__name__}")
    logger.debug("apfloat context changed: %s -> %s", _current, context)
    _current = context


def reset_context() -> None:
    """Вернуть все параметры к значениям по умолчанию."""
    set_context(ApfContext())


def _update(**changes: Any) -> None:
    set_context(_current.replace(**changes))


def get_precision() -> int:
    return _current.precision


def set_precision(bits: int) -> None:
    """
    Установить глобальную точность (биты).

    Raises:
        pydantic.ValidationError: если bits < MIN_PRECISION
    """
    _update(precision=bits)


def reset_precision() -> None:
    """Сбросить только точность к DEFAULT_PRECISION."""
    _update(precision=DEFAULT_PRECISION)


def get_rounding() -> RoundingMode:
    return _current.rounding


def set_rounding(mode: RoundingMode) -> None:
    _update(rounding=mode)


def get_print_exp_threshold() -> int:
    return _current.print_exp_threshold


def set_print_exp_threshold(threshold: int) -> None:
    _update(print_exp_threshold=threshold)


def get_hash_parameters() -> tuple[int, int]:
    """(hash_max, hash_delta)"""
    return _current.hash_max, _current.hash_delta


def set_hash_parameters(hash_max: int, hash_delta: int) -> None:
    _update(hash_max=hash_max, hash_delta=hash_delta)


@contextmanager
def local_context(**changes: Any) -> Iterator[ApfContext]:
    """
    Временный контекст: изменения действуют внутри with-блока.

    Предыдущий контекст восстанавливается на любом выходе,
    включая исключения.

    Examples:
        >>> with local_context(precision=64):
        ...     x = APFloat(1) / 3   # 64-битное значение
    """
    previous = _current
    set_context(previous.replace(**changes))
    try:
        yield _current
    finally:
        set_context(previous)
