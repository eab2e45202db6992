"""
APFloat — вещественное число произвольной точности

Numeric Interop Layer поверх движка (gmpy2/MPFR):
- операнды классифицируются в {APFloat, float, int} (operands.py)
- бинарные операторы и сравнения маршрутизируются в движок
- отражённые операторы (native слева) дают тот же результат

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Точность значения фиксируется при создании (текущий контекст)
2. Результат операции создаётся с точностью ТЕКУЩЕГО контекста
3. assign и compound assignment (+= ...) сохраняют точность получателя
4. Равенство — точное (не tolerance), после сужения нативного операнда
5. Деление на ноль: ±inf, 0/0 → nan (IEEE-семантика движка)

APFloat изменяем (assign, +=). Значение, используемое как ключ dict,
нельзя мутировать, пока оно в словаре.
"""

from typing import Any, Callable

from . import engine
from .context import ApfContext, get_context
from .digest import digest
from .formatting import normalize_canonical, to_string
from .operands import Operand, OperandKind, classify_native

# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnsupportedOperandError(TypeError):
    """Тип вне числового interop (bool, bytes, complex, произвольный объект)."""

    pass


class ConstantMutationError(TypeError):
    """Попытка assign на неизменяемую константу (INF, NEG_INF)."""

    pass


EngineOp = Callable[[Any, Any, ApfContext], Any]


# =============================================================================
# APFLOAT
# =============================================================================


class APFloat:
    """
    Вещественное число произвольной точности.

    Создание:
        APFloat()            — ноль
        APFloat(other)       — копия (точность текущего контекста)
        APFloat("1.25")      — разбор десятичной строки движком
        APFloat(3), APFloat(0.5) — из нативного числа

    Examples:
        >>> APFloat("1.25") + 1
        APFloat('2.25')
        >>> 1 / APFloat(0)
        APFloat('inf')
    """

    __slots__ = ("_raw", "_precision", "_constant")

    def __init__(self, value: Any = None) -> None:
        context = get_context()
        self._precision = context.precision
        self._constant = False

        if value is None:
            self._raw = engine.convert(0, context)
        elif isinstance(value, APFloat):
            self._raw = engine.convert(value._raw, context)
        elif isinstance(value, str):
            self._raw = engine.parse(normalize_canonical(value), context)
        else:
            operand = classify_native(value)
            if operand is None:
                raise UnsupportedOperandError(
                    f"cannot construct APFloat from {type(value).__name__}"
                )
            self._raw = engine.convert(operand.raw, context)

    @classmethod
    def from_string(cls, text: str) -> "APFloat":
        """Фабрика: разбор десятичной строки (включая каноническую форму)."""
        if not isinstance(text, str):
            raise UnsupportedOperandError(
                f"from_string expects str, got {type(text).__name__}"
            )
        return cls(text)

    @classmethod
    def _wrap(cls, raw: Any) -> "APFloat":
        """Обернуть готовый результат движка без повторного округления."""
        result = cls.__new__(cls)
        result._raw = raw
        result._precision = engine.precision_of(raw)
        result._constant = False
        return result

    @classmethod
    def _infinity(cls, sign: int) -> "APFloat":
        result = cls._wrap(engine.infinity(sign, get_context()))
        result._constant = True
        return result

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def raw(self) -> Any:
        """mpfr движка (только чтение)."""
        return self._raw

    @property
    def precision(self) -> int:
        """Точность в битах, зафиксированная при создании."""
        return self._precision

    def digits(self, count: int = 0) -> tuple[str, int]:
        """
        Цифры движка: (digit_string, exponent), value = ±0.d1d2... × 10^exponent.

        Args:
            count: число цифр; 0 — все значащие
        """
        return engine.digits(self._raw, count, get_context())

    def sign(self) -> int:
        return engine.sign(self._raw)

    def is_zero(self) -> bool:
        return engine.is_zero(self._raw)

    def is_nan(self) -> bool:
        return engine.is_nan(self._raw)

    def is_infinite(self) -> bool:
        return engine.is_infinite(self._raw)

    # -------------------------------------------------------------------------
    # Assignment
    # -------------------------------------------------------------------------

    def assign(self, source: Any) -> "APFloat":
        """
        Записать значение source в self с точностью self.

        Точность получателя сохраняется (source округляется до неё).

        Raises:
            ConstantMutationError: self — константа INF / NEG_INF
            UnsupportedOperandError: source вне числового interop
        """
        if self._constant:
            raise ConstantMutationError("cannot assign to an APFloat constant")
        if source is self:
            return self

        operand = self._operand(source)
        if operand is None:
            raise UnsupportedOperandError(
                f"cannot assign {type(source).__name__} to APFloat"
            )
        self._raw = engine.convert(operand.raw, get_context(), self._precision)
        return self

    # -------------------------------------------------------------------------
    # Interop dispatch
    # -------------------------------------------------------------------------

    @staticmethod
    def _operand(other: Any) -> Operand | None:
        if isinstance(other, APFloat):
            return Operand(OperandKind.VALUE, other._raw)
        return classify_native(other)

    def _binary(self, other: Any, op: EngineOp, reflected: bool = False) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        context = get_context()
        if reflected:
            return APFloat._wrap(op(operand.raw, self._raw, context))
        return APFloat._wrap(op(self._raw, operand.raw, context))

    def _inplace(self, other: Any, op: EngineOp) -> Any:
        result = self._binary(other, op)
        if result is NotImplemented or self._constant:
            return result
        return self.assign(result)

    def _compare(self, other: Any, op: str) -> Any:
        operand = self._operand(other)
        if operand is None:
            return NotImplemented
        return engine.compare(self._raw, operand.raw, op)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __neg__(self) -> "APFloat":
        return APFloat._wrap(engine.negate(self._raw, get_context()))

    def __pos__(self) -> "APFloat":
        return APFloat(self)

    def __abs__(self) -> "APFloat":
        # copy, затем negate если < 0 (через полный dispatch сравнения)
        result = APFloat(self)
        if result < APFloat(0):
            result = -result
        return result

    def __add__(self, other: Any) -> Any:
        return self._binary(other, engine.add)

    def __radd__(self, other: Any) -> Any:
        return self._binary(other, engine.add, reflected=True)

    def __sub__(self, other: Any) -> Any:
        return self._binary(other, engine.sub)

    def __rsub__(self, other: Any) -> Any:
        return self._binary(other, engine.sub, reflected=True)

    def __mul__(self, other: Any) -> Any:
        return self._binary(other, engine.mul)

    def __rmul__(self, other: Any) -> Any:
        return self._binary(other, engine.mul, reflected=True)

    def __truediv__(self, other: Any) -> Any:
        return self._binary(other, engine.div)

    def __rtruediv__(self, other: Any) -> Any:
        return self._binary(other, engine.div, reflected=True)

    def __iadd__(self, other: Any) -> Any:
        return self._inplace(other, engine.add)

    def __isub__(self, other: Any) -> Any:
        return self._inplace(other, engine.sub)

    def __imul__(self, other: Any) -> Any:
        return self._inplace(other, engine.mul)

    def __itruediv__(self, other: Any) -> Any:
        return self._inplace(other, engine.div)

    def __pow__(self, exponent: Any) -> Any:
        """
        Степень с диспетчеризацией по типу показателя:
        - APFloat → pow движка
        - float   → сначала APFloat, затем pow
        - int     → целочисленный pow движка (показатель сужен до int64)
        """
        operand = self._operand(exponent)
        if operand is None:
            return NotImplemented
        context = get_context()
        if operand.kind is OperandKind.FLOAT:
            return APFloat._wrap(
                engine.power(self._raw, APFloat(operand.raw)._raw, context)
            )
        return APFloat._wrap(engine.power(self._raw, operand.raw, context))

    def __rpow__(self, base: Any) -> Any:
        if self._operand(base) is None:
            return NotImplemented
        return APFloat(base) ** self

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __lt__(self, other: Any) -> Any:
        return self._compare(other, "lt")

    def __gt__(self, other: Any) -> Any:
        return self._compare(other, "gt")

    def __le__(self, other: Any) -> Any:
        return self._compare(other, "le")

    def __ge__(self, other: Any) -> Any:
        return self._compare(other, "ge")

    def __eq__(self, other: Any) -> Any:
        return self._compare(other, "eq")

    def __ne__(self, other: Any) -> Any:
        return self._compare(other, "ne")

    def __hash__(self) -> int:
        return digest(self)

    # -------------------------------------------------------------------------
    # Conversion
    # -------------------------------------------------------------------------

    def __float__(self) -> float:
        return engine.to_double(self._raw, get_context())

    def __int__(self) -> int:
        return engine.to_int(self._raw)

    def __bool__(self) -> bool:
        return not engine.is_zero(self._raw)

    def __str__(self) -> str:
        return to_string(self)

    def __repr__(self) -> str:
        return f"APFloat('{to_string(self)}')"

    def __copy__(self) -> "APFloat":
        return APFloat(self)

    def __deepcopy__(self, memo: dict) -> "APFloat":
        return APFloat(self)
