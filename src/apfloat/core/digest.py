"""
Digest — hash, согласованный с равенством APFloat

Алгоритм:
1. seed = hash(trim(value))  (усечение до double)
2. p = до hash_max значащих цифр движка (без хвостовых нулей), n = len(p)
3. n < hash_delta → seed
4. иначе для i = 0, delta, 2*delta, ... < n:
   окно длины delta, заканчивающееся на позиции n - i (обрезается у начала),
   hash(окно) << 1 XOR-ится в seed

Равные значения разной точности дают одинаковые цифры: движок
округляет точное значение до hash_max цифр корректно.
Hash строк в Python рандомизирован между процессами (PYTHONHASHSEED) —
digest стабилен только внутри одного процесса.
Короткие значения (n < hash_delta) хэшируются как float: hash(APFloat(1)) == hash(1).
nan хэшируется по id объекта, как float nan.
"""

from typing import TYPE_CHECKING

from . import engine
from .context import get_context

if TYPE_CHECKING:
    from .value import APFloat


def fold_digits(seed: int, digits: str, delta: int) -> int:
    """Свернуть строку цифр окнами длины delta справа налево."""
    n = len(digits)
    if n < delta:
        return seed

    result = seed
    for i in range(0, n, delta):
        end = n - i
        window = digits[max(0, end - delta) : end]
        result ^= hash(window) << 1
    return result


def digest(value: "APFloat") -> int:
    raw = value.raw
    # hash(float nan) зависит от id объекта; nan != nan, поэтому hash по id значения
    if engine.is_nan(raw):
        return object.__hash__(value)

    context = get_context()
    seed = hash(engine.to_double(raw, context))

    # 0 и -0 равны, а строки цифр у них разные; inf цифр не имеет
    if engine.is_zero(raw) or engine.is_infinite(raw):
        return seed

    digits, _ = engine.digits(raw, context.hash_max, context)
    # движок дополняет строку нулями до hash_max — они не значащие
    digits = digits.rstrip("0")
    return fold_digits(seed, digits, context.hash_delta)
