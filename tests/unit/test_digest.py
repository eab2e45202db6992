"""
Тесты для Digest

Проверяет:
1. Свёртку строки цифр окнами
2. Согласованность hash с равенством (в т.ч. при разной точности)
3. Короткие строки цифр (n < hash_delta) → seed
4. Использование в dict / set
"""

import math

from apfloat.core.constants import INF, NEG_INF
from apfloat.core.context import local_context
from apfloat.core.digest import digest, fold_digits
from apfloat.core.value import APFloat


class TestFoldDigits:
    """fold_digits"""

    def test_short_string_returns_seed(self) -> None:
        assert fold_digits(7, "abc", 5) == 7

    def test_windows_end_at_n_minus_i(self) -> None:
        """Окна справа налево, последнее обрезается у начала строки"""
        expected = 11 ^ (hash("cdef") << 1) ^ (hash("ab") << 1)
        assert fold_digits(11, "abcdef", 4) == expected

    def test_exact_multiple(self) -> None:
        expected = 0 ^ (hash("efgh") << 1) ^ (hash("abcd") << 1)
        assert fold_digits(0, "abcdefgh", 4) == expected


class TestDigest:
    """digest для APFloat"""

    def test_matches_algorithm(self) -> None:
        value = APFloat(1) / APFloat(7)
        digits, _ = value.digits(200)
        assert len(digits) == 200
        digits = digits.rstrip("0")
        assert digest(value) == fold_digits(hash(float(value)), digits, 20)

    def test_hash_uses_digest(self) -> None:
        value = APFloat("2.75")
        assert hash(value) == digest(value)

    def test_short_digits_return_double_hash(self) -> None:
        with local_context(hash_max=10, hash_delta=20):
            assert hash(APFloat(1.5)) == hash(1.5)

    def test_equal_values_equal_hash(self) -> None:
        a = APFloat(3) / APFloat(4)
        b = APFloat("0.75")
        assert a == b
        assert hash(a) == hash(b)

    def test_precision_independent(self) -> None:
        """Одно и то же число при разной точности"""
        wide = APFloat("0.75")
        with local_context(precision=64):
            narrow = APFloat("0.75")
        assert narrow.precision != wide.precision
        assert narrow == wide
        assert hash(narrow) == hash(wide)

    def test_different_values_differ(self) -> None:
        """Значения, совпадающие в double, различаются хвостом цифр"""
        a = APFloat(1) / APFloat(3)
        b = a + APFloat("1e-200")
        assert float(a) == float(b)
        assert a != b
        assert hash(a) != hash(b)

    def test_signed_zero(self) -> None:
        assert APFloat(0) == APFloat("-0")
        assert hash(APFloat(0)) == hash(APFloat("-0"))

    def test_infinities(self) -> None:
        assert hash(INF) == hash(float("inf"))
        assert hash(NEG_INF) == hash(float("-inf"))

    def test_dict_key(self) -> None:
        table = {APFloat(1.5): "x", APFloat(1) / APFloat(3): "third"}
        assert table[APFloat("1.5")] == "x"
        assert table[APFloat(1) / APFloat(3)] == "third"
        assert len({APFloat("0.5"), APFloat(0.5), APFloat(1) / 2}) == 1

    def test_nan_hash_stable(self) -> None:
        """nan находится в set по тому же объекту"""
        nan = APFloat(0) / APFloat(0)
        members = {nan}
        trimmed = [float(nan) for _ in range(5)]
        assert all(math.isnan(t) for t in trimmed)
        assert hash(nan) == hash(nan)
        assert nan in members
        assert {nan: "x"}[nan] == "x"


class TestNativeKeys:
    """Короткие значения хэшируются как равные им нативные числа"""

    def test_padding_not_folded(self) -> None:
        """Хвостовые нули движка не попадают в свёртку"""
        digits, _ = APFloat(1).digits(200)
        assert len(digits) == 200
        assert hash(APFloat(1)) == hash(1.0)

    def test_native_hash_match(self) -> None:
        assert hash(APFloat(1)) == hash(1)
        assert hash(APFloat(0.5)) == hash(0.5)
        assert hash(APFloat(-1234.75)) == hash(-1234.75)

    def test_shared_dict_and_set_keys(self) -> None:
        assert APFloat(1) in {1}
        assert APFloat(1) in {1: "x"}
        assert 0.5 in {APFloat("0.5")}
        assert {APFloat(3): "three"}[3] == "three"

    def test_long_digit_strings_still_folded(self) -> None:
        """От hash_delta значащих цифр свёртка меняет seed"""
        value = APFloat(1) / APFloat(3)
        digits, _ = value.digits(200)
        assert len(digits.rstrip("0")) >= 20
        assert hash(value) == fold_digits(hash(float(value)), digits.rstrip("0"), 20)
