"""
Тесты для модуля Context (Precision / Rounding State)

Проверяет:
1. Значения по умолчанию
2. get/set/reset точности и округления
3. Валидацию конфигурации (pydantic)
4. local_context и восстановление при исключениях
5. Независимость существующих значений от смены контекста
"""

import pytest
from pydantic import ValidationError

from apfloat.core.context import (
    DEFAULT_HASH_DELTA,
    DEFAULT_HASH_MAX,
    DEFAULT_PRECISION,
    DEFAULT_PRINT_EXP_THRESHOLD,
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
from apfloat.core.value import APFloat


class TestDefaults:
    """Значения по умолчанию"""

    def test_default_values(self) -> None:
        ctx = get_context()
        assert ctx.precision == DEFAULT_PRECISION == 1000
        assert ctx.rounding is RoundingMode.NEAREST
        assert ctx.print_exp_threshold == DEFAULT_PRINT_EXP_THRESHOLD == 10
        assert (ctx.hash_max, ctx.hash_delta) == (DEFAULT_HASH_MAX, DEFAULT_HASH_DELTA)
        assert get_hash_parameters() == (200, 20)

    def test_context_is_frozen(self) -> None:
        """ApfContext immutable"""
        with pytest.raises(ValidationError):
            get_context().precision = 10


class TestPrecision:
    """get/set/reset точности"""

    def test_set_and_get(self) -> None:
        set_precision(64)
        assert get_precision() == 64

    def test_invalid_precision_rejected(self) -> None:
        with pytest.raises(ValidationError):
            set_precision(1)
        assert get_precision() == DEFAULT_PRECISION

    def test_reset_precision_keeps_other_settings(self) -> None:
        """reset_precision сбрасывает только точность"""
        set_precision(80)
        set_rounding(RoundingMode.DOWN)
        reset_precision()
        assert get_precision() == DEFAULT_PRECISION
        assert get_rounding() is RoundingMode.DOWN

    def test_reset_context_resets_everything(self) -> None:
        set_precision(80)
        set_print_exp_threshold(3)
        reset_context()
        assert get_context() == ApfContext()

    def test_new_values_use_current_precision(self) -> None:
        set_precision(64)
        assert APFloat(1).precision == 64

    def test_existing_values_not_reprecisioned(self) -> None:
        """Смена точности не влияет на уже созданные значения"""
        before = APFloat(1)
        set_precision(64)
        assert before.precision == DEFAULT_PRECISION
        assert APFloat().precision == 64


class TestOtherSettings:
    """Округление, порог форматирования, параметры digest"""

    def test_rounding(self) -> None:
        set_rounding(RoundingMode.TOWARD_ZERO)
        assert get_rounding() is RoundingMode.TOWARD_ZERO

    def test_rounding_from_string(self) -> None:
        set_rounding("UP")
        assert get_rounding() is RoundingMode.UP

    def test_invalid_rounding_rejected(self) -> None:
        with pytest.raises(ValidationError):
            set_rounding("SIDEWAYS")

    def test_print_exp_threshold(self) -> None:
        set_print_exp_threshold(3)
        assert get_print_exp_threshold() == 3
        with pytest.raises(ValidationError):
            set_print_exp_threshold(-1)

    def test_hash_parameters(self) -> None:
        set_hash_parameters(50, 10)
        assert get_hash_parameters() == (50, 10)
        with pytest.raises(ValidationError):
            set_hash_parameters(0, 10)
        with pytest.raises(ValidationError):
            set_hash_parameters(50, 0)

    def test_set_context_type_checked(self) -> None:
        with pytest.raises(TypeError):
            set_context({"precision": 64})


class TestLocalContext:
    """local_context"""

    def test_changes_apply_inside_block(self) -> None:
        with local_context(precision=64, rounding=RoundingMode.UP) as ctx:
            assert ctx.precision == 64
            assert get_precision() == 64
            assert get_rounding() is RoundingMode.UP
        assert get_precision() == DEFAULT_PRECISION
        assert get_rounding() is RoundingMode.NEAREST

    def test_restored_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with local_context(precision=64):
                raise RuntimeError("boom")
        assert get_precision() == DEFAULT_PRECISION

    def test_nested(self) -> None:
        with local_context(precision=64):
            with local_context(print_exp_threshold=2):
                assert get_precision() == 64
                assert get_print_exp_threshold() == 2
            assert get_print_exp_threshold() == DEFAULT_PRINT_EXP_THRESHOLD
        assert get_precision() == DEFAULT_PRECISION

    def test_invalid_change_leaves_context_untouched(self) -> None:
        with pytest.raises(ValidationError):
            with local_context(precision=0):
                pass
        assert get_context() == ApfContext()
