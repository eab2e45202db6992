"""
Константы ±inf.

Создаются один раз при импорте (точность default-контекста) и не мутируются:
assign на них → ConstantMutationError, `x += 1` перепривязывает x к новому значению.
"""

from typing import Final

from .value import APFloat

INF: Final[APFloat] = APFloat._infinity(1)
NEG_INF: Final[APFloat] = APFloat._infinity(-1)
