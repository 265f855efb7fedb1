"""
Álgebra de custos usada pelo A*: elemento neutro, soma e comparador (convenção cmp).
"""

from __future__ import annotations

import operator
from typing import Any, Callable, NamedTuple


def natural_compare(a: Any, b: Any) -> int:
    """Comparador pela ordem natural (<, >) dos valores."""
    return (a > b) - (a < b)


class CostAlgebra(NamedTuple):
    """Zero, soma associativa e ordem total sobre os custos."""

    zero: Any
    add: Callable[[Any, Any], Any]
    compare: Callable[[Any, Any], int] = natural_compare


FLOAT_COSTS = CostAlgebra(0.0, operator.add)
# int do Python não tem largura fixa: serve às variantes de 32 e 64 bits.
INT_COSTS = CostAlgebra(0, operator.add)
