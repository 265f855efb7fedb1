"""
Rota resultante de uma busca: vértices, arestas e custo total. Imutável.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple


@dataclass(frozen=True)
class Route:
    """
    vertices = (v0, ..., vn) com v0 = origem e vn = destino;
    edges = (e1, ..., en) com ei indo de v(i-1) a vi;
    total_cost = soma dos custos das arestas.
    """

    vertices: Tuple[Any, ...]
    edges: Tuple[Any, ...]
    total_cost: Any

    @property
    def start(self) -> Any:
        return self.vertices[0]

    @property
    def end(self) -> Any:
        return self.vertices[-1]

    def __len__(self) -> int:
        """Número de arestas (saltos) da rota."""
        return len(self.edges)
