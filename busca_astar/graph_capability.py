"""
Capacidade de grafo consumida pelo A*: arestas de saída de um vértice (sequência
escopada e preguiçosa) e, para cada aresta, origem, destino e custo.

NetworkXGraph adapta um nx.DiGraph: arestas são tuplas (u, v) e o custo vem da função
de peso de graph_operations (com interdições e multiplicadores de G.graph).
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Iterator, Optional, Protocol, Tuple

import networkx as nx

from .graph_operations import get_weight_function

log = logging.getLogger(__name__)


class DirectedGraph(Protocol):
    """
    outgoing_edges(v) pode devolver um gerenciador de contexto, um iterador com close()
    (ex.: gerador) ou um iterável simples. A busca libera o recurso ao terminar a expansão,
    inclusive quando uma exceção é levantada.
    """

    def outgoing_edges(self, vertex: Any) -> Iterable[Any]: ...

    def start_vertex(self, edge: Any) -> Any: ...

    def end_vertex(self, edge: Any) -> Any: ...

    def cost(self, edge: Any) -> Any: ...


class NetworkXGraph:
    """Visão de um nx.DiGraph como DirectedGraph; arestas infinitas (interditadas) são omitidas."""

    def __init__(self, G: nx.DiGraph, weight: Optional[str] = None):
        self.G = G
        self._weight = get_weight_function(G, weight)

    def outgoing_edges(self, vertex: Any) -> Iterator[Tuple[Any, Any]]:
        log.debug("Expandindo %r", vertex)
        for v in self.G.successors(vertex):
            if math.isinf(self._weight(vertex, v, self.G.edges[vertex, v])):
                continue
            yield (vertex, v)

    def start_vertex(self, edge: Tuple[Any, Any]) -> Any:
        return edge[0]

    def end_vertex(self, edge: Tuple[Any, Any]) -> Any:
        return edge[1]

    def cost(self, edge: Tuple[Any, Any]) -> float:
        u, v = edge
        return self._weight(u, v, self.G.edges[u, v])
