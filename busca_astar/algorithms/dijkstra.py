"""
Algoritmo de Dijkstra: A* com heurística nula (h ≡ zero).
Caminho de custo mínimo em grafo com pesos não negativos.
"""

from __future__ import annotations

from typing import Any, Callable, Optional

import networkx as nx

from ..costs import FLOAT_COSTS, natural_compare
from ..graph_capability import DirectedGraph, NetworkXGraph
from ..graph_operations import validate_path_nodes
from ..route import Route
from .a_star import find_route


def find_shortest_route(
    start: Any,
    end: Any,
    graph: DirectedGraph,
    zero: Any,
    add: Callable[[Any, Any], Any],
    compare: Callable[[Any, Any], int] = natural_compare,
) -> Optional[Route]:
    """Rota de custo mínimo de start a end, ou None se não houver caminho."""
    return find_route(start, end, graph, lambda v, target: zero, zero, add, compare)


def dijkstra(
    G: nx.DiGraph,
    start: Any,
    goal: Any,
    weight: Optional[str] = None,
) -> Optional[Route]:
    """
    Dijkstra sobre um nx.DiGraph (custos float). Retorna None se não houver caminho.
    Levanta NetworkXError se start ou goal não existirem no grafo.
    """
    validate_path_nodes(G, start, goal)
    return find_shortest_route(start, goal, NetworkXGraph(G, weight), *FLOAT_COSTS)
