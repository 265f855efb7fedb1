"""
Algoritmo A*: busca heurística com f(n) = g(n) + h(n) sobre uma capacidade de grafo genérica.

Genérico na álgebra de custos (zero, soma, comparador). Fila de prioridade: PairingHeap,
cujo offer() decide sozinho se um caminho recém-descoberto melhora o vértice vizinho.
Vizinhos já expandidos são ignorados sem comparação de custo (heurística consistente
garante otimalidade; com heurística apenas admissível isso pode perder melhorias).
"""

from __future__ import annotations

import logging
from contextlib import closing, nullcontext
from typing import Any, Callable, ContextManager, Dict, Iterable, List, Optional, Set

import networkx as nx

from ..costs import FLOAT_COSTS, INT_COSTS, natural_compare
from ..graph_capability import DirectedGraph, NetworkXGraph
from ..graph_operations import get_straight_line_distance, validate_path_nodes
from ..priority_queue import PairingHeap
from ..route import Route

log = logging.getLogger(__name__)

Heuristic = Callable[[Any, Any], Any]


def _scoped(edges: Iterable[Any]) -> ContextManager[Iterable[Any]]:
    """Garante liberação da enumeração de arestas: usa o próprio contexto, close() ou nada."""
    if hasattr(edges, "__enter__") and hasattr(edges, "__exit__"):
        return edges  # type: ignore[return-value]
    if hasattr(edges, "close"):
        return closing(edges)  # type: ignore[type-var]
    return nullcontext(edges)


def find_route(
    start: Any,
    end: Any,
    graph: DirectedGraph,
    heuristic: Heuristic,
    zero: Any,
    add: Callable[[Any, Any], Any],
    compare: Callable[[Any, Any], int] = natural_compare,
) -> Optional[Route]:
    """
    Retorna a rota de start a end ou None se end não for alcançável.
    heuristic(v, end) deve ser admissível (e de preferência consistente); não é verificado.
    Exceções do grafo ou da heurística propagam sem alteração, após liberar a enumeração de arestas.
    """
    log.debug("A*: %r -> %r", start, end)
    visited: Set[Any] = set()
    discovered: PairingHeap[Any, Any] = PairingHeap(compare)
    discovered.offer(start, heuristic(start, end))

    came_from: Dict[Any, Any] = {}
    g_scores: Dict[Any, Any] = {start: zero}

    while discovered:
        current = discovered.poll()

        if current == end:
            route = _construct_route(start, end, graph, came_from, g_scores[end])
            log.debug("A*: rota com %d arestas, custo %r (%d expandidos)", len(route), route.total_cost, len(visited))
            return route

        visited.add(current)

        with _scoped(graph.outgoing_edges(current)) as outgoing:
            for edge in outgoing:
                neighbour = graph.end_vertex(edge)
                if neighbour in visited:
                    continue
                tentative_g = add(g_scores[current], graph.cost(edge))
                if discovered.offer(neighbour, add(tentative_g, heuristic(neighbour, end))):
                    came_from[neighbour] = edge
                    g_scores[neighbour] = tentative_g

    log.debug("A*: %r inalcançável a partir de %r (%d expandidos)", end, start, len(visited))
    return None


def _construct_route(
    start: Any,
    end: Any,
    graph: DirectedGraph,
    came_from: Dict[Any, Any],
    total_cost: Any,
) -> Route:
    vertices: List[Any] = []
    edges: List[Any] = []

    vertex = end
    while vertex != start:
        edge = came_from[vertex]
        vertices.append(vertex)
        edges.append(edge)
        vertex = graph.start_vertex(edge)
    vertices.append(start)

    vertices.reverse()
    edges.reverse()
    return Route(tuple(vertices), tuple(edges), total_cost)


def find_float_route(
    start: Any,
    end: Any,
    graph: DirectedGraph,
    heuristic: Callable[[Any, Any], float],
) -> Optional[Route]:
    """A* com custos float (zero 0.0, soma e ordem naturais)."""
    return find_route(start, end, graph, heuristic, *FLOAT_COSTS)


def find_int_route(
    start: Any,
    end: Any,
    graph: DirectedGraph,
    heuristic: Callable[[Any, Any], int],
) -> Optional[Route]:
    """A* com custos inteiros (zero 0, soma e ordem naturais)."""
    return find_route(start, end, graph, heuristic, *INT_COSTS)


# Variante de 64 bits: int do Python já é de precisão arbitrária.
find_long_route = find_int_route


def a_star(
    G: nx.DiGraph,
    start: Any,
    goal: Any,
    heuristic: Optional[Callable[[Any, Any], float]] = None,
    weight: Optional[str] = None,
) -> Optional[Route]:
    """
    A* sobre um nx.DiGraph. Arestas da rota são tuplas (u, v).
    Heurística padrão: distância em linha reta entre o nó e o objetivo (atributo 'pos').
    Levanta NetworkXError se start ou goal não existirem no grafo.
    """
    validate_path_nodes(G, start, goal)
    if heuristic is None:
        def default_heuristic(n: Any, target: Any) -> float:
            return get_straight_line_distance(G, n, target)
        heuristic = default_heuristic

    return find_float_route(start, goal, NetworkXGraph(G, weight), heuristic)
