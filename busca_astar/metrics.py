"""
Métricas e verificações sobre rotas:

- Latência: tempo médio de uma consulta em milissegundos.
- Custo: re-soma dos custos das arestas de uma rota (deve bater com total_cost).
- Consistência: encadeamento origem/destino das arestas ao longo da rota.
"""

import time
from typing import Any, Callable, Tuple

from .graph_capability import DirectedGraph
from .route import Route


def measure_latency_ms(
    fn: Callable[[], Any],
    repetitions: int = 1,
) -> Tuple[float, Any]:
    """
    Mede o tempo de execução de fn() em milissegundos.
    Retorna (tempo_medio_ms, resultado da última chamada).
    """
    if repetitions < 1:
        raise ValueError("repetitions deve ser >= 1")
    start = time.perf_counter()
    result = None
    for _ in range(repetitions):
        result = fn()
    elapsed = (time.perf_counter() - start) / repetitions * 1000
    return elapsed, result


def route_cost(
    route: Route,
    graph: DirectedGraph,
    zero: Any,
    add: Callable[[Any, Any], Any],
) -> Any:
    """Custo total de uma rota (soma dos custos das arestas)."""
    total = zero
    for edge in route.edges:
        total = add(total, graph.cost(edge))
    return total


def is_consistent_route(route: Route, graph: DirectedGraph, start: Any, end: Any) -> bool:
    """True se a rota vai de start a end e cada aresta liga vertices[i] a vertices[i+1]."""
    if len(route.vertices) != len(route.edges) + 1:
        return False
    if route.vertices[0] != start or route.vertices[-1] != end:
        return False
    for i, edge in enumerate(route.edges):
        if graph.start_vertex(edge) != route.vertices[i]:
            return False
        if graph.end_vertex(edge) != route.vertices[i + 1]:
            return False
    return True
