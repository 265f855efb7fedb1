# Busca A* genérica com fila de prioridade endereçável (heap de pareamento)
# Grafo abstrato; adaptador NetworkX para grafos de vias

from .config import load_env_file

# Carrega .env da raiz do projeto, se existir
load_env_file()

from .algorithms import (
    a_star,
    dijkstra,
    find_float_route,
    find_int_route,
    find_long_route,
    find_route,
    find_shortest_route,
)
from .costs import FLOAT_COSTS, INT_COSTS, CostAlgebra, natural_compare
from .graph_capability import DirectedGraph, NetworkXGraph
from .priority_queue import MinPriorityQueue, PairingHeap
from .route import Route

__all__ = [
    "a_star",
    "dijkstra",
    "find_route",
    "find_float_route",
    "find_int_route",
    "find_long_route",
    "find_shortest_route",
    "CostAlgebra",
    "FLOAT_COSTS",
    "INT_COSTS",
    "natural_compare",
    "DirectedGraph",
    "NetworkXGraph",
    "MinPriorityQueue",
    "PairingHeap",
    "Route",
]
