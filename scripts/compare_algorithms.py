#!/usr/bin/env python3
"""
Compara A* (heurística em linha reta) e Dijkstra num grafo em grade com obstáculos.
Mostra custo, número de arestas e latência média de cada algoritmo.

Uso (na raiz do projeto):
  python scripts/compare_algorithms.py [tamanho] [semente]

Nível de log via BUSCA_ASTAR_LOG_LEVEL (no ambiente ou no .env).
"""
import random
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import networkx as nx

from busca_astar import a_star, dijkstra
from busca_astar.config import configure_logging
from busca_astar.graph_operations import GraphOperations
from busca_astar.metrics import measure_latency_ms


def build_grid_graph(size: int, seed: int, blocked_fraction: float = 0.2) -> nx.DiGraph:
    """Grade size x size, arestas nos dois sentidos com distância >= 1 e parte das vias interditadas."""
    rng = random.Random(seed)
    grid = nx.grid_2d_graph(size, size)
    G = nx.DiGraph()
    for node in grid.nodes():
        G.add_node(node, pos=node)
    for u, v in grid.edges():
        G.add_edge(u, v, distance=1.0 + rng.random())
        G.add_edge(v, u, distance=1.0 + rng.random())
    blocked = [
        (u, v) for (u, v) in G.edges()
        if rng.random() < blocked_fraction and u != (0, 0) and v != (size - 1, size - 1)
    ]
    GraphOperations.block_edges(G, blocked)
    return G


def main():
    size = int(sys.argv[1]) if len(sys.argv) > 1 else 60
    seed = int(sys.argv[2]) if len(sys.argv) > 2 else 7
    configure_logging()

    G = build_grid_graph(size, seed)
    start, goal = (0, 0), (size - 1, size - 1)
    print(f"Grafo em grade: {G.number_of_nodes()} nós, {G.number_of_edges()} arestas.")

    for name, fn in (("A*", a_star), ("Dijkstra", dijkstra)):
        ms, route = measure_latency_ms(lambda: fn(G, start, goal), repetitions=5)
        if route is None:
            print(f"{name}: sem caminho de {start} a {goal} ({ms:.2f} ms)")
            continue
        print(f"{name}: custo {route.total_cost:.3f}, {len(route)} arestas, {ms:.2f} ms")


if __name__ == "__main__":
    main()
