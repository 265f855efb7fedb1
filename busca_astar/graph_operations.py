"""
Operações sobre o grafo NetworkX: custo das arestas, função de peso, validação,
distância em linha reta e custo de caminho.

Cenários (interdições, multiplicadores de custo) ficam em G.graph e são lidos pela função de peso.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

import networkx as nx

from .config import load_weight_attribute

# Chaves em G.graph para parâmetros do cenário
KEY_EDGE_OVERRIDE = "edge_override"
KEY_EDGE_COST_MULTIPLIER = "edge_cost_multiplier"

BLOCKED = float("inf")


class GraphOperations:
    """Responsável pelos cálculos de custo das arestas e operações sobre o grafo."""

    @staticmethod
    def get_weight_function(
        G: nx.DiGraph,
        weight: Optional[str] = None,
    ) -> Callable[[Any, Any, Dict], float]:
        """
        Retorna uma função (u, v, d) -> peso.
        weight: nome do atributo da aresta com o custo base; padrão vem de BUSCA_ASTAR_WEIGHT_ATTRIBUTE.
        Arestas sem o atributo custam 1.0. Override em G.graph tem prioridade sobre o atributo.
        Cenários são lidos de G.graph a cada chamada: alterações posteriores valem para a função já criada.
        """
        attr = weight or load_weight_attribute()

        def weight_fn(u: Any, v: Any, d: Dict) -> float:
            key = (u, v)
            override = G.graph.get(KEY_EDGE_OVERRIDE, {})
            if key in override:
                return override[key]
            edge_multiplier = G.graph.get(KEY_EDGE_COST_MULTIPLIER, {})
            return float(d.get(attr, 1.0)) * edge_multiplier.get(key, 1.0)

        return weight_fn

    @staticmethod
    def get_edge_cost(G: nx.DiGraph, u: Any, v: Any, weight: Optional[str] = None) -> float:
        """Custo atual da aresta (u, v) com base nos atributos e no cenário em G.graph."""
        if not G.has_edge(u, v):
            return float("inf")
        wf = GraphOperations.get_weight_function(G, weight)
        return wf(u, v, G.edges[u, v])

    @staticmethod
    def validate_path_nodes(G: nx.DiGraph, start: Any, goal: Any) -> None:
        """Levanta NetworkXError se start ou goal não existirem no grafo."""
        missing = [n for n in (start, goal) if n not in G]
        if not missing:
            return
        nodes_list = list(G.nodes())[:15]
        hint = "Nós neste grafo (amostra): " + str(nodes_list) + ("..." if len(G) > 15 else "")
        raise nx.NetworkXError(f"Nó(s) {missing} não existem no grafo. {hint}")

    @staticmethod
    def get_straight_line_distance(G: nx.DiGraph, u: Any, v: Any) -> float:
        """Distância em linha reta entre dois nós (atributo 'pos' = (x, y)). Para heurística A*."""
        if u not in G.nodes or v not in G.nodes:
            return float("inf")
        pos_u = G.nodes[u].get("pos", (0, 0))
        pos_v = G.nodes[v].get("pos", (0, 0))
        return math.sqrt((pos_u[0] - pos_v[0]) ** 2 + (pos_u[1] - pos_v[1]) ** 2)

    @staticmethod
    def path_cost(G: nx.DiGraph, path: list, weight: Optional[str] = None) -> float:
        """Custo total de um caminho (lista de nós)."""
        if len(path) < 2:
            return 0.0
        total = 0.0
        wf = GraphOperations.get_weight_function(G, weight)
        for i in range(len(path) - 1):
            u, v = path[i], path[i + 1]
            if not G.has_edge(u, v):
                return float("inf")
            total += wf(u, v, G.edges[u, v])
        return total

    @staticmethod
    def block_edges(G: nx.DiGraph, blocked_edges: Iterable[Tuple[Any, Any]]) -> None:
        """Interdita arestas (custo infinito); a busca deixa de enxergá-las."""
        override = G.graph.setdefault(KEY_EDGE_OVERRIDE, {})
        for (u, v) in blocked_edges:
            override[(u, v)] = BLOCKED

    @staticmethod
    def clear_blocked_edges(G: nx.DiGraph, blocked_edges: Iterable[Tuple[Any, Any]]) -> None:
        """Remove interdições."""
        override = G.graph.get(KEY_EDGE_OVERRIDE, {})
        for (u, v) in blocked_edges:
            override.pop((u, v), None)

    @staticmethod
    def apply_edge_multipliers(G: nx.DiGraph, edge_multipliers: Dict[Tuple[Any, Any], float]) -> None:
        """Multiplicador de custo por aresta (ex.: lentidão em trechos específicos)."""
        G.graph.setdefault(KEY_EDGE_COST_MULTIPLIER, {}).update(edge_multipliers)

    @staticmethod
    def reset_scenarios(G: nx.DiGraph) -> None:
        """Remove todos os overrides e multiplicadores."""
        G.graph[KEY_EDGE_OVERRIDE] = {}
        G.graph[KEY_EDGE_COST_MULTIPLIER] = {}


get_weight_function = GraphOperations.get_weight_function
get_edge_cost = GraphOperations.get_edge_cost
validate_path_nodes = GraphOperations.validate_path_nodes
get_straight_line_distance = GraphOperations.get_straight_line_distance
path_cost = GraphOperations.path_cost
