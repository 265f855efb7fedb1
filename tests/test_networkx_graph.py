"""
Testes do adaptador NetworkX, das operações de grafo e das conveniências a_star/dijkstra.
"""

import math

import networkx as nx
import pytest

from busca_astar import NetworkXGraph, a_star, dijkstra
from busca_astar.graph_operations import (
    KEY_EDGE_COST_MULTIPLIER,
    KEY_EDGE_OVERRIDE,
    GraphOperations,
)
from busca_astar.metrics import is_consistent_route


@pytest.fixture
def city():
    """Pequena malha de vias com posições (x, y) e distâncias em metros."""
    G = nx.DiGraph()
    positions = {
        "praca": (0, 0),
        "centro": (100, 0),
        "igreja": (100, 100),
        "campus": (200, 100),
        "estacao": (0, 200),
    }
    for node, pos in positions.items():
        G.add_node(node, pos=pos)
    G.add_edge("praca", "centro", distance=100.0)
    G.add_edge("centro", "campus", distance=160.0)
    G.add_edge("centro", "igreja", distance=100.0)
    G.add_edge("igreja", "campus", distance=100.0)
    G.add_edge("praca", "igreja", distance=300.0)
    G.add_edge("estacao", "praca", distance=200.0)
    return G


def test_a_star_default_heuristic(city):
    route = a_star(city, "praca", "campus")
    assert route.vertices == ("praca", "centro", "campus")
    assert route.edges == (("praca", "centro"), ("centro", "campus"))
    assert route.total_cost == pytest.approx(260.0)


def test_a_star_and_dijkstra_agree(city):
    assert a_star(city, "praca", "campus").total_cost == pytest.approx(
        dijkstra(city, "praca", "campus").total_cost
    )


def test_unreachable_returns_none(city):
    assert a_star(city, "campus", "estacao") is None
    assert dijkstra(city, "campus", "estacao") is None


def test_missing_node_raises_networkx_error(city):
    with pytest.raises(nx.NetworkXError, match="não existem no grafo"):
        a_star(city, "praca", "rodoviaria")
    with pytest.raises(nx.NetworkXError):
        dijkstra(city, "rodoviaria", "praca")


def test_blocked_edge_is_avoided(city):
    GraphOperations.block_edges(city, [("centro", "campus")])
    route = a_star(city, "praca", "campus")
    assert route.vertices == ("praca", "centro", "igreja", "campus")
    assert route.total_cost == pytest.approx(300.0)


def test_clear_blocked_edges_restores_route(city):
    GraphOperations.block_edges(city, [("centro", "campus")])
    GraphOperations.clear_blocked_edges(city, [("centro", "campus")])
    assert a_star(city, "praca", "campus").vertices == ("praca", "centro", "campus")


def test_all_exits_blocked_returns_none(city):
    GraphOperations.block_edges(city, [("praca", "centro"), ("praca", "igreja")])
    assert a_star(city, "praca", "campus") is None


def test_edge_multiplier_changes_route(city):
    GraphOperations.apply_edge_multipliers(city, {("centro", "campus"): 2.0})
    route = dijkstra(city, "praca", "campus")
    assert route.vertices == ("praca", "centro", "igreja", "campus")


def test_reset_scenarios(city):
    GraphOperations.block_edges(city, [("centro", "campus")])
    GraphOperations.apply_edge_multipliers(city, {("praca", "centro"): 5.0})
    GraphOperations.reset_scenarios(city)
    assert city.graph[KEY_EDGE_OVERRIDE] == {}
    assert city.graph[KEY_EDGE_COST_MULTIPLIER] == {}
    assert a_star(city, "praca", "campus").total_cost == pytest.approx(260.0)


def test_custom_weight_attribute(city):
    for u, v in city.edges():
        city.edges[u, v]["minutes"] = 1.0
    city.edges["praca", "igreja"]["minutes"] = 0.5
    route = dijkstra(city, "praca", "campus", weight="minutes")
    assert route.vertices == ("praca", "igreja", "campus")
    assert route.total_cost == pytest.approx(1.5)


def test_missing_weight_attribute_costs_one():
    G = nx.DiGraph()
    G.add_edge(1, 2)
    G.add_edge(2, 3)
    route = dijkstra(G, 1, 3)
    assert route.total_cost == pytest.approx(2.0)


def test_adapter_skips_blocked_edges(city):
    GraphOperations.block_edges(city, [("centro", "igreja")])
    graph = NetworkXGraph(city)
    assert list(graph.outgoing_edges("centro")) == [("centro", "campus")]
    assert graph.start_vertex(("centro", "campus")) == "centro"
    assert graph.end_vertex(("centro", "campus")) == "campus"
    assert graph.cost(("centro", "campus")) == pytest.approx(160.0)


def test_route_is_consistent_with_adapter(city):
    route = a_star(city, "estacao", "campus")
    assert is_consistent_route(route, NetworkXGraph(city), "estacao", "campus")
    assert route.start == "estacao"
    assert route.end == "campus"


def test_edge_cost_and_path_cost(city):
    assert GraphOperations.get_edge_cost(city, "praca", "centro") == pytest.approx(100.0)
    assert math.isinf(GraphOperations.get_edge_cost(city, "campus", "praca"))
    assert GraphOperations.path_cost(city, ["praca", "centro", "campus"]) == pytest.approx(260.0)
    assert GraphOperations.path_cost(city, ["praca"]) == 0.0
    assert math.isinf(GraphOperations.path_cost(city, ["campus", "praca"]))


def test_straight_line_distance(city):
    assert GraphOperations.get_straight_line_distance(city, "praca", "igreja") == pytest.approx(
        math.sqrt(2) * 100
    )
    assert math.isinf(GraphOperations.get_straight_line_distance(city, "praca", "rodoviaria"))


def test_grid_a_star_matches_networkx_dijkstra():
    grid = nx.grid_2d_graph(12, 12)
    G = nx.DiGraph()
    for node in grid.nodes():
        G.add_node(node, pos=node)
    for i, (u, v) in enumerate(grid.edges()):
        G.add_edge(u, v, distance=1.0 + (i % 5) / 4)
        G.add_edge(v, u, distance=1.0 + (i % 3) / 2)
    expected = nx.dijkstra_path_length(G, (0, 0), (11, 11), weight="distance")
    assert a_star(G, (0, 0), (11, 11)).total_cost == pytest.approx(expected)
    assert dijkstra(G, (0, 0), (11, 11)).total_cost == pytest.approx(expected)


def test_scenarios_applied_after_adapter_is_built():
    G = nx.DiGraph()
    G.add_edge("a", "b", distance=1.0)
    G.add_edge("a", "c", distance=2.0)
    graph = NetworkXGraph(G)

    GraphOperations.block_edges(G, [("a", "b")])
    assert list(graph.outgoing_edges("a")) == [("a", "c")]

    GraphOperations.apply_edge_multipliers(G, {("a", "c"): 3.0})
    assert graph.cost(("a", "c")) == pytest.approx(6.0)

    GraphOperations.reset_scenarios(G)
    assert list(graph.outgoing_edges("a")) == [("a", "b"), ("a", "c")]
    assert graph.cost(("a", "c")) == pytest.approx(2.0)
