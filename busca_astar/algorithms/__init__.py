from .a_star import a_star, find_float_route, find_int_route, find_long_route, find_route
from .dijkstra import dijkstra, find_shortest_route

__all__ = [
    "a_star",
    "dijkstra",
    "find_route",
    "find_float_route",
    "find_int_route",
    "find_long_route",
    "find_shortest_route",
]
