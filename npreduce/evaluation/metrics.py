"""
Checks for vertex cover, clique and independent set solutions.
"""
import itertools
import networkx as nx
from typing import Iterable, Optional, Set


def is_vertex_cover(G: nx.Graph, vertices: Iterable) -> bool:
    """
    Verify that every edge has an endpoint in vertices.

    A self-loop (v, v) is only covered by v itself.
    """
    cover = set(vertices)
    return all(u in cover or v in cover for u, v in G.edges())


def is_minimal_cover(G: nx.Graph, vertices: Iterable) -> bool:
    """
    True if vertices is a cover and no proper subset is.

    Covering is monotone, so it is enough that dropping any single vertex
    breaks the cover.
    """
    cover = set(vertices)
    if not is_vertex_cover(G, cover):
        return False
    return all(not is_vertex_cover(G, cover - {v}) for v in cover)


def is_clique(G: nx.Graph, vertices: Iterable) -> bool:
    nodes = list(vertices)
    return all(G.has_edge(u, v) for u, v in itertools.combinations(nodes, 2))


def is_independent_set(G: nx.Graph, vertices: Iterable) -> bool:
    nodes = set(vertices)
    return all(not (u in nodes and v in nodes) for u, v in G.edges())


def brute_force_minimum_cover(G: nx.Graph, max_vertices: Optional[int] = 16) -> Set:
    """
    Smallest vertex cover by trying every subset in order of size.

    Exponential; refuses graphs above max_vertices unless max_vertices is None.
    """
    nodes = list(G.nodes())
    if max_vertices is not None and len(nodes) > max_vertices:
        raise ValueError(f"Brute force limited to {max_vertices} vertices, graph has {len(nodes)}")
    for size in range(len(nodes) + 1):
        for subset in itertools.combinations(nodes, size):
            if is_vertex_cover(G, subset):
                return set(subset)
    return set(nodes)
