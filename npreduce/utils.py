import networkx as nx
import numpy as np
from typing import Iterable, List, Sequence, Set


class FormatError(ValueError):
    """Raised when a graph block or CNF line does not match the instance format."""


def empty_graph(n: int) -> nx.Graph:
    """Graph with vertices 0..n-1 and no edges"""
    if n < 0:
        raise ValueError(f"Vertex count must be non-negative, got {n}")
    G = nx.Graph()
    G.add_nodes_from(range(n))
    return G


def add_edge(G: nx.Graph, u: int, v: int) -> None:
    """Symmetric, idempotent edge insertion. u == v stores a self-loop."""
    if u not in G or v not in G:
        raise ValueError(f"Edge ({u}, {v}) references a vertex outside the graph")
    G.add_edge(u, v)


def adjacency_list(G: nx.Graph, v) -> List:
    """Neighbours of v in index order; v itself is included when it carries a self-loop"""
    order = {node: i for i, node in enumerate(G.nodes())}
    return sorted(G.neighbors(v), key=order.__getitem__)


def adjacency_matrix(G: nx.Graph) -> np.ndarray:
    """Boolean adjacency matrix, rows and columns in node insertion order"""
    return nx.to_numpy_array(G, nodelist=list(G.nodes()), dtype=bool, weight=None)


def vertex_count(G: nx.Graph) -> int:
    return G.number_of_nodes()


def edge_count(G: nx.Graph) -> int:
    return G.number_of_edges()


def freeze(G: nx.Graph) -> nx.Graph:
    return nx.freeze(G)


def from_adjacency_matrix(rows: Sequence[Sequence[int]]) -> nx.Graph:
    """
    Build a frozen graph from a square 0/1 matrix.

    A 1 in either (i, j) or (j, i) adds the undirected edge; a 1 on the
    diagonal adds a self-loop.
    """
    matrix = np.asarray(rows, dtype=bool)
    n = len(rows)
    if matrix.size and matrix.shape != (n, n):
        raise FormatError(f"Adjacency matrix must be {n}x{n}, got shape {matrix.shape}")

    G = empty_graph(n)
    for u, v in zip(*np.nonzero(matrix)):
        add_edge(G, int(u), int(v))
    return freeze(G)


def cover_vector(G: nx.Graph, vertices: Iterable) -> np.ndarray:
    """Boolean membership array for a vertex set, indexed by node insertion order"""
    members = set(vertices)
    return np.array([node in members for node in G.nodes()], dtype=bool)


def vertices_from_vector(G: nx.Graph, vector: Sequence[bool]) -> Set:
    nodes = list(G.nodes())
    if len(vector) != len(nodes):
        raise ValueError(f"Membership vector has length {len(vector)}, graph has {len(nodes)} vertices")
    return {node for node, member in zip(nodes, vector) if member}
