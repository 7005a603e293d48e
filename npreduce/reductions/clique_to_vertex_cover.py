"""
Clique -> Vertex Cover reduction.

G has a clique of size s iff the complement of G has a vertex cover of size
|V| - s: the clique is exactly the set of vertices left out of the cover.
"""
import logging
from typing import Set

import networkx as nx

from npreduce.algorithms.vertex_cover import VertexCoverSearch

logger = logging.getLogger(__name__)


def complement_graph(G: nx.Graph) -> nx.Graph:
    """Edge (u, v), u != v, is in the complement iff it is not in G. No self-loops."""
    return nx.complement(G)


def find_maximum_clique(G: nx.Graph) -> Set:
    """Maximum clique of G as V minus a minimum vertex cover of the complement."""
    cover = VertexCoverSearch(complement_graph(G)).find_minimum_cover()
    clique = set(G.nodes()) - cover
    logger.debug(f"Maximum clique of size {len(clique)}: {sorted(clique)}")
    return clique


def find_k_clique(G: nx.Graph, k: int) -> Set:
    """
    Search for a clique of size k via a cover of size <= |V| - k in the complement.

    Returns V minus the cover found. The result is a clique whenever it holds
    at least k vertices; an empty or smaller set means G has no k-clique.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    n = G.number_of_nodes()
    if k > n:
        logger.debug(f"No clique of size {k} in a graph with {n} vertices")
        return set()

    u = n - k
    cover = VertexCoverSearch(complement_graph(G)).find_cover_at_most_k(u)
    return set(G.nodes()) - cover


def find_maximum_independent_set(G: nx.Graph) -> Set:
    """Maximum independent set of G, the complement of a minimum vertex cover of G."""
    cover = VertexCoverSearch(G).find_minimum_cover()
    return set(G.nodes()) - cover
