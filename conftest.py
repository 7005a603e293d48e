import matplotlib

matplotlib.use("Agg")

import networkx as nx
import pytest

from npreduce.utils import add_edge, empty_graph, freeze


def graph_from_edges(n, edges):
    G = empty_graph(n)
    for u, v in edges:
        add_edge(G, u, v)
    return freeze(G)


@pytest.fixture
def triangle():
    return graph_from_edges(3, [(0, 1), (1, 2), (0, 2)])


@pytest.fixture
def path4():
    return graph_from_edges(4, [(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def edge_with_isolated():
    return graph_from_edges(3, [(0, 1)])


@pytest.fixture
def small_random_graphs():
    """Seeded G(n, p) graphs with up to 10 vertices"""
    graphs = []
    for seed, (n, p) in enumerate([(5, 0.4), (6, 0.5), (7, 0.3), (8, 0.5), (9, 0.4), (10, 0.3), (10, 0.6)]):
        graphs.append(nx.gnp_random_graph(n, p, seed=seed))
    return graphs
