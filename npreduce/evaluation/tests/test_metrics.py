import networkx as nx
import pytest

from npreduce.evaluation.metrics import (
    brute_force_minimum_cover,
    is_clique,
    is_independent_set,
    is_minimal_cover,
    is_vertex_cover,
)


def test_is_vertex_cover(path4):
    assert is_vertex_cover(path4, {1, 2})
    assert not is_vertex_cover(path4, {0, 3})


def test_self_loop_needs_its_vertex():
    G = nx.Graph([(0, 0), (0, 1)])
    assert not is_vertex_cover(G, {1})
    assert is_vertex_cover(G, {0})


def test_is_minimal_cover(path4):
    assert is_minimal_cover(path4, {0, 2})
    assert not is_minimal_cover(path4, {0, 1, 2})
    assert not is_minimal_cover(path4, {0})


def test_is_clique_and_independent_set(triangle, edge_with_isolated):
    assert is_clique(triangle, {0, 1, 2})
    assert is_clique(triangle, set())
    assert not is_clique(edge_with_isolated, {0, 2})
    assert is_independent_set(edge_with_isolated, {0, 2})
    assert not is_independent_set(triangle, {0, 1})


def test_brute_force_minimum_cover(triangle, path4, edge_with_isolated):
    assert len(brute_force_minimum_cover(triangle)) == 2
    assert brute_force_minimum_cover(path4) == {0, 2}
    assert len(brute_force_minimum_cover(edge_with_isolated)) == 1


def test_brute_force_refuses_large_graphs():
    with pytest.raises(ValueError):
        brute_force_minimum_cover(nx.empty_graph(20))
