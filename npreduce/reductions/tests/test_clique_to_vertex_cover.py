import unittest
import networkx as nx

from npreduce.algorithms.vertex_cover import find_minimum_cover
from npreduce.evaluation.metrics import is_clique, is_independent_set
from npreduce.reductions.clique_to_vertex_cover import (
    complement_graph,
    find_k_clique,
    find_maximum_clique,
    find_maximum_independent_set,
)


class TestComplementGraph(unittest.TestCase):
    def test_complement_of_path(self):
        G = nx.path_graph(4)
        H = complement_graph(G)
        self.assertEqual(set(H.nodes()), {0, 1, 2, 3})
        self.assertEqual({frozenset(e) for e in H.edges()},
                         {frozenset((0, 2)), frozenset((0, 3)), frozenset((1, 3))})

    def test_no_self_loops(self):
        G = nx.Graph([(0, 0), (0, 1)])
        G.add_node(2)
        H = complement_graph(G)
        self.assertEqual(nx.number_of_selfloops(H), 0)
        self.assertTrue(H.has_edge(0, 2))
        self.assertFalse(H.has_edge(0, 1))


class TestMaximumClique(unittest.TestCase):
    def test_triangle(self):
        G = nx.complete_graph(3)
        self.assertEqual(find_maximum_clique(G), {0, 1, 2})

    def test_triangle_with_tail(self):
        G = nx.Graph([(0, 1), (1, 2), (0, 2), (2, 3), (3, 4)])
        self.assertEqual(find_maximum_clique(G), {0, 1, 2})

    def test_edgeless_graph(self):
        G = nx.empty_graph(4)
        self.assertEqual(len(find_maximum_clique(G)), 1)

    def test_empty_graph(self):
        self.assertEqual(find_maximum_clique(nx.Graph()), set())

    def test_self_loops_ignored(self):
        G = nx.complete_graph(4)
        G.add_edge(2, 2)
        self.assertEqual(find_maximum_clique(G), {0, 1, 2, 3})

    def test_duality_on_random_graphs(self):
        for seed in range(15):
            G = nx.gnp_random_graph(5 + seed % 6, 0.5, seed=seed)
            clique = find_maximum_clique(G)
            self.assertTrue(is_clique(G, clique), f"seed {seed}")
            expected = max(len(c) for c in nx.find_cliques(G))
            self.assertEqual(len(clique), expected, f"seed {seed}")
            cover = find_minimum_cover(complement_graph(G))
            self.assertEqual(len(cover), G.number_of_nodes() - len(clique), f"seed {seed}")


class TestKClique(unittest.TestCase):
    def setUp(self):
        # K4 on {0,1,2,3} plus a triangle {3,4,5}
        self.G = nx.complete_graph(4)
        self.G.add_edges_from([(3, 4), (4, 5), (3, 5)])

    def test_k_found(self):
        clique = find_k_clique(self.G, 3)
        self.assertGreaterEqual(len(clique), 3)
        self.assertTrue(is_clique(self.G, clique))

    def test_exact_maximum(self):
        clique = find_k_clique(self.G, 4)
        self.assertEqual(clique, {0, 1, 2, 3})

    def test_k_too_large(self):
        clique = find_k_clique(self.G, 5)
        self.assertLess(len(clique), 5)

    def test_k_above_vertex_count(self):
        self.assertEqual(find_k_clique(self.G, 7), set())

    def test_k_zero(self):
        self.assertTrue(is_clique(self.G, find_k_clique(self.G, 0)))

    def test_negative_k(self):
        with self.assertRaises(ValueError):
            find_k_clique(self.G, -2)


class TestIndependentSet(unittest.TestCase):
    def test_path(self):
        G = nx.path_graph(5)
        independent = find_maximum_independent_set(G)
        self.assertEqual(independent, {0, 2, 4})

    def test_random_graphs(self):
        for seed in range(10):
            G = nx.gnp_random_graph(8, 0.4, seed=seed)
            independent = find_maximum_independent_set(G)
            self.assertTrue(is_independent_set(G, independent))
            expected = max(len(c) for c in nx.find_cliques(nx.complement(G)))
            self.assertEqual(len(independent), expected)


if __name__ == '__main__':
    unittest.main()
