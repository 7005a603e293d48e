from npreduce.data.data_loader import load_cnf_file, load_graph_file
from npreduce.generate_test_graphs import (
    generate_planted_3cnf,
    generate_random_3cnf,
    generate_random_graph,
    generate_test_suite,
    parse_shapes,
)


def test_random_graph_is_seeded():
    G1 = generate_random_graph(8, 0.4, seed=7)
    G2 = generate_random_graph(8, 0.4, seed=7)
    assert sorted(G1.edges()) == sorted(G2.edges())
    assert G1.number_of_nodes() == 8


def test_random_3cnf_shape():
    formula = generate_random_3cnf(4, 5, seed=1)
    assert formula.num_clauses == 5
    assert formula.num_variables == 4


def test_planted_3cnf_is_satisfied_by_plant():
    for seed in range(10):
        formula, planted = generate_planted_3cnf(4, 6, seed=seed)
        assert formula.num_variables == 4
        assert formula.evaluate(planted)


def test_parse_shapes():
    assert parse_shapes("3x4,4x6") == [(3, 4), (4, 6)]


def test_generate_test_suite(tmp_path):
    graph_path = tmp_path / "graphs.txt"
    cnf_path = tmp_path / "cnfs.txt"
    generate_test_suite([4, 5], [0.5], 2, [(3, 2)], 1, graph_path=graph_path, cnf_path=cnf_path)
    graphs = load_graph_file(graph_path)
    formulas = load_cnf_file(cnf_path)
    assert len(graphs) == 4 and all(instance.ok for instance in graphs)
    assert len(formulas) == 2 and all(instance.ok for instance in formulas)
