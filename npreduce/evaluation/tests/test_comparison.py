import networkx as nx
import pytest

from npreduce.data.data_loader import CnfInstance, GraphInstance, parse_cnf_line
from npreduce.evaluation.comparison import (
    evaluate_formulas,
    evaluate_graphs,
    format_cnf_report,
    format_report_line,
    format_vertex_set,
    run_algorithm_with_timing,
)
from npreduce.reductions.cnf_to_vertex_cover import solve_3cnf


def test_run_algorithm_with_timing():
    result, seconds = run_algorithm_with_timing(sorted, [3, 1, 2])
    assert result == [1, 2, 3]
    assert seconds >= 0


def test_format_report_line(path4):
    assert format_vertex_set({2, 1}) == "{1, 2}"
    assert format_vertex_set([]) == "{}"
    assert format_report_line(1, path4, {1, 2}, 0.4) == "G1(4, 3) (size=2, ms=0) {1, 2}"


def test_evaluate_graphs_vertex_cover(triangle, path4):
    instances = [GraphInstance(1, graph=triangle), GraphInstance(2, error="bad row"), GraphInstance(3, graph=path4)]
    results = evaluate_graphs(instances)
    assert list(results["graph"]) == [1, 2, 3]
    ok = results[results["error"].isna()]
    assert list(ok["size"]) == [2, 2]
    assert ok["valid"].all()
    assert results.loc[1, "error"] == "bad row"


def test_evaluate_graphs_clique_with_k(triangle):
    results = evaluate_graphs([GraphInstance(1, graph=triangle)], mode="clique", k=3)
    row = results.iloc[0]
    assert row["size"] == 3
    assert row["target_met"]


def test_evaluate_graphs_k_not_met(triangle):
    results = evaluate_graphs([GraphInstance(1, graph=triangle)], mode="vertex_cover", k=1)
    assert not results.iloc[0]["target_met"]


def test_evaluate_graphs_ilp_check():
    G = nx.gnp_random_graph(7, 0.5, seed=3)
    results = evaluate_graphs([GraphInstance(1, graph=G)], mode="clique", ilp_check=True, ilp_time_limit=10)
    row = results.iloc[0]
    assert row["ilp_size"] == row["size"]


def test_unknown_mode():
    with pytest.raises(ValueError):
        evaluate_graphs([], mode="coloring")


def test_evaluate_formulas():
    instances = [
        CnfInstance(1, formula=parse_cnf_line("1 2 3 -1 -2 3")),
        CnfInstance(2, error="Literal count 2 is not a multiple of 3"),
        CnfInstance(3, formula=parse_cnf_line("1 1 1 -1 -1 -1 1 1 1")),
    ]
    summary, results = evaluate_formulas(instances)
    assert list(summary["formula"]) == [1, 2, 3]
    assert results[1] is None
    assert summary.loc[0, "satisfiable"]
    assert summary.loc[0, "verified"]
    assert not summary.loc[2, "satisfiable"]


def test_format_cnf_report():
    formula = parse_cnf_line("1 2 3 -1 -2 3")
    result = solve_3cnf(formula)
    lines = format_cnf_report(1, formula, result, 2.7)
    assert lines[0].startswith("3CNF No. 1: [n=3 k=2] (2 ms) Solution:[1:")
    assert lines[1] == "( 1| 2| 3)^(-1|-2| 3) ==>"
    assert "T" in lines[2]


def test_format_cnf_report_unsatisfiable():
    formula = parse_cnf_line("1 1 1 -1 -1 -1 1 1 1")
    lines = format_cnf_report(4, formula, solve_3cnf(formula), 0)
    assert lines[0] == "3CNF No. 4: [n=1 k=3] (0 ms) No Solution"
