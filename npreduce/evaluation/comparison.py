"""
Batch evaluation and console reporting for the vertex cover, clique and
3-CNF solvers.
"""
import logging
import time
from typing import Callable, Iterable, List, Optional, Tuple

import networkx as nx
import pandas as pd

from npreduce.algorithms.ilp_solver import solve_ilp_vertex_cover
from npreduce.algorithms.vertex_cover import VertexCoverSearch
from npreduce.data.data_loader import CnfInstance, GraphInstance
from npreduce.evaluation.metrics import is_clique, is_vertex_cover
from npreduce.reductions.clique_to_vertex_cover import complement_graph, find_k_clique, find_maximum_clique
from npreduce.reductions.cnf_to_vertex_cover import CnfFormula, SatResult, solve_3cnf

logger = logging.getLogger(__name__)

MODES = ("vertex_cover", "clique")


def run_algorithm_with_timing(algorithm_func: Callable, *args, **kwargs) -> Tuple[object, float]:
    """
    Run an algorithm and time its execution.

    Returns:
        Tuple of (solution, runtime in seconds)
    """
    start_time = time.perf_counter()
    solution = algorithm_func(*args, **kwargs)
    end_time = time.perf_counter()
    return solution, end_time - start_time


def format_vertex_set(vertices: Iterable) -> str:
    return "{" + ", ".join(str(v) for v in sorted(vertices)) + "}"


def format_report_line(index: int, G: nx.Graph, vertices: Iterable, ms: float) -> str:
    """G1(4, 3) (size=2, ms=0) {1, 2}"""
    members = list(vertices)
    return (f"G{index}({G.number_of_nodes()}, {G.number_of_edges()}) "
            f"(size={len(members)}, ms={int(ms)}) {format_vertex_set(members)}")


def format_cnf_report(index: int, formula: CnfFormula, result: SatResult, ms: float) -> List[str]:
    """Solution line, formula line and the formula with truth values substituted"""
    header = f"3CNF No. {index}: [n={formula.num_variables} k={formula.num_clauses}] ({int(ms)} ms)"
    if not result.satisfiable:
        return [f"{header} No Solution", formula.render() + " ==>", "unsatisfiable"]
    values = " ".join(f"{variable}:{'T' if value else 'F'}" for variable, value in sorted(result.assignment.items()))
    return [f"{header} Solution:[{values}]", formula.render() + " ==>", formula.render(result.assignment)]


def _solve_graph(G: nx.Graph, mode: str, k: Optional[int], repair: bool):
    if mode == "vertex_cover":
        searcher = VertexCoverSearch(G, repair=repair)
        return searcher.find_minimum_cover() if k is None else searcher.find_cover_at_most_k(k)
    if k is None:
        return find_maximum_clique(G)
    return find_k_clique(G, k)


def evaluate_graphs(instances: Iterable[GraphInstance], mode: str = "vertex_cover", k: Optional[int] = None,
                    repair: bool = True, ilp_check: bool = False, ilp_time_limit: int = 60) -> pd.DataFrame:
    """
    Solve every graph instance and collect one row per instance.

    Malformed instances get a row with the parse error and no solution.
    With ilp_check the exact size is compared against the ILP baseline
    (on the complement for clique mode).
    """
    if mode not in MODES:
        raise ValueError(f"Unknown mode '{mode}'. Available: {', '.join(MODES)}")

    rows = []
    for instance in instances:
        if not instance.ok:
            rows.append({"graph": instance.index, "error": instance.error})
            continue

        G = instance.graph
        vertices, seconds = run_algorithm_with_timing(_solve_graph, G, mode, k, repair)
        valid = is_vertex_cover(G, vertices) if mode == "vertex_cover" else is_clique(G, vertices)
        row = {
            "graph": instance.index,
            "n_vertices": G.number_of_nodes(),
            "n_edges": G.number_of_edges(),
            "size": len(vertices),
            "ms": seconds * 1000,
            "vertices": sorted(vertices),
            "valid": valid,
            "error": None,
        }
        if k is not None:
            row["k"] = k
            row["target_met"] = len(vertices) <= k if mode == "vertex_cover" else len(vertices) >= k
        if ilp_check:
            target_graph = G if mode == "vertex_cover" else complement_graph(G)
            ilp = solve_ilp_vertex_cover(target_graph, time_limit=ilp_time_limit)
            ilp_size = ilp["cover_size"] if mode == "vertex_cover" else G.number_of_nodes() - ilp["cover_size"]
            row["ilp_size"] = ilp_size
            if k is None and ilp["optimal"] and ilp_size != len(vertices):
                logger.warning(f"Graph {instance.index}: search found size {len(vertices)}, ILP found {ilp_size}")
        rows.append(row)

    return pd.DataFrame(rows)


def evaluate_formulas(instances: Iterable[CnfInstance]) -> Tuple[pd.DataFrame, List[SatResult]]:
    """Decide every formula; returns the summary table and the per-formula results (None for errors)"""
    rows = []
    results = []
    for instance in instances:
        if not instance.ok:
            rows.append({"formula": instance.index, "error": instance.error})
            results.append(None)
            continue

        formula = instance.formula
        result, seconds = run_algorithm_with_timing(solve_3cnf, formula)
        rows.append({
            "formula": instance.index,
            "n_variables": formula.num_variables,
            "n_clauses": formula.num_clauses,
            "target": result.target,
            "cover_size": len(result.cover),
            "satisfiable": result.satisfiable,
            "assignment": result.assignment_vector,
            "verified": formula.evaluate(result.assignment) if result.satisfiable else None,
            "ms": seconds * 1000,
            "error": None,
        })
        results.append(result)

    return pd.DataFrame(rows), results
