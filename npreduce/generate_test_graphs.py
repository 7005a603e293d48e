"""
Generate random graph and 3-CNF instance files for the vertex cover,
clique and SAT solvers.
"""
import argparse
import logging

import networkx as nx
import numpy as np

from npreduce.data.data_loader import save_cnf_file, save_graph_file
from npreduce.reductions.cnf_to_vertex_cover import CnfFormula
from npreduce.utils import freeze

logger = logging.getLogger(__name__)


def generate_random_graph(num_vertices, edge_probability=0.3, seed=None):
    """G(n, p) graph with vertices 0..n-1"""
    return freeze(nx.gnp_random_graph(num_vertices, edge_probability, seed=seed))


def generate_random_3cnf(num_variables, num_clauses, seed=None):
    """
    Formula of num_clauses clauses, each with three literals drawn uniformly
    from variables 1..num_variables with random polarity. Variable
    num_variables always occurs so the inferred variable count matches.
    """
    if num_variables < 1 and num_clauses > 0:
        raise ValueError("Need at least one variable to build clauses")
    rng = np.random.default_rng(seed)
    variables = rng.integers(1, num_variables + 1, size=3 * num_clauses)
    if num_clauses > 0:
        variables[rng.integers(0, len(variables))] = num_variables
    signs = rng.choice([-1, 1], size=3 * num_clauses)
    return CnfFormula([int(v * s) for v, s in zip(variables, signs)])


def generate_planted_3cnf(num_variables, num_clauses, seed=None):
    """
    Satisfiable formula built around a hidden assignment.

    Returns:
        (formula, planted assignment)
    """
    rng = np.random.default_rng(seed)
    planted = {variable: bool(rng.integers(0, 2)) for variable in range(1, num_variables + 1)}
    formula = generate_random_3cnf(num_variables, num_clauses, seed=rng)

    literals = formula.to_ints()
    for start in range(0, len(literals), 3):
        clause = literals[start:start + 3]
        if not any((value > 0) == planted[abs(value)] for value in clause):
            # flip one literal so the planted assignment satisfies the clause
            position = start + int(rng.integers(0, 3))
            literals[position] = -literals[position]
    return CnfFormula(literals), planted


def generate_test_suite(sizes, edge_probabilities, graphs_per_setting, cnf_shapes, formulas_per_shape,
                        graph_path="graphs.txt", cnf_path="cnfs.txt", seed=0):
    graphs = []
    for n in sizes:
        for p in edge_probabilities:
            for i in range(graphs_per_setting):
                graphs.append(generate_random_graph(n, p, seed=seed + len(graphs)))
    save_graph_file(graphs, graph_path)
    logger.info(f"Saved {len(graphs)} graph(s) to {graph_path}")

    formulas = []
    for num_variables, num_clauses in cnf_shapes:
        for i in range(formulas_per_shape):
            formula, _ = generate_planted_3cnf(num_variables, num_clauses, seed=seed + len(formulas))
            formulas.append(formula)
            formulas.append(generate_random_3cnf(num_variables, num_clauses, seed=seed + 1000 + len(formulas)))
    save_cnf_file(formulas, cnf_path)
    logger.info(f"Saved {len(formulas)} formula(s) to {cnf_path}")


def parse_int_list(s):
    try:
        return [int(item) for item in s.split(',') if item.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid list format: {s}")


def parse_float_list(s):
    try:
        return [float(item) for item in s.split(',') if item.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid list format: {s}")


def parse_shapes(s):
    """'3x4,4x6' -> [(3, 4), (4, 6)]"""
    try:
        return [tuple(int(part) for part in item.split('x')) for item in s.split(',') if item.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid shape list: {s}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format='[%(levelname)s] %(message)s')
    parser = argparse.ArgumentParser(description="Generate graph and 3-CNF instance files.")
    parser.add_argument('--sizes', type=parse_int_list, default=[4, 6, 8, 10],
                        help='Comma separated vertex counts, e.g. --sizes=4,6,8')
    parser.add_argument('--probabilities', type=parse_float_list, default=[0.3, 0.6],
                        help='Comma separated edge probabilities, e.g. --probabilities=0.3,0.6')
    parser.add_argument('--graphs-per-setting', type=int, default=2)
    parser.add_argument('--cnf-shapes', type=parse_shapes, default=[(3, 2), (3, 4), (4, 4)],
                        help='Comma separated <variables>x<clauses>, e.g. --cnf-shapes=3x2,4x4')
    parser.add_argument('--formulas-per-shape', type=int, default=2)
    parser.add_argument('--graph-out', default='graphs.txt')
    parser.add_argument('--cnf-out', default='cnfs.txt')
    parser.add_argument('--seed', type=int, default=0)
    args = parser.parse_args()

    generate_test_suite(
        sizes=args.sizes,
        edge_probabilities=args.probabilities,
        graphs_per_setting=args.graphs_per_setting,
        cnf_shapes=args.cnf_shapes,
        formulas_per_shape=args.formulas_per_shape,
        graph_path=args.graph_out,
        cnf_path=args.cnf_out,
        seed=args.seed,
    )
