#!/usr/bin/env python3
"""
Command line driver: minimum / k vertex cover, maximum / k clique and 3-CNF
satisfiability for every instance in a file.
"""
import argparse
import logging
import sys
from pathlib import Path

from npreduce.data.data_loader import load_cnf_file, load_graph_file
from npreduce.evaluation.comparison import (
    evaluate_formulas,
    evaluate_graphs,
    format_cnf_report,
    format_report_line,
)

logger = logging.getLogger(__name__)

DEFAULT_FILES = {
    "vertex-cover": "graph.txt",
    "clique": "graphs2022.txt",
    "cnf": "cnfs2022.txt",
}


def print_graph_results(instances, results, mode, input_name, k=None, plot_dir=None):
    by_index = {instance.index: instance for instance in instances}
    if mode == "vertex_cover":
        what = "A Minimum Vertex Cover" if k is None else f"A Vertex Cover of size <= {k}"
    else:
        what = "Max Cliques" if k is None else f"Cliques of size >= {k}"
    print(f"* {what} of every graph in {input_name} *")
    print("   (|V|,|E|)   (size, ms used) Vertices")

    for row in results.to_dict("records"):
        instance = by_index[row["graph"]]
        if not instance.ok:
            print(f"G{instance.index} skipped: {instance.error}")
            continue
        line = format_report_line(instance.index, instance.graph, row["vertices"], row["ms"])
        if k is not None and not row["target_met"]:
            line += " (target not met)"
        print(line)
        if plot_dir is not None:
            from npreduce.visualization.plot import plot_cover
            Path(plot_dir).mkdir(parents=True, exist_ok=True)
            label = "cover" if mode == "vertex_cover" else "clique"
            plot_cover(instance.graph, row["vertices"], f"G{instance.index}",
                       output_path=Path(plot_dir) / f"G{instance.index}_{label}.png", highlight_label=label)


def run_graphs(args, mode):
    instances = load_graph_file(args.file)
    results = evaluate_graphs(instances, mode=mode, k=args.k, repair=not getattr(args, "no_repair", False),
                              ilp_check=args.ilp_check)
    print_graph_results(instances, results, mode, args.file, k=args.k, plot_dir=args.plot_dir)
    if args.csv:
        results.to_csv(args.csv, index=False)
        logger.info(f"Results saved to {args.csv}")


def run_cnf(args):
    instances = load_cnf_file(args.file)
    summary, results = evaluate_formulas(instances)
    print(f"* Solve every 3CNF in {args.file} (reduced to K-Vertex Cover) *")
    for instance, row, result in zip(instances, summary.to_dict("records"), results):
        if result is None:
            print(f"3CNF No. {instance.index} skipped: {instance.error}")
            continue
        for line in format_cnf_report(instance.index, instance.formula, result, row["ms"]):
            print(line)
        print()
    if args.csv:
        summary.to_csv(args.csv, index=False)
        logger.info(f"Results saved to {args.csv}")


def build_parser():
    parser = argparse.ArgumentParser(description='Exact vertex cover with Clique and 3-CNF-SAT reductions')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', required=True)

    for command, help_text in (("vertex-cover", "Minimum or k vertex cover of every graph"),
                               ("clique", "Maximum or k clique of every graph via its complement")):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument('file', nargs='?', default=DEFAULT_FILES[command],
                         help=f'Adjacency matrix file (default: {DEFAULT_FILES[command]})')
        sub.add_argument('--k', type=int, default=None, help='Search for a solution of size k only')
        sub.add_argument('--csv', default=None, help='Also write the results table to this CSV file')
        sub.add_argument('--plot-dir', default=None, help='Save a figure per graph into this directory')
        sub.add_argument('--ilp-check', action='store_true', help='Cross-check sizes with the ILP baseline')
        if command == "vertex-cover":
            sub.add_argument('--no-repair', action='store_true',
                             help='Skip the redundant-member repair pass after the minimum search')

    sub = subparsers.add_parser("cnf", help="Satisfiability of every 3-CNF formula via vertex cover")
    sub.add_argument('file', nargs='?', default=DEFAULT_FILES["cnf"],
                     help=f'One formula per line (default: {DEFAULT_FILES["cnf"]})')
    sub.add_argument('--csv', default=None, help='Also write the results table to this CSV file')
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='[%(levelname)s] %(message)s')

    if getattr(args, "k", None) is not None and args.k < 0:
        parser.error("--k must be non-negative")

    try:
        if args.command == "cnf":
            run_cnf(args)
        else:
            run_graphs(args, "vertex_cover" if args.command == "vertex-cover" else "clique")
    except OSError as e:
        print(f"Error opening file: {args.file} ({e})", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
