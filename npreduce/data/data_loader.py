"""
Utilities for loading and saving graph and 3-CNF instances.

Graph files hold one or more adjacency-matrix blocks: a line with the vertex
count n followed by n rows of n 0/1 tokens, either space separated ("0 1 1")
or fixed width ("011"). CNF files hold one formula per line as whitespace
separated signed integers.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

import networkx as nx

from npreduce.reductions.cnf_to_vertex_cover import CnfFormula
from npreduce.utils import FormatError, adjacency_matrix, from_adjacency_matrix

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class GraphInstance:
    index: int
    graph: Optional[nx.Graph] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class CnfInstance:
    index: int
    formula: Optional[CnfFormula] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_matrix_row(line: str, n: int) -> List[int]:
    """Parse one adjacency row of length n"""
    stripped = line.strip()
    tokens = stripped.split() if any(ch.isspace() for ch in stripped) else list(stripped)
    if len(tokens) != n:
        raise FormatError(f"Expected {n} entries in row, got {len(tokens)}: {stripped!r}")
    row = []
    for token in tokens:
        if token not in ("0", "1"):
            raise FormatError(f"Invalid adjacency entry {token!r}")
        row.append(int(token))
    return row


def parse_graph_instances(lines: Iterable[str]) -> Iterator[GraphInstance]:
    """
    Parse every adjacency block in lines.

    A malformed block yields a GraphInstance carrying the error and parsing
    carries on with the line after the block.
    """
    it = iter(lines)
    index = 0
    for header in it:
        if not header.strip():
            continue
        index += 1
        try:
            n = int(header.strip())
        except ValueError:
            message = f"Graph {index}: invalid vertex count {header.strip()!r}"
            logger.warning(message)
            yield GraphInstance(index, error=message)
            continue
        if n < 0:
            message = f"Graph {index}: negative vertex count {n}"
            logger.warning(message)
            yield GraphInstance(index, error=message)
            continue

        rows = []
        error = None
        for row_number in range(n):
            line = next(it, None)
            if line is None:
                error = f"Graph {index}: expected {n} rows, file ended after {row_number}"
                break
            if error is not None:
                # keep consuming the block so the next header lines up
                continue
            try:
                rows.append(parse_matrix_row(line, n))
            except FormatError as e:
                error = f"Graph {index}, row {row_number}: {e}"

        if error is not None:
            logger.warning(error)
            yield GraphInstance(index, error=error)
        else:
            yield GraphInstance(index, graph=from_adjacency_matrix(rows))


def load_graph_file(path: PathLike) -> List[GraphInstance]:
    """Read all graph blocks from path. OSError propagates if the file cannot be read."""
    with open(path, "r") as f:
        instances = list(parse_graph_instances(f))
    logger.info(f"Loaded {len(instances)} graph instance(s) from {path}")
    return instances


def parse_cnf_line(line: str) -> CnfFormula:
    try:
        values = [int(token) for token in line.split()]
    except ValueError as e:
        raise FormatError(f"Invalid literal in {line.strip()!r}") from e
    return CnfFormula(values)


def parse_cnf_instances(lines: Iterable[str]) -> Iterator[CnfInstance]:
    index = 0
    for line in lines:
        if not line.strip():
            continue
        index += 1
        try:
            yield CnfInstance(index, formula=parse_cnf_line(line))
        except FormatError as e:
            message = f"Formula {index}: {e}"
            logger.warning(message)
            yield CnfInstance(index, error=message)


def load_cnf_file(path: PathLike) -> List[CnfInstance]:
    with open(path, "r") as f:
        instances = list(parse_cnf_instances(f))
    logger.info(f"Loaded {len(instances)} formula(s) from {path}")
    return instances


def format_graph_block(G: nx.Graph) -> str:
    matrix = adjacency_matrix(G)
    lines = [str(G.number_of_nodes())]
    lines.extend(" ".join("1" if entry else "0" for entry in row) for row in matrix)
    return "\n".join(lines)


def save_graph_file(graphs: Iterable[nx.Graph], path: PathLike):
    """Write graphs as consecutive adjacency blocks"""
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        for G in graphs:
            f.write(format_graph_block(G) + "\n")


def save_cnf_file(formulas: Iterable[CnfFormula], path: PathLike):
    Path(path).parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        for formula in formulas:
            f.write(" ".join(str(value) for value in formula.to_ints()) + "\n")
