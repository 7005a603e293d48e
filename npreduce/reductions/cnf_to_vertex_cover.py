"""
3-CNF-SAT -> Vertex Cover reduction.

For a formula with n variables and m clauses the gadget graph holds:
- one edge x_i -- not x_i per variable (any cover takes at least one end),
- one triangle per clause, a vertex per literal occurrence (any cover takes
  at least two of the three),
- a cross edge from every clause vertex to the variable vertex carrying the
  same literal.
The formula is satisfiable iff the gadget graph has a cover of size n + 2m.
In such a cover the variable vertex left out of the cover is the false
literal, and the clause vertex left out of each triangle points at a true one.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, NamedTuple, Optional, Sequence, Set, Tuple

import networkx as nx

from npreduce.algorithms.vertex_cover import VertexCoverSearch
from npreduce.utils import FormatError, freeze

logger = logging.getLogger(__name__)


class Literal(NamedTuple):
    variable: int
    positive: bool

    @classmethod
    def from_int(cls, value: int) -> "Literal":
        if value == 0:
            raise FormatError("0 is not a literal")
        return cls(abs(value), value > 0)

    def __int__(self):
        return self.variable if self.positive else -self.variable

    def negate(self) -> "Literal":
        return Literal(self.variable, not self.positive)

    def is_true(self, assignment: Mapping[int, bool]) -> bool:
        return assignment[self.variable] == self.positive


@dataclass(frozen=True)
class GadgetNode:
    """Vertex of the gadget graph; cross edges match on literal alone."""
    literal: Literal
    in_clause: bool
    clause_index: Optional[int] = None
    position: Optional[int] = None


class CnfFormula:
    """A 3-CNF formula given as a flat sequence of signed integer literals."""

    def __init__(self, literals: Sequence[int]):
        values = []
        for value in literals:
            if isinstance(value, bool) or int(value) != value:
                raise FormatError(f"Literal {value!r} is not an integer")
            values.append(int(value))
        if len(values) % 3 != 0:
            raise FormatError(f"Literal count {len(values)} is not a multiple of 3")
        self.literals: Tuple[Literal, ...] = tuple(Literal.from_int(v) for v in values)

    def __repr__(self):
        return f"CnfFormula({[int(literal) for literal in self.literals]})"

    def __eq__(self, other):
        return isinstance(other, CnfFormula) and self.literals == other.literals

    def __hash__(self):
        return hash(self.literals)

    @property
    def num_variables(self) -> int:
        return max((literal.variable for literal in self.literals), default=0)

    @property
    def num_clauses(self) -> int:
        return len(self.literals) // 3

    @property
    def clauses(self) -> List[Tuple[Literal, Literal, Literal]]:
        return [tuple(self.literals[i:i + 3]) for i in range(0, len(self.literals), 3)]

    @property
    def target_cover_size(self) -> int:
        return self.num_variables + 2 * self.num_clauses

    def evaluate(self, assignment: Mapping[int, bool]) -> bool:
        """True if every clause has a literal made true by assignment"""
        return all(any(literal.is_true(assignment) for literal in clause) for clause in self.clauses)

    def to_ints(self) -> List[int]:
        return [int(literal) for literal in self.literals]

    def render(self, assignment: Optional[Mapping[int, bool]] = None) -> str:
        """
        ( 1| 2|-3)^(-1| 2| 4) style rendering. With an assignment every
        literal is replaced by the truth value it takes, e.g. ( T| F| T).
        """
        def token(literal: Literal) -> str:
            if assignment is None:
                return f"{int(literal):2d}"
            return " T" if literal.is_true(assignment) else " F"

        return "^".join("(" + "|".join(token(literal) for literal in clause) + ")" for clause in self.clauses)


def build_gadget_graph(formula: CnfFormula) -> nx.Graph:
    """
    Gadget graph of formula with integer vertices.

    Vertices 2(i-1) and 2(i-1)+1 are x_i and not x_i; clause vertices follow
    in formula order. Each vertex carries its GadgetNode as the "gadget"
    attribute.
    """
    G = nx.Graph()
    variable_vertex: Dict[Literal, int] = {}

    for variable in range(1, formula.num_variables + 1):
        positive = 2 * (variable - 1)
        for vertex, literal in ((positive, Literal(variable, True)), (positive + 1, Literal(variable, False))):
            G.add_node(vertex, gadget=GadgetNode(literal, in_clause=False))
            variable_vertex[literal] = vertex
        G.add_edge(positive, positive + 1)

    next_vertex = 2 * formula.num_variables
    for clause_index, clause in enumerate(formula.clauses):
        triangle = list(range(next_vertex, next_vertex + 3))
        for position, (vertex, literal) in enumerate(zip(triangle, clause)):
            G.add_node(vertex, gadget=GadgetNode(literal, True, clause_index, position))
        G.add_edges_from([(triangle[0], triangle[1]), (triangle[0], triangle[2]), (triangle[1], triangle[2])])
        for vertex, literal in zip(triangle, clause):
            G.add_edge(vertex, variable_vertex[literal])
        next_vertex += 3

    return freeze(G)


@dataclass
class SatResult:
    satisfiable: bool
    assignment: Optional[Dict[int, bool]]
    cover: Set[int]
    target: int
    graph: nx.Graph

    @property
    def assignment_vector(self) -> Optional[List[bool]]:
        if self.assignment is None:
            return None
        return [self.assignment[variable] for variable in sorted(self.assignment)]


def extract_assignment(G: nx.Graph, cover: Set[int]) -> Dict[int, bool]:
    """Variable i is true iff x_i is in the cover, i.e. not x_i was left out."""
    assignment = {}
    for vertex, gadget in G.nodes(data="gadget"):
        if gadget.in_clause or not gadget.literal.positive:
            continue
        assignment[gadget.literal.variable] = vertex in cover
    return assignment


def solve_3cnf(formula: CnfFormula) -> SatResult:
    """
    Decide formula by searching the gadget graph for a cover of size n + 2m.

    No cover is ever smaller than n + 2m, so finding one of at most that size
    means finding one of exactly that size.
    """
    G = build_gadget_graph(formula)
    target = formula.target_cover_size
    cover = VertexCoverSearch(G).find_cover_at_most_k(target)

    if len(cover) > target:
        logger.info(f"Unsatisfiable: smallest cover has {len(cover)} vertices, needed {target}")
        return SatResult(False, None, cover, target, G)

    assignment = extract_assignment(G, cover)
    logger.info(f"Satisfiable with cover of size {len(cover)}: {assignment}")
    return SatResult(True, assignment, cover, target, G)
