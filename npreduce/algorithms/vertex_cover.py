"""
Exact Minimum / K-Vertex-Cover by branch-and-bound over vertex exclusions.

The search starts from the cover holding every vertex with at least one
incident edge and removes vertices from it one at a time, in increasing
index order. A vertex may be removed only while all of its neighbours are
still in the cover, so the covering property holds at every step and never
has to be validated after the fact. A self-loop makes the vertex its own
neighbour; it can therefore never be removed and is part of every cover.
Vertices without incident edges are never in a cover.

A branch ends when the next vertex cannot be removed (the vertex stays in and
the current cover is compared against the best one) or when no later vertex
is left. Branches that could not beat the best known size even by removing
every remaining vertex are cut off.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Set

import networkx as nx
import numpy as np

from npreduce.reductions.utils import log_search_summary, timed_step

logger = logging.getLogger(__name__)


@dataclass
class SearchContext:
    """
    Mutable state of one top-level search call.

    cover is the CoverState being explored; best_cover is only copied when a
    strictly smaller cover is recorded. A context belongs to exactly one call.
    """
    cover: np.ndarray
    best_cover: np.ndarray
    best_size: int
    current_size: int
    target: Optional[int] = None
    branches: int = 0
    leaves: int = 0
    pruned: int = 0

    @classmethod
    def start(cls, initial_cover: np.ndarray, target: Optional[int] = None) -> "SearchContext":
        size = int(np.count_nonzero(initial_cover))
        return cls(
            cover=initial_cover.copy(),
            best_cover=initial_cover.copy(),
            best_size=size,
            current_size=size,
            target=target,
        )

    @property
    def target_met(self) -> bool:
        return self.target is not None and self.best_size <= self.target

    def exclude(self, vertex: int):
        self.cover[vertex] = False
        self.current_size -= 1

    def reinstate(self, vertex: int):
        self.cover[vertex] = True
        self.current_size += 1

    def record(self):
        self.leaves += 1
        if self.current_size < self.best_size:
            self.best_size = self.current_size
            self.best_cover = self.cover.copy()

    def stats(self) -> Dict[str, int]:
        return {
            "size": self.best_size,
            "branches": self.branches,
            "leaves": self.leaves,
            "pruned": self.pruned,
        }


def would_add_uncovered_edge(adjacency: List[List[int]], cover: np.ndarray, vertex: int) -> bool:
    """
    True if taking vertex out of cover would leave one of its edges with no
    endpoint in the cover. A self-loop always counts as such an edge.
    """
    for neighbour in adjacency[vertex]:
        if neighbour == vertex or not cover[neighbour]:
            return True
    return False


def _prune_redundant(adjacency: List[List[int]], cover: np.ndarray) -> np.ndarray:
    repaired = cover.copy()
    for vertex in range(len(repaired)):
        if not repaired[vertex]:
            continue
        neighbours = adjacency[vertex]
        if len(neighbours) == 1 and neighbours[0] != vertex and repaired[neighbours[0]]:
            # the only edge of vertex is already covered from the other side
            repaired[vertex] = False
    return repaired


class VertexCoverSearch:
    def __init__(self, graph: nx.Graph, repair: bool = True):
        """
        Prepare an exact vertex cover search on graph.

        Args:
            graph: Input graph; nodes are searched in insertion order
            repair: Run the best-effort redundant-member pass after a minimum search
        """
        self.original_nodes = list(graph.nodes())
        self.node_to_int = {node: i for i, node in enumerate(self.original_nodes)}
        self.n = len(self.original_nodes)
        self.adjacency = [
            sorted(self.node_to_int[u] for u in graph.neighbors(node))
            for node in self.original_nodes
        ]
        # isolated vertices start outside the cover and are never branched on
        self.candidates = [v for v in range(self.n) if self.adjacency[v]]
        self.repair = repair
        self.last_stats: Optional[Dict[str, int]] = None

    def initial_cover(self) -> np.ndarray:
        cover = np.zeros(self.n, dtype=bool)
        cover[np.asarray(self.candidates, dtype=int)] = True
        return cover

    @timed_step("minimum vertex cover")
    def find_minimum_cover(self) -> Set:
        """Exact minimum vertex cover, as a set of the graph's nodes."""
        context = self._run(target=None)
        cover = context.best_cover
        if self.repair:
            cover = _prune_redundant(self.adjacency, cover)
        self.last_stats = context.stats()
        log_search_summary("minimum vertex cover", self.last_stats)
        return self._to_nodes(cover)

    @timed_step("k vertex cover")
    def find_cover_at_most_k(self, k: int) -> Set:
        """
        Return the first cover of size <= k found in index order.

        If no such cover exists the search runs to exhaustion and returns the
        smallest cover found instead, so callers compare the size against k.
        """
        if k < 0:
            raise ValueError(f"k must be non-negative, got {k}")
        context = self._run(target=k)
        self.last_stats = context.stats()
        self.last_stats["k"] = k
        log_search_summary("k vertex cover", self.last_stats)
        return self._to_nodes(context.best_cover)

    def _run(self, target: Optional[int]) -> SearchContext:
        context = SearchContext.start(self.initial_cover(), target)
        for position in range(len(self.candidates)):
            if context.target_met:
                break
            self._search(context, position)
        return context

    def _search(self, context: SearchContext, position: int):
        if context.target_met:
            return
        context.branches += 1
        vertex = self.candidates[position]

        if would_add_uncovered_edge(self.adjacency, context.cover, vertex):
            context.record()
            return

        context.exclude(vertex)
        remaining = len(self.candidates) - position - 1
        if remaining == 0:
            context.record()
        elif context.current_size - remaining >= context.best_size:
            context.pruned += 1
        else:
            for next_position in range(position + 1, len(self.candidates)):
                self._search(context, next_position)
        context.reinstate(vertex)

    def _to_nodes(self, cover: np.ndarray) -> Set:
        return {self.original_nodes[i] for i in np.flatnonzero(cover)}


def find_minimum_cover(graph: nx.Graph, repair: bool = True) -> Set:
    return VertexCoverSearch(graph, repair=repair).find_minimum_cover()


def find_cover_at_most_k(graph: nx.Graph, k: int) -> Set:
    return VertexCoverSearch(graph).find_cover_at_most_k(k)


def prune_redundant_members(graph: nx.Graph, vertices) -> Set:
    """
    Best-effort repair of a vertex cover.

    Drops every covered vertex whose single neighbour is also covered. The
    result still covers every edge the input covered; it is not guaranteed
    to be minimum.
    """
    searcher = VertexCoverSearch(graph)
    members = set(vertices)
    cover = np.array([node in members for node in searcher.original_nodes], dtype=bool)
    return searcher._to_nodes(_prune_redundant(searcher.adjacency, cover))
