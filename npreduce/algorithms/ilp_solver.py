"""
Integer Linear Programming (ILP) baseline for minimum vertex cover.

Used to cross-check the exact branch-and-bound search, never by the reductions.
"""
import logging
from typing import Any, Dict

import networkx as nx
import pulp

logger = logging.getLogger(__name__)


def solve_ilp_vertex_cover(G: nx.Graph, time_limit: int = 60, verbose: bool = False) -> Dict[str, Any]:
    """
    Minimise sum x_v subject to x_u + x_v >= 1 for every edge.

    Args:
        G: Input graph; a self-loop (v, v) forces x_v = 1
        time_limit: CBC time limit in seconds (0 = no limit)
        verbose: Show solver output

    Returns:
        Dictionary with cover, cover_size, n_nodes, n_edges and optimal flag
    """
    V = list(G.nodes())
    E = list(G.edges())

    if not E:
        return {"cover": set(), "cover_size": 0, "n_nodes": len(V), "n_edges": 0, "optimal": True}

    prob = pulp.LpProblem("Minimum_Vertex_Cover", pulp.LpMinimize)
    x = {v: pulp.LpVariable(f"x_{i}", cat=pulp.LpBinary) for i, v in enumerate(V)}

    prob += pulp.lpSum(x[v] for v in V)

    for u, v in E:
        if u == v:
            prob += x[u] >= 1
        else:
            prob += x[u] + x[v] >= 1

    if time_limit > 0:
        prob.solve(pulp.PULP_CBC_CMD(timeLimit=time_limit, msg=verbose))
    else:
        prob.solve(pulp.PULP_CBC_CMD(msg=verbose))

    is_optimal = prob.status == pulp.LpStatusOptimal
    if not is_optimal:
        logger.warning(f"ILP solver finished with status {pulp.LpStatus[prob.status]}")

    cover = {v for v in V if (pulp.value(x[v]) or 0) > 0.5}
    return {
        "cover": cover,
        "cover_size": len(cover),
        "n_nodes": len(V),
        "n_edges": len(E),
        "optimal": is_optimal,
    }
