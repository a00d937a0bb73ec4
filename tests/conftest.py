"""Shared graph fixtures.

Graphs are 0/1 adjacency matrices with vertices labelled 1..n; the diagrams
use those labels.
"""

from __future__ import annotations

import numpy as np
import pytest

from secgraph.generate import complete_graph, cycle_graph


def _from_arcs(n, arc_list):
    g = np.zeros((n, n), dtype=np.int64)
    for i, j in arc_list:
        g[i - 1, j - 1] = 1
    return g


@pytest.fixture
def cycle4():
    #  1 ──► 2
    #  ▲     │
    #  │     ▼
    #  4 ◄── 3
    return cycle_graph(4)


@pytest.fixture
def complete3():
    # Every off-diagonal arc on {1, 2, 3}
    return complete_graph(3)


@pytest.fixture
def isolated_vertex():
    # 1 ◄──► 2 ◄──► 3, vertex 4 has no arcs
    return _from_arcs(4, [(1, 2), (2, 1), (2, 3), (3, 2)])


@pytest.fixture
def no_path_1_to_2():
    #  2 ──► 1 ──► 3
    #
    # Vertex 1 only reaches 3, which has no out-arcs.
    return _from_arcs(3, [(1, 3), (2, 1)])


@pytest.fixture
def two_triangles():
    # Two complete triangles {1,2,3} and {4,5,6} joined by the single arcs
    # 3 -> 4 and 6 -> 1. SEC is 1, found at probe P(3,4) or P(6,1).
    arc_list = [(i, j) for i in (1, 2, 3) for j in (1, 2, 3) if i != j]
    arc_list += [(i, j) for i in (4, 5, 6) for j in (4, 5, 6) if i != j]
    arc_list += [(3, 4), (6, 1)]
    return _from_arcs(6, arc_list)


@pytest.fixture
def spare_source_arcs():
    # 1 has three out-arcs but everything funnels through 4 -> 2:
    #
    #     ┌──► 3 ──┐
    #  1 ─┼──► 5 ──┼──► 4 ──► 2 ──► 1
    #     └──► 6 ──┘
    #
    # Max-flow P(1,2) is 1; the flow-carrying arc out of 1 is not a cut.
    return _from_arcs(
        6, [(1, 3), (1, 5), (1, 6), (3, 4), (5, 4), (6, 4), (4, 2), (2, 1)]
    )


@pytest.fixture
def bidirectional_pair():
    # 1 ◄──► 2, the smallest strongly connected graph
    return _from_arcs(2, [(1, 2), (2, 1)])
