"""Tests for the Edmonds-Karp backend."""

import networkx as nx
import numpy as np
import pytest

from secgraph.generate import rand_graph
from secgraph.graph import to_networkx
from secgraph.solver.augmenting import max_flow_augmenting


class TestMaxFlowAugmenting:
    def test_cycle(self, cycle4):
        value, x = max_flow_augmenting(cycle4, 1, 3)
        assert value == 1
        assert x[0, 1] == 1 and x[1, 2] == 1
        assert x.sum() == 2

    def test_complete_graph(self, complete3):
        value, _ = max_flow_augmenting(complete3, 1, 2)
        assert value == 2

    def test_bottleneck(self, spare_source_arcs):
        value, x = max_flow_augmenting(spare_source_arcs, 1, 2)
        assert value == 1
        assert x[3, 1] == 1

    def test_self_loops_carry_no_flow(self):
        g = np.array([[1, 1], [0, 1]])
        value, x = max_flow_augmenting(g, 1, 2)
        assert value == 1
        assert np.trace(x) == 0

    def test_does_not_mutate_input(self, complete3):
        before = complete3.copy()
        max_flow_augmenting(complete3, 1, 2)
        assert np.array_equal(before, complete3)

    def test_flow_conservation(self, two_triangles):
        value, x = max_flow_augmenting(two_triangles, 2, 5)
        net_out = x.sum(axis=1) - x.sum(axis=0)

        assert value == 1
        assert net_out[1] == value
        assert net_out[4] == -value
        assert np.all(np.delete(net_out, [1, 4]) == 0)

    @pytest.mark.parametrize("seed", range(8))
    def test_matches_networkx(self, seed):
        """Values agree with NetworkX on random unit-capacity graphs."""
        g = rand_graph(7, 0.35, seed=seed)
        G = to_networkx(g)
        for a, b in [(1, 2), (3, 7), (6, 4)]:
            value, x = max_flow_augmenting(g, a, b)
            assert value == nx.maximum_flow_value(G, a, b)
            assert np.all(x <= g)
