"""Property checks of sec() on random graphs, with NetworkX as the oracle."""

import networkx as nx
import numpy as np
import pytest

from secgraph.generate import rand_graph
from secgraph.graph import add_arc, arcs, remove_arcs, to_networkx
from secgraph.connectivity import probe_pairs, sec
from secgraph.solver import maxflow
from secgraph.types.base import Backend

SEEDS = range(6)


def _random_graph(seed, n=6, p=0.5):
    g = np.array(rand_graph(n, p, seed=seed))
    np.fill_diagonal(g, 0)
    return g


@pytest.mark.parametrize("seed", SEEDS)
@pytest.mark.parametrize("backend", [Backend.MILP, Backend.AUGMENTING])
def test_matches_networkx_edge_connectivity(seed, backend):
    g = _random_graph(seed)
    value, cut = sec(g, backend=backend)

    assert value == nx.edge_connectivity(to_networkx(g))
    assert len(cut) == value


@pytest.mark.parametrize("seed", SEEDS)
def test_idempotent(seed):
    g = _random_graph(seed, p=0.6)
    first = sec(g)
    second = sec(g)

    assert first.value == second.value
    assert len(first.cut) == len(second.cut) == first.value


@pytest.mark.parametrize("seed", SEEDS)
def test_cut_is_valid(seed):
    """Removing the cut drops the flow of the pair it was found at to zero."""
    g = _random_graph(seed, n=7, p=0.6)
    value, cut = sec(g, backend="augmenting")
    if value == 0:
        assert cut == []
        return

    assert len(cut) == value
    assert set(cut) <= set(arcs(g))

    reduced = remove_arcs(g, cut)
    assert nx.edge_connectivity(to_networkx(reduced)) == 0
    assert sec(reduced, backend="augmenting").value == 0


@pytest.mark.parametrize("seed", SEEDS)
def test_cut_lowers_some_cyclic_pair(seed):
    g = _random_graph(seed, n=5, p=0.7)
    value, cut = sec(g)
    if value == 0:
        return

    reduced = remove_arcs(g, cut)
    drops = [
        maxflow(reduced, a, b).value < maxflow(g, a, b).value
        for a, b in probe_pairs(5)
    ]
    assert any(drops)


@pytest.mark.parametrize("seed", SEEDS)
def test_adding_an_arc_never_decreases_sec(seed):
    g = _random_graph(seed, p=0.55)
    base = sec(g, backend="augmenting").value
    missing = [
        (i, j)
        for i in range(1, 7)
        for j in range(1, 7)
        if i != j and g[i - 1, j - 1] == 0
    ]
    for i, j in missing[:5]:
        assert sec(add_arc(g, i, j), backend="augmenting").value >= base
