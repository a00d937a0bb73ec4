"""Graph generators for tests and experiments."""

from __future__ import annotations

from typing import Optional, Union

import numpy as np

from secgraph.graph import as_adjacency


def rand_graph(
    n: int,
    p: float,
    seed: Optional[Union[int, np.random.Generator]] = None,
) -> np.ndarray:
    """Random n x n adjacency matrix with each entry 1 with probability ``p``.

    Entries are drawn independently, the diagonal included.

    Args:
        n: Number of vertices.
        p: Probability of each entry being 1, in [0, 1].
        seed: Seed or ``numpy.random.Generator``; None draws fresh entropy.

    Raises:
        ValueError: If ``n`` is negative or ``p`` lies outside [0, 1].
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"p must lie in [0, 1], got {p}")
    rng = np.random.default_rng(seed)
    return as_adjacency(rng.random((n, n)) < p)


def complete_graph(n: int) -> np.ndarray:
    """Complete directed graph on n vertices (every off-diagonal arc)."""
    return as_adjacency(np.ones((n, n), dtype=np.int64) - np.eye(n, dtype=np.int64))


def cycle_graph(n: int) -> np.ndarray:
    """Directed cycle 1 -> 2 -> ... -> n -> 1."""
    g = np.zeros((n, n), dtype=np.int64)
    for i in range(n):
        g[i, (i + 1) % n] = 1
    return as_adjacency(g)
