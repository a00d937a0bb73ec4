"""Adjacency-matrix graphs.

A graph on n vertices is an n x n 0/1 matrix ``g`` where ``g[i - 1, j - 1] == 1``
iff arc i -> j exists. Vertices are labelled 1..n in every function of this
module; numpy indexing stays 0-based.

Example:
    >>> g = as_adjacency([[0, 1, 0], [0, 0, 1], [1, 0, 0]])
    >>> successors(g, 1)
    [2]
    >>> predecessors(g, 1)
    [3]
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, Iterable, List, Optional, Union

import networkx as nx
import numpy as np

from secgraph.types.dto import CutEdge

if TYPE_CHECKING:
    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


def as_adjacency(g: Any) -> np.ndarray:
    """Validate ``g`` and return it as a read-only integer adjacency matrix.

    Args:
        g: Square array-like of 0/1 (or boolean) entries.

    Returns:
        A new ``int64`` array that the caller cannot mutate.

    Raises:
        ValueError: If ``g`` is not a square matrix or holds values other than 0 and 1.
    """
    arr = np.asarray(g)
    if arr.ndim == 1 and arr.size == 0:
        arr = np.zeros((0, 0), dtype=np.int64)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError(
            f"Adjacency matrix must be square, got shape {tuple(arr.shape)}"
        )
    if not np.isin(arr, (0, 1)).all():
        raise ValueError("Adjacency matrix must only contain 0 and 1 entries")

    out = arr.astype(np.int64)
    out.setflags(write=False)
    return out


def num_vertices(g: np.ndarray) -> int:
    """Return the number of vertices of adjacency matrix ``g``."""
    return int(g.shape[0])


def check_vertex(g: np.ndarray, v: int, role: str = "vertex") -> None:
    """Raise ValueError unless ``v`` is a vertex label of ``g``."""
    n = num_vertices(g)
    if not 1 <= v <= n:
        raise ValueError(f"{role} {v} out of range [1, {n}]")


def successors(g: np.ndarray, i: int) -> List[int]:
    """Vertices j with an arc i -> j, i.e. the nonzero columns of row i."""
    return (np.flatnonzero(g[i - 1, :]) + 1).tolist()


def predecessors(g: np.ndarray, j: int) -> List[int]:
    """Vertices i with an arc i -> j, i.e. the nonzero rows of column j."""
    return (np.flatnonzero(g[:, j - 1]) + 1).tolist()


def arcs(g: np.ndarray) -> List[CutEdge]:
    """All arcs of ``g`` as (i, j) pairs in row-major order."""
    rows, cols = np.nonzero(g)
    return [(int(i) + 1, int(j) + 1) for i, j in zip(rows, cols)]


def remove_arcs(g: np.ndarray, to_remove: Iterable[CutEdge]) -> np.ndarray:
    """Return a copy of ``g`` without the given arcs.

    Raises:
        ValueError: If an arc references a vertex outside ``g``.
    """
    out = np.array(g, dtype=np.int64)
    for i, j in to_remove:
        check_vertex(out, i, "source")
        check_vertex(out, j, "target")
        out[i - 1, j - 1] = 0
    return out


def add_arc(g: np.ndarray, i: int, j: int) -> np.ndarray:
    """Return a copy of ``g`` with arc i -> j present."""
    out = np.array(g, dtype=np.int64)
    check_vertex(out, i, "source")
    check_vertex(out, j, "target")
    out[i - 1, j - 1] = 1
    return out


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and 1-based vertex labels.

    Attributes:
        to_label: Maps original node names to vertex labels.
        to_name: Maps vertex labels back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_label["A"]
        1
        >>> node_map.to_name[2]
        'B'
    """

    to_label: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap labelling ``names`` 1..n in order."""
        to_label = {name: i for i, name in enumerate(names, start=1)}
        to_name = {i: name for i, name in enumerate(names, start=1)}
        return cls(to_label=to_label, to_name=to_name)

    def name_arcs(self, labelled: Iterable[CutEdge]) -> List[tuple]:
        """Translate (i, j) label pairs into (name_i, name_j) pairs."""
        return [(self.to_name[i], self.to_name[j]) for i, j in labelled]

    def __len__(self) -> int:
        return len(self.to_label)


def from_networkx(
    G: NxGraph, *, nodelist: Optional[List[Hashable]] = None
) -> tuple[np.ndarray, NodeMap]:
    """Convert a NetworkX graph into an adjacency matrix.

    Parallel edges collapse into a single arc. Undirected edges become a pair
    of opposite arcs.

    Args:
        G: NetworkX graph (directed or undirected, simple or multi).
        nodelist: Node order defining the labels; defaults to ``G.nodes`` order.

    Returns:
        ``(g, node_map)`` where ``g`` is a read-only 0/1 matrix.

    Raises:
        ValueError: If ``nodelist`` does not cover exactly the nodes of ``G``.
    """
    names = list(G.nodes) if nodelist is None else list(nodelist)
    if len(set(names)) != len(names) or set(names) != set(G.nodes):
        raise ValueError("nodelist must list every node of G exactly once")

    node_map = NodeMap.from_names(names)
    g = np.zeros((len(names), len(names)), dtype=np.int64)
    for u, v in G.edges():
        i, j = node_map.to_label[u] - 1, node_map.to_label[v] - 1
        g[i, j] = 1
        if not G.is_directed():
            g[j, i] = 1
    return as_adjacency(g), node_map


def to_networkx(g: Any, node_map: Optional[NodeMap] = None) -> nx.DiGraph:
    """Convert an adjacency matrix into a ``networkx.DiGraph``.

    Every arc gets ``capacity=1``. Nodes are the labels 1..n, or the original
    names when ``node_map`` is given.
    """
    g = as_adjacency(g)
    n = num_vertices(g)

    def name(label: int) -> Hashable:
        return node_map.to_name[label] if node_map is not None else label

    G = nx.DiGraph()
    G.add_nodes_from(name(i) for i in range(1, n + 1))
    G.add_edges_from((name(i), name(j), {"capacity": 1}) for i, j in arcs(g))
    return G
