"""Strong edge connectivity by cyclic max-flow probes.

For any ordering v1, ..., vn of the vertices, a minimum arc cut separates some
consecutive pair: its source side holds v_i but not v_{i+1} (indices cyclic).
The strong edge connectivity is therefore the minimum of the n max-flows
P(1,2), P(2,3), ..., P(n,1), which replaces the n(n-1) ordered pairs with n
probes.
"""

from __future__ import annotations

import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, List, Optional, Sequence, Tuple, Union

import numpy as np

from secgraph.config import SOLVER_CONFIG, SolverConfig
from secgraph.exceptions import SolverError
from secgraph.graph import as_adjacency, num_vertices
from secgraph.logging import get_logger
from secgraph.solver.cut import extract_cut
from secgraph.solver.maxflow import maxflow
from secgraph.types.base import Backend, CutStrategy
from secgraph.types.dto import ProbeResult, SECResult

logger = get_logger(__name__)


def probe_pairs(n: int) -> List[Tuple[int, int]]:
    """Cyclic probe sequence [(1, 2), (2, 3), ..., (n, 1)]; empty when n < 2."""
    if n < 2:
        return []
    return [(a, a % n + 1) for a in range(1, n + 1)]


def _probe(g: np.ndarray, index: int, a: int, b: int, cfg: SolverConfig) -> ProbeResult:
    value, assignment = maxflow(g, a, b, config=cfg)
    logger.debug(f"P({a},{b})={value}")
    cut = extract_cut(g, assignment, a, cfg.cut_strategy) if value > 0 else []
    return ProbeResult(index=index, source=a, sink=b, value=value, cut=tuple(cut))


def _run_serial(
    g: np.ndarray,
    pairs: Sequence[Tuple[int, int]],
    best: ProbeResult,
    cfg: SolverConfig,
) -> ProbeResult:
    """Probe ``pairs`` in order, keeping the first probe with the lowest value."""
    for index, (a, b) in enumerate(pairs, start=best.index + 1):
        result = _probe(g, index, a, b, cfg)
        if result.value < best.value:
            best = result
            if best.value == 0:
                logger.debug(f"P({a},{b})=0, skipping the remaining probes")
                break
    return best


def _run_parallel(
    g: np.ndarray,
    pairs: Sequence[Tuple[int, int]],
    best: ProbeResult,
    cfg: SolverConfig,
) -> ProbeResult:
    """Probe ``pairs`` on a thread pool and merge in probe order.

    The graph is shared read-only across threads. Results are consumed by
    probe index, so the minimum, its tie-break and the stop at the first zero
    match ``_run_serial``; pending probes are cancelled on a zero or a failure.
    """
    workers = min(cfg.workers, len(pairs))
    logger.debug(f"Running {len(pairs)} probes on {workers} threads")
    start_time = time.time()

    pool = ThreadPoolExecutor(max_workers=workers)
    try:
        futures = [
            pool.submit(_probe, g, index, a, b, cfg)
            for index, (a, b) in enumerate(pairs, start=best.index + 1)
        ]
        for future in futures:
            result = future.result()
            if result.value < best.value:
                best = result
                if best.value == 0:
                    logger.debug(
                        f"P({result.source},{result.sink})=0, cancelling the remaining probes"
                    )
                    break
    finally:
        pool.shutdown(wait=True, cancel_futures=True)

    logger.debug(f"Parallel probes completed in {time.time() - start_time:.2f} seconds")
    return best


def sec(
    g: Any,
    *,
    backend: Optional[Union[Backend, str]] = None,
    cut_strategy: Optional[Union[CutStrategy, str]] = None,
    workers: Optional[int] = None,
    config: Optional[SolverConfig] = None,
) -> SECResult:
    """Strong edge connectivity of ``g`` and one minimum cut achieving it.

    Runs the max-flow probes P(1,2), P(2,3), ..., P(n,1) and keeps the lowest
    value. A zero at P(1,2) returns before any other probe; a later zero stops
    the sequence.

    Args:
        g: Square 0/1 adjacency matrix.
        backend: Overrides ``config.backend``.
        cut_strategy: Overrides ``config.cut_strategy``.
        workers: Overrides ``config.workers``; above 1 the probes after P(1,2)
            run on a thread pool.
        config: Solver configuration; defaults to ``SOLVER_CONFIG``.

    Returns:
        ``SECResult(value, cut)``. Graphs with fewer than 2 vertices and graphs
        that are not strongly connected give ``(0, [])``; otherwise
        ``len(cut) == value``.

    Raises:
        ValueError: If ``g`` is not a square 0/1 matrix.
        SolverError: If any probe cannot be solved to optimality.

    Examples:
        >>> from secgraph.generate import complete_graph
        >>> sec(complete_graph(3)).value
        2
    """
    g = as_adjacency(g)
    cfg = (config or SOLVER_CONFIG).override(
        backend=backend, cut_strategy=cut_strategy, workers=workers
    )
    n = num_vertices(g)
    pairs = probe_pairs(n)
    if not pairs:
        logger.debug(f"Graph has {n} vertices, SEC is 0")
        return SECResult(0, [])

    try:
        first = _probe(g, 0, *pairs[0], cfg)
        if first.value == 0:
            logger.info("SEC=0: no path from vertex 1 to vertex 2")
            return SECResult(0, [])

        rest = pairs[1:]
        if cfg.workers > 1 and len(rest) > 1:
            best = _run_parallel(g, rest, first, cfg)
        else:
            best = _run_serial(g, rest, first, cfg)
    except SolverError as exc:
        logger.error(f"P({exc.source},{exc.sink}) failed, aborting SEC computation")
        raise

    if best.value == 0:
        logger.info(f"SEC=0: no path from vertex {best.source} to vertex {best.sink}")
        return SECResult(0, [])

    logger.info(
        f"SEC={best.value}, minimum cut found at P({best.source},{best.sink})"
    )
    return SECResult(best.value, list(best.cut))
