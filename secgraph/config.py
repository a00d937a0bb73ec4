"""Configuration classes for secgraph components."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from secgraph.types.base import Backend, CutStrategy


@dataclass(frozen=True)
class SolverConfig:
    """Configuration for max-flow probes and SEC computation."""

    # Max-flow backend used by every probe
    backend: Backend = Backend.MILP

    # Rule for reading cut arcs off an optimal flow
    cut_strategy: CutStrategy = CutStrategy.RESIDUAL

    # CBC time limit in seconds per probe; None leaves it unbounded
    time_limit: Optional[float] = None

    # Forward CBC's own log to stdout
    solver_msg: bool = False

    # Number of threads evaluating probes; 1 runs them sequentially
    workers: int = 1

    def __post_init__(self) -> None:
        object.__setattr__(self, "backend", Backend.coerce(self.backend))
        object.__setattr__(
            self, "cut_strategy", CutStrategy.coerce(self.cut_strategy)
        )
        if self.time_limit is not None and self.time_limit <= 0:
            raise ValueError(f"time_limit must be positive, got {self.time_limit}")
        if self.workers < 1:
            raise ValueError(f"workers must be at least 1, got {self.workers}")

    def override(self, **changes) -> "SolverConfig":
        """Return a copy with the non-None ``changes`` applied."""
        changes = {k: v for k, v in changes.items() if v is not None}
        if not changes:
            return self
        return replace(self, **changes)


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
