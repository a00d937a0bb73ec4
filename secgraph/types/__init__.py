"""Shared enums and result types for secgraph.

Contains no runtime logic beyond enum parsing.
"""

from secgraph.types.base import Backend, CutStrategy
from secgraph.types.dto import CutEdge, FlowResult, ProbeResult, SECResult

__all__ = [
    # Enums
    "Backend",
    "CutStrategy",
    # Type aliases
    "CutEdge",
    # DTOs
    "FlowResult",
    "ProbeResult",
    "SECResult",
]
