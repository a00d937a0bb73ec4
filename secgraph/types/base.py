"""Enums selecting the max-flow backend and the cut extraction rule."""

from __future__ import annotations

from enum import IntEnum


class _NamedEnum(IntEnum):
    @classmethod
    def from_string(cls, value: str):
        """Parse a case-insensitive member name.

        Raises:
            ValueError: If the string doesn't match any enum member.
        """
        try:
            return cls[value.upper()]
        except KeyError:
            valid = ", ".join(e.name for e in cls)
            raise ValueError(
                f"Invalid {cls.__name__} '{value}'. Valid values are: {valid}"
            ) from None

    @classmethod
    def coerce(cls, value):
        """Return ``value`` as a member, parsing strings with ``from_string``."""
        if isinstance(value, str):
            return cls.from_string(value)
        return cls(value)


class Backend(_NamedEnum):
    """How a single source/sink max-flow is computed."""

    #: Binary arc-flow program solved by CBC through PuLP.
    MILP = 1
    #: Breadth-first augmenting paths (Edmonds-Karp) on unit capacities.
    AUGMENTING = 2


class CutStrategy(_NamedEnum):
    """How the arcs of a minimum cut are read off an optimal flow."""

    #: Saturated arcs leaving the source side of the residual graph.
    RESIDUAL = 1
    #: Flow-carrying arcs leaving the probe source.
    SOURCE_ARCS = 2
