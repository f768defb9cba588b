"""Graph value types.

A graph maps every known module to the frozenset of its direct
dependencies. Modules without dependencies map to an empty frozenset,
never to an absent key.
"""
from __future__ import annotations

from typing import Dict, FrozenSet, Mapping, Tuple

Module = str
Graph = Mapping[Module, FrozenSet[Module]]
MutableGraph = Dict[Module, FrozenSet[Module]]
Edge = Tuple[Module, Module]

__all__ = ["Module", "Graph", "MutableGraph", "Edge"]
