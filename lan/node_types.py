"""
LAN Node Types

Defines the node roles and the node record for the token ring network.
"""

from dataclasses import dataclass
from enum import IntEnum


class NodeKind(IntEnum):
    """Role of a node in the ring"""
    RELAY = 1          # Plain node, only passes packets on
    WORKSTATION = 2    # Can request print jobs
    PRINTER = 3        # Can accept print jobs


@dataclass(frozen=True)
class Node:
    """A named ring participant. Successors are owned by the ring, not the node."""

    name: str
    kind: NodeKind = NodeKind.RELAY

    @property
    def is_workstation(self) -> bool:
        return self.kind == NodeKind.WORKSTATION

    @property
    def is_printer(self) -> bool:
        return self.kind == NodeKind.PRINTER

    @classmethod
    def relay(cls, name: str) -> 'Node':
        return cls(name, NodeKind.RELAY)

    @classmethod
    def workstation(cls, name: str) -> 'Node':
        return cls(name, NodeKind.WORKSTATION)

    @classmethod
    def printer(cls, name: str) -> 'Node':
        return cls(name, NodeKind.PRINTER)

    def __str__(self) -> str:
        return f"Node(name={self.name}, kind={self.kind.name})"
