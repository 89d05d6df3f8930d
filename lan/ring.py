"""
LAN Ring Topology

Holds the token ring as an arena: nodes live in a list and every node's
successor is stored as an index into that list. Handles construction,
consistency checking and traversal.
"""

from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple
import logging

from lan.errors import InconsistentNetworkError, StructuralError
from lan.node_types import Node, NodeKind


class RingTopology:
    """
    Singly linked circular structure over nodes

    Built once through one of the factory methods and treated as read-only
    afterwards.
    """

    def __init__(self, nodes: Sequence[Node], successors: Sequence[int],
                 entry: Optional[int], workstations: Dict[str, int]):
        """
        Low-level constructor, takes the arena as given

        Args:
            nodes: Ring participants, names must be unique
            successors: Index of the successor of each node
            entry: Index of the node traversals start from (None for an empty ring)
            workstations: Registry of workstation name -> node index
        """
        if len(successors) != len(nodes):
            raise StructuralError(
                f"Expected {len(nodes)} successor links, got {len(successors)}")

        self._nodes: List[Node] = list(nodes)
        self._successors: List[int] = list(successors)
        self._index: Dict[str, int] = {}
        for position, node in enumerate(self._nodes):
            if node.name in self._index:
                raise StructuralError(f"Duplicate node name: '{node.name}'")
            self._index[node.name] = position

        for position in self._successors:
            self._check_position(position, "successor")
        if entry is not None:
            self._check_position(entry, "entry")
        for name, position in workstations.items():
            self._check_position(position, f"registry entry '{name}'")

        self._entry = entry
        self._workstations: Dict[str, int] = dict(workstations)

    def _check_position(self, position: int, what: str):
        if not 0 <= position < len(self._nodes):
            raise StructuralError(f"{what} index {position} out of range 0..{len(self._nodes) - 1}")

    # -------- Factories --------

    @classmethod
    def build(cls, ordering: Sequence[Node], entry: int = 0) -> 'RingTopology':
        """
        Link #ordering into a cycle (last node points back to the first) and
        register every workstation by name.

        Raises StructuralError when the ring would lack a workstation or a
        printer, or when names collide.
        """
        if not any(node.is_workstation for node in ordering):
            raise StructuralError("A ring needs at least one workstation")
        if not any(node.is_printer for node in ordering):
            raise StructuralError("A ring needs at least one printer")

        size = len(ordering)
        successors = [(position + 1) % size for position in range(size)]
        workstations = {node.name: position for position, node in enumerate(ordering)
                        if node.is_workstation}

        ring = cls(ordering, successors, entry, workstations)
        logging.debug(f"Built ring of {size} nodes, entry={ring.entry_node.name}")
        return ring

    @classmethod
    def from_links(cls, links: Iterable[Tuple[str, NodeKind, int]], entry: int) -> 'RingTopology':
        """
        Build a ring from (name, kind, successor_index) tuples.

        Links are taken as given, so a mis-linked ring can be represented;
        is_consistent() reports it.
        """
        links = list(links)
        if not links:
            raise StructuralError("Cannot build a ring without nodes")

        nodes = [Node(name, NodeKind(kind)) for name, kind, _ in links]
        successors = [successor for _, _, successor in links]
        workstations = {node.name: position for position, node in enumerate(nodes)
                        if node.is_workstation}
        return cls(nodes, successors, entry, workstations)

    @classmethod
    def default_example(cls) -> 'RingTopology':
        """
        Ring used as starting point for the simulation:

            Workstation Filip -> Node n1 -> Workstation Hans -> Printer Andy -> ...
        """
        return cls.build([
            Node.workstation("Filip"),
            Node.relay("n1"),
            Node.workstation("Hans"),
            Node.printer("Andy"),
        ])

    # -------- Lookups --------

    @property
    def entry_node(self) -> Optional[Node]:
        if self._entry is None:
            return None
        return self._nodes[self._entry]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return self.traverse()

    def has_workstation(self, name: str) -> bool:
        """Registry membership, no traversal involved"""
        return name in self._workstations

    def workstation(self, name: str) -> Node:
        return self._nodes[self._workstations[name]]

    def successor(self, node: Node) -> Node:
        """Single hop along the ring"""
        return self._nodes[self._next_index(self._index[node.name])]

    def _next_index(self, position: int) -> int:
        return self._successors[position]

    # -------- Traversal --------

    def traverse(self) -> Iterator[Node]:
        """
        Yield the nodes in ring order, starting at the entry node and stopping
        when the entry node comes round again. Each call starts afresh.
        """
        if self._entry is None:
            return
        seen = set()
        position = self._entry
        while position not in seen:
            seen.add(position)
            yield self._nodes[position]
            position = self._next_index(position)
            if position == self._entry:
                return

    # -------- Consistency --------

    def validate(self) -> None:
        """
        Check that the ring is a consistent token ring network:
        - contains at least one workstation and one printer
        - is circular
        - all workstations on the ring are registered
        - all registered workstations are on the ring

        Raises InconsistentNetworkError with the first failing check.
        """
        if not self._workstations:
            raise InconsistentNetworkError("no workstations registered")
        if self._entry is None:
            raise InconsistentNetworkError("no entry node")

        for name, position in self._workstations.items():
            if not self._nodes[position].is_workstation:
                raise InconsistentNetworkError(f"registered node '{name}' is not a workstation")

        # enumerate the ring once, at most len(self) + 1 hops
        encountered = set()
        printers_found = 0
        workstations_found = 0
        unregistered = []
        position = self._entry
        while position not in encountered:
            encountered.add(position)
            node = self._nodes[position]
            if node.is_workstation:
                workstations_found += 1
                if self._workstations.get(node.name) != position:
                    unregistered.append(node.name)
            elif node.is_printer:
                printers_found += 1
            position = self._next_index(position)

        if position != self._entry:
            raise InconsistentNetworkError(
                f"ring is not circular, '{self._nodes[position].name}' revisited before the entry node")
        if printers_found == 0:
            raise InconsistentNetworkError("no printer on the ring")
        if unregistered:
            raise InconsistentNetworkError(f"workstation '{unregistered[0]}' on the ring is not registered")
        if workstations_found != len(self._workstations):
            raise InconsistentNetworkError(
                f"{len(self._workstations)} workstations registered, {workstations_found} found on the ring")

    def is_consistent(self) -> bool:
        """Answer whether the ring passes validate()"""
        try:
            self.validate()
        except InconsistentNetworkError as e:
            logging.debug(str(e))
            return False
        return True
