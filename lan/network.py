"""
LAN Network Protocol

Runs broadcast and print requests over a token ring. Every request writes
an audit trail to a report stream supplied by the caller; the exact lines
and their order are part of the contract.
"""

from typing import TextIO
import logging

from lan.document import ASCII_TITLE, print_document
from lan.errors import UnknownWorkstationError
from lan.node_types import Node
from lan.packet import Packet
from lan.render import to_text
from lan.ring import RingTopology


class Network:
    """
    Token ring LAN simulation

    Packets are passed from one node to the next until they reach their
    destination or have travelled the whole ring.
    """

    def __init__(self, ring: RingTopology):
        self.ring = ring

    @classmethod
    def default_example(cls) -> 'Network':
        network = cls(RingTopology.default_example())
        network.ring.validate()
        return network

    def is_consistent(self) -> bool:
        return self.ring.is_consistent()

    def has_workstation(self, name: str) -> bool:
        return self.ring.has_workstation(name)

    # -------- Requests --------

    def request_broadcast(self, report: TextIO) -> bool:
        """
        Send a broadcast packet across the ring, treated by every node.

        Precondition: the ring is consistent (raises InconsistentNetworkError).

        Returns True, a broadcast cannot fail on a consistent ring.
        """
        self.ring.validate()

        try:
            report.write("Broadcast Request\n")

            current = self.ring.entry_node
            packet = Packet.broadcast(current.name)
            logging.info(f"Broadcast from {current.name}")
            while True:
                self._log_hop(report, current, packet)
                current = self.ring.successor(current)
                if packet.has_reached(current.name):
                    break

            report.write(">>> Broadcast travelled whole token ring.\n\n")
        except OSError as e:
            logging.error(f"Report write failed during broadcast: {e}")
            raise

        return True

    def request_print(self, workstation: str, document: str, printer: str, report: TextIO) -> bool:
        """
        #workstation asks to print #document on #printer. The packet travels the
        ring until it reaches #printer or comes back to #workstation.

        Precondition: the ring is consistent and #workstation is registered
        (raises InconsistentNetworkError / UnknownWorkstationError).

        Returns True when the document was printed, False otherwise.
        """
        self.ring.validate()
        if not self.ring.has_workstation(workstation):
            logging.error(f"Print request from unknown workstation '{workstation}'")
            raise UnknownWorkstationError(workstation)

        try:
            report.write(f"'{workstation}' requests printing of '{document}' on '{printer}' ...\n")

            packet = Packet.create(document, workstation, printer)
            logging.info(f"Print request {packet}")

            current = self.ring.workstation(workstation)
            self._log_hop(report, current, packet)
            current = self.ring.successor(current)
            while not packet.has_reached(current.name) and not packet.is_back_at_origin(current.name):
                self._log_hop(report, current, packet)
                current = self.ring.successor(current)

            if packet.has_reached(current.name):
                result = print_document(packet, current, self.accounting_document, report)
            else:
                logging.info(f"Destination '{printer}' not found on the ring")
                report.write(">>> Destinition not found, print job cancelled.\n\n")
                report.flush()
                result = False
        except OSError as e:
            logging.error(f"Report write failed during print request: {e}")
            raise

        return result

    def accounting_document(self, report: TextIO, author: str, title: str):
        """Record a delivered print job on #report"""
        report.write(f"\tAccounting -- author = '{author}' -- title = '{title}'\n")
        # chosen by title only, a postscript job titled ASCII DOCUMENT reads as ASCII
        if title != ASCII_TITLE:
            report.write(">>> Postscript job delivered.\n\n")
        else:
            report.write(">>> ASCII Print job delivered.\n\n")
        report.flush()
        logging.info(f"Accounted print job: author={author!r}, title={title!r}")

    @staticmethod
    def _log_hop(report: TextIO, node: Node, packet: Packet):
        logging.debug(f"{node.name} passes on {packet}")
        report.write(f"\tNode '{node.name}' passes packet on.\n")

    def __str__(self) -> str:
        return to_text(self.ring)
