"""
LAN Simulation Package

Token ring Local Area Network simulation with:
- Ring topology held as an index-based arena with consistency checks
- Broadcast and point-to-point print requests
- Postscript / ASCII document parsing and print job accounting
- Plain text, HTML and XML dumps of the ring
"""

from lan.node_types import NodeKind, Node
from lan.errors import (LanError, StructuralError, PreconditionViolation,
                        InconsistentNetworkError, UnknownWorkstationError)
from lan.packet import Packet
from lan.ring import RingTopology
from lan.document import ParsedDocument, parse_document, print_document
from lan.network import Network
from lan.render import to_text, to_html, to_xml

__all__ = [
    'NodeKind',
    'Node',
    'LanError',
    'StructuralError',
    'PreconditionViolation',
    'InconsistentNetworkError',
    'UnknownWorkstationError',
    'Packet',
    'RingTopology',
    'ParsedDocument',
    'parse_document',
    'print_document',
    'Network',
    'to_text',
    'to_html',
    'to_xml',
]
