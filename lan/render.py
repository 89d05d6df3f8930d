"""
Ring Rendering

Plain text, HTML and XML dumps of a ring, one full revolution starting at
the entry node. Only uses traverse() and each node's kind and name.
"""

from lan.node_types import Node, NodeKind
from lan.ring import RingTopology


def _label(node: Node) -> str:
    match node.kind:
        case NodeKind.WORKSTATION:
            return f"Workstation {node.name} [Workstation]"
        case NodeKind.PRINTER:
            return f"Printer {node.name} [Printer]"
        case _:
            return f"Node {node.name} [Node]"


def _element(node: Node) -> str:
    match node.kind:
        case NodeKind.WORKSTATION:
            tag = "workstation"
        case NodeKind.PRINTER:
            tag = "printer"
        case _:
            tag = "node"
    return f"<{tag}>{node.name}</{tag}>"


def to_text(ring: RingTopology) -> str:
    """e.g. 'Workstation Filip [Workstation] -> Node n1 [Node] -> ...  ... '"""
    parts = [f"{_label(node)} -> " for node in ring.traverse()]
    return "".join(parts) + " ... "


def to_html(ring: RingTopology) -> str:
    buf = ["<HTML>\n<HEAD>\n<TITLE>LAN Simulation</TITLE>\n</HEAD>\n<BODY>\n<H1>LAN SIMULATION</H1>",
           "\n\n<UL>"]
    for node in ring.traverse():
        buf.append(f"\n\t<LI> {_label(node)} </LI>")
    buf.append("\n\t<LI>...</LI>\n</UL>\n\n</BODY>\n</HTML>\n")
    return "".join(buf)


def to_xml(ring: RingTopology) -> str:
    buf = ['<?xml version="1.0" encoding="UTF-8"?>\n\n<network>']
    for node in ring.traverse():
        buf.append(f"\n\t{_element(node)}")
    buf.append("\n</network>")
    return "".join(buf)
