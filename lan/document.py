"""
Document Parser

Extracts author and title from a print job payload before it is accounted.
Two conventions are understood:
- postscript documents start with "!PS" and carry "author:" / "title:"
  fields, each ending at the next "." (or at the end of the payload)
- anything else is plain ASCII; the author is the 8 characters at offset 8
"""

from dataclasses import dataclass
from typing import Callable, TextIO
import logging

from lan.node_types import Node
from lan.packet import Packet

POSTSCRIPT_MARKER = "!PS"
AUTHOR_FIELD = "author:"
TITLE_FIELD = "title:"
FIELD_END = "."

DEFAULT_AUTHOR = "Unknown"
DEFAULT_TITLE = "Untitled"
ASCII_TITLE = "ASCII DOCUMENT"

# ASCII author window
ASCII_AUTHOR_START = 8
ASCII_AUTHOR_END = 16

Accounting = Callable[[TextIO, str, str], None]


@dataclass
class ParsedDocument:
    author: str = DEFAULT_AUTHOR
    title: str = DEFAULT_TITLE

    @property
    def is_ascii(self) -> bool:
        return self.title == ASCII_TITLE


def _field(payload: str, marker: str, default: str) -> str:
    start = payload.find(marker)
    if start < 0:
        return default
    start += len(marker)
    end = payload.find(FIELD_END, start)
    if end < 0:
        end = len(payload)
    return payload[start:end]


def parse_document(payload: str) -> ParsedDocument:
    """Never fails, missing fields fall back to the defaults"""
    if payload.startswith(POSTSCRIPT_MARKER):
        return ParsedDocument(
            author=_field(payload, AUTHOR_FIELD, DEFAULT_AUTHOR),
            title=_field(payload, TITLE_FIELD, DEFAULT_TITLE),
        )

    author = DEFAULT_AUTHOR
    if len(payload) >= ASCII_AUTHOR_END:
        author = payload[ASCII_AUTHOR_START:ASCII_AUTHOR_END]
    return ParsedDocument(author=author, title=ASCII_TITLE)


def print_document(packet: Packet, node: Node, accounting: Accounting, report: TextIO) -> bool:
    """
    Deliver #packet to #node

    Returns True when #node is a printer and the job was accounted, False
    (with a cancellation line on #report) otherwise.
    """
    if not node.is_printer:
        logging.info(f"Print job for '{packet.destination}' cancelled, {node.kind.name} is not a printer")
        report.write(">>> Destinition is not a printer, print job cancelled.\n\n")
        report.flush()
        return False

    document = parse_document(packet.payload)
    logging.debug(f"Parsed {packet}: author={document.author!r}, title={document.title!r}")
    accounting(report, document.author, document.title)
    return True
