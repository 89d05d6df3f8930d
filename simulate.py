#!/usr/bin/env python3
"""
LAN Simulation

Builds the default token ring (Filip -> n1 -> Hans -> Andy -> ...), dumps it
as text, HTML and XML, then runs a fixed list of print and broadcast
scenarios and prints the accumulated report.

Usage:
    python simulate.py [iterations] [--report FILE]

    LOCAL=TRUE keeps log files under ./log, DEBUG=TRUE logs every hop.
"""

import io
import logging
import logging.handlers
import os
import sys
from dotenv import load_dotenv

load_dotenv()

from lan import Network, PreconditionViolation, to_html, to_xml
from utils.config import (
    DEBUG, LOG_FILENAME, LOG_PATH, MAX_LOG_SIZE, BACKUP_COUNT,
    LAN_ITERATIONS, LAN_REPORT_FILE
)

SEPARATOR = "-" * 33

# (document, printer, expected result)
SCENARIOS = [
    ("author: FILIP   Hello World", "Andy", True),
    ("author: FILIP   Hello World", "UnknownPrinter", False),
    ("author: FILIP   Hello World", "Hans", False),
    ("author: FILIP   Hello World", "n1", False),
    ("Hello World", "Andy", True),
    ("!PS Hello World in postscript.author:Filip.title:Hello.", "Andy", True),
    ("!PS Hello World in postscript.author:Filip.title:Hello.", "Hans", False),
    ("!PS Hello World in postscript.Author:Filip.Title:Hello.", "Andy", True),
    ("!PS Hello World in postscript.author:Filip;title:Hello;", "Andy", True),
    ("!PS Hello World in postscript.author:.title:.", "Andy", True),
]


def setup_logging():
    try:
        os.makedirs(LOG_PATH, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            f'{LOG_PATH}/{LOG_FILENAME}',
            maxBytes=MAX_LOG_SIZE,
            backupCount=BACKUP_COUNT
        )
        log_formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
        handler.setFormatter(log_formatter)
        logging.getLogger().addHandler(handler)
        logging.getLogger().setLevel(logging.DEBUG if DEBUG else logging.INFO)
    except Exception as e:
        print(f'Error creating log object: {e}')


def print_request(network, workstation, document, printer, report, expected, out):
    print(f"'{workstation}' prints '{document}' on '{printer}': ", end="", file=out)
    print(network.request_print(workstation, document, printer, report), end="", file=out)
    print(" (expects true);" if expected else " (expects false);", file=out)


def simulate(out=None) -> str:
    """Run every scenario once on a fresh default network, return the report"""
    if out is None:
        out = sys.stdout
    network = Network.default_example()
    report = io.StringIO()
    workstation = "Filip"

    print(f"simulate on Network: {network}", file=out)
    print(file=out)
    print(f"{SEPARATOR}HTML{SEPARATOR}", file=out)
    print(to_html(network.ring), file=out)
    print(file=out)
    print(f"{SEPARATOR}XML{SEPARATOR}", file=out)
    print(to_xml(network.ring), file=out)
    print(file=out)

    print(f"{SEPARATOR}SCENARIOS{SEPARATOR}", file=out)
    for document, printer, expected in SCENARIOS:
        print_request(network, workstation, document, printer, report, expected, out)

    print("'UnknownWorkstation' prints 'does not matter' on 'does not matter': ", end="", file=out)
    try:
        result = network.request_print("UnknownWorkstation", "does not matter", "does not matter", report)
        print(f"{result} (??? no exception);", file=out)
    except PreconditionViolation:
        print("exception (as expected);", file=out)

    print(f"BROADCAST REQUEST: {network.request_broadcast(report)} (expects true);", file=out)

    print("\n\n", file=out)
    print(f"{SEPARATOR}REPORT{SEPARATOR}", file=out)
    print(report.getvalue(), file=out)
    return report.getvalue()


def main(argv=None):
    """Main simulation loop"""
    import argparse

    parser = argparse.ArgumentParser(description='Token ring LAN simulation')
    parser.add_argument('iterations', nargs='?', type=int, default=LAN_ITERATIONS,
                        help=f'Number of simulation runs (default: {LAN_ITERATIONS})')
    parser.add_argument('--report', '-r', default=LAN_REPORT_FILE,
                        help='Also write the report of the last run to this file')
    args = parser.parse_args(argv)

    setup_logging()
    logging.info(f"Starting LAN simulation, {args.iterations} iteration(s)")

    report = ""
    for i in range(args.iterations):
        logging.info(f"=== Simulation run {i + 1}/{args.iterations} ===")
        report = simulate()

    if args.report:
        with open(args.report, 'w', encoding='utf-8') as f:
            f.write(report)
        logging.info(f"Report written to {args.report}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
