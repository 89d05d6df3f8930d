#!/usr/bin/env python3
"""
Unit Test: Network Protocol

Tests broadcast and print requests on the default ring and the exact report
they produce.
"""

import sys
import os
import io

# Add parent directory to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from lan import (Network, RingTopology, Node, InconsistentNetworkError,
                 UnknownWorkstationError, PreconditionViolation)


EXPECTED_REPORT = (
    "'Filip' requests printing of 'Hello World' on 'Andy' ...\n"
    "\tNode 'Filip' passes packet on.\n"
    "\tNode 'n1' passes packet on.\n"
    "\tNode 'Hans' passes packet on.\n"
    "\tAccounting -- author = 'Unknown' -- title = 'ASCII DOCUMENT'\n"
    ">>> ASCII Print job delivered.\n\n"
    "'Filip' requests printing of 'Hello World' on 'UnknownPrinter' ...\n"
    "\tNode 'Filip' passes packet on.\n"
    "\tNode 'n1' passes packet on.\n"
    "\tNode 'Hans' passes packet on.\n"
    "\tNode 'Andy' passes packet on.\n"
    ">>> Destinition not found, print job cancelled.\n\n"
    "'Filip' requests printing of 'Hello World' on 'Hans' ...\n"
    "\tNode 'Filip' passes packet on.\n"
    "\tNode 'n1' passes packet on.\n"
    ">>> Destinition is not a printer, print job cancelled.\n\n"
    "'Filip' requests printing of 'Hello World' on 'n1' ...\n"
    "\tNode 'Filip' passes packet on.\n"
    ">>> Destinition is not a printer, print job cancelled.\n\n"
    "'Filip' requests printing of '!PS Hello World in postscript' on 'Andy' ...\n"
    "\tNode 'Filip' passes packet on.\n"
    "\tNode 'n1' passes packet on.\n"
    "\tNode 'Hans' passes packet on.\n"
    "\tAccounting -- author = 'Unknown' -- title = 'Untitled'\n"
    ">>> Postscript job delivered.\n\n"
    "'Filip' requests printing of '!PS Hello World in postscript' on 'Hans' ...\n"
    "\tNode 'Filip' passes packet on.\n"
    "\tNode 'n1' passes packet on.\n"
    ">>> Destinition is not a printer, print job cancelled.\n\n"
    "Broadcast Request\n"
    "\tNode 'Filip' passes packet on.\n"
    "\tNode 'n1' passes packet on.\n"
    "\tNode 'Hans' passes packet on.\n"
    "\tNode 'Andy' passes packet on.\n"
    ">>> Broadcast travelled whole token ring.\n\n"
)


def _accounting_lines(report):
    return [line for line in report.getvalue().splitlines() if line.startswith("\tAccounting")]


def test_workstation_prints_document():
    """Test print results on the default ring"""
    print("Testing workstation prints document...")

    network = Network.default_example()
    report = io.StringIO()

    assert network.is_consistent()
    assert network.request_print("Filip", "Hello World", "Andy", report), "PrintSuccess"
    assert not network.request_print("Filip", "Hello World", "UnknownPrinter", report), "PrintFailure (UnknownPrinter)"
    assert not network.request_print("Filip", "Hello World", "Hans", report), "PrintFailure (print on Workstation)"
    assert not network.request_print("Filip", "Hello World", "n1", report), "PrintFailure (print on Node)"
    assert network.request_print("Filip", "!PS Hello World in postscript", "Andy", report), "PrintSuccess Postscript"
    assert not network.request_print("Filip", "!PS Hello World in postscript", "Hans", report), "PrintFailure Postscript"
    print("  ✓ All results as expected")

    return True


def test_report_output():
    """Test the exact report of the default scenario"""
    print("\nTesting report output...")

    network = Network.default_example()
    report = io.StringIO()

    network.request_print("Filip", "Hello World", "Andy", report)
    network.request_print("Filip", "Hello World", "UnknownPrinter", report)
    network.request_print("Filip", "Hello World", "Hans", report)
    network.request_print("Filip", "Hello World", "n1", report)
    network.request_print("Filip", "!PS Hello World in postscript", "Andy", report)
    network.request_print("Filip", "!PS Hello World in postscript", "Hans", report)
    network.request_broadcast(report)

    assert report.getvalue() == EXPECTED_REPORT, f"Report mismatch:\n{report.getvalue()}"
    print(f"  ✓ {len(EXPECTED_REPORT.splitlines())} report lines match")

    return True


def test_broadcast_visits_every_node_once():
    """Test broadcast line count is node count + 2"""
    print("\nTesting broadcast...")

    for size in range(2, 10):
        ordering = [Node.workstation("ws"), Node.printer("pr")]
        ordering += [Node.relay(f"n{i}") for i in range(size - 2)]
        network = Network(RingTopology.build(ordering, entry=size - 1))
        report = io.StringIO()

        assert network.request_broadcast(report)
        lines = [line for line in report.getvalue().splitlines() if line]
        assert len(lines) == size + 2, f"{len(lines)} lines for {size} nodes"
        visited = [line.split("'")[1] for line in lines[1:-1]]
        assert visited == [node.name for node in network.ring.traverse()]
        assert visited[0] == network.ring.entry_node.name
        assert len(set(visited)) == size, "Every node should be visited exactly once"

    print("  ✓ Sizes 2..9")

    return True


def test_print_from_every_workstation_to_every_printer():
    """Test each connected (workstation, printer) pair prints once"""
    print("\nTesting all workstation/printer pairs...")

    ring = RingTopology.build([
        Node.workstation("Filip"), Node.printer("Andy"), Node.relay("n1"),
        Node.workstation("Hans"), Node.printer("Laser"), Node.workstation("Serge"),
    ])
    network = Network(ring)

    for workstation in ["Filip", "Hans", "Serge"]:
        for printer in ["Andy", "Laser"]:
            report = io.StringIO()
            assert network.request_print(workstation, "Hello World", printer, report), \
                f"{workstation} -> {printer} should print"
            assert len(_accounting_lines(report)) == 1
            assert "cancelled" not in report.getvalue()
    print("  ✓ 6 pairs printed")

    return True


def test_print_on_missing_or_wrong_destination():
    """Test missing printers and non-printers never reach accounting"""
    print("\nTesting missing and wrong destinations...")

    network = Network.default_example()
    for printer in ["UnknownPrinter", "Hans", "n1", "andy", "Filip"]:
        report = io.StringIO()
        assert not network.request_print("Filip", "Hello World", printer, report), f"{printer} should fail"
        assert _accounting_lines(report) == []
        assert report.getvalue().rstrip("\n").splitlines()[-1].endswith("print job cancelled.")
        print(f"  ✓ {printer}: cancelled")

    return True


def test_print_to_origin_checks_destination_first():
    """Test a workstation printing on itself: destination match wins over origin match"""
    print("\nTesting print on the requesting workstation...")

    network = Network.default_example()
    report = io.StringIO()
    assert not network.request_print("Hans", "Hello World", "Hans", report)
    assert report.getvalue().endswith(">>> Destinition is not a printer, print job cancelled.\n\n")
    assert report.getvalue().count("passes packet on") == 4
    print("  ✓ Delivered to itself after one revolution, then cancelled")

    return True


def test_ascii_title_quirk():
    """Test a postscript job titled 'ASCII DOCUMENT' gets the ASCII notice"""
    print("\nTesting ASCII DOCUMENT title on a postscript job...")

    network = Network.default_example()
    report = io.StringIO()
    assert network.request_print("Filip", "!PS author:Filip.title:ASCII DOCUMENT.", "Andy", report)
    assert "\tAccounting -- author = 'Filip' -- title = 'ASCII DOCUMENT'\n" in report.getvalue()
    assert report.getvalue().endswith(">>> ASCII Print job delivered.\n\n")
    print("  ✓ Notice selected by title")

    report = io.StringIO()
    network.accounting_document(report, "X", "Y")
    assert report.getvalue() == "\tAccounting -- author = 'X' -- title = 'Y'\n>>> Postscript job delivered.\n\n"

    return True


def test_unknown_workstation_is_fatal():
    """Test print request from an unregistered workstation raises"""
    print("\nTesting unknown workstation...")

    network = Network.default_example()
    for name in ["UnknownWorkstation", "Andy", "n1"]:
        report = io.StringIO()
        try:
            network.request_print(name, "does not matter", "does not matter", report)
            assert False, f"Request from {name} should raise"
        except UnknownWorkstationError as e:
            assert isinstance(e, PreconditionViolation)
            assert e.workstation == name
            print(f"  ✓ {e}")
        assert report.getvalue() == "", "Nothing is reported for a failed precondition"

    return True


def test_inconsistent_network_is_fatal():
    """Test requests on an inconsistent ring raise"""
    print("\nTesting inconsistent network...")

    nodes = [Node.workstation("Filip"), Node.workstation("Hans"), Node.printer("Andy")]
    network = Network(RingTopology(nodes, [1, 2, 0], 0, {"Filip": 0}))
    assert not network.is_consistent()

    for request in [lambda report: network.request_broadcast(report),
                    lambda report: network.request_print("Filip", "Hello World", "Andy", report)]:
        report = io.StringIO()
        try:
            request(report)
            assert False, "Request on an inconsistent ring should raise"
        except InconsistentNetworkError as e:
            print(f"  ✓ {e}")
        assert report.getvalue() == ""

    return True


class FailingReport(io.StringIO):
    def write(self, text):
        raise OSError("disk full")


def test_report_failure_is_fatal_for_the_request_only():
    """Test a failing report aborts the request, the network keeps working"""
    print("\nTesting failing report sink...")

    network = Network.default_example()
    for request in [lambda report: network.request_broadcast(report),
                    lambda report: network.request_print("Filip", "Hello World", "Andy", report)]:
        try:
            request(FailingReport())
            assert False, "Write failure should propagate"
        except OSError:
            pass

    report = io.StringIO()
    assert network.request_print("Filip", "Hello World", "Andy", report)
    assert network.request_broadcast(report)
    print("  ✓ Later requests succeed")

    return True


def test_network_to_string():
    """Test str(network) renders the ring"""
    print("\nTesting network string...")

    network = Network.default_example()
    assert str(network) == ("Workstation Filip [Workstation] -> Node n1 [Node] -> "
                            "Workstation Hans [Workstation] -> Printer Andy [Printer] ->  ... ")
    print(f"  ✓ {network}")

    return True


def main():
    """Run all network protocol tests"""
    print("=" * 60)
    print("NETWORK PROTOCOL TESTS")
    print("=" * 60)

    tests = [
        test_workstation_prints_document,
        test_report_output,
        test_broadcast_visits_every_node_once,
        test_print_from_every_workstation_to_every_printer,
        test_print_on_missing_or_wrong_destination,
        test_print_to_origin_checks_destination_first,
        test_ascii_title_quirk,
        test_unknown_workstation_is_fatal,
        test_inconsistent_network_is_fatal,
        test_report_failure_is_fatal_for_the_request_only,
        test_network_to_string,
    ]

    passed = 0
    failed = 0

    for test in tests:
        try:
            if test():
                passed += 1
        except AssertionError as e:
            print(f"  ✗ FAILED: {e}")
            failed += 1
        except Exception as e:
            print(f"  ✗ ERROR: {e}")
            failed += 1

    print("\n" + "=" * 60)
    print(f"Results: {passed} passed, {failed} failed")
    print("=" * 60)

    return failed == 0


if __name__ == "__main__":
    success = main()
    sys.exit(0 if success else 1)
