"""
Tests for the parity reporting step
"""
import io

import pytest

from console_demo.parity import describe_parity, report_parity


@pytest.mark.parametrize(
    "number, expected",
    [
        (1, "1 is odd"),
        (2, "2 is even"),
        (3, "3 is odd"),
        (4, "4 is even"),
        (5, "5 is odd"),
    ],
)
def test_describe_parity(number, expected):
    """Test each fixed integer gets the right label"""
    assert describe_parity(number) == expected


def test_describe_parity_zero_and_negative():
    """Test floor modulo keeps negative odd numbers odd"""
    assert describe_parity(0) == "0 is even"
    assert describe_parity(-3) == "-3 is odd"
    assert describe_parity(-4) == "-4 is even"


def test_report_parity_lines_then_blank_line():
    """Test five lines in input order followed by exactly one blank line"""
    stream = io.StringIO()
    written = report_parity([1, 2, 3, 4, 5], stream)

    assert written == 5
    assert stream.getvalue() == (
        "1 is odd\n2 is even\n3 is odd\n4 is even\n5 is odd\n\n"
    )


def test_report_parity_empty_sequence():
    """Test an empty sequence still emits the blank line"""
    stream = io.StringIO()
    assert report_parity([], stream) == 0
    assert stream.getvalue() == "\n"
