"""Tests for the command-line checkout runner."""
import pytest

from run_checkout import main, parse_line


def test_parse_line():
    """Test parsing of TITLE[:QTY] arguments."""
    assert parse_line("Clean Code:3") == ("Clean Code", 3)
    assert parse_line("Clean Code") == ("Clean Code", 1)


def test_parse_line_title_with_colon():
    """Test titles containing a colon."""
    assert parse_line("Java: The Good Parts") == ("Java: The Good Parts", 1)
    assert parse_line("Java: The Good Parts:2") == ("Java: The Good Parts", 2)


def test_run_with_percentage_coupon(capsys):
    """Test a run with a percentage coupon."""
    rc = main(["--add", "Effective Java:2", "--add", "Clean Code:3", "--percent-coupon", "20"])

    assert rc == 0
    assert "amount: 208" in capsys.readouterr().out


def test_run_without_coupon(capsys):
    """Test a run without a coupon."""
    rc = main(["--add", "Effective Java:2", "--add", "Clean Code:3", "--add", "Head First Java:4"])

    assert rc == 0
    assert "amount: 380" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv, message",
    [
        ([], "You can't checkout an empty cart!!"),
        (["--add", "TDD in Action"], "Sorry, 'TDD in Action' not in stock!!"),
        (["--add", "Clean Code:11"], "There are not enough copies of 'Clean Code' in the inventory."),
        (["--add", "Effective Java", "--cash-coupon", "30"], "This coupon is not applicable for this checkout amount."),
    ],
)
def test_run_reports_bookstore_errors(capsys, argv, message):
    """Test bookstore errors are reported with exit status 1."""
    rc = main(argv)

    assert rc == 1
    assert f"error: {message}" in capsys.readouterr().out


@pytest.mark.parametrize(
    "argv",
    [
        ["--add", "Clean Code:0"],
        ["--add", "Clean Code", "--percent-coupon", "150"],
        ["--add", "Clean Code", "--cash-coupon", "5", "--valid-days", "-1"],
    ],
)
def test_run_reports_bad_arguments(capsys, argv):
    """Test invalid values are reported with exit status 1."""
    rc = main(argv)

    assert rc == 1
    assert "error: " in capsys.readouterr().out
