import pytest

from gitteam.core import InvalidCoauthorError, sanity_check_coauthor, sanity_check_coauthors

VALID = ["Mr. Noujz <noujz@example.com>", "Foo <foo@example.com>"]
INVALID = ["INVALID", "Foo Bar", "A B <ab@example.com", "= <>", "foo", "<foo@example.com>"]
BOTH = ["Mrs. Noujz <mrs@example.com>", "foo", "bar", "INVALID"]


@pytest.mark.parametrize("candidate", VALID)
def test_valid_coauthors_pass(candidate):
    assert sanity_check_coauthors([candidate]) == []


@pytest.mark.parametrize("candidate", INVALID)
def test_invalid_coauthors_are_rejected(candidate):
    with pytest.raises(InvalidCoauthorError, match="not a valid coauthor"):
        sanity_check_coauthor(candidate)


def test_should_report_all_errors():
    errors = sanity_check_coauthors(BOTH)
    assert [error.candidate for error in errors] == ["foo", "bar", "INVALID"]


def test_error_message():
    errors = sanity_check_coauthors(["INVALID COAUTHOR"])
    assert [str(error) for error in errors] == ["not a valid coauthor: INVALID COAUTHOR"]