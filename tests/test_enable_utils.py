import pytest

from gitteam.enable_utils import partition, prepare_for_commit_message


def test_prepare_for_commit_message_no_authors():
    assert prepare_for_commit_message([]) == ""


def test_prepare_for_commit_message_one_author():
    assert (
        prepare_for_commit_message(["Mr. Noujz <mr@example.com>"])
        == "\n\nCo-authored-by: Mr. Noujz <mr@example.com>"
    )


def test_prepare_for_commit_message_multiple_authors():
    coauthors = ["B <b@example.com>", "A <a@example.com>", "C <c@example.com>"]
    assert prepare_for_commit_message(coauthors) == (
        "\n\nCo-authored-by: A <a@example.com>"
        "\nCo-authored-by: B <b@example.com>"
        "\nCo-authored-by: C <c@example.com>"
    )


@pytest.mark.parametrize("coauthor", ["x", "Some One <one@example.com>", "ü ä"])
def test_every_line_is_a_trailer(coauthor):
    message = prepare_for_commit_message([coauthor])
    assert message.startswith("\n\n")
    assert message[2:] == f"Co-authored-by: {coauthor}"


def test_partition_no_input_data():
    assert partition([]) == ([], [])


def test_partition_all_coauthors():
    data = ["Mrs. Noujz <mrs@example.com>", "Mr. Noujz <mr@example.com>"]
    assert partition(data) == (data, [])


def test_partition_all_aliases():
    assert partition(["alias1", "alias2"]) == ([], ["alias1", "alias2"])


def test_partition():
    coauthors, aliases = partition(
        ["Mrs. Noujz <mrs@example.com>", "Mr. Noujz <mr@example.com>", "alias1", "alias2"]
    )
    assert coauthors == ["Mrs. Noujz <mrs@example.com>", "Mr. Noujz <mr@example.com>"]
    assert aliases == ["alias1", "alias2"]