import pytest

from lumen.commit import Commit
from lumen.diff import CommitsRangeDiff, WorkingTreeDiff
from lumen.entity import format_static_details


class _Provider:
    def __str__(self):
        return "OpenAI (gpt-4o)"


def _commit(message="init"):
    return Commit(
        full_hash="abc123",
        message=message,
        diff="diff --git a/x b/x\n",
        author_name="Test User",
        author_email="test@example.com",
        date="2024-01-02 03:04:05",
    )


def test_commit_details():
    text = format_static_details(_commit(), _Provider())
    assert text == (
        "# Entity: Commit\n"
        "# Provider: OpenAI (gpt-4o)\n"
        "`commit abc123` | Test User <test@example.com> | 2024-01-02 03:04:05\n"
        "\n"
        "init\n"
        "-----"
    )


def test_commit_multiline_message_is_kept():
    text = format_static_details(_commit("subject\n\nbody line"), "p")
    assert text.endswith("\nsubject\n\nbody line\n-----")


def test_staged_working_tree_details():
    text = format_static_details(WorkingTreeDiff(staged=True, diff="x"), _Provider())
    assert text == "# Entity: Working Tree Diff (staged)\n# Provider: OpenAI (gpt-4o)"


def test_unstaged_working_tree_details():
    text = format_static_details(WorkingTreeDiff(staged=False, diff="x"), "p")
    assert "(staged)" not in text
    assert text.splitlines()[1] == "# Provider: p"


def test_range_details():
    entity = CommitsRangeDiff(from_ref="main", to_ref="feature", diff="x")
    text = format_static_details(entity, _Provider())
    assert text == (
        "# Entity: Range\n"
        "`main` -> `feature`\n"
        "# Provider: OpenAI (gpt-4o)\n"
    )


def test_unknown_entity_raises():
    with pytest.raises(TypeError):
        format_static_details("HEAD", "p")