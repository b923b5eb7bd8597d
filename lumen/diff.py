"""Diffs of the working tree or between two commits."""

from __future__ import annotations

from dataclasses import dataclass

from .commit import GIT_DIFF_EXCLUSIONS, GitEntityError, _run_git, is_valid_commit


class EmptyDiffError(GitEntityError):
    """The requested diff has no content."""

    def __init__(self, staged: bool = False) -> None:
        super().__init__(f"diff{' (staged)' if staged else ''} is empty")
        self.staged = staged


@dataclass(frozen=True)
class WorkingTreeDiff:
    """Uncommitted changes, staged or not."""

    staged: bool
    diff: str


@dataclass(frozen=True)
class CommitsRangeDiff:
    """Changes between two commits."""

    from_ref: str
    to_ref: str
    diff: str


def diff_from_working_tree(staged: bool = False) -> WorkingTreeDiff:
    """Return the diff of the working tree, or of the index when ``staged``."""
    args = ["diff", "--staged"] if staged else ["diff"]
    diff = _run_git(*args, *GIT_DIFF_EXCLUSIONS)
    if not diff:
        raise EmptyDiffError(staged)
    return WorkingTreeDiff(staged=staged, diff=diff)


def diff_from_commits_range(
    from_ref: str, to_ref: str, triple_dot: bool = False
) -> CommitsRangeDiff:
    """Return the diff for ``from..to`` or, with ``triple_dot``, ``from...to``."""
    is_valid_commit(from_ref)
    is_valid_commit(to_ref)

    separator = "..." if triple_dot else ".."
    diff = _run_git("diff", f"{from_ref}{separator}{to_ref}", *GIT_DIFF_EXCLUSIONS)
    if not diff:
        raise EmptyDiffError(False)
    return CommitsRangeDiff(from_ref=from_ref, to_ref=to_ref, diff=diff)