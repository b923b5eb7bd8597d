"""Commit metadata resolved through the ``git`` command line."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass

GIT_DIFF_EXCLUSIONS: tuple[str, ...] = (
    "--",
    ".",
    ":(exclude)package-lock.json",
    ":(exclude)yarn.lock",
    ":(exclude)pnpm-lock.yaml",
    ":(exclude)Cargo.lock",
    ":(exclude)node_modules/**",
)


class GitEntityError(Exception):
    """Base class for errors raised while reading git entities."""


class CommitError(GitEntityError):
    """Raised when commit metadata or its diff cannot be resolved."""

    def __init__(self, sha: str, message: str) -> None:
        super().__init__(message)
        self.sha = sha


class InvalidCommitError(CommitError):
    """The given ref does not resolve to a commit object."""

    def __init__(self, sha: str) -> None:
        super().__init__(sha, f"Commit '{sha}' not found")


class EmptyCommitDiffError(CommitError):
    """The commit has no diff content."""

    def __init__(self, sha: str) -> None:
        super().__init__(sha, f"Diff for commit '{sha}' is empty")


def _run_git(*args: str) -> str:
    """Run git with ``args`` and return its standard output as UTF-8 text."""
    completed = subprocess.run(["git", *args], capture_output=True, check=False)
    return completed.stdout.decode("utf-8")


def is_valid_commit(sha: str) -> str:
    """Return the trimmed ref if it names a commit, else raise InvalidCommitError."""
    sha = sha.strip()
    if _run_git("cat-file", "-t", sha).strip() == "commit":
        return sha
    raise InvalidCommitError(sha)


@dataclass(frozen=True)
class Commit:
    """Parsed commit metadata together with its diff content."""

    full_hash: str
    message: str
    diff: str
    author_name: str
    author_email: str
    date: str

    @classmethod
    def from_ref(cls, sha: str) -> Commit:
        """Load a commit from a SHA or ref."""
        sha = is_valid_commit(sha)
        return cls(
            full_hash=_run_git("rev-parse", sha).rstrip(),
            message=_run_git("log", "--format=%B", "-n", "1", sha).rstrip("\n"),
            diff=_commit_diff(sha),
            author_name=_run_git("log", "--format=%an", "-n", "1", sha).rstrip(),
            author_email=_run_git("log", "--format=%ae", "-n", "1", sha).rstrip(),
            date=_run_git(
                "log",
                "--format=%cd",
                "--date=format:%Y-%m-%d %H:%M:%S",
                "-n",
                "1",
                sha,
            ).rstrip(),
        )


def _commit_diff(sha: str) -> str:
    diff = _run_git(
        "diff-tree",
        "-p",
        "--root",
        "--binary",
        "--no-color",
        "--compact-summary",
        sha,
        *GIT_DIFF_EXCLUSIONS,
    )
    if not diff:
        raise EmptyCommitDiffError(sha)
    return diff