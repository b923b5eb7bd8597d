"""Headers describing a git entity for display."""

from __future__ import annotations

from typing import Union

from .commit import Commit
from .diff import CommitsRangeDiff, WorkingTreeDiff

GitEntity = Union[Commit, WorkingTreeDiff, CommitsRangeDiff]


def format_static_details(entity: GitEntity, provider: object) -> str:
    """Return the header text shown before an explanation of ``entity``."""
    if isinstance(entity, Commit):
        return (
            "# Entity: Commit\n"
            f"# Provider: {provider}\n"
            f"`commit {entity.full_hash}` | {entity.author_name} "
            f"<{entity.author_email}> | {entity.date}\n"
            "\n"
            f"{entity.message}\n"
            "-----"
        )
    if isinstance(entity, WorkingTreeDiff):
        staged = " (staged)" if entity.staged else ""
        return f"# Entity: Working Tree Diff{staged}\n# Provider: {provider}"
    if isinstance(entity, CommitsRangeDiff):
        return (
            "# Entity: Range\n"
            f"`{entity.from_ref}` -> `{entity.to_ref}`\n"
            f"# Provider: {provider}\n"
        )
    raise TypeError(f"not a git entity: {type(entity).__name__}")