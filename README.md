# lumen

Load git commits and diffs from the repository in the current directory and
turn them into short text headers. The library runs the `git` executable, so
`git` must be on your `PATH`.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commits

```python
from lumen.commit import Commit, InvalidCommitError, is_valid_commit

is_valid_commit("HEAD")           # returns "HEAD", or raises InvalidCommitError
commit = Commit.from_ref("HEAD")
print(commit.full_hash, commit.author_name, commit.author_email, commit.date)
print(commit.message)
print(commit.diff)
```

`is_valid_commit` strips surrounding whitespace from the reference and returns
it when git reports it as a commit object. `Commit.from_ref` does the same, so
a SHA read from standard input with a trailing newline works as-is. The date
is the committer date in the form `YYYY-MM-DD HH:MM:SS`. If the commit has no
diff, `Commit.from_ref` raises `EmptyCommitDiffError`.

`Commit` is a frozen dataclass with the fields `full_hash`, `message`, `diff`,
`author_name`, `author_email` and `date`.

## Diffs

```python
from lumen.diff import diff_from_working_tree, diff_from_commits_range

unstaged = diff_from_working_tree()
staged = diff_from_working_tree(staged=True)
ranged = diff_from_commits_range("main", "feature", triple_dot=True)
```

`diff_from_working_tree` returns a `WorkingTreeDiff` (`staged`, `diff`).
`diff_from_commits_range` checks both refs with `is_valid_commit`, diffs
`from..to` (or `from...to` with `triple_dot=True`) and returns a
`CommitsRangeDiff` (`from_ref`, `to_ref`, `diff`).

Both raise `EmptyDiffError` when git produces no output; its `staged`
attribute tells which kind of diff was empty. Lock files
(`package-lock.json`, `yarn.lock`, `pnpm-lock.yaml`, `Cargo.lock`) and
`node_modules` are left out of every diff, including commit diffs.

## Headers

```python
from lumen.entity import format_static_details

print(format_static_details(commit, "OpenAI (gpt-4o)"))
```

`format_static_details` accepts a `Commit`, a `WorkingTreeDiff` or a
`CommitsRangeDiff` and returns a header naming the kind of entity and the
provider; the provider can be any object and is inserted with `str()`. For a
commit the header also gives the hash, the author, the date and the message,
followed by a `-----` line. For a range it gives both refs. Any other object
raises `TypeError`.

## Errors

`InvalidCommitError` and `EmptyCommitDiffError` derive from `CommitError`,
which carries the offending ref as `sha`. `CommitError` and `EmptyDiffError`
derive from `lumen.commit.GitEntityError`.

## What this package does not do

It has no command-line program and does not send anything to a language
model: it only reads commits and diffs through git and formats headers. The
provider passed to `format_static_details` is just a label supplied by the
caller.