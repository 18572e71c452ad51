"""Pure transforms from captured git output to structured results.

Every function here takes the complete text of one git invocation and
returns a fresh value. None of them touch the filesystem or spawn processes.
"""

import json
import re
from collections.abc import Callable
from typing import Any

from gitscribe.exceptions import ParseError
from gitscribe.git.models import (
    BranchTree,
    CommitRejected,
    CommitResult,
    CommitSuccess,
    GitStatus,
    LogEntry,
    RemoteMap,
    StatusEntry,
)
from gitscribe.git.repair import repair_quotes

LOG_DELIMITER = "||"
LOG_FORMAT = LOG_DELIMITER.join(["%H", "%h", "%an", "%ar", "%s"])
_LOG_FIELDS = ("hash", "short_hash", "author", "date", "message")

_BRACKET_RE = re.compile(r"\[([^\]]+)\]")
_LINE_SPLIT_RE = re.compile(r"\r?\n")
_COMMIT_REJECTED_MARKERS = ("nothing to commit", "no changes added to commit")


def parse_log(output: str) -> list[LogEntry]:
    """Decode ``{"key": "value", ...},`` records emitted by a JSON-like pretty format."""
    body = output.rstrip()
    if not body:
        raise ParseError("log", "no log records in output")

    # The last character is the delimiter that follows every record.
    text = repair_quotes("[" + body[:-1] + "]")
    try:
        entries = json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseError("log", f"invalid JSON after quote repair: {e.msg}") from e

    if not isinstance(entries, list) or not entries:
        raise ParseError("log", "no log records in output")
    for entry in entries:
        if not isinstance(entry, dict):
            raise ParseError("log", f"expected an object per record, got {entry!r}")
    return entries


def parse_log_delimited(output: str) -> list[LogEntry]:
    """Parse ``git log --format=LOG_FORMAT`` output, one commit per line."""
    entries: list[LogEntry] = []
    for line in output.splitlines():
        if not line:
            continue
        parts = line.split(LOG_DELIMITER, len(_LOG_FIELDS) - 1)
        if len(parts) != len(_LOG_FIELDS):
            raise ParseError(
                "log_delimited",
                f"expected {len(_LOG_FIELDS)} fields, got {len(parts)}: {line!r}",
            )
        entries.append(dict(zip(_LOG_FIELDS, parts, strict=True)))
    return entries


def parse_status(output: str) -> GitStatus:
    """Split ``git status --porcelain`` output into staged, unstaged and untracked.

    The two-column code is kept verbatim. Only its leading characters decide
    the bucket: ``??`` is untracked, ``A`` in the index column is staged and
    everything else is unstaged.
    """
    staged: list[StatusEntry] = []
    unstaged: list[StatusEntry] = []
    untracked: list[StatusEntry] = []

    for line in _LINE_SPLIT_RE.split(output):
        code = line[:2]
        if not code:
            continue
        entry = StatusEntry(file=line[3:], status=code)
        if code.startswith("??"):
            untracked.append(entry)
        elif code.startswith("A"):
            staged.append(entry)
        else:
            unstaged.append(entry)

    return GitStatus(staged=staged, unstaged=unstaged, untracked=untracked)


def parse_commit(output: str) -> CommitResult:
    """Parse ``git commit`` output into a success record or a rejection."""
    lines = output.split("\n")
    if any(marker in output for marker in _COMMIT_REJECTED_MARKERS):
        error = next((line for line in lines if "#" not in line), None)
        return CommitRejected(error=error)

    match = _BRACKET_RE.search(lines[0])
    # "[main abc1234]": branch first, hash second.
    tokens = match.group(1).split() if match else []
    if not tokens:
        raise ParseError("commit", f"no [branch hash] token in {lines[0]!r}")
    if len(lines) < 2:
        raise ParseError("commit", "missing summary line after the commit header")

    summary = lines[1].split()

    return CommitSuccess(
        branch=tokens[0],
        commit=tokens[1] if len(tokens) > 1 else None,
        changed=summary[0] if summary else "",
        operations=[line for line in lines[2:] if line],
    )


def parse_branch(output: str) -> BranchTree:
    """Parse ``git branch`` output; the ``*`` line is the current branch."""
    current: str | None = None
    others: list[str] = []
    for line in output.split("\n"):
        if "*" in line:
            current = line.replace("*", "", 1).strip()
            continue
        name = line.strip()
        if name:
            others.append(name)
    return BranchTree(current=current, others=others)


def parse_tag(output: str) -> list[str]:
    return [tag for tag in _LINE_SPLIT_RE.split(output) if tag]


def parse_remotes(output: str) -> RemoteMap:
    """Parse ``git remote -v`` output into a name to URL mapping.

    Each remote appears twice (fetch and push); later lines overwrite earlier
    ones.
    """
    remotes: RemoteMap = {}
    for line in output.split("\n"):
        fields = line.split("\t")
        name = fields[0]
        if not name:
            continue
        url = fields[1].split() if len(fields) > 1 else []
        if not url:
            raise ParseError("remotes", f"no URL for remote {name!r}")
        remotes[name] = url[0]
    return remotes


def parse_sync_error(output: str) -> list[str]:
    """Split push/pull error output into its non-empty lines."""
    return [line for line in output.split("\r\n") if line]


def parse_sync_success(output: str) -> str:
    return output


PARSERS: dict[str, Callable[[str], Any]] = {
    "log": parse_log,
    "log_delimited": parse_log_delimited,
    "status": parse_status,
    "commit": parse_commit,
    "branch": parse_branch,
    "tag": parse_tag,
    "remotes": parse_remotes,
    "sync_error": parse_sync_error,
    "sync_success": parse_sync_success,
}

ALIASES: dict[str, str] = {
    "remote": "remotes",
    "syncErr": "sync_error",
    "syncSuccess": "sync_success",
}
