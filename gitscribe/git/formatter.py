"""Pure functions to format parsed git data as plain text."""

from typing import Any

from gitscribe.git.models import (
    BranchTree,
    CommitRejected,
    CommitResult,
    GitStatus,
    LogEntry,
    RemoteMap,
)


def format_status(status: GitStatus) -> str:
    """Format GitStatus for display."""
    if status.is_clean:
        return "Working tree clean"

    lines: list[str] = []
    for title, entries in (
        ("Staged:", status.staged),
        ("Unstaged:", status.unstaged),
        ("Untracked:", status.untracked),
    ):
        if not entries:
            continue
        if lines:
            lines.append("")
        lines.append(title)
        for entry in entries:
            lines.append(f"  {entry.status} {entry.file}")
    return "\n".join(lines)


def format_commit(result: CommitResult) -> str:
    if isinstance(result, CommitRejected):
        return f"Nothing committed: {result.error or 'no changes'}"

    header = f"[{result.branch}"
    if result.commit:
        header += f" {result.commit}"
    header += f"] {result.changed or '0'} file(s) changed"
    lines = [header]
    lines.extend(f"  {op.strip()}" for op in result.operations)
    return "\n".join(lines)


def format_branches(tree: BranchTree, max_display: int = 20) -> str:
    """Format a branch tree, current branch first."""
    if tree.current is None and not tree.others:
        return "No branches found."

    lines: list[str] = []
    if tree.current is not None:
        lines.append(f"* {tree.current}")
    shown = tree.others[:max_display]
    lines.extend(f"  {name}" for name in shown)

    if len(tree.others) > max_display:
        lines.append(f"... and {len(tree.others) - max_display} more")
    return "\n".join(lines)


def format_tags(tags: list[str]) -> str:
    if not tags:
        return "No tags found."
    return "\n".join(tags)


def format_remotes(remotes: RemoteMap) -> str:
    if not remotes:
        return "No remotes configured."
    width = max(len(name) for name in remotes)
    return "\n".join(f"{name.ljust(width)}  {url}" for name, url in remotes.items())


def format_log(entries: list[LogEntry], max_entries: int = 10) -> str:
    """Format log entries for display.

    Entries from the JSON-like format carry whatever keys the caller's
    template used, so only the common ones are looked up.
    """
    if not entries:
        return "No commits found."

    lines: list[str] = []
    for entry in entries[:max_entries]:
        ref = entry.get("short_hash") or entry.get("hash") or entry.get("commit", "")
        lines.append(f"{str(ref)[:7]} {entry.get('message', '')}".rstrip())
        author = entry.get("author")
        date = entry.get("date")
        if author or date:
            lines.append(f"    {', '.join(str(v) for v in (author, date) if v)}")
    if len(entries) > max_entries:
        lines.append(f"... and {len(entries) - max_entries} more")
    return "\n".join(lines)


def format_sync(result: str | list[str]) -> str:
    """Format push/pull output; a list means git reported an error."""
    if isinstance(result, list):
        return "\n".join(["Sync failed:", *(f"  {line}" for line in result)])
    return result.strip() or "Sync complete."


def format_result(transform: str, result: Any) -> str:
    """Format any transform result by the transform that produced it."""
    formatters = {
        "status": format_status,
        "commit": format_commit,
        "branch": format_branches,
        "tag": format_tags,
        "remotes": format_remotes,
        "log": format_log,
        "log_delimited": format_log,
        "sync_error": format_sync,
        "sync_success": format_sync,
    }
    return formatters[transform](result)
