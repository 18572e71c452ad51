"""Data models for parsed git command output."""

from typing import Any

from pydantic import BaseModel, ConfigDict

LogEntry = dict[str, Any]
RemoteMap = dict[str, str]


class StatusEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: str
    status: str


class GitStatus(BaseModel):
    """Parsed output of git status --porcelain."""

    model_config = ConfigDict(frozen=True)

    staged: list[StatusEntry] = []
    unstaged: list[StatusEntry] = []
    untracked: list[StatusEntry] = []

    @property
    def is_clean(self) -> bool:
        return not (self.staged or self.unstaged or self.untracked)


class CommitSuccess(BaseModel):
    """A commit that was recorded."""

    model_config = ConfigDict(frozen=True)

    branch: str
    commit: str | None = None
    changed: str = ""
    operations: list[str] = []


class CommitRejected(BaseModel):
    """A commit git refused because there was nothing to commit."""

    model_config = ConfigDict(frozen=True)

    error: str | None = None


CommitResult = CommitSuccess | CommitRejected


class BranchTree(BaseModel):
    model_config = ConfigDict(frozen=True)

    current: str | None = None
    others: list[str] = []


class CommandOutput(BaseModel):
    """Completed capture of one git invocation, as handed over by the caller."""

    model_config = ConfigDict(frozen=True)

    command: str
    stdout: str = ""
    stderr: str = ""
    exit_code: int = 0

    @property
    def success(self) -> bool:
        return self.exit_code == 0
