"""Select and apply the transform for a captured git invocation."""

from typing import Any

import structlog

from gitscribe.exceptions import ParseError, UnknownCommandError
from gitscribe.git.models import CommandOutput
from gitscribe.git.parsers import ALIASES, PARSERS

logger = structlog.get_logger()

_SYNC_COMMANDS = frozenset({"push", "pull", "fetch"})


def resolve(name: str) -> str:
    """Return the canonical transform name for *name* or its alias."""
    canonical = ALIASES.get(name, name)
    if canonical not in PARSERS:
        known = ", ".join(sorted(PARSERS))
        raise UnknownCommandError(f"Unknown transform {name!r} (known: {known})")
    return canonical


def parse(name: str, text: str) -> Any:
    """Run the transform registered as *name* over *text*."""
    transform = resolve(name)
    logger.debug("parse_started", transform=transform, length=len(text))
    try:
        return PARSERS[transform](text)
    except ParseError as e:
        logger.warning("parse_failed", transform=transform, reason=e.reason)
        raise


def parse_output(output: CommandOutput) -> Any:
    """Parse a completed capture, choosing the stream and transform from it.

    push/pull/fetch go through the sync transforms. ``commit`` is parsed even
    when git exits non-zero, since "nothing to commit" exits 1. Any other
    failed command raises ``ParseError`` with git's stderr.
    """
    command = output.command
    if command in _SYNC_COMMANDS:
        if output.success:
            return parse("sync_success", output.stdout)
        stream = output.stderr if output.stderr.strip() else output.stdout
        return parse("sync_error", stream)

    if command == "commit":
        return parse("commit", output.stdout)

    if not output.success:
        logger.warning("command_failed", command=command, exit_code=output.exit_code)
        reason = output.stderr.strip() or f"git exited with {output.exit_code}"
        raise ParseError(command, reason)
    return parse(command, output.stdout)
