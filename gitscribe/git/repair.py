"""Quote repair for the JSON-like git log format.

Commit messages are interpolated into a ``--pretty=format:`` template that
looks like JSON, so a subject such as ``He said "hi"`` produces a record git
cannot escape for us. ``repair_quotes`` escapes the double quotes that sit
inside an already-quoted value and leaves structural quotes alone.

This is a heuristic. A value that contains ``",`` or ``"}`` still ends the
match early and the result will not decode. Prefer the delimited log format
(``parsers.LOG_FORMAT``) when the caller controls the command line.
"""

import re

_KEY_VALUE_RE = re.compile(r'".*?": "(.*?)"[,}]')


def repair_quotes(text: str) -> str:
    """Escape double quotes embedded inside ``"key": "value"`` pairs."""
    matches = list(_KEY_VALUE_RE.finditer(text))
    # Walk backwards so splicing never shifts the offsets of pending matches.
    for match in reversed(matches):
        value = match.group(1)
        if '"' not in value:
            continue
        escaped = value.replace('"', '\\"')
        text = text[: match.start(1)] + escaped + text[match.end(1) :]
    return text
