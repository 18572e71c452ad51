"""Shared exception types for gitscribe."""


class GitscribeError(Exception):
    """Base exception for all gitscribe errors."""


class ParseError(GitscribeError):
    """Captured output does not match the shape a transform expects."""

    def __init__(self, transform: str, reason: str) -> None:
        super().__init__(f"{transform}: {reason}")
        self.transform = transform
        self.reason = reason


class UnknownCommandError(GitscribeError):
    """No transform is registered under the requested name."""


class ConfigError(GitscribeError):
    """Configuration is invalid or missing."""
