"""Tests for the exception hierarchy."""

import pytest

from gitscribe.exceptions import (
    ConfigError,
    GitscribeError,
    ParseError,
    UnknownCommandError,
)


class TestParseError:
    def test_message_names_transform(self):
        err = ParseError("commit", "no [branch hash] token")
        assert str(err) == "commit: no [branch hash] token"
        assert err.transform == "commit"
        assert err.reason == "no [branch hash] token"

    @pytest.mark.parametrize("exc_type", [ParseError, UnknownCommandError, ConfigError])
    def test_all_derive_from_base(self, exc_type):
        assert issubclass(exc_type, GitscribeError)
