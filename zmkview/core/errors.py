"""Exception hierarchy for zmkview."""


class ZmkViewError(Exception):
    """Base exception for all zmkview errors."""


class ConfigError(ZmkViewError):
    """Raised when user configuration cannot be loaded or is invalid."""


class KeymapError(ZmkViewError):
    """Raised for keymap loading and processing failures."""


class ParseError(KeymapError):
    """Structural error found while parsing keymap text.

    Args:
        message: Human readable description
        line: 1-based line of the offending token, if known
        column: 1-based column of the offending token, if known
    """

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"{self.message} (line {self.line})"
        return f"{self.message} (line {self.line}, column {self.column})"


class KeymapParseError(KeymapError):
    """Raised by the public parse entry points when parsing aborts."""
