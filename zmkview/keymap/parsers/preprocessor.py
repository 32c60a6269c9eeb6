"""Comment stripping and whitespace normalization for keymap text."""

import re


# Strings are matched first so comment markers inside quotes survive
STRING_OR_COMMENT_RE = re.compile(
    r'(?P<string>"(?:\\.|[^"\\])*"?)|/\*.*?(?:\*/|\Z)|//[^\n]*', re.DOTALL
)
WHITESPACE_RE = re.compile(r"\s+")


def _keep_strings(match: re.Match[str]) -> str:
    return match["string"] or ""


def preprocess(content: str) -> str:
    """Remove comments and collapse whitespace runs to single spaces.

    Args:
        content: Raw keymap file content

    Returns:
        Single-line content with comments removed and ends trimmed
    """
    content = STRING_OR_COMMENT_RE.sub(_keep_strings, content)
    return WHITESPACE_RE.sub(" ", content).strip()
