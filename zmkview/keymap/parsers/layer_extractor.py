"""Recursive descent extraction of layer blocks from keymap source."""

import logging
import re

from zmkview.core.errors import ParseError
from zmkview.keymap.models import RawLayer

from .tokenizer import Token, TokenType, tokenize


logger = logging.getLogger(__name__)

BINDING_ARGUMENT_RE = re.compile(r"[A-Z0-9_]+")


def join_binding_tokens(tokens: list[Token]) -> list[str]:
    """Group array tokens into binding strings.

    A reference (``&kp``) starts a new binding and each following
    upper-case argument is appended to it. Any other token closes the
    current binding and is dropped.

    Args:
        tokens: Tokens found between ``<`` and ``>``

    Returns:
        Binding strings such as ``"&mt LSHIFT A"``
    """
    bindings: list[str] = []
    current: list[str] | None = None

    for token in tokens:
        if token.type == TokenType.REFERENCE:
            if current:
                bindings.append(" ".join(current))
            current = [f"&{token.value}"]
        elif (
            current is not None
            and token.type in (TokenType.IDENTIFIER, TokenType.NUMBER)
            and BINDING_ARGUMENT_RE.fullmatch(token.value)
        ):
            current.append(token.value)
        elif token.type != TokenType.COMMENT:
            if current:
                bindings.append(" ".join(current))
            current = None

    if current:
        bindings.append(" ".join(current))
    return bindings


def split_bindings(text: str) -> list[str]:
    """Split raw bindings text (the inside of ``< ... >``) into bindings."""
    return join_binding_tokens(tokenize(text)[:-1])


class KeymapBlockParser:
    """Parser over a token stream that walks the ``keymap { ... }`` node."""

    def __init__(self, tokens: list[Token]) -> None:
        """Initialize parser.

        Args:
            tokens: List of tokens from tokenizer, ending with EOF
        """
        self.tokens = [t for t in tokens if t.type != TokenType.COMMENT]
        self.pos = 0

    @property
    def current_token(self) -> Token:
        return self._peek(0)

    def parse(self) -> list[RawLayer]:
        """Parse the keymap block into raw layers.

        Returns:
            Layers in source order; empty when the block has none

        Raises:
            ParseError: If the block is missing or not properly closed
        """
        keymap_token = self._find_keymap_block()
        layers: list[RawLayer] = []

        while not self._match(TokenType.RBRACE):
            if self._is_at_end():
                raise ParseError(
                    "Unterminated keymap block",
                    keymap_token.line,
                    keymap_token.column,
                )

            header = self._node_header()
            if header is None:
                self._skip_statement()
                continue

            name, brace_pos = header
            node_token = self.current_token
            self.pos = brace_pos + 1
            bindings = self._parse_layer_body(name, node_token)
            if bindings is not None:
                layers.append(RawLayer(name=name, bindings=bindings))
            else:
                logger.debug("Skipping keymap child node without bindings: %s", name)

        self._advance()  # consume }
        return layers

    def _find_keymap_block(self) -> Token:
        """Move past the opening brace of the first ``keymap`` node."""
        while not self._is_at_end():
            header = self._node_header()
            if header is not None and header[0] == "keymap":
                token = self.current_token
                self.pos = header[1] + 1
                return token
            self._advance()
        raise ParseError("No keymap block found")

    def _parse_layer_body(self, name: str, node_token: Token) -> list[str] | None:
        """Parse a layer node body, returning its bindings if it has any."""
        bindings: list[str] | None = None

        while not self._match(TokenType.RBRACE):
            if self._is_at_end():
                raise ParseError(
                    f"Unterminated layer block '{name}'",
                    node_token.line,
                    node_token.column,
                )

            if (
                self._match(TokenType.IDENTIFIER)
                and self.current_token.value == "bindings"
                and self._peek(1).type == TokenType.EQUALS
                and self._peek(2).type == TokenType.ANGLE_OPEN
            ):
                self.pos += 3
                values = self._parse_bindings_array(name)
                if bindings is None:
                    bindings = values
                self._skip_statement()
            elif (header := self._node_header()) is not None:
                self.pos = header[1] + 1
                self._skip_block(header[0], node_token)
            else:
                self._skip_statement()

        self._advance()  # consume }
        if self._match(TokenType.SEMICOLON):
            self._advance()
        return bindings

    def _parse_bindings_array(self, layer_name: str) -> list[str]:
        """Collect the tokens up to the closing ``>`` of a bindings array."""
        start = self.current_token
        array_tokens: list[Token] = []

        while not self._match(TokenType.ANGLE_CLOSE):
            if self._is_at_end() or self.current_token.type in (
                TokenType.SEMICOLON,
                TokenType.RBRACE,
                TokenType.LBRACE,
            ):
                raise ParseError(
                    f"Unterminated bindings list in layer '{layer_name}'",
                    start.line,
                    start.column,
                )
            array_tokens.append(self.current_token)
            self._advance()

        self._advance()  # consume >
        return join_binding_tokens(array_tokens)

    def _node_header(self) -> tuple[str, int] | None:
        """Recognize ``[label:] name[@address] {`` at the current position.

        Returns:
            Tuple of (node name, index of the opening brace) or None
        """
        if not self._match(TokenType.IDENTIFIER):
            return None

        offset = 0
        name = self._peek(offset).value
        offset += 1

        if (
            self._peek(offset).type == TokenType.COLON
            and self._peek(offset + 1).type == TokenType.IDENTIFIER
        ):
            name = self._peek(offset + 1).value
            offset += 2

        if self._peek(offset).type == TokenType.AT and self._peek(offset + 1).type in (
            TokenType.IDENTIFIER,
            TokenType.NUMBER,
        ):
            offset += 2

        if self._peek(offset).type == TokenType.LBRACE:
            return name, self.pos + offset
        return None

    def _skip_block(self, name: str, owner: Token) -> None:
        """Skip a nested node body whose opening brace was consumed."""
        depth = 1
        while depth:
            if self._is_at_end():
                raise ParseError(
                    f"Unterminated block '{name}'", owner.line, owner.column
                )
            if self._match(TokenType.LBRACE):
                depth += 1
            elif self._match(TokenType.RBRACE):
                depth -= 1
            self._advance()
        if self._match(TokenType.SEMICOLON):
            self._advance()

    def _skip_statement(self) -> None:
        """Skip to the end of the current statement.

        Stops after a ``;`` at the current nesting level, or before a ``}``
        that closes the enclosing node.
        """
        depth = 0
        while not self._is_at_end():
            if self._match(TokenType.LBRACE):
                depth += 1
            elif self._match(TokenType.RBRACE):
                if depth == 0:
                    return
                depth -= 1
            elif self._match(TokenType.SEMICOLON) and depth == 0:
                self._advance()
                return
            self._advance()

    def _peek(self, offset: int) -> Token:
        index = self.pos + offset
        if index < len(self.tokens):
            return self.tokens[index]
        return self.tokens[-1]

    def _match(self, token_type: TokenType) -> bool:
        return self.current_token.type == token_type

    def _advance(self) -> Token:
        previous = self.current_token
        if not self._is_at_end():
            self.pos += 1
        return previous

    def _is_at_end(self) -> bool:
        return self.current_token.type == TokenType.EOF


class LayerExtractor:
    """Extracts named layers and their raw binding lists from keymap text."""

    def __init__(self) -> None:
        self.logger = logging.getLogger(__name__)

    def extract(self, content: str) -> list[RawLayer]:
        """Extract layers from the ``keymap`` block of the content.

        Args:
            content: Keymap source text

        Returns:
            Raw layers in source order

        Raises:
            ParseError: If no keymap block exists or a block is unterminated
        """
        layers = KeymapBlockParser(tokenize(content)).parse()
        self.logger.debug("Extracted %d layers from keymap block", len(layers))
        for layer in layers:
            self.logger.debug(
                "Layer %s: %d bindings", layer.name, len(layer.bindings)
            )
        return layers


def create_layer_extractor() -> LayerExtractor:
    """Create a layer extractor instance."""
    return LayerExtractor()
