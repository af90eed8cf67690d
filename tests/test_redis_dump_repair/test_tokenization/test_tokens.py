"""Tests for token values."""

import dataclasses

import pytest

from redis_dump_repair.shared import ContractError, TokenValueError
from redis_dump_repair.tokenization import (
    EOF_TOKEN,
    INVALID_TOKEN,
    NEWLINE_TOKEN,
    Token,
    TokenKind,
)


class TestToken:
    """Tests for the Token class."""

    def test_string_token(self):
        """Test creating a string token."""
        token = Token.string(bytearray(b"abc"))
        assert token.kind is TokenKind.STRING
        assert token.value == b"abc"
        assert isinstance(token.value, bytes)
        assert token.has_value

    def test_newline_token(self):
        """Test the shared newline token."""
        assert NEWLINE_TOKEN.kind is TokenKind.NEWLINE
        assert NEWLINE_TOKEN.value == b"\n"

    @pytest.mark.parametrize("token", [EOF_TOKEN, INVALID_TOKEN])
    def test_valueless_tokens(self, token):
        """Test that EOF and INVALID tokens refuse to give a value."""
        assert not token.has_value
        with pytest.raises(TokenValueError):
            token.value

    def test_value_error_is_contract_error(self):
        """Test the classification of the value error."""
        with pytest.raises(ContractError):
            EOF_TOKEN.value
        with pytest.raises(ValueError):
            EOF_TOKEN.value

    def test_tokens_are_immutable(self):
        """Test that tokens cannot be modified."""
        with pytest.raises(dataclasses.FrozenInstanceError):
            NEWLINE_TOKEN.kind = TokenKind.EOF

    def test_value_equality(self):
        """Test that tokens compare by their fields."""
        assert Token.string(b"x") == Token.string(b"x")
        assert Token.string(b"x") != Token.string(b"y")
        assert Token(TokenKind.EOF) == EOF_TOKEN

    def test_repr(self):
        """Test the token representation."""
        assert repr(Token.string(b"x")) == "Token(STRING, b'x')"
        assert repr(EOF_TOKEN) == "Token(EOF)"
