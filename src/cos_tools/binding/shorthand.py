"""Shorthand notation parser for structured flag values.

Structured request fields (batch delete lists, multipart part lists, CORS
rules, tag sets) are given on the command line in a compact notation::

    Objects=[{Key=a},{Key=b}],Quiet=false
    Parts=[{ETag=etag1,PartNumber=1},{ETag=etag2,PartNumber=2}]
    CORSRules=[{AllowedMethods=[GET,PUT],AllowedOrigins=[*]}]

The input is a comma-separated list of ``key=value`` pairs forming an
implicit record. ``[...]`` opens a list and ``{...}`` a nested record.
Anything else is a scalar taken verbatim; there is no quoting, so a
literal ``,``, ``=`` or bracket inside a scalar is a syntax error.

The same fields also accept a JSON object (``{"Objects": [{"Key": "a"}]}``)
and ``file://path`` references whose content is parsed with these rules.

Parsing happens in two steps: :func:`tokenize` splits the text into
delimiter and text tokens while tracking nesting depth, so unbalanced
input is rejected with the position of the offending delimiter; a small
recursive-descent parser then builds a tree of :class:`Scalar`,
:class:`Record` and :class:`ListValue` nodes.
"""

import json
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional, Union

from cos_tools.core import get_logger
from cos_tools.core.exceptions import MalformedShorthandError, TypeCoercionError

logger = get_logger(__name__)

FILE_PREFIX = "file://"

_JSON_START = re.compile(r"^\{\s*[\"}]")


@dataclass(frozen=True)
class Scalar:
    """A leaf value: a string from shorthand, or a native JSON primitive."""

    value: Any


@dataclass(frozen=True)
class Record:
    """Named fields, in input order."""

    fields: dict[str, "ParsedValue"] = field(default_factory=dict)


@dataclass(frozen=True)
class ListValue:
    """Ordered elements."""

    items: tuple["ParsedValue", ...] = ()


ParsedValue = Union[Scalar, Record, ListValue]


class TokenType(Enum):
    LBRACE = "{"
    RBRACE = "}"
    LBRACKET = "["
    RBRACKET = "]"
    COMMA = ","
    EQUALS = "="
    TEXT = "text"
    END = "end of input"


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    position: int


_DELIMITERS = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ",": TokenType.COMMA,
    "=": TokenType.EQUALS,
}

_CLOSERS = {TokenType.RBRACE: TokenType.LBRACE, TokenType.RBRACKET: TokenType.LBRACKET}


def tokenize(text: str, field_name: Optional[str] = None) -> list[Token]:
    """Split shorthand text into tokens.

    Raises:
        MalformedShorthandError: On unbalanced or mismatched brackets/braces.
    """
    tokens: list[Token] = []
    open_stack: list[Token] = []
    start = 0

    def flush(end: int) -> None:
        raw = text[start:end]
        stripped = raw.strip()
        if stripped:
            offset = len(raw) - len(raw.lstrip())
            tokens.append(Token(TokenType.TEXT, stripped, start + offset))

    for index, char in enumerate(text):
        token_type = _DELIMITERS.get(char)
        if token_type is None:
            continue

        flush(index)
        start = index + 1
        token = Token(token_type, char, index)

        if token_type in (TokenType.LBRACE, TokenType.LBRACKET):
            open_stack.append(token)
        elif token_type in _CLOSERS:
            if not open_stack or open_stack[-1].type is not _CLOSERS[token_type]:
                raise MalformedShorthandError(
                    field_name, f"unexpected '{char}' at position {index}"
                )
            open_stack.pop()

        tokens.append(token)

    flush(len(text))

    if open_stack:
        opener = open_stack[-1]
        raise MalformedShorthandError(
            field_name,
            f"unbalanced '{opener.value}' opened at position {opener.position}",
        )

    tokens.append(Token(TokenType.END, "", len(text)))
    return tokens


class _Parser:
    def __init__(self, tokens: list[Token], field_name: Optional[str]):
        self.tokens = tokens
        self.index = 0
        self.field_name = field_name

    def error(self, cause: str) -> MalformedShorthandError:
        return MalformedShorthandError(self.field_name, cause)

    def peek(self) -> Token:
        return self.tokens[self.index]

    def advance(self) -> Token:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def parse_document(self) -> Record:
        first = self.peek()
        if first.type is TokenType.END:
            raise self.error("empty input")

        if first.type is TokenType.LBRACE:
            self.advance()
            record = self.parse_pairs(TokenType.RBRACE)
            self.advance()
        else:
            record = self.parse_pairs(TokenType.END)

        trailing = self.peek()
        if trailing.type is not TokenType.END:
            raise self.error(
                f"unexpected '{trailing.value}' at position {trailing.position}"
            )
        return record

    def parse_pairs(self, terminator: TokenType) -> Record:
        fields: dict[str, ParsedValue] = {}
        if self.peek().type is terminator and terminator is not TokenType.END:
            return Record(fields)

        while True:
            key_token = self.peek()
            if key_token.type is TokenType.EQUALS:
                raise self.error(f"empty key at position {key_token.position}")
            if key_token.type is not TokenType.TEXT:
                raise self.error(
                    f"expected a key at position {key_token.position}, "
                    f"found '{key_token.value or key_token.type.value}'"
                )
            self.advance()
            key = key_token.value

            separator = self.peek()
            if separator.type is not TokenType.EQUALS:
                raise self.error(
                    f"missing '=' after key '{key}' at position {separator.position}"
                )
            self.advance()

            if key in fields:
                raise self.error(f"duplicate key '{key}'")
            fields[key] = self.parse_value(key)

            following = self.peek()
            if following.type is TokenType.COMMA:
                self.advance()
                if self.peek().type is terminator:
                    raise self.error(
                        f"dangling comma at position {following.position}"
                    )
                continue
            if following.type is terminator:
                return Record(fields)
            if following.type is TokenType.EQUALS:
                raise self.error(
                    f"unexpected '=' in the value of '{key}' at position "
                    f"{following.position}"
                )
            raise self.error(
                f"expected ',' after the value of '{key}' at position "
                f"{following.position}, found '{following.value or following.type.value}'"
            )

    def parse_value(self, key: str) -> ParsedValue:
        token = self.peek()
        if token.type is TokenType.TEXT:
            self.advance()
            return Scalar(token.value)
        if token.type is TokenType.LBRACE:
            self.advance()
            record = self.parse_pairs(TokenType.RBRACE)
            self.advance()
            return record
        if token.type is TokenType.LBRACKET:
            self.advance()
            return self.parse_list(key)
        raise self.error(f"missing value for '{key}' at position {token.position}")

    def parse_list(self, key: str) -> ListValue:
        items: list[ParsedValue] = []
        if self.peek().type is TokenType.RBRACKET:
            self.advance()
            return ListValue(())

        while True:
            items.append(self.parse_value(key))
            following = self.peek()
            if following.type is TokenType.COMMA:
                self.advance()
                if self.peek().type is TokenType.RBRACKET:
                    raise self.error(
                        f"dangling comma at position {following.position}"
                    )
                continue
            if following.type is TokenType.RBRACKET:
                self.advance()
                return ListValue(tuple(items))
            raise self.error(
                f"expected ',' or ']' in the list '{key}' at position "
                f"{following.position}, found '{following.value or following.type.value}'"
            )


def parse_shorthand(text: str, field_name: Optional[str] = None) -> Record:
    """Parse shorthand notation into a :class:`Record`.

    Args:
        text: Shorthand input such as ``Objects=[{Key=a}],Quiet=true``
        field_name: Field being parsed, used in error messages

    Raises:
        MalformedShorthandError: On the first syntax violation.
    """
    tokens = tokenize(text, field_name)
    return _Parser(tokens, field_name).parse_document()


def looks_like_json(text: str) -> bool:
    """Return True when ``text`` is written as a JSON object."""
    return bool(_JSON_START.match(text.strip()))


def from_native(value: Any) -> ParsedValue:
    """Convert decoded JSON into a parsed value tree.

    ``null`` members are dropped, as if the key had not been given.
    """
    if isinstance(value, dict):
        return Record({k: from_native(v) for k, v in value.items() if v is not None})
    if isinstance(value, list):
        return ListValue(tuple(from_native(v) for v in value))
    return Scalar(value)


def parse_json(text: str, field_name: Optional[str] = None) -> ParsedValue:
    """Parse a JSON document into a parsed value tree."""
    try:
        decoded = json.loads(text)
    except ValueError as e:
        raise TypeCoercionError(field_name, f"invalid JSON: {e}")
    return from_native(decoded)


def read_file_reference(text: str, field_name: Optional[str] = None) -> str:
    """Return the content of a ``file://`` reference."""
    path = Path(text[len(FILE_PREFIX):]).expanduser()
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise TypeCoercionError(field_name, f"unable to read '{path}': {e}")
    except UnicodeDecodeError as e:
        raise TypeCoercionError(field_name, f"'{path}' is not UTF-8 text: {e}")


def parse_structured(text: str, field_name: Optional[str] = None) -> ParsedValue:
    """Parse a structured flag value given as shorthand, JSON, or a file.

    JSON is detected by a leading ``{`` followed by a quoted key; JSON that
    fails to decode is an error and never re-read as shorthand.
    """
    content = text.strip()
    if content.startswith(FILE_PREFIX):
        logger.debug("Reading structured value from file", field=field_name)
        content = read_file_reference(content, field_name).strip()

    if looks_like_json(content):
        return parse_json(content, field_name)
    return parse_shorthand(content, field_name)
