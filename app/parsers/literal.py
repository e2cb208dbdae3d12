"""
Lenient parser for JavaScript-style object literals.

Pages embed schedule data as script assignments rather than JSON, so the
values may use single quotes, unquoted keys, trailing commas, comments and
bare numbers. ``loads`` first tries ``json.loads`` on a lightly normalized
copy of the text and falls back to a small recursive-descent parser that
builds a tagged node tree before converting it to plain Python values.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from typing import Any, Union

from app.errors import ParseError

_BARE_KEY_RE = re.compile(r"(\b[A-Za-z0-9_]+)\s*:")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_IDENT_RE = re.compile(r"[A-Za-z_$][A-Za-z0-9_$.]*")
_KEYWORDS: dict[str, Any] = {"true": True, "false": False, "null": None, "undefined": None}
_ESCAPES = {"n": "\n", "t": "\t", "r": "\r", "b": "\b", "f": "\f", "v": "\v", "0": "\0"}


@dataclass(frozen=True)
class StringNode:
    value: str


@dataclass(frozen=True)
class NumberNode:
    text: str


@dataclass(frozen=True)
class IdentifierNode:
    name: str


@dataclass(frozen=True)
class ObjectNode:
    items: tuple[tuple[str, "Node"], ...]


@dataclass(frozen=True)
class ArrayNode:
    items: tuple["Node", ...]


Node = Union[StringNode, NumberNode, IdentifierNode, ObjectNode, ArrayNode]


def normalize_to_json(text: str) -> str:
    normalized = text.replace("'", '"')
    return _BARE_KEY_RE.sub(r'"\1":', normalized)


def loads(text: str) -> Any:
    try:
        return json.loads(normalize_to_json(text))
    except ValueError:
        pass
    return to_python(LiteralParser(text).parse())


def to_python(node: Node) -> Any:
    if isinstance(node, StringNode):
        return node.value
    if isinstance(node, NumberNode):
        return _number_value(node.text)
    if isinstance(node, IdentifierNode):
        return _KEYWORDS.get(node.name, node.name)
    if isinstance(node, ObjectNode):
        return {key: to_python(value) for key, value in node.items}
    if isinstance(node, ArrayNode):
        return [to_python(item) for item in node.items]
    raise TypeError(f"Unsupported node: {node!r}")


def _number_value(text: str) -> int | float:
    try:
        return int(text)
    except ValueError:
        return float(text)


class LiteralParser:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def parse(self) -> Node:
        node = self._value()
        self._skip_ignored()
        if self.text[self.pos : self.pos + 1] == ";":
            self.pos += 1
            self._skip_ignored()
        if self.pos != len(self.text):
            raise self._error("Unexpected trailing content")
        return node

    def _error(self, message: str) -> ParseError:
        return ParseError(f"{message} at offset {self.pos}")

    def _peek(self) -> str:
        self._skip_ignored()
        return self.text[self.pos] if self.pos < len(self.text) else ""

    def _skip_ignored(self) -> None:
        text = self.text
        while self.pos < len(text):
            char = text[self.pos]
            if char.isspace():
                self.pos += 1
            elif text.startswith("//", self.pos):
                newline = text.find("\n", self.pos)
                self.pos = len(text) if newline == -1 else newline + 1
            elif text.startswith("/*", self.pos):
                close = text.find("*/", self.pos + 2)
                if close == -1:
                    raise self._error("Unterminated comment")
                self.pos = close + 2
            else:
                return

    def _expect(self, char: str) -> None:
        if self._peek() != char:
            raise self._error(f"Expected {char!r}")
        self.pos += 1

    def _value(self) -> Node:
        char = self._peek()
        if char == "{":
            return self._object()
        if char == "[":
            return self._array()
        if char in {"'", '"'}:
            return StringNode(self._string())
        if char and (char.isdigit() or char in "+-."):
            return NumberNode(self._number())
        if char and (char.isalpha() or char in "_$"):
            return IdentifierNode(self._identifier())
        if not char:
            raise self._error("Unexpected end of input")
        raise self._error(f"Unexpected character {char!r}")

    def _object(self) -> ObjectNode:
        self._expect("{")
        items: list[tuple[str, Node]] = []
        while self._peek() != "}":
            key = self._key()
            self._expect(":")
            items.append((key, self._value()))
            if self._peek() == ",":
                self.pos += 1
                continue
            if self._peek() != "}":
                raise self._error("Expected ',' or '}'")
        self.pos += 1
        return ObjectNode(tuple(items))

    def _array(self) -> ArrayNode:
        self._expect("[")
        items: list[Node] = []
        while self._peek() != "]":
            items.append(self._value())
            if self._peek() == ",":
                self.pos += 1
                continue
            if self._peek() != "]":
                raise self._error("Expected ',' or ']'")
        self.pos += 1
        return ArrayNode(tuple(items))

    def _key(self) -> str:
        char = self._peek()
        if char in {"'", '"'}:
            return self._string()
        if char and (char.isdigit() or char in "+-."):
            return self._number()
        if char and (char.isalpha() or char in "_$"):
            return self._identifier()
        raise self._error("Expected object key")

    def _string(self) -> str:
        quote = self.text[self.pos]
        self.pos += 1
        chunks: list[str] = []
        while self.pos < len(self.text):
            char = self.text[self.pos]
            if char == quote:
                self.pos += 1
                return "".join(chunks)
            if char == "\\":
                chunks.append(self._escape())
                continue
            chunks.append(char)
            self.pos += 1
        raise self._error("Unterminated string")

    def _escape(self) -> str:
        self.pos += 1
        if self.pos >= len(self.text):
            raise self._error("Unterminated escape")
        char = self.text[self.pos]
        if char == "u":
            code = self.text[self.pos + 1 : self.pos + 5]
            if len(code) != 4:
                raise self._error("Invalid unicode escape")
            try:
                value = chr(int(code, 16))
            except ValueError as exc:
                raise self._error("Invalid unicode escape") from exc
            self.pos += 5
            return value
        if char == "\n":
            self.pos += 1
            return ""
        self.pos += 1
        return _ESCAPES.get(char, char)

    def _number(self) -> str:
        match = _NUMBER_RE.match(self.text, self.pos)
        if match is None:
            raise self._error("Invalid number")
        self.pos = match.end()
        return match.group(0)

    def _identifier(self) -> str:
        match = _IDENT_RE.match(self.text, self.pos)
        if match is None:
            raise self._error("Invalid identifier")
        self.pos = match.end()
        return match.group(0)
