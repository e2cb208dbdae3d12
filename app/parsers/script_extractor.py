from __future__ import annotations

import logging
import re
from typing import Any

from bs4 import BeautifulSoup

from app.core.constants import SCHEDULE_MARKER
from app.errors import ParseError
from app.parsers import literal


class ScriptAssignmentExtractor:
    """Finds ``<marker> = {...}`` inside inline scripts and parses the object literal."""

    def __init__(self, marker: str = SCHEDULE_MARKER) -> None:
        self.marker = marker
        self._assignment_re = re.compile(re.escape(marker) + r"\s*=\s*(?=\{)")
        self._logger = logging.getLogger("voe.extractor")

    def extract(self, html: str) -> Any | None:
        soup = BeautifulSoup(html, "html.parser")

        for script in soup.find_all("script"):
            text = script.string if script.string is not None else script.get_text()
            if not text or self.marker not in text:
                continue

            match = self._assignment_re.search(text)
            if match is None:
                self._logger.debug("Script mentions %s without an assignment", self.marker)
                continue

            object_text = extract_object_literal(text, match.end())
            value = literal.loads(object_text)
            self._logger.debug("Parsed %s (%d chars)", self.marker, len(object_text))
            return value

        self._logger.info("Could not find %s on the page", self.marker)
        return None


def extract_object_literal(text: str, start: int) -> str:
    if text[start : start + 1] != "{":
        raise ParseError(f"Expected '{{' at offset {start}")

    depth = 0
    quote: str | None = None
    index = start
    while index < len(text):
        char = text[index]
        if quote is not None:
            if char == "\\":
                index += 2
                continue
            if char == quote:
                quote = None
        elif text.startswith("//", index):
            newline = text.find("\n", index)
            if newline == -1:
                break
            index = newline + 1
            continue
        elif text.startswith("/*", index):
            close = text.find("*/", index + 2)
            if close == -1:
                break
            index = close + 2
            continue
        elif char in {"'", '"', "`"}:
            quote = char
        elif char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return text[start : index + 1]
        index += 1

    raise ParseError(f"Unbalanced object literal starting at offset {start}")
