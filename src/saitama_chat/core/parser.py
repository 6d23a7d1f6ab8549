# src/saitama_chat/core/parser.py

"""
Command parsing.

A raw line is split into a keyword (first whitespace-delimited token) and a
payload (the rest of the line, trimmed, otherwise verbatim). The payload is
not interpreted here; each engine handler validates its own payload.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum

from .errors import InvalidCommandError

logger = logging.getLogger(__name__)


class Keyword(StrEnum):
    TODO = "TODO"
    DEADLINE = "DEADLINE"
    EVENT = "EVENT"
    LIST = "LIST"
    DONE = "DONE"
    DELETE = "DELETE"
    BYE = "BYE"
    FIND = "FIND"


ADD_KEYWORDS: frozenset[Keyword] = frozenset({Keyword.TODO, Keyword.DEADLINE, Keyword.EVENT})


@dataclass(frozen=True, slots=True)
class Command:
    keyword: Keyword
    payload: str = ""


class CommandParser:
    """
    Case-insensitive keyword lookup with optional aliases.

    `aliases` maps extra names to keywords, e.g. {"ls": Keyword.LIST}.
    An alias never shadows a real keyword.
    """

    def __init__(
        self,
        aliases: Mapping[str, Keyword] | None = None,
        keywords: frozenset[Keyword] | None = None,
    ) -> None:
        self._keywords = frozenset(keywords) if keywords is not None else frozenset(Keyword)
        self._table: dict[str, Keyword] = {k.value: k for k in self._keywords}
        for alias, keyword in (aliases or {}).items():
            name = alias.strip().upper()
            if not name or any(ch.isspace() for ch in name):
                logger.warning("Ignoring malformed command alias %r", alias)
                continue
            if keyword not in self._keywords:
                logger.warning("Ignoring alias %r for disabled keyword %s", alias, keyword)
                continue
            if name in self._table and self._table[name] is not keyword:
                logger.warning("Alias %r would shadow keyword %s; ignored", alias, name)
                continue
            self._table[name] = keyword

    @property
    def keywords(self) -> frozenset[Keyword]:
        return self._keywords

    def parse(self, line: str) -> Command:
        parts = (line or "").strip().split(maxsplit=1)
        if not parts:
            raise InvalidCommandError()

        keyword = self._table.get(parts[0].upper())
        if keyword is None:
            raise InvalidCommandError()

        payload = parts[1].strip() if len(parts) > 1 else ""
        return Command(keyword=keyword, payload=payload)
