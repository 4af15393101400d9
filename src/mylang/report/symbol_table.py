# Copyright 2026 MyLang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Identifier table: first occurrence and frequency of every identifier."""

from __future__ import annotations

from dataclasses import dataclass, replace

from mylang.scanner.tokens import Token

# ###############
# Public Interface
# ###############


@dataclass(frozen=True)
class IdentifierEntry:
    """A row of the identifier table.

    Attributes:
        name: The exact identifier lexeme.
        first_line: 1-based line of the first sighting.
        first_column: 1-based column of the first sighting.
        frequency: Number of sightings when the entry was taken.
    """

    name: str
    first_line: int
    first_column: int
    frequency: int = 1


class IdentifierTable:
    """Insertion-ordered map from identifier name to its table entry."""

    def __init__(self) -> None:
        self._entries: dict[str, IdentifierEntry] = {}

    def observe(self, token: Token) -> IdentifierEntry:
        """Record a sighting of an identifier token.

        The first sighting fixes the entry's position; later sightings only
        increment its frequency.

        Raises:
            ValueError: If *token* is not an identifier.
        """
        if not token.is_identifier:
            raise ValueError(f"Not an identifier token: {token}")
        entry = self._entries.get(token.lexeme)
        if entry is None:
            entry = IdentifierEntry(token.lexeme, token.line, token.column)
        else:
            entry = replace(entry, frequency=entry.frequency + 1)
        self._entries[token.lexeme] = entry
        return entry

    def get(self, name: str) -> IdentifierEntry | None:
        return self._entries.get(name)

    def entries(self) -> tuple[IdentifierEntry, ...]:
        """Return all entries in first-sighting order."""
        return tuple(self._entries.values())

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def format_for_report(self) -> str:
        lines = [
            "SYMBOL TABLE (Identifiers)",
            "Name | First(Line,Col) | Frequency",
            "-----------------------------------",
        ]
        for entry in self._entries.values():
            lines.append(f"{entry.name} | ({entry.first_line},{entry.first_column}) | {entry.frequency}")
        return "\n".join(lines) + "\n"
