# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Registry of multi-word commands.

A command is identified by an ordered sequence of literal tokens such as
``("user", "create")``.  The registry keeps the definitions in insertion
order and maintains a lazily rebuilt snapshot sorted by token sequence,
which is what :mod:`usradmin.lib.core.resolver` searches.

Sorting compares token sequences position by position.  A sequence that is
a strict prefix of another sorts before it, so ``user`` < ``user create`` <
``user delete``.  Python tuple comparison gives exactly this order.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

CommandId = int


class DefinitionError(Exception):
    """A command definition was rejected at registration time."""


class EmptyTokensError(DefinitionError):
    """The command has no tokens."""


class DuplicateTokensError(DefinitionError):
    """A command with the same token sequence is already registered."""

    def __init__(self, tokens: tuple[str, ...], existing: CommandId) -> None:
        super().__init__(f"command '{' '.join(tokens)}' is already registered")
        self.tokens = tokens
        self.existing = existing


@dataclass(frozen=True)
class CommandDefinition:
    """A registered command."""

    id: CommandId
    tokens: tuple[str, ...]
    help: str = ""

    @property
    def text(self) -> str:
        """Tokens joined by single spaces, as shown in help output."""
        return " ".join(self.tokens)


def split_tokens(tokens: str | Sequence[str]) -> tuple[str, ...]:
    """Normalize *tokens* to a tuple; a plain string is split on whitespace."""
    if isinstance(tokens, str):
        return tuple(tokens.split())
    return tuple(tokens)


class CommandRegistry:
    """Set of command definitions with a cached token-sorted ordering.

    Usage::

        registry = CommandRegistry()
        create_id = registry.register("user create", "create a new user")
        registry.register(["user", "delete"], "delete a user")
        for text, help_text in registry.list_for_help():
            ...
    """

    def __init__(self) -> None:
        self._definitions: list[CommandDefinition] = []
        self._by_tokens: dict[tuple[str, ...], CommandDefinition] = {}
        self._by_id: dict[CommandId, CommandDefinition] = {}
        self._sorted: tuple[CommandDefinition, ...] = ()
        self._is_sorted = True
        self._next_id: CommandId = 1
        self._lock = threading.Lock()

    def register(self, tokens: str | Sequence[str], help: str = "") -> CommandId:
        """Add a command and return its freshly allocated id.

        Raises:
            EmptyTokensError: *tokens* is empty.
            DuplicateTokensError: the same token sequence is already registered.
        """
        key = split_tokens(tokens)
        if not key:
            raise EmptyTokensError("command text is empty")

        with self._lock:
            existing = self._by_tokens.get(key)
            if existing is not None:
                raise DuplicateTokensError(key, existing.id)
            definition = CommandDefinition(id=self._next_id, tokens=key, help=help)
            self._next_id += 1
            self._definitions.append(definition)
            self._by_tokens[key] = definition
            self._by_id[definition.id] = definition
            self._is_sorted = False
        return definition.id

    def ensure_sorted(self) -> tuple[CommandDefinition, ...]:
        """Rebuild the sorted snapshot if stale and return it.

        Idempotent; cheap when nothing was registered since the last call.
        """
        with self._lock:
            if not self._is_sorted:
                # sorted() is stable; ties cannot happen since tokens are unique
                self._sorted = tuple(sorted(self._definitions, key=lambda d: d.tokens))
                self._is_sorted = True
            return self._sorted

    @property
    def is_sorted(self) -> bool:
        """Whether the cached ordering matches the current definitions."""
        return self._is_sorted

    def get(self, command_id: CommandId) -> CommandDefinition | None:
        return self._by_id.get(command_id)

    def find(self, tokens: str | Sequence[str]) -> CommandDefinition | None:
        """Return the definition registered under exactly *tokens*, if any."""
        return self._by_tokens.get(split_tokens(tokens))

    def list_for_help(self) -> list[tuple[str, str]]:
        """Return ``(joined tokens, help)`` pairs in sorted order."""
        return [(d.text, d.help) for d in self.ensure_sorted()]

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[CommandDefinition]:
        return iter(self.ensure_sorted())

    def __contains__(self, tokens: object) -> bool:
        if not isinstance(tokens, (str, list, tuple)):
            return False
        return split_tokens(tokens) in self._by_tokens
