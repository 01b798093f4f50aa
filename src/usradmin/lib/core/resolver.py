# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Resolve command-line tokens to a registered command.

The resolver works on the registry's sorted snapshot.  It keeps a
*candidate window* ``[lo, hi)`` of definitions consistent with the tokens
consumed so far and narrows it with two binary searches per token:

* lower bound: first definition whose token at position *k* is >= the input,
* upper bound: first definition whose token at position *k* is > the input.

Inside the window every definition shares tokens ``0..k-1`` with the input,
so the window is also sorted by token *k*.  A definition without a token at
position *k* compares lowest and falls out of the window; a command never
matches more input tokens than it declares.

Outcomes
--------
- :class:`Resolved` -- exactly one command matches the full input.
- :class:`NoMatch` -- no command matches (including an incomplete prefix of
  a single command, and the empty input).
- :class:`Ambiguous` -- two or more commands still share the input prefix.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

from .registry import CommandDefinition, CommandId, CommandRegistry

# ---------------------------------------------------------------------------
# Outcomes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ResolutionOutcome:
    """Result of a single :meth:`CommandResolver.resolve` call."""

    tokens: tuple[str, ...]


@dataclass(frozen=True)
class Resolved(ResolutionOutcome):
    definition: CommandDefinition

    @property
    def id(self) -> CommandId:
        return self.definition.id


@dataclass(frozen=True)
class NoMatch(ResolutionOutcome):
    pass


@dataclass(frozen=True)
class Ambiguous(ResolutionOutcome):
    candidates: tuple[CommandDefinition, ...]

    @property
    def candidate_texts(self) -> list[str]:
        return [c.text for c in self.candidates]


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


def _token_at(position: int) -> Callable[[CommandDefinition], tuple[bool, str]]:
    """Sort key for token *position*; a missing token sorts before any token."""

    def key(definition: CommandDefinition) -> tuple[bool, str]:
        if len(definition.tokens) > position:
            return (True, definition.tokens[position])
        return (False, "")

    return key


class CommandResolver:
    """Resolve token sequences against a :class:`CommandRegistry`."""

    def __init__(self, registry: CommandRegistry) -> None:
        self.registry = registry

    def iter_windows(
        self, tokens: Sequence[str], ordered: Sequence[CommandDefinition] | None = None
    ) -> Iterator[tuple[int, int]]:
        """Yield the candidate window ``(lo, hi)`` after each consumed token.

        Iteration stops right after the window becomes empty.  Window sizes
        never grow from one step to the next.
        """
        if ordered is None:
            ordered = self.registry.ensure_sorted()
        lo, hi = 0, len(ordered)
        for position, token in enumerate(tokens):
            key = _token_at(position)
            target = (True, token)
            lo = bisect_left(ordered, target, lo, hi, key=key)
            hi = bisect_right(ordered, target, lo, hi, key=key)
            yield lo, hi
            if lo == hi:
                return

    def resolve(self, tokens: Sequence[str]) -> ResolutionOutcome:
        """Resolve *tokens* to :class:`Resolved`, :class:`NoMatch` or :class:`Ambiguous`."""
        return self._resolve(tuple(tokens))

    def _resolve(self, tokens: tuple[str, ...]) -> ResolutionOutcome:
        if not tokens:
            return NoMatch(tokens)

        ordered = self.registry.ensure_sorted()
        lo, hi = 0, len(ordered)
        for lo, hi in self.iter_windows(tokens, ordered):
            if lo == hi:
                return NoMatch(tokens)
            if hi - lo == 1:
                # Only one candidate left, the rest of the input must match it exactly
                sole = ordered[lo]
                if sole.tokens == tokens:
                    return Resolved(tokens, sole)
                return NoMatch(tokens)

        # An exact-length match sorts first in the window
        first = ordered[lo]
        if len(first.tokens) == len(tokens):
            return Resolved(tokens, first)
        return Ambiguous(tokens, tuple(ordered[lo:hi]))

    def candidates(self, tokens: Sequence[str]) -> tuple[CommandDefinition, ...]:
        """Return the definitions still consistent with the token prefix."""
        ordered = self.registry.ensure_sorted()
        lo, hi = 0, len(ordered)
        for lo, hi in self.iter_windows(tokens, ordered):
            pass
        return tuple(ordered[lo:hi])

    def complete(self, tokens: Sequence[str], prefix: str = "") -> list[str]:
        """Return the distinct tokens that may follow *tokens*, filtered by *prefix*."""
        position = len(tokens)
        seen: list[str] = []
        for definition in self.candidates(tokens):
            if len(definition.tokens) <= position:
                continue
            word = definition.tokens[position]
            if word.startswith(prefix) and word not in seen:
                seen.append(word)
        return seen
