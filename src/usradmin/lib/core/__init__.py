"""Command registry, resolver, configuration and paths."""

from .registry import (
    CommandDefinition,
    CommandId,
    CommandRegistry,
    DefinitionError,
    DuplicateTokensError,
    EmptyTokensError,
)
from .resolver import Ambiguous, CommandResolver, NoMatch, ResolutionOutcome, Resolved

__all__ = [
    "Ambiguous",
    "CommandDefinition",
    "CommandId",
    "CommandRegistry",
    "CommandResolver",
    "DefinitionError",
    "DuplicateTokensError",
    "EmptyTokensError",
    "NoMatch",
    "ResolutionOutcome",
    "Resolved",
]
