#!/usr/bin/env python3
# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import argparse
import sys
from collections.abc import Sequence
from typing import Any

from ..lib.core.config import color_mode
from ..lib.core.registry import CommandId, CommandRegistry
from ..lib.core.resolver import Ambiguous, CommandResolver, Resolved
from ..lib.core.version import format_version_string, get_version_info
from ..lib.util.ansi import bold, red, supports_color
from ..lib.util.logging_utils import log_debug
from .commands import Handler, Options
from .commands import config as config_commands, user as user_commands

# Optional: bash completion via argcomplete
try:
    import argcomplete  # type: ignore
except ImportError:  # pragma: no cover - optional dep
    argcomplete = None  # type: ignore

# Options forwarded to command handlers, in help order
HANDLER_OPTIONS = ("uid", "display-name", "email")


def build_registry() -> tuple[CommandRegistry, dict[CommandId, Handler]]:
    """Register every command and return the registry with its dispatch table."""
    registry = CommandRegistry()
    handlers: dict[CommandId, Handler] = {}
    for module in (user_commands, config_commands):
        handlers.update(module.register(registry))
    return registry, handlers


def format_commands(registry: CommandRegistry) -> str:
    """Return the ``commands:`` help block, help texts aligned in one column."""
    entries = registry.list_for_help()
    width = max((len(text) for text, _ in entries), default=0)
    lines = ["commands:"]
    for text, help_text in entries:
        lines.append(f"{text.ljust(width)}    {help_text}")
    return "\n".join(lines)


def _complete_tokens(resolver: CommandResolver):
    def completer(prefix: str, parsed_args: argparse.Namespace, **kwargs: object) -> list[str]:
        typed = getattr(parsed_args, "tokens", None) or []
        return resolver.complete(typed, prefix)

    return completer


def build_parser(registry: CommandRegistry, resolver: CommandResolver) -> argparse.ArgumentParser:
    version, revision = get_version_info()

    parser = argparse.ArgumentParser(
        prog="usradmin",
        usage="%(prog)s <cmd> [options...]",
        description=format_commands(registry),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Command words must be given in full. Malformed options (unknown option,\n"
            "non-integer --uid) are reported in argparse's format and exit with status 2."
        ),
        add_help=False,
    )
    _a = parser.add_argument("tokens", nargs="*", metavar="cmd", help=argparse.SUPPRESS)
    _a.completer = _complete_tokens(resolver)  # type: ignore[attr-defined]

    parser.add_argument("--help", action="store_true", help="produce help message")
    parser.add_argument(
        "--version",
        action="version",
        version=f"usradmin {format_version_string(version, revision)}",
    )
    # Unset options stay off the namespace so handlers see only what was given
    parser.add_argument("--uid", type=int, default=argparse.SUPPRESS, help="user id")
    parser.add_argument("--display-name", default=argparse.SUPPRESS, help="user display name")
    parser.add_argument("--email", default=argparse.SUPPRESS, help="user email address")
    return parser


def supplied_options(args: argparse.Namespace) -> Options:
    """Return the handler options present on *args*, keyed by option name."""
    options: dict[str, Any] = {}
    for name in HANDLER_OPTIONS:
        dest = name.replace("-", "_")
        if hasattr(args, dest):
            options[name] = getattr(args, dest)
    return options


def _print_help_on_error(
    parser: argparse.ArgumentParser, message: str, details: Sequence[str] = ()
) -> None:
    color_enabled = supports_color(color_mode(), sys.stderr)
    print(red(message, color_enabled), file=sys.stderr)
    for line in details:
        print(f"  {bold(line, color_enabled)}", file=sys.stderr)
    parser.print_help(sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    registry, handlers = build_registry()
    log_debug(f"cli: registered {len(registry)} commands")
    resolver = CommandResolver(registry)
    parser = build_parser(registry, resolver)

    # Enable bash completion if argcomplete is present and activated
    if argcomplete is not None:  # pragma: no cover - shell integration
        argcomplete.autocomplete(parser)

    args = parser.parse_intermixed_args(argv)
    if args.help:
        parser.print_help()
        return 0

    options = supplied_options(args)
    tokens = args.tokens or []
    outcome = resolver.resolve(tokens)
    log_debug(f"cli: {' '.join(tokens)!r} -> {type(outcome).__name__}")

    if isinstance(outcome, Ambiguous):
        _print_help_on_error(
            parser,
            f"ambiguous command '{' '.join(tokens)}', be more specific:",
            outcome.candidate_texts,
        )
        return 1
    if not isinstance(outcome, Resolved):
        _print_help_on_error(parser, "invalid command")
        return 1

    handler = handlers[outcome.id]
    if not handler(options):
        log_debug(f"cli: '{outcome.definition.text}' rejected options {sorted(options)}")
        _print_help_on_error(parser, "invalid command")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
