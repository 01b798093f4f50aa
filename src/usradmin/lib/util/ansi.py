"""ANSI color helpers for help and error output."""

import os
import sys
from typing import TextIO


def supports_color(mode: str = "auto", stream: TextIO | None = None) -> bool:
    """Check if *stream* (default stdout) supports color output.

    *mode* is the ``ui.color`` config value: ``"always"`` and ``"never"``
    win outright.  In ``"auto"`` mode follows the NO_COLOR
    (https://no-color.org/) and FORCE_COLOR conventions, then ``stream.isatty()``.
    """
    if mode == "always":
        return True
    if mode == "never":
        return False
    if "NO_COLOR" in os.environ:
        return False
    force = os.environ.get("FORCE_COLOR")
    if force is not None and force != "0":
        return True
    if stream is None:
        stream = sys.stdout
    return stream.isatty()


def color(text: str, code: str, enabled: bool) -> str:
    """Wrap *text* in ANSI escape codes when *enabled* is True.

    Args:
        text: The string to colorize.
        code: ANSI SGR parameter (e.g. ``"31"`` for red).
        enabled: When False the original *text* is returned unchanged.
    """
    if not enabled:
        return text
    return f"\x1b[{code}m{text}\x1b[0m"


def bold(text: str, enabled: bool) -> str:
    return color(text, "1", enabled)


def red(text: str, enabled: bool) -> str:
    """Return *text* in red (ANSI 31) when *enabled*."""
    return color(text, "31", enabled)


def gray(text: str, enabled: bool) -> str:
    """Return *text* in gray (ANSI 90) when *enabled*."""
    return color(text, "90", enabled)


def yes_no(value: bool, enabled: bool) -> str:
    """Return green ``"yes"`` or red ``"no"`` based on *value* when *enabled*."""
    return color("yes" if value else "no", "32" if value else "31", enabled)
