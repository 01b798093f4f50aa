# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""CLI command modules.

Each module exposes ``register(registry) -> dict[CommandId, Handler]`` that
adds its commands to the registry and returns the dispatch table for them.
A handler receives the options given on the command line (option name ->
value, only for options actually supplied) and returns ``True`` if it ran,
``False`` if it rejected the options.
"""

from collections.abc import Callable
from typing import Any

Options = dict[str, Any]
Handler = Callable[[Options], bool]
