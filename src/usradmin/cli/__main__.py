# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""CLI entry point for ``python -m usradmin.cli``."""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
