# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Keep every test away from the real user config and state directories."""

import pytest


@pytest.fixture(autouse=True)
def _isolated_usradmin_env(tmp_path, monkeypatch):
    monkeypatch.setenv("USRADMIN_CONFIG_FILE", str(tmp_path / "no-config.yml"))
    monkeypatch.setenv("USRADMIN_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.setenv("USRADMIN_STATE_DIR", str(tmp_path / "state"))
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)
