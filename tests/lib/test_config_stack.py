# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the layered config stack."""

import tempfile
import unittest
from pathlib import Path

from usradmin.lib.util.config_stack import (
    ConfigScope,
    ConfigStack,
    deep_merge,
    load_yaml_scope,
)


class DeepMergeTests(unittest.TestCase):
    def test_nested_merge(self) -> None:
        base = {"ui": {"color": "auto", "width": 80}}
        override = {"ui": {"color": "never"}}
        self.assertEqual(deep_merge(base, override), {"ui": {"color": "never", "width": 80}})

    def test_none_deletes_key(self) -> None:
        self.assertEqual(deep_merge({"a": 1, "b": 2}, {"b": None}), {"a": 1})

    def test_list_replacement_and_inherit(self) -> None:
        self.assertEqual(deep_merge({"x": [1, 2]}, {"x": [3]}), {"x": [3]})
        self.assertEqual(deep_merge({"x": [1, 2]}, {"x": [0, "_inherit"]}), {"x": [0, 1, 2]})

    def test_inputs_not_mutated(self) -> None:
        base = {"log": {"debug": True}}
        deep_merge(base, {"log": {"debug": False}})
        self.assertEqual(base, {"log": {"debug": True}})


class ConfigStackTests(unittest.TestCase):
    def test_later_scopes_win(self) -> None:
        stack = ConfigStack()
        stack.push(ConfigScope("system", None, {"ui": {"color": "always"}, "log": {"debug": True}}))
        stack.push(ConfigScope("user", None, {"ui": {"color": "never"}}))
        self.assertEqual(
            stack.resolve(), {"ui": {"color": "never"}, "log": {"debug": True}}
        )
        self.assertEqual([s.level for s in stack.scopes], ["system", "user"])

    def test_empty_stack(self) -> None:
        self.assertEqual(ConfigStack().resolve(), {})


class LoadYamlScopeTests(unittest.TestCase):
    def test_missing_file_is_empty(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "missing.yml"
            scope = load_yaml_scope("user", path)
            self.assertEqual(scope.data, {})
            self.assertEqual(scope.source, path)

    def test_non_mapping_is_empty(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "config.yml"
            path.write_text("- just\n- a list\n", encoding="utf-8")
            self.assertEqual(load_yaml_scope("user", path).data, {})

    def test_loads_mapping(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            path = Path(td) / "config.yml"
            path.write_text("ui:\n  color: always\n", encoding="utf-8")
            self.assertEqual(load_yaml_scope("user", path).data, {"ui": {"color": "always"}})
