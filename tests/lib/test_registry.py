# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

"""Tests for the command registry."""

import threading
import unittest

from usradmin.lib.core.registry import (
    CommandDefinition,
    CommandRegistry,
    DefinitionError,
    DuplicateTokensError,
    EmptyTokensError,
    split_tokens,
)


class RegisterTests(unittest.TestCase):
    def test_register_returns_distinct_ids(self) -> None:
        registry = CommandRegistry()
        a = registry.register(["user", "create"], "create a new user")
        b = registry.register(["user", "delete"], "delete a user")
        self.assertNotEqual(a, b)
        self.assertEqual(len(registry), 2)

    def test_string_tokens_are_split_on_whitespace(self) -> None:
        registry = CommandRegistry()
        cid = registry.register("  user   info ", "get user info")
        definition = registry.get(cid)
        self.assertIsNotNone(definition)
        self.assertEqual(definition.tokens, ("user", "info"))
        self.assertEqual(definition.text, "user info")
        self.assertEqual(definition.help, "get user info")

    def test_empty_tokens_rejected(self) -> None:
        registry = CommandRegistry()
        with self.assertRaises(EmptyTokensError):
            registry.register([], "nothing")
        with self.assertRaises(EmptyTokensError):
            registry.register("   ", "blank")
        self.assertEqual(len(registry), 0)

    def test_duplicate_tokens_rejected(self) -> None:
        registry = CommandRegistry()
        first = registry.register(["user", "create"], "create a new user")
        with self.assertRaises(DuplicateTokensError) as ctx:
            registry.register("user create", "again")
        self.assertEqual(ctx.exception.existing, first)
        self.assertEqual(ctx.exception.tokens, ("user", "create"))
        self.assertIn("user create", str(ctx.exception))
        self.assertEqual(len(registry), 1)
        self.assertEqual(registry.get(first).help, "create a new user")

    def test_errors_share_base_class(self) -> None:
        self.assertTrue(issubclass(EmptyTokensError, DefinitionError))
        self.assertTrue(issubclass(DuplicateTokensError, DefinitionError))

    def test_prefix_command_is_not_a_duplicate(self) -> None:
        registry = CommandRegistry()
        registry.register("user create")
        registry.register("user")
        self.assertIn(["user"], registry)
        self.assertIn("user create", registry)
        self.assertNotIn("user delete", registry)

    def test_get_unknown_id(self) -> None:
        self.assertIsNone(CommandRegistry().get(42))

    def test_get_by_id(self) -> None:
        registry = CommandRegistry()
        ids = [registry.register(["cmd", str(i)]) for i in range(50)]
        for i, cid in enumerate(ids):
            self.assertEqual(registry.get(cid).tokens, ("cmd", str(i)))

    def test_rejected_registration_allocates_no_id(self) -> None:
        registry = CommandRegistry()
        first = registry.register("user create")
        with self.assertRaises(DuplicateTokensError):
            registry.register("user create")
        second = registry.register("user delete")
        self.assertIsNone(registry.get(second + 1))
        self.assertEqual(registry.get(first).text, "user create")
        self.assertEqual(registry.get(second).text, "user delete")

    def test_find_by_tokens(self) -> None:
        registry = CommandRegistry()
        cid = registry.register("user info")
        self.assertEqual(registry.find(["user", "info"]).id, cid)
        self.assertIsNone(registry.find("user"))

    def test_split_tokens_keeps_sequences(self) -> None:
        self.assertEqual(split_tokens(["a b", "c"]), ("a b", "c"))
        self.assertEqual(split_tokens("a b c"), ("a", "b", "c"))


class OrderingTests(unittest.TestCase):
    def test_sorted_lexicographically_with_prefix_first(self) -> None:
        registry = CommandRegistry()
        registry.register("user info")
        registry.register("user delete")
        registry.register("zone list")
        registry.register("user")
        registry.register("user create")
        registry.register("bucket")
        texts = [d.text for d in registry.ensure_sorted()]
        self.assertEqual(
            texts, ["bucket", "user", "user create", "user delete", "user info", "zone list"]
        )

    def test_ordering_is_cached_and_invalidated(self) -> None:
        registry = CommandRegistry()
        registry.register("user info")
        self.assertFalse(registry.is_sorted)
        first = registry.ensure_sorted()
        self.assertTrue(registry.is_sorted)
        self.assertIs(registry.ensure_sorted(), first)

        registry.register("user create")
        self.assertFalse(registry.is_sorted)
        self.assertEqual([d.text for d in registry.ensure_sorted()], ["user create", "user info"])

    def test_iteration_uses_sorted_order(self) -> None:
        registry = CommandRegistry()
        registry.register("b")
        registry.register("a")
        self.assertEqual([d.text for d in registry], ["a", "b"])

    def test_list_for_help(self) -> None:
        registry = CommandRegistry()
        registry.register("user delete", "delete a user")
        registry.register("user create", "create a new user")
        self.assertEqual(
            registry.list_for_help(),
            [("user create", "create a new user"), ("user delete", "delete a user")],
        )

    def test_definitions_are_immutable(self) -> None:
        definition = CommandDefinition(id=1, tokens=("user",), help="")
        with self.assertRaises(AttributeError):
            definition.help = "changed"  # type: ignore[misc]


class ConcurrentRegistrationTests(unittest.TestCase):
    def test_parallel_registration_keeps_every_definition(self) -> None:
        registry = CommandRegistry()

        def worker(group: int) -> None:
            for i in range(25):
                registry.register(["group", str(group), str(i)])

        threads = [threading.Thread(target=worker, args=(g,)) for g in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        ordered = registry.ensure_sorted()
        self.assertEqual(len(ordered), 100)
        self.assertEqual(len({d.id for d in ordered}), 100)
        self.assertEqual(list(ordered), sorted(ordered, key=lambda d: d.tokens))
