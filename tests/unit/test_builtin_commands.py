from __future__ import annotations

import unittest

from access.evaluator import AccessEvaluator
from access.levels import ADMIN, GM, MODERATOR, NONE
from commands.loader import load_builtin_commands
from commands.registry import CommandRegistry
from commands.sources import BuiltinCommandTable, ExtensionCommandRegistry
from protocol.command_ids import CMD_BAN, CMD_HELP, CMD_KICK, CMD_PLAYERS, CMD_SAVE, CMD_SERVERMSG
from tests.unit.fakes import QUIET_LOGGER, player


class BuiltinCommandTableTests(unittest.TestCase):
    def setUp(self) -> None:
        self.table = load_builtin_commands(BuiltinCommandTable())

    def test_all_builtins_are_loaded(self) -> None:
        names = sorted(info.name for info in self.table.enumerate_builtin_commands())
        self.assertEqual(names, sorted([CMD_PLAYERS, CMD_KICK, CMD_BAN, CMD_SERVERMSG, CMD_SAVE]))

    def test_duplicate_builtin_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            load_builtin_commands(self.table)

    def test_help_bodies_differ_from_descriptions(self) -> None:
        for info in self.table.enumerate_builtin_commands():
            with self.subTest(command=info.name):
                self.assertTrue(info.description)
                self.assertIn("Use:", info.help_text)

    def test_visibility_per_tier(self) -> None:
        extensions = ExtensionCommandRegistry()
        extensions.register(CMD_HELP, "Server help", NONE)
        registry = CommandRegistry(self.table, extensions, logger=QUIET_LOGGER)
        evaluator = AccessEvaluator(logger=QUIET_LOGGER)

        def _visible(level) -> list[str]:
            return [name for name, item in registry.get_catalog().items() if evaluator.can_see(item, player(level=level))]

        self.assertEqual(_visible(NONE), [CMD_HELP, CMD_PLAYERS])
        self.assertEqual(_visible(GM), [CMD_HELP, CMD_PLAYERS])
        self.assertEqual(_visible(MODERATOR), [CMD_BAN, CMD_HELP, CMD_KICK, CMD_PLAYERS, CMD_SERVERMSG])
        self.assertEqual(_visible(ADMIN), [CMD_BAN, CMD_HELP, CMD_KICK, CMD_PLAYERS, CMD_SAVE, CMD_SERVERMSG])


class ExtensionCommandRegistryTests(unittest.TestCase):
    def test_register_rejects_duplicates_and_blank_names(self) -> None:
        registry = ExtensionCommandRegistry()
        registry.register("Teleport", "Teleport", MODERATOR)
        self.assertIn("teleport", registry)
        with self.assertRaises(ValueError):
            registry.register("teleport")
        with self.assertRaises(ValueError):
            registry.register("  ")

    def test_enumeration_is_a_snapshot(self) -> None:
        registry = ExtensionCommandRegistry()
        registry.register("teleport")
        snapshot = registry.enumerate_extension_commands()
        registry.unregister("teleport")
        self.assertIn("teleport", snapshot)
        self.assertEqual(dict(registry.enumerate_extension_commands()), {})


if __name__ == "__main__":
    unittest.main()
