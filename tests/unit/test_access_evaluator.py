from __future__ import annotations

import unittest

from access.evaluator import AccessEvaluator
from access.levels import ADMIN, GM, MODERATOR, NONE, OBSERVER, OVERSEER, RIGHTS_ADMIN, RIGHTS_STAFF, STANDARD_LEVELS
from commands.schemas import BuiltinRights, CommandDescriptor, CommandSource, ExtensionCommandInfo
from tests.unit.fakes import QUIET_LOGGER, player


def _builtin(mask: object) -> CommandDescriptor:
    return CommandDescriptor(
        name="kickuser",
        source=CommandSource.BUILTIN,
        rights=BuiltinRights(mask),
        description_provider=lambda: "",
        help_text_provider=lambda: "",
    )


class BuiltinRightsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.evaluator = AccessEvaluator(logger=QUIET_LOGGER)

    def test_missing_rights_is_open_to_everyone(self) -> None:
        for level in STANDARD_LEVELS:
            self.assertTrue(self.evaluator.can_see(_builtin(None), player(level=level)))

    def test_mask_intersection_decides(self) -> None:
        descriptor = _builtin(RIGHTS_STAFF)
        self.assertTrue(self.evaluator.can_see(descriptor, player(level=ADMIN)))
        self.assertTrue(self.evaluator.can_see(descriptor, player(level=MODERATOR)))
        self.assertTrue(self.evaluator.can_see(descriptor, player(level=OVERSEER)))
        self.assertFalse(self.evaluator.can_see(descriptor, player(level=GM)))
        self.assertFalse(self.evaluator.can_see(descriptor, player(level=NONE)))

    def test_mask_is_not_an_ordering(self) -> None:
        # Admin-only flag does not include moderators even though they rank lower.
        descriptor = _builtin(RIGHTS_ADMIN)
        self.assertFalse(self.evaluator.can_see(descriptor, player(level=MODERATOR)))
        observer_only = _builtin(OBSERVER.rights_bit)
        self.assertTrue(self.evaluator.can_see(observer_only, player(level=OBSERVER)))
        self.assertFalse(self.evaluator.can_see(observer_only, player(level=ADMIN)))

    def test_unreadable_mask_fails_open(self) -> None:
        self.assertTrue(self.evaluator.can_see(_builtin("not-a-mask"), player(level=NONE)))
        self.assertTrue(self.evaluator.can_see(_builtin(object()), player(level=NONE)))

    def test_failing_access_resolution_fails_open_for_builtins(self) -> None:
        def _resolve(_caller):
            raise LookupError("session gone")

        evaluator = AccessEvaluator(resolve_access_level=_resolve, logger=QUIET_LOGGER)
        self.assertTrue(evaluator.can_see(_builtin(RIGHTS_ADMIN), player()))


class ExtensionRightsTests(unittest.TestCase):
    def test_priority_comparison_for_all_pairs(self) -> None:
        evaluator = AccessEvaluator(logger=QUIET_LOGGER)
        for required in STANDARD_LEVELS:
            descriptor = CommandDescriptor.from_extension("teleport", ExtensionCommandInfo("", required))
            for level in STANDARD_LEVELS:
                with self.subTest(caller=level.name, required=required.name):
                    self.assertEqual(
                        evaluator.can_see(descriptor, player(level=level)),
                        level.priority >= required.priority,
                    )

    def test_uses_injected_resolver(self) -> None:
        evaluator = AccessEvaluator(resolve_access_level=lambda _caller: ADMIN, logger=QUIET_LOGGER)
        descriptor = CommandDescriptor.from_extension("teleport", ExtensionCommandInfo("", ADMIN))
        self.assertTrue(evaluator.can_see(descriptor, player(level=NONE)))


if __name__ == "__main__":
    unittest.main()
