import unittest

from luck_table.models import CatalogueError, LuckPolicy, Outcome, TableConfig


class OutcomeTestCase(unittest.TestCase):
    def test_valid(self):
        o = Outcome(40, "Rare")
        self.assertEqual(o.odds, 40)
        self.assertEqual(o.rarity, "Rare")

    def test_invalid(self):
        for odds, rarity in ((0, "Common"), (-5, "Rare"), (float("nan"), "Epic"),
                             (float("inf"), "Epic"), ("10", "Common"), (True, "Common"),
                             (10, "Uncommon")):
            with self.assertRaises(CatalogueError):
                Outcome(odds, rarity)


class LuckPolicyTestCase(unittest.TestCase):
    def test_case_7(self):
        policy = LuckPolicy()
        self.assertEqual(policy.name, "Case 7")
        self.assertEqual(policy.multiplier(0), 3.5)
        self.assertEqual(policy.multiplier(2000), 4.5)

    def test_floors_partial_percent(self):
        policy = LuckPolicy()
        self.assertEqual(policy.player_percent(19), 0.0)
        self.assertEqual(policy.player_percent(20), 0.01)
        self.assertEqual(policy.multiplier(39), policy.multiplier(20))

    def test_custom(self):
        policy = LuckPolicy(name="Plain", crate_bonus=0.0, luck_per_percent=10)
        self.assertEqual(policy.multiplier(0), 1.0)
        self.assertEqual(policy.multiplier(1000), 2.0)

    def test_invalid(self):
        with self.assertRaises(CatalogueError):
            LuckPolicy(luck_per_percent=0)
        for bad in (float("nan"), float("inf"), 2.5, "20", True):
            with self.assertRaises(CatalogueError, msg=repr(bad)):
                LuckPolicy(luck_per_percent=bad)
        with self.assertRaises(CatalogueError):
            LuckPolicy(crate_bonus=float("inf"))


class TableConfigTestCase(unittest.TestCase):
    def test_defaults(self):
        config = TableConfig()
        self.assertEqual(len(config.catalogue), 23)
        self.assertEqual(config.multipliers[0], 1)
        self.assertEqual(config.multipliers[-1], 50)
        self.assertEqual(len(config.multipliers), 15)
        self.assertEqual(config.player_luck[-1], 5000)
        self.assertEqual(len(config.player_luck), 13)
        self.assertEqual(config.policy, LuckPolicy())
