import json
import os
import tempfile
import unittest

from luck_table.io.loader import Loader
from luck_table.io.sources import DictSource, FileSource
from luck_table.models import CatalogueError, LuckPolicy, Outcome, TableConfig


class LoaderTestCase(unittest.TestCase):
    def setUp(self):
        self.loader = Loader()

    def test_no_source(self):
        self.assertEqual(self.loader.load_config(None), TableConfig())

    def test_empty_document_keeps_defaults(self):
        self.assertEqual(self.loader.load_config(DictSource({})), TableConfig())

    def test_overrides(self):
        config = self.loader.load_config(DictSource({
            "outcomes": [{"odds": 2, "rarity": "Common"}, {"odds": 4, "rarity": "Rare"}],
            "multipliers": [1, 2],
            "player_luck": [0, 40],
            "policy": {"name": "Case 9", "crate_bonus": "300%"},
        }))
        self.assertEqual(config.catalogue, (Outcome(2.0, "Common"), Outcome(4.0, "Rare")))
        self.assertEqual(config.multipliers, (1.0, 2.0))
        self.assertEqual(config.player_luck, (0.0, 40.0))
        self.assertEqual(config.policy, LuckPolicy(name="Case 9", crate_bonus=3.0))

    def test_numeric_crate_bonus(self):
        config = self.loader.load_config(DictSource({"policy": {"crate_bonus": 1.5}}))
        self.assertEqual(config.policy.crate_bonus, 1.5)
        self.assertEqual(config.policy.name, "Case 7")

    def test_invalid_documents(self):
        bad = [
            [],
            {"outcomes": []},
            {"outcomes": [{"odds": 0, "rarity": "Common"}]},
            {"outcomes": [{"odds": 5, "rarity": "Uncommon"}]},
            {"outcomes": [{"odds": 5}]},
            {"multipliers": [1, float("nan")]},
            {"policy": {"crate_bonus": "lots"}},
            {"policy": {"luck_per_percent": 0}},
            {"unexpected": 1},
        ]
        for doc in bad:
            with self.assertRaises(CatalogueError, msg=repr(doc)):
                self.loader.load_config(DictSource(doc))

    def test_file_source(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "table.json")
            with open(path, "w", encoding="utf-8") as f:
                json.dump({"player_luck": [0, 2000]}, f)
            for source in (path, FileSource(path)):
                config = self.loader.load_config(source)
                self.assertEqual(config.player_luck, (0.0, 2000.0))
                self.assertEqual(len(config.catalogue), 23)

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(FileNotFoundError):
                self.loader.load_config(os.path.join(tmp, "nope.json"))

    def test_malformed_json(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "table.json")
            with open(path, "w", encoding="utf-8") as f:
                f.write("{not json")
            with self.assertRaises(CatalogueError):
                self.loader.load_config(path)

    def test_with_crate_bonus(self):
        config = TableConfig()
        self.assertIs(self.loader.with_crate_bonus(config, None), config)
        boosted = self.loader.with_crate_bonus(config, 3.0)
        self.assertEqual(boosted.policy.crate_bonus, 3.0)
        self.assertEqual(boosted.policy.multiplier(0), 4.0)
        self.assertEqual(config.policy.crate_bonus, 2.5)
