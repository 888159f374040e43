"""
Unit Tests for settings validation and loading
"""

import json
import tempfile
import unittest
import sys
from pathlib import Path

from pydantic import ValidationError

# Add the project root to the Python path
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from parking_allocator.config import AllocatorSettings, load_settings
from parking_allocator.domain.models import VehicleCategory
from parking_allocator.domain.strategies import SpotSelectionStrategyType


class TestAllocatorSettings(unittest.TestCase):

    def test_defaults(self):
        settings = AllocatorSettings()

        self.assertEqual(
            settings.spot_prices,
            {VehicleCategory.TWO: 50, VehicleCategory.FOUR: 100}
        )
        self.assertIs(settings.default_strategy, SpotSelectionStrategyType.NEAREST_TO_GATE)
        self.assertFalse(settings.strict)
        self.assertEqual(settings.log_level, "INFO")

    def test_prices_keyed_by_category_value(self):
        settings = AllocatorSettings.from_dict({"spot_prices": {"two": 30, "four": 60}})
        self.assertEqual(settings.spot_prices[VehicleCategory.FOUR], 60)

    def test_missing_category_price_rejected(self):
        with self.assertRaises(ValidationError):
            AllocatorSettings(spot_prices={"two": 30})

    def test_non_positive_price_rejected(self):
        with self.assertRaises(ValidationError):
            AllocatorSettings(spot_prices={"two": 0, "four": 100})

    def test_strategy_by_name(self):
        settings = AllocatorSettings(default_strategy="first_available")
        self.assertIs(settings.default_strategy, SpotSelectionStrategyType.FIRST_AVAILABLE)

    def test_unknown_strategy_rejected(self):
        with self.assertRaises(ValidationError):
            AllocatorSettings(default_strategy="cheapest")

    def test_log_level_normalised(self):
        self.assertEqual(AllocatorSettings(log_level="debug").log_level, "DEBUG")

    def test_unknown_log_level_rejected(self):
        with self.assertRaises(ValidationError):
            AllocatorSettings(log_level="chatty")

    def test_settings_are_frozen(self):
        settings = AllocatorSettings()
        with self.assertRaises(ValidationError):
            settings.strict = True


class TestLoadSettings(unittest.TestCase):

    def test_load_from_json_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "settings.json"
            path.write_text(json.dumps({
                "default_strategy": "first_available",
                "strict": True,
                "spot_prices": {"two": 10, "four": 20}
            }))

            settings = load_settings(path)

        self.assertTrue(settings.strict)
        self.assertIs(settings.default_strategy, SpotSelectionStrategyType.FIRST_AVAILABLE)
        self.assertEqual(settings.spot_prices[VehicleCategory.TWO], 10)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_settings("/nonexistent/settings.json")


if __name__ == '__main__':
    unittest.main()
