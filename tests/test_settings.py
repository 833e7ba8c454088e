import sys
from pathlib import Path
import os
import unittest
from dataclasses import replace
from unittest.mock import patch

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resumegen.ai.factory import get_text_generator
from resumegen.ai.providers.gemini_provider import GeminiProvider
from resumegen.ai.providers.openai_provider import OpenAIProvider
from resumegen.core.config import get_scoring_config, get_scoring_value, load_settings, settings, validate_settings


class ScoringConfigTests(unittest.TestCase):
    def test_loader_and_value_lookup(self):
        config = get_scoring_config()
        self.assertIsInstance(config, dict)
        self.assertEqual(get_scoring_value("ats.bands.complete.high"), 80)
        self.assertEqual(get_scoring_value("ats.missing.key", "fallback"), "fallback")

    def test_completeness_weights_sum_to_one(self):
        weights = get_scoring_value("ats.weights")
        self.assertAlmostEqual(sum(weights.values()), 1.0)


class SettingsTests(unittest.TestCase):
    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            loaded = load_settings()
        self.assertEqual(loaded.ai_daily_call_limit, 15)
        self.assertEqual(loaded.ai_breaker_failure_threshold, 3)
        self.assertEqual(loaded.ai_breaker_cooldown_s, 60.0)
        self.assertEqual(loaded.ai_timeout_resume_s, 25.0)
        self.assertEqual(loaded.ai_timeout_ats_s, 15.0)
        self.assertEqual(loaded.ai_max_attempts, 2)
        self.assertFalse(loaded.remote_path_configured)

    def test_placeholder_credential_disables_remote_path(self):
        with patch.dict(os.environ, {"OPENAI_API_KEY": "your_openai_key"}, clear=True):
            self.assertIsNone(load_settings().ai_credential)
        with patch.dict(os.environ, {"AI_PROVIDER": "gemini", "GEMINI_API_KEY": "g-123"}, clear=True):
            loaded = load_settings()
        self.assertEqual(loaded.ai_credential, "g-123")
        self.assertTrue(loaded.remote_path_configured)

    def test_invalid_numbers_fall_back_to_defaults(self):
        with patch.dict(os.environ, {"AI_DAILY_CALL_LIMIT": "lots", "AI_MIN_CALL_INTERVAL_S": "x"}, clear=True):
            loaded = load_settings()
        self.assertEqual(loaded.ai_daily_call_limit, 15)
        self.assertEqual(loaded.ai_min_call_interval_s, 1.0)

    def test_invalid_combinations_raise(self):
        with self.assertRaises(RuntimeError):
            validate_settings(replace(settings, ai_daily_call_limit=0))
        with self.assertRaises(RuntimeError):
            validate_settings(replace(settings, api_auth_mode="protected", api_key=None))
        with self.assertRaises(RuntimeError):
            validate_settings(replace(settings, ai_provider="claude"))


class GeneratorFactoryTests(unittest.TestCase):
    def test_no_generator_without_credential(self):
        self.assertIsNone(get_text_generator(replace(settings, ai_credential=None)))
        self.assertIsNone(get_text_generator(replace(settings, ai_enabled=False, ai_credential="sk-x")))

    def test_builds_configured_provider(self):
        openai_settings = replace(settings, ai_enabled=True, ai_provider="openai", ai_credential="sk-test")
        self.assertIsInstance(get_text_generator(openai_settings), OpenAIProvider)

        gemini_settings = replace(settings, ai_enabled=True, ai_provider="gemini", ai_credential="g-test")
        self.assertIsInstance(get_text_generator(gemini_settings), GeminiProvider)


if __name__ == "__main__":
    unittest.main()
