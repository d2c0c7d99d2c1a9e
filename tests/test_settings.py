"""
Tests for Settings
==================
Tests for the YAML settings loader in onamer/settings.py.
"""

import pytest
import sys
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from onamer import settings
from onamer.settings import APP_CONFIG_PATH, CONFIG_ENV_VAR, config_path, get_setting, load_app_config


@pytest.fixture
def fresh_config(monkeypatch):
    """Clear the settings cache before and after a test."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    load_app_config.cache_clear()
    yield
    load_app_config.cache_clear()


class TestBundledConfig:
    """Tests against configs/app.yaml."""

    def test_file_exists(self):
        assert APP_CONFIG_PATH.exists()

    def test_generation_defaults(self, fresh_config):
        assert get_setting('generation.language') == 'english'
        assert get_setting('generation.count') == 10
        assert get_setting('generation.min_syllables') == 2
        assert get_setting('generation.max_syllables') == 3

    def test_analysis_defaults(self, fresh_config):
        assert get_setting('analysis.hand_balance') is False
        assert get_setting('analysis.smoothness') is False

    def test_missing_key_default(self, fresh_config):
        assert get_setting('generation.nope', 'fallback') == 'fallback'
        assert get_setting('nope.deeper.still') is None

    def test_path_through_scalar(self, fresh_config):
        assert get_setting('generation.count.value', 'x') == 'x'


class TestConfigOverride:
    """Tests for the ONAMER_CONFIG override."""

    def test_env_override(self, fresh_config, monkeypatch, tmp_path):
        custom = tmp_path / 'custom.yaml'
        custom.write_text("generation:\n  count: 3\n  language: japanese\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(custom))
        load_app_config.cache_clear()

        assert config_path() == custom.resolve()
        assert get_setting('generation.count') == 3
        assert get_setting('generation.language') == 'japanese'
        assert get_setting('generation.min_syllables', 2) == 2

    def test_missing_override(self, fresh_config, monkeypatch, tmp_path):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / 'missing.yaml'))
        load_app_config.cache_clear()
        with pytest.raises(FileNotFoundError):
            settings.load_app_config()

    def test_empty_file(self, fresh_config, monkeypatch, tmp_path):
        empty = tmp_path / 'empty.yaml'
        empty.write_text('')
        monkeypatch.setenv(CONFIG_ENV_VAR, str(empty))
        load_app_config.cache_clear()
        assert load_app_config() == {}
        assert get_setting('generation.count', 7) == 7
