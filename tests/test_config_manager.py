"""
Tests for configuration management.
"""

from pathlib import Path

import pytest
import yaml

from interaction_checker.utils.config_manager import (
    BASE_DIR,
    DEFAULT_CONFIG_PATH,
    ConfigManager,
)


def test_defaults_without_file(tmp_path):
    """Test a missing config file falls back to defaults."""
    config = ConfigManager(tmp_path / "missing.yaml")

    assert config.get('openfda', 'limit') == 20
    assert config.get('openfda', 'timeout') == 5.0
    assert config.get('openfda', 'max_retries') == 0
    assert config.validate_config() == []


def test_shipped_config_is_valid():
    """Test the repository's config file loads and validates."""
    assert DEFAULT_CONFIG_PATH.exists()

    config = ConfigManager.from_default_path()

    assert config.validate_config() == []
    assert config.store_path() == BASE_DIR / 'data' / 'interactions.json'


def test_partial_file_merges_with_defaults(tmp_path):
    """Test a file overriding one key keeps every other default."""
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({'openfda': {'timeout': 2.5}}), encoding='utf-8')

    config = ConfigManager(path)

    assert config.get('openfda', 'timeout') == 2.5
    assert config.get('openfda', 'limit') == 20
    assert config.get('store', 'path') == 'data/interactions.json'


def test_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("", encoding='utf-8')

    config = ConfigManager(path)

    assert config.get_all_config() == ConfigManager.DEFAULT_CONFIG


def test_invalid_yaml_raises(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("openfda: [unclosed", encoding='utf-8')

    with pytest.raises(yaml.YAMLError):
        ConfigManager(path)


def test_unknown_parameter_raises_key_error():
    config = ConfigManager()

    with pytest.raises(KeyError):
        config.get('openfda', 'nope')
    with pytest.raises(KeyError):
        config.get_section('nope')


def test_store_path_absolute_kept(tmp_path):
    config = ConfigManager()
    config.config['store']['path'] = str(tmp_path / "x.json")

    assert config.store_path() == tmp_path / "x.json"


def test_api_key_from_environment(monkeypatch):
    """Test OPENFDA_API_KEY fills an unset api_key."""
    monkeypatch.setenv('OPENFDA_API_KEY', 'from-env')
    config = ConfigManager()

    assert config.openfda_settings()['api_key'] == 'from-env'

    config.config['openfda']['api_key'] = 'from-file'
    assert config.openfda_settings()['api_key'] == 'from-file'


def test_api_key_unset(monkeypatch):
    monkeypatch.delenv('OPENFDA_API_KEY', raising=False)

    assert ConfigManager().openfda_settings()['api_key'] is None


@pytest.mark.parametrize("section, name, value", [
    ('openfda', 'limit', 0),
    ('openfda', 'limit', 5000),
    ('openfda', 'limit', True),
    ('openfda', 'timeout', 0),
    ('openfda', 'timeout', "5"),
    ('openfda', 'max_retries', -1),
    ('openfda', 'calls_per_minute', 0),
    ('openfda', 'cache_max_entries', 0),
    ('store', 'path', ''),
    ('api', 'allow_origins', '*'),
])
def test_validate_config_reports_errors(section, name, value):
    config = ConfigManager()
    config.config[section][name] = value

    errors = config.validate_config()

    assert len(errors) == 1


def test_save_and_reload_roundtrip(tmp_path):
    config = ConfigManager()
    config.config['openfda']['limit'] = 50
    path = tmp_path / "nested" / "config.yaml"

    config.save_config(path)

    assert ConfigManager(path).get('openfda', 'limit') == 50


def test_save_without_path_raises():
    with pytest.raises(ValueError):
        ConfigManager().save_config()


def test_reset_to_defaults():
    config = ConfigManager()
    config.config['openfda']['limit'] = 1

    config.reset_to_defaults()

    assert config.get('openfda', 'limit') == 20


def test_get_section_returns_copy():
    config = ConfigManager()
    section = config.get_section('openfda')
    section['limit'] = 999

    assert config.get('openfda', 'limit') == 20


def test_default_config_not_mutated():
    config = ConfigManager()
    config.config['api']['allow_origins'].append('http://example.org')

    assert ConfigManager.DEFAULT_CONFIG['api']['allow_origins'] == ['*']
    assert isinstance(DEFAULT_CONFIG_PATH, Path)
