"""
Tests for the JSON settings file.
"""
import json
import os

import pytest

from utils.config import DEFAULT_CONFIG, get_config_path, load_config, save_config


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    path = tmp_path / 'settings' / 'config.json'
    monkeypatch.setenv('RUNSNAP_CONFIG', str(path))
    return path


class TestConfig:

    def test_env_override(self, config_path):
        assert get_config_path() == str(config_path)

    def test_default_location(self, monkeypatch):
        monkeypatch.delenv('RUNSNAP_CONFIG', raising=False)
        assert get_config_path().endswith('.runsnap' + os.sep + 'config.json')

    def test_missing_file_gives_defaults(self, config_path):
        assert load_config() == DEFAULT_CONFIG

    def test_defaults_not_shared(self, config_path):
        config = load_config()
        config['show_emojis'] = False
        assert DEFAULT_CONFIG['show_emojis'] is True

    def test_malformed_file_gives_defaults(self, config_path, caplog):
        config_path.parent.mkdir(parents=True)
        config_path.write_text('{not json', encoding='utf-8')
        assert load_config() == DEFAULT_CONFIG
        assert 'unreadable' in caplog.text

    def test_non_object_gives_defaults(self, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text('[1, 2]', encoding='utf-8')
        assert load_config() == DEFAULT_CONFIG

    def test_unknown_keys_dropped(self, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text(json.dumps({'jpeg_quality': 70, 'theme': 'dark'}), encoding='utf-8')
        config = load_config()
        assert config['jpeg_quality'] == 70
        assert 'theme' not in config

    def test_save_then_load(self, config_path):
        config = load_config()
        config['default_filter'] = 'vivid'
        config['date_format'] = '{month}월 {day}일'

        assert save_config(config) == str(config_path)
        assert config_path.exists()

        reloaded = load_config()
        assert reloaded['default_filter'] == 'vivid'
        assert reloaded['date_format'] == '{month}월 {day}일'

    def test_explicit_path(self, tmp_path):
        path = str(tmp_path / 'other.json')
        save_config({'jpeg_quality': 80}, path)
        assert load_config(path)['jpeg_quality'] == 80
        assert load_config(path)['show_emojis'] is True
