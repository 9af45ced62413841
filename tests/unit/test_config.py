"""
Tests for configuration loading and validation.
"""
from pathlib import Path

import pytest

from geohash_index.utils.config import (
    CodecSettings,
    CircleSettings,
    LoggingSettings,
    GeohashIndexConfig,
    load_config,
    get_default_config,
)
from geohash_index.utils.exceptions import ConfigurationError


REPO_CONFIG = Path(__file__).resolve().parents[2] / 'config' / 'geohash.yaml'


def test_default_config():
    """Test default configuration values."""
    config = get_default_config()

    assert isinstance(config, GeohashIndexConfig)
    assert config.codec.default_precision == 8
    assert config.circle.expand_step == 1
    assert config.circle.default_radius_km is None
    assert config.logging.level == 'INFO'
    assert config.logging.json_output is False
    assert config.logging.log_file is None


def test_load_repo_config():
    """The sample config shipped with the repo should load."""
    config = load_config(REPO_CONFIG)

    assert config.codec.default_precision == 8
    assert config.circle.default_radius_km == 5.0


def test_load_config_from_file(tmp_path):
    config_file = tmp_path / 'geohash.yaml'
    config_file.write_text(
        'codec:\n'
        '  default_precision: 6\n'
        'circle:\n'
        '  expand_step: 2\n'
        'logging:\n'
        '  level: debug\n'
        '  json_output: true\n'
    )

    config = load_config(config_file)

    assert config.codec.default_precision == 6
    assert config.circle.expand_step == 2
    assert config.logging.level == 'DEBUG'
    assert config.logging.json_output is True


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / 'missing.yaml')


def test_empty_config_file(tmp_path):
    """An empty file gives the defaults."""
    config_file = tmp_path / 'empty.yaml'
    config_file.write_text('')

    assert load_config(config_file) == get_default_config()


def test_non_mapping_config(tmp_path):
    config_file = tmp_path / 'list.yaml'
    config_file.write_text('- codec\n- circle\n')

    with pytest.raises(ConfigurationError, match='mapping'):
        load_config(config_file)


def test_malformed_yaml(tmp_path):
    config_file = tmp_path / 'broken.yaml'
    config_file.write_text('codec: [unclosed\n')

    with pytest.raises(ConfigurationError, match='Malformed'):
        load_config(config_file)


def test_invalid_values_raise_configuration_error(tmp_path):
    config_file = tmp_path / 'bad.yaml'
    config_file.write_text('codec:\n  default_precision: 13\n')

    with pytest.raises(ConfigurationError, match='Invalid config'):
        load_config(config_file)


def test_log_file_env_expansion(tmp_path, monkeypatch):
    """Environment variables in log_file are expanded."""
    monkeypatch.setenv('GEOHASH_LOG_DIR', str(tmp_path))
    config_file = tmp_path / 'geohash.yaml'
    config_file.write_text('logging:\n  log_file: ${GEOHASH_LOG_DIR}/geohash.log\n')

    config = load_config(config_file)

    assert config.logging.log_file == tmp_path / 'geohash.log'


class TestSettingsValidation:
    """Tests for field bounds on the settings models."""

    @pytest.mark.parametrize("precision", [0, 13])
    def test_precision_bounds(self, precision):
        with pytest.raises(ValueError):
            CodecSettings(default_precision=precision)

    def test_precision_limits_accepted(self):
        assert CodecSettings(default_precision=1).default_precision == 1
        assert CodecSettings(default_precision=12).default_precision == 12

    def test_expand_step_positive(self):
        with pytest.raises(ValueError):
            CircleSettings(expand_step=0)

    def test_radius_positive(self):
        with pytest.raises(ValueError):
            CircleSettings(default_radius_km=0.0)

    def test_log_level_normalised(self):
        assert LoggingSettings(level='warning').level == 'WARNING'

    def test_log_level_invalid(self):
        with pytest.raises(ValueError):
            LoggingSettings(level='verbose')
