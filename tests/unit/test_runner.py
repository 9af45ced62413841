"""
Tests for the command line runner.
"""
import json

import pytest

from geohash_index.runner import main, build_parser, COMMANDS


def _last_line(capsys):
    return capsys.readouterr().out.strip().splitlines()[-1]


class TestParser:
    """Tests for argument parsing."""

    def test_commands_registered(self):
        assert set(COMMANDS) == {'encode', 'decode', 'neighbors', 'circle'}

    def test_command_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    def test_circle_options_exclusive(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(['circle', 'drt2', '--radius-km', '5', '--expand', '2'])

    def test_negative_longitude_positional(self):
        args = build_parser().parse_args(['encode', '42.350072', '-71.047656'])
        assert args.longitude == pytest.approx(-71.047656)


class TestCommands:
    """Tests for each subcommand's output."""

    def test_encode(self, capsys):
        assert main(['encode', '42.350072', '-71.047656', '--precision', '12']) == 0
        assert _last_line(capsys) == 'drt2zm8ej9eg'

    def test_encode_default_precision(self, capsys):
        assert main(['encode', '0', '0']) == 0
        assert _last_line(capsys) == 's0000000'

    def test_decode(self, capsys):
        assert main(['decode', 'S']) == 0
        payload = json.loads(_last_line(capsys))

        assert payload['geohash'] == 's'
        assert payload['latitude'] == 22.5
        assert payload['longitude'] == 22.5
        assert payload['box'] == {'north': 45.0, 'south': 0.0, 'east': 45.0, 'west': 0.0}

    def test_neighbors(self, capsys):
        assert main(['neighbors', 'drt2zm8']) == 0
        payload = json.loads(_last_line(capsys))

        assert payload['n'] == 'drt2zmb'
        assert set(payload) == {'n', 's', 'e', 'w', 'ne', 'nw', 'se', 'sw'}

    def test_neighbors_at_pole(self, capsys):
        assert main(['neighbors', 'z']) == 0
        payload = json.loads(_last_line(capsys))
        assert payload['n'] is None
        assert payload['e'] == 'b'

    def test_circle_radius(self, capsys):
        assert main(['circle', 'drt2zm8ej9eg', '--radius-km', '5']) == 0
        payload = json.loads(_last_line(capsys))

        assert payload['center_geohash'] == 'drt2zm8ej9eg'
        assert payload['max_radius_km'] >= 5.0
        assert payload['region'][0] == 'drt2zm8ej9eg'[:payload['precision']]
        assert all(len(member) == 2 for member in payload['region'][1:])

    def test_circle_expand(self, capsys):
        assert main(['circle', 'drt2zm8ej9eg', '--expand', '2']) == 0
        payload = json.loads(_last_line(capsys))
        assert payload['precision'] == 10

    def test_circle_without_radius(self, capsys):
        assert main(['circle', 'drt2zm8ej9eg']) == 0
        payload = json.loads(_last_line(capsys))
        assert payload['precision'] == 12
        assert payload['region'] == ['drt2zm8ej9eg']


class TestFailures:
    """Tests for exit codes on bad input."""

    def test_invalid_geohash(self):
        assert main(['decode', 'drta']) == 1

    def test_out_of_range(self):
        assert main(['encode', '95', '0']) == 1

    def test_missing_config(self, tmp_path):
        assert main(['--config', str(tmp_path / 'missing.yaml'), 'encode', '0', '0']) == 1

    def test_invalid_config(self, tmp_path):
        config_file = tmp_path / 'bad.yaml'
        config_file.write_text('codec:\n  default_precision: 20\n')
        assert main(['--config', str(config_file), 'encode', '0', '0']) == 1


class TestConfigDefaults:
    """Tests for values taken from the config file."""

    def test_default_precision_from_config(self, tmp_path, capsys):
        config_file = tmp_path / 'geohash.yaml'
        config_file.write_text('codec:\n  default_precision: 5\n')

        assert main(['--config', str(config_file), 'encode', '42.350072', '-71.047656']) == 0
        assert _last_line(capsys) == 'drt2z'

    def test_default_radius_from_config(self, tmp_path, capsys):
        config_file = tmp_path / 'geohash.yaml'
        config_file.write_text('circle:\n  default_radius_km: 5.0\n  expand_step: 1\n')

        assert main(['--config', str(config_file), 'circle', 'drt2zm8ej9eg']) == 0
        payload = json.loads(_last_line(capsys))
        assert payload['max_radius_km'] >= 5.0
