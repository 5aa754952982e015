import pytest
from pathlib import Path
from unittest.mock import patch
from keyprov.config import Config
from keyprov.errors import ConfigError


def test_config_defaults_when_file_missing(tmp_path):
    """Should return defaults when no config.yml is present"""
    with patch('keyprov.config.Path.home', return_value=tmp_path):
        config = Config.load()

    assert config.ssh_dir == tmp_path / '.ssh'
    assert config.log_file == tmp_path / '.keyprov' / 'keyprov.log'
    assert config.default_name == 'github-actions'
    assert config.keygen == 'ssh-keygen'


def test_config_loads_fields(tmp_path):
    config_file = tmp_path / 'config.yml'
    config_file.write_text(
        f'ssh_dir: {tmp_path / "keys"}\n'
        'default_name: ci-runner\n'
        'keygen: /usr/local/bin/ssh-keygen\n'
    )

    config = Config.load(config_file)

    assert config.ssh_dir == tmp_path / 'keys'
    assert config.default_name == 'ci-runner'
    assert config.keygen == '/usr/local/bin/ssh-keygen'


def test_config_expands_tilde(tmp_path):
    config_file = tmp_path / 'config.yml'
    config_file.write_text('ssh_dir: ~/custom-ssh\nlog_file: ~/logs/keyprov.log\n')

    with patch('pathlib.Path.home', return_value=tmp_path), \
            patch.dict('os.environ', {'HOME': str(tmp_path)}):
        config = Config.load(config_file)

    assert config.ssh_dir == tmp_path / 'custom-ssh'
    assert config.log_file == tmp_path / 'logs' / 'keyprov.log'


def test_config_empty_file(tmp_path):
    """An empty config file means defaults"""
    config_file = tmp_path / 'config.yml'
    config_file.write_text('')

    config = Config.load(config_file)

    assert config.default_name == 'github-actions'


def test_config_rejects_unknown_fields(tmp_path):
    """Should raise ConfigError for unrecognised fields"""
    config_file = tmp_path / 'config.yml'
    config_file.write_text('key_type: ed25519\n')

    with pytest.raises(ConfigError, match='Unknown'):
        Config.load(config_file)


def test_config_rejects_non_mapping(tmp_path):
    config_file = tmp_path / 'config.yml'
    config_file.write_text('- just\n- a list\n')

    with pytest.raises(ConfigError, match='mapping'):
        Config.load(config_file)


def test_config_rejects_malformed_yaml(tmp_path):
    config_file = tmp_path / 'config.yml'
    config_file.write_text('ssh_dir: [unclosed\n')

    with pytest.raises(ConfigError, match='Malformed'):
        Config.load(config_file)
