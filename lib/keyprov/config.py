"""Load keyprov configuration from config.yml."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from keyprov.errors import ConfigError

KNOWN_FIELDS = {'ssh_dir', 'default_name', 'keygen', 'log_file'}

DEFAULT_KEY_NAME = 'github-actions'


def default_config_dir() -> Path:
    return Path.home() / '.keyprov'


@dataclass
class Config:
    """User configuration; every field falls back to a sensible default."""
    ssh_dir: Path
    log_file: Path
    default_name: str = DEFAULT_KEY_NAME
    keygen: str = 'ssh-keygen'

    @classmethod
    def defaults(cls) -> 'Config':
        return cls(
            ssh_dir=Path.home() / '.ssh',
            log_file=default_config_dir() / 'keyprov.log',
        )

    @classmethod
    def load(cls, config_file: Optional[Path] = None) -> 'Config':
        """Load config.yml, returning defaults if the file is not present.

        Args:
            config_file: Explicit path; defaults to ~/.keyprov/config.yml

        Raises:
            ConfigError: If the file is not a mapping or has unknown fields
        """
        config = cls.defaults()
        if config_file is None:
            config_file = default_config_dir() / 'config.yml'
        if not config_file.exists():
            return config

        try:
            with open(config_file, encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Malformed {config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{config_file} must contain a mapping")

        unknown = set(data.keys()) - KNOWN_FIELDS
        if unknown:
            raise ConfigError(f"Unknown config field(s): {', '.join(sorted(unknown))}")

        if data.get('ssh_dir'):
            config.ssh_dir = Path(str(data['ssh_dir'])).expanduser()
        if data.get('log_file'):
            config.log_file = Path(str(data['log_file'])).expanduser()
        if data.get('default_name'):
            config.default_name = str(data['default_name'])
        if data.get('keygen'):
            config.keygen = str(data['keygen'])
        return config
