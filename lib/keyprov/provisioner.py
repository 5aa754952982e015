"""End-to-end key provisioning: directory, key pair, authorized_keys."""

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import click

from keyprov.authorized_keys import append_public_key, read_key_file
from keyprov.errors import FilesystemError, ProvisionError
from keyprov.event_log import EventLog
from keyprov.keygen import Runner, generate_key_pair, run_command
from keyprov.paths import KeyPaths, ensure_ssh_directory


@dataclass
class ProvisionResult:
    """What a successful run produced."""
    key_name: str
    paths: KeyPaths
    public_key: str
    private_key: str


class KeyProvisioner:
    """Generates a key pair and authorizes its public half.

    Example:
        provisioner = KeyProvisioner(Path.home() / '.ssh')
        result = provisioner.provision('github-actions')
        print(result.private_key)
    """

    def __init__(
        self,
        ssh_dir: Path,
        keygen: str = 'ssh-keygen',
        runner: Optional[Runner] = None,
        event_log: Optional[EventLog] = None,
        echo: Callable[[str], None] = click.echo,
    ):
        self.ssh_dir = ssh_dir
        self.keygen = keygen
        self.runner = runner or run_command
        self.event_log = event_log or EventLog(None)
        self.echo = echo

    def provision(self, key_name: str) -> ProvisionResult:
        """Run every step for `key_name`, stopping at the first failure.

        Raises:
            FilesystemError: Directory creation, read or append failed
            KeygenError: ssh-keygen is missing or failed
        """
        paths = KeyPaths.for_key(self.ssh_dir, key_name)
        self.event_log.log_event(f'Provisioning key {key_name!r} in {self.ssh_dir}')

        try:
            if paths.overwrites_authorized_keys():
                raise FilesystemError(
                    f"Key name {key_name!r} would overwrite {paths.authorized_keys}"
                )

            if ensure_ssh_directory(paths.ssh_dir):
                self.echo(f"Created directory: {paths.ssh_dir}")
                self.event_log.log_event(f'Created directory: {paths.ssh_dir}')

            generate_key_pair(paths.private_key, key_name,
                              executable=self.keygen, runner=self.runner)
            self.echo("SSH key generated successfully.")
            self.event_log.log_event(f'Generated key pair: {paths.private_key}')

            public_key = append_public_key(paths.public_key, paths.authorized_keys)
            self.echo("Public key added to authorized_keys.")
            self.event_log.log_event(f'Appended {paths.public_key} to {paths.authorized_keys}')

            private_key = read_key_file(paths.private_key)
        except ProvisionError as e:
            self.event_log.log_event(str(e), level='ERROR')
            raise

        return ProvisionResult(
            key_name=key_name,
            paths=paths,
            public_key=public_key,
            private_key=private_key,
        )
