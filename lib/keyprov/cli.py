#!/usr/bin/env python3
"""keyprov CLI - provision an SSH deploy key for CI."""

import sys
from pathlib import Path

import click

from keyprov.config import Config
from keyprov.errors import ConfigError, KeygenError, ProvisionError
from keyprov.event_log import EventLog
from keyprov.paths import resolve_key_name
from keyprov.provisioner import KeyProvisioner


@click.command()
@click.version_option(package_name='keyprov')
@click.option('--name', '-n', default=None,
              help='Key name (prompted for if omitted)')
@click.option('--ssh-dir', type=click.Path(file_okay=False, path_type=Path), default=None,
              help='SSH directory (default: ~/.ssh)')
@click.option('--config', 'config_file', type=click.Path(dir_okay=False, path_type=Path),
              default=None, help='Config file (default: ~/.keyprov/config.yml)')
def main(name, ssh_dir, config_file):
    """Generate an RSA key pair, authorize it, and print the private key."""
    try:
        config = Config.load(config_file)
    except ConfigError as e:
        click.secho(f"❌ {e}", fg='red')
        sys.exit(1)

    if ssh_dir is not None:
        config.ssh_dir = ssh_dir.expanduser()

    if name is None:
        name = click.prompt(
            f"Enter the name you want to use for the SSH key (default: {config.default_name})",
            default='', show_default=False,
        )
    key_name = resolve_key_name(name, config.default_name)

    provisioner = KeyProvisioner(
        config.ssh_dir,
        keygen=config.keygen,
        event_log=EventLog(config.log_file),
    )

    try:
        result = provisioner.provision(key_name)
    except KeygenError as e:
        click.secho(f"❌ {e}", fg='red')
        sys.exit(1)
    except ProvisionError as e:
        click.secho(f"❌ Error: {e}", fg='red')
        sys.exit(1)

    click.echo("\n" + "=" * 60)
    click.echo("🔑 Private key to add to GitHub Secrets:")
    click.echo("=" * 60)
    click.echo(result.private_key, nl=not result.private_key.endswith('\n'))
    click.echo("=" * 60)


if __name__ == '__main__':
    main()
