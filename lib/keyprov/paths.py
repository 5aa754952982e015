"""Key name resolution and SSH directory layout."""

import os
from dataclasses import dataclass
from pathlib import Path

from keyprov.config import DEFAULT_KEY_NAME
from keyprov.errors import FilesystemError

SSH_DIR_MODE = 0o700


@dataclass(frozen=True)
class KeyPaths:
    """Files touched by one provisioning run."""
    ssh_dir: Path
    private_key: Path
    public_key: Path
    authorized_keys: Path

    @classmethod
    def for_key(cls, ssh_dir: Path, key_name: str) -> 'KeyPaths':
        """Build the paths for a key named `key_name` inside `ssh_dir`.

        Example:
            >>> KeyPaths.for_key(Path('/home/me/.ssh'), 'deploy').public_key
            PosixPath('/home/me/.ssh/deploy.pub')
        """
        # Joined as text so an absolute name still lands inside ssh_dir
        private_key = Path(f"{ssh_dir}/{key_name}")
        return cls(
            ssh_dir=ssh_dir,
            private_key=private_key,
            public_key=Path(f"{private_key}.pub"),
            authorized_keys=ssh_dir / 'authorized_keys',
        )

    def overwrites_authorized_keys(self) -> bool:
        """True if either key file would resolve to the authorized_keys file."""
        target = self.authorized_keys.resolve()
        return target in (self.private_key.resolve(), self.public_key.resolve())


def resolve_key_name(raw: str, default: str = DEFAULT_KEY_NAME) -> str:
    """Return the trimmed input, or `default` when it is empty or whitespace."""
    name = (raw or '').strip()
    return name if name else default


def ensure_ssh_directory(ssh_dir: Path) -> bool:
    """Create the SSH directory (and parents) if it does not exist.

    Args:
        ssh_dir: Directory to create, readable only by the owner

    Returns:
        True if the directory was created, False if it already existed

    Raises:
        FilesystemError: If the directory cannot be created
    """
    if ssh_dir.is_dir():
        return False
    try:
        ssh_dir.mkdir(mode=SSH_DIR_MODE, parents=True, exist_ok=True)
        # mkdir's mode is filtered through the umask
        os.chmod(ssh_dir, SSH_DIR_MODE)
    except OSError as e:
        raise FilesystemError(f"Could not create {ssh_dir}: {e}") from e
    return True
