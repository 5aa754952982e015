"""Append public keys to an authorized_keys file."""

import os
from pathlib import Path

from keyprov.errors import FilesystemError

AUTHORIZED_KEYS_MODE = 0o600


def read_key_file(key_path: Path) -> str:
    """Read a key file in full.

    Raises:
        FilesystemError: If the file cannot be read
    """
    try:
        return key_path.read_text()
    except OSError as e:
        raise FilesystemError(f"Could not read {key_path}: {e}") from e


def get_public_key(public_key_path: Path) -> str:
    """Public key content without its trailing line terminator."""
    return read_key_file(public_key_path).rstrip('\r\n')


def _needs_leading_newline(authorized_keys: Path) -> bool:
    """True if the file is non-empty and its last line is unterminated."""
    try:
        size = authorized_keys.stat().st_size
    except FileNotFoundError:
        return False
    if size == 0:
        return False
    with open(authorized_keys, 'rb') as f:
        f.seek(-1, os.SEEK_END)
        return f.read(1) != b'\n'


def append_public_key(public_key_path: Path, authorized_keys: Path) -> str:
    """Append the key in `public_key_path` as one new line of `authorized_keys`.

    Existing entries are never rewritten. The file is created with mode 0600
    if it does not exist.

    Args:
        public_key_path: Path to the generated .pub file
        authorized_keys: Path to the authorized_keys file

    Returns:
        The public key line that was appended (without newline)

    Raises:
        FilesystemError: If the key cannot be read or the append fails
    """
    public_key = get_public_key(public_key_path)

    try:
        entry = public_key + '\n'
        # Check and append are separate syscalls; concurrent runs can interleave
        if _needs_leading_newline(authorized_keys):
            entry = '\n' + entry
        fd = os.open(authorized_keys, os.O_WRONLY | os.O_APPEND | os.O_CREAT, AUTHORIZED_KEYS_MODE)
        with open(fd, 'a') as f:
            f.write(entry)
    except OSError as e:
        raise FilesystemError(f"Could not append to {authorized_keys}: {e}") from e

    return public_key
