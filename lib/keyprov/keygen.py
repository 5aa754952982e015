"""RSA key pair generation via ssh-keygen."""

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

from keyprov.errors import KeygenError

KEY_TYPE = 'rsa'
KEY_BITS = 4096


@dataclass
class CommandResult:
    """Outcome of an external command."""
    args: List[str]
    returncode: int
    stdout: str = ''
    stderr: str = ''

    @property
    def ok(self) -> bool:
        return self.returncode == 0


Runner = Callable[..., CommandResult]


def run_command(args: List[str], input_text: Optional[str] = None) -> CommandResult:
    """Run `args` to completion, capturing its output.

    Raises:
        FileNotFoundError: If the executable does not exist
    """
    result = subprocess.run(
        args,
        input=input_text,
        capture_output=True,
        text=True,
        check=False,
    )
    return CommandResult(
        args=list(args),
        returncode=result.returncode,
        stdout=result.stdout or '',
        stderr=result.stderr or '',
    )


def keygen_args(key_path: Path, comment: str, executable: str = 'ssh-keygen') -> List[str]:
    return [
        executable,
        '-t', KEY_TYPE,
        '-b', str(KEY_BITS),
        '-C', comment,
        '-f', str(key_path),
        '-N', '',  # No passphrase
    ]


def generate_key_pair(
    key_path: Path,
    comment: str,
    executable: str = 'ssh-keygen',
    runner: Runner = run_command,
) -> CommandResult:
    """Generate an RSA keypair with ssh-keygen.

    An existing key at `key_path` is overwritten: the overwrite prompt
    ssh-keygen shows is answered with 'y'.

    Args:
        key_path: Path where private key will be saved (public key gets .pub suffix)
        comment: Key comment, usually the key name
        executable: Key-generation command to run
        runner: Callable used to execute the command

    Raises:
        KeygenError: If the command is missing or exits non-zero
    """
    args = keygen_args(key_path, comment, executable)
    try:
        result = runner(args, input_text='y\n')
    except FileNotFoundError as e:
        raise KeygenError(f"{executable} not found on PATH") from e
    except OSError as e:
        raise KeygenError(f"Failed to start {executable}: {e}") from e

    if not result.ok:
        stderr = result.stderr.strip()
        raise KeygenError(
            f"Error generating SSH key: {stderr or f'exit status {result.returncode}'}",
            returncode=result.returncode,
            stderr=result.stderr,
        )
    return result
