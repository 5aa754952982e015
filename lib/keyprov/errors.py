"""Errors raised while provisioning a key pair."""

from typing import Optional


class ProvisionError(RuntimeError):
    """Base class for failures that abort a provisioning run."""


class FilesystemError(ProvisionError):
    """Creating, reading or appending to a file or directory failed."""


class KeygenError(ProvisionError):
    """The key-generation command was missing or exited non-zero."""

    def __init__(self, message: str, returncode: Optional[int] = None, stderr: str = ''):
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class ConfigError(ValueError):
    """The configuration file is malformed or has unknown fields."""
