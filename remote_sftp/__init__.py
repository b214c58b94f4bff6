"""
remote_sftp - thin SFTP client over SSH

Provides a small client around a single SFTP session, supporting:
- Preferred authentication ordering (optional GSSAPI via userauth.gssapi.enabled)
- Password, private key and GSSAPI login
- Idempotent creation of nested remote folders
- Basic file operations (get, put, delete, rename, listing)
"""

__version__ = "0.1.0"

# Export core components
from .core import (
    SFTPClient,
    ClientConfig,
    FileType,
    setup_logging,
    build_preferred_authentications,
    resolve_gssapi_flag,
    split_remote_path,
)

from .core.exceptions import (
    RemoteError,
    ConfigError,
    ConnectionError,
    AuthenticationError,
    RemoteOperationError,
    NoSuchFileError,
)

from .adapters.config import ConfigLoader

__all__ = [
    # Version
    "__version__",
    # Client
    "SFTPClient",
    "ClientConfig",
    "FileType",
    # Utilities
    "setup_logging",
    "build_preferred_authentications",
    "resolve_gssapi_flag",
    "split_remote_path",
    "ConfigLoader",
    # Errors
    "RemoteError",
    "ConfigError",
    "ConnectionError",
    "AuthenticationError",
    "RemoteOperationError",
    "NoSuchFileError",
]
