"""
Core infrastructure layer
"""
from .client import SFTPClient, ClientConfig, FileType
from .constants import *
from .exceptions import *
from .logging import setup_logging, get_logger
from .interfaces import Session, SessionFactory, SftpChannel
from .auth import build_preferred_authentications, configure, resolve_gssapi_flag
from .paths import split_remote_path

__all__ = [
    "SFTPClient",
    "ClientConfig",
    "FileType",
    "setup_logging",
    "get_logger",
    "Session",
    "SessionFactory",
    "SftpChannel",
    "build_preferred_authentications",
    "configure",
    "resolve_gssapi_flag",
    "split_remote_path",
]
