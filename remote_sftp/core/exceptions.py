"""
Unified exception definitions
"""


class RemoteError(Exception):
    """Base exception class"""
    pass


class ConfigError(RemoteError):
    """Configuration error"""
    pass


class ConnectionError(RemoteError):
    """Connection error"""
    pass


class AuthenticationError(ConnectionError):
    """No preferred authentication method succeeded"""
    pass


class RemoteOperationError(RemoteError):
    """A remote SFTP operation (cd, mkdir, ...) failed"""
    pass


class NoSuchFileError(RemoteOperationError):
    """Remote path does not exist"""
    pass
