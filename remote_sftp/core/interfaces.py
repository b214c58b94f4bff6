"""
Core interfaces for dependency injection
"""
from abc import ABC, abstractmethod
from typing import Any, List, Optional


class SftpChannel(ABC):
    """SFTP channel interface.
    
    Paths are resolved relative to the channel's current directory.
    Every remote failure is raised as RemoteOperationError.
    """
    
    @abstractmethod
    def cd(self, path: str) -> None:
        """Change the current remote directory"""
        pass
    
    @abstractmethod
    def mkdir(self, path: str) -> None:
        """Create a remote directory"""
        pass
    
    @abstractmethod
    def pwd(self) -> str:
        """Return the current remote directory"""
        pass
    
    @abstractmethod
    def ls(self, path: str = ".") -> List[Any]:
        """List entries (with attributes) of a remote directory"""
        pass
    
    @abstractmethod
    def stat(self, path: str) -> Any:
        """Return attributes of a remote path"""
        pass
    
    @abstractmethod
    def get(self, remote_path: str, local_path: str) -> None:
        """Download a remote file"""
        pass
    
    @abstractmethod
    def put(self, local_path: str, remote_path: str) -> None:
        """Upload a local file, overwriting the remote one"""
        pass
    
    @abstractmethod
    def rm(self, path: str) -> None:
        """Remove a remote file"""
        pass
    
    @abstractmethod
    def rename(self, source: str, destination: str) -> None:
        """Rename a remote path"""
        pass
    
    @abstractmethod
    def close(self) -> None:
        """Close the channel"""
        pass


class Session(ABC):
    """SSH session interface"""
    
    @abstractmethod
    def set_config(self, key: str, value: str) -> None:
        """Set a session configuration value (applied on connect)"""
        pass
    
    @abstractmethod
    def get_config(self, key: str) -> Optional[str]:
        """Get a session configuration value"""
        pass
    
    @abstractmethod
    def set_password(self, password: Optional[str]) -> None:
        """Set the password used by password-based methods"""
        pass
    
    @abstractmethod
    def add_identity(self, key_path: str, passphrase: Optional[str] = None) -> None:
        """Register a private key for public key authentication"""
        pass
    
    @abstractmethod
    def connect(self, timeout: Optional[float] = None) -> None:
        """Connect and authenticate"""
        pass
    
    @abstractmethod
    def open_channel(self, kind: str) -> SftpChannel:
        """Open a channel of the given kind (only "sftp" is supported)"""
        pass
    
    @abstractmethod
    def disconnect(self) -> None:
        """Close the session"""
        pass
    
    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Whether the session is connected"""
        pass


class SessionFactory(ABC):
    """SSH session factory interface"""
    
    @abstractmethod
    def create(self, user: str, host: str, port: int) -> Session:
        """Create an unconnected session"""
        pass
