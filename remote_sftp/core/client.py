from __future__ import annotations
import stat
from dataclasses import dataclass
from enum import Enum
from typing import List, Mapping, Optional

from .auth import configure, resolve_gssapi_flag
from .constants import (
    COMPRESSION_C2S,
    COMPRESSION_OFF,
    COMPRESSION_ON,
    COMPRESSION_S2C,
    DEFAULT_SSH_PORT,
    DEFAULT_SSH_TIMEOUT,
    SFTP_CHANNEL,
)
from .exceptions import ConnectionError, NoSuchFileError, RemoteOperationError
from .interfaces import Session, SessionFactory, SftpChannel
from .logging import get_logger
from .paths import split_remote_path
from ..adapters.config.loader import ConfigLoader
from ..infrastructure.paramiko_session import ParamikoSessionFactory

logger = get_logger(__name__)


@dataclass
class ClientConfig:
    host: str
    user: str
    port: int = DEFAULT_SSH_PORT
    private_key_path: Optional[str] = None
    passphrase: Optional[str] = None
    timeout: float = DEFAULT_SSH_TIMEOUT
    gssapi_enabled: bool = False


class FileType(Enum):
    FILE = "file"
    FOLDER = "folder"
    IMAGINARY = "imaginary"


class SFTPClient:
    """
    SFTP client over a single SSH session and channel:
    - configures preferred authentications before any login
    - supports password and private key login
    - create_folder() builds missing directories segment by segment
    - supports with context management
    """
    def __init__(
        self,
        host: str,
        port: int,
        user: str,
        private_key_path: Optional[str] = None,
        passphrase: Optional[str] = None,
        *,
        timeout: float = DEFAULT_SSH_TIMEOUT,
        settings: Optional[Mapping[str, str]] = None,
        gssapi_enabled: Optional[bool] = None,
        session_factory: Optional[SessionFactory] = None,
    ) -> None:
        """
        Create the session and apply its authentication preferences.

        Args:
            host: Server address
            port: SSH port, non-positive values fall back to 22
            user: Login name
            private_key_path: Optional private key for publickey auth
            passphrase: Passphrase of the private key
            timeout: Connect timeout in seconds
            settings: Settings mapping the GSSAPI flag is read from;
                loaded from the environment when omitted
            gssapi_enabled: Explicit GSSAPI flag, overrides settings
            session_factory: Session factory, paramiko-backed by default

        Raises:
            ConfigError: If the private key cannot be loaded
        """
        if not port or port <= 0:
            port = DEFAULT_SSH_PORT

        if gssapi_enabled is None:
            if settings is None:
                settings = ConfigLoader().load_settings()
            gssapi_enabled = resolve_gssapi_flag(settings)

        self.config = ClientConfig(
            host=host,
            user=user,
            port=port,
            private_key_path=private_key_path,
            passphrase=passphrase,
            timeout=timeout,
            gssapi_enabled=gssapi_enabled,
        )

        factory = session_factory or ParamikoSessionFactory()
        self.session: Session = factory.create(user, host, port)
        self._channel: Optional[SftpChannel] = None

        if private_key_path:
            self.session.add_identity(private_key_path, passphrase)

        configure(self.session, gssapi_enabled)

    # --------------------
    # Connection management
    # --------------------
    def login(self, password: Optional[str] = None) -> None:
        """Connect the session and open the SFTP channel"""
        cfg = self.config
        if self._channel is not None or self.session.is_connected:
            self.disconnect()

        self.session.set_password(password)
        self.session.connect(timeout=cfg.timeout)
        try:
            self._channel = self.session.open_channel(SFTP_CHANNEL)
        except Exception:
            self._disconnect_session()
            raise
        logger.info("Connected to %s@%s:%d", cfg.user, cfg.host, cfg.port)

    def set_compression(self, enabled: bool) -> None:
        """Toggle zlib compression; takes effect on the next login"""
        value = COMPRESSION_ON if enabled else COMPRESSION_OFF
        self.session.set_config(COMPRESSION_S2C, value)
        self.session.set_config(COMPRESSION_C2S, value)

    @property
    def channel(self) -> SftpChannel:
        if self._channel is None:
            raise ConnectionError("SFTP channel is not connected, call login() first")
        return self._channel

    def disconnect(self) -> None:
        """Close channel and session; safe to call more than once"""
        if self._channel is not None:
            try:
                self._channel.close()
            except Exception as e:
                logger.warning("Failed to close SFTP channel: %s", e)
            self._channel = None
        self._disconnect_session()

    def _disconnect_session(self) -> None:
        try:
            self.session.disconnect()
        except Exception as e:
            logger.warning("Failed to close SSH session: %s", e)

    # --------------------
    # Directory handling
    # --------------------
    def create_folder(self, path: str) -> None:
        """
        Ensure every directory of ``path`` exists, creating missing ones.

        Segments are entered one by one with cd, relative to the
        current directory; a segment whose cd fails is created and
        then entered. The channel stays in the deepest directory.
        A root-only or empty path does nothing.

        Args:
            path: Directory path, "/" and "\\" both act as separators

        Raises:
            RemoteOperationError: If mkdir (or cd after mkdir) fails
        """
        segments = split_remote_path(path)
        if not segments:
            return

        channel = self.channel
        for segment in segments:
            try:
                channel.cd(segment)
            except RemoteOperationError:
                logger.debug("Creating remote folder %s", segment)
                channel.mkdir(segment)
                channel.cd(segment)

    def chdir(self, path: str) -> None:
        self.channel.cd(path)

    def pwd(self) -> str:
        return self.channel.pwd()

    def folder_exists(self, path: str) -> bool:
        """True if path exists and is a directory, False on any remote failure"""
        try:
            return self.get_file_type(path) is FileType.FOLDER
        except RemoteOperationError:
            return False

    def get_file_type(self, path: str) -> FileType:
        """
        Probe the type of a remote path.

        Returns:
            FOLDER, FILE, or IMAGINARY if the path does not exist

        Raises:
            RemoteOperationError: If the server reports no permissions
        """
        try:
            attrs = self.channel.stat(path)
        except NoSuchFileError:
            return FileType.IMAGINARY

        if attrs.st_mode is None:
            raise RemoteOperationError(f"Unknown permissions for {path}")
        if stat.S_ISDIR(attrs.st_mode):
            return FileType.FOLDER
        return FileType.FILE

    # --------------------
    # File operations
    # --------------------
    def dir(self) -> List[str]:
        """Names of the non-directory entries of the current directory"""
        names = []
        for entry in self.channel.ls("."):
            if entry.filename in (".", ".."):
                continue
            if entry.st_mode is not None and stat.S_ISDIR(entry.st_mode):
                continue
            names.append(entry.filename)
        return names

    def get(self, local_path: str, remote_file: str) -> None:
        logger.debug("Downloading %s to %s", remote_file, local_path)
        self.channel.get(remote_file, local_path)

    def put(self, local_path: str, remote_file: str) -> None:
        logger.debug("Uploading %s to %s", local_path, remote_file)
        self.channel.put(local_path, remote_file)

    def delete(self, remote_file: str) -> None:
        self.channel.rm(remote_file)

    def rename_file(self, source: str, destination: str) -> None:
        self.channel.rename(source, destination)

    # --------------------
    # Context manager
    # --------------------
    def __enter__(self) -> SFTPClient:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.disconnect()
