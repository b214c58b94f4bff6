"""
Paramiko-backed session and SFTP channel
"""
from __future__ import annotations
import socket
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Dict, Iterator, List, Optional

import paramiko

from ..core.constants import (
    AUTH_GSSAPI_WITH_MIC,
    AUTH_KEYBOARD_INTERACTIVE,
    AUTH_PASSWORD,
    AUTH_PUBLICKEY,
    BASE_AUTH_METHODS,
    COMPRESSION_C2S,
    COMPRESSION_S2C,
    PREFERRED_AUTHENTICATIONS,
    SFTP_CHANNEL,
)
from ..core.exceptions import (
    AuthenticationError,
    ConfigError,
    ConnectionError,
    NoSuchFileError,
    RemoteOperationError,
)
from ..core.interfaces import Session, SessionFactory, SftpChannel
from ..core.logging import get_logger

logger = get_logger(__name__)

_KEY_CLASSES = (paramiko.Ed25519Key, paramiko.RSAKey, paramiko.ECDSAKey)


def load_private_key(key_path: str, passphrase: Optional[str] = None) -> paramiko.PKey:
    """
    Load a private key, probing Ed25519, RSA and ECDSA in turn.

    Raises:
        ConfigError: If the file is missing or no key type can read it
    """
    p = Path(key_path).expanduser()
    if not p.exists():
        raise ConfigError(f"Private key not found: {p}")
    if not p.is_file():
        raise ConfigError(f"Private key is not a file: {p}")

    last_error: Optional[Exception] = None
    for key_class in _KEY_CLASSES:
        try:
            return key_class.from_private_key_file(str(p), password=passphrase)
        except paramiko.SSHException as e:
            last_error = e
        except OSError as e:
            raise ConfigError(f"Cannot read private key at {p}: {e}") from e
    raise ConfigError(f"Failed to load private key at {p}") from last_error


@contextmanager
def _remote_errors(operation: str, path: str) -> Iterator[None]:
    try:
        yield
    except FileNotFoundError as e:
        raise NoSuchFileError(f"{operation} {path}: {e}") from e
    except (IOError, paramiko.SFTPError, paramiko.SSHException) as e:
        raise RemoteOperationError(f"{operation} {path}: {e}") from e


class ParamikoSftpChannel(SftpChannel):
    """SftpChannel over paramiko.SFTPClient"""

    def __init__(self, sftp: paramiko.SFTPClient):
        self._sftp = sftp

    def cd(self, path: str) -> None:
        with _remote_errors("cd", path):
            self._sftp.chdir(path)

    def mkdir(self, path: str) -> None:
        with _remote_errors("mkdir", path):
            self._sftp.mkdir(path)

    def pwd(self) -> str:
        cwd = self._sftp.getcwd()
        if cwd is not None:
            return cwd
        with _remote_errors("pwd", "."):
            return self._sftp.normalize(".")

    def ls(self, path: str = ".") -> List[paramiko.SFTPAttributes]:
        with _remote_errors("ls", path):
            return self._sftp.listdir_attr(path)

    def stat(self, path: str) -> paramiko.SFTPAttributes:
        with _remote_errors("stat", path):
            return self._sftp.stat(path)

    def get(self, remote_path: str, local_path: str) -> None:
        with _remote_errors("get", remote_path):
            self._sftp.get(remote_path, local_path)

    def put(self, local_path: str, remote_path: str) -> None:
        with _remote_errors("put", remote_path):
            self._sftp.put(local_path, remote_path)

    def rm(self, path: str) -> None:
        with _remote_errors("rm", path):
            self._sftp.remove(path)

    def rename(self, source: str, destination: str) -> None:
        with _remote_errors("rename", source):
            self._sftp.rename(source, destination)

    def close(self) -> None:
        self._sftp.close()


class ParamikoSession(Session):
    """
    Session over a raw paramiko.Transport.

    Config values are kept until connect(): PreferredAuthentications
    drives the order auth methods are attempted in, and the
    compression keys switch transport compression on.
    """

    def __init__(self, user: str, host: str, port: int):
        self.user = user
        self.host = host
        self.port = port
        self._config: Dict[str, str] = {}
        self._password: Optional[str] = None
        self._pkey: Optional[paramiko.PKey] = None
        self._transport: Optional[paramiko.Transport] = None

    def set_config(self, key: str, value: str) -> None:
        self._config[key] = value

    def get_config(self, key: str) -> Optional[str]:
        return self._config.get(key)

    def set_password(self, password: Optional[str]) -> None:
        self._password = password

    def add_identity(self, key_path: str, passphrase: Optional[str] = None) -> None:
        self._pkey = load_private_key(key_path, passphrase)

    def preferred_authentications(self) -> List[str]:
        value = self._config.get(PREFERRED_AUTHENTICATIONS)
        if not value:
            return list(BASE_AUTH_METHODS)
        return [m.strip() for m in value.split(",") if m.strip()]

    def _compression_requested(self) -> bool:
        return any(
            "zlib" in self._config.get(key, "")
            for key in (COMPRESSION_S2C, COMPRESSION_C2S)
        )

    # --------------------
    # Connection management
    # --------------------
    def connect(self, timeout: Optional[float] = None) -> None:
        # a reconnect replaces the previous transport
        self.disconnect()
        try:
            sock = socket.create_connection((self.host, self.port), timeout=timeout)
        except OSError as e:
            raise ConnectionError(f"Failed to connect to {self.host}:{self.port}: {e}") from e

        transport = paramiko.Transport(sock)
        transport.use_compression(self._compression_requested())
        try:
            transport.start_client(timeout=timeout)
            self._authenticate(transport)
        except (paramiko.SSHException, OSError) as e:
            transport.close()
            raise ConnectionError(f"SSH negotiation with {self.host}:{self.port} failed: {e}") from e
        except AuthenticationError:
            transport.close()
            raise

        self._transport = transport
        logger.debug("SSH session established with %s:%d", self.host, self.port)

    def _auth_handlers(self) -> Dict[str, Callable[[paramiko.Transport], None]]:
        return {
            AUTH_PUBLICKEY: self._auth_publickey,
            AUTH_KEYBOARD_INTERACTIVE: self._auth_keyboard_interactive,
            AUTH_PASSWORD: self._auth_password,
            AUTH_GSSAPI_WITH_MIC: self._auth_gssapi,
        }

    def _has_credentials(self, method: str) -> bool:
        if method == AUTH_PUBLICKEY:
            return self._pkey is not None
        if method in (AUTH_KEYBOARD_INTERACTIVE, AUTH_PASSWORD):
            return self._password is not None
        return True

    def _authenticate(self, transport: paramiko.Transport) -> None:
        """Try preferred methods in order until one authenticates"""
        handlers = self._auth_handlers()
        tried = []
        last_error: Optional[Exception] = None

        for method in self.preferred_authentications():
            handler = handlers.get(method)
            if handler is None:
                logger.warning("Unsupported authentication method %s, skipping", method)
                continue
            if not self._has_credentials(method):
                logger.debug("No credentials for %s, skipping", method)
                continue

            tried.append(method)
            try:
                handler(transport)
            except paramiko.AuthenticationException as e:
                logger.debug("%s authentication failed: %s", method, e)
                last_error = e
                continue

            if transport.is_authenticated():
                logger.debug("Authenticated %s with %s", self.user, method)
                return

        raise AuthenticationError(
            f"Authentication failed for {self.user}@{self.host} (tried: {', '.join(tried) or 'none'})"
        ) from last_error

    def _auth_publickey(self, transport: paramiko.Transport) -> None:
        transport.auth_publickey(self.user, self._pkey)

    def _auth_keyboard_interactive(self, transport: paramiko.Transport) -> None:
        password = self._password

        def handler(title, instructions, prompts):
            return [password for _ in prompts]

        transport.auth_interactive(self.user, handler)

    def _auth_password(self, transport: paramiko.Transport) -> None:
        transport.auth_password(self.user, self._password)

    def _auth_gssapi(self, transport: paramiko.Transport) -> None:
        auth_gssapi_with_mic = getattr(transport, "auth_gssapi_with_mic", None)
        if auth_gssapi_with_mic is None:
            raise paramiko.AuthenticationException(
                "GSS-API authentication is not supported by this paramiko release"
            )
        try:
            auth_gssapi_with_mic(self.user, self.host, gss_deleg_creds=True)
        except ImportError as e:
            raise paramiko.AuthenticationException(f"GSS-API support is not installed: {e}") from e

    def open_channel(self, kind: str) -> SftpChannel:
        if kind != SFTP_CHANNEL:
            raise ValueError(f"Unsupported channel type: {kind}")
        if not self.is_connected:
            raise ConnectionError("Session is not connected")

        try:
            sftp = paramiko.SFTPClient.from_transport(self._transport)
        except paramiko.SSHException as e:
            raise ConnectionError(f"Failed to open SFTP channel: {e}") from e
        if sftp is None:
            raise ConnectionError("Failed to open SFTP channel")
        return ParamikoSftpChannel(sftp)

    def disconnect(self) -> None:
        if self._transport is not None:
            self._transport.close()
            self._transport = None

    @property
    def is_connected(self) -> bool:
        return (
            self._transport is not None
            and self._transport.is_active()
            and self._transport.is_authenticated()
        )


class ParamikoSessionFactory(SessionFactory):
    """Creates ParamikoSession instances"""

    def create(self, user: str, host: str, port: int) -> Session:
        return ParamikoSession(user, host, port)
