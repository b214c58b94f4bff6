"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest

from remote_sftp.adapters.config.loader import env_alias
from remote_sftp.core.client import SFTPClient
from remote_sftp.core.constants import ENV_PARAM_USERAUTH_GSSAPI
from remote_sftp.core.interfaces import Session, SessionFactory, SftpChannel


@pytest.fixture(autouse=True)
def clean_gssapi_env(monkeypatch):
    """No test sees a GSSAPI setting leaking in from the environment."""
    monkeypatch.delenv(ENV_PARAM_USERAUTH_GSSAPI, raising=False)
    monkeypatch.delenv(env_alias(ENV_PARAM_USERAUTH_GSSAPI), raising=False)


@pytest.fixture
def channel():
    return MagicMock(spec=SftpChannel)


@pytest.fixture
def session(channel):
    session = MagicMock(spec=Session)
    session.is_connected = False
    session.open_channel.return_value = channel
    return session


@pytest.fixture
def session_factory(session):
    factory = MagicMock(spec=SessionFactory)
    factory.create.return_value = session
    return factory


@pytest.fixture
def make_client(session_factory):
    def _make(**kwargs):
        kwargs.setdefault("settings", {})
        return SFTPClient("serverIp", 1, "userName", session_factory=session_factory, **kwargs)
    return _make


@pytest.fixture
def logged_in_client(make_client):
    client = make_client(settings={ENV_PARAM_USERAUTH_GSSAPI: "yes"})
    client.login("password")
    return client
